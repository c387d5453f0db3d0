"""HelpGlobe analysis package.

Pure event logic: classification, normalization into Events, and deduplication.
No I/O lives here.
"""

from helpglobe.analysis.classifier import classify_category, classify_severity
from helpglobe.analysis.dedup import deduplicate, should_replace, sort_newest_first
from helpglobe.analysis.event_builder import build_event

__all__ = [
    "classify_category",
    "classify_severity",
    "build_event",
    "deduplicate",
    "should_replace",
    "sort_newest_first",
]
