"""HelpGlobe — crisis event aggregation for a 3D globe.

Public API surface:
    - AggregatorConfig: Runtime configuration
    - aggregate_events: One aggregation cycle over all configured feeds
    - Event: The unified event schema
"""

__version__ = "1.0.0"
__author__ = "HelpGlobe Contributors"

from config.settings import AggregatorConfig
from helpglobe.aggregator import aggregate_events, filter_events
from helpglobe.models.events import Event

__all__ = [
    "__version__",
    "AggregatorConfig",
    "Event",
    "aggregate_events",
    "filter_events",
]
