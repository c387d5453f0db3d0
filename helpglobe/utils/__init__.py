"""HelpGlobe utilities package.

All utilities are stateless pure functions with no external calls or side effects.
"""

from helpglobe.utils.date_utils import epoch_ms_to_iso, format_iso, normalize_timestamp, utc_now
from helpglobe.utils.normalize import (
    identity_key,
    make_event_id,
    round_coordinate,
    sanitize_text,
    truncate_summary,
)
from helpglobe.utils.validation import (
    validate_coordinates,
    validate_date,
    validate_magnitude,
    validate_url,
)

__all__ = [
    "epoch_ms_to_iso",
    "format_iso",
    "normalize_timestamp",
    "utc_now",
    "identity_key",
    "make_event_id",
    "round_coordinate",
    "sanitize_text",
    "truncate_summary",
    "validate_coordinates",
    "validate_date",
    "validate_magnitude",
    "validate_url",
]
