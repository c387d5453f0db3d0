"""HelpGlobe — All default threshold values and configuration constants.

All tuneable values live here. Never hard-code magic numbers in source files.
Import constants from this module; override via AggregatorConfig at runtime.
"""

# ── HTTP ───────────────────────────────────────────────────────────────────────
# Independent timeout applied to every outbound feed request (seconds)
REQUEST_TIMEOUT: float = 10.0

# Upper bound accepted for REQUEST_TIMEOUT overrides (seconds)
MAX_REQUEST_TIMEOUT: float = 60.0

# User-Agent header sent to every upstream feed
USER_AGENT: str = "HelpGlobe/1.0"

# ── USGS seismic feed ──────────────────────────────────────────────────────────
USGS_FEED_URL: str = "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary/all_day.geojson"

# Fallback event page when a feature carries no url property
USGS_EVENT_PAGE_URL: str = "https://earthquake.usgs.gov/earthquakes/eventpage/{ids}"

# Features below this magnitude are dropped
USGS_MIN_MAGNITUDE: float = 2.5

# Summary tier boundaries
USGS_MAJOR_MAGNITUDE: float = 6.0
USGS_MODERATE_MAGNITUDE: float = 4.0

# ── ReliefWeb disaster feed ────────────────────────────────────────────────────
RELIEFWEB_API_URL: str = "https://api.reliefweb.int/v1/disasters"

# Number of disaster records requested per fetch
RELIEFWEB_LIMIT: int = 50

# Earliest disaster date requested (ISO YYYY-MM-DD)
RELIEFWEB_FROM_DATE: str = "2024-01-01"

RELIEFWEB_DISASTER_URL: str = "https://reliefweb.int/disaster/{id}"

# ── GDELT news feed ────────────────────────────────────────────────────────────
GDELT_API_URL: str = "https://api.gdeltproject.org/api/v2/doc/doc"

GDELT_QUERY: str = (
    "conflict OR protest OR health emergency OR disaster OR crisis OR "
    "emergency OR flood OR fire OR war OR violence"
)

# Maximum articles per ArtList call (GDELT hard limit: 250)
GDELT_MAX_RECORDS: int = 100

# ── Seed events ────────────────────────────────────────────────────────────────
# Curated reference events keep the globe populated when every feed is down
INCLUDE_SEED_EVENTS: bool = True

# ── Text sanitation ────────────────────────────────────────────────────────────
TEXT_MAX_LENGTH: int = 1000
SUMMARY_MAX_LENGTH: int = 200
ELLIPSIS: str = "..."

# Number of title characters kept in the event id slug
ID_SLUG_LENGTH: int = 10

# ── Magnitude range ────────────────────────────────────────────────────────────
MIN_MAGNITUDE: float = 0.0
MAX_MAGNITUDE: float = 10.0

# ── API server ─────────────────────────────────────────────────────────────────
API_HOST: str = "0.0.0.0"
API_PORT: int = 8000

# Origins allowed to call the API from a browser
CORS_ORIGINS: str = "*"

# ── Output paths ───────────────────────────────────────────────────────────────
# Root directory for CLI snapshot exports
OUTPUT_ROOT: str = "outputs/snapshots"

# ── Logging ────────────────────────────────────────────────────────────────────
DEFAULT_LOG_LEVEL: str = "INFO"
