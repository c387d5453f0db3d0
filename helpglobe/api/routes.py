"""HelpGlobe HTTP routes.

Routes:
  GET /api/events       — merged, deduplicated snapshot from every feed (newest first)
  GET /api/earthquakes  — USGS feed only
  GET /api/reliefweb    — ReliefWeb feed only
  GET /api/gdelt        — GDELT feed only
  GET /health           — liveness

Per-feed failures never surface here; they only shrink the array. The error
envelope {"error": ...} with status 500 is reserved for the pipeline itself
raising.
"""

import logging
from typing import AsyncIterator, List, Optional, Sequence

from fastapi import APIRouter, Depends, Header, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import AggregatorConfig
from helpglobe import __version__
from helpglobe.adapters import BaseAdapter, GDELTAdapter, ReliefWebAdapter, USGSAdapter, default_adapters
from helpglobe.aggregator import aggregate_events, filter_events
from helpglobe.clients.feed_client import FeedClient
from helpglobe.utils.logging_utils import get_request_logger

logger = logging.getLogger(__name__)

router = APIRouter()


# ── Dependencies (overridden in tests) ────────────────────────────────────────

def get_config() -> AggregatorConfig:
    """Fresh configuration per request; nothing is shared between cycles."""
    return AggregatorConfig()


def get_adapters(config: AggregatorConfig = Depends(get_config)) -> List[BaseAdapter]:
    return default_adapters(config)


async def get_feed_client(
    config: AggregatorConfig = Depends(get_config),
) -> AsyncIterator[FeedClient]:
    """One feed client per request, closed when the response is sent."""
    async with FeedClient(
        request_timeout=config.request_timeout,
        user_agent=config.user_agent,
    ) as client:
        yield client


# ── Helpers ──────────────────────────────────────────────────────────────────

async def _serve_events(
    adapters: Sequence[BaseAdapter],
    config: AggregatorConfig,
    client: FeedClient,
    request_id: Optional[str],
    error_message: str,
    types: Optional[List[str]] = None,
    severities: Optional[List[str]] = None,
    categories: Optional[List[str]] = None,
    sources: Optional[List[str]] = None,
) -> JSONResponse:
    log = get_request_logger("api", request_id)
    try:
        result = await aggregate_events(config, adapters, client=client, log=log)
        events = filter_events(result.events, types, severities, categories, sources)
        payload = [event.to_dict() for event in events]
    except Exception:
        log.exception("Aggregation pipeline failed")
        return JSONResponse({"error": error_message}, status_code=500)
    return JSONResponse(payload)


# ── Routes ───────────────────────────────────────────────────────────────────

@router.get("/api/events", tags=["events"], summary="Merged crisis events from all feeds")
async def get_events(
    types: Optional[List[str]] = Query(None, alias="type"),
    severities: Optional[List[str]] = Query(None, alias="severity"),
    categories: Optional[List[str]] = Query(None, alias="category"),
    sources: Optional[List[str]] = Query(None, alias="source"),
    x_request_id: Optional[str] = Header(None),
    config: AggregatorConfig = Depends(get_config),
    adapters: List[BaseAdapter] = Depends(get_adapters),
    client: FeedClient = Depends(get_feed_client),
) -> JSONResponse:
    """
    Return the current deduplicated event snapshot, newest first.

    Optional repeatable filters (type, severity, category, source) are applied
    after deduplication.
    """
    return await _serve_events(
        adapters, config, client, x_request_id, "Failed to fetch events data",
        types, severities, categories, sources,
    )


@router.get("/api/earthquakes", tags=["sources"], summary="USGS earthquakes")
async def get_earthquakes(
    x_request_id: Optional[str] = Header(None),
    config: AggregatorConfig = Depends(get_config),
    client: FeedClient = Depends(get_feed_client),
) -> JSONResponse:
    return await _serve_events(
        [USGSAdapter(config)], config, client, x_request_id, "Failed to fetch earthquake data",
    )


@router.get("/api/reliefweb", tags=["sources"], summary="ReliefWeb disasters")
async def get_reliefweb(
    x_request_id: Optional[str] = Header(None),
    config: AggregatorConfig = Depends(get_config),
    client: FeedClient = Depends(get_feed_client),
) -> JSONResponse:
    return await _serve_events(
        [ReliefWebAdapter(config)], config, client, x_request_id, "Failed to fetch ReliefWeb data",
    )


@router.get("/api/gdelt", tags=["sources"], summary="GDELT news events")
async def get_gdelt(
    x_request_id: Optional[str] = Header(None),
    config: AggregatorConfig = Depends(get_config),
    client: FeedClient = Depends(get_feed_client),
) -> JSONResponse:
    return await _serve_events(
        [GDELTAdapter(config)], config, client, x_request_id, "Failed to fetch GDELT data",
    )


class HealthResponse(BaseModel):
    status: str  # Always "ok" if the API process is alive
    version: str


@router.get("/health", response_model=HealthResponse, tags=["health"], summary="API health check")
async def health_check() -> HealthResponse:
    """Liveness only; feeds are not probed."""
    return HealthResponse(status="ok", version=__version__)
