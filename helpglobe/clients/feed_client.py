"""Async HTTP client for the upstream crisis feeds.

Handles connection management, the per-request timeout, status checking, and
safe JSON parsing. No business logic lives here — this client returns raw
parsed payloads (or None) and the adapters make sense of them.

Known feed gotchas:
- GDELT occasionally returns HTTP header blocks in front of the JSON body.
  Always use _safe_parse_json() — never resp.json() directly.
- No retries: a failed or timed-out feed contributes nothing for this cycle.
"""

from __future__ import annotations

import ast
import asyncio
import json
import logging
from typing import Any, Dict, Optional

import httpx

from config.defaults import REQUEST_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)

# Known HTTP header line prefixes that GDELT occasionally returns in response bodies
_HTTP_HEADER_PREFIXES = (
    "HTTP/",
    "Date:",
    "Content-Type:",
    "Server:",
    "Transfer-Encoding:",
    "Connection:",
    "Cache-Control:",
    "Pragma:",
    "Expires:",
    "X-",
    "Vary:",
    "Set-Cookie:",
    "Access-Control:",
    "ETag:",
    "Last-Modified:",
)


def _safe_parse_json(text: str) -> Optional[Any]:
    """Defensive JSON parser that handles HTTP header bleed-through.

    Args:
        text: Raw response text.

    Returns:
        Parsed Python object, or None on failure.
    """
    if not text or not text.strip():
        return None

    # Detect HTTP header bleed-through and extract the JSON portion
    lines = text.split("\n")
    json_start = 0
    for i, line in enumerate(lines):
        stripped = line.strip()
        if stripped.startswith(_HTTP_HEADER_PREFIXES):
            json_start = i + 1
        elif stripped.startswith("{") or stripped.startswith("["):
            json_start = i
            break

    if json_start > 0:
        text = "\n".join(lines[json_start:]).strip()
        if not text:
            logger.warning("Feed response body contained only HTTP headers")
            return None

    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    # Fallback: ast.literal_eval for near-JSON Python literals
    try:
        return ast.literal_eval(text)
    except (ValueError, SyntaxError, MemoryError, RecursionError):
        pass

    logger.debug("Unparseable feed body: %.200s", text)
    logger.warning("Failed to parse feed response body (length=%d)", len(text))
    return None


class FeedClient:
    """Async client shared by all adapters within one aggregation cycle.

    Each request is bounded by its own timeout so one slow feed cannot hold
    up the others. Open one client per aggregation and close it afterwards;
    nothing is kept between cycles.

    Args:
        request_timeout: Seconds allowed for each request, end to end.
        user_agent: User-Agent header sent upstream.
        transport: Optional httpx transport (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        request_timeout: float = REQUEST_TIMEOUT,
        user_agent: str = USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.request_timeout = request_timeout
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(request_timeout),
            headers={"Accept": "application/json", "User-Agent": user_agent},
            follow_redirects=True,
            transport=transport,
        )

    async def get_json(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Optional[Any]:
        """GET a feed URL and return its parsed JSON payload.

        Args:
            url: Feed endpoint.
            params: Query parameters.

        Returns:
            Parsed payload, or None on timeout, transport error, non-2xx
            status, or an unparseable body.
        """
        try:
            resp = await asyncio.wait_for(
                self._client.get(url, params=params),
                timeout=self.request_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning("Feed request timed out after %.1fs: %s", self.request_timeout, url)
            return None
        except httpx.TimeoutException as exc:
            logger.warning("Feed request timed out: %s (%s)", url, exc)
            return None
        except httpx.HTTPError as exc:
            logger.warning("Feed request failed: %s (%s)", url, exc)
            return None

        if not resp.is_success:
            logger.warning("Feed returned HTTP %d for URL: %s", resp.status_code, url)
            return None

        parsed = _safe_parse_json(resp.text)
        if parsed is None:
            logger.warning("Feed returned unparseable body: %s", url)
        return parsed

    async def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()

    async def __aenter__(self) -> "FeedClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
