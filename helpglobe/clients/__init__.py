"""HelpGlobe clients package.

HTTP clients only — no business logic in this layer.
"""

from helpglobe.clients.feed_client import FeedClient

__all__ = [
    "FeedClient",
]
