"""HelpGlobe API package — the request/response boundary consumed by the globe."""
