"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and base URL for every endpoint.
- Makes testing easy: the transport can be swapped (respx, MockTransport).
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.resources_loader import get_sample_path, sample_routes

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with sane defaults.

    Why a builder:
    - Centralizes timeouts/headers so every endpoint behaves the same.
    - Offline mode only swaps the transport; the request path stays identical.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def build_sample_transport() -> httpx.MockTransport:
    """Transport that answers GETs with the bundled sample payloads.

    - Known endpoint path with a sample on disk => 200 with the file's bytes.
    - Anything else => 404, which the success check turns into a failure.
    """

    routes = sample_routes()

    def handler(request: httpx.Request) -> httpx.Response:
        filename = routes.get(request.url.path)
        path = get_sample_path(filename) if filename else None
        if request.method != "GET" or path is None:
            logger.debug("No sample for %s %s", request.method, request.url.path)
            return httpx.Response(404, json={"error": "not found"})
        return httpx.Response(
            200,
            content=path.read_bytes(),
            headers={"Content-Type": "application/json"},
        )

    return httpx.MockTransport(handler)
