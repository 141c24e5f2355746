"""Endpoint backed by one HTTP GET.

- Online: resolves `spec.path` against `AppSettings.base_url`.
- Offline: same request, served by the bundled-sample transport.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from adapters.http_client import build_async_client, build_sample_transport
from core.catalog import EndpointSpec, get_endpoint
from core.config import AppSettings
from core.decoding import parse_response
from core.interfaces.endpoint import Endpoint

logger = logging.getLogger(__name__)


class HttpEndpoint(Endpoint):
    """Fetches one example payload and maps it onto the endpoint's model."""

    def __init__(
        self,
        spec: EndpointSpec,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.spec = spec
        self._settings = settings or AppSettings()
        self._transport = transport

    async def fetch(self) -> Any:
        logger.debug("GET %s%s", self._settings.base_url, self.spec.path)
        async with build_async_client(self._settings, transport=self._transport) as client:
            response = await client.get(self.spec.path)

        result = parse_response(response, self.spec.target)
        logger.info("Loaded %s (%s)", self.spec.name, self.spec.shape.label())
        return result


def build_endpoint(name: str, settings: AppSettings | None = None, *, offline: bool | None = None) -> HttpEndpoint:
    """Build the endpoint `name`, serving samples when offline.

    `offline=None` defers to `settings.offline`.
    """

    settings = settings or AppSettings()
    spec = get_endpoint(name)
    if offline is None:
        offline = settings.offline
    transport = build_sample_transport() if offline else None
    return HttpEndpoint(spec, settings, transport=transport)
