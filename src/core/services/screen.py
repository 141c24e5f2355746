"""Load-once screen state.

A screen issues a single request the first time it is shown and keeps the
result. Later renders read the cached state; `refresh` is the only way to
hit the endpoint again.

Failures never escape `load()`: any `ShapeError` or transport error becomes a
FAILED state carrying the generic user message. Anything else is a bug and
propagates.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx

from core.catalog import EndpointSpec
from core.domain.errors import GENERIC_FAILURE_MESSAGE, ShapeError
from core.interfaces.endpoint import Endpoint

logger = logging.getLogger(__name__)


class ViewStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class ViewState:
    """What a screen shows: data, an error message, or a loading indicator."""

    endpoint: EndpointSpec
    status: ViewStatus
    data: Any = None
    error: str | None = None

    @property
    def has_data(self) -> bool:
        return self.status is ViewStatus.READY


class ScreenLoader:
    def __init__(self, endpoint: Endpoint) -> None:
        self._endpoint = endpoint
        self._state = ViewState(endpoint=endpoint.spec, status=ViewStatus.LOADING)
        self._loaded = False
        self._lock = asyncio.Lock()

    @property
    def state(self) -> ViewState:
        return self._state

    async def load(self) -> ViewState:
        """Fetch once and cache; concurrent callers share the same fetch."""

        async with self._lock:
            if self._loaded:
                return self._state
            self._state = await self._fetch_state()
            self._loaded = True
            return self._state

    async def refresh(self) -> ViewState:
        async with self._lock:
            self._loaded = False
            self._state = ViewState(endpoint=self._endpoint.spec, status=ViewStatus.LOADING)
        return await self.load()

    async def _fetch_state(self) -> ViewState:
        spec = self._endpoint.spec
        try:
            data = await self._endpoint.fetch()
        except (ShapeError, httpx.HTTPError) as exc:
            logger.warning("Screen %s failed to load: %s", spec.name, exc)
            return ViewState(endpoint=spec, status=ViewStatus.FAILED, error=GENERIC_FAILURE_MESSAGE)
        return ViewState(endpoint=spec, status=ViewStatus.READY, data=data)
