"""Shared fixtures.

Every test runs with a fixed, isolated configuration so results do not depend
on the developer's `.env` or user config directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from core.catalog import EndpointSpec, get_endpoint
from core.config import AppSettings
from core.decoding import decode_payload
from core.resources_loader import load_sample_text

BASE_URL = "https://api.test"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("JSON_SHAPES_BASE_URL", BASE_URL)
    monkeypatch.setenv("JSON_SHAPES_OFFLINE", "true")
    monkeypatch.delenv("JSON_SHAPES_SAMPLES_DIR", raising=False)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(base_url=BASE_URL, offline=False, http_timeout_seconds=2.0)


@pytest.fixture
def sample_tree():
    """Decoded tree of a bundled sample, by endpoint name."""

    def _load(name: str) -> Any:
        return decode_payload(load_sample_text(get_endpoint(name).sample))

    return _load


class StubEndpoint:
    """In-memory endpoint: returns `result` or raises `error`, counting calls."""

    def __init__(self, spec: EndpointSpec, result: Any = None, error: Exception | None = None) -> None:
        self.spec = spec
        self.result = result
        self.error = error
        self.calls = 0

    async def fetch(self) -> Any:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def stub_endpoint():
    def _make(name: str = "message", **kwargs: Any) -> StubEndpoint:
        return StubEndpoint(get_endpoint(name), **kwargs)

    return _make
