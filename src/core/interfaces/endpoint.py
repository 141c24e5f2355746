"""Data source contract.

Why Protocol:
- Structural contract without inheritance: an HTTP endpoint, a stub in a test
  or anything else with `spec` and `fetch` can feed a screen.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from core.catalog import EndpointSpec


@runtime_checkable
class Endpoint(Protocol):
    """Minimal contract for something a screen can load.

    Design rules:
    - `fetch` is async because it typically does I/O (HTTP).
    - It returns the already-mapped typed record(s) for `spec.target`.
    """

    spec: EndpointSpec

    async def fetch(self) -> Any:
        """Fetch, check, decode and map the payload."""

        ...
