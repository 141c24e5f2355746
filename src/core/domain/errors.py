"""Domain errors.

Every failure shares one generic, user-presentable message: a screen either
shows data or shows that loading failed. The detail stays in `str(exc)` for
logs.
"""

from __future__ import annotations

GENERIC_FAILURE_MESSAGE = "Failed to load data."


class ShapeError(Exception):
    """Base class for everything that can go wrong between request and record."""

    user_message = GENERIC_FAILURE_MESSAGE


class ResponseStatusError(ShapeError):
    """The response did not pass the success check (non-2xx status)."""

    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"HTTP {status_code} from {url}")
        self.status_code = status_code
        self.url = url


class PayloadDecodeError(ShapeError):
    """The body is not valid JSON."""


class PayloadMappingError(ShapeError):
    """The decoded tree does not fit the fixed model of the endpoint."""


class UnknownEndpointError(ShapeError, LookupError):
    """The requested name is not in the endpoint catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown endpoint: {name!r}")
        self.name = name
