"""Concrete endpoints.

Each one implements `core.interfaces.endpoint.Endpoint`.
"""

from adapters.endpoints.http import HttpEndpoint, build_endpoint

__all__ = [
    "HttpEndpoint",
    "build_endpoint",
]
