"""Registry of the example endpoints.

One entry per payload shape. The target type is the fixed schema the
endpoint's body is mapped onto; the sample file is the bundled payload served
in offline mode.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from core.domain.errors import UnknownEndpointError
from core.domain.models import Post, ServerMessage, TagList, UserPage, UserProfile
from core.domain.shapes import PayloadShape


@dataclass(frozen=True)
class EndpointSpec:
    name: str
    path: str
    shape: PayloadShape
    target: Any
    sample: str
    description: str = ""


_ENDPOINTS: tuple[EndpointSpec, ...] = (
    EndpointSpec(
        name="message",
        path="/message",
        shape=PayloadShape.OBJECT,
        target=ServerMessage,
        sample="message.json",
        description="A single message/time pair.",
    ),
    EndpointSpec(
        name="posts",
        path="/posts",
        shape=PayloadShape.OBJECT_LIST,
        target=list[Post],
        sample="posts.json",
        description="A list of identified posts with title and body.",
    ),
    EndpointSpec(
        name="users",
        path="/users",
        shape=PayloadShape.WRAPPED_LIST,
        target=UserPage,
        sample="users.json",
        description="A paginated user list wrapped with status and count.",
    ),
    EndpointSpec(
        name="tags",
        path="/tags",
        shape=PayloadShape.PRIMITIVE_LIST,
        target=TagList,
        sample="tags.json",
        description="A plain array of strings.",
    ),
    EndpointSpec(
        name="profile",
        path="/profile",
        shape=PayloadShape.NESTED_OBJECT,
        target=UserProfile,
        sample="profile.json",
        description="A profile with nested address and company objects.",
    ),
)

_BY_NAME = {spec.name: spec for spec in _ENDPOINTS}


def list_endpoints() -> list[EndpointSpec]:
    return list(_ENDPOINTS)


def get_endpoint(name: str) -> EndpointSpec:
    """Look up an endpoint by name (case-insensitive)."""

    try:
        return _BY_NAME[name.strip().lower()]
    except KeyError:
        raise UnknownEndpointError(name) from None
