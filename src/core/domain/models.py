"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Each model is the fixed schema of one endpoint; validating the decoded tree
  against it *is* the mapping step.
- Aliases keep the wire names (camelCase) out of the Python attribute names.

Note:
- These models describe *what* a payload contains, not *how* it is fetched.
- All records are frozen: they are built once per load and only displayed.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime

from pydantic import BaseModel, Field, RootModel
from pydantic.config import ConfigDict

_RECORD_CONFIG = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class ServerMessage(BaseModel):
    """Object payload: a message and the time the server produced it."""

    model_config = _RECORD_CONFIG

    message: str = Field(
        ...,
        description="Text returned by the server.",
    )
    time: datetime = Field(
        ...,
        description="Server timestamp (ISO 8601).",
    )


class Post(BaseModel):
    """One element of the array-of-objects payload."""

    model_config = _RECORD_CONFIG

    id: int = Field(..., description="Post identifier.")
    user_id: int = Field(..., alias="userId", description="Author identifier.")
    title: str = Field(..., description="Post title.")
    body: str = Field(..., description="Post body.")


class UserSummary(BaseModel):
    model_config = _RECORD_CONFIG

    id: int
    name: str = Field(..., min_length=1)
    email: str


class UserPage(BaseModel):
    """Wrapped list: the users array plus the metadata around it.

    `count` is reported as sent by the server; it is not checked against
    `len(users)`.
    """

    model_config = _RECORD_CONFIG

    status: str = Field(..., description="Status flag reported by the server.")
    count: int = Field(..., ge=0, description="Number of users the server reports.")
    page: int = Field(default=1, ge=1, description="Page number of this slice.")
    users: list[UserSummary] = Field(
        ...,
        description="The payload of interest, nested under `users`.",
    )

    @property
    def is_success(self) -> bool:
        return self.status.lower() == "success"


class TagList(RootModel[list[str]]):
    """Array of primitives: a plain list of strings."""

    model_config = ConfigDict(frozen=True)

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> str:
        return self.root[index]


class GeoPoint(BaseModel):
    model_config = _RECORD_CONFIG

    # Numeric strings ("-37.3159") are coerced by lax mode.
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class Address(BaseModel):
    model_config = _RECORD_CONFIG

    street: str
    city: str
    zipcode: str
    geo: GeoPoint | None = None


class Company(BaseModel):
    model_config = _RECORD_CONFIG

    name: str
    catch_phrase: str = Field(..., alias="catchPhrase")


class UserProfile(BaseModel):
    """Object wrapping objects: a profile with nested address and company."""

    model_config = _RECORD_CONFIG

    id: int = Field(..., description="Profile identifier.")
    name: str = Field(..., min_length=1, description="Display name.")
    email: str = Field(..., description="Contact e-mail.")
    address: Address = Field(..., description="Nested address object.")
    company: Company = Field(..., description="Nested company object.")
    skills: list[str] = Field(
        default_factory=list,
        description="Array of primitives nested inside the object.",
    )
