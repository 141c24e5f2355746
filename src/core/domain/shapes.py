"""Payload shapes covered by the examples.

Keeping the enum in the domain layer lets the catalog, the decoder and the
CLI share one vocabulary without importing each other.
"""

from __future__ import annotations

from enum import Enum


class PayloadShape(str, Enum):
    """The five JSON response shapes a screen can receive."""

    OBJECT = "object"
    OBJECT_LIST = "object_list"
    WRAPPED_LIST = "wrapped_list"
    PRIMITIVE_LIST = "primitive_list"
    NESTED_OBJECT = "nested_object"

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return _LABELS[self]


_LABELS = {
    PayloadShape.OBJECT: "Object",
    PayloadShape.OBJECT_LIST: "Array of objects",
    PayloadShape.WRAPPED_LIST: "Object wrapping an array",
    PayloadShape.PRIMITIVE_LIST: "Array of primitives",
    PayloadShape.NESTED_OBJECT: "Object wrapping an object",
}
