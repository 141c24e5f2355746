"""Decode raw JSON text and map the decoded tree onto typed records.

The whole pipeline is two steps:

    decode_payload(text) -> decoded tree (dict / list / scalars)
    project(tree, target) -> typed record(s)

`project` delegates to a pydantic `TypeAdapter`, so the three projection
styles (direct fields, recursive nested objects, element-wise arrays) come
from the target type itself. There is no schema inference: every endpoint
has a fixed target.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Any, TypeVar, Union

import httpx
from pydantic import TypeAdapter, ValidationError

from core.domain.errors import PayloadDecodeError, PayloadMappingError, ResponseStatusError
from core.domain.shapes import PayloadShape

logger = logging.getLogger(__name__)

JsonTree = Union[dict[str, Any], list[Any], str, int, float, bool, None]

T = TypeVar("T")


def decode_payload(text: str | bytes) -> JsonTree:
    """Parse raw JSON into the generic decoded tree."""

    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise PayloadDecodeError(f"Body is not UTF-8: {exc}") from exc
    if not text.strip():
        raise PayloadDecodeError("Empty body")
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise PayloadDecodeError(f"Invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}") from exc


def detect_shape(tree: JsonTree) -> PayloadShape:
    """Classify a decoded tree into one of the five example shapes.

    Descriptive only (used by `inspect`); mapping never depends on it.
    """

    if isinstance(tree, list):
        if tree and all(isinstance(item, dict) for item in tree):
            return PayloadShape.OBJECT_LIST
        return PayloadShape.PRIMITIVE_LIST
    if isinstance(tree, dict):
        values = list(tree.values())
        if any(isinstance(v, list) and v and all(isinstance(i, dict) for i in v) for v in values):
            return PayloadShape.WRAPPED_LIST
        if any(isinstance(v, dict) for v in values):
            return PayloadShape.NESTED_OBJECT
        return PayloadShape.OBJECT
    raise PayloadMappingError(f"Top-level JSON value is a scalar ({type(tree).__name__}), not an object or array")


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def project(tree: JsonTree, target: type[T] | Any) -> T:
    """Map a decoded tree onto `target` (a model class or e.g. `list[Post]`)."""

    try:
        return _adapter(target).validate_python(tree)
    except ValidationError as exc:
        name = getattr(target, "__name__", None) or str(target)
        raise PayloadMappingError(f"Payload does not match {name}: {exc.error_count()} error(s)\n{exc}") from exc


def unwrap_list(tree: JsonTree, field: str) -> list[Any]:
    """Return the array nested under `field` of a wrapped list."""

    if not isinstance(tree, dict):
        raise PayloadMappingError(f"Expected an object wrapping '{field}', got {type(tree).__name__}")
    if field not in tree:
        raise PayloadMappingError(f"Missing field '{field}'")
    value = tree[field]
    if not isinstance(value, list):
        raise PayloadMappingError(f"Field '{field}' is {type(value).__name__}, not an array")
    return value


def parse_response(response: httpx.Response, target: type[T] | Any) -> T:
    """Check the success indicator, then decode and map the body."""

    if not response.is_success:
        raise ResponseStatusError(response.status_code, str(response.request.url))

    tree = decode_payload(response.content)
    logger.debug("Decoded %s payload from %s", type(tree).__name__, response.request.url)
    return project(tree, target)
