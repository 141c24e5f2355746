"""Tests for decode_payload, detect_shape, project, unwrap_list and parse_response."""

from __future__ import annotations

import httpx
import pytest

from core.decoding import decode_payload, detect_shape, parse_response, project, unwrap_list
from core.domain.errors import (
    GENERIC_FAILURE_MESSAGE,
    PayloadDecodeError,
    PayloadMappingError,
    ResponseStatusError,
)
from core.domain.models import Post, ServerMessage, TagList, UserPage, UserProfile
from core.domain.shapes import PayloadShape


def _response(status: int, content: bytes, url: str = "https://api.test/x") -> httpx.Response:
    return httpx.Response(status, content=content, request=httpx.Request("GET", url))


def test_decode_payload_returns_generic_tree() -> None:
    tree = decode_payload('{"a": [1, {"b": null}]}')

    assert tree == {"a": [1, {"b": None}]}


def test_decode_payload_accepts_bytes() -> None:
    assert decode_payload(b'["x"]') == ["x"]


@pytest.mark.parametrize("text", ["", "   ", "{", "not json", b"\xff\xfe"])
def test_decode_payload_rejects_invalid_text(text: str | bytes) -> None:
    with pytest.raises(PayloadDecodeError):
        decode_payload(text)


@pytest.mark.parametrize(
    ("name", "shape"),
    [
        ("message", PayloadShape.OBJECT),
        ("posts", PayloadShape.OBJECT_LIST),
        ("users", PayloadShape.WRAPPED_LIST),
        ("tags", PayloadShape.PRIMITIVE_LIST),
        ("profile", PayloadShape.NESTED_OBJECT),
    ],
)
def test_detect_shape_of_each_sample(sample_tree, name: str, shape: PayloadShape) -> None:
    assert detect_shape(sample_tree(name)) is shape


def test_detect_shape_empty_list_is_primitive_list() -> None:
    assert detect_shape([]) is PayloadShape.PRIMITIVE_LIST


def test_detect_shape_mixed_list_is_primitive_list() -> None:
    assert detect_shape([{"a": 1}, 2]) is PayloadShape.PRIMITIVE_LIST


def test_detect_shape_rejects_scalar() -> None:
    with pytest.raises(PayloadMappingError):
        detect_shape(42)


def test_wrapped_list_users_field_yields_two_elements(sample_tree) -> None:
    users = unwrap_list(sample_tree("users"), "users")

    assert len(users) == 2
    assert users[0]["name"] == "Ada Lovelace"


def test_unwrap_list_missing_field() -> None:
    with pytest.raises(PayloadMappingError, match="Missing field 'users'"):
        unwrap_list({"status": "success"}, "users")


def test_unwrap_list_field_not_array() -> None:
    with pytest.raises(PayloadMappingError, match="not an array"):
        unwrap_list({"users": {"id": 1}}, "users")


def test_unwrap_list_requires_object() -> None:
    with pytest.raises(PayloadMappingError):
        unwrap_list([1, 2], "users")


def test_project_object(sample_tree) -> None:
    msg = project(sample_tree("message"), ServerMessage)

    assert msg.message == "Hello from the server"


def test_project_list_of_objects_element_wise(sample_tree) -> None:
    posts = project(sample_tree("posts"), list[Post])

    assert [p.id for p in posts] == [1, 2, 3]
    assert all(isinstance(p, Post) for p in posts)


def test_project_wrapped_list(sample_tree) -> None:
    page = project(sample_tree("users"), UserPage)

    assert page.is_success
    assert page.count == 2
    assert [u.email for u in page.users] == ["ada@example.com", "alan@example.com"]


def test_project_primitive_list(sample_tree) -> None:
    tags = project(sample_tree("tags"), TagList)

    assert "pydantic" in list(tags)


def test_project_nested_object(sample_tree) -> None:
    profile = project(sample_tree("profile"), UserProfile)

    assert profile.address.city == "Gwenborough"
    assert profile.address.geo is not None
    assert profile.company.catch_phrase.startswith("Multi-layered")
    assert profile.skills == ["COBOL", "compilers", "debugging"]


def test_project_wrong_shape_raises_mapping_error() -> None:
    with pytest.raises(PayloadMappingError, match="ServerMessage"):
        project([{"message": "x"}], ServerMessage)


def test_parse_response_success() -> None:
    response = _response(200, b'{"message": "m", "time": "2024-01-01T00:00:00Z"}')

    assert parse_response(response, ServerMessage).message == "m"


@pytest.mark.parametrize("status", [301, 404, 500, 503])
def test_parse_response_checks_status_before_decoding(status: int) -> None:
    response = _response(status, b"<html>not json</html>", url="https://api.test/message")

    with pytest.raises(ResponseStatusError) as exc_info:
        parse_response(response, ServerMessage)

    assert exc_info.value.status_code == status
    assert exc_info.value.url == "https://api.test/message"
    assert exc_info.value.user_message == GENERIC_FAILURE_MESSAGE


def test_parse_response_invalid_body() -> None:
    with pytest.raises(PayloadDecodeError):
        parse_response(_response(200, b"oops"), ServerMessage)


@pytest.mark.parametrize(
    "body",
    [
        b'{"status": "success", "count": 2, "page": 1}',
        b'{"status": "success", "count": 1, "users": {"id": 1, "name": "Ada", "email": "a@x"}}',
    ],
)
def test_parse_response_wrapped_list_without_users_array(body: bytes) -> None:
    with pytest.raises(PayloadMappingError):
        parse_response(_response(200, body, url="https://api.test/users"), UserPage)


@pytest.mark.parametrize(
    ("target", "body"),
    [
        (list[Post], b'[{"userId": 1, "id": 1, "title": "t"}]'),
        (
            UserProfile,
            b'{"id": 1, "name": "G", "email": "g@x", "address": {"street": "S", "city": "C"},'
            b' "company": {"name": "N", "catchPhrase": "P"}}',
        ),
        (
            UserProfile,
            b'{"id": 1, "name": "G", "email": "g@x", "address": {"street": "S", "city": "C", "zipcode": "Z"},'
            b' "company": {"name": "N"}}',
        ),
    ],
)
def test_parse_response_missing_required_key(target, body: bytes) -> None:
    with pytest.raises(PayloadMappingError):
        parse_response(_response(200, body), target)
