"""Tests for JSON and HTML export."""

from __future__ import annotations

import json
from pathlib import Path

from adapters.json_exporter import export_records_json, records_to_jsonable
from adapters.report_exporter import export_view_html, render_view_html
from core.catalog import get_endpoint
from core.decoding import project
from core.domain.errors import GENERIC_FAILURE_MESSAGE
from core.domain.models import Post, TagList, UserProfile
from core.services.screen import ViewState, ViewStatus


def test_records_to_jsonable_uses_wire_names() -> None:
    data = records_to_jsonable([Post(id=1, user_id=2, title="t", body="b")])

    assert data == [{"id": 1, "userId": 2, "title": "t", "body": "b"}]


def test_records_to_jsonable_root_model() -> None:
    assert records_to_jsonable(TagList(["x", "y"])) == ["x", "y"]


def test_export_reproduces_the_sample_tree(sample_tree, tmp_path: Path) -> None:
    tree = sample_tree("profile")
    profile = project(tree, UserProfile)

    out = export_records_json(records=profile, output_path=tmp_path / "out" / "profile.json")

    exported = json.loads(out.read_text(encoding="utf-8"))
    assert exported["company"]["catchPhrase"] == tree["company"]["catchPhrase"]
    assert exported["address"]["geo"]["lat"] == float(tree["address"]["geo"]["lat"])
    assert out.read_text(encoding="utf-8").endswith("\n")


def test_render_view_html_with_data(sample_tree) -> None:
    spec = get_endpoint("users")
    view = ViewState(endpoint=spec, status=ViewStatus.READY, data=project(sample_tree("users"), spec.target))

    html = render_view_html(view=view)

    assert "Ada Lovelace" in html
    assert "alan@example.com" in html
    assert "Object wrapping an array" in html


def test_render_view_html_escapes_values() -> None:
    spec = get_endpoint("tags")
    view = ViewState(endpoint=spec, status=ViewStatus.READY, data=TagList(["<script>"]))

    html = render_view_html(view=view)

    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_export_view_html_failed_state(tmp_path: Path) -> None:
    view = ViewState(endpoint=get_endpoint("message"), status=ViewStatus.FAILED, error=GENERIC_FAILURE_MESSAGE)

    out = export_view_html(view=view, output_path=tmp_path / "message.html")

    html = out.read_text(encoding="utf-8")
    assert GENERIC_FAILURE_MESSAGE in html
    assert 'class="error"' in html
