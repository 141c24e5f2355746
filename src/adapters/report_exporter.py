"""HTML export of a screen.

Why it lives in adapters:
- HTML is an infrastructure detail (Jinja2).
- The core only knows `ViewState` and the typed records.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from adapters.json_exporter import records_to_jsonable
from core.services.screen import ViewState

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )


def render_view_html(*, view: ViewState) -> str:
    """Render a self-contained HTML page for one screen."""

    generated_at = datetime.now(timezone.utc).isoformat(timespec="seconds")
    data = records_to_jsonable(view.data) if view.has_data else None

    template = _get_env().get_template("view.html")
    return template.render(
        view=view,
        spec=view.endpoint,
        shape_label=view.endpoint.shape.label(),
        data=data,
        generated_at=generated_at,
    )


def export_view_html(*, view: ViewState, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_view_html(view=view), encoding="utf-8")
    return output_path
