"""CLI entry point (Typer).

Commands:
- `endpoints`: list the example endpoints.
- `show NAME`: load one screen and render it (samples by default, `--online` for HTTP).
- `inspect FILE`: decode a local JSON file, report its shape, optionally map it.
- `doctor ...`: environment diagnostics.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.text import Text

from adapters.endpoints import build_endpoint
from adapters.json_exporter import export_records_json
from adapters.report_exporter import export_view_html
from cli import doctor
from cli.logging_setup import configure_logging
from cli.ui_components import build_endpoints_table, print_banner, render_record, render_state
from core.catalog import get_endpoint, list_endpoints
from core.config import AppSettings
from core.decoding import decode_payload, detect_shape, project, unwrap_list
from core.domain.errors import ShapeError, UnknownEndpointError
from core.domain.shapes import PayloadShape
from core.services.screen import ScreenLoader, ViewStatus

logger = logging.getLogger(__name__)

app = typer.Typer(
    no_args_is_help=True,
    help="Decode common JSON response shapes into typed models and render them.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)


@app.command()
def endpoints() -> None:
    """List the example endpoints and the shape each one returns."""

    _console.print(build_endpoints_table(list_endpoints()))


@app.command()
def show(
    name: str = typer.Argument(..., help="Endpoint name (see `endpoints`)."),
    online: bool = typer.Option(False, "--online", help="Call base_url instead of the bundled samples."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override JSON_SHAPES_BASE_URL."),
    export_json: Path | None = typer.Option(None, "--export-json", help="Write the mapped records as JSON."),
    export_html: Path | None = typer.Option(None, "--export-html", help="Write the rendered screen as HTML."),
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Print the banner."),
) -> None:
    """Load one screen and render data or the error message."""

    settings = AppSettings()
    if base_url:
        settings = settings.model_copy(update={"base_url": base_url})

    try:
        endpoint = build_endpoint(name, settings, offline=not online and settings.offline)
    except UnknownEndpointError as exc:
        raise typer.BadParameter(str(exc), param_hint="NAME") from exc

    if banner:
        print_banner(_console)

    state = asyncio.run(ScreenLoader(endpoint).load())
    _console.print(render_state(state))

    if export_html:
        path = export_view_html(view=state, output_path=export_html)
        _console.print(f"[green]HTML written to:[/green] {path}")
    if export_json and state.has_data:
        path = export_records_json(records=state.data, output_path=export_json)
        _console.print(f"[green]JSON written to:[/green] {path}")

    if state.status is ViewStatus.FAILED:
        raise typer.Exit(code=1)


@app.command()
def inspect(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="JSON file to decode."),
    as_: str | None = typer.Option(None, "--as", help="Also map the tree onto this endpoint's model."),
) -> None:
    """Decode a local JSON file and report which shape it has."""

    try:
        tree = decode_payload(file.read_bytes())
        shape = detect_shape(tree)
    except ShapeError as exc:
        logger.debug("inspect failed: %s", exc)
        _console.print(Text(str(exc), style="red"))
        raise typer.Exit(code=1) from exc

    _console.print(f"[bold]Shape:[/bold] {shape.label()}")
    if shape is PayloadShape.WRAPPED_LIST and isinstance(tree, dict):
        for key, value in tree.items():
            if isinstance(value, list):
                _console.print(f"  field [cyan]{key}[/cyan]: {len(unwrap_list(tree, key))} element(s)")
    elif isinstance(tree, list):
        _console.print(f"  {len(tree)} element(s)")

    if as_ is None:
        return

    try:
        spec = get_endpoint(as_)
    except UnknownEndpointError as exc:
        raise typer.BadParameter(str(exc), param_hint="--as") from exc

    if spec.shape is not shape:
        _console.print(f"[yellow]Note:[/yellow] endpoint '{spec.name}' expects {spec.shape.label()}.")

    try:
        record = project(tree, spec.target)
    except ShapeError as exc:
        _console.print(Text(str(exc), style="red"))
        raise typer.Exit(code=1) from exc
    _console.print(render_record(record))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
