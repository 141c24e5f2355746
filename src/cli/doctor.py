"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.catalog import list_endpoints
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.resources_loader import get_sample_path, samples_dir

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get("/")
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or exc.__class__.__name__


def _check_samples() -> tuple[bool, str]:
    missing = [spec.sample for spec in list_endpoints() if get_sample_path(spec.sample) is None]
    if missing:
        return False, f"missing in {samples_dir()}: {', '.join(missing)}"
    return True, str(samples_dir())


@app.command()
def run(
    skip_network: bool = typer.Option(False, "--skip-network", help="Do not contact base_url."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="json-shapes doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("Mode", "OK", "offline (bundled samples)" if settings.offline else "online")
    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))

    ok_samples, detail_samples = _check_samples()
    table.add_row("Sample payloads", "OK" if ok_samples else "FAIL", detail_samples)

    # Connectivity (best-effort)
    if skip_network:
        table.add_row("HTTP connectivity", "SKIPPED", "--skip-network")
    elif settings.offline:
        table.add_row("HTTP connectivity", "SKIPPED", "offline mode (JSON_SHAPES_OFFLINE=true)")
    else:
        ok_http, detail_http = asyncio.run(_check_http(settings))
        table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_samples:
        _console.print("\n[yellow]Note:[/yellow] unset JSON_SHAPES_SAMPLES_DIR to use the bundled samples.")


@app.command(name="set-base-url")
def set_base_url(
    url: str = typer.Argument(..., help="Base URL serving /message, /posts, /users, /tags and /profile."),
) -> None:
    """Persist the base URL in the user config .env."""

    url = url.strip().rstrip("/")
    if not url.startswith(("http://", "https://")):
        raise typer.BadParameter("URL must start with http:// or https://")

    env_path = write_user_env_vars({"JSON_SHAPES_BASE_URL": url})
    _console.print(f"[green]Saved base URL to:[/green] {env_path}")
