"""Bundled sample payloads.

This module lives in `core/` because it centralizes *what* example data
exists without coupling the CLI or the adapters to file paths.

Samples ship inside the package (`core/samples/`). A directory set in
JSON_SHAPES_SAMPLES_DIR takes precedence, so the same screens can be pointed
at locally captured responses.
"""

from __future__ import annotations

import os
from pathlib import Path

from core.catalog import list_endpoints

_BUNDLED_DIR = Path(__file__).resolve().parent / "samples"


def samples_dir() -> Path:
    """Directory samples are read from.

    Rules:
    - If JSON_SHAPES_SAMPLES_DIR is set, use it as-is.
    - Otherwise use the directory bundled with the package.
    """

    override = (os.environ.get("JSON_SHAPES_SAMPLES_DIR") or "").strip()
    if override:
        return Path(override)
    return _BUNDLED_DIR


def get_sample_path(filename: str) -> Path | None:
    path = samples_dir() / filename
    if path.exists() and path.is_file():
        return path
    return None


def load_sample_text(filename: str) -> str:
    """Raw text of a sample payload (not decoded)."""

    path = get_sample_path(filename)
    if path is None:
        raise FileNotFoundError(f"Sample payload not found: {samples_dir() / filename}")
    return path.read_text(encoding="utf-8")


def sample_routes() -> dict[str, str]:
    """Map each endpoint path to its sample filename."""

    return {spec.path: spec.sample for spec in list_endpoints()}
