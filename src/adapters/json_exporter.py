"""JSON export of loaded records.

Why JSON:
- Lets a loaded screen be saved and diffed, or fed back through `inspect`.
- Dumped by alias, so the file has the same wire shape the server sent.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel


def records_to_jsonable(records: Any) -> Any:
    """Turn a record, a list of records or a root model into plain JSON data."""

    if isinstance(records, BaseModel):
        return records.model_dump(mode="json", by_alias=True)
    if isinstance(records, (list, tuple)):
        return [records_to_jsonable(item) for item in records]
    return records


def export_records_json(*, records: Any, output_path: Path) -> Path:
    """Export records as UTF-8 JSON with a stable layout."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = records_to_jsonable(records)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
