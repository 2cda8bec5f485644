"""JSON and CSV exports of the records currently shown in a view."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable

import pandas as pd

from .pipeline import ViewDefinition
from .reports import to_json

logger = logging.getLogger(__name__)


def _as_dict(record: Any) -> dict[str, Any]:
    if hasattr(record, "to_dict"):
        return record.to_dict()
    return dict(record)


def export_filename(view: ViewDefinition, extension: str = "json") -> str:
    return f"{view.export_name}_data.{extension}"


def export_records(view: ViewDefinition, records: Iterable[Any]) -> tuple[str, str]:
    """Return ``(filename, json_text)`` for the given records."""

    rows = [_as_dict(record) for record in records]
    logger.debug("Exporting %s %s records as JSON.", len(rows), view.name)
    return export_filename(view), to_json(rows)


def _cell(value: Any) -> Any:
    if isinstance(value, list):
        if any(isinstance(item, dict) for item in value):
            return f"{len(value)} items"
        return ", ".join(str(item) for item in value)
    if isinstance(value, dict):
        return ", ".join(f"{key}: {item}" for key, item in value.items())
    return value


def records_frame(records: Iterable[Any]) -> pd.DataFrame:
    """Flatten records into a table; list fields become comma-joined text."""

    rows = [{key: _cell(value) for key, value in _as_dict(record).items()} for record in records]
    return pd.DataFrame(rows)


def export_csv(view: ViewDefinition, records: Iterable[Any]) -> tuple[str, bytes]:
    frame = records_frame(records)
    return export_filename(view, "csv"), frame.to_csv(index=False).encode("utf-8")


def write_export(directory: str | Path, filename: str, content: str | bytes) -> Path:
    target_dir = Path(directory)
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / filename
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    logger.info("Wrote export %s.", path)
    return path
