"""Rendering of doc records for stdout, files and LLM prompts."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO

from .models import DocRecord

FORMATS = ("text", "json")


def format_records(records: Iterable[DocRecord], fmt: str = "text") -> str:
    """Render records as blank-line separated text blocks or JSON lines."""
    if fmt == "text":
        blocks = [record.render() for record in records]
        return "\n\n".join(blocks) + "\n" if blocks else ""
    if fmt == "json":
        lines = [json.dumps(record.to_dict(), ensure_ascii=False) for record in records]
        return "\n".join(lines) + "\n" if lines else ""
    raise ValueError(f"Unknown output format '{fmt}' (expected one of {', '.join(FORMATS)})")


def write_records(
    records: Iterable[DocRecord],
    fmt: str = "text",
    output: Optional[Path] = None,
    *,
    stream: TextIO | None = None,
) -> None:
    rendered = format_records(records, fmt)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(rendered, encoding="utf-8")
        return
    target = stream or sys.stdout
    target.write(rendered)
    target.flush()


__all__ = ["FORMATS", "format_records", "write_records"]
