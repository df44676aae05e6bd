"""Utility helpers for JSON IO and logging."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def load_json_argument(raw: str | None) -> Any:
    """Parse inline JSON, or read it from a file when prefixed with ``@``."""

    if raw is None:
        return None
    if raw.startswith("@"):
        path = Path(raw[1:])
        if not path.exists():
            raise SystemExit(f"JSON file not found: {path}")
        try:
            return read_json(path)
        except json.JSONDecodeError as exc:
            raise SystemExit(f"Invalid JSON in {path}: {exc}") from exc
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid JSON argument: {exc}") from exc


def write_text(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)


__all__ = ["load_json_argument", "read_json", "warn", "write_text"]
