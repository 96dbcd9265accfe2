"""
Serialization helpers for session output.

- row_to_record: flatten a Row into a JSON-ready dict.
- write_json:    dump a report payload to disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict
import json

from .core import Row


def row_to_record(row: Row) -> Dict:
    """
    Schema:
      kind    : "empty" | "invalid" | "scored"
      guess   : the normalized guess, or None for empty slots
      pattern : 'G'/'Y'/'-' string for scored rows, else None
      cells   : [[verdict, char], ...] for scored rows, [None, ...] for empty
    """
    cells = [
        None if cell is None else [cell.verdict.name.lower(), cell.char]
        for cell in row.cells
    ]
    return {
        "kind": row.kind.value,
        "guess": row.guess,
        "pattern": row.pattern,
        "cells": cells,
    }


def write_json(payload: Dict, path: str) -> str:
    """Write `payload` as indented JSON, creating parent dirs. Returns the path."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
    return str(p)
