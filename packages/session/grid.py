"""
Numeric encoding of session rows.

Each row becomes one line of an int8 matrix so a grid can be handed to
numeric consumers (feature builders, plotting, JSON) without re-parsing
patterns:

   2 : CORRECT
   1 : PRESENT
   0 : ABSENT
  -1 : BLANK   (empty slot)
  -2 : INVALID (guess rejected by the word list)
"""

from __future__ import annotations

from typing import Dict, Iterable, Sequence

import numpy as np

from packages.engine import Verdict
from .core import Row, RowKind

CORRECT, PRESENT, ABSENT, BLANK, INVALID = 2, 1, 0, -1, -2

VERDICT_CODES: Dict[Verdict, int] = {
    Verdict.CORRECT: CORRECT,
    Verdict.PRESENT: PRESENT,
    Verdict.ABSENT: ABSENT,
}
_CODE_SYMBOLS = {CORRECT: "G", PRESENT: "Y", ABSENT: "-", BLANK: ".", INVALID: "."}


def encode_rows(rows: Sequence[Row], length: int) -> np.ndarray:
    """Encode rows into a (len(rows), length) int8 array."""
    grid = np.full((len(rows), length), BLANK, dtype=np.int8)
    for r, row in enumerate(rows):
        if row.kind is RowKind.INVALID:
            grid[r, :] = INVALID
        elif row.kind is RowKind.SCORED:
            grid[r, :] = [VERDICT_CODES[cell.verdict] for cell in row.cells]
    return grid


def decode_row(codes: Iterable[int]) -> str:
    """Code vector -> pattern string; blank/invalid cells become '.'."""
    return "".join(_CODE_SYMBOLS[int(c)] for c in codes)
