"""
Game session: one fixed solution, up to six guess slots.

- GameSession.evaluate: turn a sequence of guess slots into six rows.
- Each slot is independent; only the solution and word list are shared,
  and neither changes after construction.
- Validation failures never raise here. They come back as INVALID rows so the
  remaining slots are still evaluated.

The solution is kept private: a session only hands out rows, never the word
itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

from packages.datasets import WordList
from packages.engine import LetterVerdict, compare, is_solved, is_valid, pattern_of, validate_guess

# Single source of truth for the number of guess slots.
MAX_GUESSES = 6

GuessSlot = Optional[str]


class RowKind(str, Enum):
    EMPTY = "empty"
    INVALID = "invalid"
    SCORED = "scored"


@dataclass(frozen=True)
class Row:
    """
    Outcome for one guess slot.

    EMPTY   : no guess yet; `cells` holds one None per solution position
    INVALID : guess rejected by the word list; `cells` is empty
    SCORED  : `cells` is the comparison result for `guess`
    """
    kind: RowKind
    guess: Optional[str]
    cells: Tuple[Optional[LetterVerdict], ...]

    @classmethod
    def blank(cls, length: int) -> "Row":
        return cls(RowKind.EMPTY, None, (None,) * length)

    @property
    def pattern(self) -> Optional[str]:
        return pattern_of(self.cells) if self.kind is RowKind.SCORED else None

    @property
    def is_win(self) -> bool:
        return self.kind is RowKind.SCORED and is_solved(self.cells)


def _is_empty(slot: GuessSlot) -> bool:
    return slot is None or not slot.strip()


class GameSession:
    """Evaluates guesses against a hidden solution drawn from a word list."""

    def __init__(self, solution: str, word_list: Iterable[str]):
        solution = solution.strip().lower()
        if not solution:
            raise ValueError("solution must be a non-empty word")
        if not isinstance(word_list, WordList):
            word_list = WordList(word_list)
        if not is_valid(solution, word_list):
            raise ValueError("solution must be a member of the word list")
        self._solution = solution
        self._words = word_list
        self.length = len(solution)

    @classmethod
    def from_index(cls, word_list: WordList, index: int) -> "GameSession":
        """Build a session whose solution is `word_list.word_at(index)`."""
        return cls(word_list.word_at(index), word_list)

    def __repr__(self) -> str:
        return f"GameSession(length={self.length}, words={len(self._words)})"

    def guess(self, slot: GuessSlot) -> Row:
        """Evaluate a single slot."""
        if _is_empty(slot):
            return Row.blank(self.length)

        word = slot.strip().lower()
        # Length is checked here so the comparator never sees a mismatch
        if not validate_guess(word, self._words, N=self.length):
            return Row(RowKind.INVALID, word, ())

        return Row(RowKind.SCORED, word, compare(word, self._solution))

    def evaluate(self, slots: Sequence[GuessSlot]) -> List[Row]:
        """
        Evaluate up to MAX_GUESSES slots in order; missing slots are padded as
        empty so the result always has exactly MAX_GUESSES rows.

        Raises:
          ValueError if more than MAX_GUESSES slots are supplied.
        """
        if len(slots) > MAX_GUESSES:
            raise ValueError(f"at most {MAX_GUESSES} guesses allowed; got {len(slots)}")

        padded = list(slots) + [None] * (MAX_GUESSES - len(slots))
        return [self.guess(s) for s in padded]
