"""
In-memory word list.

A WordList is the external data source the engine validates guesses against
and the place a solution is picked from. It is immutable once built:
  - words are stripped and lowercased
  - blank lines are dropped
  - duplicates are removed, keeping first-seen order (so an index into the
    list is stable for a given file)
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, Optional, Tuple

from .io import read_words, unique_preserve_order


class WordList:
    """Ordered, case-insensitive set of valid words."""

    def __init__(self, words: Iterable[str]):
        cleaned = [w.strip().lower() for w in words]
        self._words: Tuple[str, ...] = tuple(unique_preserve_order(w for w in cleaned if w))
        self._lookup: FrozenSet[str] = frozenset(self._words)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "WordList":
        return cls(lines)

    @classmethod
    def from_file(cls, path: Path | str) -> "WordList":
        """Load one word per line (UTF-8). Raises FileNotFoundError if missing."""
        return cls(read_words(path))

    def __contains__(self, word) -> bool:
        if not isinstance(word, str):
            return False
        return word.strip().lower() in self._lookup

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"WordList({len(self)} words)"

    def word_at(self, index: int) -> str:
        """Word at a non-negative position; IndexError when out of range."""
        if not 0 <= index < len(self._words):
            raise IndexError(f"word index {index} out of range for {len(self._words)} words")
        return self._words[index]

    def pick_index(self, seed: Optional[int] = None) -> int:
        """Uniform random index into the list (reproducible when seeded)."""
        if not self._words:
            raise ValueError("cannot pick a solution from an empty word list")
        return random.Random(seed).randrange(len(self._words))

    def of_length(self, N: int) -> "WordList":
        """New list containing only words of length N."""
        return WordList(w for w in self._words if len(w) == N)
