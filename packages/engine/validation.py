"""
Guess validation against an injected word list.

A guess is valid iff:
  - it is a string
  - its stripped, lowercased form is a member of the word list
  - (optionally) it has exact length N

The word list is always passed in, never looked up globally, so callers can
swap it for a fixture or a list loaded at runtime.
"""

from __future__ import annotations

from typing import Iterable, Optional, Set

from packages.datasets.wordlist import WordList


def _as_set(word_list: Iterable[str]) -> Set[str] | WordList:
    # WordList already normalizes on construction and on lookup
    if isinstance(word_list, WordList):
        return word_list
    return {w.strip().lower() for w in word_list}


def is_valid(word, word_list: Iterable[str]) -> bool:
    """
    Case-insensitive membership test. No side effects.

    Notes:
      - A plain iterable is normalized into a set on every call. In a tight
        loop, pass a WordList instead.
    """
    if not isinstance(word, str):
        return False
    w = word.strip().lower()
    if not w:
        return False
    return w in _as_set(word_list)


def validate_guess(word, allowed: Iterable[str], N: Optional[int] = None) -> bool:
    """
    `is_valid` plus an exact-length requirement when `N` is given.

    GameSession calls this with N = len(solution) so that the comparator is
    only ever handed equal-length words.
    """
    if not is_valid(word, allowed):
        return False
    return N is None or len(word.strip().lower()) == N
