"""
Word file I/O.

Word files are UTF-8, one word per line. On both read and write, entries are
stripped and lowercased and blank lines are dropped, so a file written here
loads back into the same WordList.
"""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def unique_preserve_order(words: Iterable[str]) -> List[str]:
    seen, out = set(), []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def _normalize(entries: Iterable[str]) -> List[str]:
    cleaned = (e.strip().lower() for e in entries)
    return [w for w in cleaned if w]


def read_words(p: Path | str) -> List[str]:
    """
    Read a word file into normalized entries, in file order (duplicates kept;
    WordList does the dedupe). Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return _normalize(p.read_text(encoding="utf-8").splitlines())


def write_words(words: Iterable[str], p: Path | str) -> int:
    """
    Write normalized, de-duplicated words (first-seen order) with a trailing
    newline, creating parent directories as needed. Returns the number of
    words written.
    """
    out = unique_preserve_order(_normalize(words))
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("".join(w + "\n" for w in out), encoding="utf-8")
    return len(out)
