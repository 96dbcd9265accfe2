"""
Word list validator.

What this module does:
- Check a word list file for formatting problems (lowercase, a–z only,
  optional exact length N, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for reports) and a pretty one-line summary.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("packages/datasets/data/words_5.txt", N=5)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import hashlib


@dataclass
class WordlistReport:
    """Diagnostics and metadata for one word list file."""
    path: str            # file path (as given)
    N: Optional[int]     # required word length, or None for mixed lengths
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: Optional[int]) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must have exact length N (when N is given)
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                invalid += 1
                continue
            if w == w.lower() and w.isalpha() and (N is None or len(w) == N):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(path: str, N: Optional[int] = None) -> Dict:
    """
    Validate a word list file.

    Parameters
    ----------
    path : str
        Path to the word list (one word per line).
    N : int, optional
        Required word length. If omitted, any length is accepted.

    Returns
    -------
    Dict
        JSON-serializable WordlistReport. `passed` is strict: the file exists,
        is non-empty, and has no invalid or duplicate lines.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"word list not found: {path}")
        return asdict(WordlistReport(path, N, False, 0, 0, 0, "", False, issues))

    words, invalid = _load_and_check(p, N)
    unique = set(words)

    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append("word list contains duplicate lines")

    rep = WordlistReport(
        path=str(p),
        N=N,
        exists=True,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for console output.

    Example:
        words_5.txt | N=5 | words=40 (uniq=40, sha=abc123...) | OK
    """
    N = report["N"] if report["N"] is not None else "any"
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{Path(report['path']).name} | N={N} "
        f"| words={report['count']} (uniq={report['unique_count']}, sha={sha}) | {status}"
    )
