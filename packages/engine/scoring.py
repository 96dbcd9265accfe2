"""
Wordle-style comparison of a guess against a solution.

Verdicts:
  - CORRECT ('G') : right letter in the right position
  - PRESENT ('Y') : letter occurs in the solution, but not here
  - ABSENT  ('-') : letter not in the solution, or its budget is used up

Occurrence budget:
  Each character value may be marked CORRECT/PRESENT at most as many times as
  it occurs in the solution. Exact matches claim their share first; what is
  left goes to the non-exact guess positions in left-to-right order.

Algorithm (two-pass):
  1) Mark every exact position match CORRECT. These are final.
  2) Scan the remaining positions left to right. A character is PRESENT while
     exact_matches(c) + claimed(c) < occurrences(c) in the solution,
     otherwise ABSENT.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple


class Verdict(str, Enum):
    """Per-position classification; the value doubles as the pattern symbol."""
    CORRECT = "G"
    PRESENT = "Y"
    ABSENT = "-"


@dataclass(frozen=True)
class LetterVerdict:
    """Verdict for one guess position, with the (lowercased) character it refers to."""
    char: str
    verdict: Verdict


ComparisonResult = Tuple[LetterVerdict, ...]


class LengthMismatch(ValueError):
    """Raised when guess and solution do not have the same length."""

    def __init__(self, guess_len: int, solution_len: int):
        super().__init__(
            f"Guess and solution must be the same length; got {guess_len} and {solution_len}")
        self.guess_len = guess_len
        self.solution_len = solution_len


def occurrences(word: str) -> Counter:
    """Count of each character value in `word`."""
    return Counter(word)


def exact_matches(guess: str, solution: str) -> Counter:
    """Per character value, how many positions match exactly."""
    return Counter(g for g, s in zip(guess, solution) if g == s)


def compare(guess: str, solution: str) -> ComparisonResult:
    """
    Classify every character of `guess` against `solution`.

    Raises:
      LengthMismatch if the two words differ in length.

    Examples:
      compare("aac", "bba") -> (a:PRESENT, a:ABSENT, c:ABSENT)
      compare("xaaf", "abba") -> (x:ABSENT, a:PRESENT, a:PRESENT, f:ABSENT)
    """
    guess = guess.lower()
    solution = solution.lower()
    if len(guess) != len(solution):
        raise LengthMismatch(len(guess), len(solution))

    n = len(guess)
    verdicts = [Verdict.ABSENT] * n

    # Pass 1: exact matches are final
    for i in range(n):
        if guess[i] == solution[i]:
            verdicts[i] = Verdict.CORRECT

    # Pass 2: spend what's left of each character's budget, left to right
    total = occurrences(solution)
    exact = exact_matches(guess, solution)
    claimed: Counter = Counter()
    for i, c in enumerate(guess):
        if verdicts[i] is Verdict.CORRECT:
            continue
        if exact[c] + claimed[c] < total[c]:
            verdicts[i] = Verdict.PRESENT
            claimed[c] += 1

    return tuple(LetterVerdict(c, v) for c, v in zip(guess, verdicts))


def pattern_of(result: Iterable[LetterVerdict]) -> str:
    """Compact 'G'/'Y'/'-' string for a comparison result."""
    return "".join(lv.verdict.value for lv in result)


def score(guess: str, answer: str) -> str:
    """
    Pattern string for `guess` against `answer`.

    Examples:
      score("belle", "level") -> "-GYYY"
      score("lemon", "level") -> "GG---"
    """
    return pattern_of(compare(guess, answer))


def is_solved(result: ComparisonResult) -> bool:
    """True when every position is CORRECT (an empty result never counts)."""
    return bool(result) and all(lv.verdict is Verdict.CORRECT for lv in result)
