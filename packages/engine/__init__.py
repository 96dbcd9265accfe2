from .scoring import (
    Verdict, LetterVerdict, LengthMismatch, compare, score, pattern_of, is_solved,
)
from .validation import is_valid, validate_guess

__all__ = [
    "Verdict", "LetterVerdict", "LengthMismatch",
    "compare", "score", "pattern_of", "is_solved",
    "is_valid", "validate_guess",
]
