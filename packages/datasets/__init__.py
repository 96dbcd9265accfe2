from pathlib import Path

from .validator import validate_wordlist, pretty_summary
from .io import read_words, write_words
from .wordlist import WordList

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_WORDLIST = DATA_DIR / "words_5.txt"

__all__ = [
    "WordList", "validate_wordlist", "pretty_summary",
    "read_words", "write_words", "DATA_DIR", "DEFAULT_WORDLIST",
]
