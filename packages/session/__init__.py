from .core import GameSession, Row, RowKind, MAX_GUESSES
from .grid import encode_rows, decode_row
from .io import row_to_record, write_json

__all__ = [
    "GameSession", "Row", "RowKind", "MAX_GUESSES",
    "encode_rows", "decode_row", "row_to_record", "write_json",
]
