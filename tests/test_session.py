import pytest
from packages.datasets import WordList
from packages.engine import Verdict
from packages.session import (
    GameSession, Row, RowKind, MAX_GUESSES, encode_rows, decode_row, row_to_record, write_json,
)
import json


@pytest.fixture
def words():
    return WordList(["crane", "raise", "stare", "slate", "cranes"])


@pytest.fixture
def session(words):
    return GameSession("crane", words)


def test_evaluate_always_returns_six_rows(session):
    rows = session.evaluate([])
    assert len(rows) == MAX_GUESSES
    assert all(r.kind is RowKind.EMPTY for r in rows)
    assert rows[0].cells == (None,) * 5
    assert rows[0].pattern is None


def test_evaluate_mixed_slots(session):
    rows = session.evaluate(["raise", None, "zzzzz", "", "CRANE"])
    kinds = [r.kind for r in rows]
    assert kinds == [
        RowKind.SCORED, RowKind.EMPTY, RowKind.INVALID,
        RowKind.EMPTY, RowKind.SCORED, RowKind.EMPTY,
    ]
    assert rows[0].pattern == "YY--G"
    assert rows[2].guess == "zzzzz" and rows[2].cells == ()
    assert rows[4].is_win is True
    assert rows[0].is_win is False


def test_wrong_length_word_in_list_is_invalid(session):
    row = session.guess("cranes")
    assert row.kind is RowKind.INVALID


def test_whitespace_slot_is_empty(session):
    assert session.guess("   ").kind is RowKind.EMPTY


def test_guesses_are_independent(session):
    a = session.evaluate(["stare", "slate", "stare"])
    assert a[0] == a[2]
    assert session.evaluate(["stare"])[0] == a[0]


def test_too_many_guesses_rejected(session):
    with pytest.raises(ValueError):
        session.evaluate(["raise"] * (MAX_GUESSES + 1))


def test_solution_must_be_in_word_list(words):
    with pytest.raises(ValueError):
        GameSession("zebra", words)
    with pytest.raises(ValueError):
        GameSession("  ", words)


def test_from_index_and_hidden_repr(words):
    s = GameSession.from_index(words, 3)
    assert s.guess("slate").is_win
    assert "slate" not in repr(s)
    with pytest.raises(IndexError):
        GameSession.from_index(words, 99)


def test_scored_cells_carry_characters(session):
    row = session.guess("Stare")
    assert row.guess == "stare"
    assert [c.char for c in row.cells] == list("stare")
    assert row.cells[2].verdict is Verdict.CORRECT


def test_encode_rows_grid(session):
    rows = session.evaluate(["raise", "zzzzz"])
    grid = encode_rows(rows, session.length)
    assert grid.shape == (MAX_GUESSES, 5)
    assert str(grid.dtype) == "int8"
    assert grid[0].tolist() == [1, 1, 0, 0, 2]
    assert grid[1].tolist() == [-2] * 5
    assert grid[2].tolist() == [-1] * 5
    assert decode_row(grid[0]) == "YY--G"
    assert decode_row(grid[2]) == "....."


def test_row_to_record_and_write_json(session, tmp_path):
    rows = session.evaluate(["stare", "zzzzz"])
    rec = row_to_record(rows[0])
    assert rec["kind"] == "scored"
    assert rec["pattern"] == "--GYG"
    assert rec["cells"][2] == ["correct", "a"]
    assert row_to_record(rows[1]) == {"kind": "invalid", "guess": "zzzzz", "pattern": None, "cells": []}
    assert row_to_record(rows[2])["cells"] == [None] * 5

    out = write_json({"rows": [row_to_record(r) for r in rows]}, str(tmp_path / "sub" / "g.json"))
    data = json.loads((tmp_path / "sub" / "g.json").read_text(encoding="utf-8"))
    assert out.endswith("g.json")
    assert len(data["rows"]) == MAX_GUESSES


def test_blank_row_helper():
    assert Row.blank(3) == Row(RowKind.EMPTY, None, (None, None, None))


def test_plain_mixed_case_list_accepts_solution_and_guesses():
    s = GameSession("crane", ["CRANE", "Raise", "stare"])
    assert s.guess("crane").is_win
    assert s.guess("RAISE").pattern == "YY--G"
    assert s.guess("zzzzz").kind is RowKind.INVALID
    assert "words=3" in repr(s)
    with pytest.raises(ValueError):
        GameSession("slate", ["CRANE", "RAISE"])
