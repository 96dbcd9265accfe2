# apps/cli/play.py
"""
CLI entry point for evaluating guesses against a hidden solution.

This script:
  1) Validates the word list and prints a one-line summary (count, SHA).
  2) Picks the solution by --index, or at random (reproducible with --seed).
  3) Evaluates up to six guesses and prints one line per slot:
       - "<guess>  <pattern>" for scored guesses ('G'/'Y'/'-')
       - "<guess>  INVALID WORD" for guesses not in the word list
       - "."-filled placeholder for empty slots
  4) Optionally writes a JSON report (rows + numeric grid) with --out.

Usage:
    python -m apps.cli.play crane slate --seed 7
    python -m apps.cli.play raise --wordlist words.txt --index 12 --out reports/game.json
"""

from __future__ import annotations

import argparse

from packages.datasets import DEFAULT_WORDLIST, WordList, pretty_summary, validate_wordlist
from packages.session import GameSession, MAX_GUESSES, encode_rows, row_to_record, write_json
from packages.session.core import Row, RowKind


def _format_row(row: Row, length: int) -> str:
    if row.kind is RowKind.EMPTY:
        return "." * length
    if row.kind is RowKind.INVALID:
        return f"{row.guess}  INVALID WORD"
    return f"{row.guess}  {row.pattern}"


def main(argv: list[str] | None = None):
    """
    Parse CLI args, pick the solution, evaluate guesses, and print/write results.
    """
    ap = argparse.ArgumentParser(description="wordgrid: score guesses against a hidden word")
    ap.add_argument("guesses", nargs="*", help=f"up to {MAX_GUESSES} guesses, in order")
    ap.add_argument("--wordlist", default=str(DEFAULT_WORDLIST),
                    help="path to the word list (one word per line)")
    ap.add_argument("--index", type=int, help="solution index into the word list")
    ap.add_argument("--seed", type=int, help="RNG seed used when --index is not given")
    ap.add_argument("--out", help="write a JSON report to this path")
    args = ap.parse_args(argv)

    if len(args.guesses) > MAX_GUESSES:
        ap.error(f"at most {MAX_GUESSES} guesses allowed; got {len(args.guesses)}")

    # 1) Word list summary (does not hard-fail; membership still works on messy lists)
    rep = validate_wordlist(args.wordlist)
    print(pretty_summary(rep))

    words = WordList.from_file(args.wordlist)

    # 2) Solution selection (empty list or bad index -> usage error)
    try:
        index = args.index if args.index is not None else words.pick_index(args.seed)
        session = GameSession.from_index(words, index)
    except (IndexError, ValueError) as e:
        ap.error(str(e))

    # 3) Evaluate
    rows = session.evaluate(args.guesses)
    for i, row in enumerate(rows, 1):
        print(f"Guess {i}: {_format_row(row, session.length)}")

    solved = any(r.is_win for r in rows)
    print("Solved!" if solved else "Not solved.")

    # 4) Optional JSON report
    if args.out:
        payload = {
            "wordlist": rep,
            "index": index,
            "length": session.length,
            "solved": solved,
            "rows": [row_to_record(r) for r in rows],
            "grid": encode_rows(rows, session.length).tolist(),
        }
        print(f"Wrote: {write_json(payload, args.out)}")


if __name__ == "__main__":
    main()
