"""
Download a word list from a web page and write a clean one-word-per-line file.

What it does:
- Downloads the page (HTML or plain text).
- Extracts the visible text and tokenizes it into alphabetic words.
- Lowercases, optionally keeps only words of length N, de-duplicates while
  preserving page order, and writes to file.

Usage:
    python -m script.fetch_wordlist --url https://example.org/words.txt --N 5 \
        --out packages/datasets/data/words_5.txt
    # or alphabetically sorted:
    python -m script.fetch_wordlist --url ... --sort --out words.txt
"""

import re
import argparse

import requests
from bs4 import BeautifulSoup

from packages.datasets.io import unique_preserve_order, write_words

WORD_RE = re.compile(r"\b[A-Za-z]+\b")


def extract_words(html: str, N: int | None = None) -> list[str]:
    soup = BeautifulSoup(html, "html.parser")
    text = soup.get_text("\n", strip=True)
    words = [m.group(0).lower() for m in WORD_RE.finditer(text)]
    if N is not None:
        words = [w for w in words if len(w) == N]
    return unique_preserve_order(words)


def fetch_words(url: str, N: int | None = None) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return extract_words(r.text, N)


def main():
    ap = argparse.ArgumentParser(description="Fetch a word list from a URL")
    ap.add_argument("--url", required=True)
    ap.add_argument("--N", type=int, help="keep only words of this length")
    ap.add_argument("--out", default="packages/datasets/data/words_5.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "page order")
    args = ap.parse_args()

    words = fetch_words(args.url, args.N)
    if args.sort:
        words = sorted(words)

    n = write_words(words, args.out)
    print(f"Wrote {n} unique words -> {args.out}")


if __name__ == "__main__":
    main()
