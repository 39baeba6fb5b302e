"""
Download a plain-text English dictionary and write a clean word list.

What it does:
- Downloads a newline-separated word list (default: dwyl/english-words words_alpha.txt).
- Strips whitespace, drops blanks, de-duplicates case-insensitively while preserving order.
- Writes one word per line; point --words or $SEQPUZZLE_WORD_LIST at the result.

Usage:
    python -m script.fetch_wordlist --out data/words.txt
    python -m script.fetch_wordlist --sort --out data/words.txt
"""

import argparse

import requests

from seqpuzzle.datasets.io import unique_preserve_order, write_lines

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def fetch_words(url: str = URL, timeout: float = 60) -> list[str]:
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    words = [ln.strip() for ln in r.text.splitlines() if ln.strip()]
    return unique_preserve_order(words, key=str.lower)


def main():
    ap = argparse.ArgumentParser(description="Fetch a dictionary word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="data/words.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = fetch_words(args.url)
    if args.sort:
        words = sorted(words, key=str.lower)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")


if __name__ == "__main__":
    main()
