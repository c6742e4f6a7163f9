"""
Download the full English word list and install it as the solver's lexicon.

What it does:
- Downloads words_alpha.txt (one word per line, ~370k words).
- Lowercases, keeps a–z tokens only, de-duplicates (keeps file order).
- Optionally sorts, then writes the list and prints a validation summary.

Usage:
    python -m script.fetch_wordlist
    python -m script.fetch_wordlist --sort --out /tmp/words.txt
"""

import argparse

import requests

from spellbee.lexicon import normalize_words, write_lines, validate_wordlist, pretty_summary
from spellbee.lexicon.loader import DEFAULT_WORDLIST

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def fetch_words(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=60)
    r.raise_for_status()
    return normalize_words(r.text.splitlines())


def main():
    ap = argparse.ArgumentParser(description="Fetch the full word list for the solver")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default=str(DEFAULT_WORDLIST))
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "download order")
    args = ap.parse_args()

    words = fetch_words(args.url)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")
    print(pretty_summary(validate_wordlist(args.out)))


if __name__ == "__main__":
    main()
