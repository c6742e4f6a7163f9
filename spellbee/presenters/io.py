"""
Export utilities for solved puzzles.

Responsibilities:
- write_csv:      ranked words as a tidy CSV (one row per word).
- write_manifest: dump a JSON manifest with letters, counts and word-list info.
- timestamp_id:   stable UTC run ID string.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Sequence, Tuple
import csv
import json
import datetime as dt

from spellbee.engine.scoring import is_pangram


def write_csv(ranked: Sequence[Tuple[str, int]], letters: Sequence[str], path: str) -> str:
    """
    Serialize ranked words to CSV.

    Schema (columns): rank, word, points, pangram

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=["rank", "word", "points", "pangram"])
        w.writeheader()
        for i, (word, points) in enumerate(ranked, start=1):
            w.writerow({
                "rank": i,
                "word": word,
                "points": points,
                "pangram": is_pangram(word, letters),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest for one solve.

    Typical keys:
      - run_id
      - config: CLI args
      - wordlist: output of lexicon.validate_wordlist(...)
      - result: PuzzleResult.as_dict()
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
