"""
Word-list validator.

What this module does:
- Check a newline-delimited word list before it is used as the lexicon.
- Enforce formatting rules (lowercase, a–z only, one word per line).
- Count duplicates, invalid lines and words long enough to be playable;
  compute SHA-256 of the raw file.
- Return a machine-readable dict (for run manifests) and a pretty one-line
  summary for the console.

Typical use:
    from spellbee.lexicon import validate_wordlist, pretty_summary
    rep = validate_wordlist("spellbee/lexicon/data/words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from spellbee.config import MIN_WORD_LENGTH


@dataclass
class WordlistReport:
    """Diagnostics and metadata for one word list."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    unique_count: int    # unique valid words (after dedupe)
    playable_count: int  # unique valid words with len >= min_length
    invalid_lines: int   # number of invalid lines encountered
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Rules:
      - one token per line
      - must be lowercase a–z
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8", errors="replace") as f:
        for raw in f:
            w = raw.strip()
            if w and w.isascii() and w.isalpha() and w.islower():
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(path: str, min_length: int = MIN_WORD_LENGTH) -> Dict:
    """
    Validate a word list.

    `passed` is strict: the file exists, holds at least one playable word and
    has no invalid lines. Duplicates are reported but do not fail the check
    (the lexicon dedupes on load).
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"word list not found: {path}")
        return asdict(WordlistReport(path, False, 0, 0, 0, 0, "", False, issues))

    words, invalid = _load_and_check(p)
    unique = set(words)
    playable = sum(1 for w in unique if len(w) >= min_length)

    if not words:
        issues.append("word list contains 0 valid words")
    elif playable == 0:
        issues.append(f"word list has no words with {min_length}+ letters")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append(f"word list contains {len(words) - len(unique)} duplicate line(s)")

    rep = WordlistReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=len(unique),
        playable_count=playable,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=(invalid == 0 and playable > 0),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for the console.

    Example:
        words=370105 (uniq=370105, 4+=364680, sha=abc123def456) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['count']} (uniq={report['unique_count']}, "
        f"4+={report['playable_count']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | {status}"
    )
