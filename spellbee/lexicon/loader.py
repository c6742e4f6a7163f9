"""
The Lexicon: every known word, loaded once at startup.

The lexicon is an explicit, immutable value. Build it once with
`load_lexicon(...)` (or `Lexicon.from_words(...)` in tests) and pass it to
the pipeline; nothing in this package caches it globally.

File format (one word per line, lowercase a–z):
    aahed
    aalii
    ...
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator

from spellbee.config import WORDLIST_ENV
from .io import read_lines, normalize_words

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_WORDLIST = DATA_DIR / "words.txt"


class LexiconLoadError(RuntimeError):
    """The word list could not be read or held no usable words."""


@dataclass(frozen=True)
class Lexicon:
    words: FrozenSet[str]
    source: str = "<memory>"

    @classmethod
    def from_words(cls, words: Iterable[str], source: str = "<memory>") -> "Lexicon":
        return cls(words=frozenset(normalize_words(words)), source=source)

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: object) -> bool:
        return word in self.words

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)


def default_wordlist_path() -> Path:
    """Bundled list, unless SPELLBEE_WORDLIST points somewhere else."""
    env = os.environ.get(WORDLIST_ENV)
    return Path(env) if env else DEFAULT_WORDLIST


def load_lexicon(path: Path | str | None = None) -> Lexicon:
    """
    Load a newline-delimited word list into a Lexicon.

    Raises:
      LexiconLoadError if the file is missing, not UTF-8, unreadable, or
      contains zero usable words. There is no fallback: the solver cannot run
      without a dictionary.
    """
    p = Path(path) if path is not None else default_wordlist_path()
    try:
        lines = read_lines(p)
    except FileNotFoundError as e:
        raise LexiconLoadError(f"word list not found: {p}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise LexiconLoadError(f"word list unreadable: {p} ({e})") from e

    lex = Lexicon.from_words(lines, source=str(p))
    if not lex.words:
        raise LexiconLoadError(f"word list contains 0 usable words: {p}")

    logger.info("Loaded %s words from %s", len(lex), p)
    return lex
