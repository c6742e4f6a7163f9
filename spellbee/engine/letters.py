"""
The puzzle's seven letters.

A LetterSet is one center letter plus six others, all distinct lowercase
a–z. It is built once per puzzle from validated input and read-only after.

`normalize_letters` is the input-side cleanup used by the CLI prompts: it
accepts "a, b, c", "a b c" or "abc" and returns the letters that survive
the filtering rules so the caller can decide whether to re-prompt.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from spellbee.config import OTHER_COUNT


class LetterSetError(ValueError):
    """Base class for malformed letter sets."""


class InvalidLetterSetSize(LetterSetError):
    pass


class InvalidLetter(LetterSetError):
    pass


class DuplicateLetter(LetterSetError):
    pass


def _check_letter(c: str) -> None:
    if not (isinstance(c, str) and len(c) == 1 and c.isascii() and c.isalpha() and c.islower()):
        raise InvalidLetter(f"not a lowercase a-z letter: {c!r}")


@dataclass(frozen=True)
class LetterSet:
    center: str
    others: Tuple[str, ...]

    def __post_init__(self):
        others = tuple(self.others)
        object.__setattr__(self, "others", others)

        if len(others) != OTHER_COUNT:
            raise InvalidLetterSetSize(
                f"expected {OTHER_COUNT} other letters, got {len(others)}: {list(others)}")
        for c in (self.center, *others):
            _check_letter(c)
        if self.center in others:
            raise DuplicateLetter(f"center letter {self.center!r} repeated among the others")
        if len(set(others)) != len(others):
            raise DuplicateLetter(f"other letters must be unique: {list(others)}")

    @classmethod
    def parse(cls, center: str, others: str) -> "LetterSet":
        """Build from raw strings, e.g. LetterSet.parse("t", "e,s,y,a,b,c")."""
        c = normalize_letters(center)
        if len(c) != 1:
            raise InvalidLetterSetSize(f"expected exactly 1 center letter, got {c}")
        return cls(center=c[0], others=tuple(normalize_letters(others)))

    @property
    def all_letters(self) -> Tuple[str, ...]:
        """Center first, then the others in input order."""
        return (self.center, *self.others)

    def __str__(self) -> str:
        return f"[{self.center}] {' '.join(self.others)}"


def normalize_letters(raw: str, *, exclude: Iterable[str] = (), unique: bool = True) -> List[str]:
    """
    Lowercase the input, keep a–z letters only, drop anything in `exclude`,
    and (when `unique`) drop repeats keeping the first occurrence.

    normalize_letters("E, s, Y")            -> ['e', 's', 'y']
    normalize_letters("tteesy", exclude="t") -> ['e', 's', 'y']
    normalize_letters("é, ß, a")             -> ['a']
    """
    banned = {c.lower() for c in exclude}
    out: List[str] = []
    for c in raw.lower():
        if not (c.isascii() and c.isalpha()):
            continue
        if c in banned:
            continue
        if unique and c in out:
            continue
        out.append(c)
    return out
