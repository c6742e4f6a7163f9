"""
Candidate filtering.

Three narrowing stages, applied in order by the pipeline:

  - filter_by_length   : keep words whose length falls in [min, max]
  - filter_any_letters : keep words built only from the permitted letters
                         (a letter may repeat any number of times)
  - filter_all_letters : keep words that contain every required letter,
                         each requirement consuming its own occurrence

All three are pure and total: empty inputs and empty letter sets are
defined cases, not errors. Large collections are evaluated on a process
pool (see spellbee.engine.parallel); the result is the same set either way.
"""

from __future__ import annotations

from functools import partial
from typing import AbstractSet, Iterable, Optional, Set, Tuple

from .multiset import consumes_all, uses_only
from .parallel import parallel_filter

LengthRange = Tuple[Optional[int], Optional[int]]


def _length_in_range(bounds: LengthRange, word: str) -> bool:
    lo, hi = bounds
    n = len(word)
    return (lo is None or n >= lo) and (hi is None or n <= hi)


def _uses_only(permitted: frozenset, word: str) -> bool:
    return uses_only(word, permitted)


def _consumes_all(required: Tuple[str, ...], word: str) -> bool:
    return consumes_all(word, required)


def filter_by_length(words: AbstractSet[str], word_length: LengthRange, *,
                     workers: Optional[int] = None, threshold: int = 20_000) -> AbstractSet[str]:
    """
    Keep words whose length is within the inclusive range `word_length`.

    Either bound may be None (unbounded on that side). With both None the
    input is returned as is.
    """
    lo, hi = word_length
    if lo is None and hi is None:
        return words
    return set(parallel_filter(partial(_length_in_range, (lo, hi)), words,
                               workers=workers, threshold=threshold))


def filter_any_letters(words: Iterable[str], letters: Iterable[str], *,
                       workers: Optional[int] = None, threshold: int = 20_000) -> Set[str]:
    """Keep words in which every character is one of `letters`."""
    permitted = frozenset(letters)
    return set(parallel_filter(partial(_uses_only, permitted), words,
                               workers=workers, threshold=threshold))


def filter_all_letters(words: Iterable[str], letters: Iterable[str], *,
                       workers: Optional[int] = None, threshold: int = 20_000) -> Set[str]:
    """
    Keep words that contain all of `letters` as a multiset: required = [e, e]
    needs two e's in the word. For a single letter this is plain containment.
    """
    required = tuple(letters)
    return set(parallel_filter(partial(_consumes_all, required), words,
                               workers=workers, threshold=threshold))
