"""
Spelling Bee scoring and ranking.

Point rules:
  - a 4-letter word is worth 1 point
  - any other word is worth 1 point per letter
  - a pangram (uses all 7 puzzle letters) earns a flat +7 bonus

The pangram test is its own multiset-consumption check against all seven
letters; it does not reuse the center-letter filter result.

Ranking sorts by points (descending) and breaks ties by the word itself
(ascending), so the same puzzle always prints in the same order.
"""

from __future__ import annotations

from functools import partial
from typing import Iterable, List, NamedTuple, Optional, Sequence

import numpy as np

from spellbee.config import PANGRAM_BONUS, SHORT_WORD_POINTS, MIN_WORD_LENGTH
from .multiset import consumes_all
from .parallel import parallel_map


class ScoredWord(NamedTuple):
    word: str
    points: int


def is_pangram(word: str, letters: Sequence[str]) -> bool:
    """True if `word` uses every one of `letters` at least once."""
    return consumes_all(word, letters)


def base_points(length, short_word_points: int = SHORT_WORD_POINTS):
    """Points before the pangram bonus; `length` may be an int or an int array."""
    return np.where(length == MIN_WORD_LENGTH, short_word_points, length)


def word_points(word: str, letters: Sequence[str], *,
                short_word_points: int = SHORT_WORD_POINTS,
                pangram_bonus: int = PANGRAM_BONUS) -> int:
    """
    Examples (letters = t e s y a b c):
      word_points("test", ...)  -> 1
      word_points("tests", ...) -> 5
    """
    points = int(base_points(len(word), short_word_points))
    if is_pangram(word, letters):
        points += pangram_bonus
    return points


def rank_words(words: Iterable[str], letters: Sequence[str], *,
               short_word_points: int = SHORT_WORD_POINTS,
               pangram_bonus: int = PANGRAM_BONUS,
               workers: Optional[int] = None,
               threshold: int = 20_000) -> List[ScoredWord]:
    """
    Score every word and return them best first.

    Pangram detection runs per word (in parallel for big inputs); the point
    arithmetic and the sort are vectorized.
    """
    pool = list(words)
    if not pool:
        return []

    pangram = np.array(
        parallel_map(partial(is_pangram, letters=tuple(letters)), pool,
                     workers=workers, threshold=threshold),
        dtype=bool,
    )
    lengths = np.fromiter((len(w) for w in pool), dtype=np.int64, count=len(pool))
    points = base_points(lengths, short_word_points) + pangram_bonus * pangram

    # lexsort: last key is primary -> points desc, then word asc
    order = np.lexsort((np.array(pool), -points))
    return [ScoredWord(pool[i], int(points[i])) for i in order]


def total_points(ranked: Iterable[ScoredWord]) -> int:
    return sum(sw.points for sw in ranked)
