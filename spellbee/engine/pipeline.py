"""
End-to-end solve for one puzzle.

    Lexicon -> length filter -> letters-any filter -> center-letter filter -> rank

`solve` is UI-agnostic: it returns the ranked words plus the intermediate
counts the CLI prints as progress, and never reads input or writes output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from spellbee.config import SolverConfig
from spellbee.lexicon import Lexicon
from .filters import filter_by_length, filter_any_letters, filter_all_letters
from .letters import LetterSet
from .scoring import ScoredWord, rank_words, total_points

logger = logging.getLogger(__name__)


@dataclass
class PuzzleResult:
    letters: LetterSet
    lexicon_size: int
    length_count: int     # words within the length range
    any_count: int        # ...built only from the 7 letters
    all_count: int        # ...and containing the center letter
    ranked: List[ScoredWord] = field(default_factory=list)

    @property
    def total_points(self) -> int:
        return total_points(self.ranked)

    def as_dict(self) -> dict:
        return {
            "center": self.letters.center,
            "others": list(self.letters.others),
            "lexicon_size": self.lexicon_size,
            "length_count": self.length_count,
            "any_count": self.any_count,
            "all_count": self.all_count,
            "total_words": len(self.ranked),
            "total_points": self.total_points,
        }


def solve(lexicon: Lexicon, letters: LetterSet, config: Optional[SolverConfig] = None) -> PuzzleResult:
    cfg = config or SolverConfig()
    par = {"workers": cfg.resolved_workers(), "threshold": cfg.parallel_threshold}

    sized = filter_by_length(lexicon.words, cfg.length_range, **par)
    logger.debug("length %s: %d of %d words", cfg.length_range, len(sized), len(lexicon))

    possible = filter_any_letters(sized, letters.all_letters, **par)
    logger.debug("letters-any %s: %d words", "".join(letters.all_letters), len(possible))

    with_center = filter_all_letters(possible, [letters.center], **par)
    logger.debug("letters-all [%s]: %d words", letters.center, len(with_center))

    ranked = rank_words(
        with_center, letters.all_letters,
        short_word_points=cfg.short_word_points,
        pangram_bonus=cfg.pangram_bonus,
        **par,
    )
    logger.info("Solved %s: %d words, %d points", letters, len(ranked), total_points(ranked))

    return PuzzleResult(
        letters=letters,
        lexicon_size=len(lexicon),
        length_count=len(sized),
        any_count=len(possible),
        all_count=len(with_center),
        ranked=ranked,
    )
