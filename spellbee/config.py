"""
Game constants and run configuration.

Single source of truth for the Spelling Bee rules (minimum word length,
point values, number of letters) and for the knobs the CLI exposes
(worker count, typing delay, ...).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional

# Spelling Bee rules
CENTER_COUNT = 1
OTHER_COUNT = 6
MIN_WORD_LENGTH = 4
SHORT_WORD_POINTS = 1
PANGRAM_BONUS = 7

# Keystroke timings (milliseconds)
KEY_PRESS_DELAY_MS = 10
SUBMIT_DELAY_MS = 25
DEFAULT_TYPE_DELAY_MS = 750

WORDLIST_ENV = "SPELLBEE_WORDLIST"


@dataclass(frozen=True)
class SolverConfig:
    """Knobs for one solving run. Defaults follow the game rules."""
    min_length: Optional[int] = MIN_WORD_LENGTH
    max_length: Optional[int] = None
    short_word_points: int = SHORT_WORD_POINTS
    pangram_bonus: int = PANGRAM_BONUS
    workers: Optional[int] = None          # None -> os.cpu_count()
    parallel_threshold: int = 20_000       # below this, filter serially
    type_delay_ms: int = DEFAULT_TYPE_DELAY_MS
    countdown_s: int = 3

    @property
    def length_range(self):
        return (self.min_length, self.max_length)

    def resolved_workers(self) -> int:
        return self.workers or os.cpu_count() or 1

    def with_overrides(self, **kwargs) -> "SolverConfig":
        """Return a copy with every non-None keyword applied."""
        return replace(self, **{k: v for k, v in kwargs.items() if v is not None})
