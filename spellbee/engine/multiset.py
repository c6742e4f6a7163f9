"""
Multiset-consumption matching.

Each required letter must be matched to its own occurrence in the word; an
occurrence used once cannot satisfy a second requirement. With a
character -> remaining-count map this is a single pass over the required
letters instead of repeated positional deletion.

    consumes_all("bet", "e")   -> True
    consumes_all("bet", "ee")  -> False   (only one 'e' to consume)
    consumes_all("teet", "ee") -> True
"""

from collections import Counter
from typing import Iterable


def consumes_all(word: str, required: Iterable[str]) -> bool:
    """True if every letter in `required` finds a distinct unconsumed occurrence in `word`."""
    remaining = Counter(word)
    for ch in required:
        if remaining[ch] <= 0:
            return False
        remaining[ch] -= 1  # consume one instance
    return True


def uses_only(word: str, permitted: Iterable[str]) -> bool:
    """True if every character of `word` is in `permitted` (repeats allowed)."""
    return set(word).issubset(permitted)
