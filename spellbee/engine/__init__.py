from .letters import (
    LetterSet, LetterSetError, InvalidLetterSetSize, InvalidLetter, DuplicateLetter,
    normalize_letters,
)
from .filters import filter_by_length, filter_any_letters, filter_all_letters
from .scoring import ScoredWord, word_points, is_pangram, rank_words, total_points
from .pipeline import PuzzleResult, solve

__all__ = [
    "LetterSet", "LetterSetError", "InvalidLetterSetSize", "InvalidLetter", "DuplicateLetter",
    "normalize_letters",
    "filter_by_length", "filter_any_letters", "filter_all_letters",
    "ScoredWord", "word_points", "is_pangram", "rank_words", "total_points",
    "PuzzleResult", "solve",
]
