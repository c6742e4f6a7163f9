from .config import SolverConfig
from .engine import LetterSet, solve, rank_words
from .lexicon import Lexicon, load_lexicon

__all__ = ["SolverConfig", "LetterSet", "solve", "rank_words", "Lexicon", "load_lexicon"]
