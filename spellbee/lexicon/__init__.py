from .loader import Lexicon, LexiconLoadError, load_lexicon, default_wordlist_path
from .validator import validate_wordlist, pretty_summary
from .io import read_lines, write_lines, normalize_words

__all__ = [
    "Lexicon", "LexiconLoadError", "load_lexicon", "default_wordlist_path",
    "validate_wordlist", "pretty_summary",
]
