from pathlib import Path

import pytest

from spellbee.lexicon import (
    Lexicon, LexiconLoadError, load_lexicon, default_wordlist_path,
    validate_wordlist, pretty_summary,
)
from spellbee.lexicon.loader import DEFAULT_WORDLIST


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_from_words_normalizes_and_dedupes():
    lex = Lexicon.from_words(["Apple", "apple", " pear ", "", "don't"])
    assert lex.words == frozenset({"apple", "pear"})
    assert len(lex) == 2 and "pear" in lex


def test_load_lexicon(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["test", "tests", "TEST", "", "x-ray"])
    lex = load_lexicon(p)
    assert set(lex) == {"test", "tests"}
    assert lex.source == str(p)


def test_load_lexicon_missing_file(tmp_path: Path):
    with pytest.raises(LexiconLoadError, match="not found"):
        load_lexicon(tmp_path / "nope.txt")


def test_load_lexicon_empty_file(tmp_path: Path):
    p = tmp_path / "empty.txt"
    p.write_text("\n\n", encoding="utf-8")
    with pytest.raises(LexiconLoadError, match="0 usable words"):
        load_lexicon(p)


def test_load_lexicon_not_utf8(tmp_path: Path):
    p = tmp_path / "bad.txt"
    p.write_bytes(b"test\n\xff\xfe\xfa\n")
    with pytest.raises(LexiconLoadError, match="unreadable"):
        load_lexicon(p)


def test_bundled_wordlist_loads():
    lex = load_lexicon(DEFAULT_WORDLIST)
    assert len(lex) > 1000
    assert "cabbage" in lex


def test_wordlist_env_override(tmp_path: Path, monkeypatch):
    p = tmp_path / "mine.txt"
    _write(p, ["honey"])
    monkeypatch.setenv("SPELLBEE_WORDLIST", str(p))
    assert default_wordlist_path() == p
    assert set(load_lexicon()) == {"honey"}


def test_validate_wordlist_happy_path(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["test", "tests", "cat"])
    rep = validate_wordlist(str(p))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["playable_count"] == 2
    s = pretty_summary(rep)
    assert "words=3" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("test\nTest\n???\n\ntest\n", encoding="utf-8")
    rep = validate_wordlist(str(p))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_missing(tmp_path: Path):
    rep = validate_wordlist(str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["passed"] is False
    assert "FAIL" in pretty_summary(rep)
