import pytest
from spellbee.engine import (
    filter_by_length, filter_any_letters, filter_all_letters,
    word_points, is_pangram, rank_words, total_points,
)
from spellbee.engine.multiset import consumes_all, uses_only

LETTERS = ("t", "e", "s", "y", "a", "b", "c")
WORDS = {"a", "at", "bet", "test", "tests", "testy", "beast", "zebra", "cabbage", "abstract"}


# --- multiset helper ---
@pytest.mark.parametrize("word,required,expected", [
    ("bet", "e", True),
    ("bet", "ee", False),
    ("teet", "ee", True),
    ("bet", "", True),
    ("", "a", False),
    ("cabbage", "abc", True),
    ("cabbage", "abcd", False),
])
def test_consumes_all(word, required, expected):
    assert consumes_all(word, required) is expected


def test_uses_only_allows_repeats():
    assert uses_only("tests", {"t", "e", "s"})
    assert not uses_only("testy", {"t", "e", "s"})


# --- length filter ---
def test_length_filter_identity_when_unbounded():
    assert filter_by_length(WORDS, (None, None)) is WORDS


@pytest.mark.parametrize("bounds,expected", [
    ((4, None), {"test", "tests", "testy", "beast", "zebra", "cabbage", "abstract"}),
    ((None, 2), {"a", "at"}),
    ((4, 5), {"test", "tests", "testy", "beast", "zebra"}),
    ((9, None), set()),
])
def test_length_filter_bounds_are_inclusive(bounds, expected):
    assert filter_by_length(WORDS, bounds) == expected


# --- letters-any filter ---
def test_any_letters_keeps_only_permitted_characters():
    kept = filter_any_letters(WORDS, LETTERS)
    assert kept == {"a", "at", "bet", "test", "tests", "testy", "beast"}
    for w in kept:
        assert set(w) <= set(LETTERS)


def test_any_letters_empty_inputs():
    assert filter_any_letters(set(), LETTERS) == set()
    assert filter_any_letters({"abc", ""}, []) == {""}


# --- letters-all filter ---
def test_all_letters_single_center_is_containment():
    assert filter_all_letters({"test", "beast", "cab"}, ["t"]) == {"test", "beast"}


def test_all_letters_does_not_reuse_an_occurrence():
    assert filter_all_letters({"bet"}, ["e", "e"]) == set()
    assert filter_all_letters({"beet", "bet"}, ["e", "e"]) == {"beet"}


def test_all_letters_empty_required_keeps_everything():
    assert filter_all_letters(WORDS, []) == WORDS


def test_filters_are_idempotent():
    once = filter_any_letters(WORDS, LETTERS)
    assert filter_any_letters(once, LETTERS) == once
    once = filter_all_letters(WORDS, ["t"])
    assert filter_all_letters(once, ["t"]) == once
    once = filter_by_length(WORDS, (4, None))
    assert filter_by_length(once, (4, None)) == once


# --- scoring ---
@pytest.mark.parametrize("word,letters,expected", [
    ("test", LETTERS, 1),
    ("tests", LETTERS, 5),
    ("testy", LETTERS, 5),
    ("cabbage", ("a", "b", "c", "d", "e", "f", "g"), 7),
    ("blanket", ("a", "b", "l", "n", "k", "e", "t"), 14),
    ("blank", ("a", "b", "l", "n", "k", "e", "t"), 5),
])
def test_word_points(word, letters, expected):
    assert word_points(word, letters) == expected


def test_pangram_needs_every_letter():
    assert is_pangram("blanket", "ablnket")
    assert not is_pangram("cabbage", "abcdefg")


def test_scoring_is_deterministic():
    scores = {word_points("abstract", LETTERS) for _ in range(5)}
    assert scores == {8}


def test_rank_words_sorts_points_desc_then_word():
    ranked = rank_words(["test", "sett", "testy", "stet", "tests"], LETTERS)
    assert ranked == [("tests", 5), ("testy", 5), ("sett", 1), ("stet", 1), ("test", 1)]
    assert all(isinstance(sw.points, int) for sw in ranked)


def test_rank_words_agrees_with_word_points():
    words = ["abstract", "beast", "test", "cabbage"]
    letters = ("a", "b", "c", "e", "g", "r", "t")
    ranked = dict(rank_words(words, letters))
    assert ranked == {w: word_points(w, letters) for w in words}


def test_rank_words_empty():
    assert rank_words([], LETTERS) == []
    assert total_points([]) == 0


def test_base_points_scalar_and_array_share_one_rule():
    import numpy as np
    from spellbee.engine.scoring import base_points
    assert int(base_points(4)) == 1 and int(base_points(6)) == 6
    assert base_points(np.array([4, 5, 9])).tolist() == [1, 5, 9]
