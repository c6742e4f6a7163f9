import csv
import json
from pathlib import Path

from spellbee.presenters import render_table, table_lines, type_words, write_csv, write_manifest, timestamp_id
from spellbee.presenters.table import DICTIONARY_NOTE


class FakeKeyboard:
    def __init__(self):
        self.events = []

    def keyDown(self, key):
        self.events.append(("down", key))

    def keyUp(self, key):
        self.events.append(("up", key))


def test_table_layout():
    lines = table_lines([("cabbage", 7), ("test", 1)])
    assert lines == [
        "Word    | Points",
        "------- | ------",
        "cabbage |      7",
        "test    |      1",
        "------- | ------",
        "Total words: 2",
        "Max possible points: 8",
    ]


def test_table_empty_totals():
    out = render_table([])
    assert "Total words: 0" in out
    assert "Max possible points: 0" in out
    assert out.endswith(DICTIONARY_NOTE)


def test_type_words_sequence_and_timing():
    kb = FakeKeyboard()
    sleeps = []
    n = type_words(["ab"], 100, keyboard=kb, sleep=sleeps.append, progress=False)
    assert n == 1
    assert kb.events == [
        ("down", "a"), ("up", "a"), ("down", "b"), ("up", "b"),
        ("down", "enter"), ("up", "enter"), ("down", "enter"), ("up", "enter"),
    ]
    assert sleeps == [0.01] * 4 + [0.025] * 3 + [0.1]


def test_type_words_with_progress_bar():
    kb = FakeKeyboard()
    assert type_words(["ab", "cd"], 0, keyboard=kb, sleep=lambda s: None) == 2
    assert kb.events.count(("down", "enter")) == 4


def test_write_csv_and_manifest(tmp_path: Path):
    letters = ("a", "b", "l", "n", "k", "e", "t")
    csv_path = write_csv([("blanket", 14), ("blank", 5)], letters, str(tmp_path / "out" / "r.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0] == {"rank": "1", "word": "blanket", "points": "14", "pangram": "True"}
    assert rows[1]["pangram"] == "False"

    m = write_manifest({"run_id": timestamp_id(), "total": 19}, str(tmp_path / "m.json"))
    data = json.loads(Path(m).read_text(encoding="utf-8"))
    assert data["total"] == 19 and data["run_id"].endswith("Z")
