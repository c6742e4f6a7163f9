"""
Plain-text table of ranked words.

    Word    | Points
    ------- | ------
    cabbage |      7
    ...
    ------- | ------
    Total words: 12
    Max possible points: 58
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

POINTS_WIDTH = 6
DICTIONARY_NOTE = "** Some of the words here may not exist in the Spelling Bee game dictionary **"


def table_lines(ranked: Sequence[Tuple[str, int]]) -> List[str]:
    width = max((len(w) for w, _ in ranked), default=0)
    rule = f"{'':-<{width}} | {'':-<{POINTS_WIDTH}}"

    lines = [f"{'Word':<{width}} | Points", rule]
    lines += [f"{w:<{width}} | {p:>{POINTS_WIDTH}}" for w, p in ranked]
    lines.append(rule)
    lines.append(f"Total words: {len(ranked)}")
    lines.append(f"Max possible points: {sum(p for _, p in ranked)}")
    return lines


def render_table(ranked: Sequence[Tuple[str, int]], *, note: bool = True) -> str:
    lines = table_lines(ranked)
    if note:
        lines += ["", DICTIONARY_NOTE]
    return "\n".join(lines)
