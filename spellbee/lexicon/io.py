from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 word list into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist and UnicodeDecodeError
    if the bytes are not valid UTF-8.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def normalize_words(lines: Iterable[str]) -> List[str]:
    """
    Lowercase, strip and keep only alphabetic a–z tokens. Order is preserved
    and duplicates are dropped (first occurrence wins).
    """
    seen, out = set(), []
    for ln in lines:
        w = ln.strip().lower()
        if not w or not (w.isascii() and w.isalpha()):
            continue
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
