"""
Keystroke automation: type every found word into the focused window.

For each word:
  1) press + release each character, pausing KEY_PRESS_DELAY_MS after both
  2) press Enter twice (the game sometimes drops the first submit); no
     pause after the final release
  3) wait the inter-word delay

The keyboard backend is anything with keyDown(key) / keyUp(key); pyautogui
is the default. It is imported lazily because it needs a display at import
time, which headless test runs do not have.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional, Protocol, Sequence

from tqdm import tqdm

from spellbee.config import KEY_PRESS_DELAY_MS, SUBMIT_DELAY_MS, DEFAULT_TYPE_DELAY_MS

logger = logging.getLogger(__name__)

SUBMIT_KEY = "enter"
SUBMIT_REPEATS = 2


class Keyboard(Protocol):
    def keyDown(self, key: str) -> None: ...

    def keyUp(self, key: str) -> None: ...


def default_keyboard() -> Keyboard:
    import pyautogui  # needs a display; keep out of module import

    pyautogui.PAUSE = 0  # timings below are explicit
    return pyautogui


def _tap(kb: Keyboard, key: str, delay_ms: int, sleep: Callable[[float], None],
         settle: bool = True) -> None:
    kb.keyDown(key)
    sleep(delay_ms / 1000.0)
    kb.keyUp(key)
    if settle:
        sleep(delay_ms / 1000.0)


def type_word(word: str, kb: Keyboard, *, sleep: Callable[[float], None] = time.sleep) -> None:
    for ch in word:
        _tap(kb, ch, KEY_PRESS_DELAY_MS, sleep)
    # last release runs straight into the inter-word delay
    for i in range(SUBMIT_REPEATS):
        _tap(kb, SUBMIT_KEY, SUBMIT_DELAY_MS, sleep, settle=i < SUBMIT_REPEATS - 1)


def type_words(
        words: Sequence[str],
        delay_ms: int = DEFAULT_TYPE_DELAY_MS,
        *,
        keyboard: Optional[Keyboard] = None,
        sleep: Callable[[float], None] = time.sleep,
        progress: bool = True,
) -> int:
    """
    Type `words` in order, waiting `delay_ms` after each one.
    Returns the number of words typed.
    """
    kb = keyboard if keyboard is not None else default_keyboard()
    it = tqdm(words, desc="Typing", unit="word", ncols=80) if progress else words

    typed = 0
    for word in it:
        if progress:
            it.set_postfix_str(word)
        type_word(word, kb, sleep=sleep)
        sleep(delay_ms / 1000.0)
        typed += 1

    logger.info("Typed %d words (delay %d ms)", typed, delay_ms)
    return typed
