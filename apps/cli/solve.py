# apps/cli/solve.py
"""
CLI entry point for the Spelling Bee solver.

This script:
  1) Loads the word list once (prints its size and the 4+ letter count).
  2) Prompts for the center letter and the six other letters
     (or takes them from --center/--letters and runs once).
  3) Solves the puzzle and prints the ranked table with totals.
  4) Optionally auto-types the words into the game window, then restarts.

Usage:
    python -m apps.cli.solve
    python -m apps.cli.solve --center t --letters esyabc --outdir reports
"""

from __future__ import annotations

import argparse
import logging
import shutil
import time
from pathlib import Path
from typing import Callable, List, Optional

from spellbee.config import SolverConfig, CENTER_COUNT, OTHER_COUNT
from spellbee.engine import LetterSet, LetterSetError, normalize_letters, solve
from spellbee.engine.pipeline import PuzzleResult
from spellbee.lexicon import (
    Lexicon, LexiconLoadError, load_lexicon, default_wordlist_path,
    validate_wordlist, pretty_summary,
)
from spellbee.engine.filters import filter_by_length
from spellbee.presenters.typist import Keyboard
from spellbee.presenters import render_table, type_words, write_csv, write_manifest, timestamp_id

InputFn = Callable[[str], str]

CLEAR_SCREEN = "\033[2J\033[H"


def _rule() -> str:
    width = shutil.get_terminal_size((64, 20)).columns
    return f"\n{'-' * width}\n"


def _length_phrase(cfg: SolverConfig) -> str:
    lo, hi = cfg.length_range
    if lo is not None and hi is not None:
        return f"with {lo} to {hi} letters"
    if lo is not None:
        return f"with {lo} or more letters"
    if hi is not None:
        return f"with at most {hi} letters"
    return "of any length"


def prompt_letters(
        prompt: str,
        count: int,
        *,
        exclude: List[str] = (),
        input_fn: InputFn = input,
) -> List[str]:
    """
    Ask until the answer boils down to exactly `count` unique letters
    (not in `exclude`). Commas, spaces or nothing between letters all work.
    """
    while True:
        letters = normalize_letters(input_fn(prompt), exclude=exclude, unique=True)
        if len(letters) == count:
            return letters
        warn = f"Please enter exactly {count} unique letters in the English alphabet"
        if exclude:
            warn += f" excluding [ {', '.join(exclude)} ]"
        print(warn)


def prompt_bool(prompt: str, *, input_fn: InputFn = input) -> bool:
    while True:
        answer = input_fn(prompt).strip().lower()
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
        print("Please enter 'yes' or 'no'")


def read_letter_set(input_fn: InputFn = input) -> LetterSet:
    center = prompt_letters("Enter the center letter: ", CENTER_COUNT, input_fn=input_fn)
    others = prompt_letters(
        f"Enter the other {OTHER_COUNT} letters, separated by commas: ",
        OTHER_COUNT, exclude=center, input_fn=input_fn,
    )
    return LetterSet(center=center[0], others=tuple(others))


def print_result(result: PuzzleResult) -> None:
    letters = result.letters
    print(f"Center letter: {letters.center}")
    print(f"Other letters: [ {', '.join(letters.others)} ]")
    print()
    print(f"> There are {result.any_count} words that can be made from any of the 7 letters")
    print(f"> From there, there are {result.all_count} possible words that contain the center letter")
    print()
    print(render_table(result.ranked))


def export_result(result: PuzzleResult, outdir: str, *, wordlist: dict, config: dict) -> List[str]:
    run_id = timestamp_id()
    out = Path(outdir)
    csv_path = write_csv(result.ranked, result.letters.all_letters, str(out / f"solve_{run_id}.csv"))
    manifest_path = write_manifest({
        "run_id": run_id,
        "config": config,
        "wordlist": wordlist,
        "result": result.as_dict(),
    }, str(out / f"solve_{run_id}_manifest.json"))
    return [csv_path, manifest_path]


def auto_type(result: PuzzleResult, cfg: SolverConfig, *, input_fn: InputFn = input,
              sleep: Callable[[float], None] = time.sleep,
              keyboard: Optional[Keyboard] = None) -> None:
    print("\nReady the game screen. After that, press Enter to continue this script, "
          "then immediately click to switch focus to the game screen.")
    print(f"The script will count down for {cfg.countdown_s} seconds and start typing the words.\n")
    input_fn("Press Enter to continue...")

    for i in range(cfg.countdown_s, 0, -1):
        print(f"Starting in {i}...")
        sleep(1)

    print("Auto-typing the words...")
    type_words([sw.word for sw in result.ranked], cfg.type_delay_ms,
               keyboard=keyboard, sleep=sleep)
    print("Auto-typing complete.")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="spellbee: Spelling Bee solver")
    ap.add_argument("--wordlist", help=f"newline-delimited word list (default: {default_wordlist_path()})")
    ap.add_argument("--center", help="center letter (skips the prompts together with --letters)")
    ap.add_argument("--letters", help="the other 6 letters, e.g. 'e,s,y,a,b,c'")
    ap.add_argument("--min-length", type=int, help="minimum word length (default: 4)")
    ap.add_argument("--workers", type=int, help="worker processes for filtering (default: CPU count)")
    ap.add_argument("--delay-ms", type=int, help="pause between auto-typed words (default: 750)")
    ap.add_argument("--no-type", action="store_true", help="never offer to auto-type the words")
    ap.add_argument("--once", action="store_true", help="solve one puzzle and exit")
    ap.add_argument("--outdir", help="also write a CSV + JSON manifest of each solve here")
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    return ap


def main(argv: Optional[List[str]] = None, *, input_fn: InputFn = input,
         keyboard: Optional[Keyboard] = None,
         sleep: Callable[[float], None] = time.sleep) -> int:
    """
    Parse CLI args, load the lexicon, then run the prompt/solve/type loop.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    cfg = SolverConfig().with_overrides(
        min_length=args.min_length, workers=args.workers, type_delay_ms=args.delay_ms,
    )

    # 1) Load the lexicon once; nothing works without it
    path = args.wordlist or str(default_wordlist_path())
    try:
        lexicon: Lexicon = load_lexicon(path)
    except LexiconLoadError as e:
        raise SystemExit(f"error: {e}")
    wordlist_rep = validate_wordlist(path, min_length=cfg.min_length or 0)
    if args.verbose:
        print(pretty_summary(wordlist_rep))

    print(f"Dictionary loaded with {len(lexicon)} words")
    playable = filter_by_length(lexicon.words, cfg.length_range,
                                workers=cfg.resolved_workers(), threshold=cfg.parallel_threshold)
    print(f"There are {len(playable)} words {_length_phrase(cfg)}")

    # 2) Letters from flags -> single non-interactive run
    fixed: Optional[LetterSet] = None
    if args.center is not None or args.letters is not None:
        try:
            fixed = LetterSet.parse(args.center or "", args.letters or "")
        except LetterSetError as e:
            raise SystemExit(f"error: {e}")

    try:
        while True:
            print(_rule())
            letters = fixed or read_letter_set(input_fn)
            print(_rule())

            result = solve(lexicon, letters, cfg)
            print_result(result)

            if args.outdir:
                for p in export_result(result, args.outdir, wordlist=wordlist_rep, config=vars(args)):
                    print(f"Wrote: {p}")

            if fixed is not None or args.once:
                return 0

            print(_rule())
            if not args.no_type and prompt_bool("Do you want to auto-type the words? (y/n): ",
                                                input_fn=input_fn):
                auto_type(result, cfg, input_fn=input_fn, sleep=sleep, keyboard=keyboard)
                print(_rule())
                input_fn("Press Enter to restart the game, or (Ctrl+C) to exit...")

            print(CLEAR_SCREEN, end="")
            print("Restarting the game...\n")
    except (KeyboardInterrupt, EOFError):
        print("\nBye.")
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
