#!/usr/bin/env python3
"""Solve one puzzle for the target word given on the command line."""

from __future__ import annotations

import argparse
import sys

from lexicon import DEFAULT_WORDS, load_words, normalize
from reporter import ConsoleReporter, Reporter
from solver import MAX_ATTEMPTS, Exhausted, Found, Outcome, SolverConfig, solve

EXIT_FOUND = 0
EXIT_EXHAUSTED = 1
EXIT_INCONSISTENT = 2
EXIT_CONFIG = 3


def exit_code(outcome: Outcome) -> int:
    if isinstance(outcome, Found):
        return EXIT_FOUND
    if isinstance(outcome, Exhausted):
        return EXIT_EXHAUSTED
    return EXIT_INCONSISTENT


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Fact-based word puzzle solver")
    parser.add_argument("target", type=str, help="The word to find")
    parser.add_argument("--words", type=str, default=str(DEFAULT_WORDS),
                        help=f"Path to word list (default: {DEFAULT_WORDS})")
    parser.add_argument("--max-attempts", type=int, default=MAX_ATTEMPTS,
                        help=f"Guess budget (default: {MAX_ATTEMPTS})")
    parser.add_argument("--workers", type=int, default=1,
                        help="Processes used to score guesses (default: 1)")
    parser.add_argument("--tiles", action="store_true",
                        help="Show feedback tiles next to each guess")
    parser.add_argument("--quiet", action="store_true",
                        help="Print nothing; report through the exit code only")
    args = parser.parse_args(argv)

    target = normalize(args.target)
    config = SolverConfig(max_attempts=args.max_attempts, workers=args.workers)
    reporter = Reporter() if args.quiet else ConsoleReporter(show_tiles=args.tiles)

    try:
        words = load_words(args.words, word_length=len(target))
        outcome = solve(words, target, config=config, reporter=reporter)
    except (FileNotFoundError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONFIG

    return exit_code(outcome)


if __name__ == "__main__":
    sys.exit(main())
