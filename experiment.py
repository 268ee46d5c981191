#!/usr/bin/env python3
"""Run the solver against many targets and summarise how it fares."""

from __future__ import annotations

import argparse
import json
import math
import random
import sys
from pathlib import Path
from typing import Sequence

import numpy as np

from feedback import Fact, render
from lexicon import DEFAULT_WORDS, load_words
from reporter import Reporter
from solver import Exhausted, Found, Inconsistent, SolverConfig, solve

RESULTS_DIR = Path("results")


def _entropy_bits(n: int) -> float:
    return math.log2(n) if n > 1 else 0.0


class GameLog(Reporter):
    """Collect one solve step by step, optionally echoing it."""

    def __init__(self, verbose: bool = False) -> None:
        self.steps: list[dict] = []
        self._verbose = verbose
        self._pool_size = 0

    def attempt_started(self, attempt: int, pool_size: int) -> None:
        self._pool_size = pool_size

    def guessed(self, attempt: int, word: str, facts: Sequence[Fact]) -> None:
        tiles = render(list(facts))
        self.steps.append({
            "guess": word,
            "feedback": tiles,
            "pool_size": self._pool_size,
            "entropy_bits": round(_entropy_bits(self._pool_size), 3),
        })
        if self._verbose:
            print(
                f"  Guess {attempt}: {word}  {tiles}  "
                f"pool={self._pool_size}  H={_entropy_bits(self._pool_size):.2f} bits"
            )

    def inconsistent(self, guess: str, facts: Sequence[Fact]) -> None:
        if self._verbose:
            print(f"  !! target pruned by {list(facts)}", file=sys.stderr)


def run_experiment(
    vocabulary: list[str],
    num_games: int = 10,
    seed: int = 42,
    config: SolverConfig = SolverConfig(),
    verbose: bool = False,
) -> list[dict]:
    rng = random.Random(seed)
    targets = rng.sample(vocabulary, min(num_games, len(vocabulary)))

    logs: list[dict] = []
    for i, target in enumerate(targets, 1):
        if verbose:
            print(f"\n--- Game {i}/{len(targets)} | Target: {target} ---")

        game = GameLog(verbose=verbose)
        outcome = solve(vocabulary, target, config=config, reporter=game)

        if isinstance(outcome, Found):
            status = "found"
        elif isinstance(outcome, Exhausted):
            status = "exhausted"
        else:
            status = "inconsistent"
        result = {
            "game": i,
            "target": target,
            "status": status,
            "solved": isinstance(outcome, Found),
            "num_guesses": len(outcome.guesses),
            "steps": game.steps,
        }
        if isinstance(outcome, Inconsistent):
            result["facts"] = [repr(f) for f in outcome.facts]
        logs.append(result)

        if verbose:
            print(f"  -> {status.upper()} in {len(outcome.guesses)} guesses")

    return logs


def summarize(logs: list[dict]) -> dict:
    """Aggregate per-game logs into solve rate and guess-count statistics."""
    n = len(logs)
    if n == 0:
        return {"games": 0, "solved": 0, "solve_rate": 0.0,
                "inconsistent": 0, "mean_guesses": 0.0,
                "median_guesses": 0.0, "max_guesses": 0, "histogram": {}}
    guesses = np.array([g["num_guesses"] for g in logs])
    solved = sum(1 for g in logs if g["solved"])
    counts = np.bincount(guesses)
    return {
        "games": n,
        "solved": solved,
        "solve_rate": round(solved / n, 4),
        "inconsistent": sum(1 for g in logs if g["status"] == "inconsistent"),
        "mean_guesses": round(float(np.mean(guesses)), 3),
        "median_guesses": float(np.median(guesses)),
        "max_guesses": int(np.max(guesses)),
        "histogram": {int(k): int(c) for k, c in enumerate(counts) if c},
    }


def print_experiment_summary(summary: dict) -> None:
    n = summary["games"]
    if n == 0:
        print("\n=== no games played ===")
        return
    print(f"\n=== {n} games ===")
    print(f"  Solved: {summary['solved']}/{n} ({100 * summary['solve_rate']:.1f}%)")
    print(f"  Guesses: mean {summary['mean_guesses']:.2f}, "
          f"median {summary['median_guesses']:.1f}, max {summary['max_guesses']}")
    if summary["inconsistent"]:
        print(f"  Inconsistent: {summary['inconsistent']} (target pruned by its own facts)",
              file=sys.stderr)


def plot_distribution(logs: list[dict], path: Path) -> None:
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except ImportError:
        print("matplotlib not installed, skipping plot", file=sys.stderr)
        return

    guesses = [g["num_guesses"] for g in logs]
    mx = max(guesses) if guesses else 6
    bins = list(range(1, mx + 2))

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.hist(guesses, bins=bins, edgecolor="black", align="left")
    ax.set_title("Solver guess distribution")
    ax.set_xlabel("Guesses")
    ax.set_ylabel("Count")
    fig.tight_layout()

    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=150)
    plt.close(fig)
    print(f"Plot saved to {path}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Batch experiment for the word puzzle solver")
    parser.add_argument("--words", type=str, default=str(DEFAULT_WORDS), help="Path to word list")
    parser.add_argument("--length", type=int, default=5, help="Word length")
    parser.add_argument("--max-attempts", type=int, default=6, help="Guess budget per game")
    parser.add_argument("--num-games", type=int, default=10, help="Number of games")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--workers", type=int, default=1,
                        help="Processes used to score guesses (default: 1)")
    parser.add_argument("--verbose", action="store_true", help="Print per-game details")
    parser.add_argument("--plot", type=str, default=None, help="Save plot to this path")
    parser.add_argument("--json", type=str, default=None, help="Save results as JSON")
    args = parser.parse_args(argv)

    words = load_words(args.words, word_length=args.length)
    print(f"Vocabulary: {len(words)} words of length {args.length}")

    config = SolverConfig(max_attempts=args.max_attempts, workers=args.workers)
    logs = run_experiment(
        vocabulary=words,
        num_games=args.num_games,
        seed=args.seed,
        config=config,
        verbose=args.verbose,
    )

    summary = summarize(logs)
    print_experiment_summary(summary)

    plot_path = Path(args.plot) if args.plot else RESULTS_DIR / "experiment.png"
    plot_distribution(logs, plot_path)

    json_path = Path(args.json) if args.json else RESULTS_DIR / "experiment.json"
    json_path.parent.mkdir(parents=True, exist_ok=True)
    output = {
        "config": {
            "word_length": args.length,
            "max_attempts": args.max_attempts,
            "num_games": args.num_games,
            "seed": args.seed,
        },
        "summary": summary,
        "games": logs,
    }
    json_path.write_text(json.dumps(output, indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"JSON saved to {json_path}")


if __name__ == "__main__":
    main()
