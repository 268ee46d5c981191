"""Coverage scoring: prefer guesses whose letters land right or near-right
across the remaining candidates.

A cheap stand-in for expected information gain. Each candidate is treated
as a hypothetical target and the weights of the facts the guess would earn
against it are summed (Absent 0, Somewhere 1, Right 2).
"""

from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Callable, Sequence

from feedback import compare

# Observer called as on_new_best(word, score) each time the scan finds a
# strictly better guess.
BestCallback = Callable[[str, float], None]


def score(guess: str, pool: Sequence[str]) -> float:
    """Total fact weight *guess* earns over every word in *pool*."""
    total = 0.0
    for word in pool:
        for fact in compare(word, guess):
            total += fact.weight
    return total


def _score_chunk(guesses: Sequence[str], pool: Sequence[str]) -> list[float]:
    """Score a slice of guesses. Executed in a subprocess."""
    return [score(g, pool) for g in guesses]


def _parallel_scores(pool: Sequence[str], workers: int) -> list[float]:
    size = max(1, -(-len(pool) // workers))
    chunks = [pool[k:k + size] for k in range(0, len(pool), size)]
    results: dict[int, list[float]] = {}
    with ProcessPoolExecutor(max_workers=workers) as executor:
        futures = {
            executor.submit(_score_chunk, chunk, pool): idx
            for idx, chunk in enumerate(chunks)
        }
        for future in as_completed(futures):
            results[futures[future]] = future.result()
    scores: list[float] = []
    for idx in range(len(chunks)):
        scores.extend(results[idx])
    return scores


def best_guess(
    pool: Sequence[str],
    on_new_best: BestCallback | None = None,
    workers: int = 1,
) -> str:
    """Return the highest-scoring guess in *pool*.

    Ties keep the earliest word in pool order. With ``workers > 1`` the
    scores are computed across processes, then reduced in pool order, so the
    result and the observer calls match the serial scan.

    Raises
    ------
    ValueError
        If *pool* is empty.
    """
    if not pool:
        raise ValueError("cannot pick a guess from an empty pool")

    pool = tuple(pool)
    if workers > 1 and len(pool) > 1:
        scores = _parallel_scores(pool, workers)
    else:
        scores = (score(g, pool) for g in pool)

    best_word = None
    best_score = -1.0
    for word, s in zip(pool, scores):
        if s > best_score:
            best_score = s
            best_word = word
            if on_new_best is not None:
                on_new_best(word, s)
    return best_word
