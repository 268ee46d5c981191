"""Puzzle environment: the only place the target word lives."""

from __future__ import annotations

from typing import Iterable

from feedback import Fact, compare


class PuzzleEnv:
    """A single puzzle session, answering guesses with facts.

    Parameters
    ----------
    word_length : int
        Length every guess and the target must have.
    """

    def __init__(self, word_length: int) -> None:
        if word_length < 1:
            raise ValueError(f"word_length must be positive, got {word_length}")
        self._word_length = word_length

        # Game state (set by reset)
        self._target: str | None = None
        self._history: list[tuple[str, list[Fact]]] = []
        self._solved = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def reset(self, target: str) -> None:
        """Start a new session against *target*."""
        if len(target) != self._word_length:
            raise ValueError(
                f"target length ({len(target)}) != word_length ({self._word_length})"
            )
        self._target = target
        self._history = []
        self._solved = False

    def guess(self, word: str) -> list[Fact]:
        """Submit a guess and receive its facts.

        Raises
        ------
        RuntimeError
            If no target has been set.
        ValueError
            If *word* has the wrong length.
        """
        if self._target is None:
            raise RuntimeError("Call reset() before guessing")
        if len(word) != self._word_length:
            raise ValueError(
                f"Guess length ({len(word)}) != word_length ({self._word_length})"
            )

        facts = compare(self._target, word)
        self._history.append((word, facts))
        if word == self._target:
            self._solved = True
        return facts

    def target_among(self, pool: Iterable[str]) -> bool:
        """Whether the target is still in *pool*, without revealing it."""
        if self._target is None:
            raise RuntimeError("Call reset() before checking a pool")
        return self._target in pool

    def is_solved(self) -> bool:
        return self._solved

    @property
    def history(self) -> list[tuple[str, list[Fact]]]:
        return list(self._history)

    @property
    def word_length(self) -> int:
        return self._word_length
