"""Progress reporting for the solver.

The solver never prints on its own; it calls a :class:`Reporter`. The base
class is silent, :class:`ConsoleReporter` narrates a solve on the terminal.
"""

from __future__ import annotations

import sys
from typing import Sequence

from feedback import Fact, render


class Reporter:
    """Observer interface for one solve.

    Every hook defaults to doing nothing, so subclasses override only what
    they care about.
    """

    def attempt_started(self, attempt: int, pool_size: int) -> None:
        """Called before scoring, with the number of remaining candidates."""

    def new_best(self, word: str, score: float) -> None:
        """Called each time scoring finds a strictly better guess."""

    def guessed(self, attempt: int, word: str, facts: Sequence[Fact]) -> None:
        """Called once the guess has been scored and answered."""

    def found(self, attempt: int, word: str) -> None:
        """Called when the guess equals the target."""

    def exhausted(self, attempts: int) -> None:
        """Called when the attempt budget runs out."""

    def inconsistent(self, guess: str, facts: Sequence[Fact]) -> None:
        """Called when the target was pruned by its own feedback."""


class ConsoleReporter(Reporter):
    """Print the solve to stdout; failures go to stderr.

    Parameters
    ----------
    show_progress : bool
        Also print every intermediate best guess while scoring.
    show_tiles : bool
        Print the feedback tiles next to each guess.
    """

    def __init__(self, show_progress: bool = True, show_tiles: bool = False) -> None:
        self._show_progress = show_progress
        self._show_tiles = show_tiles

    def attempt_started(self, attempt: int, pool_size: int) -> None:
        print(f"I have {pool_size} words to choose from.")

    def new_best(self, word: str, score: float) -> None:
        if self._show_progress:
            print(f"Best so far: {word}")

    def guessed(self, attempt: int, word: str, facts: Sequence[Fact]) -> None:
        if self._show_tiles:
            print(f"I guess {word}.  {render(list(facts))}")
        else:
            print(f"I guess {word}.")

    def found(self, attempt: int, word: str) -> None:
        print(f"I found it in {attempt}! It's {word}.")

    def exhausted(self, attempts: int) -> None:
        print("I failed!", file=sys.stderr)

    def inconsistent(self, guess: str, facts: Sequence[Fact]) -> None:
        print("It's not there?!", file=sys.stderr)
        print(f"Facts that ruled it out: {list(facts)}", file=sys.stderr)
