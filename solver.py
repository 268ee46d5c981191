"""Solver loop: guess, read the facts, prune, repeat.

Session state is an immutable :class:`Searching` value; :func:`step` maps it
to the next state, and :func:`solve` threads it until one of the terminal
outcomes (:class:`Found`, :class:`Exhausted`, :class:`Inconsistent`).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence, Union

from feedback import Fact
from filtering import filter_candidates
from puzzle_env import PuzzleEnv
from reporter import Reporter
from scoring import best_guess

MAX_ATTEMPTS = 6


class ConfigurationError(ValueError):
    """The dictionary and target cannot form a puzzle."""


@dataclass(frozen=True)
class SolverConfig:
    """Knobs for one solve.

    Attributes
    ----------
    max_attempts : int
        Guess budget; the solve fails once this many guesses missed.
    workers : int
        Processes used to score guesses (1 = serial).
    """

    max_attempts: int = MAX_ATTEMPTS
    workers: int = 1


# ------------------------------------------------------------------
# States
# ------------------------------------------------------------------

@dataclass(frozen=True)
class Searching:
    attempt: int
    pool: tuple[str, ...]
    guesses: tuple[str, ...] = ()
    last_guess: str | None = None
    last_facts: tuple[Fact, ...] = ()


@dataclass(frozen=True)
class Found:
    attempt: int
    word: str
    guesses: tuple[str, ...]


@dataclass(frozen=True)
class Exhausted:
    attempts: int
    guesses: tuple[str, ...]


@dataclass(frozen=True)
class Inconsistent:
    """The target was pruned by its own feedback: a logic defect."""
    attempt: int
    guess: str
    facts: tuple[Fact, ...]
    guesses: tuple[str, ...]


Outcome = Union[Found, Exhausted, Inconsistent]
State = Union[Searching, Found, Exhausted, Inconsistent]


# ------------------------------------------------------------------
# Transitions
# ------------------------------------------------------------------

def start(dictionary: Sequence[str], word_length: int) -> Searching:
    """Initial state over the whole dictionary.

    Raises
    ------
    ConfigurationError
        If the dictionary is empty or holds a word of another length.
    """
    if not dictionary:
        raise ConfigurationError("dictionary is empty")
    bad = [w for w in dictionary if len(w) != word_length]
    if bad:
        raise ConfigurationError(
            f"Words with wrong length (expected {word_length}): {bad[:5]}"
        )
    return Searching(attempt=1, pool=tuple(dictionary))


def step(
    state: Searching,
    env: PuzzleEnv,
    config: SolverConfig = SolverConfig(),
    reporter: Reporter | None = None,
) -> State:
    """Run one guess/feedback/filter cycle."""
    reporter = reporter or Reporter()

    if state.attempt > config.max_attempts:
        reporter.exhausted(config.max_attempts)
        return Exhausted(attempts=config.max_attempts, guesses=state.guesses)

    reporter.attempt_started(state.attempt, len(state.pool))
    guess = best_guess(state.pool, on_new_best=reporter.new_best,
                       workers=config.workers)
    facts = tuple(env.guess(guess))
    reporter.guessed(state.attempt, guess, facts)
    pool = tuple(filter_candidates(state.pool, facts))
    guesses = state.guesses + (guess,)

    if env.is_solved():
        reporter.found(state.attempt, guess)
        return Found(attempt=state.attempt, word=guess, guesses=guesses)
    if not env.target_among(pool):
        reporter.inconsistent(guess, facts)
        return Inconsistent(attempt=state.attempt, guess=guess,
                            facts=facts, guesses=guesses)

    return replace(state, attempt=state.attempt + 1, pool=pool,
                   guesses=guesses, last_guess=guess, last_facts=facts)


def solve(
    dictionary: Sequence[str],
    target: str,
    config: SolverConfig = SolverConfig(),
    reporter: Reporter | None = None,
) -> Outcome:
    """Solve the puzzle for *target* over *dictionary*.

    Raises
    ------
    ConfigurationError
        If the dictionary is empty or its words do not match the target's
        length.
    """
    if not target:
        raise ConfigurationError("target word is empty")
    state: State = start(dictionary, len(target))
    env = PuzzleEnv(word_length=len(target))
    env.reset(target)
    while isinstance(state, Searching):
        state = step(state, env, config, reporter)
    return state
