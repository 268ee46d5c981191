"""Feedback facts: what one guess reveals about the target, letter by letter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union


# Each guess position produces exactly one fact:
# Right     = letter sits at this position in the target
# Somewhere = letter is in the target, but not here
# Absent    = letter not present, or already consumed by Right/Somewhere


@dataclass(frozen=True)
class Right:
    position: int
    letter: str

    weight: ClassVar[float] = 2.0
    tile: ClassVar[str] = "\u2705"


@dataclass(frozen=True)
class Somewhere:
    position: int
    letter: str
    impossible_positions: tuple[int, ...]

    weight: ClassVar[float] = 1.0
    tile: ClassVar[str] = "\U0001f7e8"


@dataclass(frozen=True)
class Absent:
    position: int
    letter: str

    weight: ClassVar[float] = 0.0
    tile: ClassVar[str] = "\u2b1b"


Fact = Union[Right, Somewhere, Absent]


def compare(target: str, guess: str) -> list[Fact]:
    """Return the facts *guess* earns against *target*.

    Target positions are consumed first-come-first-served: exact matches
    win, then the leftmost unmatched guess letter claims the leftmost
    unconsumed target occurrence. Facts come out grouped by kind
    (Right, then Somewhere, then Absent), each group in position order.
    """
    n = len(target)
    if len(guess) != n:
        raise ValueError(
            f"guess length ({len(guess)}) != target length ({n})"
        )

    facts: list[Fact] = []
    guess_used = [False] * n
    target_used = [False] * n

    # Pass 1 - exact positions
    for i, (t, g) in enumerate(zip(target, guess)):
        if g == t:
            guess_used[i] = target_used[i] = True
            facts.append(Right(i, g))

    # Pass 2 - present elsewhere
    for i, g in enumerate(guess):
        if guess_used[i]:
            continue
        for j, t in enumerate(target):
            if not target_used[j] and t == g:
                guess_used[i] = target_used[j] = True
                facts.append(Somewhere(i, g, (i,)))
                break

    # Pass 3 - whatever is left
    for i, g in enumerate(guess):
        if not guess_used[i]:
            facts.append(Absent(i, g))

    return facts


def render(facts: list[Fact]) -> str:
    """Tile string for *facts* in position order, e.g. for console output."""
    return "".join(f.tile for f in sorted(facts, key=lambda f: f.position))
