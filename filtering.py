"""Prune a candidate pool with the facts earned by one real guess."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

from feedback import Absent, Fact, Right, Somewhere


def _claims(facts: Sequence[Fact]) -> Counter:
    """How many occurrences of each letter the Right/Somewhere facts vouch for."""
    return Counter(f.letter for f in facts if not isinstance(f, Absent))


def _holds(word: str, fact: Fact, claims: Counter) -> bool:
    if isinstance(fact, Right):
        return word[fact.position] == fact.letter
    if isinstance(fact, Somewhere):
        return fact.letter in word and all(
            word[p] != fact.letter for p in fact.impossible_positions
        )
    # Absent: nothing beyond the claimed copies, and never at this position.
    return (
        word[fact.position] != fact.letter
        and word.count(fact.letter) <= claims[fact.letter]
    )


def is_consistent(word: str, facts: Sequence[Fact]) -> bool:
    """True if *word* could be the target that produced *facts*."""
    claims = _claims(facts)
    return all(_holds(word, f, claims) for f in facts)


def filter_candidates(pool: Iterable[str], facts: Sequence[Fact]) -> list[str]:
    """Keep only candidates consistent with every fact, in pool order."""
    facts = list(facts)
    claims = _claims(facts)
    return [w for w in pool if all(_holds(w, f, claims) for f in facts)]
