import pytest

from feedback import compare
from puzzle_env import PuzzleEnv
from solver import (
    ConfigurationError,
    Exhausted,
    Found,
    Inconsistent,
    Searching,
    SolverConfig,
    solve,
    start,
    step,
)

RHYMES = ["bat", "cat", "hat", "mat", "pat", "rat", "sat", "vat"]


class LyingEnv(PuzzleEnv):
    """Answers every guess as if the target were another word."""

    def __init__(self, word_length, decoy):
        super().__init__(word_length)
        self._decoy = decoy

    def guess(self, word):
        super().guess(word)
        return compare(self._decoy, word)


def _env(target):
    env = PuzzleEnv(word_length=len(target))
    env.reset(target)
    return env


def test_three_word_dictionary_found_in_two():
    outcome = solve(["cat", "dog", "car"], "car")
    assert outcome == Found(attempt=2, word="car", guesses=("cat", "car"))


def test_first_guess_can_win():
    outcome = solve(["cat", "dog", "car"], "cat")
    assert isinstance(outcome, Found)
    assert outcome.attempt == 1


def test_budget_runs_out_on_seventh_entry():
    env = _env("sat")
    state = start(RHYMES, 3)
    for attempt in range(1, 7):
        assert isinstance(state, Searching)
        assert state.attempt == attempt
        state = step(state, env)
    assert isinstance(state, Searching)
    assert state.attempt == 7
    state = step(state, env)
    assert state == Exhausted(attempts=6, guesses=("bat", "cat", "hat", "mat", "pat", "rat"))


def test_smaller_budget():
    outcome = solve(RHYMES, "sat", config=SolverConfig(max_attempts=2))
    assert outcome == Exhausted(attempts=2, guesses=("bat", "cat"))


def test_step_shrinks_pool_and_records_guess():
    state = start(["cat", "dog", "car"], 3)
    nxt = step(state, _env("car"))
    assert nxt == Searching(
        attempt=2,
        pool=("car",),
        guesses=("cat",),
        last_guess="cat",
        last_facts=tuple(compare("car", "cat")),
    )
    assert state.pool == ("cat", "dog", "car")


def test_pruned_target_is_reported_as_inconsistent():
    env = LyingEnv(3, decoy="dog")
    env.reset("car")
    state = step(start(["cat", "dog", "car"], 3), env)
    assert isinstance(state, Inconsistent)
    assert state.guess == "cat"
    assert state.facts == tuple(compare("dog", "cat"))


def test_empty_dictionary_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        solve([], "car")


def test_length_mismatch_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        solve(["cat", "dog"], "cart")
    with pytest.raises(ConfigurationError):
        start(["cat", "cart"], 3)


def test_target_outside_dictionary_is_never_found():
    outcome = solve(["cat", "dog"], "cow")
    assert isinstance(outcome, Inconsistent)


def test_parallel_solve_matches_serial():
    serial = solve(RHYMES, "vat")
    parallel = solve(RHYMES, "vat", config=SolverConfig(workers=2))
    assert parallel == serial
