import pytest

from feedback import compare
from puzzle_env import PuzzleEnv


def test_guess_answers_with_facts_and_records_history():
    env = PuzzleEnv(word_length=5)
    env.reset("apple")
    facts = env.guess("apply")
    assert facts == compare("apple", "apply")
    assert not env.is_solved()
    env.guess("apple")
    assert env.is_solved()
    assert [w for w, _ in env.history] == ["apply", "apple"]
    assert env.word_length == 5


def test_reset_clears_session():
    env = PuzzleEnv(word_length=3)
    env.reset("cat")
    env.guess("cat")
    env.reset("dog")
    assert env.history == []
    assert not env.is_solved()


def test_target_among_pool():
    env = PuzzleEnv(word_length=3)
    env.reset("cat")
    assert env.target_among(("dog", "cat"))
    assert not env.target_among(("dog",))


def test_misuse():
    env = PuzzleEnv(word_length=3)
    with pytest.raises(RuntimeError):
        env.guess("cat")
    with pytest.raises(RuntimeError):
        env.target_among(["cat"])
    with pytest.raises(ValueError):
        env.reset("horse")
    env.reset("cat")
    with pytest.raises(ValueError):
        env.guess("cats")
    with pytest.raises(ValueError):
        PuzzleEnv(word_length=0)
