import json

from experiment import main, run_experiment, summarize

RHYMES = ["bat", "cat", "hat", "mat", "pat", "rat", "sat", "vat"]


def test_run_experiment_logs_each_game():
    logs = run_experiment(RHYMES, num_games=len(RHYMES), seed=1)
    assert sorted(g["target"] for g in logs) == sorted(RHYMES)
    by_target = {g["target"]: g for g in logs}

    first = by_target["bat"]
    assert first["status"] == "found"
    assert first["num_guesses"] == 1
    assert first["steps"][0]["pool_size"] == 8
    assert first["steps"][0]["entropy_bits"] == 3.0

    last = by_target["vat"]
    assert last["status"] == "exhausted"
    assert not last["solved"]
    assert [s["guess"] for s in last["steps"]] == RHYMES[:6]


def test_summarize():
    logs = [
        {"num_guesses": 1, "solved": True, "status": "found"},
        {"num_guesses": 3, "solved": True, "status": "found"},
        {"num_guesses": 3, "solved": True, "status": "found"},
        {"num_guesses": 6, "solved": False, "status": "exhausted"},
    ]
    summary = summarize(logs)
    assert summary["games"] == 4
    assert summary["solved"] == 3
    assert summary["solve_rate"] == 0.75
    assert summary["inconsistent"] == 0
    assert summary["mean_guesses"] == 3.25
    assert summary["median_guesses"] == 3.0
    assert summary["max_guesses"] == 6
    assert summary["histogram"] == {1: 1, 3: 2, 6: 1}


def test_summarize_empty():
    assert summarize([])["games"] == 0


def test_main_writes_json(tmp_path, capsys):
    words = tmp_path / "words.txt"
    words.write_text(" ".join(RHYMES), encoding="utf-8")
    out = tmp_path / "out.json"
    main([
        "--words", str(words), "--length", "3", "--num-games", "4",
        "--json", str(out), "--plot", str(tmp_path / "hist.png"),
    ])
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["summary"]["games"] == 4
    assert len(data["games"]) == 4
    assert "=== 4 games ===" in capsys.readouterr().out
