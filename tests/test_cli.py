import json
from pathlib import Path

from share_consensus.cli import build_parser, main

FIXTURES = Path(__file__).parent / "fixtures"


def test_solve_prints_result(capsys):
    assert main(["solve", str(FIXTURES / "small_shares.json")]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["secret"] == "3"
    assert out["polynomial"] == {"a0": "3", "a1": "0", "a2": "1"}


def test_solve_writes_output_file(tmp_path, capsys):
    out_path = tmp_path / "nested" / "result.json"
    code = main(["--log-level", "INFO", "solve", str(FIXTURES / "small_shares.json"), "--output", str(out_path)])
    assert code == 0
    assert json.loads(out_path.read_text(encoding="utf-8"))["used_shares"][0] == ["1", "4"]
    assert "Saved result" in capsys.readouterr().out


def test_solve_reports_errors(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"keys": {"k": 1}, "1": {"base": "2", "value": "3"}}), encoding="utf-8")
    assert main(["solve", str(path)]) == 1
    assert "error:" in capsys.readouterr().err


def test_experiment_command(tmp_path, capsys):
    code = main(["experiment", "--k", "2", "--n", "3", "--trials", "1", "--output", str(tmp_path)])
    assert code == 0
    assert (tmp_path / "consensus_metrics.csv").exists()
    assert "[CONFIG] k=2, n=3" in capsys.readouterr().out


def test_parser_defaults():
    args = build_parser().parse_args(["experiment"])
    assert (args.k, args.n, args.trials, args.seed) == (3, 6, 20, 0)
    assert args.log_level == "WARNING"


def test_solve_reports_missing_file(tmp_path, capsys):
    assert main(["solve", str(tmp_path / "missing.json")]) == 1
    assert "error:" in capsys.readouterr().err
