"""Tests for the deckbuilder-sim command line."""

import json
import re

from deckbuilder.cli import build_parser, main


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.seed == 0
        assert args.runs == 10
        assert args.max_combats == 10
        assert args.config is None
        assert not args.verbose

    def test_options(self):
        args = build_parser().parse_args(["--seed", "4", "--runs", "2", "--max-combats", "3", "-v"])
        assert (args.seed, args.runs, args.max_combats, args.verbose) == (4, 2, 3, True)


class TestMain:
    def test_runs_sessions(self, capsys):
        assert main(["--seed", "3", "--runs", "2", "--max-combats", "2"]) == 0

        out = capsys.readouterr().out
        lines = [line for line in out.splitlines() if line.startswith("seed=")]
        assert len(lines) == 2
        assert lines[0].startswith("seed=3 ")
        assert re.search(r"\d+/2 sessions survived, \d+ combats won in total", out)

    def test_config_file(self, tmp_path, capsys):
        path = tmp_path / "rules.json"
        path.write_text(json.dumps({"player_max_health": 1}))

        assert main(["--runs", "2", "--max-combats", "1", "--config", str(path)]) == 0

        out = capsys.readouterr().out
        hps = [int(hp) for hp in re.findall(r"hp=(\d+)", out)]
        assert len(hps) == 2
        assert all(hp <= 1 for hp in hps)
