"""Integration tests for the loguniform command line."""

from __future__ import annotations

import math

import pytest

from loguniform import cli


def _lines(text: str) -> list[str]:
    return text.splitlines()


class TestDefaultRun:
    def test_prints_100_samples(self, capsys):
        assert cli.main([]) == 0
        captured = capsys.readouterr()
        lines = _lines(captured.out)
        assert len(lines) == 100
        low, high = math.exp(1.5), math.exp(20.06)
        assert all(low <= float(line) <= high for line in lines)
        assert captured.err == ""

    def test_output_is_newline_terminated(self, capsys):
        cli.main(["--count", "3", "--seed", "1"])
        assert capsys.readouterr().out.endswith("\n")


class TestOptions:
    def test_seed_reproducible(self, capsys):
        cli.main(["--seed", "42"])
        first = capsys.readouterr().out
        cli.main(["--seed", "42"])
        second = capsys.readouterr().out
        assert first == second

    def test_matches_library(self, capsys):
        from loguniform import generate_samples

        cli.main(["--min", "1.0", "--max", "2.0", "-n", "5", "-s", "3"])
        printed = [float(line) for line in _lines(capsys.readouterr().out)]
        assert tuple(printed) == generate_samples(1.0, 2.0, 5, 3)

    def test_config_file(self, tmp_path, capsys):
        path = tmp_path / "loguniform.toml"
        path.write_text("[sampler]\ncount = 4\nseed = 5\n")
        assert cli.main(["--config", str(path)]) == 0
        assert len(_lines(capsys.readouterr().out)) == 4

    def test_cli_overrides_config(self, tmp_path, capsys):
        path = tmp_path / "loguniform.toml"
        path.write_text("[sampler]\ncount = 4\nseed = 5\n")
        cli.main(["--config", str(path), "--count", "2"])
        assert len(_lines(capsys.readouterr().out)) == 2


class TestErrors:
    def test_invalid_min(self, capsys):
        assert cli.main(["--min", "0"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        err = _lines(captured.err)
        assert len(err) == 1
        assert err[0].startswith("Error: minimum value parameter")

    def test_invalid_max(self, capsys):
        assert cli.main(["--max", "-1"]) == 1
        assert "maximum value parameter" in capsys.readouterr().err

    def test_invalid_seed(self, capsys):
        assert cli.main(["--seed", "-1"]) == 1
        assert "seed must be in range" in capsys.readouterr().err

    def test_missing_config(self, tmp_path, capsys):
        assert cli.main(["--config", str(tmp_path / "missing.toml")]) == 1
        assert "Settings file not found" in capsys.readouterr().err

    def test_unclassified_failure(self, monkeypatch, capsys):
        def boom(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(cli, "generate_samples", boom)
        assert cli.main(["--seed", "1"]) == 1
        captured = capsys.readouterr()
        assert captured.err.strip() == "Error: uncaught exception detected"

    def test_bad_argument_exits_2(self):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--count", "many"])
        assert exc_info.value.code == 2
