"""Tests for the format command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from hms.cli import cli


class TestFormat:
    def test_human_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["format", "45026", "90000"])
        assert result.exit_code == 0
        assert "12:30:26" in result.output
        assert "25:00:00" in result.output

    def test_quiet_negative(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "format", "--", "-45026", "90000"])
        assert result.exit_code == 0
        assert result.output == "-12:30:26\n 25:00:00\n"

    def test_quiet_missing(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "format", "45026", "NA"])
        assert result.output == "12:30:26\n      NA\n"

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "format", "0.25"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "format"
        assert data["data"]["items"] == [{"input": "0.25", "seconds": 0.25, "hms": "0:00:00.25"}]

    def test_not_a_number_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["format", "abc"])
        assert result.exit_code == 1
        assert "Not a number of seconds" in result.output

    def test_requires_arguments(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["format"])
        assert result.exit_code == 2
