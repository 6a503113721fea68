"""Tests for the parse command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from hms.cli import cli


class TestParse:
    def test_parses(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "parse", "12:34:56", "1:02:03"])
        assert result.exit_code == 0
        assert result.output == "12:34:56\n 1:02:03\n"

    def test_unparsable_warns(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "12:34:56", "oops"])
        assert result.exit_code == 0
        assert "WARNING: 1 value(s) could not be parsed as hms: 'oops'" in result.output

    def test_json_carries_warnings(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "oops"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"]["items"][0]["seconds"] is None
        assert len(data["warnings"]) == 1

    def test_strict_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "--strict", "12:34:56", "oops"])
        assert result.exit_code == 1
        assert "could not be parsed" in result.output

    def test_strict_verbose_shows_code(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "parse", "--strict", "oops"])
        assert result.exit_code == 1
        assert "PARSE_ERROR" in result.output
