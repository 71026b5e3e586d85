"""Tests for the root nowctl CLI."""

from click.testing import CliRunner

from nowctl import __version__
from nowctl.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "nowctl" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_global_flags_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(
        cli, ["--debug", "--log-json", "-t", "tok", "-T", "team_1", "-A", "http://x", "--version"]
    )
    assert result.exit_code == 0


def test_domains_group_registered(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["domains", "--help"])
    assert result.exit_code == 0
    assert "add" in result.output
