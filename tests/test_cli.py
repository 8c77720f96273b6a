"""Tests for the root edugraph CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from edugraph import __version__
from edugraph.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "edugraph" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_project")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.usefixtures("_isolated_project")
@pytest.mark.parametrize("group", ["unit", "result", "yields", "graph"])
def test_groups_registered(cli_runner: CliRunner, group: str) -> None:
    result = cli_runner.invoke(cli, [group, "--help"])
    assert result.exit_code == 0


@pytest.mark.usefixtures("_isolated_project")
def test_invalid_config_reported(cli_runner: CliRunner) -> None:
    with open("edugraph.toml", "w", encoding="utf-8") as fh:
        fh.write('[policy]\nallow = ["Unit->Nowhere"]\n')
    result = cli_runner.invoke(cli, ["graph", "show"])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


@pytest.mark.usefixtures("_isolated_project")
def test_no_database_for_help(cli_runner: CliRunner) -> None:
    cli_runner.invoke(cli, ["yields", "--help"])
    assert not Path(".edugraph").exists()
