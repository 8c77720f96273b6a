"""Root CLI group for edugraph with global flags and command registration."""

from __future__ import annotations

import tomllib

import click
from pydantic import ValidationError

from edugraph import __version__
from edugraph.commands import register_commands
from edugraph.commands._base import EduGroup
from edugraph.commands._context import AppContext
from edugraph.config.settings import EduSettings


@click.group(cls=EduGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="edugraph")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with timing spans.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """edugraph — educational concept graph with guarded Yields relations."""
    try:
        settings = EduSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    except (ValidationError, tomllib.TOMLDecodeError) as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
