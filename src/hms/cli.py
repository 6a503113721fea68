"""Root CLI group for hms with global flags and command registration."""

from __future__ import annotations

import click

from hms import __version__
from hms.commands import register_commands
from hms.commands._base import HmsGroup
from hms.commands._context import AppContext
from hms.config.settings import HmsSettings
from hms.domain.errors import HmsError


@click.group(cls=HmsGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="hms")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Only print formatted values.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
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
    """hms — time-of-day conversions."""
    try:
        settings = HmsSettings.load(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    except HmsError as exc:
        raise click.ClickException(exc.user_message) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
