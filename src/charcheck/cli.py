"""Root CLI group for charcheck with global flags and command registration."""

from __future__ import annotations

import click

from charcheck import __version__
from charcheck.commands import register_commands
from charcheck.commands._context import AppContext
from charcheck.config.settings import CharcheckSettings
from charcheck.errors import CharcheckError


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="charcheck")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """charcheck — character-creation form validator."""
    try:
        settings = CharcheckSettings.from_cli(
            config_path=config_path,
            verbose=verbose,
            log_json=log_json,
        )
    except CharcheckError as exc:
        raise click.ClickException(str(exc)) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
