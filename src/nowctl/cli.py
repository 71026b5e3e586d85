"""Root CLI group for nowctl with global flags and command registration."""

from __future__ import annotations

import click

from nowctl import __version__
from nowctl.commands import register_commands
from nowctl.commands._context import AppContext
from nowctl.config.settings import NowSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="nowctl")
@click.option("-d", "--debug", is_flag=True, help="Trace API requests to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("-t", "--token", default=None, help="API token (overrides config).")
@click.option("-T", "--team", "current_team", default=None, help="Team id to act as.")
@click.option("-A", "--api", "api_url", default=None, help="API base URL.")
@click.pass_context
def cli(
    ctx: click.Context,
    debug: bool,
    log_json: bool,
    config_path: str | None,
    token: str | None,
    current_team: str | None,
    api_url: str | None,
) -> None:
    """nowctl — deployment platform CLI utility."""
    if isinstance(ctx.obj, AppContext):
        # Pre-built by an embedding caller.
        if debug:
            ctx.obj.enable_debug()
    else:
        settings = NowSettings.from_cli(
            config_path=config_path,
            api_url=api_url,
            token=token,
            current_team=current_team,
            debug=debug or None,
            log_json=log_json or None,
        )
        ctx.obj = AppContext(settings)
    ctx.call_on_close(ctx.obj.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
