"""CLI entry point — timeboard command with countdown options and config subcommand."""

from __future__ import annotations

import click
from rich.console import Console

from timeboard import __version__
from timeboard.config import CONFIG_PATH, init_config_if_missing, load_config
from timeboard.logging_setup import setup_logging
from timeboard.timekeeper import parse_duration, parse_time_of_day
from timeboard.units import ParseError

console = Console(highlight=False)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _countdown_request(until: str | None, countdown: str | None) -> tuple[bool, str] | None:
    """Validate --until / --countdown and return (by_end_time, text), or None if unset."""
    if until and countdown:
        raise click.UsageError("Use either --until or --countdown, not both.")
    if until:
        try:
            parse_time_of_day(until)
        except ParseError as exc:
            raise click.BadParameter(str(exc), param_hint="--until") from exc
        return True, until
    if countdown:
        try:
            parse_duration(countdown)
        except ParseError as exc:
            raise click.BadParameter(str(exc), param_hint="--countdown") from exc
        return False, countdown
    return None


# ---------------------------------------------------------------------------
# Main command group
# ---------------------------------------------------------------------------

@click.group(invoke_without_command=True)
@click.option(
    "-u", "--until",
    type=str,
    default=None,
    help="Start in countdown mode, counting down to this time of day (24h HH:MM).",
)
@click.option(
    "-c", "--countdown",
    type=str,
    default=None,
    help="Start in countdown mode with this duration (minutes, H:MM or H:MM:SS).",
)
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging.")
@click.version_option(__version__, prog_name="timeboard")
@click.pass_context
def main(
    ctx: click.Context,
    until: str | None,
    countdown: str | None,
    debug: bool,
) -> None:
    """timeboard — terminal clock, countdown and note board."""
    setup_logging(debug=debug)

    if ctx.invoked_subcommand is not None:
        return

    request = _countdown_request(until, countdown)

    from timeboard.app import TimeboardApp

    app = TimeboardApp(cfg=load_config())
    if request is not None:
        app.start_countdown(*request)
    app.run()


# ---------------------------------------------------------------------------
# config subcommand
# ---------------------------------------------------------------------------

@main.command()
@click.option("--show", is_flag=True, help="Show current config values.")
@click.option("--init", "init_", is_flag=True, help="Write a default config file if none exists.")
def config(show: bool, init_: bool) -> None:
    """Show or create configuration."""
    if init_:
        if init_config_if_missing():
            console.print(f"  Created default config at [dim]{CONFIG_PATH}[/dim]")
        else:
            console.print(f"  Config already exists at [dim]{CONFIG_PATH}[/dim]")
    if show:
        cfg = load_config()
        for key, val in cfg.items():
            console.print(f"  [bold]{key}:[/bold] {val}")
    elif not init_:
        console.print(f"  Config file: [dim]{CONFIG_PATH}[/dim]")
        console.print("  Edit it directly, or use [bold]'timeboard config --show'[/bold] to view current values.")
