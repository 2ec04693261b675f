"""Click command line interface for rendering map messages.

Purpose
-------
Let operators try converter options from a shell: feed ``key=value`` pairs,
pick a key or the full map, and see the text or the encoded bytes.

Contents
--------
* :func:`cli` – root group with traceback and dotenv toggles.
* ``info`` / ``render`` subcommands.
* :func:`main` – entry point delegating to :func:`lib_cli_exit_tools.run_cli`.

System Role
-----------
Presentation layer only: builds converters through the registry, renders
through :class:`PatternLayout`, and prints through :class:`RichConsoleAdapter`.
"""

from __future__ import annotations

import logging
import os
import uuid
from datetime import datetime, timezone
from typing import Sequence

import click
import lib_cli_exit_tools
from rich.console import Console

from . import __init__conf__
from . import config as log_config
from . import summary_info
from .adapters.console.rich_console import RichConsoleAdapter, default_console_layout
from .adapters.pattern import create_converter
from .application.use_cases.render_event import create_render_event
from .domain.events import LogEvent
from .domain.levels import LogLevel
from .domain.messages import MapMessage

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

logger = logging.getLogger(__name__)


def _parse_pairs(pairs: Sequence[str]) -> dict[str, str]:
    """Split ``key=value`` arguments, keeping the last value for repeated keys."""

    data: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep:
            raise click.BadParameter(f"expected key=value, got {pair!r}", param_hint="PAIRS")
        data[key] = value
    return data


@click.group(help=__init__conf__.title, invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(version=__init__conf__.version, prog_name=__init__conf__.shell_command)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help="Load environment variables from a nearby .env before running commands.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Root command storing global flags for subcommands."""

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback
    if log_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(log_config.DOTENV_ENV_VAR)):
        loaded = log_config.enable_dotenv()
        logger.debug("dotenv loaded", extra={"path": str(loaded) if loaded else None})
    ctx.ensure_object(dict)
    ctx.obj["settings"] = log_config.LayoutSettings.from_env()
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("render", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("pairs", nargs=-1)
@click.option("--key", "-k", default=None, help="Render only the value stored under KEY.")
@click.option("--bytes", "as_bytes", is_flag=True, default=False, help="Print the encoded output as hex.")
@click.option("--charset", default=None, help="Charset for --bytes (defaults to LOG_MAP_CHARSET or utf-8).")
@click.option(
    "--level",
    type=click.Choice([level.name for level in LogLevel], case_sensitive=False),
    default="INFO",
    show_default=True,
    help="Level used for --console output.",
)
@click.option("--console", "to_console", is_flag=True, default=False, help="Print a full console line via Rich.")
@click.pass_context
def cli_render(
    ctx: click.Context,
    pairs: tuple[str, ...],
    key: str | None,
    as_bytes: bool,
    charset: str | None,
    level: str,
    to_console: bool,
) -> None:
    """Render PAIRS (``key=value`` ...) through the map converter."""

    settings: log_config.LayoutSettings = ctx.obj["settings"]
    event = LogEvent(
        event_id=uuid.uuid4().hex,
        timestamp=datetime.now(timezone.utc),
        logger_name=__init__conf__.shell_command,
        level=LogLevel.from_name(level),
        message=MapMessage(_parse_pairs(pairs)),
    )
    converter = create_converter("K", [key] if key is not None else None)
    if to_console:
        console_layout = default_console_layout(converter)
        adapter = RichConsoleAdapter(layout=console_layout, console=Console(no_color=not settings.color))
        adapter.emit(event, colorize=settings.color)
        return
    layout = create_render_event([converter], charset=charset or settings.charset)
    if as_bytes:
        click.echo(layout.to_bytes(event).hex())
    else:
        click.echo(layout.to_text(event))


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI and return its exit code.

    Traceback preferences toggled by ``--traceback`` are restored afterwards
    unless ``restore_traceback`` is ``False``.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
