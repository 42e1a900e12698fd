"""Command-line interface for Taskbot.

``taskbot`` starts the interactive read loop; ``taskbot run "<command>"``
executes a single command line and exits.
"""

import dataclasses
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from .commands import CommandResult
from .config import ConfigModel, get_config, load_config
from .session import Session
from .theme import get_themed_console, show_startup_banner, style_for_result

logger = logging.getLogger(__name__)

PROMPT = "> "


def configure_logging(config: ConfigModel, verbose: bool = False) -> None:
    """Route log records to stderr (and optionally a file)."""
    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, str(config.log_level).upper(), logging.WARNING)

    handlers = [RichHandler(console=Console(stderr=True), show_path=False,
                            show_time=verbose)]
    if config.log_file:
        Path(config.log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s"
        ))
        handlers.append(file_handler)

    logging.basicConfig(level=level, format="%(message)s", handlers=handlers, force=True)


def print_result(console: Console, result: CommandResult) -> None:
    """Print a command result with themed styling."""
    console.print(Text(result.message.rstrip("\n"),
                       style=style_for_result(result.ok, result.is_exit)),
                  soft_wrap=True)
    for suggestion in result.suggestions:
        console.print(Text(suggestion, style="muted"))


def print_notices(console: Console, session: Session) -> None:
    for notice in session.notices:
        console.print(Text(notice, style="warning"))


def run_loop(session: Session, console: Console) -> None:
    """Read and execute lines until ``bye`` or end of input."""
    console.print(Text(session.greeting, style="primary"))

    while True:
        try:
            line = console.input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if not line.strip():
            continue

        result = session.execute(line)
        print_result(console, result)
        if result.is_exit:
            break


@click.group(invoke_without_command=True)
@click.option("--config", type=click.Path(dir_okay=False), help="Path to config file")
@click.option("--data-file", type=click.Path(dir_okay=False),
              help="Task file to use instead of the configured one")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.option("--no-banner", is_flag=True, help="Skip the startup banner")
@click.pass_context
def main(ctx, config, data_file, verbose, no_banner):
    """Taskbot - track to-dos, deadlines and events from one-line commands."""
    ctx.ensure_object(dict)

    try:
        cfg = load_config(Path(config)) if config else get_config()
    except Exception as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    if data_file:
        cfg = dataclasses.replace(cfg, data_file=str(Path(data_file).absolute()))

    configure_logging(cfg, verbose)
    logger.debug("Using task file %s", cfg.get_data_path())
    ctx.obj['config'] = cfg
    ctx.obj['console'] = get_themed_console(no_color=cfg.no_color)

    if ctx.invoked_subcommand is None:
        console = ctx.obj['console']
        if cfg.show_banner and not no_banner:
            show_startup_banner(console)

        with Session.open(cfg) as session:
            print_notices(console, session)
            run_loop(session, console)
            if not session.close():
                console.print(Text(session.storage.last_error or "Could not save tasks.",
                                   style="error"))
                ctx.exit(1)


@main.command()
@click.argument("command_line", nargs=-1, required=True)
@click.pass_context
def run(ctx, command_line):
    """Execute a single command, e.g. taskbot run todo read book."""
    cfg: ConfigModel = ctx.obj['config']
    console: Console = ctx.obj['console']
    line = " ".join(command_line)

    with Session.open(cfg) as session:
        print_notices(console, session)
        result = session.execute(line)
        print_result(console, result)
        saved = session.close()

    if not saved:
        console.print(Text(session.storage.last_error or "Could not save tasks.",
                           style="error"))
    if not result.ok or not saved:
        ctx.exit(1)


if __name__ == "__main__":
    main()
