"""Worklog CLI - command-driven activity log."""

import json
import logging
import sys

import click

from .adapters.hex_time import HexTimeService
from .adapters.json_store import JsonUserStore
from .config import CONFIG_FILE, HISTORY_FILE, WORKLOG_HOME, load_config
from .core.entry import LogEntry
from .errors import StoreError
from .workflows import build_session, load_history

EXIT_WORDS = ("quit", "exit")


def _set_terminal_title(elapsed: str) -> None:
    """Show the running clock in the terminal title."""
    if sys.stdout.isatty():
        click.echo(f"\x1b]2;worklog {elapsed}\x07", nl=False)


@click.group()
@click.version_option(package_name="worklog")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Worklog - command-driven personal activity log."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else logging.WARNING,
    )


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("words", nargs=-1, required=True)
def run(words: tuple[str, ...]):
    """Run one command, e.g. worklog run start '"work"' '"site"' '"build"'."""
    session = build_session(load_config())
    try:
        session.run_line(" ".join(words))
    except StoreError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    finally:
        session.close()


@main.command()
def shell():
    """Interactive prompt. Type quit or exit to leave."""
    session = build_session(load_config(), render=_set_terminal_title)
    session.resume_clock()
    click.echo('Enter commands like: start "sector" "project" "description"')
    try:
        while True:
            try:
                line = click.prompt("", prompt_suffix="> ", default="", show_default=False)
            except (EOFError, click.Abort):
                click.echo()
                break
            if line.strip().lower() in EXIT_WORDS:
                break
            try:
                session.run_line(line)
            except StoreError as e:
                click.echo(f"Error: {e}", err=True)
    finally:
        session.close()


def _entry_json(entry: LogEntry, time: HexTimeService) -> dict:
    return {
        "sector": entry.sector,
        "project": entry.project,
        "description": entry.description,
        "start": time.to_datetime(entry.start).isoformat(),
        "end": None if entry.is_open else time.to_datetime(entry.end).isoformat(),
    }


@main.command("log")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--limit", "-n", type=int, default=None, help="Show only the last N entries")
def show_log(as_json: bool, limit: int | None):
    """List log entries with their row numbers."""
    state = JsonUserStore(load_config().data_path).load()
    time = HexTimeService()
    rows = list(enumerate(state.entries, start=1))
    if limit is not None:
        rows = rows[-limit:] if limit > 0 else []

    if as_json:
        click.echo(
            json.dumps(
                [{"row": row, **_entry_json(entry, time)} for row, entry in rows],
                indent=2,
            )
        )
        return

    if not rows:
        click.echo("No log entries.")
        return

    for row, entry in rows:
        start = time.to_datetime(entry.start).strftime("%Y-%m-%d %H:%M")
        end = "(running)" if entry.is_open else time.to_datetime(entry.end).strftime("%H:%M")
        click.echo(f"{row:>4}  {start} - {end:9}  {entry.label()}")


@main.command()
def history():
    """Show previously entered commands."""
    config = load_config()
    lines = load_history(HISTORY_FILE, config.history_size)
    if not lines:
        click.echo("No history.")
        return
    for line in lines:
        click.echo(line)


@main.command("config")
def show_config():
    """Show resolved paths and settings."""
    config = load_config()
    click.echo(f"Home:         {WORKLOG_HOME}")
    click.echo(f"Config file:  {CONFIG_FILE}")
    click.echo(f"Data file:    {config.data_path}")
    click.echo(f"History file: {HISTORY_FILE}")
    click.echo(f"Tick:         {config.tick_seconds}s")
    click.echo(f"Notify style: {config.notify_style}")
    click.echo(f"History size: {config.history_size}")


if __name__ == "__main__":
    main()
