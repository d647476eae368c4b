"""Journi CLI - Personal Journal."""

import json
import logging
import sys
from dataclasses import asdict
from datetime import date

import click

from .config import load_config
from .core.dates import format_date, parse_date_input
from .core.entry import EntryDraft, Mood
from .errors import IOFailureError, MalformedInputError
from .render import format_detailed, format_entry_choice, format_search_results, format_summary, month_label
from .session import Session
from .workflows import (
    BrowseEntries,
    CreateEntry,
    EditEntry,
    EditMode,
    ExportEntries,
    ReadEntry,
    SearchEntries,
    ShowStats,
    execute,
    get_journal,
)


@click.group(invoke_without_command=True)
@click.option("--root", type=click.Path(file_okay=False), default=None,
              help="Journal directory (overrides journal_dir in journi.conf)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="journi")
@click.pass_context
def main(ctx, root: str | None, debug: bool):
    """Journi - your personal journal. Run without a command for the interactive menu."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    ctx.ensure_object(dict)
    ctx.obj["config"] = load_config()
    ctx.obj["root"] = root

    if ctx.invoked_subcommand is None:
        Session(_open_store(ctx), ctx.obj["config"]).run()


def _open_store(ctx):
    """Open the journal store, aborting the command if its directory can't be created."""
    try:
        return get_journal(ctx.obj["config"], ctx.obj["root"])
    except IOFailureError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _parse_date_arg(value: str | None) -> date:
    if not value:
        return date.today()
    try:
        return parse_date_input(value)
    except MalformedInputError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _body_or_edit(body: str | None, ctx, initial: str = "") -> str:
    if body is not None:
        return body
    if ctx.obj["config"].use_editor:
        return (click.edit(initial) or "").rstrip("\n")
    return click.prompt("Content", default="", show_default=False)


@main.command()
@click.option("--title", "-t", default=None, help="Entry title")
@click.option("--mood", "-m", type=click.Choice([m.name.lower() for m in Mood], case_sensitive=False),
              default="okay", show_default=True, help="How you're feeling")
@click.option("--tags", default="", help="Comma-separated tags")
@click.option("--body", "-b", default=None, help="Entry text (opens your editor when omitted)")
@click.option("--overwrite", is_flag=True, help="Replace today's entry if it exists")
@click.pass_context
def create(ctx, title: str | None, mood: str, tags: str, body: str | None, overwrite: bool):
    """Create today's journal entry."""
    store = _open_store(ctx)
    today = date.today()

    if store.exists(today) and not overwrite:
        if not click.confirm(f"An entry for {format_date(today)} already exists. Overwrite it?", default=False):
            click.echo("No worries! Your existing entry is safe.")
            return
        overwrite = True

    title = title or click.prompt("Title")
    content = _body_or_edit(body, ctx)
    if not content.strip():
        click.echo("Error: entry is empty, nothing saved.", err=True)
        sys.exit(1)

    draft = EntryDraft(title=title, content=content, mood=Mood.from_name(mood), tags=EntryDraft.parse_tags(tags))
    response = execute(store, CreateEntry(draft, overwrite=overwrite))
    click.echo(response.message, err=not response.ok)


@main.command()
@click.argument("target_date", metavar="DATE")
@click.option("--append", "mode", flag_value=EditMode.APPEND.value, help="Append new content (default)")
@click.option("--replace", "mode", flag_value=EditMode.REPLACE.value, help="Replace the entire entry")
@click.option("--body", "-b", default=None, help="New text (opens your editor when omitted)")
@click.pass_context
def edit(ctx, target_date: str, mode: str, body: str | None):
    """Add to or replace the entry for DATE (DD-MM-YYYY)."""
    store = _open_store(ctx)
    target = _parse_date_arg(target_date)

    current = execute(store, ReadEntry(target))
    if not current.ok:
        click.echo(current.message, err=True)
        sys.exit(1)

    edit_mode = EditMode(mode) if mode else EditMode.APPEND
    initial = current.payload if edit_mode is EditMode.REPLACE else ""
    content = _body_or_edit(body, ctx, initial)

    response = execute(store, EditEntry(target, edit_mode, content))
    click.echo(response.message, err=not response.ok)
    if not response.ok:
        sys.exit(1)


@main.command()
@click.argument("target_date", metavar="[DATE]", required=False)
@click.pass_context
def read(ctx, target_date: str | None):
    """Read the entry for DATE (DD-MM-YYYY), defaults to today."""
    store = _open_store(ctx)
    target = _parse_date_arg(target_date)

    response = execute(store, ReadEntry(target))
    if not response.ok:
        click.echo(response.message)
        return

    click.echo(f"{response.message}\n")
    click.echo(response.payload)


@main.command()
@click.argument("year", required=False)
@click.argument("month", required=False)
@click.pass_context
def browse(ctx, year: str | None, month: str | None):
    """List years, the months of YEAR, or the entries of YEAR MONTH."""
    store = _open_store(ctx)
    if month is not None:
        month = month.zfill(2)

    response = execute(store, BrowseEntries(year=year, month=month))
    if not response.ok:
        click.echo(f"Error: {response.message}", err=True)
        sys.exit(1)
    if not response.payload:
        click.echo(response.message)
        return

    if year is None:
        for y in sorted(response.payload, reverse=True):
            click.echo(y)
    elif month is None:
        for m in sorted(response.payload, reverse=True):
            click.echo(f"{m}  {month_label(year, m)}")
    else:
        for entry in sorted(response.payload, key=lambda e: e.date, reverse=True):
            click.echo(format_entry_choice(entry))


@main.command()
@click.argument("term")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def search(ctx, term: str, as_json: bool):
    """Search all entries for TERM (case-insensitive)."""
    store = _open_store(ctx)
    response = execute(store, SearchEntries(term))

    if as_json and response.ok:
        click.echo(
            json.dumps(
                [
                    {
                        "date": format_date(h.date),
                        "title": h.title,
                        "path": str(h.path),
                        "preview": h.preview,
                    }
                    for h in response.payload
                ],
                indent=2,
                ensure_ascii=False,
            )
        )
        return

    click.echo(response.message, err=not response.ok)
    if response.ok and response.payload:
        click.echo()
        click.echo(format_search_results(response.payload))


@main.command()
@click.option("--detailed", is_flag=True, help="Per-year breakdown, records and moods")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def stats(ctx, detailed: bool, as_json: bool):
    """Show journal statistics."""
    store = _open_store(ctx)
    response = execute(store, ShowStats(detailed=detailed))
    if not response.ok:
        click.echo(f"Error: {response.message}", err=True)
        sys.exit(1)

    if as_json:
        data = asdict(response.payload)
        if detailed:
            data["mood_counts"] = {m.value: c for m, c in response.payload.mood_counts.items()}
        click.echo(json.dumps(data, indent=2, default=str, ensure_ascii=False))
        return

    click.echo(f"{response.message}\n")
    if detailed:
        click.echo(format_detailed(response.payload))
    else:
        click.echo(format_summary(response.payload))


@main.command()
@click.pass_context
def export(ctx):
    """Export entries (not available yet)."""
    response = execute(_open_store(ctx), ExportEntries())
    click.echo(response.message)


if __name__ == "__main__":
    main()
