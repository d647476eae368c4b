"""Interactive menu session."""

import logging
from datetime import date, datetime
from typing import Callable, TypeVar

import click

from .config import Config
from .core.dates import format_date, parse_date_input
from .core.entry import EntryDraft, Mood
from .errors import MalformedInputError
from .ports.journal_store import JournalStore
from .render import (
    RULE,
    format_detailed,
    format_entry_choice,
    format_search_hit,
    format_search_results,
    format_summary,
    month_label,
)
from .workflows import (
    BrowseEntries,
    CreateEntry,
    EditEntry,
    EditMode,
    ExportEntries,
    ExportScope,
    ReadEntry,
    Response,
    SearchEntries,
    ShowStats,
    execute,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

MENU = [
    ("Create a new journal entry for today", "create"),
    ("Add to a previous journal entry", "edit"),
    ("Read a previous journal entry", "read"),
    ("Browse entries by date", "browse"),
    ("Search through your entries", "search"),
    ("View summary statistics", "summary"),
    ("View detailed statistics", "stats"),
    ("Export entries", "export"),
    ("Exit", "exit"),
]

FAREWELL = "Thanks for journaling! See you next time..."


def choose(message: str, options: list[tuple[str, T]]) -> T:
    """Numbered menu; returns the value of the picked option."""
    click.secho(message, fg="cyan", bold=True)
    for index, (label, _) in enumerate(options, start=1):
        click.echo(f"  {index}) {label}")
    picked = click.prompt(">", type=click.IntRange(1, len(options)))
    return options[picked - 1][1]


class Session:
    """
    Menu-driven journaling session.

    Collects input with click prompts and runs each action through
    ``workflows.execute``. Loops until the user picks Exit.
    """

    def __init__(
        self,
        store: JournalStore,
        config: Config | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.config = config or Config()
        self.clock = clock
        self._handlers = {
            "create": self.create_today,
            "edit": self.edit_entry,
            "read": self.read_entry,
            "browse": self.browse,
            "search": self.search,
            "summary": self.show_summary,
            "stats": self.show_detailed_stats,
            "export": self.export,
        }

    def run(self) -> None:
        self._header()
        self.show_summary()

        while True:
            action = choose("What would you like to do today?", MENU)
            if action == "exit":
                break

            logger.debug(f"Menu action: {action}")
            self._handlers[action]()

            click.echo()
            next_step = choose(
                "What would you like to do next?",
                [("Return to main menu", "menu"), ("Exit", "exit")],
            )
            if next_step == "exit":
                break

        click.secho(FAREWELL, fg="magenta")

    # ============== Actions ==============

    def create_today(self) -> None:
        now = self.clock()
        today = now.date()
        click.secho("Creating a new journal entry...\n", fg="cyan")

        overwrite = False
        if self.store.exists(today):
            overwrite = click.confirm(
                f"An entry for today ({now.strftime('%a %b %d %Y')}) already exists. Overwrite it?",
                default=False,
            )
            if not overwrite:
                click.secho("No worries! Your existing entry is safe.", fg="green")
                return

        mood = choose(
            "How are you feeling today?",
            [(f"{m.value} {m.label}", m) for m in Mood],
        )
        title = self._prompt_required("Give your entry a title", "Please enter a title")
        content = self._collect_text(
            "Tell me about your day",
            required_message="Please write something about your day",
        )
        tags = click.prompt("Add some tags (comma-separated, optional)", default="", show_default=False)

        draft = EntryDraft(title=title, content=content, mood=mood, tags=EntryDraft.parse_tags(tags))
        self._report(execute(self.store, CreateEntry(draft, overwrite=overwrite, target=today, now=now)))

    def edit_entry(self) -> None:
        click.secho("Edit a Previous Entry\n", fg="cyan", bold=True)
        target = self._prompt_date("Enter the date (DD-MM-YYYY or DD/MM/YYYY)")

        current = execute(self.store, ReadEntry(target))
        if not current.ok:
            self._report(current)
            return

        click.secho("Current content:", dim=True)
        self._show(current.payload)

        mode = choose(
            "How would you like to edit this entry?",
            [("Append new content", EditMode.APPEND), ("Replace entire entry", EditMode.REPLACE), ("Cancel", None)],
        )
        if mode is None:
            click.secho("Edit cancelled.", fg="yellow")
            return

        prompt = "Add your new content" if mode is EditMode.APPEND else "Enter the complete new content"
        content = self._collect_text(prompt, initial=None if mode is EditMode.APPEND else current.payload)
        self._report(execute(self.store, EditEntry(target, mode, content, now=self.clock())))

    def read_entry(self) -> None:
        click.secho("Read a Journal Entry\n", fg="cyan", bold=True)
        target = self._prompt_date(
            "Enter the date (DD-MM-YYYY) or leave empty to read today's entry",
            allow_empty=True,
        )
        self._read_and_show(target)

    def browse(self) -> None:
        click.secho("Browse Your Entries\n", fg="cyan", bold=True)

        years = execute(self.store, BrowseEntries())
        if not years.ok or not years.payload:
            self._report(years, fg="yellow")
            return
        year = choose("Select a year:", [(y, y) for y in sorted(years.payload, reverse=True)])

        months = execute(self.store, BrowseEntries(year=year))
        if not months.ok or not months.payload:
            self._report(months, fg="yellow")
            return
        month = choose(
            "Select a month:",
            [(month_label(year, m), m) for m in sorted(months.payload, reverse=True)],
        )

        entries = execute(self.store, BrowseEntries(year=year, month=month))
        if not entries.ok or not entries.payload:
            self._report(entries, fg="yellow")
            return
        entry = choose(
            "Select an entry to read:",
            [(format_entry_choice(e), e) for e in sorted(entries.payload, key=lambda e: e.date, reverse=True)],
        )
        self._read_and_show(entry.date)

    def search(self) -> None:
        click.secho("Search Your Entries\n", fg="cyan", bold=True)
        term = self._prompt_required("What would you like to search for?", "Please enter a search term")

        response = execute(self.store, SearchEntries(term))
        if not response.ok or not response.payload:
            self._report(response, fg="yellow")
            return

        click.secho(response.message + "\n", fg="green")
        click.echo(format_search_results(response.payload))
        click.echo()

        if click.confirm("Would you like to read one of these entries?", default=True):
            hit = choose(
                "Which entry would you like to read?",
                [(format_search_hit(h), h) for h in response.payload],
            )
            self._read_and_show(hit.date)

    def show_summary(self) -> None:
        response = execute(self.store, ShowStats())
        if not response.ok:
            self._report(response)
            return
        click.secho(response.message + ":", fg="cyan")
        click.echo(format_summary(response.payload) + "\n")

    def show_detailed_stats(self) -> None:
        response = execute(self.store, ShowStats(detailed=True))
        if not response.ok:
            self._report(response)
            return
        click.secho(response.message + "\n", fg="cyan", bold=True)
        click.echo(format_detailed(response.payload))
        click.pause()

    def export(self) -> None:
        click.secho("Export Your Entries\n", fg="cyan", bold=True)
        scope = choose(
            "How would you like to export your entries?",
            [
                ("All entries to a single text file", ExportScope.SINGLE),
                ("All entries to separate files in a folder", ExportScope.SEPARATE),
                ("Entries from a specific year", ExportScope.YEAR),
                ("Entries from a specific month", ExportScope.MONTH),
            ],
        )
        self._report(execute(self.store, ExportEntries(scope)), fg="yellow")

    # ============== Input helpers ==============

    def _header(self) -> None:
        click.secho("JOURNI", fg="magenta", bold=True)
        click.secho("Your personal digital journal companion\n", dim=True)

    def _prompt_date(self, message: str, allow_empty: bool = False) -> date:
        """Prompt until the input parses as a date. Empty input means today when allowed."""
        while True:
            raw = click.prompt(message, default="" if allow_empty else None, show_default=False)
            if allow_empty and not raw.strip():
                return self.clock().date()
            try:
                return parse_date_input(raw)
            except MalformedInputError as e:
                click.secho(str(e), fg="red")

    def _prompt_required(self, message: str, required_message: str) -> str:
        while True:
            value = click.prompt(message, default="", show_default=False).strip()
            if value:
                return value
            click.secho(required_message, fg="red")

    def _collect_text(
        self,
        message: str,
        required_message: str | None = None,
        initial: str | None = None,
    ) -> str:
        """Collect a body of text in $EDITOR, or as a single line when the editor is off."""
        while True:
            if self.config.use_editor:
                click.echo(f"{message} (opening your editor)")
                text = click.edit(initial or "") or ""
            else:
                text = click.prompt(message, default="", show_default=False)

            if text.strip() or required_message is None:
                return text.rstrip("\n")
            click.secho(required_message, fg="red")

    # ============== Output helpers ==============

    def _read_and_show(self, target: date) -> None:
        response = execute(self.store, ReadEntry(target))
        if not response.ok:
            self._report(response)
            return
        click.secho(f"Journal Entry - {format_date(target)}", fg="cyan", bold=True)
        self._show(response.payload)
        click.pause()

    def _show(self, content: str) -> None:
        click.secho(RULE, dim=True)
        click.echo(content)
        click.secho(RULE, dim=True)

    def _report(self, response: Response, fg: str = "green") -> None:
        if not response.message:
            return
        click.secho(response.message, fg=fg if response.ok else "red")
