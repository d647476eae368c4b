"""Shared workflow layer between the CLI commands and the interactive session.

Each user action is a request object. ``execute`` runs it against a store
and returns a Response; store errors become failed responses with a
human-readable message, so nothing here touches the terminal.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Any

from .adapters.file_journal import FileJournalStore
from .config import JOURNI_HOME, Config
from .core.dates import format_date
from .core.entry import EntryDraft, word_count
from .errors import JournalError
from .ports.journal_store import JournalStore

logger = logging.getLogger(__name__)


def get_journal(config: Config, root: Path | str | None = None) -> FileJournalStore:
    """Resolve journal directory from an explicit root or the config."""
    if root:
        return FileJournalStore(Path(root).expanduser(), config.file_extension)
    if config.journal_dir:
        return FileJournalStore(Path(config.journal_dir).expanduser(), config.file_extension)
    return FileJournalStore(JOURNI_HOME / "journal", config.file_extension)


class EditMode(Enum):
    """How an edit changes an existing entry."""

    APPEND = "append"
    REPLACE = "replace"


class ExportScope(Enum):
    """Export targets offered in the menu."""

    SINGLE = "single"  # All entries to a single text file
    SEPARATE = "separate"  # All entries to separate files in a folder
    YEAR = "year"
    MONTH = "month"


@dataclass(frozen=True)
class CreateEntry:
    draft: EntryDraft
    overwrite: bool = False
    target: date | None = None  # defaults to today
    now: datetime | None = None


@dataclass(frozen=True)
class EditEntry:
    target: date
    mode: EditMode
    content: str
    now: datetime | None = None


@dataclass(frozen=True)
class ReadEntry:
    target: date


@dataclass(frozen=True)
class BrowseEntries:
    """List years, the months of a year, or the entries of a month."""

    year: str | None = None
    month: str | None = None


@dataclass(frozen=True)
class SearchEntries:
    term: str


@dataclass(frozen=True)
class ShowStats:
    detailed: bool = False


@dataclass(frozen=True)
class ExportEntries:
    scope: ExportScope = ExportScope.SINGLE


Request = CreateEntry | EditEntry | ReadEntry | BrowseEntries | SearchEntries | ShowStats | ExportEntries


@dataclass
class Response:
    """Outcome of a request: a message for the user plus an optional payload."""

    ok: bool
    message: str = ""
    payload: Any = None
    error: JournalError | None = field(default=None, repr=False)


def execute(store: JournalStore, request: Request) -> Response:
    """Run a request against the store."""
    try:
        return _dispatch(store, request)
    except JournalError as e:
        logger.debug(f"{type(request).__name__} failed: {e}")
        return Response(ok=False, message=str(e), error=e)


def _dispatch(store: JournalStore, request: Request) -> Response:
    match request:
        case CreateEntry(draft=draft, overwrite=overwrite, target=target, now=now):
            now = now or datetime.now()
            target = target or now.date()
            path = store.create(target, draft.to_text(now), overwrite=overwrite)
            words = word_count(draft.content)
            return Response(
                ok=True,
                message=f"Entry saved to {path} ({words} words)",
                payload=path,
            )

        case EditEntry(target=target, mode=EditMode.APPEND, content=content, now=now):
            path = store.append(target, content, now=now)
            return Response(ok=True, message="Entry updated successfully!", payload=path)

        case EditEntry(target=target, mode=EditMode.REPLACE, content=content):
            path = store.replace(target, content)
            return Response(ok=True, message="Entry replaced successfully!", payload=path)

        case ReadEntry(target=target):
            content = store.read(target)
            return Response(ok=True, message=f"Journal Entry - {format_date(target)}", payload=content)

        case BrowseEntries(year=None):
            years = store.list_years()
            if not years:
                return Response(ok=True, message="No journal entries found yet. Create your first entry!", payload=[])
            return Response(ok=True, payload=years)

        case BrowseEntries(year=year, month=None):
            months = store.list_months(year)
            if not months:
                return Response(ok=True, message=f"No entries in {year}.", payload=[])
            return Response(ok=True, payload=months)

        case BrowseEntries(year=year, month=month):
            entries = store.list_entries(year, month)
            if not entries:
                return Response(ok=True, message=f"No entries in {year}-{month}.", payload=[])
            return Response(ok=True, payload=entries)

        case SearchEntries(term=term):
            hits = store.search(term)
            if not hits:
                return Response(ok=True, message="No entries found containing your search term.", payload=[])
            return Response(ok=True, message=f'Found {len(hits)} entries containing "{term}":', payload=hits)

        case ShowStats(detailed=True):
            return Response(ok=True, message="Detailed Journal Statistics", payload=store.detailed_stats())

        case ShowStats():
            return Response(ok=True, message="Your Journal Statistics", payload=store.aggregate_stats())

        case ExportEntries():
            return Response(ok=True, message="Export functionality coming soon!")

    raise TypeError(f"Unknown request: {request!r}")
