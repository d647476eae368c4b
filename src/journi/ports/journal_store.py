"""Journal storage interface."""

from datetime import date, datetime
from pathlib import Path
from typing import Iterator, Protocol

from journi.core.entry import EntryRecord, EntrySummary, SearchHit
from journi.core.stats import DetailedStats, JournalStats


class JournalStore(Protocol):
    """Interface for date-keyed journal entries."""

    def exists(self, target_date: date) -> bool:
        """Check if an entry exists for a date."""
        ...

    def create(self, target_date: date, body: str, overwrite: bool = False) -> Path:
        """Write a new entry. Raises AlreadyExistsError unless overwrite is set."""
        ...

    def append(self, target_date: date, addition: str, now: datetime | None = None) -> Path:
        """Append to an existing entry. Raises NotFoundError if absent."""
        ...

    def replace(self, target_date: date, body: str) -> Path:
        """Overwrite an existing entry. Raises NotFoundError if absent."""
        ...

    def read(self, target_date: date) -> str:
        """Read an entry. Raises NotFoundError if absent."""
        ...

    def list_years(self) -> list[str]:
        """Year directories, ascending."""
        ...

    def list_months(self, year: str) -> list[str]:
        """Month directories within a year, ascending. Raises MalformedInputError for a non-YYYY year."""
        ...

    def list_entries(self, year: str, month: str) -> list[EntrySummary]:
        """Entries within a month, ascending by day. Raises MalformedInputError for bad names."""
        ...

    def iter_entries(self) -> Iterator[EntryRecord]:
        """Walk every entry: years, then months, then days."""
        ...

    def search(self, term: str) -> list[SearchHit]:
        """Case-insensitive substring search over every entry."""
        ...

    def aggregate_stats(self) -> JournalStats:
        """Entry, word and year totals."""
        ...

    def detailed_stats(self) -> DetailedStats:
        """Per-period totals, longest/shortest entries and mood tally."""
        ...
