"""File-based journal storage adapter."""

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Iterator

from journi.core.dates import (
    DEFAULT_EXTENSION,
    MONTH_PATTERN,
    YEAR_PATTERN,
    entry_path,
    parse_entry_path,
)
from journi.core.entry import EntryRecord, EntrySummary, SearchHit, compose_append
from journi.core.stats import DetailedStats, JournalStats, accumulate, summarize
from journi.errors import AlreadyExistsError, IOFailureError, MalformedInputError, NotFoundError

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 100


class FileJournalStore:
    """
    File-based journal storage.

    Implements JournalStore protocol. Each day gets a plain text file at
    root/YYYY/MM/journal-DD.<ext>; year and month directories are created
    on first write. Nothing is cached, every call re-reads the tree.
    """

    def __init__(self, journal_dir: Path | str, extension: str = DEFAULT_EXTENSION):
        self.journal_dir = Path(journal_dir).expanduser()
        self.extension = extension
        try:
            self.journal_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise self._failure(f"Cannot create journal directory {self.journal_dir}", e) from e

    def path_for(self, target_date: date) -> Path:
        """Get the file path for a given date."""
        return entry_path(self.journal_dir, target_date, self.extension)

    # ============== Writes ==============

    def exists(self, target_date: date) -> bool:
        """Check if an entry exists for a date."""
        return self.path_for(target_date).is_file()

    def create(self, target_date: date, body: str, overwrite: bool = False) -> Path:
        """Write a new entry. Raises AlreadyExistsError unless overwrite is set."""
        path = self.path_for(target_date)
        if path.is_file() and not overwrite:
            raise AlreadyExistsError(target_date)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise self._failure(f"Cannot create {path.parent}", e) from e

        self._write(path, body)
        logger.debug(f"Created entry {path} (overwrite={overwrite})")
        return path

    def append(self, target_date: date, addition: str, now: datetime | None = None) -> Path:
        """
        Append to an existing entry under an 'Updated on' marker.

        The file is rewritten in place; a crash mid-write can truncate it.
        """
        path = self.path_for(target_date)
        if not path.is_file():
            raise NotFoundError(target_date)

        existing = self._read(path)
        self._write(path, compose_append(existing, addition, now))
        logger.debug(f"Appended {len(addition)} chars to {path}")
        return path

    def replace(self, target_date: date, body: str) -> Path:
        """Overwrite an existing entry. Raises NotFoundError if absent."""
        path = self.path_for(target_date)
        if not path.is_file():
            raise NotFoundError(target_date)

        self._write(path, body)
        logger.debug(f"Replaced entry {path}")
        return path

    # ============== Reads ==============

    def read(self, target_date: date) -> str:
        """Read an entry. Raises NotFoundError if absent."""
        path = self.path_for(target_date)
        if not path.is_file():
            raise NotFoundError(target_date)
        return self._read(path)

    def list_years(self) -> list[str]:
        """Year directories (four digits), ascending."""
        return [p.name for p in self._subdirs(self.journal_dir) if YEAR_PATTERN.match(p.name)]

    def list_months(self, year: str) -> list[str]:
        """Month directories (01-12) within a year, ascending."""
        _check_period(year)
        months = []
        for p in self._subdirs(self.journal_dir / year):
            if MONTH_PATTERN.match(p.name):
                months.append(p.name)
            else:
                logger.debug(f"Skipping non-month directory {p}")
        return months

    def list_entries(self, year: str, month: str) -> list[EntrySummary]:
        """Entries within a month, ascending by day."""
        _check_period(year, month)
        return [
            EntryRecord(entry_date, path, self._read(path)).summary()
            for entry_date, path in self._entry_files(year, month)
        ]

    def iter_entries(self) -> Iterator[EntryRecord]:
        """Walk every entry: years, then months, then days, all ascending."""
        for year in self.list_years():
            for month in self.list_months(year):
                for entry_date, path in self._entry_files(year, month):
                    yield EntryRecord(entry_date, path, self._read(path))

    def search(self, term: str) -> list[SearchHit]:
        """Case-insensitive substring search, results in walk order."""
        if not term.strip():
            raise MalformedInputError("Please enter a search term.")

        needle = term.lower()
        hits = []
        for record in self.iter_entries():
            if needle in record.content.lower():
                hits.append(
                    SearchHit(
                        date=record.date,
                        title=record.title,
                        path=record.path,
                        preview=record.content[:PREVIEW_LENGTH],
                    )
                )
        return hits

    def aggregate_stats(self) -> JournalStats:
        """Entry, word and year totals."""
        return summarize(self.iter_entries(), total_years=len(self.list_years()))

    def detailed_stats(self) -> DetailedStats:
        """Per-period totals, longest/shortest entries and mood tally."""
        years = self.list_years()
        months = [(year, month) for year in years for month in self.list_months(year)]
        return accumulate(self.iter_entries(), years=years, months=months)

    # ============== Filesystem helpers ==============

    def _entry_files(self, year: str, month: str) -> list[tuple[date, Path]]:
        """Entry files in a month directory, sorted by day. Non-matching files are skipped."""
        month_dir = self.journal_dir / year / month
        if not month_dir.is_dir():
            return []

        entries = []
        for path in self._children(month_dir):
            if not path.is_file():
                continue
            entry_date = parse_entry_path(path, self.extension)
            if entry_date is None:
                logger.debug(f"Skipping non-entry file {path}")
                continue
            entries.append((entry_date, path))
        return sorted(entries, key=lambda item: item[0])

    def _subdirs(self, directory: Path) -> list[Path]:
        if not directory.is_dir():
            return []
        return sorted((p for p in self._children(directory) if p.is_dir()), key=lambda p: p.name)

    def _children(self, directory: Path) -> list[Path]:
        try:
            return list(directory.iterdir())
        except OSError as e:
            raise self._failure(f"Cannot list {directory}", e) from e

    def _read(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise self._failure(f"Cannot read {path}", e) from e

    def _write(self, path: Path, content: str) -> None:
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise self._failure(f"Cannot write {path}", e) from e

    @staticmethod
    def _failure(message: str, error: OSError) -> IOFailureError:
        logger.error(f"{message}: {error}")
        return IOFailureError(f"{message}: {error.strerror or error}")


def _check_period(year: str, month: str | None = None) -> None:
    """Reject year/month names that could point outside the YYYY/MM tree."""
    if not YEAR_PATTERN.match(year):
        raise MalformedInputError(f"'{year}' is not a year. Use YYYY.")
    if month is not None and not MONTH_PATTERN.match(month):
        raise MalformedInputError(f"'{month}' is not a month. Use 01-12.")
