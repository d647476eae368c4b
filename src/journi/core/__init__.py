"""Functional core - pure journal logic with no I/O."""

from .dates import entry_path, format_date, parse_date_input, parse_entry_path
from .entry import (
    EntryDraft,
    EntryRecord,
    EntrySummary,
    Mood,
    SearchHit,
    compose_append,
    detect_moods,
    entry_title,
    word_count,
)
from .stats import DetailedStats, JournalStats, PeriodStats, accumulate, summarize

__all__ = [
    # Dates
    "entry_path",
    "format_date",
    "parse_date_input",
    "parse_entry_path",
    # Entries
    "EntryDraft",
    "EntryRecord",
    "EntrySummary",
    "Mood",
    "SearchHit",
    "compose_append",
    "detect_moods",
    "entry_title",
    "word_count",
    # Stats
    "DetailedStats",
    "JournalStats",
    "PeriodStats",
    "accumulate",
    "summarize",
]
