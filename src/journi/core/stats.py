"""Pure statistics accumulation over journal entries - no I/O."""

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable

from .dates import format_date
from .entry import EntryRecord, Mood, detect_moods


@dataclass
class JournalStats:
    """Summary statistics shown at the top of the menu."""

    total_entries: int = 0
    total_words: int = 0
    total_years: int = 0

    @property
    def average_words(self) -> int:
        if not self.total_entries:
            return 0
        return round(self.total_words / self.total_entries)


@dataclass
class PeriodStats:
    """Entry and word totals for a year or a month."""

    entries: int = 0
    words: int = 0

    def add(self, words: int) -> None:
        self.entries += 1
        self.words += words


@dataclass
class LengthRecord:
    """The longest or shortest entry seen during a walk."""

    words: int
    date: date
    title: str

    @property
    def date_str(self) -> str:
        return format_date(self.date)


@dataclass
class DetailedStats:
    """Per-period totals, length records and mood tally from a single walk."""

    summary: JournalStats = field(default_factory=JournalStats)
    per_year: dict[str, PeriodStats] = field(default_factory=dict)
    per_month: dict[str, PeriodStats] = field(default_factory=dict)
    longest: LengthRecord | None = None
    shortest: LengthRecord | None = None
    mood_counts: dict[Mood, int] = field(default_factory=dict)


def summarize(records: Iterable[EntryRecord], total_years: int) -> JournalStats:
    """Total entries and words across the records."""
    stats = JournalStats(total_years=total_years)
    for record in records:
        stats.total_entries += 1
        stats.total_words += record.words
    return stats


def accumulate(
    records: Iterable[EntryRecord],
    years: Iterable[str] = (),
    months: Iterable[tuple[str, str]] = (),
) -> DetailedStats:
    """
    Accumulate detailed statistics in walk order.

    ``years`` and ``months`` seed empty periods so directories without
    entries still show up with zero totals. Ties for longest/shortest keep
    the first record encountered.
    """
    stats = DetailedStats()
    for year in years:
        stats.per_year[year] = PeriodStats()
    for year, month in months:
        stats.per_month[f"{year}-{month}"] = PeriodStats()
    stats.summary.total_years = len(stats.per_year)

    mood_tally = {mood: 0 for mood in Mood}

    for record in records:
        words = record.words
        year_key = f"{record.date.year:04d}"
        month_key = f"{year_key}-{record.date.month:02d}"

        stats.summary.total_entries += 1
        stats.summary.total_words += words
        stats.per_year.setdefault(year_key, PeriodStats()).add(words)
        stats.per_month.setdefault(month_key, PeriodStats()).add(words)

        if stats.longest is None or words > stats.longest.words:
            stats.longest = LengthRecord(words, record.date, record.title)
        if stats.shortest is None or words < stats.shortest.words:
            stats.shortest = LengthRecord(words, record.date, record.title)

        for mood in detect_moods(record.content):
            mood_tally[mood] += 1

    stats.summary.total_years = len(stats.per_year)
    stats.mood_counts = {mood: count for mood, count in mood_tally.items() if count}
    return stats
