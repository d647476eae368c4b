"""Tests for statistics accumulation."""

from datetime import date
from pathlib import Path

import pytest

from journi.core.entry import EntryRecord, Mood
from journi.core.stats import JournalStats, PeriodStats, accumulate, summarize


def record(d: date, content: str) -> EntryRecord:
    return EntryRecord(date=d, path=Path(f"{d.year}/{d.month:02d}/journal-{d.day:02d}.txt"), content=content)


@pytest.fixture
def records():
    return [
        record(date(2023, 12, 31), "Year end 😄\nwrapping up"),
        record(date(2024, 1, 1), "Hello world"),
        record(date(2024, 1, 15), "A longer entry here 😔 😄"),
        record(date(2024, 2, 3), "Short one"),
    ]


class TestSummarize:
    def test_empty(self):
        assert summarize([], total_years=0) == JournalStats(0, 0, 0)

    def test_totals(self, records):
        stats = summarize(records, total_years=2)

        assert stats.total_entries == 4
        assert stats.total_words == 5 + 2 + 6 + 2
        assert stats.total_years == 2

    def test_average_words(self):
        assert JournalStats(3, 10, 1).average_words == 3
        assert JournalStats().average_words == 0


class TestAccumulate:
    def test_empty(self):
        stats = accumulate([])

        assert stats.summary == JournalStats(0, 0, 0)
        assert stats.longest is None
        assert stats.shortest is None
        assert stats.mood_counts == {}

    def test_seeds_empty_periods(self):
        stats = accumulate([], years=["2023"], months=[("2023", "05")])

        assert stats.per_year == {"2023": PeriodStats(0, 0)}
        assert stats.per_month == {"2023-05": PeriodStats(0, 0)}
        assert stats.summary.total_years == 1

    def test_per_period_totals(self, records):
        stats = accumulate(records)

        assert stats.per_year == {"2023": PeriodStats(1, 5), "2024": PeriodStats(3, 10)}
        assert stats.per_month["2024-01"] == PeriodStats(2, 8)
        assert stats.per_month["2024-02"] == PeriodStats(1, 2)
        assert list(stats.per_month) == ["2023-12", "2024-01", "2024-02"]

    def test_longest_and_shortest(self, records):
        stats = accumulate(records)

        assert stats.longest.words == 6
        assert stats.longest.date_str == "15/01/2024"
        assert stats.longest.title == "A longer entry here 😔 😄"
        # 01/01 and 03/02 both have two words; the first one wins
        assert stats.shortest.words == 2
        assert stats.shortest.date_str == "01/01/2024"

    def test_mood_counts(self, records):
        stats = accumulate(records)

        assert stats.mood_counts == {Mood.AMAZING: 2, Mood.NOT_GREAT: 1}

    def test_single_entry_is_longest_and_shortest(self):
        stats = accumulate([record(date(2024, 5, 5), "only")])

        assert stats.longest == stats.shortest
        assert stats.summary == JournalStats(1, 1, 1)
