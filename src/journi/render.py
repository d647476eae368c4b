"""Plain-text formatting for listings, search results and statistics - no I/O."""

import calendar

from .core.dates import format_date
from .core.entry import EntrySummary, SearchHit
from .core.stats import DetailedStats, JournalStats

TITLE_WIDTH = 40
RULE = "═" * 60


def truncate(text: str, width: int = TITLE_WIDTH) -> str:
    return text[:width] + ("..." if len(text) > width else "")


def month_label(year: str, month: str) -> str:
    """'01', '2024' -> 'January 2024'."""
    return f"{calendar.month_name[int(month)]} {year}"


def format_entry_choice(entry: EntrySummary) -> str:
    return f"Day {entry.day} - {truncate(entry.title)} ({entry.word_count} words)"


def format_search_hit(hit: SearchHit) -> str:
    return f"{format_date(hit.date)} - {hit.title}"


def format_search_results(hits: list[SearchHit]) -> str:
    """Numbered results with a preview line each."""
    blocks = []
    for index, hit in enumerate(hits, start=1):
        blocks.append(f"{index}. {format_search_hit(hit)}\n   Preview: {hit.preview}...")
    return "\n\n".join(blocks)


def format_summary(stats: JournalStats) -> str:
    return "\n".join(
        [
            f"   Total Entries: {stats.total_entries}",
            f"   Total Words: {stats.total_words}",
            f"   Years Journaling: {stats.total_years}",
        ]
    )


def format_detailed(stats: DetailedStats) -> str:
    """
    Detailed statistics report.

    Sections: overall totals, longest/shortest records, mood distribution
    and yearly breakdown. Empty sections are left out.
    """
    summary = stats.summary
    lines = [
        "Overall Statistics:",
        f"   Total Entries: {summary.total_entries}",
        f"   Total Words: {summary.total_words:,}",
        f"   Average Words per Entry: {summary.average_words}",
    ]

    if stats.longest and stats.shortest:
        lines += [
            "",
            "Entry Records:",
            f"   Longest Entry: {stats.longest.words} words on {stats.longest.date_str}",
            f"   Shortest Entry: {stats.shortest.words} words on {stats.shortest.date_str}",
        ]

    if stats.mood_counts:
        lines += ["", "Mood Distribution:"]
        for mood, count in stats.mood_counts.items():
            lines.append(f"   {mood.value} {count} times")

    if stats.per_year:
        lines += ["", "Yearly Breakdown:"]
        for year, data in stats.per_year.items():
            lines.append(f"   {year}: {data.entries} entries, {data.words:,} words")

    if stats.per_month:
        lines += ["", "Monthly Breakdown:"]
        for key, data in stats.per_month.items():
            year, month = key.split("-")
            lines.append(f"   {month_label(year, month)}: {data.entries} entries, {data.words:,} words")

    return "\n".join(lines)
