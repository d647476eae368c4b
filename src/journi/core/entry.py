"""Entry text composition and derived values - no I/O."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from pathlib import Path

FOOTER = "Created with JOURNI ✨"
UNTITLED = "Untitled"


class Mood(Enum):
    """Mood markers embedded in entry text."""

    AMAZING = "😄"
    GOOD = "😊"
    OKAY = "😐"
    NOT_GREAT = "😔"
    ROUGH = "😞"

    @property
    def label(self) -> str:
        labels = {
            Mood.AMAZING: "Amazing",
            Mood.GOOD: "Good",
            Mood.OKAY: "Okay",
            Mood.NOT_GREAT: "Not great",
            Mood.ROUGH: "Rough day",
        }
        return labels[self]

    @classmethod
    def from_name(cls, name: str) -> "Mood":
        """Look up a mood by enum name, label or marker (case-insensitive)."""
        wanted = name.strip().lower()
        for mood in cls:
            if wanted in (mood.name.lower(), mood.label.lower(), mood.value):
                return mood
        raise ValueError(f"Unknown mood: {name}")


def format_timestamp(moment: datetime) -> tuple[str, str]:
    """(date string, time string) used in entry headers and edit markers."""
    return moment.strftime("%a %b %d %Y"), moment.strftime("%H:%M:%S")


@dataclass
class EntryDraft:
    """A new entry as collected from the user, before it is written."""

    title: str
    content: str
    mood: Mood = Mood.OKAY
    tags: list[str] = field(default_factory=list)

    @classmethod
    def parse_tags(cls, raw: str) -> list[str]:
        """Split a comma-separated tag string, dropping blanks."""
        return [t.strip() for t in raw.split(",") if t.strip()]

    def to_text(self, now: datetime | None = None) -> str:
        """Render the entry file content."""
        now = now or datetime.now()
        day_str, time_str = format_timestamp(now)
        tags_line = ""
        if self.tags:
            tags_line = "Tags: " + " ".join(f"#{tag}" for tag in self.tags)

        lines = [
            self.title,
            f"{self.mood.value} {day_str} - {time_str}",
            "",
            self.content,
            "",
            tags_line,
            "",
            "---",
            FOOTER,
        ]
        return "\n".join(lines)


def compose_append(existing: str, addition: str, now: datetime | None = None) -> str:
    """Existing content followed by an 'Updated on' marker and the addition."""
    now = now or datetime.now()
    day_str, time_str = format_timestamp(now)
    return f"{existing}\n\n---\nUpdated on {day_str} at {time_str}\n\n{addition}"


def word_count(content: str) -> int:
    """Number of whitespace-separated tokens."""
    return len(content.split())


def entry_title(content: str) -> str:
    """First line of the entry, used as its display title."""
    first_line = content.split("\n", 1)[0].strip()
    return first_line or UNTITLED


def detect_moods(content: str) -> list[Mood]:
    """Moods whose marker appears anywhere in the text, in marker order."""
    return [mood for mood in Mood if mood.value in content]


@dataclass
class EntryRecord:
    """An entry read from the store during a walk."""

    date: date
    path: Path
    content: str

    @property
    def title(self) -> str:
        return entry_title(self.content)

    @property
    def words(self) -> int:
        return word_count(self.content)

    def summary(self) -> "EntrySummary":
        return EntrySummary(date=self.date, title=self.title, word_count=self.words, path=self.path)


@dataclass
class EntrySummary:
    """Listing row for one entry: day, title and word count."""

    date: date
    title: str
    word_count: int
    path: Path

    @property
    def day(self) -> str:
        return f"{self.date.day:02d}"


@dataclass
class SearchHit:
    """A search match, with a preview of the entry's opening text."""

    date: date
    title: str
    path: Path
    preview: str
