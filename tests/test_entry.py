"""Tests for entry composition and derived values."""

from datetime import datetime
from pathlib import Path

import pytest

from journi.core.entry import (
    EntryDraft,
    EntryRecord,
    Mood,
    compose_append,
    detect_moods,
    entry_title,
    word_count,
)


@pytest.fixture
def now():
    return datetime(2024, 1, 15, 14, 5, 9)


class TestEntryDraft:
    def test_to_text_full(self, now):
        draft = EntryDraft(
            title="Great day",
            content="Went hiking.",
            mood=Mood.GOOD,
            tags=["outdoors", "family"],
        )

        assert draft.to_text(now) == (
            "Great day\n"
            "😊 Mon Jan 15 2024 - 14:05:09\n"
            "\n"
            "Went hiking.\n"
            "\n"
            "Tags: #outdoors #family\n"
            "\n"
            "---\n"
            "Created with JOURNI ✨"
        )

    def test_to_text_without_tags(self, now):
        text = EntryDraft(title="Quiet", content="Nothing much.").to_text(now)

        assert "Tags:" not in text
        assert text.startswith("Quiet\n😐 Mon Jan 15 2024")
        assert text.endswith("---\nCreated with JOURNI ✨")

    def test_parse_tags(self):
        assert EntryDraft.parse_tags(" work, ,life ,") == ["work", "life"]
        assert EntryDraft.parse_tags("") == []


class TestMood:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("good", Mood.GOOD),
            ("AMAZING", Mood.AMAZING),
            ("Not great", Mood.NOT_GREAT),
            ("not_great", Mood.NOT_GREAT),
            ("😞", Mood.ROUGH),
            ("rough day", Mood.ROUGH),
        ],
    )
    def test_from_name(self, name, expected):
        assert Mood.from_name(name) is expected

    def test_from_name_unknown(self):
        with pytest.raises(ValueError, match="Unknown mood"):
            Mood.from_name("ecstatic")

    def test_labels(self):
        assert [m.label for m in Mood] == ["Amazing", "Good", "Okay", "Not great", "Rough day"]


class TestComposeAppend:
    def test_keeps_existing_as_prefix(self, now):
        result = compose_append("Original text", "More text", now)

        assert result == "Original text\n\n---\nUpdated on Mon Jan 15 2024 at 14:05:09\n\nMore text"
        assert result.startswith("Original text")
        assert result.endswith("More text")


class TestDerivedValues:
    def test_word_count(self):
        assert word_count("Hello world") == 2
        assert word_count("  a  b\n\tc ") == 3
        assert word_count("") == 0

    def test_entry_title(self):
        assert entry_title("My title\nbody") == "My title"
        assert entry_title("\nbody") == "Untitled"
        assert entry_title("") == "Untitled"

    def test_detect_moods_in_marker_order(self):
        assert detect_moods("😔 then 😄") == [Mood.AMAZING, Mood.NOT_GREAT]
        assert detect_moods("no markers") == []

    def test_record_summary(self):
        record = EntryRecord(
            date=datetime(2024, 3, 7).date(),
            path=Path("2024/03/journal-07.txt"),
            content="Title line\nthree more words",
        )
        summary = record.summary()

        assert summary.day == "07"
        assert summary.title == "Title line"
        assert summary.word_count == 5
