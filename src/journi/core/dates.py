"""Date parsing and the date <-> entry path naming contract - no I/O."""

import re
from datetime import date
from pathlib import Path

from journi.errors import MalformedInputError

DATE_INPUT_PATTERN = re.compile(r"^(\d{1,2})[-/](\d{1,2})[-/](\d{4})$")
YEAR_PATTERN = re.compile(r"^\d{4}$")
MONTH_PATTERN = re.compile(r"^(0[1-9]|1[0-2])$")

DEFAULT_EXTENSION = "txt"


def entry_filename_pattern(extension: str = DEFAULT_EXTENSION) -> re.Pattern:
    """Pattern for entry filenames, capturing the zero-padded day."""
    return re.compile(rf"^journal-(\d{{2}})\.{re.escape(extension)}$")


def parse_date_input(text: str) -> date:
    """
    Parse a DD-MM-YYYY or DD/MM/YYYY string.

    Raises MalformedInputError when the text doesn't match the pattern
    or doesn't name a real calendar date.
    """
    match = DATE_INPUT_PATTERN.match(text.strip())
    if not match:
        raise MalformedInputError(
            f"'{text}' is not a date. Use DD-MM-YYYY or DD/MM/YYYY."
        )

    day, month, year = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise MalformedInputError(f"'{text}' is not a valid date: {e}") from e


def format_date(target_date: date) -> str:
    """Display form used for entry dates (DD/MM/YYYY)."""
    return target_date.strftime("%d/%m/%Y")


def entry_path(root: Path, target_date: date, extension: str = DEFAULT_EXTENSION) -> Path:
    """Path of the entry file for a date: root/YYYY/MM/journal-DD.<ext>."""
    return (
        root
        / f"{target_date.year:04d}"
        / f"{target_date.month:02d}"
        / f"journal-{target_date.day:02d}.{extension}"
    )


def parse_entry_path(path: Path, extension: str = DEFAULT_EXTENSION) -> date | None:
    """Recover the entry date from a path. Returns None if it isn't an entry path."""
    path = Path(path)
    match = entry_filename_pattern(extension).match(path.name)
    if not match:
        return None

    month_name = path.parent.name
    year_name = path.parent.parent.name
    if not YEAR_PATTERN.match(year_name) or not MONTH_PATTERN.match(month_name):
        return None

    try:
        return date(int(year_name), int(month_name), int(match.group(1)))
    except ValueError:
        return None
