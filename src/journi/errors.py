"""Journal error taxonomy."""

from datetime import date


class JournalError(Exception):
    """Base class for journal failures that are reported to the user."""

    pass


class AlreadyExistsError(JournalError):
    """Raised when creating an entry for a date that already has one."""

    def __init__(self, target_date: date):
        self.target_date = target_date
        super().__init__(f"An entry for {target_date.strftime('%d/%m/%Y')} already exists.")


class NotFoundError(JournalError):
    """Raised when a date has no entry."""

    def __init__(self, target_date: date):
        self.target_date = target_date
        super().__init__(f"No entry found for {target_date.strftime('%d/%m/%Y')}.")


class IOFailureError(JournalError):
    """Raised when the filesystem refuses a read or write.

    The underlying OSError is chained as ``__cause__``.
    """

    pass


class MalformedInputError(JournalError, ValueError):
    """Raised when user input (a date string, a search term) is not usable."""

    pass
