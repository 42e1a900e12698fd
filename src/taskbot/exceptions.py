"""Error types raised by the Taskbot core.

Every error here is an expected, user-facing condition: it aborts the
current command only and is turned into a message by the session.
"""

from typing import List, Optional


class TaskbotError(Exception):
    """Base class for all expected Taskbot failures."""

    def __init__(self, message: str, suggestions: Optional[List[str]] = None):
        self.message = message
        self.suggestions = suggestions or []
        super().__init__(message)


class IncompleteDescriptionError(TaskbotError):
    """A required piece of text (name, date or marker) is missing or blank."""


class InvalidInputError(TaskbotError):
    """A field is present but fails validation."""


class OutOfBoundsError(TaskbotError):
    """An index does not address an existing task."""


class StorageCorruptionError(TaskbotError):
    """A persisted line could not be decoded."""

    def __init__(self, message: str, line_number: Optional[int] = None,
                 line: Optional[str] = None):
        self.line_number = line_number
        self.line = line
        super().__init__(message)

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"
