"""Command parser for Taskbot.

Turns one line of user input into a ready-to-execute Command, or raises a
TaskbotError describing what is wrong with it. Parsing is stateless; the
only outside input is the current date, used to reject dates that have
already passed.
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Optional

from fuzzywuzzy import fuzz, process

from .commands import (
    AddCommand,
    ByeCommand,
    Command,
    CommandKind,
    DeleteCommand,
    FindCommand,
    ListCommand,
    MarkCommand,
    UnmarkCommand,
)
from .exceptions import IncompleteDescriptionError, InvalidInputError
from .todo import Task
from .utils.datetime import format_date_for_display, parse_date, today as current_date

NO_SUCH_COMMAND = "I'm sorry, there is no such command."
INVALID_DATE = 'Please enter a valid date in "yyyy/mm/dd" format.'

BY_MARKER = "/by"
FROM_MARKER = "/from"
TO_MARKER = "/to"

INDEX_RE = re.compile(r"^[+-]?\d+$")
# Indices outside a signed 32-bit range are not numbers to the parser.
INDEX_MIN, INDEX_MAX = -2 ** 31, 2 ** 31 - 1

# Verb used in "Please give the index of the item to be <verb>."
INDEX_VERBS = {
    CommandKind.MARK: "marked",
    CommandKind.UNMARK: "unmarked",
    CommandKind.DELETE: "deleted",
}


@dataclass
class SplitInput:
    """A line split once on the first space."""
    keyword: str
    remainder: Optional[str] = None

    @classmethod
    def from_line(cls, line: str) -> "SplitInput":
        pieces = line.split(" ", 1)
        return cls(pieces[0], pieces[1] if len(pieces) > 1 else None)


class CommandParser:
    """Parses input lines into commands."""

    def __init__(self, today: Callable[[], date] = current_date,
                 suggestion_cutoff: int = 70):
        self.today = today
        self.suggestion_cutoff = suggestion_cutoff

    def parse(self, line: str) -> Command:
        """Parse a line of input.

        Raises:
            IncompleteDescriptionError: A required name, marker or date is missing.
            InvalidInputError: The keyword is unknown or an argument is invalid.
        """
        split = SplitInput.from_line(line.rstrip("\r\n"))
        kind = self._resolve_keyword(split.keyword)

        if kind is CommandKind.BYE:
            return ByeCommand()
        if kind is CommandKind.LIST:
            return ListCommand()
        if kind is CommandKind.MARK:
            return MarkCommand(self._parse_index(split.remainder, kind))
        if kind is CommandKind.UNMARK:
            return UnmarkCommand(self._parse_index(split.remainder, kind))
        if kind is CommandKind.DELETE:
            return DeleteCommand(self._parse_index(split.remainder, kind))
        if kind is CommandKind.TODO:
            return AddCommand(self._parse_todo(split.remainder))
        if kind is CommandKind.DEADLINE:
            return AddCommand(self._parse_deadline(split.remainder))
        if kind is CommandKind.EVENT:
            return AddCommand(self._parse_event(split.remainder))
        if kind is CommandKind.FIND:
            return FindCommand(split.remainder or "")

        raise InvalidInputError(NO_SUCH_COMMAND)

    # -------------------- keyword --------------------
    def _resolve_keyword(self, keyword: str) -> CommandKind:
        try:
            return CommandKind(keyword.lower())
        except ValueError:
            raise InvalidInputError(NO_SUCH_COMMAND,
                                    suggestions=self.suggest_keywords(keyword))

    def suggest_keywords(self, keyword: str) -> List[str]:
        """Return the closest known keyword for a mistyped one, if any."""
        if not keyword or not keyword.strip():
            return []
        known = [kind.value for kind in CommandKind]
        best = process.extractOne(keyword.lower(), known, scorer=fuzz.ratio,
                                  score_cutoff=self.suggestion_cutoff)
        if not best:
            return []
        return [f"Did you mean '{best[0]}'?"]

    # -------------------- arguments --------------------
    def _parse_index(self, remainder: Optional[str], kind: CommandKind) -> int:
        """Convert a 1-based index argument to a 0-based index."""
        if remainder is None or not remainder.strip():
            raise InvalidInputError(
                f"Please give the index of the item to be {INDEX_VERBS[kind]}."
            )
        text = remainder.strip()
        if not INDEX_RE.match(text):
            raise InvalidInputError(NO_SUCH_COMMAND)
        number = int(text)
        if not INDEX_MIN <= number <= INDEX_MAX:
            raise InvalidInputError(NO_SUCH_COMMAND)
        return number - 1

    @staticmethod
    def _check_description(remainder: Optional[str], kind_label: str) -> str:
        if remainder is None or not remainder.strip():
            raise IncompleteDescriptionError(
                f"The description of a {kind_label} cannot be empty!"
            )
        return remainder

    @staticmethod
    def _find_marker(text: str, marker: str, what: str, start: int = 0) -> int:
        index = text.find(marker, start)
        if index < 0:
            raise IncompleteDescriptionError(f"Please add the {what}")
        return index

    @staticmethod
    def _extract_name(text: str, end: int, kind_label: str) -> str:
        name = text[:end].strip()
        if not name:
            raise IncompleteDescriptionError(
                f"The description of a {kind_label} cannot be empty!"
            )
        return name

    @staticmethod
    def _extract_date(text: str, start: int, end: int, what: str) -> date:
        date_text = text[start:end].strip()
        if not date_text:
            raise IncompleteDescriptionError(f"Please add the {what}")
        parsed = parse_date(date_text)
        if parsed is None:
            raise InvalidInputError(INVALID_DATE)
        return parsed

    def _check_not_passed(self, value: date, what: str) -> None:
        if value < self.today():
            raise InvalidInputError(
                f"The given {what} (yyyy/mm/dd) {format_date_for_display(value)} has passed."
            )

    # -------------------- task kinds --------------------
    def _parse_todo(self, remainder: Optional[str]) -> Task:
        text = self._check_description(remainder, "todo")
        return Task.todo(text.strip())

    def _parse_deadline(self, remainder: Optional[str]) -> Task:
        text = self._check_description(remainder, "deadline")
        by_index = self._find_marker(text, BY_MARKER, "due date")

        name = self._extract_name(text, by_index, "deadline")
        due_date = self._extract_date(text, by_index + len(BY_MARKER), len(text), "due date")

        self._check_not_passed(due_date, "deadline")
        return Task.deadline(name, due_date)

    def _parse_event(self, remainder: Optional[str]) -> Task:
        text = self._check_description(remainder, "event")
        from_index = self._find_marker(text, FROM_MARKER, "start date")
        to_index = self._find_marker(text, TO_MARKER, "end date",
                                     start=from_index + len(FROM_MARKER))

        name = self._extract_name(text, from_index, "event")
        start_date = self._extract_date(text, from_index + len(FROM_MARKER), to_index,
                                        "start date")
        end_date = self._extract_date(text, to_index + len(TO_MARKER), len(text),
                                      "end date")

        if start_date > end_date:
            raise InvalidInputError(
                f"The given start date {format_date_for_display(start_date)} "
                f"should be on or before the end date {format_date_for_display(end_date)}."
            )
        self._check_not_passed(end_date, "end date")
        return Task.event(name, start_date, end_date)
