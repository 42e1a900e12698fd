"""Task data model for the Taskbot application."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from .exceptions import IncompleteDescriptionError, InvalidInputError
from .utils.datetime import format_date_for_display, format_date_for_storage


FIELD_SEPARATOR = " | "


class TaskKind(Enum):
    """Task variants, keyed by their kind letter."""
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def letter(self) -> str:
        return self.value


# Dates each kind carries, in storage order.
KIND_DATE_FIELDS = {
    TaskKind.TODO: (),
    TaskKind.DEADLINE: ("due_date",),
    TaskKind.EVENT: ("start_date", "end_date"),
}

_ALL_DATE_FIELDS = ("due_date", "start_date", "end_date")
_MUTABLE_FIELDS = {"is_done"}


@dataclass
class Task:
    """A single task: a to-do, a deadline or an event.

    Only ``is_done`` may change once the task exists; every other field is
    fixed at construction and validated in ``__post_init__``.
    """

    kind: TaskKind
    name: str
    is_done: bool = False
    due_date: Optional[date] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    def __post_init__(self):
        if not isinstance(self.kind, TaskKind):
            raise InvalidInputError(f"Unknown task kind: {self.kind!r}")

        if self.name is None or not self.name.strip():
            raise IncompleteDescriptionError(
                f"The description of a {self.kind_label} cannot be empty!"
            )
        if "\n" in self.name or "\r" in self.name:
            raise InvalidInputError("A task description must fit on one line.")

        required = KIND_DATE_FIELDS[self.kind]
        for field_name in _ALL_DATE_FIELDS:
            value = getattr(self, field_name)
            if field_name in required and not isinstance(value, date):
                raise InvalidInputError(
                    f"A {self.kind_label} needs a {field_name.replace('_', ' ')}."
                )
            if field_name not in required and value is not None:
                raise InvalidInputError(
                    f"A {self.kind_label} does not take a {field_name.replace('_', ' ')}."
                )

        if self.kind is TaskKind.EVENT and self.start_date > self.end_date:
            raise InvalidInputError(
                f"The given start date {format_date_for_display(self.start_date)} "
                f"should be on or before the end date "
                f"{format_date_for_display(self.end_date)}."
            )

        object.__setattr__(self, "_sealed", True)

    def __setattr__(self, key, value):
        if key not in _MUTABLE_FIELDS and getattr(self, "_sealed", False):
            raise AttributeError(f"Task.{key} cannot be changed after creation")
        super().__setattr__(key, value)

    # -------------------- constructors --------------------
    @classmethod
    def todo(cls, name: str, is_done: bool = False) -> "Task":
        return cls(TaskKind.TODO, name, is_done=is_done)

    @classmethod
    def deadline(cls, name: str, due_date: date, is_done: bool = False) -> "Task":
        return cls(TaskKind.DEADLINE, name, is_done=is_done, due_date=due_date)

    @classmethod
    def event(cls, name: str, start_date: date, end_date: date,
              is_done: bool = False) -> "Task":
        return cls(TaskKind.EVENT, name, is_done=is_done,
                   start_date=start_date, end_date=end_date)

    # -------------------- state --------------------
    def mark_done(self) -> None:
        """Mark the task as done. Marking a done task again is a no-op."""
        self.is_done = True

    def unmark_done(self) -> None:
        """Mark the task as not done."""
        self.is_done = False

    @property
    def kind_label(self) -> str:
        return self.kind.name.lower()

    @property
    def dates(self) -> tuple:
        """Kind-specific dates in storage order."""
        return tuple(getattr(self, name) for name in KIND_DATE_FIELDS[self.kind])

    # -------------------- representations --------------------
    def render(self) -> str:
        """Human-readable line, e.g. ``[D][ ] get food (by: 11 November 2024)``."""
        status = "X" if self.is_done else " "
        line = f"[{self.kind.letter}][{status}] {self.name}"

        if self.kind is TaskKind.DEADLINE:
            line += f" (by: {format_date_for_display(self.due_date)})"
        elif self.kind is TaskKind.EVENT:
            line += (f" (from: {format_date_for_display(self.start_date)}"
                     f" to: {format_date_for_display(self.end_date)})")
        return line

    def encode(self) -> str:
        """Storage line, e.g. ``D | 0 | get food | 2024/11/11``."""
        parts = [self.kind.letter, "1" if self.is_done else "0", self.name]
        parts.extend(format_date_for_storage(d) for d in self.dates)
        return FIELD_SEPARATOR.join(parts)

    def matches_keyword(self, keyword: str) -> bool:
        """True if ``keyword`` appears in the name as a whole word.

        Both the name and the keyword are padded with a space, so a keyword
        at the very start or end of the name still matches while a partial
        word ("food" in "foodie") does not. A blank keyword never matches.
        """
        if not keyword or not keyword.strip():
            return False
        return f" {keyword} " in f" {self.name} "

    def __str__(self) -> str:
        return self.render()
