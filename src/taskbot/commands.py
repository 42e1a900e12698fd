"""Commands produced by the parser and executed against a task list."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .exceptions import TaskbotError
from .task_list import TaskList
from .todo import Task

FAREWELL_MESSAGE = "Bye. Hope to see you again soon!"


class CommandKind(Enum):
    """The closed set of commands, keyed by their keyword."""
    BYE = "bye"
    LIST = "list"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    FIND = "find"


class Command(ABC):
    """A parsed instruction, ready to run against a task list."""

    kind: CommandKind
    is_exit: bool = False
    mutates: bool = False

    @abstractmethod
    def execute(self, tasks: TaskList) -> str:
        """Run the command and return the message for the user."""


@dataclass
class ByeCommand(Command):
    kind = CommandKind.BYE
    is_exit = True

    def execute(self, tasks: TaskList) -> str:
        return FAREWELL_MESSAGE


@dataclass
class ListCommand(Command):
    kind = CommandKind.LIST

    def execute(self, tasks: TaskList) -> str:
        return tasks.list()


@dataclass
class MarkCommand(Command):
    index: int
    kind = CommandKind.MARK
    mutates = True

    def execute(self, tasks: TaskList) -> str:
        return tasks.mark_done(self.index)


@dataclass
class UnmarkCommand(Command):
    index: int
    kind = CommandKind.UNMARK
    mutates = True

    def execute(self, tasks: TaskList) -> str:
        return tasks.unmark_done(self.index)


@dataclass
class DeleteCommand(Command):
    index: int
    kind = CommandKind.DELETE
    mutates = True

    def execute(self, tasks: TaskList) -> str:
        return tasks.delete(self.index)


@dataclass
class AddCommand(Command):
    """Adds a to-do, deadline or event; ``kind`` follows the task."""
    task: Task
    mutates = True

    @property
    def kind(self) -> CommandKind:
        return CommandKind(self.task.kind_label)

    def execute(self, tasks: TaskList) -> str:
        return tasks.add(self.task)


@dataclass
class FindCommand(Command):
    keyword: str
    kind = CommandKind.FIND

    def execute(self, tasks: TaskList) -> str:
        return tasks.find(self.keyword)


@dataclass
class CommandResult:
    """Outcome of one input line, as handed back to the caller."""
    message: str
    is_exit: bool = False
    error: Optional[TaskbotError] = None
    command: Optional[Command] = field(default=None, repr=False)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def suggestions(self):
        return self.error.suggestions if self.error else []
