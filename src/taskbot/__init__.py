"""Taskbot - a personal task-tracking assistant driven by one-line commands."""

__version__ = "0.1.0"
__author__ = "Taskbot Team"

from .exceptions import (
    TaskbotError,
    IncompleteDescriptionError,
    InvalidInputError,
    OutOfBoundsError,
    StorageCorruptionError,
)
from .todo import Task, TaskKind
from .task_list import TaskList
from .storage import Storage, TaskFileFormat
from .parser import CommandParser
from .session import Session

__all__ = [
    "Task",
    "TaskKind",
    "TaskList",
    "Storage",
    "TaskFileFormat",
    "CommandParser",
    "Session",
    "TaskbotError",
    "IncompleteDescriptionError",
    "InvalidInputError",
    "OutOfBoundsError",
    "StorageCorruptionError",
    "__version__",
]
