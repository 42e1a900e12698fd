"""Session: the command/result interface used by the read loop.

A session owns the task list for its lifetime, runs one input line at a
time and decides when the list goes back to storage.
"""

import logging
from typing import List, Optional

from .commands import CommandResult
from .config import ConfigModel, SAVE_EACH
from .exceptions import TaskbotError
from .parser import CommandParser
from .storage import Storage
from .task_list import TaskList

logger = logging.getLogger(__name__)

GREETING_MESSAGE = "Hello! I'm Taskbot\nWhat can I do for you?"


class Session:
    """Executes commands against a task list and persists it."""

    def __init__(self, storage: Storage, tasks: Optional[TaskList] = None,
                 parser: Optional[CommandParser] = None,
                 save_mode: str = SAVE_EACH):
        self.storage = storage
        self.tasks = tasks if tasks is not None else TaskList()
        self.parser = parser or CommandParser()
        self.save_mode = save_mode
        self.dirty = False
        self.closed = False
        self.notices: List[str] = []

    @classmethod
    def open(cls, config: ConfigModel, parser: Optional[CommandParser] = None) -> "Session":
        """Build storage from the config and load the saved list."""
        storage = Storage(config.get_data_path(), backup_on_save=config.backup_on_save)
        tasks = storage.load()
        session = cls(storage, tasks, parser=parser, save_mode=config.save_mode)

        if storage.last_error:
            session.notices.append(f"{storage.last_error}. Starting with an empty list.")
        for problem in storage.problems:
            session.notices.append(f"Skipped unreadable task record ({problem}).")
        return session

    @property
    def greeting(self) -> str:
        return GREETING_MESSAGE

    def execute(self, line: str) -> CommandResult:
        """Parse and run one line of input.

        Expected failures are returned as a failed result; the task list is
        untouched by a command that fails.
        """
        try:
            command = self.parser.parse(line)
            message = command.execute(self.tasks)
        except TaskbotError as e:
            logger.debug("Command %r failed: %s", line, e.message)
            return CommandResult(message=e.message, error=e)

        logger.debug("Executed %s", command.kind.value)
        if command.mutates:
            self.dirty = True
            if self.save_mode == SAVE_EACH:
                self.save()

        return CommandResult(message=message, is_exit=command.is_exit, command=command)

    def save(self) -> bool:
        """Persist the list if it has unsaved changes."""
        if not self.dirty:
            return True
        if self.storage.save(self.tasks):
            self.dirty = False
            return True
        return False

    def close(self) -> bool:
        """Flush pending changes. Safe to call more than once."""
        if self.closed:
            return True
        saved = self.save()
        self.closed = True
        return saved

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
