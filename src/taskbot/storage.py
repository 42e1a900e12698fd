"""Storage layer for Taskbot using a flat pipe-delimited text file.

One task per line::

    T | 0 | read book
    D | 1 | return book | 2024/11/11
    E | 0 | book fair | 2024/11/01 | 2024/11/03

Lines that cannot be decoded are skipped with a warning instead of
failing the whole load.
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .exceptions import StorageCorruptionError, TaskbotError
from .task_list import TaskList
from .todo import FIELD_SEPARATOR, KIND_DATE_FIELDS, Task, TaskKind
from .utils.datetime import parse_date

logger = logging.getLogger(__name__)

DONE_FLAGS = {"0": False, "1": True}


class TaskFileFormat:
    """Handles conversion between Task objects and storage lines."""

    @staticmethod
    def encode(task: Task) -> str:
        return task.encode()

    @staticmethod
    def decode(line: str, line_number: Optional[int] = None) -> Task:
        """Parse one storage line back into a Task.

        Date fields are taken from the right and kind and flag from the
        left, so whatever lies between them is the name, separators included.

        Raises:
            StorageCorruptionError: If the line is not a valid task record.
        """
        raw = line.rstrip("\r\n")

        def corrupt(reason: str) -> StorageCorruptionError:
            return StorageCorruptionError(reason, line_number=line_number, line=raw)

        kind_text = raw.split(FIELD_SEPARATOR, 1)[0]
        try:
            kind = TaskKind(kind_text)
        except ValueError:
            raise corrupt(f"unknown task kind {kind_text!r}")

        date_fields = KIND_DATE_FIELDS[kind]
        head, *date_texts = raw.rsplit(FIELD_SEPARATOR, len(date_fields))
        head_parts = head.split(FIELD_SEPARATOR, 2)
        expected = 3 + len(date_fields)
        found = len(head_parts) + len(date_texts)
        if found < expected:
            raise corrupt(f"expected at least {expected} fields, found {found}")

        _, flag, name = head_parts
        if flag not in DONE_FLAGS:
            raise corrupt(f"done flag must be 0 or 1, found {flag!r}")

        dates = {}
        for field_name, text in zip(date_fields, date_texts):
            parsed = parse_date(text)
            if parsed is None:
                raise corrupt(f"invalid date {text!r}")
            dates[field_name] = parsed

        try:
            return Task(kind, name, is_done=DONE_FLAGS[flag], **dates)
        except TaskbotError as e:
            raise corrupt(e.message)

    @classmethod
    def dumps(cls, tasks) -> str:
        """Encode a list of tasks, one line each, with a trailing newline."""
        lines = [cls.encode(task) for task in tasks]
        return "".join(f"{line}\n" for line in lines)

    @classmethod
    def loads(cls, content: str) -> Tuple[List[Task], List[StorageCorruptionError]]:
        """Decode stored content, collecting problems instead of raising."""
        tasks: List[Task] = []
        problems: List[StorageCorruptionError] = []

        # Only "\n" ends a record; a name may hold other line-break characters.
        for line_number, line in enumerate(content.split("\n"), start=1):
            line = line.rstrip("\r")
            if not line.strip():
                continue
            try:
                tasks.append(cls.decode(line, line_number))
            except StorageCorruptionError as e:
                logger.warning("Skipping unreadable task record (%s)", e)
                problems.append(e)

        return tasks, problems


class Storage:
    """File-based storage for a single task list."""

    def __init__(self, path: Union[str, Path], backup_on_save: bool = False):
        self.path = Path(path).expanduser()
        self.backup_on_save = backup_on_save
        self.problems: List[StorageCorruptionError] = []
        self.last_error: Optional[str] = None

    @property
    def backup_path(self) -> Path:
        return self.path.with_name(self.path.name + ".bak")

    def _ensure_directories(self):
        """Ensure the data directory exists."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def load(self) -> TaskList:
        """Load the task list from disk.

        A missing file is a fresh start. An unreadable file is logged and
        also yields an empty list so the session can carry on.
        """
        self.problems = []
        self.last_error = None

        if not self.path.exists():
            logger.info("No task file at %s, starting with an empty list", self.path)
            return TaskList()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            self.last_error = f"Could not read tasks from {self.path}: {e}"
            logger.error(self.last_error)
            return TaskList()

        tasks, self.problems = TaskFileFormat.loads(content)
        logger.debug("Loaded %d task(s) from %s (%d skipped)",
                     len(tasks), self.path, len(self.problems))
        return TaskList(tasks)

    def save(self, tasks) -> bool:
        """Write the whole list to disk atomically.

        The content goes to a temporary file in the target directory which
        then replaces the target, so a failed write never leaves a partial
        file behind.

        Returns:
            True if the list was written, False otherwise.
        """
        content = TaskFileFormat.dumps(tasks)
        tmp_name = None

        try:
            self._ensure_directories()
            if self.backup_on_save:
                self.backup()

            fd, tmp_name = tempfile.mkstemp(
                dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None

            self.last_error = None
            logger.debug("Saved %d task(s) to %s", len(tasks), self.path)
            return True

        except OSError as e:
            self.last_error = f"Could not save tasks to {self.path}: {e}"
            logger.error(self.last_error)
            return False

        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.debug("Could not remove temporary file %s", tmp_name)

    def backup(self, backup_path: Optional[Path] = None) -> Optional[Path]:
        """Copy the current task file aside.

        Returns:
            The backup path, or None if there was nothing to copy.
        """
        if not self.path.exists():
            return None

        target = Path(backup_path) if backup_path else self.backup_path
        shutil.copy2(self.path, target)
        logger.debug("Backed up %s to %s", self.path, target)
        return target
