"""Ordered task list: index-checked mutation, listing and search.

Insertion order is display order is storage order. Indexes taken by the
public methods are 0-based; the numbers shown to the user are 1-based.
"""

import logging
from typing import Iterable, Iterator, List, Optional

from .exceptions import OutOfBoundsError
from .todo import Task

logger = logging.getLogger(__name__)

EMPTY_LIST_MESSAGE = "There are no items in the list.\n"
OUT_OF_BOUNDS_MESSAGE = "Item at given index does not exist! Please enter a valid index."


class TaskList:
    """Exclusive owner of the session's tasks."""

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = list(tasks) if tasks else []

    # -------------------- container protocol --------------------
    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, TaskList):
            return NotImplemented
        return self._tasks == other._tasks

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"TaskList({self._tasks!r})"

    @property
    def size(self) -> int:
        return len(self._tasks)

    def to_list(self) -> List[Task]:
        """Shallow snapshot of the tasks, in order."""
        return list(self._tasks)

    # -------------------- bounds --------------------
    def _check_index(self, index: int) -> None:
        if not isinstance(index, int) or index < 0 or index >= len(self._tasks):
            logger.debug("Rejected index %r for list of %d", index, len(self._tasks))
            raise OutOfBoundsError(OUT_OF_BOUNDS_MESSAGE)

    # -------------------- mutation --------------------
    def add(self, task: Task) -> str:
        self._tasks.append(task)
        return (f"Got it. I've added this task:\n {task}\n"
                f"Now you have {len(self._tasks)} task(s) in your list.\n")

    def delete(self, index: int) -> str:
        self._check_index(index)
        removed = self._tasks.pop(index)
        return (f"Noted. I've removed this task:\n {removed}\n"
                f"Now you have {len(self._tasks)} task(s) in the list.\n")

    def mark_done(self, index: int) -> str:
        self._check_index(index)
        task = self._tasks[index]
        task.mark_done()
        return f"Nice! I've marked this task as done:\n {task}\n"

    def unmark_done(self, index: int) -> str:
        self._check_index(index)
        task = self._tasks[index]
        task.unmark_done()
        return f"OK, I've marked this task as not done:\n {task}\n"

    # -------------------- queries --------------------
    def list(self) -> str:
        if not self._tasks:
            return EMPTY_LIST_MESSAGE
        return "Here are the tasks in your list:" + _numbered(self._tasks)

    def find(self, keyword: str) -> str:
        """List the tasks whose name contains ``keyword`` as a whole word."""
        matches = [task for task in self._tasks if task.matches_keyword(keyword)]
        if not matches:
            return f'None of the items in your list matches with "{keyword}"'
        return "Here are the matching tasks in your list:" + _numbered(matches)


def _numbered(tasks: List[Task]) -> str:
    return "".join(f"\n{number}. {task}" for number, task in enumerate(tasks, start=1))
