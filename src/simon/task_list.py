"""Ordered task list with 1-based addressing."""

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from .exceptions import InvalidIndexError
from .parser import parse_index
from .task import Task

logger = logging.getLogger(__name__)


class TaskList:
    """The user's tasks, in insertion order.

    Commands address tasks by 1-based position. Every operation validates
    its input before touching the list, so a failed command leaves the list
    exactly as it was.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = list(tasks) if tasks is not None else []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, position: int) -> Task:
        return self._tasks[position]

    def __repr__(self) -> str:
        return f"TaskList({self._tasks!r})"

    def add_task(self, task: Task) -> None:
        """Append a task to the end of the list."""
        self._tasks.append(task)
        logger.debug(f"Added task {len(self._tasks)}: {task.name}")

    def get_task(self, index: int) -> Task:
        """Return the task at 1-based ``index``."""
        if not 1 <= index <= len(self._tasks):
            if not self._tasks:
                raise InvalidIndexError(f"There is no task {index}; your list is empty.")
            raise InvalidIndexError(
                f"There is no task {index}; pick a number from 1 to {len(self._tasks)}."
            )
        return self._tasks[index - 1]

    def mark_task(self, line: str, done: bool) -> Task:
        """Set the done flag of the task numbered in a mark/unmark line."""
        task = self.get_task(parse_index(line))
        task.set_done(done)
        logger.debug(f"Set done={done} on task: {task.name}")
        return task

    def delete_task(self, line: str) -> Task:
        """Remove and return the task numbered in a delete line.

        Tasks after it move up one position.
        """
        index = parse_index(line)
        task = self.get_task(index)
        del self._tasks[index - 1]
        logger.debug(f"Deleted task {index}: {task.name}")
        return task

    def find_tasks(self, query: str) -> "TaskList":
        """Return a new list of tasks whose name contains ``query``.

        Matching is case-sensitive and keeps the original order. An empty
        query matches every task.
        """
        return TaskList(task for task in self._tasks if query in task.name)

    def get_all_tasks(self) -> Tuple[Task, ...]:
        """Read-only view of the tasks, for saving."""
        return tuple(self._tasks)

    def get_task_count(self) -> int:
        return len(self._tasks)
