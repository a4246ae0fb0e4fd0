"""Simon - a small command-driven task tracking assistant."""

__version__ = "0.1.0"
__author__ = "Simon Team"

from .task import Task, TaskKind, render_task
from .task_list import TaskList
from .parser import Command, parse_command, parse_add_task
from .exceptions import (
    SimonError,
    EmptyNameError,
    MissingFieldError,
    InvalidIndexError,
    StorageError,
)

__all__ = [
    "Task",
    "TaskKind",
    "render_task",
    "TaskList",
    "Command",
    "parse_command",
    "parse_add_task",
    "SimonError",
    "EmptyNameError",
    "MissingFieldError",
    "InvalidIndexError",
    "StorageError",
    "__version__",
]
