"""Task data model for the Simon assistant."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TaskKind(Enum):
    """Task variants; the value is the one-letter category tag."""
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


@dataclass
class Task:
    """A tracked unit of work.

    Every task has a name and a done flag. Deadlines carry ``by`` and events
    carry ``start``/``end`` (rendered as ``from``/``to``). Dates and times are
    opaque strings here, stored exactly as the user typed them.
    """

    kind: TaskKind
    name: str
    done: bool = False

    # Variant fields
    by: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None

    @classmethod
    def todo(cls, name: str, done: bool = False) -> "Task":
        """Create a plain to-do."""
        return cls(kind=TaskKind.TODO, name=name, done=done)

    @classmethod
    def deadline(cls, name: str, by: str, done: bool = False) -> "Task":
        """Create a task that must be done by ``by``."""
        return cls(kind=TaskKind.DEADLINE, name=name, done=done, by=by)

    @classmethod
    def event(cls, name: str, start: str, end: str, done: bool = False) -> "Task":
        """Create an event spanning ``start`` to ``end``."""
        return cls(kind=TaskKind.EVENT, name=name, done=done, start=start, end=end)

    @property
    def tag(self) -> str:
        return self.kind.value

    def get_name(self) -> str:
        return self.name

    def is_done(self) -> bool:
        return self.done

    def set_done(self, done: bool) -> None:
        """Set the completion flag. Setting the current value again is a no-op."""
        self.done = done

    def __str__(self) -> str:
        return render_task(self)


def render_checkbox(done: bool) -> str:
    return "[X]" if done else "[ ]"


def render_task(task: Task) -> str:
    """Render a task as ``" [<tag>][<X| >] <name>"`` plus its variant suffix."""
    line = f" [{task.tag}]{render_checkbox(task.done)} {task.name}"

    if task.kind is TaskKind.TODO:
        return line
    if task.kind is TaskKind.DEADLINE:
        return f"{line} (by: {task.by})"
    if task.kind is TaskKind.EVENT:
        return f"{line} (from: {task.start} to: {task.end})"

    raise ValueError(f"Unknown task kind: {task.kind!r}")
