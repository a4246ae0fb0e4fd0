"""Storage layer for Simon using a markdown file with YAML frontmatter."""

import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional

import frontmatter
import yaml

from .exceptions import StorageError
from .task import Task, TaskKind

logger = logging.getLogger(__name__)


APP_NAME = "simon"
HEADING = "# Tasks"

TASK_LINE_RE = re.compile(r"^- \[( |x|X)\] \[([TDE])\] (.*)$")

# Fields per kind: name, then by (D) or from/to (E)
FIELD_COUNTS = {TaskKind.TODO: 1, TaskKind.DEADLINE: 2, TaskKind.EVENT: 3}
FIELD_SEPARATOR = " | "


def escape_field(text: str) -> str:
    """Escape backslashes and pipes so a field never contains a bare separator."""
    return text.replace("\\", "\\\\").replace("|", "\\|")


def split_fields(body: str) -> List[str]:
    """Split a stored task body on unescaped pipes, undoing :func:`escape_field`."""
    fields = []
    current = []
    chars = iter(body)
    for char in chars:
        if char == "\\":
            current.append(next(chars, "\\"))
        elif char == "|":
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
    fields.append("".join(current))
    return [field.strip() for field in fields]


def task_fields(task: Task) -> List[str]:
    if task.kind is TaskKind.DEADLINE:
        return [task.name, task.by]
    if task.kind is TaskKind.EVENT:
        return [task.name, task.start, task.end]
    return [task.name]


class TaskMarkdownFormat:
    """Handles conversion between Task objects and markdown checkbox lines.

    Variant fields follow the name, separated by ``" | "``, e.g.
    ``- [x] [D] return book | Sunday``. Pipes and backslashes inside fields
    are backslash-escaped, so any text the user typed loads back unchanged.
    """

    @staticmethod
    def to_markdown(task: Task) -> str:
        """Convert a Task to a markdown checkbox line."""
        checkbox = "- [x]" if task.done else "- [ ]"
        body = FIELD_SEPARATOR.join(escape_field(field) for field in task_fields(task))
        return f"{checkbox} [{task.tag}] {body}"

    @staticmethod
    def from_markdown(line: str) -> Optional[Task]:
        """Parse a markdown line back to a Task.

        Returns None for blank and non-task lines. Raises StorageError for a
        task line whose fields cannot be recovered.
        """
        line = line.strip()
        if not line or not line.startswith("- ["):
            return None

        m = TASK_LINE_RE.match(line)
        if not m:
            raise StorageError(f"Unreadable task line: {line!r}")

        done = m.group(1) in ("x", "X")
        kind = TaskKind(m.group(2))
        fields = split_fields(m.group(3))

        if len(fields) != FIELD_COUNTS[kind] or not all(fields):
            raise StorageError(
                f"Expected {FIELD_COUNTS[kind]} non-empty field(s) for a {kind.name.lower()}: {line!r}"
            )

        if kind is TaskKind.TODO:
            return Task.todo(fields[0], done=done)
        if kind is TaskKind.DEADLINE:
            return Task.deadline(fields[0], fields[1], done=done)
        return Task.event(fields[0], fields[1], fields[2], done=done)


class TaskFileFormat:
    """Handles conversion between a task sequence and a whole task file."""

    @staticmethod
    def to_markdown(tasks: Iterable[Task]) -> str:
        tasks = list(tasks)
        content_lines = [HEADING, ""]
        content_lines.extend(TaskMarkdownFormat.to_markdown(task) for task in tasks)

        post = frontmatter.Post("\n".join(content_lines), app=APP_NAME, count=len(tasks))
        return frontmatter.dumps(post)

    @staticmethod
    def from_markdown(content: str) -> List[Task]:
        """Parse a task file.

        A file that carries neither the ``app: simon`` frontmatter nor the
        task heading is not a task file and raises StorageError.
        """
        post = frontmatter.loads(content)

        lines = post.content.split("\n")
        has_heading = any(line.strip() == HEADING for line in lines)
        if post.metadata.get("app") != APP_NAME and not has_heading:
            raise StorageError("Not a Simon task file (no 'app: simon' frontmatter or '# Tasks' heading)")

        tasks = []
        for line in lines:
            task = TaskMarkdownFormat.from_markdown(line)
            if task:
                tasks.append(task)

        expected = post.metadata.get("count")
        if expected is not None and expected != len(tasks):
            logger.warning(f"Task file declares {expected} tasks but contains {len(tasks)}")

        return tasks


class Storage:
    """File-based storage for the task list."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> List[Task]:
        """Load all tasks from the task file.

        Raises:
            StorageError: The file does not exist or cannot be parsed.
        """
        if not self.path.exists():
            raise StorageError(f"No task file at {self.path}")

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Could not read {self.path}: {e}") from e

        try:
            tasks = TaskFileFormat.from_markdown(content)
        except (yaml.YAMLError, ValueError) as e:
            raise StorageError(f"Could not parse {self.path}: {e}") from e

        logger.debug(f"Loaded {len(tasks)} tasks from {self.path}")
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        """Write all tasks to the task file, replacing its contents."""
        content = TaskFileFormat.to_markdown(tasks)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise StorageError(f"Could not save tasks to {self.path}: {e}") from e

        logger.debug(f"Saved tasks to {self.path}")
