"""Console presentation for the Simon assistant.

Replies are built as plain strings by the ``format_*`` helpers so any front
end can reuse them; :class:`Ui` prints them to a rich console.
"""

from typing import Iterable, List, Optional, TextIO

from rich.console import Console
from rich.text import Text

from .dates import SmartDateParser
from .task import Task


PROMPT = "> "

WELCOME = "Hello! I'm Simon.\nWhat can I do for you?"
GOODBYE = "Bye. Hope to see you again soon!"
LOADING_ERROR = "I couldn't load any saved tasks, so we're starting with an empty list."

HELP = (
    "Commands:\n"
    "  list\n"
    "  todo <name>\n"
    "  deadline <name> /by <when>\n"
    "  event <name> /from <when> /to <when>\n"
    "  mark <number>, unmark <number>, delete <number>\n"
    "  find <text>\n"
    "  bye"
)


def format_task_count(count: int) -> str:
    noun = "task" if count == 1 else "tasks"
    return f"Now you have {count} {noun} in the list."


def format_added(task: Task, count: int) -> str:
    return f"Got it. I've added this task:\n  {task}\n{format_task_count(count)}"


def format_marked(done: bool, task: Task) -> str:
    if done:
        return f"Nice! I've marked this task as done:\n  {task}"
    return f"OK, I've marked this task as not done yet:\n  {task}"


def format_deleted(task: Task, count: int) -> str:
    return f"Noted. I've removed this task:\n  {task}\n{format_task_count(count)}"


def format_unknown(suggestion: Optional[str] = None) -> str:
    message = "Sorry, I don't know what that means."
    if suggestion:
        message += f" Did you mean '{suggestion}'?"
    return f"{message}\n{HELP}"


def format_task_lines(tasks: Iterable[Task]) -> List[str]:
    return [f"{number}.{task}" for number, task in enumerate(tasks, start=1)]


class Ui:
    """Renders command results on a rich console and reads user input."""

    def __init__(
        self,
        console: Optional[Console] = None,
        input_stream: Optional[TextIO] = None,
        date_parser: Optional[SmartDateParser] = None,
    ):
        self.console = console or Console()
        self.input_stream = input_stream
        self.date_parser = date_parser or SmartDateParser()

    def _say(self, message: str, style: Optional[str] = None) -> None:
        # Text() keeps task names with [brackets] from being read as markup
        self.console.print(Text(message, style=style or ""))
        self.console.rule(style="dim")

    def read_command(self) -> Optional[str]:
        """Read one line of input; None once input is exhausted."""
        if self.input_stream is not None:
            self.console.print(PROMPT, end="")
            line = self.input_stream.readline()
            if not line:
                return None
            return line.rstrip("\r\n")

        try:
            return self.console.input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            return None

    def show_welcome(self) -> None:
        self._say(WELCOME, style="bold")

    def show_goodbye(self) -> None:
        self._say(GOODBYE, style="bold")

    def show_loading_error(self) -> None:
        self._say(LOADING_ERROR, style="yellow")

    def list_tasks(self, tasks: Iterable[Task]) -> None:
        tasks = list(tasks)
        if not tasks:
            self._say("Your list is empty.")
            return
        self._print_numbered("Here are the tasks in your list:", tasks)

    def show_matching_tasks(self, tasks: Iterable[Task]) -> None:
        tasks = list(tasks)
        if not tasks:
            self._say("No tasks match your search.")
            return
        self._print_numbered("Here are the matching tasks in your list:", tasks)

    def _print_numbered(self, heading: str, tasks: List[Task]) -> None:
        text = Text(heading)
        for task, line in zip(tasks, format_task_lines(tasks)):
            text.append("\n")
            if self.date_parser.is_overdue(task):
                style = "red"
            else:
                style = "dim" if task.done else ""
            text.append(line, style=style)
        self.console.print(text)
        self.console.rule(style="dim")

    def show_added_task(self, task: Task, count: int) -> None:
        self._say(format_added(task, count), style="green")

    def show_marked_task(self, done: bool, task: Task) -> None:
        self._say(format_marked(done, task), style="green")

    def show_deleted_task(self, task: Task, count: int) -> None:
        self._say(format_deleted(task, count), style="green")

    def show_unknown_command(self, suggestion: Optional[str] = None) -> None:
        self._say(format_unknown(suggestion), style="yellow")

    def show_error(self, message: str) -> None:
        self._say(f"OOPS! {message}", style="red")

    def show_save_error(self, message: str) -> None:
        self._say(f"Your change was made but could not be saved: {message}", style="red")
