"""Command parser for the Simon assistant.

A line of input is a command word followed by its arguments, e.g.
``deadline return book /by Sunday``. The command word selects one of a
closed set of commands; the rest of the line is split on the ``/by``,
``/from`` and ``/to`` markers where the command needs them.
"""

import re
from enum import Enum
from typing import Optional, Tuple

from fuzzywuzzy import fuzz, process

from .exceptions import EmptyNameError, InvalidIndexError, MissingFieldError
from .task import Task


class Command(Enum):
    """Recognised command words."""
    LIST = "list"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    FIND = "find"
    BYE = "bye"
    UNKNOWN = "unknown"


KEYWORDS = {command.value: command for command in Command if command is not Command.UNKNOWN}

ADD_COMMANDS = (Command.TODO, Command.DEADLINE, Command.EVENT)

INDEX_RE = re.compile(r"\d+")
MAX_INDEX_DIGITS = 18


def _marker_pattern(marker: str) -> "re.Pattern[str]":
    return re.compile(r"(?:^|\s)" + re.escape(marker) + r"(?:\s|$)")


MARKERS = {
    "/by": _marker_pattern("/by"),
    "/from": _marker_pattern("/from"),
    "/to": _marker_pattern("/to"),
}


def parse_command(token: str) -> Command:
    """Map a command word to a Command. Matching is case-sensitive."""
    return KEYWORDS.get(token, Command.UNKNOWN)


def command_word(line: str) -> str:
    """Return the first whitespace-delimited token of ``line`` ("" if blank)."""
    parts = line.split(maxsplit=1)
    return parts[0] if parts else ""


def remainder(line: str) -> str:
    """Return everything after the command word, stripped."""
    parts = line.strip().split(maxsplit=1)
    return parts[1].strip() if len(parts) > 1 else ""


def suggest_command(token: str) -> Optional[str]:
    """Suggest the closest command word for a mistyped ``token``."""
    if not token:
        return None
    match = process.extractOne(token, list(KEYWORDS), scorer=fuzz.ratio, score_cutoff=70)
    return match[0] if match else None


def _split_on(text: str, marker: str) -> Optional[Tuple[str, str]]:
    """Split ``text`` around the first ``marker``; None if it is absent."""
    match = MARKERS[marker].search(text)
    if not match:
        return None
    return text[:match.start()].strip(), text[match.end():].strip()


def _parse_todo(args: str) -> Task:
    if not args:
        raise EmptyNameError("The description of a todo cannot be empty.")
    return Task.todo(args)


def _parse_deadline(args: str) -> Task:
    usage = "Usage: deadline <name> /by <when>"
    parts = _split_on(args, "/by")
    if parts is None:
        raise MissingFieldError(f"A deadline needs a /by date. {usage}")

    name, by = parts
    if not name:
        raise MissingFieldError(f"The description of a deadline cannot be empty. {usage}")
    if not by:
        raise MissingFieldError(f"The /by date of a deadline cannot be empty. {usage}")
    return Task.deadline(name, by)


def _parse_event(args: str) -> Task:
    usage = "Usage: event <name> /from <when> /to <when>"
    head = _split_on(args, "/from")
    if head is None:
        raise MissingFieldError(f"An event needs a /from time. {usage}")

    name, span = head
    tail = _split_on(span, "/to")
    if tail is None:
        raise MissingFieldError(f"An event needs a /to time after /from. {usage}")

    start, end = tail
    if not name:
        raise MissingFieldError(f"The description of an event cannot be empty. {usage}")
    if not start:
        raise MissingFieldError(f"The /from time of an event cannot be empty. {usage}")
    if not end:
        raise MissingFieldError(f"The /to time of an event cannot be empty. {usage}")
    return Task.event(name, start, end)


def parse_add_task(line: str, kind: Command) -> Task:
    """Build a new task from a todo, deadline or event command line.

    Args:
        line: The full input line, including the command word.
        kind: The command already selected by :func:`parse_command`.

    Returns:
        A new, not-done Task.

    Raises:
        EmptyNameError: A todo has no name.
        MissingFieldError: A deadline or event is missing a marker, or one of
            its segments is blank.
    """
    args = remainder(line)

    if kind is Command.TODO:
        return _parse_todo(args)
    if kind is Command.DEADLINE:
        return _parse_deadline(args)
    if kind is Command.EVENT:
        return _parse_event(args)

    raise ValueError(f"{kind.name} does not add a task")


def parse_index(line: str) -> int:
    """Extract the 1-based task number from a mark, unmark or delete line.

    Only the shape is checked here; range checking is done by the task list.
    """
    word = command_word(line)
    arg = remainder(line)

    if not arg:
        raise InvalidIndexError(f"Please give a task number, e.g. '{word or 'mark'} 2'.")
    if not INDEX_RE.fullmatch(arg):
        raise InvalidIndexError(f"'{arg}' is not a valid task number.")

    if len(arg) > MAX_INDEX_DIGITS:
        raise InvalidIndexError(f"'{arg[:20]}...' is far larger than any task number.")

    index = int(arg)
    if index < 1:
        raise InvalidIndexError("Task numbers start at 1.")
    return index
