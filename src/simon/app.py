"""The Simon session: reads commands and applies them to the task list."""

import logging
from typing import Optional

from .exceptions import SimonError, StorageError
from .parser import (
    ADD_COMMANDS,
    Command,
    command_word,
    parse_add_task,
    parse_command,
    remainder,
    suggest_command,
)
from .storage import Storage
from .task_list import TaskList
from .ui import Ui

logger = logging.getLogger(__name__)


class Simon:
    """One interactive session over a single task list.

    Storage and presentation are passed in. The list is loaded once at start
    and saved after every change.
    """

    def __init__(self, storage: Storage, ui: Ui, suggest_commands: bool = True):
        self.storage = storage
        self.ui = ui
        self.suggest_commands = suggest_commands
        self.tasks = self._load()

    def _load(self) -> TaskList:
        try:
            return TaskList(self.storage.load())
        except StorageError as e:
            logger.info(f"Starting with an empty list: {e}")
            self.ui.show_loading_error()
            return TaskList()

    def _save(self) -> None:
        try:
            self.storage.save(self.tasks.get_all_tasks())
        except StorageError as e:
            logger.error(f"Save failed: {e}")
            self.ui.show_save_error(str(e))

    def execute(self, line: str) -> bool:
        """Parse and apply one command line.

        Returns False when the session should end (``bye``), True otherwise.
        """
        command = parse_command(command_word(line))
        logger.debug(f"Command {command.name}: {line!r}")

        try:
            return self._dispatch(command, line)
        except SimonError as e:
            self.ui.show_error(str(e))
            return True

    def _dispatch(self, command: Command, line: str) -> bool:
        if command is Command.LIST:
            self.ui.list_tasks(self.tasks)
        elif command in ADD_COMMANDS:
            task = parse_add_task(line, command)
            self.tasks.add_task(task)
            self._save()
            self.ui.show_added_task(task, self.tasks.get_task_count())
        elif command in (Command.MARK, Command.UNMARK):
            done = command is Command.MARK
            task = self.tasks.mark_task(line, done)
            self._save()
            self.ui.show_marked_task(done, task)
        elif command is Command.DELETE:
            task = self.tasks.delete_task(line)
            self._save()
            self.ui.show_deleted_task(task, self.tasks.get_task_count())
        elif command is Command.FIND:
            self.ui.show_matching_tasks(self.tasks.find_tasks(remainder(line)))
        elif command is Command.BYE:
            return False
        elif command is Command.UNKNOWN:
            suggestion: Optional[str] = None
            if self.suggest_commands:
                suggestion = suggest_command(command_word(line))
            self.ui.show_unknown_command(suggestion)
        else:
            raise ValueError(f"Unhandled command: {command!r}")
        return True

    def run(self) -> None:
        """Read and execute commands until ``bye`` or end of input."""
        self.ui.show_welcome()
        while True:
            line = self.ui.read_command()
            if line is None:
                logger.debug("End of input")
                break
            if not self.execute(line):
                break
        self.ui.show_goodbye()
