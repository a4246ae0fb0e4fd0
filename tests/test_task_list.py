"""Tests for TaskList operations."""

import pytest

from simon.exceptions import InvalidIndexError
from simon.task import Task
from simon.task_list import TaskList


def snapshot(tasks: TaskList):
    return [(str(task), task.is_done()) for task in tasks]


class TestTaskList:
    """Test list mutation and lookup."""

    def setup_method(self):
        self.tasks = TaskList()
        self.tasks.add_task(Task.todo("read book"))
        self.tasks.add_task(Task.deadline("return book", "Sunday"))
        self.tasks.add_task(Task.event("project meeting", "Mon 2pm", "4pm"))

    def test_add_preserves_order(self):
        names = [task.get_name() for task in self.tasks.get_all_tasks()]
        assert names == ["read book", "return book", "project meeting"]
        assert self.tasks.get_task_count() == 3
        assert len(self.tasks) == 3

    def test_duplicates_are_allowed(self):
        self.tasks.add_task(Task.todo("read book"))
        assert self.tasks.get_task_count() == 4

    def test_get_task_is_one_based(self):
        assert self.tasks.get_task(1).get_name() == "read book"
        assert self.tasks.get_task(3).get_name() == "project meeting"

    def test_mark_and_unmark(self):
        task = self.tasks.mark_task("mark 2", True)
        assert task is self.tasks.get_task(2)
        assert task.is_done()

        task = self.tasks.mark_task("unmark 2", False)
        assert not task.is_done()

    def test_mark_is_idempotent(self):
        self.tasks.mark_task("mark 1", True)
        self.tasks.mark_task("mark 1", True)
        assert self.tasks.get_task(1).is_done()

        self.tasks.mark_task("unmark 1", False)
        self.tasks.mark_task("unmark 1", False)
        assert not self.tasks.get_task(1).is_done()

    def test_delete_shifts_indices(self):
        third = self.tasks.get_task(3)

        deleted = self.tasks.delete_task("delete 2")

        assert deleted.get_name() == "return book"
        assert self.tasks.get_task_count() == 2
        assert self.tasks.get_task(2) is third

    @pytest.mark.parametrize("line", ["mark 99", "mark 4", "mark 0", "mark x", "mark"])
    def test_bad_index_leaves_list_unchanged(self, line):
        before = snapshot(self.tasks)

        with pytest.raises(InvalidIndexError):
            self.tasks.mark_task(line, True)

        assert snapshot(self.tasks) == before

    def test_out_of_range_delete_leaves_list_unchanged(self):
        before = snapshot(self.tasks)

        with pytest.raises(InvalidIndexError):
            self.tasks.delete_task("delete 99")

        assert snapshot(self.tasks) == before

    def test_index_on_empty_list(self):
        with pytest.raises(InvalidIndexError, match="empty"):
            TaskList().mark_task("mark 1", True)

    def test_get_all_tasks_is_read_only_view(self):
        view = self.tasks.get_all_tasks()
        assert isinstance(view, tuple)
        with pytest.raises(AttributeError):
            view.append(Task.todo("sneaky"))


class TestFindTasks:
    """Test substring search."""

    def setup_method(self):
        self.tasks = TaskList([
            Task.todo("read book"),
            Task.todo("buy milk"),
            Task.deadline("return book", "Sunday"),
            Task.todo("Book flights"),
        ])

    def test_matches_in_source_order(self):
        matches = self.tasks.find_tasks("book")
        assert [task.get_name() for task in matches] == ["read book", "return book"]

    def test_match_is_case_sensitive(self):
        matches = self.tasks.find_tasks("Book")
        assert [task.get_name() for task in matches] == ["Book flights"]

    def test_no_matches_returns_empty_list(self):
        matches = self.tasks.find_tasks("zebra")
        assert isinstance(matches, TaskList)
        assert matches.get_task_count() == 0

    def test_empty_query_matches_everything(self):
        assert self.tasks.find_tasks("").get_task_count() == 4

    def test_result_is_independent(self):
        matches = self.tasks.find_tasks("book")
        matches.add_task(Task.todo("extra"))
        matches.delete_task("delete 1")

        assert self.tasks.get_task_count() == 4
        assert self.tasks.get_task(1).get_name() == "read book"
