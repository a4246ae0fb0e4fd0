"""Tests for best-effort date parsing."""

from datetime import datetime

from simon.dates import SmartDateParser
from simon.task import Task


NOW = datetime(2024, 5, 1, 10, 30)


class TestSmartDateParser:
    def setup_method(self):
        self.parser = SmartDateParser()

    def test_day_first_with_time(self):
        assert self.parser.parse("01/02/2023 1800") == datetime(2023, 2, 1, 18, 0)

    def test_day_first_date_only(self):
        assert self.parser.parse("2/12/2019") == datetime(2019, 12, 2)

    def test_iso_date(self):
        assert self.parser.parse("2023-06-15") == datetime(2023, 6, 15)
        assert self.parser.parse("2023-06-15 0930") == datetime(2023, 6, 15, 9, 30)

    def test_relative_keywords(self):
        assert self.parser.parse("tomorrow", NOW) == datetime(2024, 5, 2, 23, 59, 59)
        assert self.parser.parse("Today", NOW) == datetime(2024, 5, 1, 23, 59, 59)

    def test_impossible_numeric_date(self):
        assert self.parser.parse("31/02/2023") is None

    def test_blank(self):
        assert self.parser.parse("") is None
        assert self.parser.parse(None) is None


class TestIsOverdue:
    def setup_method(self):
        self.parser = SmartDateParser()

    def test_past_deadline(self):
        assert self.parser.is_overdue(Task.deadline("file taxes", "01/01/2020"), NOW)

    def test_future_deadline(self):
        assert not self.parser.is_overdue(Task.deadline("file taxes", "01/01/2030"), NOW)

    def test_done_deadline_is_never_overdue(self):
        assert not self.parser.is_overdue(Task.deadline("file taxes", "01/01/2020", done=True), NOW)

    def test_other_kinds_are_never_overdue(self):
        assert not self.parser.is_overdue(Task.todo("read book"), NOW)
        assert not self.parser.is_overdue(Task.event("party", "01/01/2020", "02/01/2020"), NOW)
