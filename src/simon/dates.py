"""Best-effort parsing of the free-form dates users type after /by, /from and /to.

Tasks store these as plain strings. This module is only consulted for display
hints such as highlighting overdue deadlines, so a failed parse is never an
error.
"""

import re
from datetime import datetime, timedelta
from typing import Optional

import parsedatetime

from .task import Task, TaskKind


class SmartDateParser:
    """Turns strings like ``2/12/2019 1800``, ``2019-12-02`` or ``tomorrow`` into datetimes."""

    # Day-first numeric formats, tried before parsedatetime (which reads 01/02 month-first)
    FORMATS = [
        (re.compile(r"^\d{1,2}/\d{1,2}/\d{4} \d{4}$"), "%d/%m/%Y %H%M"),
        (re.compile(r"^\d{1,2}/\d{1,2}/\d{4}$"), "%d/%m/%Y"),
        (re.compile(r"^\d{4}-\d{2}-\d{2} \d{4}$"), "%Y-%m-%d %H%M"),
        (re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}$"), "%Y-%m-%d %H:%M"),
        (re.compile(r"^\d{4}-\d{2}-\d{2}$"), "%Y-%m-%d"),
    ]

    def __init__(self):
        self.cal = parsedatetime.Calendar()
        self.patterns = {
            'today': lambda now: now.replace(hour=23, minute=59, second=59, microsecond=0),
            'tonight': lambda now: now.replace(hour=23, minute=59, second=59, microsecond=0),
            'tomorrow': lambda now: (now + timedelta(days=1)).replace(
                hour=23, minute=59, second=59, microsecond=0
            ),
            'yesterday': lambda now: (now - timedelta(days=1)).replace(
                hour=23, minute=59, second=59, microsecond=0
            ),
            'next week': lambda now: now + timedelta(weeks=1),
        }

    def parse(self, date_str: Optional[str], now: Optional[datetime] = None) -> Optional[datetime]:
        """Parse a date string; return None if it cannot be understood."""
        if not date_str:
            return None

        now = now or datetime.now()
        date_str = date_str.lower().strip()

        for pattern, fmt in self.FORMATS:
            if pattern.match(date_str):
                try:
                    return datetime.strptime(date_str, fmt)
                except ValueError:
                    return None

        if date_str in self.patterns:
            return self.patterns[date_str](now)

        time_struct, parse_status = self.cal.parse(date_str, sourceTime=now.timetuple())
        if parse_status > 0:
            return datetime(*time_struct[:6])

        return None

    def is_overdue(self, task: Task, now: Optional[datetime] = None) -> bool:
        """True for an unfinished deadline whose /by date parses to the past."""
        if task.kind is not TaskKind.DEADLINE or task.done:
            return False
        now = now or datetime.now()
        due = self.parse(task.by, now)
        return due is not None and due < now
