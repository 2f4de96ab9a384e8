"""Domain objects for the task list."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Task:
    """A single to-do item as stored in the database."""

    name: str
    id: int
    description: str | None
    active: bool
    create_date: datetime
    due_date: datetime | None = None
    label: str | None = None

    def is_overdue(self, now: datetime) -> bool:
        """Return True when the task has a due date that lies before ``now``."""
        return self.due_date is not None and now > self.due_date