"""The actions behind each subcommand: add, complete, remove and list."""

from __future__ import annotations

import sqlite3
import sys
from datetime import datetime

from . import operations
from .models import Task

Identifier = int | str

_RED = "\x1b[31m"
_RESET = "\x1b[0m"


def parse_datetime_str(text: str | None) -> datetime | None:
    """Parse ``YYYY-MM-DD HH:MM`` or ``YYYY-MM-DD``.

    Unparsable input is reported on stderr and yields None.
    """
    if text is None:
        return None
    try:
        return datetime.strptime(text, "%Y-%m-%d %H:%M")
    except ValueError:
        pass
    try:
        return datetime.strptime(text, "%Y-%m-%d")
    except ValueError as error:
        print(f"Failed to parse datetime {text}: {error}", file=sys.stderr)
        return None


def resolve_identifier(name: str | None, task_id: int | None) -> Identifier | None:
    """Pick how a task is addressed: the id wins over the name."""
    if task_id is not None:
        return task_id
    return name


def format_task(task: Task, include_create_date: bool, now: datetime) -> str:
    """Render one task as a single line of listing output."""
    parts = ["[ ]" if task.active else "[x]", f" {task.id}:"]
    if task.label is not None:
        parts.append(f" [{task.label}]")
    parts.append(f" {task.name}")
    if task.description is not None:
        parts.append(f": {task.description}")
    if task.due_date is not None:
        due = str(task.due_date)
        if task.is_overdue(now):
            due = f"{_RED}{due}{_RESET}"
        parts.append(f" (due: {due})")
    if include_create_date:
        parts.append(f" (created: {task.create_date.strftime('%Y-%m-%d %H:%M:%S')})")
    return "".join(parts)


def run_add(
    connection: sqlite3.Connection,
    name: str,
    description: str | None,
    due_date: str | None,
    label: str | None,
) -> None:
    """Create a task stamped with the current local time."""
    create_date = datetime.now()
    operations.add_task(
        connection, name, description, create_date, parse_datetime_str(due_date), label
    )
    print("Task added!")


def run_complete(
    connection: sqlite3.Connection, name: str | None, task_id: int | None
) -> None:
    """Complete a task chosen by id or, failing that, by name."""
    identifier = resolve_identifier(name, task_id)
    if identifier is None:
        print("Error: must provide either name or id to complete task", file=sys.stderr)
        return
    if isinstance(identifier, int):
        operations.complete_task_by_id(connection, identifier)
    else:
        operations.complete_task_by_name(connection, identifier)
    print("task completed!")


def run_remove(
    connection: sqlite3.Connection,
    name: str | None,
    task_id: int | None,
    remove_all: bool,
) -> None:
    """Remove every task, or one chosen by id or name."""
    if remove_all:
        operations.remove_all_tasks(connection)
        print("All tasks removed!")
        return
    identifier = resolve_identifier(name, task_id)
    if identifier is None:
        print("Error: must provide either name or id to remove task", file=sys.stderr)
        return
    if isinstance(identifier, int):
        operations.remove_task_by_id(connection, identifier)
    else:
        operations.remove_task_by_name(connection, identifier)
    print("task removed!")


def run_list(
    connection: sqlite3.Connection,
    show_all: bool,
    create_date: bool,
    label: str | None,
) -> None:
    """Print the selected tasks, one per line."""
    now = datetime.now()
    for task in operations.get_tasks(connection, show_all, label):
        print(format_task(task, create_date, now))