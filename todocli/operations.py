"""Queries and updates on the task table."""

from __future__ import annotations

import sqlite3
from datetime import datetime

from .models import Task

_BASE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _encode_datetime(value: datetime | None) -> str | None:
    if value is None:
        return None
    return value.isoformat(sep=" ")


def _decode_datetime(value: str | None) -> datetime | None:
    if value is None:
        return None
    text = value.strip().replace("T", " ", 1)
    main, _, fraction = text.partition(".")
    parsed = datetime.strptime(main, _BASE_FORMAT)
    if fraction:
        if not fraction.isdigit():
            raise ValueError(f"invalid fractional seconds in {value!r}")
        parsed = parsed.replace(microsecond=int(fraction[:6].ljust(6, "0")))
    return parsed


def _row_to_task(row: tuple) -> Task:
    task_id, name, description, active, create_date, due_date, label = row
    created = _decode_datetime(create_date)
    if created is None:
        raise ValueError(f"task {task_id} has no creation date")
    return Task(
        name=name,
        id=task_id,
        description=description,
        active=bool(active),
        create_date=created,
        due_date=_decode_datetime(due_date),
        label=label,
    )


def add_task(
    connection: sqlite3.Connection,
    name: str,
    description: str | None,
    create_date: datetime,
    due_date: datetime | None,
    label: str | None,
) -> None:
    """Insert a new active task."""
    with connection:
        connection.execute(
            "INSERT INTO task (name, description, create_date, due_date, label) "
            "VALUES (?, ?, ?, ?, ?);",
            (name, description, _encode_datetime(create_date), _encode_datetime(due_date), label),
        )


def get_tasks(
    connection: sqlite3.Connection, show_all: bool, label: str | None
) -> list[Task]:
    """Return tasks, only active ones unless ``show_all``, optionally by label."""
    query = "SELECT id, name, description, active, create_date, due_date, label FROM task"
    conditions: list[str] = []
    params: list[object] = []
    if label is not None:
        conditions.append("label=?")
        params.append(label)
    if not show_all:
        conditions.append("active=1")
    if conditions:
        query += " WHERE " + " AND ".join(conditions)
    return [_row_to_task(row) for row in connection.execute(query, params)]


def complete_task_by_id(connection: sqlite3.Connection, task_id: int) -> None:
    """Mark the active task with this id as done."""
    with connection:
        connection.execute("UPDATE task SET active = 0 WHERE id = ? AND active = 1;", (task_id,))


def complete_task_by_name(connection: sqlite3.Connection, task_name: str) -> None:
    """Mark every active task with this name as done."""
    with connection:
        connection.execute(
            "UPDATE task SET active = 0 WHERE name = ? AND active = 1;", (task_name,)
        )


def remove_task_by_id(connection: sqlite3.Connection, task_id: int) -> None:
    """Delete the task with this id."""
    with connection:
        connection.execute("DELETE FROM task WHERE id = ?;", (task_id,))


def remove_task_by_name(connection: sqlite3.Connection, task_name: str) -> None:
    """Delete every task with this name."""
    with connection:
        connection.execute("DELETE FROM task WHERE name = ?;", (task_name,))


def remove_all_tasks(connection: sqlite3.Connection) -> None:
    """Delete every task."""
    with connection:
        connection.execute("DELETE FROM task;")