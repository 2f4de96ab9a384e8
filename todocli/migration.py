"""Versioned schema migrations for the task database."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator

MigrationFn = Callable[[sqlite3.Connection], None]


@dataclass
class Migration:
    """One schema change, identified by its version number."""

    version: int
    description: str
    up: MigrationFn


@contextmanager
def _transaction(connection: sqlite3.Connection) -> Iterator[None]:
    if connection.in_transaction:
        connection.commit()
    connection.execute("BEGIN")
    try:
        yield
    except BaseException:
        if connection.in_transaction:
            connection.execute("ROLLBACK")
        raise
    connection.execute("COMMIT")


@dataclass
class MigrationManager:
    """Holds migrations in version order and applies the pending ones."""

    migrations: list[Migration] = field(default_factory=list)

    def register_migration(self, version: int, description: str, up: MigrationFn) -> None:
        """Add a migration, keeping the list sorted by version."""
        self.migrations.append(Migration(version, description, up))
        self.migrations.sort(key=lambda migration: migration.version)

    def schema_version(self, connection: sqlite3.Connection) -> int:
        """Return the highest applied migration version, or 0 if none."""
        try:
            (exists,) = connection.execute(
                "SELECT EXISTS (SELECT name FROM sqlite_master "
                "WHERE type='table' AND name='_schema_migrations')"
            ).fetchone()
        except sqlite3.Error:
            exists = False
        if not exists:
            return 0
        try:
            (version,) = connection.execute(
                "SELECT COALESCE(MAX(version), 0) FROM _schema_migrations"
            ).fetchone()
        except sqlite3.Error:
            return 0
        return int(version)

    def run_migrations(self, connection: sqlite3.Connection) -> None:
        """Apply every registered migration newer than the stored version."""
        self._ensure_migrations_table(connection)
        current = self.schema_version(connection)
        for migration in self.migrations:
            if migration.version <= current:
                continue
            with _transaction(connection):
                migration.up(connection)
                connection.execute(
                    "INSERT INTO _schema_migrations (version, description, applied_at) "
                    "VALUES (?, ?, datetime('now'))",
                    (migration.version, migration.description),
                )

    @staticmethod
    def _ensure_migrations_table(connection: sqlite3.Connection) -> None:
        connection.execute(
            """CREATE TABLE IF NOT EXISTS _schema_migrations (
                version INTEGER PRIMARY KEY,
                description TEXT NOT NULL,
                applied_at TEXT NOT NULL
            )"""
        )
        connection.commit()


def _initial_schema(connection: sqlite3.Connection) -> None:
    connection.execute(
        """CREATE TABLE IF NOT EXISTS task (
            id    INTEGER PRIMARY KEY,
            name  TEXT NOT NULL,
            description TEXT,
            active INTEGER NOT NULL DEFAULT 1
        );"""
    )


def _add_date_columns(connection: sqlite3.Connection) -> None:
    connection.execute("ALTER TABLE task ADD COLUMN create_date TEXT NOT NULL;")
    connection.execute("ALTER TABLE task ADD COLUMN due_date TEXT;")


def _add_label_column(connection: sqlite3.Connection) -> None:
    connection.execute("ALTER TABLE task ADD COLUMN label TEXT;")


def initialize_migrations() -> MigrationManager:
    """Return a manager loaded with the application's schema history."""
    manager = MigrationManager()
    manager.register_migration(1, "Initial schema", _initial_schema)
    manager.register_migration(2, "Add date columns", _add_date_columns)
    manager.register_migration(3, "Add label column", _add_label_column)
    return manager