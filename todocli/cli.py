"""Command-line entry point for the to-do application."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from contextlib import closing
from pathlib import Path

from . import commands
from .migration import initialize_migrations

_VERSION = "0.5.0"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its four subcommands."""
    parser = argparse.ArgumentParser(prog="todo", description="A simple CLI to-do application")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_VERSION}")
    sub = parser.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="Adds a new task")
    add.add_argument("name")
    add.add_argument("-d", "--description")
    add.add_argument("-D", "--due-date", dest="due_date", metavar="YYYY-MM-DD (HH:MM)")
    add.add_argument("-L", "--label")

    complete = sub.add_parser("complete", help="Completes a task given an id or name")
    complete.add_argument("id", nargs="?", type=int)
    complete.add_argument("-N", "--name")

    remove = sub.add_parser("remove", help="Removes a task given an id or name")
    remove.add_argument("id", nargs="?", type=int)
    remove.add_argument("-N", "--name")
    remove.add_argument("-A", "--all", action="store_true")

    listing = sub.add_parser("list", help="Lists tasks")
    listing.add_argument("-A", "--all", action="store_true")
    listing.add_argument("-C", "--create-date", dest="create_date", action="store_true")
    listing.add_argument("-L", "--label")

    return parser


def app_directory(home: Path | None = None) -> Path:
    """Return the data directory under ``home``, creating it if needed."""
    base = Path(home) if home is not None else Path.home()
    path = base / ".local" / "share" / "todo"
    path.mkdir(parents=True, exist_ok=True)
    return path


def main(argv: list[str] | None = None) -> int:
    """Run the program and return its exit status."""
    args = build_parser().parse_args(argv)
    try:
        database = app_directory() / "database.db"
        with closing(sqlite3.connect(database)) as connection:
            initialize_migrations().run_migrations(connection)
            if args.command == "add":
                commands.run_add(connection, args.name, args.description, args.due_date, args.label)
            elif args.command == "complete":
                commands.run_complete(connection, args.name, args.id)
            elif args.command == "remove":
                commands.run_remove(connection, args.name, args.id, args.all)
            else:
                commands.run_list(connection, args.all, args.create_date, args.label)
    except (sqlite3.Error, OSError, ValueError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())