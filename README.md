# todocli

A small command-line to-do list. Tasks are kept in an SQLite database at
`~/.local/share/todo/database.db`. The directory is created the first time the
command runs, and the database schema is brought up to date automatically on
every run.

## Installation

```
pip install .
```

This installs the `todo` command. The same program can also be started with
`python -m todocli.cli`.

## Usage

Add a task. It can have a description (`-d`, `--description`), a due date
(`-D`, `--due-date`, given as `YYYY-MM-DD` or `YYYY-MM-DD HH:MM`) and a label
(`-L`, `--label`):

```
todo add "Write report" -d "Quarterly numbers" -D "2025-06-30 17:00" -L work
```

A due date that cannot be parsed is reported on standard error and the task is
added without one.

List the tasks that are still open:

```
todo list
```

Use `--all` (`-A`) to include completed tasks, `--create-date` (`-C`) to show
when each task was created, and `--label` (`-L`) to show only one label:

```
todo list -A -C -L work
```

Each task is shown as a line like this:

```
[ ] 1: [work] Write report: Quarterly numbers (due: 2025-06-30 17:00:00)
```

Completed tasks show `[x]`. A due date that has already passed is shown in red.

Complete a task by id or by name:

```
todo complete 1
todo complete --name "Write report"
```

Remove a task by id or by name, or remove every task:

```
todo remove 1
todo remove -N "Write report"
todo remove --all
```

When both an id and a name are given, the id is used. Completing or removing by
name affects every task with that name. If neither is given, an error message is
printed and nothing changes.

`todo --version` prints the version. Database and file errors are reported on
standard error and the command exits with status 1.

## Limits

There is no way to edit a task after it has been added, to reopen a completed
task, or to choose a different database location.

## Development

```
pip install -e ".[test]"
pytest
```