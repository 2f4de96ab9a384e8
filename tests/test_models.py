from datetime import datetime, timedelta

from todocli.models import Task

CREATED = datetime(2024, 5, 1, 9, 30)


def make_task(due=None):
    return Task(
        name="write report",
        id=1,
        description=None,
        active=True,
        create_date=CREATED,
        due_date=due,
        label=None,
    )


def test_overdue_when_due_date_passed():
    due = datetime(2024, 5, 2, 12, 0)
    assert make_task(due).is_overdue(due + timedelta(minutes=1)) is True


def test_not_overdue_before_due_date():
    due = datetime(2024, 5, 2, 12, 0)
    assert make_task(due).is_overdue(due - timedelta(minutes=1)) is False


def test_not_overdue_at_exact_due_date():
    due = datetime(2024, 5, 2, 12, 0)
    assert make_task(due).is_overdue(due) is False


def test_never_overdue_without_due_date():
    assert make_task(None).is_overdue(datetime(2100, 1, 1)) is False


def test_defaults_for_optional_fields():
    task = Task(name="x", id=2, description="d", active=False, create_date=CREATED)
    assert task.due_date is None
    assert task.label is None
    assert task == Task("x", 2, "d", False, CREATED, None, None)