import pytest

from todocli import cli


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    return tmp_path


def test_parse_add_options():
    args = cli.build_parser().parse_args(
        ["add", "shop", "-d", "food", "-D", "2024-01-01", "-L", "home"]
    )
    assert (args.command, args.name, args.description, args.due_date, args.label) == (
        "add",
        "shop",
        "food",
        "2024-01-01",
        "home",
    )


def test_parse_complete_id_is_int():
    args = cli.build_parser().parse_args(["complete", "7"])
    assert args.id == 7
    assert args.name is None


def test_parse_remove_long_flags():
    args = cli.build_parser().parse_args(["remove", "--name", "shop", "--all"])
    assert args.name == "shop"
    assert args.all is True
    assert args.id is None


def test_parse_list_defaults():
    args = cli.build_parser().parse_args(["list"])
    assert (args.all, args.create_date, args.label) == (False, False, None)


def test_missing_subcommand_is_rejected():
    with pytest.raises(SystemExit) as info:
        cli.build_parser().parse_args([])
    assert info.value.code == 2


def test_non_integer_id_is_rejected():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["complete", "abc"])


def test_app_directory_created(tmp_path):
    path = cli.app_directory(tmp_path)
    assert path == tmp_path / ".local" / "share" / "todo"
    assert path.is_dir()


def test_main_add_list_complete_remove(home, capsys):
    assert cli.main(["add", "shop", "-L", "home"]) == 0
    assert (home / ".local" / "share" / "todo" / "database.db").is_file()
    assert capsys.readouterr().out == "Task added!\n"

    assert cli.main(["list"]) == 0
    assert capsys.readouterr().out.splitlines() == ["[ ] 1: [home] shop"]

    assert cli.main(["complete", "-N", "shop"]) == 0
    capsys.readouterr()
    assert cli.main(["list"]) == 0
    assert capsys.readouterr().out == ""
    assert cli.main(["list", "-A"]) == 0
    assert capsys.readouterr().out.splitlines() == ["[x] 1: [home] shop"]

    assert cli.main(["remove", "1"]) == 0
    capsys.readouterr()
    assert cli.main(["list", "-A"]) == 0
    assert capsys.readouterr().out == ""


def test_main_remove_without_identifier_reports(home, capsys):
    assert cli.main(["remove"]) == 0
    assert "must provide either name or id to remove task" in capsys.readouterr().err