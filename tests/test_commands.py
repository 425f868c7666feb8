# tests/test_commands.py

from __future__ import annotations

import json
from types import SimpleNamespace

import pytest

from task_tracker.cli.commands import CommandRegistry, registry
from task_tracker.cli.main import main
from task_tracker.core.state import AppState
from task_tracker.tasks.errors import UsageError


def _stored(settings: SimpleNamespace) -> list[dict]:
    return json.loads(settings.data_path.read_text("utf-8") or "[]")


def test_command_registry_routes_and_aliases(state: AppState) -> None:
    reg = CommandRegistry(prog="t")
    seen: list[list[str]] = []

    def h(state, args):
        seen.append(args)
        return "ok"

    reg.register("go", h, "Go somewhere.", usage="<where>", aliases=["g"])

    assert reg.handle(state, ["go", "home", "now"]) == "ok"
    assert reg.handle(state, ["G", "x"]) == "ok"
    assert seen == [["home", "now"], ["x"]]
    assert reg.handle(state, ["g", "-h"]).startswith("Usage: t go <where>")


def test_command_registry_unknown_and_empty(state: AppState) -> None:
    with pytest.raises(UsageError, match="Unknown command: nope"):
        registry.handle(state, ["nope"])
    with pytest.raises(UsageError, match="No command given"):
        registry.handle(state, [])


def test_main_add_prints_confirmation(settings, capsys) -> None:
    code = main(["add", "Buy", "groceries"], settings=settings)

    out, err = capsys.readouterr()
    assert code == 0
    assert out == "Task added successfully (ID: 1)\n"
    assert err == ""
    (task,) = _stored(settings)
    assert task["description"] == "Buy groceries"
    assert task["status"] == "todo"


def test_main_creates_storage_on_first_run(settings, capsys) -> None:
    assert not settings.storage_dir.exists()

    assert main(["list"], settings=settings) == 0

    assert settings.data_path.is_file()
    assert capsys.readouterr().out == "No tasks found.\n"


def test_main_full_lifecycle(settings, capsys) -> None:
    for text in ("one", "two", "three"):
        main(["add", text], settings=settings)
    capsys.readouterr()

    assert main(["update", "3", "third", "task"], settings=settings) == 0
    assert main(["mark-in-progress", "2"], settings=settings) == 0
    assert main(["mark-done", "1"], settings=settings) == 0
    assert main(["delete", "2"], settings=settings) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Task updated successfully (ID: 3)",
        "Task marked as in progress (ID: 2)",
        "Task marked as done (ID: 1)",
        "Task deleted successfully (ID: 2)",
    ]

    main(["list", "done"], settings=settings)
    done_lines = capsys.readouterr().out.splitlines()
    assert len(done_lines) == 1
    assert done_lines[0].startswith("1. [done] one (created: ")

    main(["list", "todo"], settings=settings)
    todo_lines = capsys.readouterr().out.splitlines()
    assert [line.split(".")[0] for line in todo_lines] == ["3"]
    assert "third task" in todo_lines[0]

    assert [t["id"] for t in _stored(settings)] == [1, 3]


@pytest.mark.parametrize(
    "argv, message",
    [
        (["add"], "description is required"),
        (["update", "1", "x"], "Task not found (ID: 1)"),
        (["delete"], "Task ID is required"),
        (["delete", "abc"], "Invalid task ID: abc"),
        (["mark-done", "1", "2"], "Usage: mark-done <id>"),
        (["list", "archived"], "Invalid status: archived"),
        (["frobnicate"], "Unknown command: frobnicate"),
        ([], "No command given"),
    ],
)
def test_main_errors_go_to_stderr_with_exit_one(settings, capsys, argv, message) -> None:
    code = main(argv, settings=settings)

    out, err = capsys.readouterr()
    assert code == 1
    assert out == ""
    assert err.startswith("Error: ")
    assert message in err


def test_main_update_missing_id_leaves_store_unchanged(settings, capsys) -> None:
    main(["add", "keep", "me"], settings=settings)
    before = settings.data_path.read_bytes()

    assert main(["update", "5", "changed"], settings=settings) == 1
    assert settings.data_path.read_bytes() == before


def test_main_help(settings, capsys) -> None:
    assert main(["-h"], settings=settings) == 0
    out = capsys.readouterr().out
    for name in ("add", "update", "delete", "mark-in-progress", "mark-done", "list"):
        assert f"  {name} " in out

    assert main(["list", "-h"], settings=settings) == 0
    list_help = capsys.readouterr().out
    assert list_help.startswith("Usage: task-cli list [done|todo|in-progress]")
    assert "in-progress   tasks being worked on" in list_help


def test_main_reports_corrupt_store(settings, capsys) -> None:
    settings.storage_dir.mkdir(parents=True)
    settings.data_path.write_text("{broken", "utf-8")

    assert main(["list"], settings=settings) == 1
    assert "not valid JSON" in capsys.readouterr().err


def test_main_writes_log_file_when_configured(settings, tmp_path, capsys) -> None:
    settings.log_file = tmp_path / "logs" / "task-cli.log"

    assert main(["add", "logged"], settings=settings) == 0

    logging_text = settings.log_file.read_text("utf-8")
    assert "task_tracker.tasks.task_api: Task added id=1" in logging_text
    assert capsys.readouterr().out == "Task added successfully (ID: 1)\n"


def test_main_exits_one_when_data_file_cannot_be_created(settings, capsys) -> None:
    settings.data_path.mkdir(parents=True)

    assert main(["list"], settings=settings) == 1

    out, err = capsys.readouterr()
    assert out == ""
    assert err.startswith("Error: Failed to create data file")
    assert settings.data_path.is_dir()


def test_add_treats_help_flag_as_description(settings, capsys) -> None:
    assert main(["add", "-h"], settings=settings) == 0

    assert capsys.readouterr().out == "Task added successfully (ID: 1)\n"
    assert _stored(settings)[0]["description"] == "-h"


def test_main_exits_one_when_log_file_cannot_be_opened(settings, tmp_path, capsys) -> None:
    blocker = tmp_path / "logs"
    blocker.write_text("not a directory", "utf-8")
    settings.log_file = blocker / "task-cli.log"

    assert main(["list"], settings=settings) == 1

    out, err = capsys.readouterr()
    assert out == ""
    assert err.startswith("Error: Failed to open log file")
    assert not settings.storage_dir.exists()
