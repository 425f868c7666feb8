# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..core.state import AppState
from ..tasks import task_api
from ..tasks.errors import UsageError
from ..tasks.task_models import Task

CommandHandler = Callable[[AppState, list[str]], str]

HELP_FLAGS = ("-h", "--help")

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Maps the first CLI argument (add, list, ...) to a handler."""

    def __init__(self, prog: str = "task-cli") -> None:
        self.prog = prog
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._usage: dict[str, str] = {}
        self._details: dict[str, str] = {}
        # Commands whose arguments are free text never treat -h as a help flag.
        self._free_text: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        usage: str = "",
        details: str = "",
        aliases: list[str] | None = None,
        free_text: bool = False,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        self._usage[key] = usage
        self._details[key] = details
        for alias in aliases:
            self._handlers[alias.lower()] = handler
        if free_text:
            self._free_text.update([key, *(a.lower() for a in aliases)])

    def handle(self, state: AppState, argv: Sequence[str]) -> str:
        """
        Run the command named by argv[0] with the remaining arguments.
        Returns the text to print; raises TaskTrackerError subclasses on failure.
        """
        if not argv:
            raise UsageError("No command given.\n\n" + self.build_help())

        name = argv[0].lower()
        args = list(argv[1:])

        if name in HELP_FLAGS or name == "help":
            return self.build_help()

        handler = self._handlers.get(name)
        if not handler:
            raise UsageError(f"Unknown command: {argv[0]}. Use -h to list available commands.")

        if args and args[0] in HELP_FLAGS and name not in self._free_text:
            return self.build_command_help(name)

        logger.debug("Dispatching command=%s args=%s", name, args)
        return handler(state, args)

    def _canonical(self, name: str) -> str:
        handler = self._handlers[name]
        for key in self._help:
            if self._handlers[key] is handler:
                return key
        return name

    def build_help(self) -> str:
        rows = [(f"{name} {self._usage[name]}".strip(), self._help[name]) for name in self._help]
        width = max(len(left) for left, _ in rows)
        lines = [f"Usage: {self.prog} <command> [arguments]", "", "Commands:"]
        for left, help_text in rows:
            lines.append(f"  {left.ljust(width)}  {help_text}")
        lines.append("")
        lines.append(f"Use '{self.prog} <command> -h' for help on a single command.")
        return "\n".join(lines)

    def build_command_help(self, name: str) -> str:
        key = self._canonical(name.lower())
        lines = [f"Usage: {self.prog} {key} {self._usage[key]}".rstrip(), "", self._help[key]]
        if self._details[key]:
            lines.append("")
            lines.append(self._details[key])
        return "\n".join(lines)


def _join(args: Sequence[str]) -> str:
    return " ".join(args)


def _single_id(name: str, args: list[str]) -> str | None:
    if len(args) > 1:
        raise UsageError(f"Usage: {name} <id>")
    return args[0] if args else None


def format_task(task: Task) -> str:
    return (
        f"{task.id}. [{task.status.value}] {task.description} "
        f"(created: {task.created_at}, updated: {task.updated_at})"
    )


def cmd_add(state: AppState, args: list[str]) -> str:
    task = task_api.add_task(state.task_store, _join(args))
    return f"Task added successfully (ID: {task.id})"


def cmd_update(state: AppState, args: list[str]) -> str:
    raw_id = args[0] if args else None
    task = task_api.update_task(state.task_store, raw_id, _join(args[1:]))
    return f"Task updated successfully (ID: {task.id})"


def cmd_delete(state: AppState, args: list[str]) -> str:
    task = task_api.delete_task(state.task_store, _single_id("delete", args))
    return f"Task deleted successfully (ID: {task.id})"


def cmd_mark_in_progress(state: AppState, args: list[str]) -> str:
    task = task_api.mark_in_progress(state.task_store, _single_id("mark-in-progress", args))
    return f"Task marked as in progress (ID: {task.id})"


def cmd_mark_done(state: AppState, args: list[str]) -> str:
    task = task_api.mark_done(state.task_store, _single_id("mark-done", args))
    return f"Task marked as done (ID: {task.id})"


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    list              -> every task
    list <status>     -> only todo / in-progress / done
    """
    if len(args) > 1:
        raise UsageError("Usage: list [done|todo|in-progress]")

    tasks = task_api.list_tasks(state.task_store, args[0] if args else None)
    if not tasks:
        return "No tasks found."
    return "\n".join(format_task(t) for t in tasks)


registry = CommandRegistry()

registry.register(
    "add",
    cmd_add,
    help_text="Add a new task.",
    usage="<description...>",
    free_text=True,
)
registry.register(
    "update",
    cmd_update,
    help_text="Replace the description of a task.",
    usage="<id> <description...>",
)
registry.register("delete", cmd_delete, help_text="Delete a task.", usage="<id>")
registry.register(
    "mark-in-progress",
    cmd_mark_in_progress,
    help_text="Set a task's status to in-progress.",
    usage="<id>",
)
registry.register("mark-done", cmd_mark_done, help_text="Set a task's status to done.", usage="<id>")
registry.register(
    "list",
    cmd_list,
    help_text="List tasks, optionally filtered by status.",
    usage="[done|todo|in-progress]",
    details=(
        "Filters:\n"
        "  (none)        all tasks\n"
        "  todo          tasks not started yet\n"
        "  in-progress   tasks being worked on\n"
        "  done          finished tasks"
    ),
)
