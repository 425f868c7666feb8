# src/task_tracker/cli/main.py

"""
CLI entrypoint.

One process runs exactly one command:
initialize logging -> build AppState (creates storage) -> dispatch -> print -> exit.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..cli.bootstrap import create_initial_state
from ..cli.commands import registry as command_registry
from ..config import get_settings
from ..logging_setup import setup_logging
from ..tasks.errors import TaskTrackerError

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None, *, settings=None) -> int:
    """Run one command and return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    log_file = getattr(settings, "log_file", None)
    try:
        setup_logging(console_level=console_level, log_file=log_file)
    except OSError as exc:
        print(f"Error: Failed to open log file {log_file}: {exc}", file=sys.stderr)
        return 1

    logger.debug("Starting %s argv=%s", getattr(settings, "app_name", "task-cli"), list(argv))

    try:
        state = create_initial_state(settings=settings)
        output = command_registry.handle(state, argv)
    except TaskTrackerError as exc:
        logger.debug("Command failed: %s", exc, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
