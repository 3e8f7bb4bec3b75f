# src/todo_manager/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading the task file), then runs the
console menu until the operator exits.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state, shutdown
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    log_dir = settings.data_dir if settings.log_to_file else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s (tasks file: %s)", settings.app_name, settings.tasks_path)

    state = create_initial_state(settings=settings)
    try:
        run_console_loop(state)
    finally:
        shutdown(state)
        print("Exiting program. Goodbye.")
        logger.info("Bye.")


if __name__ == "__main__":
    main()
