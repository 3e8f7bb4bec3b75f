# src/todo_manager/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import EXIT_KEY
from ..cli.commands import registry as command_registry
from ..cli.prompts import Ask
from ..core.state import AppState

logger = logging.getLogger(__name__)


def run_console_loop(
    state: AppState,
    ask: Ask = input,
    emit: Callable[[str], None] = print,
) -> None:
    """
    Menu loop: show the menu, read a choice, run it, print the reply.

    Returns on the exit choice, EOF or Ctrl+C. A crashing handler is logged
    and the menu is shown again.
    """
    logger.info("Console connector started (tasks=%d).", len(state.task_store))

    while True:
        emit("\n" + command_registry.build_menu())
        try:
            choice = ask("Enter your choice: ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            emit("")
            break

        if not choice:
            continue

        if choice == EXIT_KEY or choice.lower() in ("exit", "quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = command_registry.handle(state, choice, ask=ask, emit=emit)
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed inside a command, exiting.")
            emit("")
            break
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        emit(reply)

    logger.info("Console connector finished.")
