"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ..api.validate_output import validate_output
from ..logging_config import get_logger
from .display import CLIDisplay

F = TypeVar("F", bound=Callable)

logger = get_logger("cli")


def _handle_stage_result(func: F) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    Announce and progress messages go to the ``tml.cli`` logger at DEBUG
    level, so a successful run prints nothing unless verbose logging is on.
    A failed run prints its error chain to stderr and exits with code 1.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        result = func(*args, **kwargs)
        logger.debug(result.announce)

        for progress_percent, message in result.progress_callback(result):
            logger.debug("Progress: %s (%.0f%%)", message, progress_percent * 100)

        if not result.result:
            raise ValueError("progress_callback must set result.result to a non-empty string")
        if not result.output:
            raise ValueError("progress_callback must set result.output to a non-empty dict")

        result.output = validate_output(func, result.output)

        if result.success:
            logger.debug(result.result)
            return

        CLIDisplay().error_chain(result.output.get("errors") or [result.result])
        raise typer.Exit(1)

    return wrapper  # type: ignore[return-value]
