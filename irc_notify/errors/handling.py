from __future__ import annotations

import logging

from ..constants import EXIT_CONFIG_ERROR, EXIT_IO_ERROR
from ..logging_config import log_structured_error
from .internal import ConfigError, ConnectError, DeliveryIOError, NotifyError


def classify_error(error: BaseException) -> str:
    """Return the structured-log category for an exception."""
    if isinstance(error, ConfigError):
        return "config"
    if isinstance(error, ConnectError):
        return "network"
    if isinstance(error, DeliveryIOError | OSError):
        return "io"
    if isinstance(error, NotifyError):
        return "internal"
    return "unknown"


def log_error(
    message: str, error: BaseException, context: dict[str, object] | None = None
) -> None:
    """Logs an error message with the associated exception details.

    The error is categorised (config, network, io, internal) and written
    through structured logging. The exception's own ``data`` mapping, if
    any, is merged under the caller-supplied context.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.
    """
    merged: dict[str, object] = {}
    if isinstance(error, NotifyError):
        merged.update(error.data)
    if context:
        merged.update(context)

    log_structured_error(
        error_type=classify_error(error),
        message=f"{message}: {error}",
        exception=error,
        context=merged or None,
        level=logging.ERROR,
    )


def exit_code_for(error: BaseException) -> int:
    """Map an exception onto the process exit code contract."""
    if isinstance(error, ConfigError):
        return EXIT_CONFIG_ERROR
    return EXIT_IO_ERROR
