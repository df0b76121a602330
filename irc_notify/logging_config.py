r"""
Logging configuration module for the IRC notifier.

Provides a colorized logging setup using the colorlog library plus a
structured error logging helper. All log output goes to standard error;
standard output is reserved for the bytes echoed back by the IRC server.
"""

import logging
import os
import sys
from typing import Any, TextIO

import colorlog

LOG_FORMAT = "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s %(message_log_color)s%(message)s"
LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "magenta",
}


def is_debug_enabled(environ: dict[str, str] | None = None) -> bool:
    env = os.environ if environ is None else environ
    return env.get("DEBUG", "").lower() in ("true", "1", "yes")


def log_structured_error(
    error_type: str,
    message: str,
    exception: BaseException | None = None,
    context: dict[str, Any] | None = None,
    level: int = logging.ERROR,
) -> None:
    """Log an error with structured context.

    The line has the shape
    ``[TYPE] message | Exception: Name: text | Context: k=v | k=v``.

    Args:
        error_type: Category of the error (e.g., 'network', 'io', 'config')
        message: Descriptive error message
        exception: The exception that occurred (optional)
        context: Additional context data for debugging
        level: Logging level (default: ERROR)
    """
    structured_message = f"[{error_type.upper()}] {message}"

    if exception:
        structured_message += f" | Exception: {type(exception).__name__}: {str(exception)}"

    if context:
        context_str = " | ".join(f"{k}={v}" for k, v in context.items())
        structured_message += f" | Context: {context_str}"

    logging.log(level, structured_message)


class LoggerConfigurator:
    """Handles logging configuration cleanly using colorlog.

    Supports environment variable configuration for log levels.
    """

    def __init__(self, stream: TextIO | None = None, environ: dict[str, str] | None = None):
        """Initialize the configurator.

        Args:
            stream: Destination stream, standard error when omitted.
            environ: Environment mapping, ``os.environ`` when omitted.
        """
        self.stream = stream
        self.environ = environ

    def build_formatter(self) -> colorlog.ColoredFormatter:
        return colorlog.ColoredFormatter(
            LOG_FORMAT,
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors=LOG_COLORS,
            secondary_log_colors={
                "message": {
                    "ERROR": "red",
                    "CRITICAL": "magenta",
                }
            },
            reset=True,
        )

    def configure(self) -> logging.Handler:
        """Configure logging with colored output using colorlog.

        Uses environment variables:
        - DEBUG: Set to 'true', '1', or 'yes' for DEBUG level, otherwise INFO
        """
        log_level = logging.DEBUG if is_debug_enabled(self.environ) else logging.INFO

        handler = logging.StreamHandler(self.stream or sys.stderr)
        handler.setFormatter(self.build_formatter())

        root_logger = logging.getLogger()
        # One-shot process: replace whatever handlers an embedding app left behind.
        for existing in list(root_logger.handlers):
            root_logger.removeHandler(existing)
        root_logger.addHandler(handler)
        root_logger.setLevel(log_level)

        # asyncio debug chatter is not useful for a single dial
        logging.getLogger("asyncio").setLevel(logging.WARNING)
        return handler
