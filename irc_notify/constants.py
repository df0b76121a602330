"""
Configuration constants for the IRC notifier

This module contains the constants used throughout the application.
Tunables can be overridden by setting an environment variable with the same name.
"""

import os
import sys


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Attempts to parse the environment variable as an integer. If the variable
    is not set or cannot be parsed, prints a warning and returns the default value.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}",
                file=sys.stderr,
            )
    return default


def _get_env_float(name: str, default: float) -> float:
    """Retrieve a float value from an environment variable.

    Same contract as ``_get_env_int`` but for floats.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            print(
                f"Warning: Invalid float value for {name}='{value}', using default {default}",
                file=sys.stderr,
            )
    return default


# Descriptor
IRC_URL_ENV = "IRC_URL"
IRC_URL_STRUCTURE = (
    "irc[s]://USER[:PASS]@HOST[:PORT]/direct|channel/RECIPIENT[?insecure=1]"
)
PLAIN_SCHEME = "irc"
SECURE_SCHEME = "ircs"
DEFAULT_PLAIN_PORT = 6667
DEFAULT_SECURE_PORT = 6697

# Message rendering
UNKNOWN_LOCAL_NAME = "(unknown)"
OK_STATES = frozenset({"UP", "OK"})
EMPTY_LINE_PLACEHOLDER = "."

# Transport
IRC_NOTIFY_CONNECT_TIMEOUT = _get_env_float(
    "IRC_NOTIFY_CONNECT_TIMEOUT", 0.0
)  # Seconds to wait for the dial; 0 waits forever
IRC_NOTIFY_READ_CHUNK_SIZE = _get_env_int(
    "IRC_NOTIFY_READ_CHUNK_SIZE", 4096
)  # Bytes per read while echoing the server response

# Process exit codes
EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_DEGRADED = 3  # delivered, but the local hostname lookup failed
