"""Centralized internal error hierarchy.

These exceptions map failures onto the notifier's exit-code categories. Only
raise these at the parsing/validation and network boundaries; raw socket,
TLS and pydantic errors are wrapped before they leave a component.

Classes:
  NotifyError       – Base for all internal errors.
  ConfigError       – Malformed or contradictory input (exit code 2).
  ConnectError      – Dial, DNS or TLS handshake failure (exit code 1).
  DeliveryIOError   – Write/read failure on an established stream (exit code 1).
"""

from __future__ import annotations

from collections.abc import Mapping


class NotifyError(Exception):
    """Base class for all internal notifier errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class ConfigError(NotifyError):
    """Raised for a bad descriptor, missing alert fields or unusable flags.

    Always detected before any network I/O is attempted.
    """


class ConnectError(NotifyError):
    """Raised when the transport connection cannot be established.

    Covers DNS resolution, refused connections, dial timeouts and TLS
    handshake failures.
    """


class DeliveryIOError(NotifyError):
    """Raised when writing the frame or reading the server response fails."""


__all__ = [
    "NotifyError",
    "ConfigError",
    "ConnectError",
    "DeliveryIOError",
]
