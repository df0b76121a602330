"""Rendering of a normalized alert into notification text."""

from __future__ import annotations

import logging
import socket
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, tzinfo

from ..constants import OK_STATES, UNKNOWN_LOCAL_NAME
from ..logs.logger import logger
from .model import AlertContext, AlertScope

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %z %Z"


@dataclass(frozen=True, slots=True)
class LocalName:
    name: str
    degraded: bool = False


@dataclass(frozen=True, slots=True)
class RenderedMessage:
    lines: tuple[str, ...]

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def lookup_local_name(resolver: Callable[[], str] = socket.gethostname) -> LocalName:
    """Return this machine's name for the banner line.

    A failing lookup is not fatal: the name becomes ``(unknown)`` and the
    result is flagged as degraded so the caller can pick the exit code.
    """
    try:
        name = resolver()
    except OSError as e:
        logger.log_event(
            "host",
            "lookup_failed",
            level=logging.WARNING,
            fallback=UNKNOWN_LOCAL_NAME,
            error=str(e),
        )
        return LocalName(UNKNOWN_LOCAL_NAME, degraded=True)
    return LocalName(name)


def state_mark(state: str) -> str:
    return "." if state in OK_STATES else "!"


def format_timestamp(timestamp: int, tz: tzinfo | None = None) -> str:
    """Render unix seconds as a calendar time.

    Timestamps outside the range datetime can represent are rendered as raw
    seconds instead of failing the notification.
    """
    try:
        if tz is None:
            moment = datetime.fromtimestamp(timestamp).astimezone()
        else:
            moment = datetime.fromtimestamp(timestamp, tz=tz)
    except (ValueError, OverflowError, OSError):
        return f"{timestamp}s since epoch"
    return moment.strftime(TIMESTAMP_FORMAT)


def _labelled(label: str, *values: str) -> str:
    return " ".join([f"{label}:", *(v for v in values if v)])


def compose_message(
    alert: AlertContext, local_name: str, tz: tzinfo | None = None
) -> RenderedMessage:
    """Build the notification body for one alert.

    Layout: banner, status line, When/Host[/Service] block, then ``Info:``
    followed by the check output verbatim. Nothing is truncated or escaped
    here; line splitting for the wire happens in the frame encoder.

    Args:
        alert: The normalized alert.
        local_name: Name of the machine sending the notification.
        tz: Zone for the timestamp, the local zone when omitted.
    """
    mark = state_mark(alert.state)
    lines = [f"***** {alert.scope.value} monitoring on {local_name} *****", ""]

    if alert.scope is AlertScope.SERVICE:
        lines.append(
            f"{alert.service_display_name} on {alert.host_display_name} "
            f"is {alert.state}{mark}"
        )
    else:
        lines.append(f"{alert.host_display_name} is {alert.state}{mark}")

    lines += [
        "",
        f"When: {format_timestamp(alert.timestamp, tz)}",
        _labelled("Host", alert.host_name, alert.host_action_url),
    ]
    if alert.scope is AlertScope.SERVICE:
        lines.append(_labelled("Service", alert.service_name, alert.service_action_url))

    lines += ["", "Info:", ""]
    lines += [line.rstrip("\r") for line in alert.output.split("\n")]

    return RenderedMessage(tuple(lines))
