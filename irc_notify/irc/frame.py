"""Outbound IRC framing: registration, one PRIVMSG per body line, QUIT.

This is a one-shot sequence, not a session: nothing here waits for or
parses server replies.
"""

from __future__ import annotations

from ..alert.composer import RenderedMessage
from ..constants import EMPTY_LINE_PLACEHOLDER

LINE_TERMINATOR = "\r\n"


def split_body(text: str) -> list[str]:
    """Split a message body into wire-safe PRIVMSG payloads.

    The body is trimmed as a whole, every CR is dropped and the rest is split
    on LF, so no payload can carry a line break into the protocol stream.
    Empty lines become ``.`` because an empty trailing argument is not a
    message on many servers.
    """
    cleaned = text.strip().replace("\r", "")
    return [line or EMPTY_LINE_PLACEHOLDER for line in cleaned.split("\n")]


def frame_lines(
    user: str, password: str | None, recipient: str, message: RenderedMessage
) -> list[str]:
    lines: list[str] = []
    if password:
        lines.append(f"PASS {password}")
    lines.append(f"NICK {user}")
    lines.append(f"USER {user} 0.0.0.0 0.0.0.0 {user}")
    lines.extend(f"PRIVMSG {recipient} :{payload}" for payload in split_body(message.text))
    lines.append("QUIT")
    return lines


def encode_lines(lines: list[str]) -> bytes:
    """Encode protocol lines as UTF-8 with CRLF after every line."""
    return "".join(f"{line}{LINE_TERMINATOR}" for line in lines).encode("utf-8")


def encode_frame(
    user: str, password: str | None, recipient: str, message: RenderedMessage
) -> bytes:
    """Build and encode the complete frame in one step."""
    return encode_lines(frame_lines(user, password, recipient, message))
