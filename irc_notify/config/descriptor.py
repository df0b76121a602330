"""Parsing of the ``IRC_URL`` connection descriptor.

The descriptor has the shape
``irc[s]://USER[:PASS]@HOST[:PORT]/direct|channel/RECIPIENT[?insecure=1]``.
Parsing is pure: no DNS, no sockets, no environment access.
"""

from __future__ import annotations

import re
from urllib.parse import parse_qs, unquote, urlsplit

from pydantic import ValidationError

from ..constants import (
    DEFAULT_PLAIN_PORT,
    DEFAULT_SECURE_PORT,
    IRC_URL_STRUCTURE,
    PLAIN_SCHEME,
    SECURE_SCHEME,
)
from ..errors.internal import ConfigError
from .model import ConnectionTarget, DeliveryMode

_PATH_STRUCTURE = re.compile(r"/(direct|channel)/([^/]+)")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

_DEFAULT_PORTS = {
    PLAIN_SCHEME: DEFAULT_PLAIN_PORT,
    SECURE_SCHEME: DEFAULT_SECURE_PORT,
}


def _fail(reason: str, detail: str | None = None) -> ConfigError:
    message = f"{reason} in IRC URL ({IRC_URL_STRUCTURE})"
    if detail:
        message = f"{message}: {detail}"
    return ConfigError(message, data={"reason": reason})


def parse_descriptor(raw: str) -> ConnectionTarget:
    """Parse and validate a connection descriptor.

    Args:
        raw: The descriptor string, usually taken from ``$IRC_URL``.

    Returns:
        The resolved ConnectionTarget.

    Raises:
        ConfigError: If the string is not a URL, uses an unsupported scheme,
            lacks a user or host, or its path is not ``/direct/<name>`` or
            ``/channel/<name>``.
    """
    if _BAD_ESCAPE.search(raw):
        raise _fail("Bad escape sequence")
    try:
        parts = urlsplit(raw.strip())
        port = parts.port
    except ValueError as e:
        raise _fail("Bad syntax", str(e)) from e

    if parts.scheme not in _DEFAULT_PORTS:
        raise _fail("Bad protocol")
    secure = parts.scheme == SECURE_SCHEME

    user = unquote(parts.username or "")
    if not user.strip():
        raise _fail("Missing user")

    host = parts.hostname or ""
    if not host:
        raise _fail("Missing host")

    match = _PATH_STRUCTURE.fullmatch(unquote(parts.path))
    if match is None:
        raise _fail("Bad path")
    mode, recipient_name = match.groups()

    query = parse_qs(parts.query, keep_blank_values=True)
    insecure = query.get("insecure", [""])[0] == "1"

    password = unquote(parts.password) if parts.password else None

    try:
        return ConnectionTarget(
            secure=secure,
            insecure_tls=insecure,
            user=user,
            password=password or None,
            host=host,
            port=port if port is not None else _DEFAULT_PORTS[parts.scheme],
            delivery_mode=DeliveryMode(mode),
            recipient_name=recipient_name,
        )
    except ValidationError as e:
        details = "; ".join(err["msg"] for err in e.errors())
        raise _fail("Invalid value", details) from e
