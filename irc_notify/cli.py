"""Command-line flags and environment lookup.

Flags follow the Icinga notification command convention: one flag per
runtime macro, spelled ``-host.name`` (``--host.name`` works too).
"""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Mapping, Sequence

from .alert.model import AlertFields
from .constants import IRC_URL_ENV, IRC_URL_STRUCTURE
from .errors.internal import ConfigError

# (flag, AlertFields attribute)
_STRING_FLAGS = (
    ("host.name", "host_name"),
    ("host.display_name", "host_display_name"),
    ("host.action_url", "host_action_url"),
    ("host.state", "host_state"),
    ("host.output", "host_output"),
    ("service.name", "service_name"),
    ("service.display_name", "service_display_name"),
    ("service.action_url", "service_action_url"),
    ("service.state", "service_state"),
    ("service.output", "service_output"),
)

_VALUE_FLAGS = frozenset(
    spelling
    for flag in ("icinga.timet", *(flag for flag, _ in _STRING_FLAGS))
    for spelling in (f"-{flag}", f"--{flag}")
)


class _RaisingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises ConfigError instead of exiting."""

    def error(self, message: str):  # type: ignore[override]
        raise ConfigError(message, data={"source": "flags"})


def build_parser() -> argparse.ArgumentParser:
    parser = _RaisingArgumentParser(
        prog="irc-notify",
        allow_abbrev=False,
        description=(
            "Send an Icinga host or service notification to IRC. "
            f"The target is read from ${IRC_URL_ENV} ({IRC_URL_STRUCTURE})."
        ),
    )
    parser.add_argument(
        "-icinga.timet",
        "--icinga.timet",
        dest="icinga_timet",
        type=int,
        default=0,
        help="$icinga.timet$",
    )
    for flag, dest in _STRING_FLAGS:
        parser.add_argument(
            f"-{flag}", f"--{flag}", dest=dest, default="", help=f"${flag}$"
        )
    return parser


def _attach_values(argv: Sequence[str] | None) -> list[str]:
    """Join each known flag with the entry after it as ``--flag=value``.

    Plugin output such as ``-ERR`` would otherwise be read as an option.
    """
    tokens = list(sys.argv[1:] if argv is None else argv)
    joined: list[str] = []
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token in _VALUE_FLAGS and i + 1 < len(tokens):
            joined.append(f"--{token.lstrip('-')}={tokens[i + 1]}")
            i += 2
            continue
        joined.append(token)
        i += 1
    return joined


def parse_alert_fields(argv: Sequence[str] | None = None) -> AlertFields:
    """Parse command-line flags into the raw alert field set.

    Raises:
        ConfigError: On unknown flags or a non-integer timestamp.
    """
    args = build_parser().parse_args(_attach_values(argv))
    return AlertFields(**vars(args))


def read_descriptor(environ: Mapping[str, str] | None = None) -> str:
    """Return the raw connection descriptor from the environment.

    Raises:
        ConfigError: If the variable is unset or blank.
    """
    env = os.environ if environ is None else environ
    raw = env.get(IRC_URL_ENV, "")
    if not raw.strip():
        raise ConfigError(f"${IRC_URL_ENV} missing ({IRC_URL_STRUCTURE})")
    return raw
