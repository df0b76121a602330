#!/usr/bin/env python3
"""
Main entry point for the IRC notifier
"""

import asyncio
import logging
import sys
from collections.abc import Mapping, Sequence

from .alert.composer import compose_message, lookup_local_name
from .alert.normalizer import normalize_alert
from .cli import parse_alert_fields, read_descriptor
from .config.descriptor import parse_descriptor
from .constants import EXIT_DEGRADED, EXIT_OK
from .errors.handling import exit_code_for, log_error
from .errors.internal import ConfigError, ConnectError, DeliveryIOError
from .irc.delivery import deliver
from .irc.frame import encode_lines, frame_lines
from .logging_config import LoggerConfigurator
from .logs.event_catalog import catalog
from .logs.logger import logger


async def main(
    argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None
) -> int:
    """Run one notification and return the process exit code.

    All validation (flags, descriptor, alert fields) happens before any
    network I/O. A failed local hostname lookup still delivers but yields
    the degraded exit code.
    """
    try:
        raw_descriptor = read_descriptor(environ)
        alert = normalize_alert(parse_alert_fields(argv))
        target = parse_descriptor(raw_descriptor)
    except ConfigError as e:
        log_error("Configuration rejected", e)
        return exit_code_for(e)

    logger.log_event(
        "alert",
        "normalized",
        level=logging.DEBUG,
        scope=alert.scope.value,
        host=alert.host_name,
        state=alert.state,
    )

    local_name = lookup_local_name()
    message = compose_message(alert, local_name.name)
    lines = frame_lines(target.user, target.password_value, target.recipient, message)
    frame = encode_lines(lines)
    logger.log_event(
        "irc",
        "frame_encoded",
        level=logging.DEBUG,
        user=target.user,
        recipient=target.recipient,
        lines=len(lines),
        size=len(frame),
    )

    logger.log_event(
        "app",
        "start",
        user=target.user,
        recipient=target.recipient,
        scope=alert.scope.value.lower(),
    )
    try:
        echoed = await deliver(target, frame)
    except (ConnectError, DeliveryIOError) as e:
        log_error("Notification not delivered", e)
        return exit_code_for(e)

    logger.log_event(
        "app", "done", user=target.user, recipient=target.recipient, echoed=echoed
    )
    return EXIT_DEGRADED if local_name.degraded else EXIT_OK


def run() -> None:
    """Synchronous entry point for the application.

    Configures logging, runs the asynchronous main function and exits with
    its code.
    """
    LoggerConfigurator().configure()
    if catalog.load_error:
        logging.warning(catalog.load_error)
    try:
        code = asyncio.run(main())
    except KeyboardInterrupt:
        code = 130
    sys.exit(code)


if __name__ == "__main__":
    run()
