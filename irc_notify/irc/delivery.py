"""Transport for a single encoded frame (plain TCP or TLS)."""

from __future__ import annotations

import asyncio
import logging
import ssl
import sys
from typing import BinaryIO

from ..config.model import ConnectionTarget
from ..constants import IRC_NOTIFY_CONNECT_TIMEOUT, IRC_NOTIFY_READ_CHUNK_SIZE
from ..errors.internal import ConnectError, DeliveryIOError
from ..logs.logger import logger


def build_ssl_context(target: ConnectionTarget) -> ssl.SSLContext | None:
    """Return the TLS context for the target, or None for plain TCP.

    Certificate and host name checks are only disabled when the descriptor
    explicitly asked for ``insecure=1``.
    """
    if not target.secure:
        return None
    context = ssl.create_default_context()
    if target.insecure_tls:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        logger.log_event(
            "irc", "tls_unverified", level=logging.WARNING, host=target.host
        )
    return context


async def _open(
    target: ConnectionTarget, timeout: float | None
) -> tuple[asyncio.StreamReader, asyncio.StreamWriter]:
    logger.log_event(
        "irc",
        "connect_start",
        level=logging.DEBUG,
        user=target.user,
        recipient=target.recipient,
        host=target.host,
        port=target.port,
        secure=target.secure,
    )
    try:
        return await asyncio.wait_for(
            asyncio.open_connection(
                target.host, target.port, ssl=build_ssl_context(target)
            ),
            timeout=timeout or None,
        )
    except TimeoutError as e:
        raise ConnectError(
            f"Timed out connecting to {target.address}",
            data={"host": target.host, "port": target.port},
        ) from e
    except OSError as e:
        raise ConnectError(
            f"Cannot connect to {target.address}: {e}",
            data={"host": target.host, "port": target.port, "secure": target.secure},
        ) from e


async def deliver(
    target: ConnectionTarget,
    frame: bytes,
    sink: BinaryIO | None = None,
    *,
    timeout: float | None = IRC_NOTIFY_CONNECT_TIMEOUT,
    chunk_size: int = IRC_NOTIFY_READ_CHUNK_SIZE,
) -> int:
    """Send the frame and echo the server response until it hangs up.

    Args:
        target: Where to connect.
        frame: The encoded protocol lines.
        sink: Binary stream receiving the server bytes, stdout by default.
        timeout: Dial timeout in seconds; 0 or None waits forever.
        chunk_size: Read size while echoing.

    Returns:
        Number of bytes received from the server.

    Raises:
        ConnectError: The connection could not be established.
        DeliveryIOError: Writing the frame or reading the reply failed.
    """
    out = sink if sink is not None else sys.stdout.buffer
    reader, writer = await _open(target, timeout)
    logger.log_event(
        "irc",
        "connection_established",
        level=logging.DEBUG,
        user=target.user,
        recipient=target.recipient,
        host=target.host,
        port=target.port,
    )

    echoed = 0
    try:
        writer.write(frame)
        await writer.drain()
        logger.log_event("irc", "frame_sent", level=logging.DEBUG, size=len(frame))

        while chunk := await reader.read(chunk_size):
            out.write(chunk)
            out.flush()
            echoed += len(chunk)
        logger.log_event("irc", "remote_closed", level=logging.DEBUG, echoed=echoed)
    except OSError as e:
        raise DeliveryIOError(
            f"I/O error talking to {target.address}: {e}",
            data={"host": target.host, "port": target.port, "echoed": echoed},
        ) from e
    finally:
        writer.close()
        try:
            await writer.wait_closed()
        except OSError as e:
            logger.log_event(
                "irc", "close_failed", level=logging.DEBUG, error=str(e)
            )
    return echoed
