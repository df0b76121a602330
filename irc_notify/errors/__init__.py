"""Error taxonomy and reporting helpers."""

from .internal import ConfigError, ConnectError, DeliveryIOError, NotifyError  # noqa: F401

__all__ = ["NotifyError", "ConfigError", "ConnectError", "DeliveryIOError"]
