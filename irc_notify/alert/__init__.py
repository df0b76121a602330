"""Alert normalization and message composition."""

from .composer import LocalName, RenderedMessage, compose_message, lookup_local_name  # noqa: F401
from .model import AlertContext, AlertFields, AlertScope  # noqa: F401
from .normalizer import normalize_alert  # noqa: F401

__all__ = [
    "AlertContext",
    "AlertFields",
    "AlertScope",
    "LocalName",
    "RenderedMessage",
    "compose_message",
    "lookup_local_name",
    "normalize_alert",
]
