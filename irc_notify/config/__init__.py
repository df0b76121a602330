"""Connection descriptor model and parser."""

from .descriptor import parse_descriptor  # noqa: F401
from .model import ConnectionTarget, DeliveryMode  # noqa: F401

__all__ = ["ConnectionTarget", "DeliveryMode", "parse_descriptor"]
