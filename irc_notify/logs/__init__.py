"""Project logging package.

Contains the event catalog and the NotifyLogger wrapper. Avoid importing
stdlib logging through this package name externally.
"""

from .event_catalog import EventCatalog, catalog  # noqa: F401
from .logger import NotifyLogger, logger  # noqa: F401

__all__ = ["NotifyLogger", "logger", "EventCatalog", "catalog"]
