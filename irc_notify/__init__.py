"""Icinga-to-IRC one-shot notifier."""

__version__ = "1.0.0"
