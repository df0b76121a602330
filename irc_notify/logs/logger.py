"""Event-oriented logger used across the notifier."""

from __future__ import annotations

import logging

from ..logging_config import is_debug_enabled


class NotifyLogger:
    def __init__(self, name: str = "irc_notify") -> None:
        self._event_name_width = 28
        # Handlers live on the root logger (see LoggerConfigurator).
        self.logger = logging.getLogger(name)

    def log_event(
        self,
        domain: str,
        action: str,
        level: int = logging.INFO,
        human: str | None = None,
        **kwargs: object,
    ) -> None:
        event_name = f"{domain}_{action}".lower()
        if human is None:
            # Local import to avoid cyclic import issues during module init.
            from .event_catalog import catalog

            human, derived = catalog.render(domain, action, kwargs)
            if derived:
                kwargs.setdefault("derived", True)
        kwargs.setdefault("_human_text", human)
        self._log(level, event_name, **kwargs)

    def _log(self, level: int, event_name: str, **kwargs: object) -> None:
        kw: dict[str, object] = dict(kwargs)
        user, recipient, human_text = self._extract_reserved(kw)
        prefix = self._build_prefix(user, recipient)
        msg = (
            self._build_debug_message(event_name, prefix, human_text, kw)
            if is_debug_enabled()
            else self._build_concise_message(event_name, prefix, human_text)
        )
        self.logger.log(level, msg)

    @staticmethod
    def _extract_reserved(
        kwargs: dict[str, object],
    ) -> tuple[str | None, str | None, str | None]:
        user_o = kwargs.pop("user", None)
        recipient_o = kwargs.pop("recipient", None)
        human_text_o = kwargs.pop("_human_text", None)
        user = user_o if isinstance(user_o, str) else None
        recipient = recipient_o if isinstance(recipient_o, str) else None
        human_text = human_text_o if isinstance(human_text_o, str) else None
        return user, recipient, human_text

    @staticmethod
    def _build_prefix(user: str | None, recipient: str | None) -> str:
        user_label = user or "system"
        core = f"{user_label}->{recipient}" if recipient else user_label
        padded = core.ljust(24)[:24]
        return f"[{padded}]"

    def _build_debug_message(
        self,
        event_name: str,
        prefix: str,
        human_text: str | None,
        kwargs: dict[str, object],
    ) -> str:
        context = ", ".join(f"{k}={v}" for k, v in kwargs.items())
        width = self._event_name_width
        if len(event_name) <= width:
            ev = event_name.ljust(width)
        else:  # truncate but keep rightmost indicator
            ev = event_name[: width - 1] + "…"
        base = f"{ev} {prefix}"
        if human_text:
            base = f"{base} {human_text}"
        if context:
            base = f"{base} ({context})"
        return base

    @staticmethod
    def _build_concise_message(
        event_name: str, prefix: str, human_text: str | None
    ) -> str:
        return f"{prefix} {human_text or event_name}"


logger = NotifyLogger()
