"""Validation and defaulting of raw alert fields."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable

from ..errors.internal import ConfigError
from .model import AlertContext, AlertFields, AlertScope


def _blank(value: str) -> bool:
    return not value.strip()


def _any_given(values: Iterable[str]) -> bool:
    return any(not _blank(v) for v in values)


def normalize_alert(
    fields: AlertFields, now: Callable[[], float] = time.time
) -> AlertContext:
    """Pick the alert scope, check required fields and apply fallbacks.

    Service fields win over host fields as soon as any of them is set.
    Display names fall back to the plain names and a zero timestamp falls
    back to ``now()``.

    Raises:
        ConfigError: If the active field group lacks a required value, or
            no host or service field was supplied at all.
    """
    if _any_given(fields.service_group()):
        if (
            _blank(fields.host_name)
            or _blank(fields.service_name)
            or _blank(fields.service_state)
        ):
            raise ConfigError(
                "-service.* is given, missing some of: "
                "-host.name, -service.name, -service.state",
                data={"scope": AlertScope.SERVICE.value},
            )
        scope = AlertScope.SERVICE
    elif _any_given(fields.host_group()):
        if _blank(fields.host_name) or _blank(fields.host_state):
            raise ConfigError(
                "-host.* is given, missing some of: -host.name, -host.state",
                data={"scope": AlertScope.HOST.value},
            )
        scope = AlertScope.HOST
    else:
        raise ConfigError(
            "Missing either -host.name and -host.state "
            "or -host.name, -service.name and -service.state"
        )

    timestamp = fields.icinga_timet or int(now())
    host_display_name = (
        fields.host_name if _blank(fields.host_display_name) else fields.host_display_name
    )

    if scope is AlertScope.HOST:
        return AlertContext(
            timestamp=timestamp,
            scope=scope,
            host_name=fields.host_name,
            host_display_name=host_display_name,
            host_action_url=fields.host_action_url,
            host_state=fields.host_state,
            output=fields.host_output,
        )

    return AlertContext(
        timestamp=timestamp,
        scope=scope,
        host_name=fields.host_name,
        host_display_name=host_display_name,
        host_action_url=fields.host_action_url,
        host_state=fields.host_state,
        service_name=fields.service_name,
        service_display_name=(
            fields.service_name
            if _blank(fields.service_display_name)
            else fields.service_display_name
        ),
        service_action_url=fields.service_action_url,
        service_state=fields.service_state,
        output=fields.service_output,
    )
