from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class AlertScope(str, Enum):
    HOST = "Host"
    SERVICE = "Service"


class AlertFields(BaseModel):
    """Raw alert fields as handed over by the monitoring system.

    Every field mirrors one ``$macro$`` of the notification command; unset
    strings are empty and an unset timestamp is 0.
    """

    model_config = ConfigDict(frozen=True)

    icinga_timet: int = 0

    host_name: str = ""
    host_display_name: str = ""
    host_action_url: str = ""
    host_state: str = ""
    host_output: str = ""

    service_name: str = ""
    service_display_name: str = ""
    service_action_url: str = ""
    service_state: str = ""
    service_output: str = ""

    def host_group(self) -> tuple[str, ...]:
        return (
            self.host_name,
            self.host_display_name,
            self.host_action_url,
            self.host_state,
            self.host_output,
        )

    def service_group(self) -> tuple[str, ...]:
        return (
            self.service_name,
            self.service_display_name,
            self.service_action_url,
            self.service_state,
            self.service_output,
        )


class AlertContext(BaseModel):
    """Validated alert, ready to be rendered.

    Service fields are empty strings for host-scoped alerts. ``output`` holds
    the output of whichever field group is active.
    """

    model_config = ConfigDict(frozen=True)

    timestamp: int
    scope: AlertScope

    host_name: str
    host_display_name: str
    host_action_url: str = ""
    host_state: str = ""

    service_name: str = ""
    service_display_name: str = ""
    service_action_url: str = ""
    service_state: str = ""

    output: str = ""

    @property
    def state(self) -> str:
        if self.scope is AlertScope.SERVICE:
            return self.service_state
        return self.host_state
