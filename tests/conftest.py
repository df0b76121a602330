import logging
from datetime import timezone

import pytest

from irc_notify.alert.model import AlertFields
from irc_notify.config.descriptor import parse_descriptor


@pytest.fixture
def host_fields():
    """Host alert as Icinga hands it over for a DOWN host."""
    return AlertFields(
        icinga_timet=1700000000,
        host_name="h1",
        host_state="DOWN",
        host_output="ping failed",
    )


@pytest.fixture
def service_fields():
    """Service alert with action URLs and multi-line output."""
    return AlertFields(
        icinga_timet=1700000000,
        host_name="db01.example",
        host_display_name="Primary DB",
        host_action_url="https://mon.example/host/db01",
        host_state="UP",
        service_name="pgsql",
        service_action_url="https://mon.example/svc/pgsql",
        service_state="CRITICAL",
        service_output="connection refused\n\nretry in 60s",
    )


@pytest.fixture
def utc():
    return timezone.utc


@pytest.fixture
def channel_target():
    return parse_descriptor("irc://bot@irc.example/channel/alerts")


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
