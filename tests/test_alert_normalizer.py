"""Tests for alert field validation and defaulting."""

import pytest
from pydantic import ValidationError

from irc_notify.alert.model import AlertFields, AlertScope
from irc_notify.alert.normalizer import normalize_alert
from irc_notify.errors.internal import ConfigError


def _now():
    return 1234.9


class TestServiceScope:
    """Any service field selects the service scope."""

    def test_minimal_service_alert(self):
        fields = AlertFields(service_name="db", service_state="CRITICAL", host_name="h1")
        alert = normalize_alert(fields, now=_now)
        assert alert.scope is AlertScope.SERVICE
        assert alert.service_display_name == "db"
        assert alert.host_display_name == "h1"
        assert alert.state == "CRITICAL"

    def test_service_output_is_used(self, service_fields):
        alert = normalize_alert(service_fields)
        assert alert.output == "connection refused\n\nretry in 60s"
        assert alert.state == "CRITICAL"

    def test_explicit_display_names_kept(self, service_fields):
        fields = service_fields.model_copy(update={"service_display_name": "PostgreSQL"})
        alert = normalize_alert(fields)
        assert alert.service_display_name == "PostgreSQL"
        assert alert.host_display_name == "Primary DB"

    def test_service_fields_win_over_host_fields(self):
        fields = AlertFields(
            host_name="h1",
            host_state="DOWN",
            host_output="host output",
            service_name="disk",
            service_state="WARNING",
            service_output="disk output",
        )
        alert = normalize_alert(fields)
        assert alert.scope is AlertScope.SERVICE
        assert alert.state == "WARNING"
        assert alert.output == "disk output"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"service_name": "db", "service_state": "CRITICAL"},
            {"host_name": "h1", "service_state": "CRITICAL"},
            {"host_name": "h1", "service_name": "db"},
            {"host_name": "h1", "service_output": "only output"},
            {"host_name": "h1", "service_name": "db", "service_state": "   "},
        ],
    )
    def test_missing_required_service_field(self, overrides):
        with pytest.raises(ConfigError, match="-service.\\* is given"):
            normalize_alert(AlertFields(**overrides))


class TestHostScope:
    """Host fields alone select the host scope."""

    def test_minimal_host_alert(self):
        alert = normalize_alert(AlertFields(host_name="h1", host_state="DOWN"), now=_now)
        assert alert.scope is AlertScope.HOST
        assert alert.host_display_name == "h1"
        assert alert.state == "DOWN"
        assert alert.service_name == ""

    def test_host_output_is_used(self, host_fields):
        assert normalize_alert(host_fields).output == "ping failed"

    def test_blank_display_name_falls_back(self):
        fields = AlertFields(host_name="h1", host_display_name="  ", host_state="UP")
        assert normalize_alert(fields).host_display_name == "h1"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"host_name": "h1"},
            {"host_state": "DOWN"},
            {"host_display_name": "Router", "host_state": "DOWN"},
            {"host_action_url": "https://mon.example/h1"},
        ],
    )
    def test_missing_required_host_field(self, overrides):
        with pytest.raises(ConfigError, match="-host.\\* is given"):
            normalize_alert(AlertFields(**overrides))


class TestNoFields:
    """Without host or service fields there is nothing to report."""

    def test_empty_fields(self):
        with pytest.raises(ConfigError, match="Missing either"):
            normalize_alert(AlertFields())

    def test_whitespace_only_fields_count_as_empty(self):
        with pytest.raises(ConfigError, match="Missing either"):
            normalize_alert(AlertFields(host_name="  ", service_state="\t"))

    def test_timestamp_alone_is_not_enough(self):
        with pytest.raises(ConfigError):
            normalize_alert(AlertFields(icinga_timet=1700000000))


class TestTimestamp:
    """Zero timestamps fall back to the injected clock."""

    def test_zero_uses_now(self):
        alert = normalize_alert(AlertFields(host_name="h1", host_state="UP"), now=_now)
        assert alert.timestamp == 1234

    def test_given_timestamp_kept(self, host_fields):
        alert = normalize_alert(host_fields, now=_now)
        assert alert.timestamp == 1700000000

    def test_result_is_frozen(self, host_fields):
        alert = normalize_alert(host_fields)
        with pytest.raises(ValidationError):
            alert.host_name = "other"
