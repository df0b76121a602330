"""Tests for command-line flags and environment lookup."""

import pytest

from irc_notify.cli import build_parser, parse_alert_fields, read_descriptor
from irc_notify.errors.internal import ConfigError


class TestParseAlertFields:
    """Flags map onto AlertFields one to one."""

    def test_single_dash_flags(self):
        fields = parse_alert_fields(
            ["-host.name", "h1", "-host.state", "DOWN", "-icinga.timet", "42"]
        )
        assert fields.host_name == "h1"
        assert fields.host_state == "DOWN"
        assert fields.icinga_timet == 42

    def test_double_dash_and_equals(self):
        fields = parse_alert_fields(
            ["--service.name=disk", "--service.state=WARNING", "--host.name=h1"]
        )
        assert fields.service_name == "disk"
        assert fields.service_state == "WARNING"

    def test_defaults(self):
        fields = parse_alert_fields([])
        assert fields.icinga_timet == 0
        assert fields.host_name == ""
        assert fields.service_output == ""

    def test_multiline_output_kept(self):
        fields = parse_alert_fields(["-service.output", "line one\nline two"])
        assert fields.service_output == "line one\nline two"

    def test_every_macro_has_a_flag(self):
        dests = {action.dest for action in build_parser()._actions}
        for name in (
            "icinga_timet",
            "host_name",
            "host_display_name",
            "host_action_url",
            "host_state",
            "host_output",
            "service_name",
            "service_display_name",
            "service_action_url",
            "service_state",
            "service_output",
        ):
            assert name in dests

    def test_dash_leading_output_is_a_value(self):
        fields = parse_alert_fields(
            ["-host.name", "h1", "-host.state", "DOWN", "-host.output", "-ERR"]
        )
        assert fields.host_output == "-ERR"
        assert fields.host_state == "DOWN"

    def test_dash_leading_value_double_dash_flag(self):
        fields = parse_alert_fields(["--service.output", "-x", "--service.name", "db"])
        assert fields.service_output == "-x"
        assert fields.service_name == "db"

    def test_negative_timestamp(self):
        assert parse_alert_fields(["-icinga.timet", "-5"]).icinga_timet == -5

    def test_value_spelled_like_a_flag(self):
        fields = parse_alert_fields(["-host.output", "-host.name", "-host.name", "h1"])
        assert fields.host_output == "-host.name"
        assert fields.host_name == "h1"

    def test_trailing_flag_without_value(self):
        with pytest.raises(ConfigError, match="expected one argument"):
            parse_alert_fields(["-host.name"])

    def test_unknown_flag(self):
        with pytest.raises(ConfigError):
            parse_alert_fields(["-host.nmae", "h1"])

    def test_abbreviation_not_accepted(self):
        with pytest.raises(ConfigError):
            parse_alert_fields(["--host.stat", "DOWN"])

    def test_bad_timestamp(self):
        with pytest.raises(ConfigError, match="invalid int value"):
            parse_alert_fields(["-icinga.timet", "yesterday"])


class TestReadDescriptor:
    """IRC_URL lookup."""

    def test_present(self):
        assert read_descriptor({"IRC_URL": "irc://bot@h/direct/x"}) == "irc://bot@h/direct/x"

    @pytest.mark.parametrize("environ", [{}, {"IRC_URL": ""}, {"IRC_URL": "  "}])
    def test_missing(self, environ):
        with pytest.raises(ConfigError, match=r"\$IRC_URL missing"):
            read_descriptor(environ)

    def test_defaults_to_process_environment(self, monkeypatch):
        monkeypatch.setenv("IRC_URL", "ircs://bot@h/channel/ops")
        assert read_descriptor() == "ircs://bot@h/channel/ops"
