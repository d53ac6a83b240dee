"""Unit tests for the minigrep argument parser."""

from dataclasses import fields

import pytest

from minigrep.cli.builder import create_parser, get_version, parse_cli_args, split_cli_args
from minigrep.options import SearchSettings


def _parse(args):
    return parse_cli_args(create_parser(), args)


@pytest.mark.unit
@pytest.mark.cli
class TestCreateParser:
    """Test parsing of options."""

    def test_defaults(self):
        parsed = _parse(["q", "f"])
        assert parsed.encoding is None
        assert parsed.log_level is None
        assert parsed.log_file is None
        assert parsed.no_matches_notice is None
        assert parsed.config is None
        assert parsed.no_config is False
        assert parsed.verbose is False
        assert parsed.trace is False

    def test_empty_notice_flags(self):
        assert _parse(["--no-empty-notice"]).no_matches_notice is False
        assert _parse(["--empty-notice"]).no_matches_notice is True

    def test_log_level_is_uppercased(self):
        assert _parse(["--log-level", "debug"]).log_level == "DEBUG"

    def test_invalid_log_level_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            _parse(["--log-level", "LOUD"])
        assert exc_info.value.code == 2

    def test_missing_option_value_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            _parse(["q", "f", "--encoding"])
        assert exc_info.value.code == 2

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _parse(["--version"])
        assert exc_info.value.code == 0
        assert capsys.readouterr().out.startswith("minigrep ")

    def test_get_version_returns_string(self):
        assert isinstance(get_version(), str)


@pytest.mark.unit
@pytest.mark.cli
class TestSettingsOptions:
    """Test that settings options are generated from SearchSettings fields."""

    def test_every_field_has_an_option(self):
        dests = {action.dest for action in create_parser()._actions}
        for settings_field in fields(SearchSettings):
            assert settings_field.name in dests

    def test_help_comes_from_field_metadata(self, capsys):
        with pytest.raises(SystemExit):
            _parse(["--help"])
        out = " ".join(capsys.readouterr().out.split())
        for settings_field in fields(SearchSettings):
            assert " ".join(settings_field.metadata["help"].split()) in out

    def test_cli_name_metadata(self):
        option_strings = create_parser()._option_string_actions
        assert option_strings["--empty-notice"].dest == "no_matches_notice"
        assert option_strings["--no-empty-notice"].dest == "no_matches_notice"
        assert option_strings["--log-file"].dest == "log_file"

    def test_choices_from_metadata(self):
        action = create_parser()._option_string_actions["--log-level"]
        assert list(action.choices) == SearchSettings.__dataclass_fields__["log_level"].metadata["choices"]

    def test_options_are_grouped(self):
        groups = {group.title: group for group in create_parser()._action_groups}
        logging_dests = {action.dest for action in groups["logging"]._group_actions}
        settings_dests = {action.dest for action in groups["settings"]._group_actions}
        assert {"log_level", "log_file", "verbose", "trace"} <= logging_dests
        assert {"encoding", "no_matches_notice", "config", "no_config"} <= settings_dests


@pytest.mark.unit
@pytest.mark.cli
class TestPositionalTokens:
    """Test that positional tokens reach the config layer untouched and in order."""

    def test_positionals_are_collected_raw(self):
        assert _parse(["needle", "hay.txt", "extra"]).arguments == ["needle", "hay.txt", "extra"]

    def test_no_positionals(self):
        assert _parse([]).arguments == []

    def test_options_between_positionals(self):
        parsed = _parse(["q", "--encoding", "latin-1", "f"])
        assert parsed.arguments == ["q", "f"]
        assert parsed.encoding == "latin-1"

    def test_option_with_equals_value(self):
        parsed = _parse(["--encoding=latin-1", "q", "f"])
        assert parsed.arguments == ["q", "f"]
        assert parsed.encoding == "latin-1"

    def test_double_dash_keeps_following_tokens(self):
        parsed = _parse(["--", "-v", "f"])
        assert parsed.arguments == ["-v", "f"]
        assert parsed.verbose is False

    def test_only_first_double_dash_is_consumed(self):
        assert _parse(["--", "--", "f"]).arguments == ["--", "f"]

    def test_options_before_double_dash_still_apply(self):
        parsed = _parse(["--verbose", "--", "--trace", "f"])
        assert parsed.verbose is True
        assert parsed.trace is False
        assert parsed.arguments == ["--trace", "f"]

    def test_unknown_dash_query(self):
        assert _parse(["-x", "f"]).arguments == ["-x", "f"]

    def test_negative_number_query(self):
        assert _parse(["-1", "f"]).arguments == ["-1", "f"]

    def test_unknown_option_like_extras_are_positional(self):
        assert _parse(["q", "f", "--weird", "--also=odd"]).arguments == ["q", "f", "--weird", "--also=odd"]

    def test_abbreviations_are_not_options(self):
        parsed = _parse(["--enc", "f"])
        assert parsed.encoding is None
        assert parsed.arguments == ["--enc", "f"]

    def test_split_keeps_option_values_with_their_option(self):
        option_tokens, positionals = split_cli_args(create_parser(), ["q", "--log-file", "run.log", "-v", "f"])
        assert option_tokens == ["--log-file", "run.log", "-v"]
        assert positionals == ["q", "f"]
