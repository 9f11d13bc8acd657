"""
Tests for the parser engine.

This module tests flag resolution, positional assignment, variadic
accumulation and the error paths of ArgumentParser.
"""

import logging

import pytest

from argtree import ParserSettings
from argtree.exceptions import UnknownFlagError, UnsupportedFlagError
from argtree.parsing import parser as parser_module
from argtree.parsing.parser import ArgumentParser, check_supported_flags, parse_arguments
from argtree.structure.spec import CommandSpec


@pytest.fixture
def generate() -> CommandSpec:
    command = CommandSpec(name="generate")
    command.add_flag("generate", short_name="g")
    command.add_flag("verbose", short_name="v", is_boolean=True)
    command.add_flag("no-color", is_boolean=True)
    command.add_flag("format", default="text")
    command.add_arg("output")
    return command


class TestFlagResolution:
    """Tests for resolving flag tokens to declared flags."""

    def test_short_value_flag(self, generate):
        command = parse_arguments(generate, ["-g", "myval", "result.txt"])

        assert command is generate
        assert command.flags["generate"].value == "myval"
        assert command.args["output"].value == "result.txt"

    def test_long_value_flag(self, generate):
        parse_arguments(generate, ["--generate", "myval"])
        assert generate.flags["generate"].value == "myval"

    def test_assignment_form_matches_separate_value(self, generate):
        separate = generate.fresh()
        joined = generate.fresh()

        parse_arguments(separate, ["--generate", "myval", "out"])
        parse_arguments(joined, ["--generate=myval", "out"])

        assert separate.flag_values() == joined.flag_values()
        assert separate.arg_values() == joined.arg_values()

    def test_short_assignment_form_is_unsupported(self, generate):
        """The grammar is checked on raw tokens, before "=" splitting."""
        with pytest.raises(UnsupportedFlagError) as exc_info:
            parse_arguments(generate, ["-g=myval"])
        assert exc_info.value.name == "-g=myval"

    def test_boolean_flag_sets_true(self, generate):
        parse_arguments(generate, ["-v", "out"])

        assert generate.flags["verbose"].value == "true"
        assert generate.args["output"].value == "out"

    def test_boolean_flag_default(self, generate):
        parse_arguments(generate, [])
        assert generate.flags["verbose"].resolved_value == "false"

    def test_inverted_flag_sets_false(self, generate):
        parse_arguments(generate, ["--no-color"])
        assert generate.flags["color"].value == "false"

    def test_inverted_flag_defaults_to_true(self, generate):
        parse_arguments(generate, ["out"])

        assert generate.flags["color"].value == ""
        assert generate.flags["color"].resolved_value == "true"

    def test_plain_name_does_not_reach_inverted_flag(self, generate):
        with pytest.raises(UnknownFlagError) as exc_info:
            parse_arguments(generate, ["--color"])
        assert exc_info.value.name == "--color"

    def test_inverted_form_of_plain_flag_is_unknown(self, generate):
        with pytest.raises(UnknownFlagError) as exc_info:
            parse_arguments(generate, ["--no-verbose"])
        assert exc_info.value.name == "--no-verbose"

    def test_unknown_shorthand(self, generate):
        with pytest.raises(UnknownFlagError) as exc_info:
            parse_arguments(generate, ["-x"])
        assert exc_info.value.name == "-x"

    def test_unknown_long_flag(self, generate):
        with pytest.raises(UnknownFlagError):
            parse_arguments(generate, ["out", "--missing"])

    def test_value_flag_without_value_keeps_default(self, generate):
        parse_arguments(generate, ["--format", "-v"])

        assert generate.flags["format"].value == ""
        assert generate.flags["format"].resolved_value == "text"
        assert generate.flags["verbose"].value == "true"

    def test_value_flag_at_end_keeps_default(self, generate):
        parse_arguments(generate, ["out", "--format"])
        assert generate.flags["format"].resolved_value == "text"

    def test_lone_dash_is_a_value(self, generate):
        parse_arguments(generate, ["-g", "-"])
        assert generate.flags["generate"].value == "-"

    def test_last_occurrence_wins(self, generate):
        parse_arguments(generate, ["-g", "first", "--generate", "second"])
        assert generate.flags["generate"].value == "second"


class TestUnsupportedFlags:
    """Tests for the pre-scan of malformed flags."""

    @pytest.mark.parametrize("token", ["--", "-ab", "---g", "-good"])
    def test_malformed_flag(self, generate, token):
        with pytest.raises(UnsupportedFlagError) as exc_info:
            parse_arguments(generate, [token])
        assert exc_info.value.name == token

    def test_late_unsupported_flag_aborts_before_assignment(self, generate):
        with pytest.raises(UnsupportedFlagError):
            parse_arguments(generate, ["-g", "myval", "out", "-bad"])

        assert generate.flags["generate"].value == ""
        assert generate.args["output"].value == ""

    def test_unsupported_flag_reported_before_unknown_flag(self, generate):
        with pytest.raises(UnsupportedFlagError):
            parse_arguments(generate, ["--missing", "---x"])

    def test_malformed_part_after_split(self, generate):
        with pytest.raises(UnsupportedFlagError) as exc_info:
            parse_arguments(generate, ["--format=---x"])
        assert exc_info.value.name == "---x"

    def test_context_points_at_token(self):
        with pytest.raises(UnsupportedFlagError) as exc_info:
            check_supported_flags(["a", "-bad"], "generate")

        context = exc_info.value.context
        assert context.command_name == "generate"
        assert context.position == 1
        assert context.arguments == ["a", "-bad"]


class TestPositionalArguments:
    """Tests for positional assignment and variadic accumulation."""

    def test_arguments_filled_in_declaration_order(self):
        command = CommandSpec(name="copy")
        command.add_arg("source")
        command.add_arg("destination")

        parse_arguments(command, ["a.txt", "b.txt"])

        assert command.arg_values() == {"source": "a.txt", "destination": "b.txt"}

    def test_variadic_accumulates(self, tag_command):
        parse_arguments(tag_command, ["alice", "x", "y", "z"])

        assert tag_command.args["name"].value == "alice"
        assert tag_command.args["tags"].value == "x,y,z"
        assert tag_command.args["tags"].values() == ["x", "y", "z"]

    def test_variadic_interleaved_with_flags(self, tag_command):
        parse_arguments(tag_command, ["alice", "x", "-f", "y", "-m", "msg", "z"])

        assert tag_command.args["tags"].value == "x,y,z"
        assert tag_command.flags["force"].value == "true"
        assert tag_command.flags["message"].value == "msg"

    def test_only_variadic_argument(self):
        command = CommandSpec(name="rm")
        command.add_arg("paths...")

        parse_arguments(command, ["a", "b"])

        assert command.args["paths"].value == "a,b"

    def test_single_variadic_value(self, tag_command):
        parse_arguments(tag_command, ["alice", "x"])
        assert tag_command.args["tags"].value == "x"

    def test_custom_separator(self, tag_command):
        parser = ArgumentParser(ParserSettings(variadic_separator=" "))
        parser.parse(tag_command, ["alice", "x", "y"])

        assert tag_command.args["tags"].value == "x y"
        assert tag_command.args["tags"].values(" ") == ["x", "y"]

    def test_surplus_values_are_dropped_silently(self, generate, caplog):
        with caplog.at_level(logging.DEBUG):
            parse_arguments(generate, ["out", "extra"])

        assert generate.arg_values() == {"output": "out"}
        assert not caplog.records

    def test_empty_tokens_are_variadic_items(self, tag_command):
        parse_arguments(tag_command, ["alice", "", "x"])

        assert tag_command.args["tags"].value == ",x"
        assert tag_command.args["tags"].values() == ["", "x"]

    def test_variadic_extends_existing_items(self, tag_command):
        tag_command.args["name"].value = "alice"
        tag_command.args["tags"].value = "x"

        parse_arguments(tag_command, ["", "y"])

        assert tag_command.args["tags"].values() == ["x", "", "y"]

    def test_missing_argument_keeps_default(self):
        command = CommandSpec(name="serve")
        command.add_arg("port", default="8080")

        parse_arguments(command, [])

        assert command.args["port"].resolved_value == "8080"

    def test_positional_assignment_split_on_equals(self, tag_command):
        parse_arguments(tag_command, ["alice", "k=v"])
        assert tag_command.args["tags"].value == "k,v"

    def test_splitting_disabled(self, tag_command):
        parser = ArgumentParser(ParserSettings(split_assignments=False))
        parser.parse(tag_command, ["alice", "k=v"])

        assert tag_command.args["tags"].value == "k=v"


class TestFill:
    """Tests for ArgumentParser.fill, which skips the up-front grammar check."""

    def test_fill_does_not_rescan(self, generate, monkeypatch):
        calls = []
        original = parser_module.find_unsupported_flag

        def counting(values):
            calls.append(list(values))
            return original(values)

        monkeypatch.setattr(parser_module, "find_unsupported_flag", counting)

        ArgumentParser().fill(generate, ["-g", "myval", "out"])

        assert calls == []
        assert generate.flags["generate"].value == "myval"

    def test_parse_scans_once(self, generate, monkeypatch):
        calls = []
        original = parser_module.find_unsupported_flag

        def counting(values):
            calls.append(list(values))
            return original(values)

        monkeypatch.setattr(parser_module, "find_unsupported_flag", counting)

        parse_arguments(generate, ["out"])

        assert calls == [["out"]]

    def test_no_log_records(self, generate, caplog):
        with caplog.at_level(logging.DEBUG):
            parse_arguments(generate, ["-g", "myval", "--format", "out"])

        assert not caplog.records
