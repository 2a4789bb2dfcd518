"""
Tests for the fpbelt CLI.

These tests verify:
1. Each command prints the library's result
2. Failures print a reason and exit with status 1
3. Parser wiring (defaults, required options, help)
"""

import argparse

import pytest
from loguru import logger

from fpbelt.cli.main import (
    DEFAULT_SEPARATOR,
    cmd_insert,
    cmd_join,
    cmd_same,
    create_parser,
    main,
    split_items,
)
from fpbelt.log import _log_format


# =============================================================================
# INPUT HANDLING TESTS
# =============================================================================

class TestSplitItems:
    """Test list argument splitting."""

    def test_splits_on_separator(self):
        assert split_items("a,b,c") == ("a", "b", "c")
        assert split_items("a|b", "|") == ("a", "b")

    def test_empty_argument_is_empty_list(self):
        assert split_items("") == ()

    def test_keeps_empty_items(self):
        assert split_items("a,,b") == ("a", "", "b")


# =============================================================================
# CLI COMMAND TESTS
# =============================================================================

class TestJoinCommand:
    """Test the join command."""

    def test_joins_with_default_delimiter(self, capsys):
        assert main(["join", "a", "b", "c"]) == 0
        assert capsys.readouterr().out == "a,b,c\n"

    def test_joins_with_custom_delimiter(self, capsys):
        assert main(["join", "a", "b", "-d", " | "]) == 0
        assert capsys.readouterr().out == "a | b\n"

    def test_no_items_prints_empty_line(self, capsys):
        args = argparse.Namespace(items=[], delimiter=",")
        assert cmd_join(args) == 0
        assert capsys.readouterr().out == "\n"


class TestSameCommand:
    """Test the same command."""

    def test_equal_ignoring_order(self, capsys):
        assert main(["same", "a,b,b", "b,a,b"]) == 0
        assert "equal" in capsys.readouterr().out

    def test_multiplicity_matters(self, capsys):
        assert main(["same", "a,a", "a,b"]) == 1
        assert "not equal" in capsys.readouterr().out

    def test_length_matters(self, capsys):
        args = argparse.Namespace(left="a,a", right="a", sep=DEFAULT_SEPARATOR)
        assert cmd_same(args) == 1


class TestInsertCommand:
    """Test the insert command."""

    def test_splices_batch(self, capsys):
        assert main(["insert", "1,2,3", "4,5", "--at", "1"]) == 0
        assert capsys.readouterr().out == "1,4,5,2,3\n"

    def test_appends_at_end(self, capsys):
        assert main(["insert", "x,y", "z", "--at", "2"]) == 0
        assert capsys.readouterr().out == "x,y,z\n"

    def test_out_of_range_fails(self, capsys):
        assert main(["insert", "x", "a", "--at", "5"]) == 1
        assert "out of range" in capsys.readouterr().out

    def test_empty_batch_fails(self, capsys):
        args = argparse.Namespace(target="x", batch="", at=0, sep=DEFAULT_SEPARATOR)
        assert cmd_insert(args) == 1
        assert "at least one item" in capsys.readouterr().out

    def test_index_is_required(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["insert", "x", "a"])


class TestParseDateCommand:
    """Test the parse-date command."""

    @pytest.mark.parametrize("value,expected", [
        ("2020-01-01", "2020-01-01T00:00:00.000Z"),
        ("2020", "2020-01-01T00:00:00.000Z"),
        ("0", "1970-01-01T00:00:00.000Z"),
        ("1577836800000", "2020-01-01T00:00:00.000Z"),
    ])
    def test_prints_iso_string(self, capsys, value, expected):
        assert main(["parse-date", value]) == 0
        assert capsys.readouterr().out == f"{expected}\n"

    def test_invalid_date_fails(self, capsys):
        assert main(["parse-date", "not-a-date"]) == 1
        assert "Cannot read a date" in capsys.readouterr().out

    @pytest.mark.parametrize("value,expected", [
        ("-202", "1969-12-31T23:59:59.798Z"),
        ("-2020", "1969-12-31T23:59:57.980Z"),
        ("-1", "1969-12-31T23:59:59.999Z"),
    ])
    def test_negative_integers_are_millis(self, capsys, value, expected):
        """Only an unsigned four-digit value is read as a year."""
        assert main(["parse-date", value]) == 0
        assert capsys.readouterr().out == f"{expected}\n"

    @pytest.mark.parametrize("value", ["\u00b2", "\u00b2\u00b3", "--1", "1-"])
    def test_non_ascii_or_malformed_numbers_fail_cleanly(self, capsys, value):
        """Digit-like text that int() rejects must exit 1, not raise."""
        assert main(["parse-date", "--", value]) == 1
        assert "Cannot read a date" in capsys.readouterr().out


class TestParseUrlCommand:
    """Test the parse-url command."""

    def test_prints_url(self, capsys):
        assert main(["parse-url", "https://example.com/a"]) == 0
        assert capsys.readouterr().out == "https://example.com/a\n"

    def test_prints_param(self, capsys):
        assert main(["parse-url", "https://example.com/?q=1", "--param", "q"]) == 0
        assert capsys.readouterr().out.splitlines()[-1] == "q=1"

    def test_missing_param_fails(self, capsys):
        assert main(["parse-url", "https://example.com/", "--param", "q"]) == 1
        assert "not found" in capsys.readouterr().out

    def test_relative_url_fails(self, capsys):
        assert main(["parse-url", "example.com"]) == 1
        assert "not an absolute URL" in capsys.readouterr().out


# =============================================================================
# MAIN ENTRY POINT TESTS
# =============================================================================

class TestMain:
    """Test parser wiring."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "usage: fpbelt" in out
        assert "\u2014" not in out

    @pytest.mark.parametrize("argv", [
        ["join"],
        ["same", "a", "b"],
        ["insert", "a", "b", "--at", "0"],
        ["parse-date", "2020"],
        ["parse-url", "https://example.com"],
    ])
    def test_parser_has_command(self, argv):
        args = create_parser().parse_args(argv)
        assert args.command == argv[0]
        assert callable(args.func)

    @pytest.fixture
    def restore_logging(self):
        yield
        logger.remove()
        logger.disable("fpbelt")

    def test_verbose_enables_logging(self, capsys, restore_logging):
        assert main(["-v", "parse-date", "x"]) == 1
        err = capsys.readouterr().err
        assert "Date parse failed" in err
        assert "command='parse-date'" in err


class TestLogFormat:
    """Test the loguru record format."""

    def test_plain_record_has_no_extra_section(self):
        fmt = _log_format({"extra": {}, "exception": None})
        assert fmt.endswith("{message}\n")

    def test_extra_fields_are_appended(self):
        fmt = _log_format({"extra": {"command": "join"}, "exception": None})
        assert "command='join'" in fmt

    def test_extra_values_are_escaped(self):
        """Braces and tags in values must not reach loguru as markup."""
        fmt = _log_format({"extra": {"v": "<red>{x}"}, "exception": None})
        assert r"\<red>" in fmt
        assert "{{x}}" in fmt

    def test_exception_is_included(self):
        fmt = _log_format({"extra": {}, "exception": object()})
        assert fmt.endswith("{exception}\n")
