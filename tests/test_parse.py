"""Tests for ISO 8601 parsing."""

import pytest

from picotime import DateTime, InvalidArgumentError, ParseError
from picotime.format import parse_iso8601


class TestParseISO8601:
    """Tests for parsing well-formed ISO 8601 strings."""

    def test_parse_basic(self):
        """Parse date and time without sub-seconds."""
        result = parse_iso8601("2000-01-02T03:04:05")
        assert isinstance(result, DateTime)
        assert result == DateTime(2000, 1, 2, 3, 4, 5)

    def test_parse_space_separator(self):
        """A single space may separate date and time."""
        assert parse_iso8601("2000-01-02 03:04:05") == DateTime(2000, 1, 2, 3, 4, 5)

    def test_parse_milliseconds(self):
        """Three sub-second digits are milliseconds."""
        result = parse_iso8601("2001-02-03T04:05:06.789")
        assert result.millisecond == 789
        assert result.microsecond == 0

    def test_parse_short_fraction_is_right_padded(self):
        """Fewer digits are padded with zeros on the right."""
        assert parse_iso8601("2001-02-03T04:05:06.5").millisecond == 500
        assert parse_iso8601("2001-02-03T04:05:06.78").millisecond == 780
        assert parse_iso8601("2001-02-03T04:05:06.0001").microsecond == 100

    def test_parse_twelve_digits(self):
        """Twelve digits fill all four sub-second fields."""
        result = parse_iso8601("2000-01-02T03:04:05.006007008009")
        assert result.components() == (2000, 1, 2, 3, 4, 5, 6, 7, 8, 9)

    def test_parse_extremes(self):
        """The first and last representable values."""
        assert parse_iso8601("0001-01-01T00:00:00") == DateTime.min()
        assert parse_iso8601("9999-12-31T23:59:59.999999999999") == DateTime.max()

    def test_from_iso_format(self):
        """DateTime.from_iso_format delegates to the parser."""
        assert DateTime.from_iso_format("2001-02-03 04:05:06.78").millisecond == 780


class TestParseISO8601Errors:
    """Tests for rejected input."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "2000-01-02",
            "2000-01-02T03:04",
            "2000-1-02T03:04:05",
            "200-01-02T03:04:05",
            "20000-01-02T03:04:05",
            "2000/01/02T03:04:05",
            "2000-01-02t03:04:05",
            "2000-01-02_03:04:05",
            "2000-01-02T03:04:05.",
            "2000-01-02T03:04:05Z",
            "2000-01-02T03:04:05+00:00",
            "2000-01-02T03:04:05.1a",
            " 2000-01-02T03:04:05",
            "2000-01-02T03:04:05 ",
            "-001-01-02T03:04:05",
            "2000-01-02T3:04:05",
            "２000-01-02T03:04:05",
        ],
    )
    def test_grammar_mismatch(self, text):
        """Anything off the grammar raises ParseError."""
        with pytest.raises(ParseError):
            parse_iso8601(text)

    def test_too_many_subsecond_digits(self):
        """More than twelve sub-second digits is a ParseError."""
        with pytest.raises(ParseError, match="at most 12"):
            parse_iso8601("2000-01-02T03:04:05.0060070080091")

    @pytest.mark.parametrize(
        "text",
        [
            "2001-02-29T00:00:00",
            "0000-01-01T00:00:00",
            "2000-13-01T00:00:00",
            "2000-01-00T00:00:00",
            "2000-01-01T24:00:00",
            "2000-01-01T00:60:00",
            "2000-01-01T00:00:60",
        ],
    )
    def test_component_out_of_range(self, text):
        """Well-formed strings with bad values fail validation."""
        with pytest.raises(InvalidArgumentError) as excinfo:
            parse_iso8601(text)
        assert not isinstance(excinfo.value, ParseError)

    def test_error_mentions_position(self):
        """The message points at the offending character."""
        with pytest.raises(ParseError, match="position 19"):
            parse_iso8601("2000-01-02T03:04:05Z")

    def test_parse_error_is_invalid_argument(self):
        """Handlers for InvalidArgumentError also catch ParseError."""
        with pytest.raises(InvalidArgumentError):
            parse_iso8601("not a datetime")

    def test_non_string(self):
        """Only strings can be parsed."""
        with pytest.raises(TypeError):
            parse_iso8601(20000102)  # type: ignore[arg-type]
