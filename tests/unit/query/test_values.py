"""Tests for CQL literal formatting."""

from datetime import date, datetime

import pytest

from confluence_sdk.exceptions import InvalidArgumentError
from confluence_sdk.query.fields import ContentType
from confluence_sdk.query.values import (
    CURRENT_SPACE,
    CURRENT_USER,
    DateFunction,
    format_collection,
    format_date,
    format_id,
    format_keyword,
    format_temporal,
    quote_string,
    unquote_string,
    validate_relative_offset,
)


class TestQuoteString:
    """Tests for string quoting and escaping."""

    def test_plain_string(self):
        assert quote_string("DEV") == '"DEV"'

    def test_embedded_quote_is_escaped(self):
        assert quote_string('say "hi"') == '"say \\"hi\\""'

    def test_backslash_is_escaped_before_quote(self):
        assert quote_string('a\\"b') == '"a\\\\\\"b"'

    @pytest.mark.parametrize(
        "value",
        ["DEV", 'He said "yes"', "C:\\temp\\", 'tricky \\" mix', "  spaced  ", "ü ñ"],
    )
    def test_round_trip(self, value):
        """Quoting and then unquoting recovers the original value."""
        assert unquote_string(quote_string(value)) == value

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_values_rejected(self, value):
        with pytest.raises(InvalidArgumentError):
            quote_string(value)

    def test_non_string_rejected(self):
        with pytest.raises(InvalidArgumentError):
            quote_string(42)


class TestUnquoteString:
    """Tests for parsing quoted literals back."""

    @pytest.mark.parametrize("literal", ["DEV", '"', '"a"b"', '"bad\\x"', '"open'])
    def test_malformed_literals(self, literal):
        with pytest.raises(InvalidArgumentError):
            unquote_string(literal)

    def test_empty_quoted_string(self):
        assert unquote_string('""') == ""


class TestFormatDate:
    """Tests for date and datetime literals."""

    def test_date(self):
        assert format_date(date(2024, 3, 7)) == '"2024-03-07"'

    def test_datetime_includes_time(self):
        assert format_date(datetime(2024, 3, 7, 9, 5, 59)) == '"2024-03-07 09:05"'

    def test_none_rejected(self):
        with pytest.raises(InvalidArgumentError):
            format_date(None)

    def test_string_rejected(self):
        with pytest.raises(InvalidArgumentError):
            format_date("2024-03-07")

    def test_temporal_accepts_date_functions(self):
        assert format_temporal(DateFunction.now("-4w")) == 'now("-4w")'
        assert format_temporal(date(2024, 1, 1)) == '"2024-01-01"'


class TestDateFunction:
    """Tests for CQL date functions."""

    def test_without_offset(self):
        assert str(DateFunction.now()) == "now()"
        assert str(DateFunction.start_of_week()) == "startOfWeek()"

    def test_with_offset(self):
        assert str(DateFunction.start_of_month("-1M")) == 'startOfMonth("-1M")'
        assert str(DateFunction.end_of_day("+2d")) == 'endOfDay("+2d")'
        assert str(DateFunction.end_of_year("1y")) == 'endOfYear("1y")'

    @pytest.mark.parametrize("offset", ["", "4", "-4 weeks", "w", "-4x", '-4w")'])
    def test_invalid_offsets(self, offset):
        with pytest.raises(InvalidArgumentError):
            DateFunction.now(offset)

    def test_validate_relative_offset_returns_input(self):
        assert validate_relative_offset("-15m") == "-15m"


class TestFormatId:
    """Tests for numeric identifiers."""

    def test_unquoted(self):
        assert format_id(123456) == "123456"
        assert format_id(0) == "0"

    @pytest.mark.parametrize("value", [-1, True, None, "123", 1.5])
    def test_invalid_ids(self, value):
        with pytest.raises(InvalidArgumentError):
            format_id(value)


class TestFormatKeyword:
    """Tests for bare keywords."""

    def test_sentinels(self):
        assert format_keyword(CURRENT_USER) == "currentUser()"
        assert format_keyword(CURRENT_SPACE) == "currentSpace()"

    def test_content_type(self):
        assert format_keyword(ContentType.BLOGPOST) == "blogpost"

    def test_plain_string_rejected(self):
        with pytest.raises(InvalidArgumentError):
            format_keyword("page")


class TestFormatCollection:
    """Tests for parenthesized value lists."""

    def test_strings(self):
        assert format_collection(["a", "b c"], quote_string) == '("a", "b c")'

    def test_ids(self):
        assert format_collection((1, 2, 3), format_id) == "(1, 2, 3)"

    def test_generator(self):
        assert format_collection((i for i in [7]), format_id) == "(7)"

    def test_empty_rejected(self):
        with pytest.raises(InvalidArgumentError, match="at least one"):
            format_collection([], quote_string)

    def test_bare_string_rejected(self):
        with pytest.raises(InvalidArgumentError):
            format_collection("DEV", quote_string)

    def test_invalid_element_rejected(self):
        with pytest.raises(InvalidArgumentError):
            format_collection(["ok", ""], quote_string)
