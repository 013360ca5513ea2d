"""Rendering of literal values into CQL syntax.

Every function here is pure. Inputs are validated up front and rejected with
:class:`InvalidArgumentError`; nothing is ever rendered as an empty literal.
"""

import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import date, datetime
from typing import TypeVar

from ..exceptions import InvalidArgumentError, MalformedLiteralError
from .fields import ContentType

logger = logging.getLogger("confluence-sdk.query")

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M"

# A relative offset such as "-4w", "+1d" or "3h"
RELATIVE_OFFSET_PATTERN = re.compile(r"^[+-]?\d+[yMwdhm]$")

T = TypeVar("T")


@dataclass(frozen=True)
class Keyword:
    """A bare CQL keyword or function call, emitted without quotes."""

    text: str

    def __str__(self) -> str:
        return self.text


CURRENT_USER = Keyword("currentUser()")
CURRENT_SPACE = Keyword("currentSpace()")


@dataclass(frozen=True)
class DateFunction(Keyword):
    """A CQL date function such as ``now("-4w")`` or ``startOfDay()``."""

    @classmethod
    def _call(cls, name: str, offset: str | None = None) -> "DateFunction":
        if offset is None:
            return cls(f"{name}()")
        return cls(f'{name}("{validate_relative_offset(offset)}")')

    @classmethod
    def now(cls, offset: str | None = None) -> "DateFunction":
        return cls._call("now", offset)

    @classmethod
    def start_of_day(cls, offset: str | None = None) -> "DateFunction":
        return cls._call("startOfDay", offset)

    @classmethod
    def start_of_week(cls, offset: str | None = None) -> "DateFunction":
        return cls._call("startOfWeek", offset)

    @classmethod
    def start_of_month(cls, offset: str | None = None) -> "DateFunction":
        return cls._call("startOfMonth", offset)

    @classmethod
    def start_of_year(cls, offset: str | None = None) -> "DateFunction":
        return cls._call("startOfYear", offset)

    @classmethod
    def end_of_day(cls, offset: str | None = None) -> "DateFunction":
        return cls._call("endOfDay", offset)

    @classmethod
    def end_of_week(cls, offset: str | None = None) -> "DateFunction":
        return cls._call("endOfWeek", offset)

    @classmethod
    def end_of_month(cls, offset: str | None = None) -> "DateFunction":
        return cls._call("endOfMonth", offset)

    @classmethod
    def end_of_year(cls, offset: str | None = None) -> "DateFunction":
        return cls._call("endOfYear", offset)


def validate_relative_offset(offset: str) -> str:
    """Check that ``offset`` looks like ``-4w`` and return it unchanged.

    Raises:
        InvalidArgumentError: If the offset is empty or malformed
    """
    if not offset or not RELATIVE_OFFSET_PATTERN.match(offset):
        raise InvalidArgumentError(
            f"Invalid relative time offset {offset!r}, expected something like '-4w'"
        )
    return offset


def _checked(literal: str) -> str:
    if not literal:
        raise MalformedLiteralError("Formatter produced an empty CQL literal")
    return literal


def quote_string(value: str) -> str:
    """
    Render a string as a double-quoted CQL literal.

    Backslashes are escaped first, then double quotes, so the result can be
    reversed with :func:`unquote_string`.

    Args:
        value: The string to quote

    Returns:
        The quoted and escaped literal

    Raises:
        InvalidArgumentError: If the value is None or empty
    """
    if value is None or not isinstance(value, str) or value == "":
        raise InvalidArgumentError("A non-empty string value is required")
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return _checked(f'"{escaped}"')


def unquote_string(literal: str) -> str:
    """Reverse :func:`quote_string`.

    Raises:
        InvalidArgumentError: If the literal is not a well-formed quoted string
    """
    if len(literal) < 2 or literal[0] != '"' or literal[-1] != '"':
        raise InvalidArgumentError(f"Not a quoted CQL string: {literal!r}")

    chars = []
    body = iter(literal[1:-1])
    for char in body:
        if char == "\\":
            escaped = next(body, None)
            if escaped not in ("\\", '"'):
                raise InvalidArgumentError(
                    f"Invalid escape sequence in CQL string: {literal!r}"
                )
            chars.append(escaped)
        elif char == '"':
            raise InvalidArgumentError(f"Unescaped quote in CQL string: {literal!r}")
        else:
            chars.append(char)
    return "".join(chars)


def format_date(value: date | datetime) -> str:
    """Render a date as ``"yyyy-MM-dd"`` or a datetime as ``"yyyy-MM-dd HH:mm"``."""
    if value is None:
        raise InvalidArgumentError("A date value is required")
    # datetime is a subclass of date, so check it first
    if isinstance(value, datetime):
        return _checked(f'"{value.strftime(DATETIME_FORMAT)}"')
    if isinstance(value, date):
        return _checked(f'"{value.strftime(DATE_FORMAT)}"')
    raise InvalidArgumentError(f"Expected a date or datetime, got {type(value).__name__}")


def format_id(value: int) -> str:
    """Render a numeric content identifier as an unquoted decimal."""
    if value is None or isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"Content id must be an integer, got {value!r}")
    if value < 0:
        raise InvalidArgumentError(f"Content id must not be negative, got {value}")
    return _checked(str(value))


def format_keyword(value: Keyword | ContentType) -> str:
    """Render a sentinel, date function or enumeration as a bare keyword."""
    if isinstance(value, ContentType):
        return _checked(value.value)
    if isinstance(value, Keyword):
        return _checked(value.text)
    raise InvalidArgumentError(f"Expected a CQL keyword, got {value!r}")


def format_temporal(value: date | datetime | DateFunction) -> str:
    if isinstance(value, DateFunction):
        return format_keyword(value)
    return format_date(value)


def format_collection(values: Iterable[T], formatter: Callable[[T], str]) -> str:
    """
    Render values as a parenthesized, comma separated list for ``in`` clauses.

    Args:
        values: The values to render, each passed through ``formatter``
        formatter: Formatter for a single element

    Returns:
        The rendered list, e.g. ``("a", "b")``

    Raises:
        InvalidArgumentError: If ``values`` is empty or a bare string
    """
    if values is None or isinstance(values, str | bytes):
        raise InvalidArgumentError(
            "Expected a collection of values, not a single value"
        )
    rendered = [formatter(value) for value in values]
    if not rendered:
        raise InvalidArgumentError("An 'in' clause needs at least one value")
    logger.debug(f"Formatted collection with {len(rendered)} values")
    return f"({', '.join(rendered)})"
