"""
Clause builders, one per field capability.

Each builder only exposes the comparisons that make sense for its field, so
``where.created.contains(...)`` or ``where.id.in_(42)`` are flagged by a type
checker instead of producing an invalid query. A builder accepts exactly one
terminal call, which returns a finished :class:`~.combinators.Clause`.
"""

import logging
from collections.abc import Iterable
from datetime import date, datetime

from ..exceptions import InvalidArgumentError
from ..models.confluence import ConfluenceSpace, ConfluenceUser
from .combinators import Clause
from .fields import CQLField, ContentType, Operator
from .values import (
    CURRENT_SPACE,
    CURRENT_USER,
    DateFunction,
    format_collection,
    format_id,
    format_keyword,
    format_temporal,
    quote_string,
)

logger = logging.getLogger("confluence-sdk.query")

Temporal = date | datetime | DateFunction


class ClauseBuilder:
    """Common state of an unfinished clause."""

    def __init__(self, field: CQLField) -> None:
        self._field = field
        self._finished = False

    @property
    def field(self) -> CQLField:
        return self._field

    def _finish(self, operator: Operator, value: str) -> Clause:
        if self._finished:
            raise InvalidArgumentError(
                f"Clause for field '{self._field}' is already finished, "
                "start a new one from `where`"
            )
        self._finished = True
        clause = Clause(
            f"{self._field} {operator} {value}", frozenset({self._field})
        )
        logger.debug(f"Built clause: {clause}")
        return clause

    def __str__(self) -> str:
        raise TypeError(
            f"Clause for field '{self._field}' is unfinished, "
            "call a comparison method before rendering it"
        )

    def __repr__(self) -> str:
        state = "finished" if self._finished else "unfinished"
        return f"<{type(self).__name__} field={self._field.value} {state}>"


class DatetimeClause(ClauseBuilder):
    """Comparisons for date fields such as ``created`` and ``lastmodified``."""

    def on(self, value: Temporal) -> Clause:
        return self._finish(Operator.EQUALS, format_temporal(value))

    def not_on(self, value: Temporal) -> Clause:
        return self._finish(Operator.NOT_EQUALS, format_temporal(value))

    def after(self, value: Temporal) -> Clause:
        return self._finish(Operator.GREATER_THAN, format_temporal(value))

    def after_or_on(self, value: Temporal) -> Clause:
        return self._finish(Operator.GREATER_THAN_EQUALS, format_temporal(value))

    def before(self, value: Temporal) -> Clause:
        return self._finish(Operator.LESS_THAN, format_temporal(value))

    def before_or_on(self, value: Temporal) -> Clause:
        return self._finish(Operator.LESS_THAN_EQUALS, format_temporal(value))

    def after_now(self, offset: str) -> Clause:
        """Match values after ``now(offset)``, e.g. ``after_now("-4w")``."""
        return self.after(DateFunction.now(offset))

    def before_now(self, offset: str) -> Clause:
        """Match values before ``now(offset)``."""
        return self.before(DateFunction.now(offset))


def _user_identifier(user: str | ConfluenceUser) -> str:
    if isinstance(user, ConfluenceUser):
        identifier = user.account_id or user.username or user.user_key
        if not identifier:
            raise InvalidArgumentError(
                f"User '{user.display_name}' has no account id, username or key"
            )
        return quote_string(identifier)
    return quote_string(user)


class UserClause(ClauseBuilder):
    """Identity comparisons for creator, contributor, mention, watcher and favourite."""

    def is_user(self, user: str | ConfluenceUser) -> Clause:
        return self._finish(Operator.EQUALS, _user_identifier(user))

    def is_not_user(self, user: str | ConfluenceUser) -> Clause:
        return self._finish(Operator.NOT_EQUALS, _user_identifier(user))

    def is_current_user(self) -> Clause:
        return self._finish(Operator.EQUALS, format_keyword(CURRENT_USER))

    def is_not_current_user(self) -> Clause:
        return self._finish(Operator.NOT_EQUALS, format_keyword(CURRENT_USER))


class TextClause(ClauseBuilder):
    """Free text search, tokenized by Confluence rather than compared exactly."""

    def contains(self, text: str) -> Clause:
        return self._finish(Operator.CONTAINS, quote_string(text))

    def does_not_contain(self, text: str) -> Clause:
        return self._finish(Operator.DOES_NOT_CONTAIN, quote_string(text))


class TitleClause(TextClause):
    def is_(self, title: str) -> Clause:
        return self._finish(Operator.EQUALS, quote_string(title))

    def is_not(self, title: str) -> Clause:
        return self._finish(Operator.NOT_EQUALS, quote_string(title))


def _space_key(space: str | ConfluenceSpace) -> str:
    if isinstance(space, ConfluenceSpace):
        return quote_string(space.key)
    return quote_string(space)


class SpaceClause(ClauseBuilder):
    def __init__(self) -> None:
        super().__init__(CQLField.SPACE)

    def is_(self, space: str | ConfluenceSpace) -> Clause:
        return self._finish(Operator.EQUALS, _space_key(space))

    def is_not(self, space: str | ConfluenceSpace) -> Clause:
        return self._finish(Operator.NOT_EQUALS, _space_key(space))

    def is_current_space(self) -> Clause:
        return self._finish(Operator.EQUALS, format_keyword(CURRENT_SPACE))

    def in_(self, spaces: Iterable[str | ConfluenceSpace]) -> Clause:
        return self._finish(Operator.IN, format_collection(spaces, _space_key))


def _content_type(value: ContentType | str) -> str:
    try:
        return format_keyword(ContentType(value))
    except ValueError as e:
        raise InvalidArgumentError(f"Unknown content type {value!r}") from e


class TypeClause(ClauseBuilder):
    def __init__(self) -> None:
        super().__init__(CQLField.TYPE)

    def is_(self, content_type: ContentType) -> Clause:
        return self._finish(Operator.EQUALS, _content_type(content_type))

    def is_not(self, content_type: ContentType) -> Clause:
        return self._finish(Operator.NOT_EQUALS, _content_type(content_type))

    def in_(self, content_types: Iterable[ContentType]) -> Clause:
        return self._finish(
            Operator.IN, format_collection(content_types, _content_type)
        )


class ContentClause(ClauseBuilder):
    """Numeric identifier comparisons for id, ancestor, content and parent."""

    def is_(self, content_id: int) -> Clause:
        return self._finish(Operator.EQUALS, format_id(content_id))

    def is_not(self, content_id: int) -> Clause:
        return self._finish(Operator.NOT_EQUALS, format_id(content_id))

    def in_(self, content_ids: Iterable[int]) -> Clause:
        return self._finish(Operator.IN, format_collection(content_ids, format_id))


class SimpleValueClause(ClauseBuilder):
    """String value comparisons for label, container and macro."""

    def is_(self, value: str) -> Clause:
        return self._finish(Operator.EQUALS, quote_string(value))

    def is_not(self, value: str) -> Clause:
        return self._finish(Operator.NOT_EQUALS, quote_string(value))

    def in_(self, values: Iterable[str]) -> Clause:
        return self._finish(Operator.IN, format_collection(values, quote_string))

    def not_in(self, values: Iterable[str]) -> Clause:
        return self._finish(Operator.NOT_IN, format_collection(values, quote_string))
