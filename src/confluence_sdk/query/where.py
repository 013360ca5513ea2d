"""Entry point of the CQL builder.

Example:
    >>> from confluence_sdk.query import where
    >>> str(where.and_(where.space.is_("DEV"), where.label.in_(["draft", "review"])))
    '(space = "DEV" and label in ("draft", "review"))'
"""

from .clauses import (
    ContentClause,
    DatetimeClause,
    SimpleValueClause,
    SpaceClause,
    TextClause,
    TitleClause,
    TypeClause,
    UserClause,
)
from .combinators import Clause, and_, or_
from .fields import CQLField


class Where:
    """Factory for CQL clauses.

    Every property returns a fresh builder, narrowed to the comparisons its
    field supports.
    """

    @property
    def created(self) -> DatetimeClause:
        return DatetimeClause(CQLField.CREATED)

    @property
    def last_modified(self) -> DatetimeClause:
        return DatetimeClause(CQLField.LAST_MODIFIED)

    @property
    def space(self) -> SpaceClause:
        return SpaceClause()

    @property
    def type(self) -> TypeClause:
        return TypeClause()

    @property
    def title(self) -> TitleClause:
        return TitleClause(CQLField.TITLE)

    @property
    def creator(self) -> UserClause:
        return UserClause(CQLField.CREATOR)

    @property
    def contributor(self) -> UserClause:
        return UserClause(CQLField.CONTRIBUTOR)

    @property
    def mention(self) -> UserClause:
        return UserClause(CQLField.MENTION)

    @property
    def watcher(self) -> UserClause:
        return UserClause(CQLField.WATCHER)

    @property
    def favourite(self) -> UserClause:
        return UserClause(CQLField.FAVOURITE)

    @property
    def text(self) -> TextClause:
        return TextClause(CQLField.TEXT)

    @property
    def id(self) -> ContentClause:
        return ContentClause(CQLField.ID)

    @property
    def ancestor(self) -> ContentClause:
        return ContentClause(CQLField.ANCESTOR)

    @property
    def content(self) -> ContentClause:
        return ContentClause(CQLField.CONTENT)

    @property
    def parent(self) -> ContentClause:
        return ContentClause(CQLField.PARENT)

    @property
    def label(self) -> SimpleValueClause:
        return SimpleValueClause(CQLField.LABEL)

    @property
    def container(self) -> SimpleValueClause:
        return SimpleValueClause(CQLField.CONTAINER)

    @property
    def macro(self) -> SimpleValueClause:
        return SimpleValueClause(CQLField.MACRO)

    @staticmethod
    def and_(*clauses: Clause) -> Clause:
        return and_(*clauses)

    @staticmethod
    def or_(*clauses: Clause) -> Clause:
        return or_(*clauses)


where = Where()
