"""
Typed builder for Confluence Query Language (CQL) strings.

Start from :data:`where`, pick a field, call exactly one comparison and
combine the resulting clauses with :func:`and_` / :func:`or_` (or ``&`` / ``|``).
"""

from .clauses import (
    ClauseBuilder,
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
from .fields import ContentType, CQLField, Operator
from .values import CURRENT_SPACE, CURRENT_USER, DateFunction, Keyword
from .where import Where, where

__all__ = [
    "where",
    "Where",
    "Clause",
    "and_",
    "or_",
    "CQLField",
    "Operator",
    "ContentType",
    "DateFunction",
    "Keyword",
    "CURRENT_USER",
    "CURRENT_SPACE",
    "ClauseBuilder",
    "DatetimeClause",
    "UserClause",
    "TextClause",
    "TitleClause",
    "SpaceClause",
    "TypeClause",
    "ContentClause",
    "SimpleValueClause",
]
