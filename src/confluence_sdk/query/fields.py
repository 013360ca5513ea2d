"""Searchable CQL fields."""

from enum import Enum


class CQLField(str, Enum):
    """Closed set of CQL field tokens supported by the query builder."""

    CREATED = "created"
    LAST_MODIFIED = "lastmodified"
    SPACE = "space"
    TYPE = "type"
    TITLE = "title"
    CREATOR = "creator"
    CONTRIBUTOR = "contributor"
    MENTION = "mention"
    WATCHER = "watcher"
    FAVOURITE = "favourite"
    TEXT = "text"
    ID = "id"
    ANCESTOR = "ancestor"
    CONTENT = "content"
    PARENT = "parent"
    LABEL = "label"
    CONTAINER = "container"
    MACRO = "macro"

    def __str__(self) -> str:
        return self.value


class Operator(str, Enum):
    """Comparison operators used in CQL clauses."""

    EQUALS = "="
    NOT_EQUALS = "!="
    CONTAINS = "~"
    DOES_NOT_CONTAIN = "!~"
    IN = "in"
    NOT_IN = "not in"
    GREATER_THAN = ">"
    GREATER_THAN_EQUALS = ">="
    LESS_THAN = "<"
    LESS_THAN_EQUALS = "<="

    def __str__(self) -> str:
        return self.value


class ContentType(str, Enum):
    """Content types accepted by the ``type`` field."""

    PAGE = "page"
    BLOGPOST = "blogpost"
    COMMENT = "comment"
    ATTACHMENT = "attachment"

    def __str__(self) -> str:
        return self.value
