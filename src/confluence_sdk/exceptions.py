"""Exceptions raised by the Confluence SDK."""


class ConfluenceSdkError(Exception):
    """Base class for all errors raised by this package."""


class InvalidArgumentError(ConfluenceSdkError, ValueError):
    """Raised when a caller passes a value that cannot be used.

    Covers empty literals, too few combinator operands, empty ``in`` sets,
    reusing a finished clause builder and missing paging links.
    """


class MalformedLiteralError(ConfluenceSdkError, AssertionError):
    """Raised when a value formatter produced an unusable literal.

    Inputs are validated before formatting, so this indicates a bug.
    """


class ConfluenceAuthenticationError(ConfluenceSdkError):
    """Raised when Confluence rejects the configured credentials (401/403)."""
