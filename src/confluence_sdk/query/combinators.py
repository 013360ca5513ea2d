"""Finished CQL clauses and the boolean combinators over them."""

import logging
from dataclasses import dataclass, field

from ..exceptions import InvalidArgumentError
from .fields import CQLField

logger = logging.getLogger("confluence-sdk.query")


@dataclass(frozen=True, eq=False)
class Clause:
    """A finished CQL clause.

    Instances are opaque: they can only be rendered with ``str()`` or combined
    with other finished clauses via :func:`and_`, :func:`or_`, ``&`` and ``|``.
    """

    text: str
    # fields compared anywhere inside this clause
    fields: frozenset[CQLField] = field(default_factory=frozenset)

    def constrains(self, cql_field: CQLField) -> bool:
        return cql_field in self.fields

    def __str__(self) -> str:
        return self.text

    def __and__(self, other: "Clause") -> "Clause":
        return and_(self, other)

    def __or__(self, other: "Clause") -> "Clause":
        return or_(self, other)


def _combine(operator: str, clauses: tuple[Clause, ...]) -> Clause:
    if len(clauses) < 2:
        raise InvalidArgumentError(
            f"'{operator}' needs at least two clauses, got {len(clauses)}"
        )
    for clause in clauses:
        if not isinstance(clause, Clause):
            raise TypeError(
                f"Only finished clauses can be combined, got {type(clause).__name__}"
            )
    combined = Clause(
        "(" + f" {operator} ".join(c.text for c in clauses) + ")",
        frozenset().union(*(c.fields for c in clauses)),
    )
    logger.debug(f"Combined {len(clauses)} clauses with '{operator}'")
    return combined


def and_(*clauses: Clause) -> Clause:
    """Combine two or more finished clauses with ``and``.

    Raises:
        InvalidArgumentError: If fewer than two clauses are given
    """
    return _combine("and", clauses)


def or_(*clauses: Clause) -> Clause:
    """Combine two or more finished clauses with ``or``.

    Raises:
        InvalidArgumentError: If fewer than two clauses are given
    """
    return _combine("or", clauses)
