"""
===========================================================
Value Types for Query Assembly
===========================================================

Immutable value objects shared by the query builders.

Models:
    UnionMode: How union members are combined (none, UNION, UNION ALL)
    UnionMember: Frozen (sql, parameters) snapshot of one union member
    RenderedQuery: Final statement text paired with its ordered bind values

Architecture:
    - Separated from builders/ so builders and utils/ can share them
      without importing each other
    - Snapshots are taken at union time and never re-derived from
      live builder state

Example:
    >>> from models.query_models import RenderedQuery
    >>>
    >>> rendered = RenderedQuery("SELECT * FROM T t WHERE t.x = ?", (5,))
    >>> cursor.execute(*rendered.as_tuple())
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Tuple


class UnionMode(Enum):
    """Combination mode of a builder in union mode.

    The value of each member is the separator placed between member
    statements when the union is rendered.
    """

    NONE = ""
    UNION = " UNION "
    UNION_ALL = " UNION ALL "

    @property
    def separator(self) -> str:
        return self.value


@dataclass(frozen=True)
class UnionMember:
    """Render-and-freeze snapshot of one SELECT taking part in a union.

    Attributes:
        sql: Simple render of the member at the moment it joined the union
        parameters: Bind values of the member, in placeholder order
    """

    sql: str
    parameters: Tuple[Any, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class RenderedQuery:
    """Statement text and its positional bind values.

    Attributes:
        sql: Rendered SQL using positional ``?`` placeholders
        parameters: Bind values in left-to-right placeholder order
    """

    sql: str
    parameters: Tuple[Any, ...] = field(default_factory=tuple)

    def as_tuple(self) -> Tuple[str, List[Any]]:
        """Return ``(sql, parameters)`` ready for a DB-API ``execute`` call."""
        return self.sql, list(self.parameters)
