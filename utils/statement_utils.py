"""
==================================================
Statement binding utilities for rendered queries.
==================================================

Bridges the builders' output (SQL with positional ``?`` placeholders plus an
ordered parameter list) to SQLAlchemy, whose ``text()`` constructs use named
``:name`` binds.

Placeholders are located with a small scanner that skips single-quoted
string literals and double-quoted identifiers, so a ``?`` inside ``'Why?'``
is not treated as a bind marker. Nothing here executes SQL.

Key Features:
    - Placeholder counting for parameter/placeholder consistency checks
    - Positional to named placeholder rewriting
    - TextClause construction with bound parameter values

Example:
    >>> from builders.query_builder import QueryBuilder
    >>> from utils.statement_utils import to_text_clause
    >>>
    >>> query = QueryBuilder("T t").where("t.x = ?", 5)
    >>> clause = to_text_clause(query)
    >>> str(clause)
    'SELECT * FROM T t WHERE t.x = :p1'
    >>> with engine.connect() as conn:
    ...     rows = conn.execute(clause).fetchall()
"""

import logging
from typing import Any, Iterator, List, Optional, Sequence, Union

from sqlalchemy import text
from sqlalchemy.sql.elements import TextClause

from models.query_models import RenderedQuery

logger = logging.getLogger(__name__)

PLACEHOLDER = '?'


class StatementBindingError(Exception):
    """Exception raised when placeholders and parameters do not line up."""
    pass


def _placeholder_positions(sql: str) -> Iterator[int]:
    """Yield the index of every ``?`` outside quoted text."""
    quote: Optional[str] = None
    for index, char in enumerate(sql):
        if quote:
            if char == quote:
                quote = None
        elif char in ("'", '"'):
            quote = char
        elif char == PLACEHOLDER:
            yield index


def count_placeholders(sql: str) -> int:
    """
    Count positional placeholders in rendered SQL.

    Args:
        sql: Statement text

    Returns:
        Number of ``?`` markers outside quoted literals and identifiers
    """
    return sum(1 for _ in _placeholder_positions(sql))


def to_named_placeholders(sql: str, prefix: str = 'p', escape_colons: bool = False) -> str:
    """
    Rewrite positional ``?`` markers to ``:p1``, ``:p2``, ...

    Args:
        sql: Statement text with positional placeholders
        prefix: Bind name prefix
        escape_colons: Write colons already in the text as ``\\:`` so that
            ``sqlalchemy.text()`` does not read them as bind names

    Returns:
        Statement text with numbered named placeholders
    """
    def literal(fragment: str) -> str:
        return fragment.replace(':', '\\:') if escape_colons else fragment

    pieces = []
    last = 0
    for number, position in enumerate(_placeholder_positions(sql), start=1):
        pieces.append(literal(sql[last:position]))
        pieces.append(f":{prefix}{number}")
        last = position + 1
    pieces.append(literal(sql[last:]))
    return ''.join(pieces)


def to_text_clause(
    query: Union[str, RenderedQuery, Any],
    parameters: Optional[Sequence[Any]] = None,
    prefix: str = 'p'
) -> TextClause:
    """
    Build a SQLAlchemy TextClause with the query's values bound by position.

    Args:
        query: SQL string, RenderedQuery, or any builder exposing to_query()
        parameters: Bind values when ``query`` is a plain string
        prefix: Bind name prefix for the generated named placeholders

    Returns:
        TextClause ready for ``Connection.execute``

    Raises:
        StatementBindingError: If the placeholder count differs from the
            number of parameters
    """
    if hasattr(query, 'to_query'):
        query = query.to_query()

    if isinstance(query, RenderedQuery):
        sql = query.sql
        values: List[Any] = list(query.parameters)
    else:
        sql = query
        values = list(parameters or [])

    expected = count_placeholders(sql)
    if expected != len(values):
        logger.error(f"Placeholder mismatch: {expected} placeholder(s), {len(values)} parameter(s)")
        raise StatementBindingError(
            f"Statement has {expected} placeholder(s) but {len(values)} parameter(s) were supplied"
        )

    clause = text(to_named_placeholders(sql, prefix=prefix, escape_colons=True))
    if values:
        clause = clause.bindparams(**{
            f"{prefix}{number}": value for number, value in enumerate(values, start=1)
        })

    logger.debug(f"Bound {len(values)} parameter(s) to text clause")
    return clause
