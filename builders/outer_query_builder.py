"""
=================================
Derived-Table Wrapping Builder.
=================================

OuterQueryBuilder wraps a QueryBuilder as a derived table aliased
``inner_table`` and selects from it:

    SELECT <outer columns|*> FROM (<inner query>) inner_table
    [ORDER BY <expr>] [<pagination>]

The outer ORDER BY and pagination are independent of the inner query's own.
The inner builder is only read, never modified, so one QueryBuilder can be
wrapped by several outer builders.

Parameters:
    Pagination bounds are rendered as literals, so the outer layer has no
    bind values of its own. get_parameters() returns the inner builder's
    parameters directly; it does not depend on build() having been called
    and stays stable across repeated build() calls.

Usage:
    from builders.outer_query_builder import OuterQueryBuilder

    outer = (
        OuterQueryBuilder(inner)
        .select_from_inner("id", "RollNo")
        .select_static("'X'", "Label")
        .order_by("RollNo ASC")
        .limit(100)
    )
    sql = outer.build()
    params = outer.get_parameters()
"""

import logging
from typing import Any, List, Optional

from builders.base import SelectBuilderBase, aliased
from builders.query_builder import QueryBuilder

logger = logging.getLogger(__name__)

INNER_TABLE_ALIAS = "inner_table"


class OuterQueryBuilder(SelectBuilderBase):
    """
    Selects from another builder's query used as a derived table.

    Attributes:
        inner: Wrapped QueryBuilder (read only)
        alias_name: Derived-table alias, always ``inner_table``

    Example:
        >>> inner = QueryBuilder("T t").select_column("t.id", "id")
        >>> OuterQueryBuilder(inner).select_from_inner("id", "RollNo").build()
        'SELECT inner_table.id AS RollNo FROM (SELECT t.id AS id FROM T t) inner_table'
    """

    alias_name = INNER_TABLE_ALIAS

    def __init__(self, inner: QueryBuilder, strict: Optional[bool] = None):
        super().__init__(strict=strict)
        self.inner = inner
        self._outer_columns: List[str] = []

    @property
    def columns(self):
        return tuple(self._outer_columns)

    def select_from_inner(self, column_or_expression: str, alias: Optional[str] = None) -> 'OuterQueryBuilder':
        """Append ``inner_table.<column_or_expression> [AS alias]``."""
        self._outer_columns.append(aliased(f"{self.alias_name}.{column_or_expression}", alias))
        return self

    def select_static(self, expression: str, alias: Optional[str] = None) -> 'OuterQueryBuilder':
        """
        Append an unqualified expression such as a constant or a computed
        column that references ``inner_table`` explicitly.
        """
        self._outer_columns.append(aliased(expression, alias))
        return self

    def get_parameters(self) -> List[Any]:
        """Bind values of the wrapped query, in placeholder order."""
        return self.inner.get_parameters()

    def build(self) -> str:
        """Render the outer SELECT around the inner query."""
        columns = ", ".join(self._outer_columns) if self._outer_columns else "*"
        parts = [f"SELECT {columns}", f"FROM ({self.inner.build()}) {self.alias_name}"]
        parts.extend(self._render_tail())

        sql = " ".join(parts)
        logger.debug(f"Built outer query: {sql}")
        return sql
