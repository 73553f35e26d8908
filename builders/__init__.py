"""
====================================================
Fluent SQL SELECT builders with Oracle pagination.
====================================================

This package assembles parameterized SELECT statements from raw SQL
fragments. It renders text and tracks bind values; it never parses,
validates or executes SQL.

The package follows a clear organization:
    - pagination.py: OFFSET/FETCH clause rendering and page arithmetic
    - base.py: ORDER BY and pagination state shared by both builders
    - query_builder.py: QueryBuilder (columns, joins, conditions, UNION)
    - outer_query_builder.py: OuterQueryBuilder (derived-table wrapping)

Builders are mutable, single-owner objects. Instances are not safe to
share between threads while they are being configured.

Example:
    >>> from builders import OuterQueryBuilder, QueryBuilder
    >>>
    >>> inner = QueryBuilder("EMPLOYEE e").select_column("e.id", "id")
    >>> inner.where("e.status = ?", "inactive")
    >>> outer = OuterQueryBuilder(inner).select_from_inner("id", "RollNo").limit(100)
    >>> sql, params = outer.build(), outer.get_parameters()
"""

__version__ = "1.0.0"
__all__ = [
    'QueryBuilder', 'QueryBuilderError', 'escape_literal',
    'OuterQueryBuilder', 'INNER_TABLE_ALIAS',
    'PaginationError', 'page_bounds', 'render_pagination',
]

from .outer_query_builder import INNER_TABLE_ALIAS, OuterQueryBuilder
from .pagination import PaginationError, page_bounds, render_pagination
from .query_builder import QueryBuilder, QueryBuilderError, escape_literal
