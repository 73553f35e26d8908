"""
============================
Fluent SELECT Query Builder.
============================

This module provides QueryBuilder, a mutable accumulator for one logical
SELECT statement with positional ``?`` bind parameters, Oracle OFFSET/FETCH
pagination and UNION / UNION ALL combination.

Every configuration call mutates the builder and returns it, so calls can be
chained. Nothing is rendered until build() (or to_query()) is called.

Conditions come in two styles:
- where(): flat conditions, AND-joined under one WHERE keyword
- and_where() / or_where_group(): parenthesized condition groups, AND-joined
  under a second WHERE keyword

By default both WHERE keywords are emitted when both styles are used, which
reproduces the output existing consumers were built against. Set
``merge_where_groups=True`` (or QUERY_BUILDER_MERGE_WHERE=true) to render a
single WHERE with all conditions AND-joined.

Union mode:
    The first union()/union_all() call freezes a simple render of the
    builder (columns, FROM, joins, flat WHERE, ORDER BY) together with the
    parameters of its flat conditions. Each call then freezes the other
    builder the same way.
    Condition groups and pagination never appear inside a union member, and
    calls made on the builder after it entered union mode do not change
    build() output.

Raw fragments:
    Conditions, joins, expressions and CASE result literals are inserted
    verbatim. Nothing is escaped; use escape_literal() for values that may
    contain single quotes.

Usage:
    from builders.query_builder import QueryBuilder

    query = (
        QueryBuilder("EMPLOYEE e")
        .select_column("e.id", "EmployeeId")
        .where("e.status = ?", "A")
        .order_by("e.name")
        .limit(10)
    )
    sql = query.build()
    # SELECT e.id AS EmployeeId FROM EMPLOYEE e WHERE e.status = ? ORDER BY e.name FETCH FIRST 10 ROWS ONLY
    params = query.get_parameters()
    # ['A']
"""

import logging
from typing import Any, List, Optional, Tuple

from builders.base import SelectBuilderBase, aliased
from core.config import config
from models.query_models import UnionMember, UnionMode

logger = logging.getLogger(__name__)


class QueryBuilderError(Exception):
    """Exception raised for builder calls rejected in strict mode."""
    pass


def escape_literal(value: Any) -> str:
    """
    Quote a value as an SQL string literal.

    Single quotes inside the value are doubled. Use this for values passed
    to select_case()/select_nested_case(), which insert literals verbatim.

    Args:
        value: Value to quote (converted with str())

    Returns:
        Quoted SQL literal, e.g. ``'O''Brien'``
    """
    text = str(value).replace("'", "''")
    return f"'{text}'"


def _is_blank(condition: Optional[str]) -> bool:
    return condition is None or not condition.strip()


class QueryBuilder(SelectBuilderBase):
    """
    Accumulates the clauses and bind values of one SELECT statement.

    Attributes:
        source: FROM target (table plus optional alias), fixed at construction
        merge_where_groups: Emit one WHERE for flat and grouped conditions
        strict: Reject negative bounds and empty CASE expressions

    Example:
        >>> q = QueryBuilder("T t").select_column("t.id", "id").where("t.x = ?", 5)
        >>> q.build()
        'SELECT t.id AS id FROM T t WHERE t.x = ?'
        >>> q.get_parameters()
        [5]
    """

    def __init__(
        self,
        source: str,
        merge_where_groups: Optional[bool] = None,
        strict: Optional[bool] = None
    ):
        """
        Initialize an empty query against ``source``.

        Args:
            source: FROM-clause target, inserted verbatim
            merge_where_groups: Override of config.merge_where_groups
            strict: Override of config.strict_mode
        """
        super().__init__(strict=strict)
        self._source = source
        self.merge_where_groups = (
            config.merge_where_groups if merge_where_groups is None else merge_where_groups
        )

        self._columns: List[str] = []
        self._joins: List[str] = []
        self._where_flat: List[str] = []
        self._where_groups: List[str] = []
        self._where_params: List[Any] = []
        self._group_params: List[Any] = []

        self._union_members: List[UnionMember] = []
        self._union_mode = UnionMode.NONE

    @property
    def source(self) -> str:
        return self._source

    @property
    def columns(self) -> Tuple[str, ...]:
        return tuple(self._columns)

    @property
    def union_mode(self) -> UnionMode:
        return self._union_mode

    @property
    def union_members(self) -> Tuple[UnionMember, ...]:
        return tuple(self._union_members)

    @property
    def in_union_mode(self) -> bool:
        """True once union() or union_all() has been called."""
        return bool(self._union_members)

    # ------------------------------------------------------------------
    # Select list
    # ------------------------------------------------------------------

    def select_column(self, expression: str, alias: Optional[str] = None) -> 'QueryBuilder':
        """Append ``expression`` (or ``expression AS alias``) to the select list."""
        self._columns.append(aliased(expression, alias))
        return self

    select = select_column

    def select_case(self, alias: Optional[str], *conditions_and_results: str) -> 'QueryBuilder':
        """
        Append a searched CASE expression built from condition/result pairs.

        Arguments alternate condition, result, condition, result... An odd
        number of arguments makes the last one the ELSE result. Results are
        wrapped in single quotes without escaping.

        Args:
            alias: Column alias (None renders the bare expression)
            *conditions_and_results: Interleaved conditions and result literals

        Returns:
            self

        Raises:
            QueryBuilderError: In strict mode, when no pairs and no ELSE are given

        Example:
            >>> QueryBuilder("T").select_case("Status", "x = 1", "One", "Other").build()
            "SELECT CASE WHEN x = 1 THEN 'One' ELSE 'Other' END AS Status FROM T"
        """
        if self.strict and not conditions_and_results:
            logger.error(f"Empty CASE expression for alias {alias!r}")
            raise QueryBuilderError(f"select_case({alias!r}) needs at least one condition/result pair")

        parts = ["CASE"]
        for index in range(0, len(conditions_and_results) - 1, 2):
            condition = conditions_and_results[index]
            result = conditions_and_results[index + 1]
            parts.append(f"WHEN {condition} THEN '{result}'")

        if len(conditions_and_results) % 2 == 1:
            parts.append(f"ELSE '{conditions_and_results[-1]}'")
        parts.append("END")

        self._columns.append(aliased(" ".join(parts), alias))
        return self

    def select_nested_case(
        self,
        alias: Optional[str],
        outer_condition: str,
        inner_condition: str,
        inner_result: str,
        else_result: str
    ) -> 'QueryBuilder':
        """
        Append a two-level CASE expression.

        ``else_result`` is used for both the inner and the outer ELSE branch.

        Args:
            alias: Column alias (None renders the bare expression)
            outer_condition: Condition guarding the inner CASE
            inner_condition: Condition of the inner CASE
            inner_result: Literal returned when both conditions hold
            else_result: Literal returned otherwise
        """
        expression = (
            f"CASE WHEN {outer_condition} "
            f"THEN (CASE WHEN {inner_condition} THEN '{inner_result}' ELSE '{else_result}' END) "
            f"ELSE '{else_result}' END"
        )
        self._columns.append(aliased(expression, alias))
        return self

    # ------------------------------------------------------------------
    # FROM / JOIN / WHERE
    # ------------------------------------------------------------------

    def join(self, join_clause: str) -> 'QueryBuilder':
        """Append a raw join fragment such as ``JOIN DEPT d ON d.id = e.dept_id``."""
        self._joins.append(join_clause)
        return self

    def where(self, condition: Optional[str], *params: Any) -> 'QueryBuilder':
        """
        Add a flat condition and its bind values.

        Blank or None conditions are ignored together with their params, so
        parameters always follow a rendered placeholder.

        Args:
            condition: Raw condition, e.g. ``e.status = ?``
            *params: Bind values for the condition's placeholders, in order
        """
        if _is_blank(condition):
            if params:
                logger.debug(f"Skipping blank WHERE condition and {len(params)} parameter(s)")
            return self

        self._where_flat.append(condition)
        self._where_params.extend(params)
        return self

    def and_where(self, condition: Optional[str], *params: Any) -> 'QueryBuilder':
        """
        Add a parenthesized condition group and its bind values.

        Same blank-condition rule as where().
        """
        if _is_blank(condition):
            if params:
                logger.debug(f"Skipping blank condition group and {len(params)} parameter(s)")
            return self

        self._where_groups.append(f"({condition})")
        self._group_params.extend(params)
        return self

    def or_where_group(self, *conditions: Optional[str]) -> 'QueryBuilder':
        """
        Add one parenthesized group of OR-joined conditions.

        Blank entries are dropped; if none remain nothing is added. Grouped
        conditions take no bind values.
        """
        group = [condition for condition in conditions if not _is_blank(condition)]
        if group:
            self._where_groups.append("(" + " OR ".join(group) + ")")
        return self

    # ------------------------------------------------------------------
    # UNION
    # ------------------------------------------------------------------

    def union(self, other: 'QueryBuilder') -> 'QueryBuilder':
        """Combine with ``other`` using UNION (duplicates removed)."""
        return self._add_union_member(other, UnionMode.UNION)

    def union_all(self, other: 'QueryBuilder') -> 'QueryBuilder':
        """Combine with ``other`` using UNION ALL (duplicates kept)."""
        return self._add_union_member(other, UnionMode.UNION_ALL)

    def _add_union_member(self, other: 'QueryBuilder', mode: UnionMode) -> 'QueryBuilder':
        member = other._snapshot()
        if not self._union_members:
            self._union_members.append(self._snapshot())
            logger.debug(f"Entering union mode on {self._source}")

        self._union_members.append(member)
        self._union_mode = mode
        logger.debug(f"Added {mode.name} member #{len(self._union_members)}: {member.sql}")
        return self

    def _snapshot(self) -> UnionMember:
        # Only flat conditions reach the simple render, so only their params
        return UnionMember(self.render_simple(), tuple(self._where_params))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def get_parameters(self) -> List[Any]:
        """
        Bind values in placeholder order.

        Returns:
            Concatenated member parameters in union mode, otherwise where()
            parameters followed by and_where() parameters, matching the
            order their conditions are rendered in
        """
        if self._union_members:
            return [param for member in self._union_members for param in member.parameters]
        return self._where_params + self._group_params

    def render_simple(self) -> str:
        """
        Render columns, FROM, joins, flat WHERE and ORDER BY.

        Condition groups and pagination are left out. This is the form a
        builder takes when it becomes a union member.
        """
        parts = self._render_head()
        if self._where_flat:
            parts.append("WHERE " + " AND ".join(self._where_flat))
        if self._order_by is not None:
            parts.append(f"ORDER BY {self._order_by}")
        return " ".join(parts)

    def build(self) -> str:
        """
        Render the complete statement.

        Returns:
            Union members joined by UNION / UNION ALL when in union mode,
            otherwise the full SELECT with conditions, ORDER BY and pagination
        """
        if self._union_members:
            sql = self._union_mode.separator.join(member.sql for member in self._union_members)
            logger.debug(f"Built {self._union_mode.name} of {len(self._union_members)} members")
            return sql

        parts = self._render_head()
        parts.extend(self._render_where())
        parts.extend(self._render_tail())

        sql = " ".join(parts)
        logger.debug(f"Built query: {sql}")
        return sql

    def _render_head(self) -> List[str]:
        columns = ", ".join(self._columns) if self._columns else "*"
        return [f"SELECT {columns}", f"FROM {self._source}", *self._joins]

    def _render_where(self) -> List[str]:
        if self.merge_where_groups:
            conditions = self._where_flat + self._where_groups
            return ["WHERE " + " AND ".join(conditions)] if conditions else []

        clauses = []
        if self._where_flat:
            clauses.append("WHERE " + " AND ".join(self._where_flat))
        if self._where_groups:
            # Second WHERE keyword kept for output compatibility
            clauses.append("WHERE " + " AND ".join(self._where_groups))
        return clauses
