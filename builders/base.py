"""
=================================
Shared SELECT builder behaviour.
=================================

Ordering and pagination handling common to the inner and outer builders.
Both builders accept the same ORDER BY / limit / offset calls and render
them identically at the end of their statement.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from builders.pagination import page_bounds, render_pagination, validate_bound
from core.config import config
from models.query_models import RenderedQuery

logger = logging.getLogger(__name__)


def aliased(expression: str, alias: Optional[str] = None) -> str:
    """
    Render a select-list entry with an optional alias.

    Args:
        expression: Column or SQL expression
        alias: Column alias; None or empty renders the bare expression

    Returns:
        ``expression`` or ``expression AS alias``
    """
    if alias:
        return f"{expression} AS {alias}"
    return expression


class SelectBuilderBase(ABC):
    """
    Ordering and Oracle pagination state for a SELECT builder.

    Attributes:
        strict: Reject negative limit/offset values with PaginationError
    """

    def __init__(self, strict: Optional[bool] = None):
        self.strict = config.strict_mode if strict is None else strict
        self._order_by: Optional[str] = None
        self._limit: Optional[int] = None
        self._offset: Optional[int] = None

    def order_by(self, expression: Optional[str]):
        """Set (or overwrite) the ORDER BY expression."""
        self._order_by = expression
        return self

    def limit(self, limit: Optional[int]):
        """Set (or clear with None) the maximum number of rows."""
        self._limit = self._checked('limit', limit)
        return self

    def offset(self, offset: Optional[int]):
        """Set (or clear with None) the number of rows to skip."""
        self._offset = self._checked('offset', offset)
        return self

    def limit_based_on_condition(self, condition: bool, limit_if_true: int, limit_if_false: int):
        """
        Pick the row limit from a flag. The offset is left untouched.

        Args:
            condition: Selects which limit applies
            limit_if_true: Limit used when condition is truthy
            limit_if_false: Limit used otherwise
        """
        return self.limit(limit_if_true if condition else limit_if_false)

    def paginate(self, page: int, page_size: int):
        """
        Set limit and offset for a 1-based page.

        Raises:
            PaginationError: If page or page_size is below 1
        """
        bounds = page_bounds(page, page_size)
        logger.debug(f"Page {page} of size {page_size} -> {bounds}")
        self._limit = bounds['limit']
        self._offset = bounds['offset']
        return self

    @property
    def pagination(self) -> Dict[str, Optional[int]]:
        """Current bounds as ``{'limit': ..., 'offset': ...}``."""
        return {'limit': self._limit, 'offset': self._offset}

    def _checked(self, name: str, value: Optional[int]) -> Optional[int]:
        if self.strict:
            return validate_bound(name, value)
        return value

    def _render_tail(self) -> List[str]:
        """ORDER BY and pagination fragments, in render order."""
        parts = []
        if self._order_by is not None:
            parts.append(f"ORDER BY {self._order_by}")

        pagination = render_pagination(self._limit, self._offset)
        if pagination:
            parts.append(pagination)
        return parts

    @abstractmethod
    def get_parameters(self) -> List[Any]:
        """Bind values in placeholder order."""

    @abstractmethod
    def build(self) -> str:
        """Render the statement text."""

    def to_query(self) -> RenderedQuery:
        """
        Snapshot the statement text and its bind values together.

        Returns:
            RenderedQuery pairing ``build()`` with ``get_parameters()``
        """
        return RenderedQuery(self.build(), tuple(self.get_parameters()))
