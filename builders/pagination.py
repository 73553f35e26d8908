"""
=====================================
Oracle Pagination Clause Utilities.
=====================================

Renders the row-limiting clause appended to SELECT statements. The textual
form is fixed to the Oracle 12c OFFSET/FETCH syntax:

    (limit, offset)   -> clause
    (None, None)      -> ""
    (L, None)         -> "FETCH FIRST L ROWS ONLY"
    (None, O)         -> "OFFSET O ROWS"
    (L, O)            -> "OFFSET O ROWS FETCH NEXT L ROWS ONLY"

Bounds are rendered as literals, never as bind placeholders, so pagination
contributes no parameters to a query.

Usage:
    from builders.pagination import page_bounds, render_pagination

    bounds = page_bounds(page=3, page_size=25)
    render_pagination(bounds['limit'], bounds['offset'])
    # 'OFFSET 50 ROWS FETCH NEXT 25 ROWS ONLY'
"""

import logging
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class PaginationError(ValueError):
    """Exception raised for invalid pagination bounds."""
    pass


def render_pagination(limit: Optional[int], offset: Optional[int]) -> str:
    """
    Build the Oracle pagination clause for the given bounds.

    Args:
        limit: Maximum number of rows, or None
        offset: Number of rows to skip, or None

    Returns:
        Pagination clause without leading space, empty when both are None
    """
    if offset is not None and limit is not None:
        return f"OFFSET {offset} ROWS FETCH NEXT {limit} ROWS ONLY"
    if limit is not None:
        return f"FETCH FIRST {limit} ROWS ONLY"
    if offset is not None:
        return f"OFFSET {offset} ROWS"
    return ""


def validate_bound(name: str, value: Optional[int]) -> Optional[int]:
    """
    Reject negative pagination bounds.

    Args:
        name: Bound name used in the error message ('limit' or 'offset')
        value: Bound value; None is always accepted

    Returns:
        The value unchanged

    Raises:
        PaginationError: If value is negative
    """
    if value is not None and value < 0:
        logger.error(f"Invalid {name}: {value}")
        raise PaginationError(f"{name} must be a non-negative integer, got {value}")
    return value


def page_bounds(page: int, page_size: int) -> Dict[str, int]:
    """
    Calculate limit and offset for 1-based page numbering.

    Args:
        page: Page number (1-based)
        page_size: Number of records per page

    Returns:
        Dictionary with limit and offset values

    Raises:
        PaginationError: If page or page_size is below 1
    """
    if page < 1:
        raise PaginationError(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise PaginationError(f"page_size must be >= 1, got {page_size}")

    return {
        'limit': page_size,
        'offset': (page - 1) * page_size
    }
