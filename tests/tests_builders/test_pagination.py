"""
=====================================================
Pytest suite for builders/pagination.py
=====================================================

Sections:
---------
1. Unit tests - Clause rendering and page arithmetic
2. Edge case tests - Invalid pages and bounds

How to Execute:
---------------
All tests:          pytest tests/tests_builders/test_pagination.py -v
"""

import pytest

from builders.pagination import PaginationError, page_bounds, render_pagination, validate_bound

# ===============
# 1. UNIT TESTS
# ===============

@pytest.mark.unit
@pytest.mark.parametrize("limit, offset, expected", [
    (None, None, ""),
    (10, None, "FETCH FIRST 10 ROWS ONLY"),
    (None, 30, "OFFSET 30 ROWS"),
    (10, 30, "OFFSET 30 ROWS FETCH NEXT 10 ROWS ONLY"),
])
def test_render_pagination(limit, offset, expected):
    """Test the four Oracle clause forms."""
    assert render_pagination(limit, offset) == expected


@pytest.mark.unit
@pytest.mark.parametrize("page, page_size, expected", [
    (1, 10, {'limit': 10, 'offset': 0}),
    (2, 10, {'limit': 10, 'offset': 10}),
    (5, 25, {'limit': 25, 'offset': 100}),
])
def test_page_bounds(page, page_size, expected):
    """Test 1-based page to limit/offset conversion."""
    assert page_bounds(page, page_size) == expected


@pytest.mark.unit
def test_validate_bound_passes_valid_values():
    """Test that None, zero and positive values are returned unchanged."""
    assert validate_bound('limit', None) is None
    assert validate_bound('limit', 0) == 0
    assert validate_bound('offset', 7) == 7


# ==================
# 2. EDGE CASE TESTS
# ==================

@pytest.mark.edge_case
@pytest.mark.parametrize("page, page_size", [(0, 10), (-1, 10), (1, 0), (1, -5)])
def test_page_bounds_rejects_invalid(page, page_size):
    """Test that pages and page sizes below 1 raise PaginationError."""
    with pytest.raises(PaginationError):
        page_bounds(page, page_size)


@pytest.mark.edge_case
def test_validate_bound_rejects_negative():
    """Test negative bounds raise a ValueError subclass naming the bound."""
    with pytest.raises(ValueError, match="offset must be a non-negative integer, got -1"):
        validate_bound('offset', -1)
