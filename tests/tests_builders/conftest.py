"""
Shared fixtures for builders/ module tests.

Key fixtures:
- query_factory: factory for QueryBuilder instances with explicit flags, so
  tests do not depend on QUERY_BUILDER_* environment variables
"""

import pytest


@pytest.fixture
def query_factory():
    """
    Factory that creates a QueryBuilder with compatibility defaults
    (double WHERE, non-strict) unless overridden.
    """
    def factory(source="T t", **overrides):
        from builders.query_builder import QueryBuilder

        params = dict(merge_where_groups=False, strict=False)
        params.update(overrides)
        return QueryBuilder(source, **params)

    return factory
