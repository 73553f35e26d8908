"""
========================================
Value Types for the Query Builders
========================================

Immutable value objects produced and consumed by the builders package.

Modules:
    query_models: Union snapshots, union modes and rendered queries

Example:
    >>> from models import RenderedQuery, UnionMode
    >>>
    >>> UnionMode.UNION_ALL.separator
    ' UNION ALL '
"""

__version__ = "0.1.0"
__all__ = [
    'RenderedQuery',
    'UnionMember',
    'UnionMode',
]

from .query_models import RenderedQuery, UnionMember, UnionMode
