"""
==========================
Utility Functions Package.
==========================

Helpers for handing rendered queries to database tooling.

Modules:
    statement_utils: Placeholder counting and SQLAlchemy text binding
"""

__version__ = "1.0.0"
__all__ = [
    'StatementBindingError',
    'count_placeholders',
    'to_named_placeholders',
    'to_text_clause'
]

from .statement_utils import (
    StatementBindingError,
    count_placeholders,
    to_named_placeholders,
    to_text_clause,
)
