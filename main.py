"""
=========================================================
Command-line demo for the Oracle query builders.
=========================================================

Builds the EMPLOYEE example statement: two QueryBuilder instances combined
with UNION ALL, wrapped by an OuterQueryBuilder that re-aliases the columns,
adds a static and a computed column, and applies an outer row limit chosen
by a flag.

The demo only renders text. It prints the SQL and the ordered parameters
that a caller would hand to a prepared-statement API.

Usage:
    # Render with the 100 row limit
    python main.py

    # Render with the 2000 row limit
    python main.py --fetch-all

    # Single WHERE keyword for flat and grouped conditions
    python main.py --merge-where

Example:
    >>> from main import build_union_statement
    >>>
    >>> outer = build_union_statement(fetch_top_100=True)
    >>> print(outer.build())
    >>> print(outer.get_parameters())
"""

import argparse
from typing import Optional

from builders.outer_query_builder import OuterQueryBuilder
from builders.pagination import PaginationError
from builders.query_builder import QueryBuilder, QueryBuilderError
from core.config import config
from core.logger import get_logger, setup_logging

logger = get_logger(__name__)


def build_union_statement(fetch_top_100: bool, merge_where_groups: Optional[bool] = None) -> OuterQueryBuilder:
    """
    Assemble the EMPLOYEE union example.

    Args:
        fetch_top_100: Limit the outer query to 100 rows instead of 2000
        merge_where_groups: Override of config.merge_where_groups for both
            inner builders

    Returns:
        Configured OuterQueryBuilder, not yet rendered
    """
    active = (
        QueryBuilder("EMPLOYEE e", merge_where_groups=merge_where_groups)
        .select_column("e.id", "id")
        .select_column("e.name", "name")
        .select_case(
            "Status",
            "e.status = 'A'", "Active",
            "e.status = 'I'", "Inactive",
            "Unknown"
        )
        .select_nested_case(
            "SeniorityLevel",
            "e.experience > 5", "e.role = 'Manager'", "Senior Manager", "Experienced"
        )
        .and_where("e.department = ?", "IT")
        .or_where_group("e.city = 'New York'", "e.city = 'Chicago'")
        .order_by("e.name")
        .limit(10)
    )

    inactive = (
        QueryBuilder("EMPLOYEE e", merge_where_groups=merge_where_groups)
        .select_column("e.id", "id")
        .select_column("e.name", "name")
        .where("e.status = ?", "inactive")
        .order_by("e.name DESC")
    )

    active.union_all(inactive)

    return (
        OuterQueryBuilder(active)
        .select_from_inner("id", "RollNo")
        .select_from_inner("name", "FirstName")
        .select_static("'Sidhant Gupta'", "TeacherName")
        .select_static("CASE WHEN inner_table.id IS NULL THEN 'NO ID' ELSE 'IS ID' END", "Status")
        .order_by("RollNo ASC")
        .limit_based_on_condition(fetch_top_100, 100, 2000)
    )


def main():
    """
    Command-line interface for the query builder demo.

    Exit Codes:
        0: Success
        1: Error
        130: User interrupt (Ctrl+C)
    """
    parser = argparse.ArgumentParser(
        description="Oracle Query Builder - UNION / derived table demo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Render with the default 100 row outer limit
  python main.py

  # Render with the 2000 row outer limit
  python main.py --fetch-all

  # Merge flat and grouped conditions under one WHERE
  python main.py --merge-where
        """
    )

    parser.add_argument(
        '--fetch-all',
        action='store_true',
        help='Use the 2000 row outer limit instead of 100'
    )
    parser.add_argument(
        '--merge-where',
        action='store_true',
        help='Render a single WHERE for flat and grouped conditions'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging (DEBUG level)'
    )

    args = parser.parse_args()

    if args.verbose:
        setup_logging(
            log_level='DEBUG',
            log_file=config.logging.log_file,
            log_dir=config.logging.log_dir,
            use_colors=config.logging.use_colors
        )

    try:
        merge = True if args.merge_where else config.merge_where_groups
        outer = build_union_statement(not args.fetch_all, merge_where_groups=merge)

        sql = outer.build()
        parameters = outer.get_parameters()

        logger.info("Oracle SQL with UNION ALL:")
        print(sql)
        print(f"Parameters: {parameters}")
        return 0

    except (QueryBuilderError, PaginationError) as e:
        logger.error(f"\n❌ Query building failed: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("\n⚠️  Operation interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"\n❌ Unexpected error: {e}", exc_info=True)
        return 1


if __name__ == '__main__':
    raise SystemExit(main())
