#!/usr/bin/env python3
"""Export the seed roster as CSV from the command line.

Applies the same search, department filter and sort as the table view, then
writes every matching row (no pagination). Run from the backend/ directory:

    python3 scripts/export_roster.py [--search TEXT] [--department NAME]
        [--sort FIELD] [--direction asc|desc] [--output FILE] [--verbose]
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from app.core.config import Settings  # noqa: E402
from app.models.table import ALL_DEPARTMENTS, SortDirection, SortField, ViewState  # noqa: E402
from app.services.export import export_csv  # noqa: E402
from app.services.seed_loader import SeedDataError, load_seed_roster  # noqa: E402
from app.services.table_view import filtered_rows  # noqa: E402

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Export the employee roster (filtered and sorted) as CSV",
    )
    parser.add_argument(
        "--seed",
        type=Path,
        default=None,
        help="Seed JSON file (default: SEED_DATA_PATH setting)",
    )
    parser.add_argument(
        "--search",
        default="",
        help="Case-insensitive text matched against name, email, department and position",
    )
    parser.add_argument(
        "--department",
        default=ALL_DEPARTMENTS,
        help="Only this department (default: all)",
    )
    parser.add_argument(
        "--sort",
        type=SortField,
        choices=list(SortField),
        default=SortField.ID,
        help="Sort field (default: id)",
    )
    parser.add_argument(
        "--direction",
        type=SortDirection,
        choices=list(SortDirection),
        default=SortDirection.ASC,
        help="Sort direction (default: asc)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write to this file instead of stdout",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return parser.parse_args(argv)


def export(args: argparse.Namespace) -> str:
    settings = Settings()
    roster = load_seed_roster(args.seed or settings.SEED_DATA_PATH)
    view_state = ViewState(
        search=args.search,
        department=args.department,
        sort_field=args.sort,
        sort_direction=args.direction,
    )
    rows = filtered_rows(roster, view_state)
    logger.info("Exporting %d of %d employees", len(rows), len(roster))
    return export_csv(rows)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    try:
        content = export(args)
    except SeedDataError as e:
        logger.error("Export failed: %s", e)
        return 1

    if args.output:
        args.output.write_text(content, encoding="utf-8")
        logger.info("Wrote %s", args.output)
    else:
        sys.stdout.write(content)
    return 0


if __name__ == "__main__":
    sys.exit(main())
