"""Command-line access to the implementors index.

Usage:
    docindex list
    docindex table core::default::Default
    docindex show core::default::Default --current-package feed --defer
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from docindex.implementors.catalog import FragmentCatalog
from docindex.implementors.loader import FragmentNotFoundError, load_trait_page
from docindex.implementors.registrar import build_table

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVEL_ENV = "DOCINDEX_LOG_LEVEL"


def _resolve_log_level(
    parser: argparse.ArgumentParser, level: Optional[str]
) -> str:
    """Pick the log level from --log-level, then DOCINDEX_LOG_LEVEL."""
    if level:
        return level
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    if level not in LOG_LEVELS:
        parser.error(
            f"invalid {LOG_LEVEL_ENV} value: {level!r} (choose from {LOG_LEVELS})"
        )
    return level


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _cmd_list(catalog: FragmentCatalog, args: argparse.Namespace) -> int:
    summaries = [s.model_dump() for s in catalog.list_summaries()]
    print(json.dumps(summaries, indent=2))
    return 0


def _cmd_table(catalog: FragmentCatalog, args: argparse.Namespace) -> int:
    fragment = catalog.get(args.trait)
    if fragment is None:
        raise FragmentNotFoundError(
            f"Fragment '{args.trait}' not found. Available: {catalog.list_keys()}"
        )
    print(json.dumps(build_table(fragment), indent=2))
    return 0


def _cmd_show(catalog: FragmentCatalog, args: argparse.Namespace) -> int:
    section = load_trait_page(
        args.trait,
        current_package=args.current_package,
        defer_aggregator=args.defer,
        catalog=catalog,
    )
    print(json.dumps(section.model_dump(), indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docindex",
        description="Inspect generated implementor fragments and the trait "
        "page sections built from them.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--definitions-dir",
        type=Path,
        default=None,
        help="Directory of fragment definitions (default: bundled, or "
        "DOCINDEX_DEFINITIONS_DIR)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: DOCINDEX_LOG_LEVEL or WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    list_parser = sub.add_parser("list", help="List fragment summaries")
    list_parser.set_defaults(func=_cmd_list)

    table_parser = sub.add_parser("table", help="Print a fragment's raw table")
    table_parser.add_argument("trait", help="Trait path, e.g. core::default::Default")
    table_parser.set_defaults(func=_cmd_table)

    show_parser = sub.add_parser("show", help="Print a trait page's section")
    show_parser.add_argument("trait", help="Trait path, e.g. core::default::Default")
    show_parser.add_argument(
        "--current-package",
        default=None,
        help="Package whose page is shown; its implementors are skipped",
    )
    show_parser.add_argument(
        "--defer",
        action="store_true",
        help="Evaluate the fragment before the aggregator attaches",
    )
    show_parser.set_defaults(func=_cmd_show)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(_resolve_log_level(parser, args.log_level))

    catalog = FragmentCatalog(args.definitions_dir)
    try:
        return args.func(catalog, args)
    except FragmentNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
