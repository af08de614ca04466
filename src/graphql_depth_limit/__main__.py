"""Check GraphQL documents against a maximum operation depth.

Usage:
    DEPTH_LIMIT_MAX_DEPTH=5 python -m graphql_depth_limit queries/*.graphql
    python -m graphql_depth_limit --max-depth 3 --ignore-exact edges query.graphql

Exit status is 0 when every document is within the limit, 1 when a violation
was found and 2 when a document could not be read or parsed.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from graphql import GraphQLError, GraphQLSyntaxError, Source, parse

from graphql_depth_limit.config import Settings
from graphql_depth_limit.ignore import ExactMatch, IgnoreRule, PatternMatch
from graphql_depth_limit.walker import validate_depth

logger = logging.getLogger("graphql_depth_limit")

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphql_depth_limit",
        description="Report GraphQL operations nested deeper than a maximum depth.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="GraphQL documents to check.")
    parser.add_argument(
        "--max-depth",
        type=int,
        default=settings.max_depth,
        help=f"Maximum operation depth, inclusive (default: {settings.max_depth}).",
    )
    ignore = parser.add_mutually_exclusive_group()
    ignore.add_argument("--ignore-exact", metavar="NAME", help="Do not count fields named NAME.")
    ignore.add_argument(
        "--ignore-pattern", metavar="REGEX", help="Do not count fields whose name matches REGEX."
    )
    return parser


def _location(error: GraphQLError) -> str:
    if error.locations:
        return f"{error.locations[0].line}:{error.locations[0].column}"
    return "1:1"


def check_file(path: Path, max_depth: int, ignoring: IgnoreRule) -> list[str]:
    """Return ``path:line:column: message`` lines for each violation in ``path``."""
    document = parse(Source(path.read_text(encoding="utf-8"), str(path)))
    lines = []
    for violation in validate_depth(document, max_depth, ignoring):
        error = violation.to_graphql_error()
        lines.append(f"{path}:{_location(error)}: {error.message}")
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = Settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        stream=sys.stderr,
    )

    args = _build_parser(settings).parse_args(argv)
    if args.max_depth < 0:
        logger.error("--max-depth must be >= 0, got %d", args.max_depth)
        return EXIT_ERROR

    if args.ignore_exact is not None:
        ignoring = ExactMatch(args.ignore_exact)
    elif args.ignore_pattern is not None:
        ignoring = PatternMatch(args.ignore_pattern)
    else:
        ignoring = settings.ignore_rule()

    status = EXIT_OK
    for path in args.files:
        try:
            lines = check_file(path, args.max_depth, ignoring)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Cannot read %s: %s", path, exc)
            status = EXIT_ERROR
            continue
        except GraphQLSyntaxError as exc:
            logger.error("Cannot parse %s: %s", path, exc.message)
            status = EXIT_ERROR
            continue
        for line in lines:
            print(line)
        if lines and status == EXIT_OK:
            status = EXIT_VIOLATIONS
    return status


if __name__ == "__main__":
    sys.exit(main())
