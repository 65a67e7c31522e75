"""CLI for py_vers_range: argparse and main entrypoint."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from py_vers_range import api
from py_vers_range.config import DEFAULT_LOG_LEVEL, DEFAULT_SCHEME
from py_vers_range.errors import FormatError

logger = logging.getLogger(__name__)

_DOC = """
VERS version ranges

Parse, check and render package version ranges:
- Parse VERS URIs such as vers:npm/>=1.2.3|<2.0.0
- Convert native ranges (npm, gem, pypi, maven, nuget, deb, rpm) to VERS
- Check whether a version falls inside a range
- Compare and normalize versions

Usage:
    py-vers-range parse URI
    py-vers-range native TEXT --scheme SCHEME
    py-vers-range contains RANGE VERSION [--scheme SCHEME]
    py-vers-range compare A B
    py-vers-range normalize VERSION

Optional:
    --log-level LEVEL  DEBUG|INFO|WARNING|ERROR|CRITICAL
    --log-file PATH    Also write log output to PATH
"""

EXIT_OK = 0
EXIT_NOT_CONTAINED = 1
EXIT_PARSE_ERROR = 2


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, configure logging and run one subcommand."""
    parser = _make_parser()
    args = parser.parse_args(argv)
    _configure_logging(level=args.log_level, log_file=args.log_file)
    logger.debug("Running %s command", args.command)

    try:
        return args.handler(args)
    except FormatError as e:
        logger.debug("Command %s failed: %s", args.command, e)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR


def _parse(args: argparse.Namespace) -> int:
    version_range = api.parse(args.uri)
    scheme = _uri_scheme(args.uri)
    print(version_range)
    print(api.to_vers_string(version_range, scheme))
    return EXIT_OK


def _native(args: argparse.Namespace) -> int:
    version_range = api.parse_native(args.text, args.scheme)
    print(api.to_vers_string(version_range, args.scheme))
    return EXIT_OK


def _contains(args: argparse.Namespace) -> int:
    if args.scheme is None:
        version_range = api.parse(args.range)
    else:
        version_range = api.parse_native(args.range, args.scheme)
    contained = version_range.contains(args.version)
    print("yes" if contained else "no")
    return EXIT_OK if contained else EXIT_NOT_CONTAINED


def _compare(args: argparse.Namespace) -> int:
    print(api.compare(args.a, args.b))
    return EXIT_OK


def _normalize(args: argparse.Namespace) -> int:
    print(api.normalize(args.version))
    return EXIT_OK


def _uri_scheme(uri: str) -> str:
    """Scheme named in a VERS URI; the default scheme for ``*``."""
    if uri.startswith("vers:"):
        return uri[len("vers:"):].partition("/")[0]
    return DEFAULT_SCHEME


def _make_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="py-vers-range",
        description=_DOC.strip(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=DEFAULT_LOG_LEVEL,
        help="Logging level",
    )
    p.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Log file path (default: console only)",
    )
    commands = p.add_subparsers(dest="command", required=True)

    parse_cmd = commands.add_parser("parse", help="Parse a VERS URI")
    parse_cmd.add_argument("uri", help="VERS URI, or * for every version")
    parse_cmd.set_defaults(handler=_parse)

    native_cmd = commands.add_parser("native", help="Convert a native range to a VERS URI")
    native_cmd.add_argument("text", help="Native range expression")
    native_cmd.add_argument(
        "--scheme",
        default=DEFAULT_SCHEME,
        help="Package ecosystem (npm, gem, pypi, maven, nuget, deb, rpm)",
    )
    native_cmd.set_defaults(handler=_native)

    contains_cmd = commands.add_parser("contains", help="Check a version against a range")
    contains_cmd.add_argument("range", help="VERS URI, or a native range with --scheme")
    contains_cmd.add_argument("version", help="Version to check")
    contains_cmd.add_argument(
        "--scheme",
        default=None,
        help="Read RANGE as native syntax of this ecosystem",
    )
    contains_cmd.set_defaults(handler=_contains)

    compare_cmd = commands.add_parser("compare", help="Compare two versions")
    compare_cmd.add_argument("a", help="First version")
    compare_cmd.add_argument("b", help="Second version")
    compare_cmd.set_defaults(handler=_compare)

    normalize_cmd = commands.add_parser("normalize", help="Normalize a version")
    normalize_cmd.add_argument("version", help="Version to normalize")
    normalize_cmd.set_defaults(handler=_normalize)
    return p


def _configure_logging(
    level: str = DEFAULT_LOG_LEVEL,
    log_file: Optional[Path] = None,
) -> None:
    """Configure logging to stderr and optionally to a file."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )
