"""Command line entry point.

Args and roms can be in any order. Tokens starting with '-' are patch
arguments, everything else is taken as a rom name. The same set of patches
is applied to every rom.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from .app.controller import fix_roms
from .config import load_config
from .exceptions import ConfigurationError, PatchParseError, UsageError
from .logging_config import setup_logging
from .patching import parse_tokens
from .utils.result import Err
from .version import load_version

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FILE_ERRORS = 1
EXIT_USAGE = 2

PATCH_HELP = """\
Title, game code, and maker are 0 padded on the end if they're too short.

patch arguments:
  -p             Pad rom file byte size to next power of 2.
  -t[<title>]    Patch title, 12 bytes, or stripped filename with '-t'.
  -c<game_code>  Patch game code, 4 bytes.
  -m<maker_code> Patch maker code, 2 bytes.
  -r<version>    Patch game version, 0-255.
  -d<debug>      Enable debugging handler and set debug entry point (0 or 1).
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gbafix",
        usage="%(prog)s [args...] [roms...]",
        description="Fix the header of GBA rom images: patch fields, pad, and rewrite the checksum.",
        epilog=PATCH_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("--help", action="help", help="Print this message and exit")
    parser.add_argument("--version", action="store_true", help="Print version and exit")
    parser.add_argument("--verbose", action="store_true", default=None,
                        help="Give verbose output of what's happening")
    parser.add_argument("--log-json", action="store_true", default=None,
                        help="Emit log records as JSON lines")
    parser.add_argument("--log-file", metavar="PATH", help="Also write logs to PATH")
    parser.add_argument("--dry-run", action="store_true", default=None,
                        help="Patch in memory and report, but don't write files")
    parser.add_argument("--config", metavar="PATH", help="Load settings from a JSON or YAML file")
    return parser


def split_arguments(extras: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Separate patch tokens from rom paths, keeping input order."""
    tokens: List[str] = []
    paths: List[str] = []
    for arg in extras:
        if arg == "-":
            raise UsageError("Empty argument '-' given!")
        if arg.startswith("-"):
            tokens.append(arg)
        else:
            paths.append(arg)
    return tokens, paths


def _usage_failure(parser: argparse.ArgumentParser, message: str) -> int:
    print(f"ERROR: {message}", file=sys.stderr)
    parser.print_help(file=sys.stderr)
    return EXIT_USAGE


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args, extras = parser.parse_known_args(argv)

    if args.version:
        print(f"gbafix {load_version()}")
        return EXIT_OK

    try:
        config = load_config(args.config)
    except ConfigurationError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_USAGE

    config = config.merged(
        verbose=args.verbose,
        log_json=args.log_json,
        log_file=args.log_file,
        dry_run=args.dry_run,
    )
    setup_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        structured_json=config.log_json,
        verbose=config.verbose,
    )
    logger.debug("Enabling verbose output.")

    try:
        tokens, paths = split_arguments(extras)
    except UsageError as exc:
        return _usage_failure(parser, str(exc))

    parsed = parse_tokens([*config.default_patches, *tokens])
    if isinstance(parsed, Err):
        error: PatchParseError = parsed.error
        return _usage_failure(parser, str(error))
    ops = parsed.value
    for op in ops:
        logger.debug("parsed arg: %r", op)

    if not paths:
        return _usage_failure(parser, "No file names given!")
    for path in paths:
        logger.debug("Filename: %s", path)

    results = fix_roms(paths, ops, config.allowed_extensions, dry_run=config.dry_run)
    failed = [r for r in results if not r.success]
    if failed:
        logger.debug("%d of %d files failed", len(failed), len(results))
        return EXIT_FILE_ERRORS
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
