"""Print text as Sub-Zero block letters."""

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import TextIO

from subzero.config import get_settings
from subzero.services.font import FONT_INFO
from subzero.services.rendering import MAX_SQUASH, GlyphCompositor
from subzero.services.text_source import InputSourceError, join_words, read_source

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_TOO_MUCH_SQUASH = 3
EXIT_NO_INPUT = 4


def _package_version() -> str:
    try:
        return version("subzero")
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    credit = FONT_INFO.strip("\n")
    parser = argparse.ArgumentParser(
        prog="subzero",
        description=f"{credit}\n\nTool for generating ascii art with Sub-Zero font",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("text", nargs="*", help="Text to convert")
    parser.add_argument(
        "-i",
        "--input",
        help="Treat input as an input file instead of text to convert (use - for stdin)",
    )
    parser.add_argument(
        "-s",
        "--spaces",
        type=int,
        default=settings.default_spaces,
        help="Number of spaces for the space character",
    )
    parser.add_argument(
        "-b",
        "--between",
        type=int,
        default=settings.default_between,
        help="Number of spaces between non-space characters",
    )
    parser.add_argument(
        "-S",
        "--squash",
        action="count",
        default=settings.default_squash,
        help="Squash the characters together (put more -S for more squashing)",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log more to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    return parser


def _configure_logging(verbose: int) -> None:
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = getattr(logging, get_settings().log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")


def _fatal(message: str, code: int) -> int:
    print(f"fatal: {message}", file=sys.stderr)
    return code


def write_art(compositor: GlyphCompositor, text: str, out: TextIO) -> None:
    for rows in compositor.iter_lines(text):
        for row in rows:
            out.write(row)
            out.write("\n")
        out.flush()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.text and args.input is not None:
        parser.error("argument -i/--input: not allowed with argument text")
    if args.spaces < 0 or args.between < 0:
        parser.error("spacing must not be negative")
    if args.squash > MAX_SQUASH:
        return _fatal("you are squashing too much", EXIT_TOO_MUCH_SQUASH)
    if not args.text and args.input is None:
        return _fatal("no input provided. See --help for usage", EXIT_NO_INPUT)

    if args.input is not None:
        try:
            text = read_source(args.input)
        except InputSourceError as exc:
            return _fatal(exc.message, exc.exit_code)
    else:
        text = join_words(args.text)

    logger.info(
        "Rendering %d characters (spaces=%d, between=%d, squash=%d)",
        len(text),
        args.spaces,
        args.between,
        args.squash,
    )
    compositor = GlyphCompositor(spaces=args.spaces, between=args.between, squash=args.squash)
    write_art(compositor, text, sys.stdout)
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
