#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2mark/cli.py
"""Command-line interface for html2mark.

Environment Variable Support
----------------------------
Numeric options and switches take their defaults from environment variables
named HTML2MARK_<OPTION_NAME>, with the option name upper-cased and hyphens
replaced by underscores (for example ``HTML2MARK_WIDTH=100`` or
``HTML2MARK_COLORS=true``). Command-line arguments always override them.

Examples
--------
Convert a file::

    $ html2mark page.html

Read from standard input and write to a file::

    $ curl -s https://example.com | html2mark - --out page.md

Colored, wrapped output for a terminal::

    $ html2mark page.html --colors --wrap --width 72 | less -R

Underlined headings and reference-style links::

    $ html2mark page.html --underscored-headings --reference-links

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from html2mark import __version__
from html2mark.api import html_to_markdown
from html2mark.constants import DEFAULT_MIN_REFERENCE_LINK_LENGTH, DEFAULT_WRAP_WIDTH
from html2mark.exceptions import Html2MarkError, ParsingError, ValidationError
from html2mark.logging_utils import configure_logging
from html2mark.options import RenderFlags

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6

ENV_PREFIX = "HTML2MARK_"

_TRUE_VALUES = {"1", "true", "yes", "on"}

# CLI switch -> rendering flag
FLAG_OPTIONS: dict[str, RenderFlags] = {
    "underscored_headings": RenderFlags.UNDERSCORED_HEADINGS,
    "reference_links": RenderFlags.MAKE_REFERENCE_LINKS,
    "colors": RenderFlags.COLORS,
    "wrap": RenderFlags.WRAP,
}


def _env_name(dest: str) -> str:
    return ENV_PREFIX + dest.upper()


def _env_flag(dest: str) -> bool:
    return os.environ.get(_env_name(dest), "").strip().lower() in _TRUE_VALUES


def _env_int(dest: str, default: int) -> int:
    value = os.environ.get(_env_name(dest))
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring non-integer {_env_name(dest)}={value!r}")
        return default


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Returns
    -------
    argparse.ArgumentParser
        Parser with environment-aware defaults

    """
    parser = argparse.ArgumentParser(
        prog="html2mark",
        description="Convert HTML into Markdown-flavored text, optionally colored and word-wrapped.",
    )
    parser.add_argument("input", help="HTML file to convert, or '-' to read standard input")
    parser.add_argument("--out", "-o", help="Write output to this file instead of standard output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    rendering = parser.add_argument_group("rendering options")
    rendering.add_argument(
        "--underscored-headings",
        action="store_true",
        default=_env_flag("underscored_headings"),
        help="Render level 1 and 2 headings as underlined (Setext) text",
    )
    rendering.add_argument(
        "--reference-links",
        action="store_true",
        default=_env_flag("reference_links"),
        help="Turn long link and image targets into numbered references",
    )
    rendering.add_argument(
        "--min-reference-length",
        type=int,
        default=_env_int("min_reference_length", DEFAULT_MIN_REFERENCE_LINK_LENGTH),
        metavar="N",
        help="Minimum target length for reference-style links (default: %(default)s)",
    )
    rendering.add_argument(
        "--colors", action="store_true", default=_env_flag("colors"), help="Color the output with ANSI escape codes"
    )
    rendering.add_argument(
        "--wrap", action="store_true", default=_env_flag("wrap"), help="Hard-wrap the output to --width columns"
    )
    rendering.add_argument(
        "--width",
        type=int,
        default=_env_int("width", DEFAULT_WRAP_WIDTH),
        metavar="N",
        help="Column width used with --wrap (default: %(default)s)",
    )
    rendering.add_argument(
        "--rich",
        action="store_true",
        default=_env_flag("rich"),
        help="Pretty-print the Markdown in the terminal with Rich",
    )

    logging_group = parser.add_argument_group("logging options")
    logging_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: %(default)s)",
    )
    logging_group.add_argument("--log-file", help="Also write log records to this file")
    logging_group.add_argument("--verbose", "-v", action="store_true", help="Shortcut for --log-level DEBUG")
    logging_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def build_flags(parsed_args: argparse.Namespace) -> RenderFlags:
    """Combine the rendering switches into a flag set."""
    flags = RenderFlags.DEFAULT
    for dest, flag in FLAG_OPTIONS.items():
        if getattr(parsed_args, dest, False):
            flags |= flag
    return flags


def _read_input(source: str) -> bytes:
    if source == "-":
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def format_rich_output(markdown_content: str) -> tuple[str, bool]:
    """Render Markdown through Rich for terminal display.

    Parameters
    ----------
    markdown_content : str
        Plain Markdown produced by the converter

    Returns
    -------
    tuple[str, bool]
        Tuple of (formatted_content, is_rich_formatted). Returns
        (markdown_content, False) if Rich is not installed.

    """
    try:
        from rich.console import Console
        from rich.markdown import Markdown
    except ImportError:
        print("Warning: Rich library not installed. Install with: pip install html2mark[rich]", file=sys.stderr)
        return markdown_content, False

    console = Console()
    with console.capture() as capture:
        console.print(Markdown(markdown_content))
    return capture.get(), True


def main(args: list[str] | None = None) -> int:
    """Execute the command-line tool.

    Parameters
    ----------
    args : list[str], optional
        Arguments to parse instead of ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    _setup_logging_level(parsed_args)

    flags = build_flags(parsed_args)
    if parsed_args.rich and flags & RenderFlags.COLORS:
        logger.warning("--rich already styles the output; ignoring --colors")
        flags &= ~RenderFlags.COLORS

    try:
        data = _read_input(parsed_args.input)
    except OSError as e:
        print(f"Error: cannot read {parsed_args.input}: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    try:
        result = html_to_markdown(data, flags, parsed_args.min_reference_length, parsed_args.width)
    except ValidationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except ParsingError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_PARSING_ERROR
    except Html2MarkError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_ERROR

    if parsed_args.rich and not parsed_args.out:
        result, _ = format_rich_output(result)

    if parsed_args.out:
        try:
            Path(parsed_args.out).write_text(result, encoding="utf-8")
        except OSError as e:
            print(f"Error: cannot write {parsed_args.out}: {e}", file=sys.stderr)
            return EXIT_FILE_ERROR
        logger.info(f"Wrote {parsed_args.out}")
    else:
        sys.stdout.write(result)
        if not result.endswith("\n"):
            sys.stdout.write("\n")
    return EXIT_SUCCESS


__all__ = ["main", "create_parser", "build_flags", "format_rich_output"]
