#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docsink/cli.py
"""Command-line interface for docsink.

Renders a Confluence-style wiki markup file as XHTML.

Examples
--------
Render to standard output::

    $ docsink page.txt

Render to a file, checking the event order::

    $ docsink page.txt -o page.html --strict

Override sink options::

    $ docsink page.txt --table-class grid --line-separator crlf

"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import fields
from pathlib import Path
from typing import Any, get_args

from docsink import __version__
from docsink.constants import LogLevel
from docsink.exceptions import (
    DocSinkError,
    FileError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from docsink.logging_utils import configure_logging
from docsink.options.xhtml import XhtmlSinkOptions
from docsink.parsers.confluence import ConfluenceParser
from docsink.parsers.source import ByLineSource
from docsink.sinks.validating import ValidatingSink
from docsink.sinks.xhtml import XhtmlSink

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

LINE_SEPARATORS = {"lf": "\n", "crlf": "\r\n", "cr": "\r"}

# Options exposed as plain string flags, e.g. ``section_class`` -> ``--section-class``
_STRING_OPTION_FIELDS = (
    "encoding",
    "section_class",
    "table_class",
    "figure_class",
    "external_link_class",
    "source_class",
    "namespace",
)


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to a CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map

    Returns
    -------
    int
        The exit code for the exception type

    """
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR
    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR
    return EXIT_ERROR


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser; option flags are generated from XhtmlSinkOptions."""
    parser = argparse.ArgumentParser(
        prog="docsink",
        description="Render Confluence-style wiki markup as XHTML.",
    )
    parser.add_argument("input", type=Path, help="Markup file to render")
    parser.add_argument("-o", "--output", help="Output file (default: standard output)")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Check the event order while rendering and fail on contract violations",
    )
    parser.add_argument(
        "--line-separator",
        choices=sorted(LINE_SEPARATORS),
        help="Line terminator written output is normalized to",
    )
    parser.add_argument("--row-classes", nargs=2, metavar=("ODD", "EVEN"), help="Classes alternated on table rows")

    options_group = parser.add_argument_group("XHTML options")
    for option_field in fields(XhtmlSinkOptions):
        if option_field.name in _STRING_OPTION_FIELDS:
            options_group.add_argument(
                f"--{option_field.name.replace('_', '-')}",
                dest=option_field.name,
                help=option_field.metadata.get("help"),
            )

    parser.add_argument(
        "--log-level",
        choices=list(get_args(LogLevel)),
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_options(parsed_args: argparse.Namespace) -> XhtmlSinkOptions:
    """Create sink options from the parsed arguments; unset flags keep the defaults.

    Raises
    ------
    ValidationError
        If the resulting options are invalid

    """
    overrides: dict[str, Any] = {
        name: getattr(parsed_args, name) for name in _STRING_OPTION_FIELDS if getattr(parsed_args, name) is not None
    }
    if parsed_args.line_separator is not None:
        overrides["line_separator"] = LINE_SEPARATORS[parsed_args.line_separator]
    if parsed_args.row_classes is not None:
        overrides["row_classes"] = tuple(parsed_args.row_classes)

    try:
        return XhtmlSinkOptions(**overrides)
    except ValueError as e:
        raise ValidationError(f"Invalid options: {e}", parameter_value=overrides, original_error=e) from e


def render(parsed_args: argparse.Namespace) -> None:
    """Parse the input file and render it to the requested output."""
    options = build_options(parsed_args)
    source = ByLineSource(parsed_args.input, encoding=options.encoding)
    output = parsed_args.output if parsed_args.output else sys.stdout

    sink: Any = XhtmlSink(output, options)
    if parsed_args.strict:
        sink = ValidatingSink(sink)

    with sink:
        ConfluenceParser().parse(source, sink)
    logger.info("Rendered %s to %s", parsed_args.input, parsed_args.output or "stdout")


def main(args: list[str] | None = None) -> int:
    """Execute the docsink CLI and return its exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        render(parsed_args)
    except DocSinkError as e:
        logger.error("%s", e.message)
        if e.original_error is not None:
            logger.debug("Caused by: %r", e.original_error)
        return get_exit_code_for_exception(e)
    return EXIT_SUCCESS


__all__ = ["main", "create_parser", "build_options", "get_exit_code_for_exception"]
