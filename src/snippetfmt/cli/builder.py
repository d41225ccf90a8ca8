#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/snippetfmt/cli/builder.py
"""Argument parser construction for the snippetfmt CLI."""

import argparse

from snippetfmt.constants import OUTPUT_FORMATS

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_FORMAT_ERROR = 5

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_argument_group("logging and configuration")
    group.add_argument("--config", help="Configuration file (TOML, YAML or JSON); overrides discovery")
    group.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: WARNING)",
    )
    group.add_argument("--log-file", help="Also write log records to this file")
    group.add_argument("--verbose", "-v", action="store_true", help="Debug logging and full tracebacks")
    group.add_argument("--trace", action="store_true", help="Timestamped debug logging with logger names")


def _add_render_options(parser: argparse.ArgumentParser, require_to: bool = False) -> None:
    parser.add_argument(
        "--to",
        choices=OUTPUT_FORMATS,
        required=require_to,
        default=None,
        help="Output format (default: vscode, or 'to' from the config file)",
    )
    parser.add_argument("--scope", help="Sublime Text scope selector, e.g. source.python")
    parser.add_argument("--json-indent", type=int, help="Indentation of vscode-json output")


def _add_rich_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--rich", action="store_true", help="Use rich terminal output with formatting")


def create_parser() -> argparse.ArgumentParser:
    """Create the top-level ``snippetfmt`` argument parser with its subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    from snippetfmt import __version__

    parser = argparse.ArgumentParser(
        prog="snippetfmt",
        description="Convert code snippets into VS Code, Atom and Sublime Text snippet definitions.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    render_parser = subparsers.add_parser(
        "render", help="Render every snippet of an interchange file", description="Render an interchange file."
    )
    render_parser.add_argument("input", help="Interchange .txt file, or '-' for stdin")
    _add_render_options(render_parser)
    render_parser.add_argument("--out", "-o", help="Write to this file instead of stdout")
    _add_rich_option(render_parser)
    _add_common_arguments(render_parser)

    new_parser = subparsers.add_parser(
        "new", help="Format a single snippet given on the command line", description="Format a single snippet."
    )
    new_parser.add_argument("--description", "-d", default="", help="Snippet description")
    new_parser.add_argument("--trigger", "-t", default="", help="Trigger text")
    body_group = new_parser.add_mutually_exclusive_group()
    body_group.add_argument("--snippet", "-s", default=None, help="Snippet body ('\\n' is not interpreted)")
    body_group.add_argument("--snippet-file", help="Read the snippet body from this file")
    _add_render_options(new_parser)
    new_parser.add_argument("--out", "-o", help="Write to this file instead of stdout")
    _add_rich_option(new_parser)
    _add_common_arguments(new_parser)

    list_parser = subparsers.add_parser(
        "list", help="List the snippets of an interchange file", description="List snippets."
    )
    list_parser.add_argument("input", help="Interchange .txt file, or '-' for stdin")
    _add_rich_option(list_parser)
    _add_common_arguments(list_parser)

    export_parser = subparsers.add_parser(
        "export",
        help="Write one file per snippet",
        description="Export every snippet of an interchange file to its own file.",
    )
    export_parser.add_argument("input", help="Interchange .txt file, or '-' for stdin")
    _add_render_options(export_parser, require_to=True)
    export_parser.add_argument("--output-dir", "-O", required=True, help="Directory for the exported files")
    _add_common_arguments(export_parser)

    return parser
