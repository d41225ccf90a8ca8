"""Command-line interface for snippetfmt.

The CLI is a thin presentation layer over the library: it reads interchange
files or command-line arguments into a ``SnippetBlockList``, renders them and
prints or writes the result.

Examples
--------
Render an interchange file as Sublime Text snippets::

    $ snippetfmt render snippets.txt --to sublime --scope source.python

Format a single snippet::

    $ snippetfmt new -d "Print to console" -t log -s 'console.log($1);' --to vscode

Export one file per snippet::

    $ snippetfmt export snippets.txt --to vscode-json --output-dir ./vscode

Configuration files (``.snippetfmt.toml``, ``.snippetfmt.yaml``,
``.snippetfmt.json`` or ``[tool.snippetfmt]`` in ``pyproject.toml``) supply
defaults for ``to``, ``scope``, ``json_indent`` and ``log_level``.

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import sys
from typing import Any, Dict

from snippetfmt.cli.builder import (
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_FORMAT_ERROR,
    EXIT_VALIDATION_ERROR,
    create_parser,
)
from snippetfmt.cli.commands import dispatch_command
from snippetfmt.cli.config import load_config
from snippetfmt.exceptions import ConfigError, FileError, FormatError, SnippetFmtError, ValidationError
from snippetfmt.logging_utils import configure_logging

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser"]


def _setup_logging_level(parsed_args: argparse.Namespace, config: Dict[str, Any]) -> None:
    """Configure logging from the parsed arguments and config.

    ``--trace`` takes highest precedence, then ``--verbose``, then
    ``--log-level``, then ``log_level`` from the config file.
    """
    if parsed_args.trace or parsed_args.verbose:
        log_level: int | str = logging.DEBUG
    else:
        log_level = parsed_args.log_level or config.get("log_level") or logging.WARNING

    configure_logging(
        log_level,
        log_file=parsed_args.log_file,
        trace_mode=parsed_args.trace,
        use_rich=getattr(parsed_args, "rich", False),
    )


def _exit_code_for(error: SnippetFmtError) -> int:
    if isinstance(error, (ValidationError, ConfigError)):
        return EXIT_VALIDATION_ERROR
    if isinstance(error, FileError):
        return EXIT_FILE_ERROR
    if isinstance(error, FormatError):
        return EXIT_FORMAT_ERROR
    return EXIT_ERROR


def main(argv: list[str] | None = None) -> int:
    """Run the snippetfmt command-line interface.

    Parameters
    ----------
    argv : list[str], optional
        Command-line arguments; defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        configure_logging(logging.WARNING)
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    _setup_logging_level(args, config)

    try:
        return dispatch_command(args, config)
    except SnippetFmtError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return _exit_code_for(e)
    except ValueError as e:
        logger.debug("Invalid option value", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
