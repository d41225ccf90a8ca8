#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/snippetfmt/cli/commands.py
"""Subcommand handlers for the snippetfmt CLI.

Each handler receives the parsed arguments merged with the configuration
file, works on a ``SnippetBlockList`` and returns a process exit code.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict

from snippetfmt.api import export_snippets, render_all
from snippetfmt.cli.builder import EXIT_SUCCESS
from snippetfmt.cli.output import print_block_table, print_rendered, should_use_rich_output
from snippetfmt.constants import DEFAULT_OUTPUT_FORMAT, OUTPUT_FORMATS
from snippetfmt.exceptions import FormatError, InterchangeFileError, OutputWriteError
from snippetfmt.interchange import read_interchange_file
from snippetfmt.models import SnippetBlockList
from snippetfmt.options.base import BaseRendererOptions
from snippetfmt.options.sublime import SublimeRendererOptions
from snippetfmt.options.vscode import VSCodeRendererOptions
from snippetfmt.utils.io_utils import write_text

logger = logging.getLogger(__name__)


def resolve_output_format(args: argparse.Namespace, config: Dict[str, Any]) -> str:
    """Pick the output format: ``--to``, then the config file, then the default."""
    output_format = args.to or config.get("to") or DEFAULT_OUTPUT_FORMAT
    if output_format not in OUTPUT_FORMATS:
        raise FormatError(format_name=str(output_format), supported_formats=list(OUTPUT_FORMATS))
    return output_format


def build_options(output_format: str, args: argparse.Namespace, config: Dict[str, Any]) -> BaseRendererOptions:
    """Build renderer options from command-line flags and config values.

    Raises
    ------
    ValueError
        If a value has the wrong type or is out of range (e.g. a negative JSON indent)

    """
    if output_format == "sublime":
        scope = args.scope if args.scope is not None else config.get("scope")
        return SublimeRendererOptions(scope=scope)
    if output_format in ("vscode", "vscode-json"):
        json_indent = args.json_indent if args.json_indent is not None else config.get("json_indent")
        if json_indent is None:
            return VSCodeRendererOptions()
        return VSCodeRendererOptions(json_indent=json_indent)
    return BaseRendererOptions()


def load_blocks(source: str) -> SnippetBlockList:
    """Read an interchange file (``-`` for stdin) into a fresh block list."""
    blocks = SnippetBlockList([])
    if source == "-":
        records = read_interchange_file(sys.stdin)
    else:
        path = Path(source)
        if not path.is_file():
            raise InterchangeFileError(source, message=f"Input file not found: {source}")
        records = read_interchange_file(path)
    blocks.import_records(records)
    return blocks


def _emit(blocks: SnippetBlockList, args: argparse.Namespace, config: Dict[str, Any]) -> int:
    output_format = resolve_output_format(args, config)
    options = build_options(output_format, args, config)
    records = blocks.records()

    if args.out:
        text = render_all(records, output_format, options)
        if not text.endswith("\n"):
            text += "\n"
        try:
            write_text(text, args.out)
        except OSError as e:
            raise OutputWriteError(args.out, original_error=e) from e
        logger.info("Wrote %d snippet(s) to %s", len(records), args.out)
        return EXIT_SUCCESS

    if output_format in ("vscode-json", "interchange"):
        sections = [(output_format, render_all(records, output_format, options))]
    else:
        sections = [
            (f"#{block.id} {block.trigger}", render_all([record], output_format, options))
            for block, record in zip(blocks, records)
        ]
    print_rendered(sections, output_format, should_use_rich_output(args.rich))
    return EXIT_SUCCESS


def handle_render(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    """Render every snippet of an interchange file."""
    blocks = load_blocks(args.input)
    if not len(blocks):
        logger.warning("No snippets found in %s", args.input)
    return _emit(blocks, args, config)


def handle_new(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    """Format a single snippet built from command-line arguments."""
    snippet = args.snippet or ""
    if args.snippet_file:
        try:
            snippet = Path(args.snippet_file).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise InterchangeFileError(args.snippet_file, message=f"Cannot read snippet body: {e}", original_error=e) from e
        # Editors add the final newline themselves.
        snippet = snippet.removesuffix("\n")

    blocks = SnippetBlockList()
    block_id = next(iter(blocks)).id
    blocks.update_block(block_id, "description", args.description)
    blocks.update_block(block_id, "trigger", args.trigger)
    blocks.update_block(block_id, "snippet", snippet)
    return _emit(blocks, args, config)


def handle_list(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    """Tabulate the snippets of an interchange file."""
    blocks = load_blocks(args.input)
    print_block_table(blocks, should_use_rich_output(args.rich))
    return EXIT_SUCCESS


def handle_export(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    """Write one file per snippet into the output directory."""
    blocks = load_blocks(args.input)
    output_format = resolve_output_format(args, config)
    options = build_options(output_format, args, config)
    paths = export_snippets(blocks.records(), output_format, args.output_dir, options)
    for path in paths:
        print(path)
    return EXIT_SUCCESS


COMMAND_HANDLERS = {
    "render": handle_render,
    "new": handle_new,
    "list": handle_list,
    "export": handle_export,
}


def dispatch_command(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    """Run the handler for ``args.command``."""
    return COMMAND_HANDLERS[args.command](args, config)
