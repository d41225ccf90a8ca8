"""snippetfmt - convert code snippets into editor snippet definitions.

snippetfmt takes a snippet (description, trigger, body) and produces the
snippet-definition text used by Visual Studio Code, Atom and Sublime Text,
plus a plain-text interchange format for bulk import and export.

Examples
--------
Format one snippet for each editor:

    >>> from snippetfmt import SnippetRecord, format_atom, format_sublime, format_vscode
    >>> record = SnippetRecord(description="a", trigger="b", snippet="c")
    >>> print(format_vscode(record))
    "a": {
      "prefix": "b",
      "body": [
        "c"
      ],
      "description": "a"
    }

Round-trip through the interchange format:

    >>> from snippetfmt import parse_all, serialize_all
    >>> parse_all(serialize_all([record])) == [record]
    True

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from snippetfmt.api import export_snippets, render, render_all, render_file_content
from snippetfmt.exceptions import (
    ConfigError,
    FileError,
    FormatError,
    InterchangeFileError,
    InvalidOptionsError,
    OutputWriteError,
    SnippetFmtError,
    ValidationError,
)
from snippetfmt.interchange import parse_all, read_interchange_file, serialize_all, serialize_one, write_interchange_file
from snippetfmt.models import SnippetBlock, SnippetBlockList, SnippetRecord
from snippetfmt.options import BaseRendererOptions, SublimeRendererOptions, VSCodeRendererOptions
from snippetfmt.renderers import (
    AtomRenderer,
    SublimeRenderer,
    VSCodeRenderer,
    build_vscode_snippet_file,
    format_atom,
    format_sublime,
    format_vscode,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Models
    "SnippetRecord",
    "SnippetBlock",
    "SnippetBlockList",
    # Formatters
    "format_vscode",
    "format_atom",
    "format_sublime",
    "build_vscode_snippet_file",
    "VSCodeRenderer",
    "AtomRenderer",
    "SublimeRenderer",
    # Options
    "BaseRendererOptions",
    "VSCodeRendererOptions",
    "SublimeRendererOptions",
    # Interchange
    "serialize_one",
    "serialize_all",
    "parse_all",
    "read_interchange_file",
    "write_interchange_file",
    # API
    "render",
    "render_all",
    "render_file_content",
    "export_snippets",
    # Exceptions
    "SnippetFmtError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "InterchangeFileError",
    "OutputWriteError",
    "FormatError",
    "ConfigError",
]
