#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/snippetfmt/utils/__init__.py
"""Utility modules for the snippetfmt package.

This package contains the editor-specific escaping helpers and the file
output helpers used by the API and CLI.
"""

from snippetfmt.utils.escape import escape_json_string, escape_sublime_placeholders, indent_lines
from snippetfmt.utils.io_utils import export_stem, make_unique_name, write_text

__all__ = [
    "escape_json_string",
    "escape_sublime_placeholders",
    "indent_lines",
    "export_stem",
    "make_unique_name",
    "write_text",
]
