#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for snippetfmt.

This module centralizes the fixed literals used across the library:
editor names, export file extensions, interchange field names and the
template lines each renderer emits.

Constants are organized by category:
1. Type Definitions - Literal types for editor and output names
2. Interchange Format - Field names and separators
3. Renderer Templates - Fixed lines emitted by each renderer
4. File Extensions - Export file naming
"""

from __future__ import annotations

from typing import Literal, get_args

# =============================================================================
# Type Definitions
# =============================================================================

EditorName = Literal["vscode", "atom", "sublime"]
OutputFormat = Literal["vscode", "atom", "sublime", "vscode-json", "interchange"]
SnippetField = Literal["description", "trigger", "snippet"]

OUTPUT_FORMATS: tuple[str, ...] = get_args(OutputFormat)
SNIPPET_FIELDS: tuple[str, ...] = get_args(SnippetField)

DEFAULT_OUTPUT_FORMAT = "vscode"

# =============================================================================
# Interchange Format
# =============================================================================

INTERCHANGE_RECORD_SEPARATOR = "\n\n"
INTERCHANGE_LINE_SEPARATOR = "\n"
INTERCHANGE_KEY_SEPARATOR = ":"

# =============================================================================
# Renderer Templates
# =============================================================================

VSCODE_BODY_INDENT = "    "
VSCODE_DEFAULT_JSON_INDENT = 2
VSCODE_UNTITLED_KEY = "untitled"

ATOM_BODY_INDENT = "    "
ATOM_BODY_DELIMITER = '"""'

SUBLIME_SCOPE_HINT_LINES: tuple[str, ...] = (
    "  <!-- Optional: Set a scope to limit where the snippet will trigger -->",
    "  <!-- <scope >source.python</scope > -->",
)

# =============================================================================
# File Extensions
# =============================================================================

EXPORT_EXTENSIONS: dict[str, str] = {
    "vscode": ".code-snippets",
    "vscode-json": ".code-snippets",
    "atom": ".cson",
    "sublime": ".sublime-snippet",
    "interchange": ".txt",
}

DEFAULT_EXPORT_STEM = "snippet"

# =============================================================================
# Configuration
# =============================================================================

CONFIG_ENV_VAR = "SNIPPETFMT_CONFIG"
CONFIG_FILENAMES: tuple[str, ...] = (".snippetfmt.toml", ".snippetfmt.yaml", ".snippetfmt.yml", ".snippetfmt.json")
