#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/snippetfmt/renderers/vscode.py
"""VS Code snippet rendering.

This module provides the VSCodeRenderer class which renders a snippet record
as a VS Code snippet entry: a JSON member whose body is an array with one
string per line.

Examples
--------
.. code-block:: json

    "Print to console": {
      "prefix": "log",
      "body": [
        "console.log(\\"$1\\");",
        "$2"
      ],
      "description": "Print to console"
    }

"""

from __future__ import annotations

import json
import logging
from typing import Iterable

from snippetfmt.constants import VSCODE_BODY_INDENT
from snippetfmt.models import SnippetRecord
from snippetfmt.options.vscode import VSCodeRendererOptions
from snippetfmt.renderers.base import BaseRenderer
from snippetfmt.utils.escape import escape_json_string

logger = logging.getLogger(__name__)


class VSCodeRenderer(BaseRenderer):
    """Render snippet records as VS Code snippet entries.

    Only the body is escaped. The description and trigger are written
    between quotes as given, so a quote or backslash in either produces an
    invalid entry.

    Parameters
    ----------
    options : VSCodeRendererOptions or None, default = None
        VS Code rendering options

    """

    editor_name = "vscode"

    def __init__(self, options: VSCodeRendererOptions | None = None):
        """Initialize the VS Code renderer with options."""
        BaseRenderer._validate_options_type(options, VSCodeRendererOptions, self.editor_name)
        options = options or VSCodeRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: VSCodeRendererOptions = options

    def _render(self, record: SnippetRecord) -> str:
        body_lines = escape_json_string(record.snippet).split("\n")
        last_index = len(body_lines) - 1
        quoted_lines = [
            f'{VSCODE_BODY_INDENT}"{line}"' + ("" if index == last_index else ",")
            for index, line in enumerate(body_lines)
        ]

        lines = [
            f'"{record.description}": {{',
            f'  "prefix": "{record.trigger}",',
            '  "body": [',
            *quoted_lines,
            "  ],",
            f'  "description": "{record.description}"',
            "}",
        ]
        return "\n".join(lines)

    def render_snippet_file(self, records: Iterable[SnippetRecord]) -> str:
        """Build a standalone ``.code-snippets`` JSON document.

        Entries are keyed by trigger (``options.untitled_key`` when empty)
        and encoded with ``json.dumps``, so unlike ``render_to_string`` every
        field is properly escaped. A later record with the same key replaces
        an earlier one.

        Parameters
        ----------
        records : iterable of SnippetRecord
            Snippets to include

        Returns
        -------
        str
            JSON document

        """
        document: dict[str, dict[str, object]] = {}
        for record in records:
            key = record.trigger or self.options.untitled_key
            if key in document:
                logger.warning("Duplicate snippet key %r; keeping the last definition", key)
            document[key] = {
                "prefix": record.trigger,
                "body": record.snippet.split("\n"),
                "description": record.description,
            }

        text = json.dumps(document, indent=self.options.json_indent, ensure_ascii=False)
        if self.options.trailing_newline:
            text += "\n"
        return text


def format_vscode(record: SnippetRecord) -> str:
    """Render ``record`` as a VS Code snippet entry with default options."""
    return VSCodeRenderer().render_to_string(record)


def build_vscode_snippet_file(records: Iterable[SnippetRecord], options: VSCodeRendererOptions | None = None) -> str:
    """Render ``records`` as a ``.code-snippets`` JSON document."""
    return VSCodeRenderer(options).render_snippet_file(records)
