#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/snippetfmt/renderers/atom.py
"""Atom snippet rendering.

This module provides the AtomRenderer class which renders a snippet record as
an entry of Atom's ``snippets.cson`` file. The body goes into a triple-quoted
block without any escaping.

Examples
--------
.. code-block:: text

    'Print to console':
      'prefix': 'log'
      'body': \"\"\"
        console.log($1);
      \"\"\"

"""

from __future__ import annotations

from snippetfmt.constants import ATOM_BODY_DELIMITER, ATOM_BODY_INDENT
from snippetfmt.models import SnippetRecord
from snippetfmt.options.base import BaseRendererOptions
from snippetfmt.renderers.base import BaseRenderer
from snippetfmt.utils.escape import indent_lines


class AtomRenderer(BaseRenderer):
    """Render snippet records as Atom CSON snippet entries.

    Every line of the body, blank lines included, is indented to the body
    column. Nothing is escaped: a body containing three double quotes, or a
    description or trigger containing an apostrophe, yields an entry Atom
    cannot read.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Rendering options

    """

    editor_name = "atom"

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the Atom renderer with options."""
        BaseRenderer._validate_options_type(options, BaseRendererOptions, self.editor_name)
        BaseRenderer.__init__(self, options)

    def _render(self, record: SnippetRecord) -> str:
        lines = [
            f"'{record.description}':",
            f"  'prefix': '{record.trigger}'",
            f"  'body': {ATOM_BODY_DELIMITER}",
            indent_lines(record.snippet, ATOM_BODY_INDENT),
            f"  {ATOM_BODY_DELIMITER}",
        ]
        return "\n".join(lines)


def format_atom(record: SnippetRecord) -> str:
    """Render ``record`` as an Atom snippet entry with default options."""
    return AtomRenderer().render_to_string(record)
