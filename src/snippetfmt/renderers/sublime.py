#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/snippetfmt/renderers/sublime.py
"""Sublime Text snippet rendering.

This module provides the SublimeRenderer class which renders a snippet record
as the XML document of a ``.sublime-snippet`` file.

Examples
--------
.. code-block:: xml

    <snippet>
      <content><![CDATA[
    echo \\$HOME ${1:name}
    ]]></content>
      <trigger>home</trigger>
      <description>Print home</description>
      <!-- Optional: Set a scope to limit where the snippet will trigger -->
      <!-- <scope >source.python</scope > -->
    </snippet>

"""

from __future__ import annotations

import logging

from snippetfmt.constants import SUBLIME_SCOPE_HINT_LINES
from snippetfmt.models import SnippetRecord
from snippetfmt.options.sublime import SublimeRendererOptions
from snippetfmt.renderers.base import BaseRenderer
from snippetfmt.utils.escape import escape_sublime_placeholders

logger = logging.getLogger(__name__)

CDATA_END = "]]>"


class SublimeRenderer(BaseRenderer):
    """Render snippet records as Sublime Text snippet documents.

    The body is placed at column 0 inside a CDATA section after
    ``escape_sublime_placeholders``. Trigger and description are inserted
    without XML entity encoding.

    Parameters
    ----------
    options : SublimeRendererOptions or None, default = None
        Sublime Text rendering options

    """

    editor_name = "sublime"

    def __init__(self, options: SublimeRendererOptions | None = None):
        """Initialize the Sublime Text renderer with options."""
        BaseRenderer._validate_options_type(options, SublimeRendererOptions, self.editor_name)
        options = options or SublimeRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: SublimeRendererOptions = options

    def _render(self, record: SnippetRecord) -> str:
        if CDATA_END in record.snippet:
            logger.debug("Snippet %r contains %r, which ends the CDATA section early", record.trigger, CDATA_END)

        if self.options.scope is None:
            scope_lines = list(SUBLIME_SCOPE_HINT_LINES)
        else:
            scope_lines = [f"  <scope>{self.options.scope}</scope>"]

        lines = [
            "<snippet>",
            "  <content><![CDATA[",
            escape_sublime_placeholders(record.snippet),
            "]]></content>",
            f"  <trigger>{record.trigger}</trigger>",
            f"  <description>{record.description}</description>",
            *scope_lines,
            "</snippet>",
        ]
        return "\n".join(lines)


def format_sublime(record: SnippetRecord, options: SublimeRendererOptions | None = None) -> str:
    """Render ``record`` as a Sublime Text snippet document."""
    return SublimeRenderer(options).render_to_string(record)
