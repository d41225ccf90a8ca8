#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/snippetfmt/renderers/__init__.py
"""Renderers for converting snippet records to editor snippet definitions.

Available renderers:
- VSCodeRenderer: VS Code snippet entry (JSON member with a body array)
- AtomRenderer: Atom ``snippets.cson`` entry
- SublimeRenderer: Sublime Text ``.sublime-snippet`` XML document

Each module also exposes a ``format_<editor>`` convenience function that
renders with default options.

Examples
--------
    >>> from snippetfmt.models import SnippetRecord
    >>> from snippetfmt.renderers import format_atom
    >>> print(format_atom(SnippetRecord("a", "b", "c")))
    'a':
      'prefix': 'b'
      'body': \"\"\"
        c
      \"\"\"

"""

from snippetfmt.renderers.atom import AtomRenderer, format_atom
from snippetfmt.renderers.base import BaseRenderer
from snippetfmt.renderers.sublime import SublimeRenderer, format_sublime
from snippetfmt.renderers.vscode import VSCodeRenderer, build_vscode_snippet_file, format_vscode

__all__ = [
    "BaseRenderer",
    "AtomRenderer",
    "SublimeRenderer",
    "VSCodeRenderer",
    "build_vscode_snippet_file",
    "format_atom",
    "format_sublime",
    "format_vscode",
]
