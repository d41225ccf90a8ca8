#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/snippetfmt/options/vscode.py
"""Options for VS Code snippet rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from snippetfmt.constants import VSCODE_DEFAULT_JSON_INDENT, VSCODE_UNTITLED_KEY
from snippetfmt.options.base import BaseRendererOptions


@dataclass(frozen=True)
class VSCodeRendererOptions(BaseRendererOptions):
    """Configuration options for VS Code snippet rendering.

    The snippet-fragment output of ``VSCodeRenderer.render_to_string`` has a
    fixed layout; these options only affect the standalone ``.code-snippets``
    JSON document built by ``VSCodeRenderer.render_snippet_file``.

    Parameters
    ----------
    json_indent : int, default = 2
        Indentation passed to ``json.dumps`` for the snippet file.
    untitled_key : str, default = "untitled"
        Key used in the snippet file for records without a trigger.

    """

    json_indent: int = field(
        default=VSCODE_DEFAULT_JSON_INDENT,
        metadata={"help": "Indentation of the .code-snippets JSON document", "type": int, "importance": "core"},
    )
    untitled_key: str = field(
        default=VSCODE_UNTITLED_KEY,
        metadata={"help": "Snippet file key for records without a trigger", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate value types and ranges.

        Raises
        ------
        ValueError
            If ``json_indent`` is not a non-negative integer or
            ``untitled_key`` is not a non-empty string.

        """
        if not isinstance(self.json_indent, int) or isinstance(self.json_indent, bool):
            raise ValueError(f"json_indent must be an integer, got {type(self.json_indent).__name__}")
        if self.json_indent < 0:
            raise ValueError(f"json_indent must be non-negative, got {self.json_indent}")
        if not isinstance(self.untitled_key, str) or not self.untitled_key:
            raise ValueError("untitled_key must be a non-empty string")
