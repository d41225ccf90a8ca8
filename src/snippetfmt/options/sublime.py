#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/snippetfmt/options/sublime.py
"""Options for Sublime Text snippet rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from snippetfmt.options.base import BaseRendererOptions


@dataclass(frozen=True)
class SublimeRendererOptions(BaseRendererOptions):
    """Configuration options for Sublime Text snippet rendering.

    Parameters
    ----------
    scope : str or None, default = None
        Scope selector limiting where the snippet triggers (for example
        ``"source.python"``). When None, the output carries the commented
        scope hint instead of a ``<scope>`` element.

    """

    scope: str | None = field(
        default=None,
        metadata={"help": "Scope selector such as source.python", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Reject blank scope selectors.

        Raises
        ------
        ValueError
            If ``scope`` is not a string, or is empty or whitespace-only.

        """
        if self.scope is not None and not isinstance(self.scope, str):
            raise ValueError(f"scope must be a string, got {type(self.scope).__name__}")
        if self.scope is not None and not self.scope.strip():
            raise ValueError("scope must be a non-empty selector or None")
