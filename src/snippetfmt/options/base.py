#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/snippetfmt/options/base.py
"""Base classes for renderer options.

This module defines the foundation classes for the editor-specific options
accepted by the snippetfmt renderers.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    trailing_newline : bool, default=False
        Append a newline after the rendered snippet. The string renderers
        return output without one; files written by the CLI and by
        ``export_snippets`` turn this on.

    Notes
    -----
    Subclasses define editor-specific options as frozen dataclass fields with
    a ``help`` entry in the field metadata.

    """

    trailing_newline: bool = field(
        default=False,
        metadata={"help": "Append a newline after the rendered snippet", "importance": "advanced"},
    )
