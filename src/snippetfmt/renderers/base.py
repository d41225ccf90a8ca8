#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/snippetfmt/renderers/base.py
"""Base class for snippet renderers.

This module defines the abstract base class every editor renderer inherits
from. A renderer turns one ``SnippetRecord`` into the text of a snippet
definition for its editor.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from snippetfmt.exceptions import InvalidOptionsError
from snippetfmt.models import SnippetRecord
from snippetfmt.options.base import BaseRendererOptions
from snippetfmt.utils.io_utils import write_text


class BaseRenderer(ABC):
    """Abstract base class for all snippet renderers.

    Renderers are pure: ``render_to_string`` depends only on the record and
    the options, never mutates the record and never raises for any string
    content.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Editor-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> from snippetfmt.renderers.base import BaseRenderer
        >>>
        >>> class TriggerOnlyRenderer(BaseRenderer):
        ...     editor_name = "trigger-only"
        ...
        ...     def _render(self, record):
        ...         return record.trigger

    """

    editor_name: str = ""

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options or BaseRendererOptions()

    @abstractmethod
    def _render(self, record: SnippetRecord) -> str:
        """Build the snippet text for ``record`` without a trailing newline."""

    def render_to_string(self, record: SnippetRecord) -> str:
        """Render a snippet record to a string.

        Parameters
        ----------
        record : SnippetRecord
            Snippet to render

        Returns
        -------
        str
            Snippet definition in the renderer's editor syntax

        """
        text = self._render(record)
        if self.options.trailing_newline:
            text += "\n"
        return text

    def render(self, record: SnippetRecord, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render a snippet record and write it to ``output``.

        Parameters
        ----------
        record : SnippetRecord
            Snippet to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        Raises
        ------
        OSError
            If output cannot be written

        """
        write_text(self.render_to_string(record), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
