#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/snippetfmt/renderer_registry.py
"""Renderer registry mapping editor names to renderer classes.

This module implements a small registry so the API and CLI can look renderers
up by editor name (``vscode``, ``atom``, ``sublime``) and find the options
class and export file extension that go with each.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List

from snippetfmt.constants import EXPORT_EXTENSIONS
from snippetfmt.exceptions import FormatError
from snippetfmt.options.base import BaseRendererOptions
from snippetfmt.options.sublime import SublimeRendererOptions
from snippetfmt.options.vscode import VSCodeRendererOptions
from snippetfmt.renderers.atom import AtomRenderer
from snippetfmt.renderers.base import BaseRenderer
from snippetfmt.renderers.sublime import SublimeRenderer
from snippetfmt.renderers.vscode import VSCodeRenderer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RendererMetadata:
    """Registration record for one editor renderer.

    Parameters
    ----------
    editor_name : str
        Unique key for the editor (e.g., "vscode")
    display_name : str
        Human-readable editor name
    renderer_class : type
        ``BaseRenderer`` subclass
    options_class : type
        Options dataclass accepted by the renderer
    extension : str
        Extension of a single-snippet export file, including the dot

    """

    editor_name: str
    display_name: str
    renderer_class: type[BaseRenderer]
    options_class: type[BaseRendererOptions]
    extension: str


class RendererRegistry:
    """Registry of snippet renderers keyed by editor name."""

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._renderers: Dict[str, RendererMetadata] = {}

    def register(self, metadata: RendererMetadata) -> None:
        """Register a renderer, replacing any previous one for the same editor."""
        if metadata.editor_name in self._renderers:
            logger.debug(f"Replacing renderer for '{metadata.editor_name}'")
        self._renderers[metadata.editor_name] = metadata

    def unregister(self, editor_name: str) -> bool:
        """Remove a renderer. Returns False when nothing was registered."""
        return self._renderers.pop(editor_name, None) is not None

    def get_metadata(self, editor_name: str) -> RendererMetadata:
        """Return the registration record for ``editor_name``.

        Raises
        ------
        FormatError
            If no renderer is registered for the editor

        """
        try:
            return self._renderers[editor_name]
        except KeyError:
            raise FormatError(format_name=editor_name, supported_formats=self.list_editors()) from None

    def get_renderer(self, editor_name: str) -> type[BaseRenderer]:
        return self.get_metadata(editor_name).renderer_class

    def get_options_class(self, editor_name: str) -> type[BaseRendererOptions]:
        return self.get_metadata(editor_name).options_class

    def create_renderer(self, editor_name: str, options: BaseRendererOptions | None = None) -> BaseRenderer:
        """Instantiate the renderer for ``editor_name`` with ``options``."""
        renderer_class = self.get_renderer(editor_name)
        return renderer_class(options)  # type: ignore[call-arg]

    def list_editors(self) -> List[str]:
        return list(self._renderers)


registry = RendererRegistry()
registry.register(
    RendererMetadata(
        editor_name="vscode",
        display_name="Visual Studio Code",
        renderer_class=VSCodeRenderer,
        options_class=VSCodeRendererOptions,
        extension=EXPORT_EXTENSIONS["vscode"],
    )
)
registry.register(
    RendererMetadata(
        editor_name="atom",
        display_name="Atom",
        renderer_class=AtomRenderer,
        options_class=BaseRendererOptions,
        extension=EXPORT_EXTENSIONS["atom"],
    )
)
registry.register(
    RendererMetadata(
        editor_name="sublime",
        display_name="Sublime Text",
        renderer_class=SublimeRenderer,
        options_class=SublimeRendererOptions,
        extension=EXPORT_EXTENSIONS["sublime"],
    )
)

__all__ = ["RendererMetadata", "RendererRegistry", "registry"]
