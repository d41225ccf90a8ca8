#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the snippetfmt renderers.

Each renderer accepts a frozen options dataclass. The Atom renderer has no
editor-specific settings and takes ``BaseRendererOptions`` directly.
"""

from snippetfmt.options.base import BaseRendererOptions, CloneFrozenMixin
from snippetfmt.options.sublime import SublimeRendererOptions
from snippetfmt.options.vscode import VSCodeRendererOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "SublimeRendererOptions",
    "VSCodeRendererOptions",
]
