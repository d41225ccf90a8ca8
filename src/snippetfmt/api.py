#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/snippetfmt/api.py
"""High-level rendering and export API for snippetfmt.

This module ties the renderers, the registry and the interchange format
together behind a few functions that take an output format name:

- ``vscode``, ``atom``, ``sublime``: the editor renderers
- ``vscode-json``: a standalone ``.code-snippets`` JSON document
- ``interchange``: the plain-text import/export format

Examples
--------
Render one record for every editor:

    >>> from snippetfmt import SnippetRecord, render
    >>> record = SnippetRecord(description="Print", trigger="log", snippet="console.log($1);")
    >>> for editor in ("vscode", "atom", "sublime"):
    ...     print(render(record, editor))

Export an interchange file as Sublime Text snippets:

    >>> from snippetfmt import export_snippets, read_interchange_file
    >>> paths = export_snippets(read_interchange_file("snippets.txt"), "sublime", "out/")

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence, Union

from snippetfmt.constants import EXPORT_EXTENSIONS, OUTPUT_FORMATS, EditorName, OutputFormat
from snippetfmt.exceptions import FormatError, OutputWriteError
from snippetfmt.interchange import serialize_all, serialize_one
from snippetfmt.models import SnippetRecord
from snippetfmt.options.base import BaseRendererOptions
from snippetfmt.options.vscode import VSCodeRendererOptions
from snippetfmt.renderer_registry import registry
from snippetfmt.renderers.vscode import VSCodeRenderer
from snippetfmt.utils.io_utils import export_stem, make_unique_name, write_text

logger = logging.getLogger(__name__)


def _check_output_format(output_format: str) -> None:
    if output_format not in OUTPUT_FORMATS:
        raise FormatError(format_name=output_format, supported_formats=list(OUTPUT_FORMATS))


def _export_extension(output_format: str) -> str:
    # Editor formats use the extension their renderer was registered with.
    if output_format in registry.list_editors():
        return registry.get_metadata(output_format).extension
    return EXPORT_EXTENSIONS[output_format]


def render(record: SnippetRecord, editor: EditorName, options: BaseRendererOptions | None = None) -> str:
    """Render one record for the given editor.

    Parameters
    ----------
    record : SnippetRecord
        Snippet to render
    editor : str
        Registered editor name: "vscode", "atom" or "sublime"
    options : BaseRendererOptions, optional
        Options instance matching the editor's renderer

    Returns
    -------
    str
        Snippet definition text

    Raises
    ------
    FormatError
        If the editor is not registered
    InvalidOptionsError
        If the options do not belong to the editor's renderer

    """
    return registry.create_renderer(editor, options).render_to_string(record)


def render_all(
    records: Sequence[SnippetRecord],
    output_format: OutputFormat,
    options: BaseRendererOptions | None = None,
) -> str:
    """Render several records as one text.

    Editor renderings are joined by a blank line. ``vscode-json`` produces a
    single JSON document and ``interchange`` the interchange text.

    Raises
    ------
    FormatError
        If the output format is unknown

    """
    _check_output_format(output_format)
    if output_format == "interchange":
        return serialize_all(records)
    if output_format == "vscode-json":
        return _vscode_renderer(options).render_snippet_file(records)

    renderer = registry.create_renderer(output_format, options)
    return "\n\n".join(renderer.render_to_string(record) for record in records)


def _vscode_renderer(options: BaseRendererOptions | None) -> VSCodeRenderer:
    if options is None or isinstance(options, VSCodeRendererOptions):
        return VSCodeRenderer(options)
    # Carry over the base settings when handed options for another editor.
    return VSCodeRenderer(VSCodeRendererOptions(trailing_newline=options.trailing_newline))


def render_file_content(
    record: SnippetRecord,
    output_format: OutputFormat,
    options: BaseRendererOptions | None = None,
) -> str:
    """Return the content of a single-snippet export file for ``record``.

    Every format ends with a newline: renderer output gets one appended, and
    the interchange format uses ``serialize_one``.
    """
    _check_output_format(output_format)
    if output_format == "interchange":
        return serialize_one(record)

    if options is None:
        options = registry.get_options_class("vscode" if output_format == "vscode-json" else output_format)()
    options = options.create_updated(trailing_newline=True)

    if output_format in ("vscode", "vscode-json"):
        return _vscode_renderer(options).render_snippet_file([record])
    return render(record, output_format, options)


def export_snippets(
    records: Iterable[SnippetRecord],
    output_format: OutputFormat,
    output_dir: Union[str, Path],
    options: BaseRendererOptions | None = None,
) -> list[Path]:
    """Write one export file per record into ``output_dir``.

    Files are named after the record's trigger (``snippet`` when empty) with
    the format's extension; repeated names get ``-2``, ``-3``... suffixes.
    Names are compared case-insensitively.
    VS Code exports are ``.code-snippets`` JSON documents holding one entry.

    Parameters
    ----------
    records : iterable of SnippetRecord
        Snippets to export
    output_format : str
        One of "vscode", "vscode-json", "atom", "sublime", "interchange"
    output_dir : str or Path
        Directory to write into; created if missing
    options : BaseRendererOptions, optional
        Renderer options

    Returns
    -------
    list[Path]
        Paths of the written files, in record order

    Raises
    ------
    FormatError
        If the output format is unknown
    OutputWriteError
        If a file cannot be written

    """
    _check_output_format(output_format)
    extension = _export_extension(output_format)
    directory = Path(output_dir)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(str(directory), original_error=e) from e

    seen_names: dict[str, int] = {}
    used_names: set[str] = set()
    written: list[Path] = []
    for record in records:
        name = make_unique_name(export_stem(record.trigger), seen_names)
        while name.casefold() in used_names:
            name = make_unique_name(name, seen_names)
        used_names.add(name.casefold())

        path = directory / f"{name}{extension}"
        try:
            write_text(render_file_content(record, output_format, options), path)
        except OSError as e:
            raise OutputWriteError(str(path), original_error=e) from e
        logger.debug("Wrote %s", path)
        written.append(path)

    logger.info("Exported %d snippet(s) to %s", len(written), directory)
    return written


__all__ = ["render", "render_all", "render_file_content", "export_snippets"]
