#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/snippetfmt/interchange.py
"""Plain-text interchange format for bulk snippet import and export.

An interchange file holds one record per paragraph, each written as three
``key: value`` lines in a fixed order, with a single blank line between
records and a newline at the end of the file:

.. code-block:: text

    description: Print to console
    trigger: log
    snippet: console.log($1);

    description: Import module
    trigger: imp
    snippet: import $1 from '$2';

Limitations
-----------
Every field must fit on one line. ``serialize_all`` writes a multi-line
snippet verbatim, so the continuation lines land in the file as extra lines
of the record. ``parse_all`` ignores continuation lines that carry no colon,
treats ones that do as ``key: value`` pairs, and splits the record in two
wherever the body has a blank line. Values are stripped of surrounding
whitespace on import. Colons inside a value are safe: only the first colon
on a line separates the key.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Iterable, Union

from snippetfmt.constants import (
    INTERCHANGE_KEY_SEPARATOR,
    INTERCHANGE_LINE_SEPARATOR,
    INTERCHANGE_RECORD_SEPARATOR,
    SNIPPET_FIELDS,
)
from snippetfmt.exceptions import InterchangeFileError, OutputWriteError
from snippetfmt.models import SnippetRecord
from snippetfmt.utils.io_utils import write_text

logger = logging.getLogger(__name__)

UTF8_BOM = "\ufeff"


def _record_lines(record: SnippetRecord) -> list[str]:
    lines = []
    for name in SNIPPET_FIELDS:
        value = getattr(record, name)
        if INTERCHANGE_LINE_SEPARATOR in value:
            logger.debug("Field %r of snippet %r spans several lines and will not import cleanly", name, record.trigger)
        lines.append(f"{name}{INTERCHANGE_KEY_SEPARATOR} {value}")
    return lines


def serialize_one(record: SnippetRecord) -> str:
    """Serialize a single record, followed by a newline.

    Examples
    --------
        >>> serialize_one(SnippetRecord("a", "b", "c"))
        'description: a\\ntrigger: b\\nsnippet: c\\n'

    """
    return INTERCHANGE_LINE_SEPARATOR.join([*_record_lines(record), ""])


def serialize_all(records: Iterable[SnippetRecord]) -> str:
    """Serialize records separated by blank lines, with a final newline.

    Examples
    --------
        >>> serialize_all([SnippetRecord("a", "b", "c"), SnippetRecord("d", "e", "f")])
        'description: a\\ntrigger: b\\nsnippet: c\\n\\ndescription: d\\ntrigger: e\\nsnippet: f\\n'

    """
    blocks = [INTERCHANGE_LINE_SEPARATOR.join(_record_lines(record)) for record in records]
    return INTERCHANGE_RECORD_SEPARATOR.join(blocks) + INTERCHANGE_LINE_SEPARATOR


def _parse_chunk(chunk: str) -> SnippetRecord:
    fields: dict[str, str] = {}
    for line in chunk.split(INTERCHANGE_LINE_SEPARATOR):
        key, separator, value = line.partition(INTERCHANGE_KEY_SEPARATOR)
        if not key or not separator:
            continue
        fields[key.strip()] = value.strip()
    return SnippetRecord.from_mapping(fields)


def parse_all(text: str) -> list[SnippetRecord]:
    """Parse interchange text into snippet records.

    The text is split into chunks on blank lines. In each chunk, every line
    containing a colon contributes a key (before the first colon) and a
    value (after it), both stripped; a repeated key keeps its last value.
    Missing fields default to the empty string, and chunks that yield no
    description, trigger or snippet are dropped. Never raises.

    Parameters
    ----------
    text : str
        Interchange text with ``\\n`` line endings

    Returns
    -------
    list[SnippetRecord]
        Parsed records in file order

    """
    records = [_parse_chunk(chunk) for chunk in text.split(INTERCHANGE_RECORD_SEPARATOR)]
    return [record for record in records if not record.is_empty]


def read_interchange_file(source: Union[str, Path, IO[str]]) -> list[SnippetRecord]:
    """Read and parse an interchange file.

    Files are decoded as UTF-8 with universal newlines, so files saved with
    Windows line endings parse the same as Unix ones. A leading byte-order
    mark is dropped and undecodable bytes become U+FFFD.

    Parameters
    ----------
    source : str, Path, or IO[str]
        Path to the file, or an open text stream

    Returns
    -------
    list[SnippetRecord]
        Parsed records

    Raises
    ------
    InterchangeFileError
        If the file cannot be opened

    """
    if hasattr(source, "read"):
        text = source.read().removeprefix(UTF8_BOM)  # type: ignore[union-attr]
        name = getattr(source, "name", "<stream>")
    else:
        name = str(source)
        try:
            with open(source, "r", encoding="utf-8-sig", errors="replace") as f:  # type: ignore[arg-type]
                text = f.read()
        except OSError as e:
            raise InterchangeFileError(name, original_error=e) from e

    records = parse_all(text)
    logger.info("Imported %d snippet(s) from %s", len(records), name)
    return records


def write_interchange_file(records: Iterable[SnippetRecord], output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Serialize ``records`` with ``serialize_all`` and write them to ``output``.

    Raises
    ------
    OutputWriteError
        If the file cannot be written

    """
    try:
        write_text(serialize_all(records), output)
    except OSError as e:
        raise OutputWriteError(str(output), original_error=e) from e


__all__ = [
    "serialize_one",
    "serialize_all",
    "parse_all",
    "read_interchange_file",
    "write_interchange_file",
]
