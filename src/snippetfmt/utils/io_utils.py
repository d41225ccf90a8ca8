#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/snippetfmt/utils/io_utils.py
"""I/O helpers for writing rendered snippets.

This module provides the text output writer shared by the API and CLI, and
the file naming used when each snippet is exported to its own file.

"""

from __future__ import annotations

import io
import re
import unicodedata
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from snippetfmt.constants import DEFAULT_EXPORT_STEM

_UNSAFE_FILENAME_CHARS = re.compile(r"[^\w.\-]+")


def write_text(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write text to a path or to a text or binary stream.

    Parameters
    ----------
    content : str
        Text to write; encoded as UTF-8 for paths and binary streams
    output : str, Path, IO[bytes], or IO[str]
        Output destination

    Raises
    ------
    TypeError
        If output type is not supported
    OSError
        If the file cannot be written

    Examples
    --------
        >>> buffer = StringIO()
        >>> write_text("abc", buffer)
        >>> buffer.getvalue()
        'abc'

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
        return

    if hasattr(output, "write"):
        if isinstance(output, BytesIO):
            is_binary_mode = True
        elif isinstance(output, (StringIO, io.TextIOBase)):
            is_binary_mode = False
        elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
            is_binary_mode = True
        else:
            mode = getattr(output, "mode", "")
            is_binary_mode = isinstance(mode, str) and "b" in mode

        if is_binary_mode:
            cast(IO[bytes], output).write(content.encode("utf-8"))
        else:
            cast(IO[str], output).write(content)
        return

    raise TypeError(f"Unsupported output type: {type(output)}")


def export_stem(trigger: str) -> str:
    """Turn a snippet trigger into a safe file stem.

    Path separators, whitespace and other characters outside ``[A-Za-z0-9_.-]``
    collapse to ``-``. Leading dots and dashes are removed so the stem can
    never name a hidden file or climb out of the export directory. An empty
    result falls back to ``"snippet"``.

    Examples
    --------
        >>> export_stem("log")
        'log'
        >>> export_stem("../etc/passwd")
        'etc-passwd'
        >>> export_stem("")
        'snippet'

    """
    normalized = unicodedata.normalize("NFKD", trigger)
    normalized = "".join(char for char in normalized if unicodedata.category(char) != "Mn")
    stem = _UNSAFE_FILENAME_CHARS.sub("-", normalized)
    stem = re.sub(r"-{2,}", "-", stem).strip(".-")
    return stem or DEFAULT_EXPORT_STEM


def make_unique_name(name: str, seen_names: dict[str, int], separator: str = "-") -> str:
    """Append ``-2``, ``-3``... to repeated names.

    Names are compared case-insensitively, so ``Log`` and ``log`` cannot
    overwrite each other on a case-insensitive filesystem. ``seen_names``
    tracks occurrence counts by casefolded name and is mutated in place.

    Examples
    --------
        >>> seen = {}
        >>> make_unique_name("log", seen)
        'log'
        >>> make_unique_name("log", seen)
        'log-2'

    """
    key = name.casefold()
    if key in seen_names:
        seen_names[key] += 1
        return f"{name}{separator}{seen_names[key]}"
    seen_names[key] = 1
    return name


__all__ = ["write_text", "export_stem", "make_unique_name"]
