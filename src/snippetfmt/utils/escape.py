#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/snippetfmt/utils/escape.py
"""Editor-specific text escaping utilities.

Each target editor reads snippet bodies with its own quoting rules. These
helpers apply exactly the escaping each renderer needs and nothing more;
descriptions and triggers are never escaped.

"""

from __future__ import annotations

import re

# "$", then letters or "(", then one character that is not "$".
# ASCII-only so that case folding does not pull in characters like U+212A.
SUBLIME_PLACEHOLDER_PATTERN = re.compile(r"(\$)([a-z(]+)([^$])", re.IGNORECASE | re.ASCII)


def escape_json_string(text: str) -> str:
    r"""Escape text for use inside a double-quoted JSON string.

    Backslashes are doubled before quotes are escaped, so the backslash added
    in front of a quote is not doubled again. Newlines are left alone; the
    VS Code renderer splits on them before quoting each line.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_json_string('say "hi"')
        'say \\"hi\\"'
        >>> escape_json_string('\\"')
        '\\\\\\"'

    """
    if not text:
        return text

    result = text.replace("\\", "\\\\")
    result = result.replace('"', '\\"')
    return result


def escape_sublime_placeholders(text: str) -> str:
    r"""Neutralise ``$VAR`` and ``$(...)`` sequences for a Sublime Text snippet.

    A backslash is inserted before every ``$`` that is followed by one or
    more letters or an opening parenthesis and then a character other than
    ``$``. Numbered tab stops such as ``$1`` and ``${1:name}`` are untouched.

    Parameters
    ----------
    text : str
        Snippet body

    Returns
    -------
    str
        Body safe to place inside the snippet's CDATA section

    Examples
    --------
        >>> escape_sublime_placeholders("echo $HOME")
        'echo \\$HOME'
        >>> escape_sublime_placeholders("$(pwd) $1")
        '\\$(pwd) $1'

    """
    if not text:
        return text

    return SUBLIME_PLACEHOLDER_PATTERN.sub(r"\\\1\2\3", text)


def indent_lines(text: str, prefix: str) -> str:
    """Prefix every line of ``text`` (blank lines included) with ``prefix``."""
    return "\n".join(prefix + line for line in text.split("\n"))
