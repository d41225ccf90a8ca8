"""Terminal output helpers for the snippetfmt CLI."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/snippetfmt/cli/output.py
import sys
from typing import IO, Iterable, Sequence

from snippetfmt.models import SnippetBlock

SYNTAX_LEXERS = {
    "vscode": "json",
    "vscode-json": "json",
    "atom": "coffeescript",
    "sublime": "xml",
    "interchange": "text",
}


def should_use_rich_output(rich_flag: bool, stream: IO[str] | None = None) -> bool:
    """Use Rich only when it was requested and the stream is a terminal."""
    if not rich_flag:
        return False

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def _first_line(text: str, width: int = 40) -> str:
    line = text.split("\n", 1)[0]
    if len(line) > width:
        line = line[: width - 1] + "…"
    if "\n" in text:
        line += " ⏎"
    return line


def print_rendered(sections: Sequence[tuple[str, str]], output_format: str, use_rich: bool) -> None:
    """Print rendered snippets, one section per snippet.

    Parameters
    ----------
    sections : sequence of (title, text)
        Panel title and rendered text for each snippet
    output_format : str
        Output format name, used to pick a syntax lexer
    use_rich : bool
        Draw each section in a Rich panel with syntax highlighting

    """
    if not use_rich:
        print("\n\n".join(text.rstrip("\n") for _title, text in sections))
        return

    from rich.console import Console
    from rich.panel import Panel
    from rich.syntax import Syntax
    from rich.text import Text

    console = Console()
    lexer = SYNTAX_LEXERS.get(output_format, "text")
    for title, text in sections:
        console.print(Panel(Syntax(text.rstrip("\n"), lexer, word_wrap=True), title=Text(title), expand=False))


def print_block_table(blocks: Iterable[SnippetBlock], use_rich: bool) -> None:
    """Print one row per block: id, trigger, description and first body line."""
    rows = [(str(block.id), block.trigger, block.description, _first_line(block.snippet)) for block in blocks]

    if not use_rich:
        for row in rows:
            print("\t".join(row))
        return

    from rich.console import Console
    from rich.table import Table
    from rich.text import Text

    table = Table(title="Snippets")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Trigger", style="cyan")
    table.add_column("Description")
    table.add_column("Snippet", style="green")
    for row in rows:
        table.add_row(*(Text(cell) for cell in row))
    Console().print(table)
