#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/snippetfmt/models.py
"""Snippet data model.

``SnippetRecord`` is the value passed to every formatter and produced by the
interchange parser. ``SnippetBlockList`` holds the editable, numbered blocks
the CLI works with; formatters never see block ids.

Examples
--------
    >>> from snippetfmt.models import SnippetBlockList, SnippetRecord
    >>> blocks = SnippetBlockList()
    >>> blocks.update_block(1, "trigger", "log")
    >>> _ = blocks.add_blocks(2)
    >>> [block.id for block in blocks]
    [1, 2, 3]

"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Iterable, Iterator, Mapping

from snippetfmt.constants import SNIPPET_FIELDS, SnippetField
from snippetfmt.exceptions import ValidationError


def _coerce_field(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class SnippetRecord:
    """A user-authored snippet.

    Parameters
    ----------
    description : str
        Free-form human label
    trigger : str
        Abbreviation typed to expand the snippet
    snippet : str
        Body text; may contain newlines and placeholder syntax such as ``$1``

    """

    description: str = ""
    trigger: str = ""
    snippet: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SnippetRecord:
        """Build a record from a mapping, defaulting missing fields to ``""``."""
        return cls(**{name: _coerce_field(data.get(name)) for name in SNIPPET_FIELDS})

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    @property
    def is_empty(self) -> bool:
        """True when description, trigger and snippet are all empty."""
        return not (self.description or self.trigger or self.snippet)


@dataclass(frozen=True)
class SnippetBlock:
    """A numbered, editable snippet held by a ``SnippetBlockList``."""

    id: int
    description: str = ""
    trigger: str = ""
    snippet: str = ""

    def to_record(self) -> SnippetRecord:
        return SnippetRecord(description=self.description, trigger=self.trigger, snippet=self.snippet)


class SnippetBlockList:
    """Ordered collection of snippet blocks keyed by a monotonically assigned id.

    New ids are always one greater than the largest id currently held, so ids
    removed from the end of the list can be handed out again while ids in the
    middle never collide.

    Parameters
    ----------
    blocks : iterable of SnippetBlock, optional
        Initial blocks. When omitted the list starts with one empty block
        whose id is 1.

    """

    def __init__(self, blocks: Iterable[SnippetBlock] | None = None):
        """Initialize the list with the given blocks or a single empty block."""
        self._blocks: list[SnippetBlock] = list(blocks) if blocks is not None else [SnippetBlock(id=1)]

    def __iter__(self) -> Iterator[SnippetBlock]:
        return iter(self._blocks)

    def __len__(self) -> int:
        return len(self._blocks)

    def _next_id(self) -> int:
        return max((block.id for block in self._blocks), default=0) + 1

    def get(self, block_id: int) -> SnippetBlock | None:
        for block in self._blocks:
            if block.id == block_id:
                return block
        return None

    def add_blocks(self, count: int) -> list[SnippetBlock]:
        """Append ``count`` empty blocks and return them."""
        if count < 0:
            raise ValidationError(f"count must be non-negative, got {count}", parameter_name="count", parameter_value=count)
        first_id = self._next_id()
        new_blocks = [SnippetBlock(id=first_id + index) for index in range(count)]
        self._blocks.extend(new_blocks)
        return new_blocks

    def remove_block(self, block_id: int) -> None:
        self._blocks = [block for block in self._blocks if block.id != block_id]

    def update_block(self, block_id: int, field: SnippetField, value: str) -> None:
        """Replace one text field of the block with ``block_id``.

        Raises
        ------
        ValidationError
            If ``field`` is not one of description, trigger or snippet

        """
        if field not in SNIPPET_FIELDS:
            raise ValidationError(
                f"Unknown snippet field '{field}'. Expected one of: {', '.join(SNIPPET_FIELDS)}",
                parameter_name="field",
                parameter_value=field,
            )
        self._blocks = [replace(block, **{field: value}) if block.id == block_id else block for block in self._blocks]

    def truncate(self, target_count: int) -> None:
        """Keep only the first ``target_count`` blocks."""
        self._blocks = self._blocks[: max(target_count, 0)]

    def resize(self, count: int) -> None:
        """Grow or shrink the list to exactly ``count`` blocks."""
        if count > len(self._blocks):
            self.add_blocks(count - len(self._blocks))
        else:
            self.truncate(count)

    def import_records(self, records: Iterable[SnippetRecord]) -> list[SnippetBlock]:
        """Append records as new blocks with fresh ids."""
        first_id = self._next_id()
        new_blocks = [
            SnippetBlock(id=first_id + index, description=r.description, trigger=r.trigger, snippet=r.snippet)
            for index, r in enumerate(records)
        ]
        self._blocks.extend(new_blocks)
        return new_blocks

    def records(self) -> list[SnippetRecord]:
        return [block.to_record() for block in self._blocks]
