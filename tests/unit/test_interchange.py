#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_interchange.py
"""Unit tests for the interchange text format.

Tests cover:
- Serialization layout
- Parsing of well-formed and odd input
- Round trips
- File reading and writing
- Documented limitations for multi-line snippets

"""

from io import StringIO

import pytest

from snippetfmt.exceptions import InterchangeFileError
from snippetfmt.interchange import (
    parse_all,
    read_interchange_file,
    serialize_all,
    serialize_one,
    write_interchange_file,
)
from snippetfmt.models import SnippetRecord


@pytest.mark.unit
class TestSerialize:
    """Tests for serialize_one and serialize_all."""

    def test_serialize_one(self, simple_record: SnippetRecord) -> None:
        """Test the three-line layout with a trailing newline."""
        assert serialize_one(simple_record) == "description: a\ntrigger: b\nsnippet: c\n"

    def test_serialize_all(self) -> None:
        """Test that records are separated by one blank line."""
        records = [SnippetRecord("a", "b", "c"), SnippetRecord("d", "e", "f")]
        expected = "description: a\ntrigger: b\nsnippet: c\n\ndescription: d\ntrigger: e\nsnippet: f\n"
        assert serialize_all(records) == expected

    def test_serialize_all_empty_list(self) -> None:
        """Test that no records yields a lone newline."""
        assert serialize_all([]) == "\n"

    def test_empty_fields(self) -> None:
        """Test that empty fields keep the space after the colon."""
        assert serialize_one(SnippetRecord()) == "description: \ntrigger: \nsnippet: \n"

    def test_multiline_snippet_written_verbatim(self) -> None:
        """Test that embedded newlines are not escaped."""
        record = SnippetRecord("d", "t", "line1\nline2")
        assert serialize_one(record) == "description: d\ntrigger: t\nsnippet: line1\nline2\n"


@pytest.mark.unit
class TestParse:
    """Tests for parse_all."""

    def test_parse_simple(self) -> None:
        """Test parsing two records."""
        text = "description: a\ntrigger: b\nsnippet: c\n\ndescription: d\ntrigger: e\nsnippet: f\n"
        assert parse_all(text) == [SnippetRecord("a", "b", "c"), SnippetRecord("d", "e", "f")]

    def test_values_are_stripped(self) -> None:
        """Test that keys and values are trimmed."""
        assert parse_all("  trigger :   log   \n") == [SnippetRecord(trigger="log")]

    def test_value_keeps_later_colons(self) -> None:
        """Test that only the first colon separates key and value."""
        records = parse_all("description: a: b\ntrigger: t\nsnippet: x = {'k': 1}\n")
        assert records == [SnippetRecord("a: b", "t", "x = {'k': 1}")]

    def test_missing_fields_default_to_empty(self) -> None:
        """Test that absent keys become empty strings."""
        assert parse_all("snippet: only body") == [SnippetRecord(snippet="only body")]

    def test_field_order_does_not_matter(self) -> None:
        """Test keys in any order."""
        assert parse_all("snippet: s\ndescription: d\ntrigger: t") == [SnippetRecord("d", "t", "s")]

    def test_duplicate_key_last_wins(self) -> None:
        """Test that a repeated key keeps its last value."""
        assert parse_all("trigger: one\ntrigger: two") == [SnippetRecord(trigger="two")]

    def test_unknown_keys_ignored(self) -> None:
        """Test that extra keys do not leak into records."""
        assert parse_all("scope: source.python\ntrigger: t") == [SnippetRecord(trigger="t")]

    def test_lines_without_colon_ignored(self) -> None:
        """Test that free text lines are skipped."""
        assert parse_all("just text\ntrigger: t") == [SnippetRecord(trigger="t")]

    def test_line_starting_with_colon_ignored(self) -> None:
        """Test that a line with an empty key is skipped."""
        assert parse_all(": value\ntrigger: t") == [SnippetRecord(trigger="t")]

    def test_blank_chunks_dropped(self) -> None:
        """Test that chunks of blank lines produce no record."""
        assert parse_all("\n\n\n\n\n") == []

    def test_chunk_with_empty_values_dropped(self) -> None:
        """Test that a chunk whose fields are all empty is dropped."""
        assert parse_all("description: \ntrigger:\nsnippet:   \n\ntrigger: t") == [SnippetRecord(trigger="t")]

    def test_empty_text(self) -> None:
        """Test that empty input yields no records."""
        assert parse_all("") == []

    def test_garbage_never_raises(self) -> None:
        """Test that arbitrary text parses without error."""
        assert parse_all("<<<>>>\x00\r\n:::") == []

    def test_extra_blank_lines_between_records(self) -> None:
        """Test that additional blank lines between records are tolerated."""
        text = "trigger: a\n\n\n\ntrigger: b\n"
        assert parse_all(text) == [SnippetRecord(trigger="a"), SnippetRecord(trigger="b")]


@pytest.mark.unit
class TestRoundTrip:
    """Tests for serialize/parse round trips."""

    def test_serialize_all_round_trip(self, sample_records: list[SnippetRecord]) -> None:
        """Test that single-line records survive a round trip."""
        assert parse_all(serialize_all(sample_records)) == sample_records

    def test_serialize_one_round_trip(self, simple_record: SnippetRecord) -> None:
        """Test that serialize_one output parses to the single record."""
        assert parse_all(serialize_one(simple_record)) == [simple_record]

    def test_concatenated_serialize_one(self, sample_records: list[SnippetRecord]) -> None:
        """Test that single-record exports joined by blank lines import together."""
        text = "\n".join(serialize_one(record) for record in sample_records)
        assert parse_all(text) == sample_records


@pytest.mark.unit
class TestMultilineLimitation:
    """Multi-line snippets do not survive the interchange format."""

    def test_continuation_lines_without_colon_dropped(self) -> None:
        """Test that only the first body line is imported."""
        record = SnippetRecord("d", "t", "line1\nline2")
        assert parse_all(serialize_all([record])) == [SnippetRecord("d", "t", "line1")]

    def test_continuation_line_with_colon_becomes_key(self) -> None:
        """Test that a body line such as 'trigger: x' overrides the field."""
        record = SnippetRecord("d", "t", "first\ntrigger: hijacked")
        assert parse_all(serialize_all([record])) == [SnippetRecord("d", "hijacked", "first")]

    def test_blank_line_in_body_splits_record(self) -> None:
        """Test that a blank line in the body starts a new chunk."""
        record = SnippetRecord("d", "t", "top\n\nbottom: 1")
        assert parse_all(serialize_all([record])) == [
            SnippetRecord("d", "t", "top"),
        ]

    def test_blank_line_with_key_in_second_chunk(self) -> None:
        """Test that the tail chunk becomes its own record when it has a known key."""
        record = SnippetRecord("d", "t", "top\n\nsnippet: tail")
        assert parse_all(serialize_all([record])) == [SnippetRecord("d", "t", "top"), SnippetRecord(snippet="tail")]


@pytest.mark.unit
class TestInterchangeFiles:
    """Tests for reading and writing interchange files."""

    def test_write_then_read(self, tmp_path, sample_records: list[SnippetRecord]) -> None:
        """Test a file round trip."""
        path = tmp_path / "snippets.txt"
        write_interchange_file(sample_records, path)
        assert path.read_text(encoding="utf-8").endswith("\n")
        assert read_interchange_file(path) == sample_records

    def test_crlf_file(self, tmp_path, sample_records: list[SnippetRecord]) -> None:
        """Test that Windows line endings parse like Unix ones."""
        path = tmp_path / "windows.txt"
        path.write_bytes(serialize_all(sample_records).replace("\n", "\r\n").encode("utf-8"))
        assert read_interchange_file(path) == sample_records

    def test_read_from_stream(self, sample_records: list[SnippetRecord]) -> None:
        """Test reading from an open text stream."""
        assert read_interchange_file(StringIO(serialize_all(sample_records))) == sample_records

    def test_missing_file(self, tmp_path) -> None:
        """Test that a missing file raises InterchangeFileError."""
        with pytest.raises(InterchangeFileError) as exc_info:
            read_interchange_file(tmp_path / "missing.txt")
        assert exc_info.value.file_path == str(tmp_path / "missing.txt")
        assert isinstance(exc_info.value.original_error, OSError)

    def test_undecodable_bytes_replaced(self, tmp_path) -> None:
        """Test that invalid UTF-8 is decoded with replacement characters."""
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"trigger: caf\xe9\n")
        assert read_interchange_file(path) == [SnippetRecord(trigger="caf\ufffd")]

    def test_byte_order_mark_dropped(self, tmp_path) -> None:
        """Test that a UTF-8 BOM does not hide the first key."""
        path = tmp_path / "bom.txt"
        path.write_bytes(b"\xef\xbb\xbfdescription: a\ntrigger: b\nsnippet: c\n")
        assert read_interchange_file(path) == [SnippetRecord("a", "b", "c")]

    def test_byte_order_mark_in_stream(self) -> None:
        """Test that a BOM at the start of a text stream is dropped."""
        stream = StringIO("\ufeffdescription: a\ntrigger: b\nsnippet: c\n")
        assert read_interchange_file(stream) == [SnippetRecord("a", "b", "c")]
