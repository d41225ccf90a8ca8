#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_api.py
"""Unit tests for the high-level rendering and export functions."""

import json

import pytest

from snippetfmt import render, render_all
from snippetfmt.api import export_snippets, render_file_content
from snippetfmt.exceptions import FormatError, OutputWriteError
from snippetfmt.models import SnippetRecord
from snippetfmt.options import BaseRendererOptions, SublimeRendererOptions, VSCodeRendererOptions
from snippetfmt.renderer_registry import RendererMetadata, RendererRegistry
from snippetfmt.renderers import AtomRenderer, format_atom, format_sublime, format_vscode


@pytest.mark.unit
class TestRender:
    """Tests for render and render_all."""

    def test_render_matches_formatters(self, simple_record: SnippetRecord) -> None:
        """Test that render delegates to each editor's formatter."""
        assert render(simple_record, "vscode") == format_vscode(simple_record)
        assert render(simple_record, "atom") == format_atom(simple_record)
        assert render(simple_record, "sublime") == format_sublime(simple_record)

    def test_render_unknown_editor(self, simple_record: SnippetRecord) -> None:
        """Test that an unknown editor raises FormatError."""
        with pytest.raises(FormatError):
            render(simple_record, "vim")

    def test_render_all_joins_with_blank_line(self, sample_records: list[SnippetRecord]) -> None:
        """Test that editor renderings are separated by one blank line."""
        expected = "\n\n".join(format_atom(record) for record in sample_records)
        assert render_all(sample_records, "atom") == expected

    def test_render_all_interchange(self, sample_records: list[SnippetRecord]) -> None:
        """Test the interchange output format."""
        output = render_all(sample_records, "interchange")
        assert output.startswith("description: Print to console\ntrigger: log\n")
        assert output.endswith("\n")

    def test_render_all_vscode_json(self, sample_records: list[SnippetRecord]) -> None:
        """Test that vscode-json yields one parseable document."""
        document = json.loads(render_all(sample_records, "vscode-json"))
        assert list(document) == ["log", "imp", "home"]

    def test_render_all_vscode_json_accepts_base_options(self, sample_records: list[SnippetRecord]) -> None:
        """Test that options for another editor do not break vscode-json."""
        output = render_all(sample_records, "vscode-json", BaseRendererOptions(trailing_newline=True))
        assert output.endswith("}\n")

    def test_render_all_unknown_format(self) -> None:
        """Test that an unknown output format raises FormatError."""
        with pytest.raises(FormatError) as exc_info:
            render_all([], "textmate")
        assert "interchange" in exc_info.value.supported_formats

    def test_render_all_empty(self) -> None:
        """Test rendering no records."""
        assert render_all([], "sublime") == ""


@pytest.mark.unit
class TestRenderFileContent:
    """Tests for single-snippet export file content."""

    @pytest.mark.parametrize("output_format", ["vscode", "vscode-json", "atom", "sublime", "interchange"])
    def test_ends_with_newline(self, simple_record: SnippetRecord, output_format: str) -> None:
        """Test that every export file ends with exactly one newline."""
        content = render_file_content(simple_record, output_format)
        assert content.endswith("\n")
        assert not content.endswith("\n\n")

    def test_vscode_is_snippet_document(self, simple_record: SnippetRecord) -> None:
        """Test that VS Code exports are keyed by trigger."""
        document = json.loads(render_file_content(simple_record, "vscode"))
        assert document == {"b": {"prefix": "b", "body": ["c"], "description": "a"}}

    def test_vscode_json_indent(self, simple_record: SnippetRecord) -> None:
        """Test that the JSON indent option is honored."""
        content = render_file_content(simple_record, "vscode", VSCodeRendererOptions(json_indent=4))
        assert '\n    "b": {' in content

    def test_sublime_scope(self, simple_record: SnippetRecord) -> None:
        """Test that Sublime options are used."""
        content = render_file_content(simple_record, "sublime", SublimeRendererOptions(scope="text.html"))
        assert "  <scope>text.html</scope>\n</snippet>\n" in content

    def test_atom_content(self, simple_record: SnippetRecord) -> None:
        """Test that Atom exports are the rendered entry plus a newline."""
        assert render_file_content(simple_record, "atom") == format_atom(simple_record) + "\n"

    def test_interchange_content(self, simple_record: SnippetRecord) -> None:
        """Test that interchange exports hold one record."""
        assert render_file_content(simple_record, "interchange") == "description: a\ntrigger: b\nsnippet: c\n"


@pytest.mark.unit
class TestExportSnippets:
    """Tests for export_snippets."""

    def test_writes_one_file_per_record(self, tmp_path, sample_records: list[SnippetRecord]) -> None:
        """Test file names and contents."""
        paths = export_snippets(sample_records, "sublime", tmp_path / "out")
        assert [path.name for path in paths] == ["log.sublime-snippet", "imp.sublime-snippet", "home.sublime-snippet"]
        assert paths[0].read_text(encoding="utf-8") == format_sublime(sample_records[0]) + "\n"

    def test_duplicate_and_empty_triggers(self, tmp_path) -> None:
        """Test that clashing names get numeric suffixes."""
        records = [
            SnippetRecord(trigger="log"),
            SnippetRecord(trigger="log"),
            SnippetRecord(trigger="log-2"),
            SnippetRecord(description="no trigger"),
            SnippetRecord(description="none either"),
        ]
        paths = export_snippets(records, "atom", tmp_path)
        assert [path.name for path in paths] == [
            "log.cson",
            "log-2.cson",
            "log-2-2.cson",
            "snippet.cson",
            "snippet-2.cson",
        ]
        assert all(path.is_file() for path in paths)

    def test_triggers_differing_in_case(self, tmp_path) -> None:
        """Test that Log and log get distinct file names on any filesystem."""
        paths = export_snippets([SnippetRecord(trigger="Log"), SnippetRecord(trigger="log")], "atom", tmp_path)
        assert [path.name for path in paths] == ["Log.cson", "log-2.cson"]
        assert len({path.name.casefold() for path in paths}) == 2

    def test_extension_comes_from_registry(self, tmp_path, monkeypatch) -> None:
        """Test that editor exports use the extension registered for the editor."""
        local = RendererRegistry()
        local.register(RendererMetadata("atom", "Atom", AtomRenderer, BaseRendererOptions, ".atom-snippet"))
        monkeypatch.setattr("snippetfmt.api.registry", local)
        (path,) = export_snippets([SnippetRecord(trigger="log")], "atom", tmp_path)
        assert path.name == "log.atom-snippet"

    def test_unsafe_triggers_stay_inside_directory(self, tmp_path) -> None:
        """Test that path separators in triggers cannot escape the output directory."""
        paths = export_snippets([SnippetRecord(trigger="../../evil")], "interchange", tmp_path)
        assert paths == [tmp_path / "evil.txt"]

    def test_vscode_untitled_key(self, tmp_path) -> None:
        """Test that an empty trigger uses the untitled key inside the document."""
        (path,) = export_snippets([SnippetRecord(snippet="x")], "vscode-json", tmp_path)
        assert path.name == "snippet.code-snippets"
        assert list(json.loads(path.read_text(encoding="utf-8"))) == ["untitled"]

    def test_unknown_format(self, tmp_path) -> None:
        """Test that an unknown format raises before anything is written."""
        with pytest.raises(FormatError):
            export_snippets([SnippetRecord(trigger="x")], "emacs", tmp_path / "out")
        assert not (tmp_path / "out").exists()

    def test_output_dir_is_a_file(self, tmp_path) -> None:
        """Test that an unusable output directory raises OutputWriteError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(OutputWriteError):
            export_snippets([SnippetRecord(trigger="x")], "atom", blocker)
