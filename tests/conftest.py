"""Pytest configuration and shared fixtures for the snippetfmt test suite.

This module provides shared fixtures and test configuration used across
the unit and integration tests.
"""

import logging
import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from snippetfmt.models import SnippetRecord

settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests")


@pytest.fixture
def simple_record() -> SnippetRecord:
    """The single-letter record used by the reference outputs."""
    return SnippetRecord(description="a", trigger="b", snippet="c")


@pytest.fixture
def sample_records() -> list[SnippetRecord]:
    """A handful of single-line records that survive the interchange format."""
    return [
        SnippetRecord(description="Print to console", trigger="log", snippet="console.log($1);"),
        SnippetRecord(description="Import module", trigger="imp", snippet="import $1 from '$2';"),
        SnippetRecord(description="Shell home", trigger="home", snippet="echo $HOME: $(pwd)"),
    ]


@pytest.fixture
def interchange_file(tmp_path: Path, sample_records: list[SnippetRecord]) -> Path:
    """Interchange file holding ``sample_records``."""
    from snippetfmt.interchange import serialize_all

    path = tmp_path / "snippets.txt"
    path.write_text(serialize_all(sample_records), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo the root logger changes made by ``configure_logging``."""
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)
