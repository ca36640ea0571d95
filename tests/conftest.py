"""Pytest configuration and shared fixtures for the doxy2md test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

from pathlib import Path
from typing import Generator

import pytest
from utils import cleanup_test_dir, create_test_temp_dir, write_sample_xml_folder

from doxy2md.parsers import CompoundBuilder, DescriptionBuilder, ParseSession, XmlAccess


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files.

    Yields
    ------
    Path
        Temporary directory path that will be cleaned up after test.

    """
    temp_path = create_test_temp_dir()
    try:
        yield temp_path
    finally:
        cleanup_test_dir(temp_path)


@pytest.fixture
def xml() -> XmlAccess:
    """Provide a fresh XML accessor."""
    return XmlAccess()


@pytest.fixture
def description_builder(xml: XmlAccess) -> DescriptionBuilder:
    """Provide a description builder sharing the ``xml`` accessor."""
    return DescriptionBuilder(xml)


@pytest.fixture
def compound_builder(xml: XmlAccess) -> CompoundBuilder:
    """Provide a compound builder sharing the ``xml`` accessor."""
    return CompoundBuilder(xml)


@pytest.fixture
def sample_xml_folder(tmp_path: Path) -> Path:
    """Provide a small but complete Doxygen XML output folder.

    Returns
    -------
    Path
        Folder holding ``index.xml``, the compound files and ``Doxyfile.xml``

    """
    return write_sample_xml_folder(tmp_path / "xml")


@pytest.fixture
def sample_session(sample_xml_folder: Path) -> ParseSession:
    """Provide a finalized parse session over the sample XML folder."""
    return ParseSession().parse(sample_xml_folder)
