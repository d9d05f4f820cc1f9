"""Shared test fixtures."""

from unittest.mock import Mock

import pytest

from gitcas.storage import FilesystemObjectStorage, MemoryObjectStorage


@pytest.fixture
def storage():
    """Fresh in-memory storage."""
    return MemoryObjectStorage()


@pytest.fixture
def spy_storage():
    """In-memory storage whose calls are recorded."""
    return Mock(wraps=MemoryObjectStorage())


@pytest.fixture
def fs_storage(tmp_path):
    """Filesystem storage rooted in a temp directory."""
    return FilesystemObjectStorage(tmp_path / "store")
