"""Shared fixtures for resolver tests."""

import zipfile
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from src.mount_registry import MountRegistry

ArchiveFactory = Callable[[str, dict[str, str]], Path]


@pytest.fixture
def make_archive(tmp_path: Path) -> ArchiveFactory:
    """Fixture returning a function that writes a zip archive under tmp_path."""

    def _make(name: str, entries: dict[str, str]) -> Path:
        archive = tmp_path / name
        archive.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(archive, "w") as zf:
            for entry, content in entries.items():
                zf.writestr(entry, content)
        return archive

    return _make


@pytest.fixture
def registry() -> Iterator[MountRegistry]:
    """Fixture providing a mount registry that is closed after the test."""
    with MountRegistry() as reg:
        yield reg
