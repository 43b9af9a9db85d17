"""Tests for base directory derivation."""

import zipfile
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.archive_filesystem import ArchiveFileSystem
from src.determine_base_dir import determine_base_dir
from src.errors import BaseDirNotFoundError
from src.local_path import LocalPath
from src.resource_path import FileSystemKind


@pytest.fixture
def archive_fs(tmp_path: Path) -> Iterator[ArchiveFileSystem]:
    """Fixture providing a mounted archive with a root and a nested entry."""
    archive = tmp_path / "bundle.zip"
    with zipfile.ZipFile(archive, "w") as zf:
        zf.writestr("entry.conf", "")
        zf.writestr("sub/dir/entry.conf", "")
    fs = ArchiveFileSystem.open(archive)
    yield fs
    fs.close()


def test_local_file_uses_parent(tmp_path: Path) -> None:
    """Verify that a local file's base dir is its parent directory."""
    assert determine_base_dir(LocalPath(tmp_path / "app.yml")) == LocalPath(tmp_path)


def test_archive_nested_entry_uses_parent(archive_fs: ArchiveFileSystem) -> None:
    """Verify that a nested archive entry's base dir is its enclosing entry."""
    base_dir = determine_base_dir(archive_fs.get_path("sub/dir/entry.conf"))
    assert base_dir == archive_fs.get_path("sub/dir")


def test_archive_root_entry_uses_archive_root(archive_fs: ArchiveFileSystem) -> None:
    """Verify that a parentless archive entry falls back to the archive root."""
    base_dir = determine_base_dir(archive_fs.get_path("entry.conf"))
    assert base_dir == archive_fs.root_directories()[0]
    assert base_dir.is_absolute()


def test_archive_empty_entry_uses_archive_root(archive_fs: ArchiveFileSystem) -> None:
    """Verify that the empty entry also resolves to the archive root."""
    base_dir = determine_base_dir(archive_fs.get_path(""))
    assert str(base_dir).endswith("!/")


def test_local_root_has_no_base_dir() -> None:
    """Verify that a filesystem root is rejected as having no base dir."""
    root = Path(Path.cwd().anchor)
    with pytest.raises(BaseDirNotFoundError, match="Cannot determine base dir"):
        determine_base_dir(LocalPath(root))


def test_bare_relative_local_name_uses_current_dir() -> None:
    """Verify that a single relative component is based on the current dir."""
    assert determine_base_dir(LocalPath(Path("app.yml"))) == LocalPath(Path("."))


def test_current_dir_itself_has_no_base_dir() -> None:
    """Verify that "." has no enclosing directory to fall back on."""
    with pytest.raises(BaseDirNotFoundError):
        determine_base_dir(LocalPath(Path(".")))


def test_archive_without_roots_is_rejected() -> None:
    """Verify that an archive path with no parent and no roots is fatal."""
    resource = MagicMock()
    resource.parent = None
    resource.kind = FileSystemKind.ARCHIVE
    resource.root_directories.return_value = []
    with pytest.raises(BaseDirNotFoundError):
        determine_base_dir(resource)


def test_root_fallback_only_applies_to_archives() -> None:
    """Verify that root directories are ignored for non-archive backends."""
    resource = MagicMock()
    resource.parent = None
    resource.kind = FileSystemKind.LOCAL
    resource.root_directories.return_value = [MagicMock()]
    with pytest.raises(BaseDirNotFoundError):
        determine_base_dir(resource)
    resource.root_directories.assert_not_called()
