"""Tests for the resolver entry point."""

import logging
from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.archive_filesystem import ArchivePath
from src.errors import ArchiveMountError, UnsupportedLocatorError
from src.find_base_dir import find
from src.local_path import LocalPath
from src.mount_registry import MountRegistry
from src.resource_path import FileSystemKind

ArchiveFactory = Callable[[str, dict[str, str]], Path]


def loader_returning(locator: str | None) -> MagicMock:
    """Create a loader mock whose locate() returns *locator*."""
    loader = MagicMock()
    loader.locate.return_value = locator
    return loader


def test_absolute_file_path(tmp_path: Path) -> None:
    """Verify that an existing absolute path resolves to itself and its parent."""
    config_file = tmp_path / "app.yml"
    config_file.write_text("port: 5050\n")

    result = find("/unused", loader_returning(None), str(config_file))

    assert result is not None
    assert result.resource == LocalPath(config_file)
    assert result.base_dir == LocalPath(tmp_path)


def test_relative_name_resolves_against_working_dir(tmp_path: Path) -> None:
    """Verify that relative names give the same result as their absolute form."""
    (tmp_path / "conf").mkdir()
    config_file = tmp_path / "conf" / "app.yml"
    config_file.write_text("")

    relative = find(str(tmp_path), loader_returning(None), "conf/app.yml")
    absolute = find(str(tmp_path), loader_returning(None), str(config_file))

    assert relative is not None
    assert relative == absolute
    assert relative.base_dir == LocalPath(tmp_path / "conf")


def test_working_dir_accepts_path(tmp_path: Path) -> None:
    """Verify that the working directory may be given as a Path."""
    (tmp_path / "app.yml").write_text("")
    result = find(tmp_path, loader_returning(None), "app.yml")
    assert result is not None
    assert result.resource == LocalPath(tmp_path / "app.yml")


@pytest.mark.parametrize("working_dir", [".", ""])
def test_current_dir_as_working_dir(
    working_dir: str, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Verify that a file in a relative current working dir is found."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "app.yml").write_text("")

    result = find(working_dir, loader_returning(None), "app.yml")

    assert result is not None
    assert result.resource.name == "app.yml"
    assert result.base_dir == LocalPath(Path("."))
    assert result.base_dir.joinpath(result.resource.name).exists()


def test_relative_working_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify that a relative working dir matches the absolute equivalent."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "conf").mkdir()
    (tmp_path / "conf" / "app.yml").write_text("")

    relative = find("conf", loader_returning(None), "app.yml")
    absolute = find(str(tmp_path / "conf"), loader_returning(None), "app.yml")

    assert relative is not None
    assert absolute is not None
    assert relative.base_dir == LocalPath(Path("conf"))
    assert relative.resource.name == absolute.resource.name
    assert relative.resource.as_uri() == absolute.resource.as_uri()
    assert relative.base_dir.as_uri() == absolute.base_dir.as_uri()


def test_not_found_returns_none(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Verify that a resource missing everywhere yields None, not an error."""
    with caplog.at_level(logging.DEBUG, logger="src.find_base_dir"):
        result = find(str(tmp_path), loader_returning(None), "missing.yml")
    assert result is None
    assert "not found" in caplog.text


def test_loader_is_consulted_before_filesystem(tmp_path: Path) -> None:
    """Verify that a loader hit wins over a file in the working directory."""
    (tmp_path / "app.yml").write_text("")
    other = tmp_path / "other"
    other.mkdir()
    (other / "app.yml").write_text("")
    loader = loader_returning((other / "app.yml").as_uri())

    result = find(str(tmp_path), loader, "app.yml")

    loader.locate.assert_called_once_with("app.yml")
    assert result is not None
    assert result.resource == LocalPath(other / "app.yml")
    assert result.base_dir == LocalPath(other)


def test_archive_entry_at_root_uses_archive_root(
    make_archive: ArchiveFactory, registry: MountRegistry
) -> None:
    """Verify that an entry at the archive root gets the root as base dir."""
    archive = make_archive("app.jar", {"entry.conf": "a=1"})
    locator = f"jar:{archive.as_uri()}!/entry.conf"

    result = find("/unused", loader_returning(locator), "entry.conf", registry=registry)

    assert result is not None
    assert isinstance(result.resource, ArchivePath)
    assert result.resource.entry == "entry.conf"
    assert result.base_dir.kind is FileSystemKind.ARCHIVE
    assert result.base_dir == result.resource.root_directories()[0]
    assert result.base_dir.joinpath(result.resource.name).exists()


def test_archive_entry_in_subdirectory(
    make_archive: ArchiveFactory, registry: MountRegistry
) -> None:
    """Verify that a nested archive entry gets its enclosing entry as base dir."""
    archive = make_archive("app.jar", {"sub/dir/entry.conf": "a=1"})
    locator = f"jar:{archive.as_uri()}!/sub/dir/entry.conf"

    result = find("/unused", loader_returning(locator), "x", registry=registry)

    assert result is not None
    assert isinstance(result.base_dir, ArchivePath)
    assert result.base_dir.entry == "sub/dir"
    assert result.base_dir.exists()
    joined = result.base_dir.joinpath(result.resource.name)
    assert joined.as_uri() == result.resource.as_uri()


def test_unsupported_scheme_is_hard_error(tmp_path: Path) -> None:
    """Verify that an http locator raises instead of returning None."""
    loader = loader_returning("http://example.com/app.yml")
    with pytest.raises(UnsupportedLocatorError, match="http://example.com/app.yml"):
        find(str(tmp_path), loader, "app.yml")


def test_archive_mount_failure_propagates(
    tmp_path: Path, registry: MountRegistry
) -> None:
    """Verify that a missing archive surfaces as an ArchiveMountError."""
    missing = tmp_path / "missing.jar"
    loader = loader_returning(f"jar:{missing.as_uri()}!/app.yml")
    with pytest.raises(ArchiveMountError):
        find(str(tmp_path), loader, "app.yml", registry=registry)


def test_equal_results_are_interchangeable_keys(
    make_archive: ArchiveFactory, registry: MountRegistry
) -> None:
    """Verify that results built from equal paths are equal dict keys."""
    archive = make_archive("app.jar", {"conf/app.yml": ""})
    loader = loader_returning(f"jar:{archive.as_uri()}!/conf/app.yml")

    first = find("/unused", loader, "conf/app.yml", registry=registry)
    second = find("/unused", loader, "conf/app.yml", registry=registry)

    assert first is not None
    assert first == second
    assert hash(first) == hash(second)
    assert {first: "seen"}[second] == "seen"
    assert len(registry) == 1


def test_custom_archive_schemes(
    make_archive: ArchiveFactory, registry: MountRegistry
) -> None:
    """Verify that the accepted archive schemes can be configured."""
    archive = make_archive("app.war", {"app.yml": ""})
    loader = loader_returning(f"war:{archive.as_uri()}!/app.yml")

    with pytest.raises(UnsupportedLocatorError):
        find("/unused", loader, "app.yml", registry=registry)

    result = find(
        "/unused", loader, "app.yml", registry=registry, archive_schemes=["war"]
    )
    assert result is not None
    assert result.resource.kind is FileSystemKind.ARCHIVE
