"""Read-only filesystem view of a zip archive and the paths inside it."""

from __future__ import annotations

import logging
import zipfile
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from urllib.parse import quote

from src.errors import ArchiveMountError
from src.resource_path import FileSystemKind, ResourcePath

logger = logging.getLogger(__name__)

ROOT = "/"


def _normalize_entry(entry: str) -> str:
    """Collapse duplicate and trailing separators, keeping the empty entry."""
    normalized = str(PurePosixPath(entry)) if entry else ""
    return "" if normalized == "." else normalized


class ArchiveFileSystem:
    """An open zip archive exposed as a navigable path hierarchy.

    The archive has exactly one root directory, ``/``. Entry names are looked
    up with or without a leading separator; directories that only exist
    implicitly (as prefixes of file entries) are reported as existing too.
    """

    def __init__(self, archive: Path, zip_file: zipfile.ZipFile) -> None:
        """Index the entries of an already opened *zip_file*."""
        self.archive = archive
        self._zip = zip_file
        self._files: set[str] = set()
        self._dirs: set[str] = {""}
        for info in zip_file.infolist():
            name = info.filename.rstrip("/")
            if info.is_dir():
                self._dirs.add(name)
            else:
                self._files.add(name)
            parts = name.split("/")
            for i in range(1, len(parts)):
                self._dirs.add("/".join(parts[:i]))

    @classmethod
    def open(cls, archive: str | Path) -> ArchiveFileSystem:
        """Open *archive* and mount it, raising ArchiveMountError on failure."""
        archive_path = Path(archive).resolve()
        try:
            zip_file = zipfile.ZipFile(archive_path)
        except (OSError, zipfile.BadZipFile) as exc:
            raise ArchiveMountError(archive_path, exc) from exc
        logger.debug("Mounted archive filesystem for %s", archive_path)
        return cls(archive_path, zip_file)

    @property
    def closed(self) -> bool:
        """Return True once the underlying zip file has been closed."""
        return self._zip.fp is None

    def close(self) -> None:
        """Release the underlying zip file."""
        self._zip.close()
        logger.debug("Closed archive filesystem for %s", self.archive)

    def get_path(self, entry: str) -> ArchivePath:
        """Return the path for *entry* inside this archive."""
        return ArchivePath(self, _normalize_entry(entry))

    def root_directories(self) -> list[ResourcePath]:
        """Return the single root directory of the archive."""
        return [ArchivePath(self, ROOT)]

    def contains(self, entry: str) -> bool:
        """Return True if *entry* names a file or directory in the archive."""
        key = entry.strip("/")
        return key in self._files or key in self._dirs

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArchiveFileSystem):
            return NotImplemented
        return self.archive == other.archive

    def __hash__(self) -> int:
        return hash(self.archive)

    def __repr__(self) -> str:
        return f"ArchiveFileSystem({str(self.archive)!r})"


@dataclass(frozen=True)
class ArchivePath(ResourcePath):
    """An entry inside a mounted archive.

    Entries follow zip conventions: POSIX separators, relative unless they
    start with ``/``. A single-component relative entry such as
    ``entry.conf`` has no parent; the archive root is reached through
    ``root_directories()`` instead.
    """

    filesystem: ArchiveFileSystem
    entry: str

    @property
    def kind(self) -> FileSystemKind:
        """Return ``FileSystemKind.ARCHIVE``."""
        return FileSystemKind.ARCHIVE

    @property
    def name(self) -> str:
        """Return the last component of the entry."""
        return PurePosixPath(self.entry).name if self.entry else ""

    @property
    def parent(self) -> ArchivePath | None:
        """Return the enclosing entry, or None when the entry has none."""
        if not self.entry:
            return None
        pure = PurePosixPath(self.entry)
        parent = pure.parent
        if parent == pure or parent == PurePosixPath("."):
            return None
        return ArchivePath(self.filesystem, str(parent))

    def root_directories(self) -> list[ResourcePath]:
        """Return the root directories of the owning archive."""
        return self.filesystem.root_directories()

    def joinpath(self, *parts: str) -> ArchivePath:
        """Join *parts* onto this entry."""
        joined = PurePosixPath(self.entry or ".").joinpath(*parts)
        return ArchivePath(self.filesystem, _normalize_entry(str(joined)))

    def exists(self) -> bool:
        """Return True if the entry is present in the archive."""
        return self.filesystem.contains(self.entry)

    def is_absolute(self) -> bool:
        """Return True if the entry starts at the archive root."""
        return self.entry.startswith(ROOT)

    def as_uri(self) -> str:
        """Return a ``jar:`` locator for this entry."""
        entry = quote(self.entry.lstrip(ROOT))
        return f"jar:{self.filesystem.archive.as_uri()}!/{entry}"

    def __str__(self) -> str:
        return self.as_uri()
