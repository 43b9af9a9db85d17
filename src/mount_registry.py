"""Registry of mounted archive filesystems, keyed by archive file."""

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType

from src.archive_filesystem import ArchiveFileSystem

logger = logging.getLogger(__name__)


class MountRegistry:
    """Mounts each archive at most once and hands out the shared mount.

    A registry used as a context manager closes everything it mounted on
    exit. The process-wide ``DEFAULT_REGISTRY`` is never closed: resolution
    happens once at startup and the open archives live as long as the process.
    """

    def __init__(self) -> None:
        """Create an empty registry."""
        self._mounts: dict[Path, ArchiveFileSystem] = {}

    @staticmethod
    def _key(archive: str | Path) -> Path:
        return Path(archive).resolve()

    def mount(self, archive: str | Path) -> ArchiveFileSystem:
        """Return the mount for *archive*, opening it on first use."""
        key = self._key(archive)
        existing = self._mounts.get(key)
        if existing is not None and not existing.closed:
            logger.debug("Reusing mounted archive %s", key)
            return existing

        filesystem = ArchiveFileSystem.open(key)
        self._mounts[key] = filesystem
        return filesystem

    def unmount(self, archive: str | Path) -> bool:
        """Close and forget the mount for *archive*; return False if absent."""
        filesystem = self._mounts.pop(self._key(archive), None)
        if filesystem is None:
            return False
        filesystem.close()
        return True

    def close_all(self) -> None:
        """Close every mount held by this registry."""
        while self._mounts:
            _, filesystem = self._mounts.popitem()
            filesystem.close()

    def __contains__(self, archive: object) -> bool:
        if not isinstance(archive, (str, Path)):
            return False
        return self._key(archive) in self._mounts

    def __len__(self) -> int:
        return len(self._mounts)

    def __enter__(self) -> MountRegistry:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close_all()


DEFAULT_REGISTRY = MountRegistry()
