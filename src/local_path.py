"""ResourcePath adapter for the local filesystem."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from src.resource_path import FileSystemKind, ResourcePath


@dataclass(frozen=True)
class LocalPath(ResourcePath):
    """A ``pathlib.Path`` seen through the ResourcePath interface."""

    path: Path

    @property
    def kind(self) -> FileSystemKind:
        """Return ``FileSystemKind.LOCAL``."""
        return FileSystemKind.LOCAL

    @property
    def name(self) -> str:
        """Return the file name of the wrapped path."""
        return self.path.name

    @property
    def parent(self) -> LocalPath | None:
        """Return the parent, or None at a filesystem root.

        A bare relative name such as ``config.yml`` has ``.`` as its parent,
        the directory it is relative to.
        """
        parent = self.path.parent
        if parent == self.path:
            return None
        return LocalPath(parent)

    def root_directories(self) -> list[ResourcePath]:
        """Return the anchor of the wrapped path, if it has one."""
        anchor = self.path.anchor
        return [LocalPath(Path(anchor))] if anchor else []

    def joinpath(self, *parts: str) -> LocalPath:
        """Join *parts* onto the wrapped path."""
        return LocalPath(self.path.joinpath(*parts))

    def exists(self) -> bool:
        """Return True if the path exists on disk."""
        return self.path.exists()

    def is_absolute(self) -> bool:
        """Return True if the wrapped path is absolute."""
        return self.path.is_absolute()

    def as_uri(self) -> str:
        """Return a ``file:`` URI for the absolute form of the path."""
        return self.path.absolute().as_uri()

    def __str__(self) -> str:
        return str(self.path)
