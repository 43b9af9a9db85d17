"""Filesystem-neutral path interface used by base directory resolution."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class FileSystemKind(Enum):
    """Which backend a ResourcePath belongs to."""

    LOCAL = "local"
    ARCHIVE = "archive"


class ResourcePath(ABC):
    """A location on the local filesystem or inside a mounted archive.

    Implementations must be immutable and compare structurally so that they
    can be used inside hashable result values.
    """

    @property
    @abstractmethod
    def kind(self) -> FileSystemKind:
        """Return the backend that owns this path."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the final path component, or an empty string for a root."""

    @property
    @abstractmethod
    def parent(self) -> ResourcePath | None:
        """Return the conventional parent, or None when there is none."""

    @abstractmethod
    def root_directories(self) -> list[ResourcePath]:
        """Return the root directories exposed by the owning filesystem."""

    @abstractmethod
    def joinpath(self, *parts: str) -> ResourcePath:
        """Return a path for *parts* below this one, in the same filesystem."""

    @abstractmethod
    def exists(self) -> bool:
        """Return True if the location exists in its filesystem."""

    @abstractmethod
    def is_absolute(self) -> bool:
        """Return True if the path is anchored at a filesystem root."""

    @abstractmethod
    def as_uri(self) -> str:
        """Return a locator string for this path."""
