"""Resource lookup over a search path of directories and zip archives."""

from __future__ import annotations

import logging
import sys
import zipfile
from collections.abc import Iterable
from pathlib import Path, PurePath
from urllib.parse import quote

logger = logging.getLogger(__name__)


def archive_entry_locator(archive: Path, entry: str, scheme: str = "jar") -> str:
    """Build an archive-entry locator for *entry* inside *archive*."""
    return f"{scheme}:{archive.resolve().as_uri()}!/{quote(entry)}"


class ClasspathResourceLoader:
    """Finds named resources on an ordered search path.

    Each entry is either a directory or a zip archive (``.zip``, ``.jar``,
    ``.whl``, ``.egg``, ...). Directory hits are reported as ``file:``
    locators and archive hits as ``jar:`` locators. Entries that are neither
    are skipped.
    """

    def __init__(self, entries: Iterable[str | Path]) -> None:
        """Store the search path in lookup order."""
        self.entries = [Path(e) for e in entries]

    @classmethod
    def from_sys_path(cls) -> ClasspathResourceLoader:
        """Build a loader over the interpreter's ``sys.path``."""
        return cls(p for p in sys.path if p)

    def locate(self, name: str) -> str | None:
        """Return a locator for the first entry that contains *name*."""
        if not name or PurePath(name).is_absolute() or name.startswith("/"):
            return None
        entry_name = name.replace("\\", "/")

        for entry in self.entries:
            if entry.is_dir():
                candidate = entry / entry_name
                if candidate.exists():
                    return candidate.resolve().as_uri()
            elif entry.is_file() and zipfile.is_zipfile(entry):
                if self._archive_contains(entry, entry_name):
                    return archive_entry_locator(entry, entry_name)
        return None

    @staticmethod
    def _archive_contains(archive: Path, entry_name: str) -> bool:
        try:
            with zipfile.ZipFile(archive) as zf:
                names = set(zf.namelist())
        except (OSError, zipfile.BadZipFile):
            logger.warning("Skipping unreadable search path archive %s", archive)
            return False
        stripped = entry_name.rstrip("/")
        if stripped in names or f"{stripped}/" in names:
            return True
        prefix = f"{stripped}/"
        return any(n.startswith(prefix) for n in names)
