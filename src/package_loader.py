"""Resource lookup inside an importable package."""

import logging
import zipfile
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

from src.classpath_loader import archive_entry_locator

logger = logging.getLogger(__name__)


class PackageResourceLoader:
    """Finds resources shipped as package data via ``importlib.resources``.

    Packages imported from a zip archive produce archive-entry locators;
    packages on disk produce ``file:`` locators.
    """

    def __init__(self, package: str) -> None:
        """Remember the dotted name of the package to search."""
        self.package = package

    def locate(self, name: str) -> str | None:
        """Return a locator for *name* inside the package, or None."""
        try:
            root = resources.files(self.package)
        except ModuleNotFoundError:
            logger.debug("Package %s is not importable", self.package)
            return None

        target: Traversable = root
        for part in name.replace("\\", "/").split("/"):
            if part:
                target = target.joinpath(part)
        if not (target.is_file() or target.is_dir()):
            return None

        if isinstance(target, zipfile.Path):
            archive = Path(str(target.root.filename))
            return archive_entry_locator(archive, target.at.rstrip("/"))
        return Path(str(target)).resolve().as_uri()
