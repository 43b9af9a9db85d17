"""Logic for turning a located resource into a ResourcePath."""

import logging
from collections.abc import Collection

from src.errors import UnsupportedLocatorError
from src.local_path import LocalPath
from src.mount_registry import DEFAULT_REGISTRY, MountRegistry
from src.parse_locator import (
    FILE_SCHEME,
    file_uri_to_path,
    locator_scheme,
    split_archive_locator,
)
from src.resource_path import ResourcePath

logger = logging.getLogger(__name__)

ARCHIVE_SCHEMES: tuple[str, ...] = ("jar", "zip")


def to_path(
    locator: object,
    registry: MountRegistry | None = None,
    archive_schemes: Collection[str] = ARCHIVE_SCHEMES,
) -> ResourcePath:
    """Translate a loader locator into a path, mounting archives as needed.

    ``file:`` locators become local paths. Archive-entry locators mount the
    archive through *registry* (the process-wide one by default) and return
    the entry inside it. Every other scheme is rejected.
    """
    uri = str(locator)
    scheme = locator_scheme(uri)

    if scheme == FILE_SCHEME:
        return LocalPath(file_uri_to_path(uri))

    if scheme not in {s.lower() for s in archive_schemes}:
        raise UnsupportedLocatorError(uri)

    parsed = split_archive_locator(uri)
    if registry is None:
        registry = DEFAULT_REGISTRY
    filesystem = registry.mount(parsed.archive)
    logger.debug("Resolved %s to entry %r in %s", uri, parsed.entry, parsed.archive)
    return filesystem.get_path(parsed.entry)
