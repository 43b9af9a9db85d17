"""Entry point for locating a resource and its base directory."""

import logging
from collections.abc import Collection
from pathlib import Path

from src.determine_base_dir import determine_base_dir
from src.local_path import LocalPath
from src.mount_registry import MountRegistry
from src.resolution_result import ResolutionResult
from src.resource_loader import ResourceLoader
from src.resource_path import ResourcePath
from src.to_path import ARCHIVE_SCHEMES, to_path

logger = logging.getLogger(__name__)


def find(
    working_dir: str | Path,
    loader: ResourceLoader,
    resource_name: str,
    *,
    registry: MountRegistry | None = None,
    archive_schemes: Collection[str] = ARCHIVE_SCHEMES,
) -> ResolutionResult | None:
    """Locate *resource_name* and return it together with its base directory.

    The loader is asked first. When it has nothing, the name is taken as a
    filesystem path, relative names being resolved against *working_dir*.
    Returns None when neither strategy finds the resource; unsupported
    locators, archive mount failures and resources without a usable base
    directory raise ResolverError subclasses.
    """
    resource: ResourcePath
    locator = loader.locate(resource_name)
    if locator is None:
        path = Path(resource_name)
        if not path.is_absolute():
            path = Path(working_dir, resource_name)

        if not path.exists():
            logger.debug(
                "Resource %r not found via loader or at %s", resource_name, path
            )
            return None
        resource = LocalPath(path)
        logger.debug("Resource %r found on filesystem at %s", resource_name, path)
    else:
        resource = to_path(locator, registry, archive_schemes)
        logger.debug("Resource %r found by loader at %s", resource_name, locator)

    return ResolutionResult(determine_base_dir(resource), resource)
