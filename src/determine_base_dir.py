"""Logic for deriving the base directory of a resolved resource."""

from src.errors import BaseDirNotFoundError
from src.resource_path import FileSystemKind, ResourcePath


def determine_base_dir(resource: ResourcePath) -> ResourcePath:
    """Return the directory that lookups relative to *resource* start from.

    - A resource with a parent uses that parent.
    - A parentless entry of an archive uses the archive's first root directory.
    - Anything else cannot serve as a base and raises BaseDirNotFoundError.
    """
    base_dir = resource.parent
    if base_dir is None and resource.kind is FileSystemKind.ARCHIVE:
        base_dir = next(iter(resource.root_directories()), None)
    if base_dir is None:
        raise BaseDirNotFoundError(resource)
    return base_dir
