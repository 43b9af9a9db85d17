"""Data model for a located resource and its base directory."""

from dataclasses import dataclass

from src.resource_path import ResourcePath


@dataclass(frozen=True)
class ResolutionResult:
    """Represents where a resource was found and the directory around it."""

    base_dir: ResourcePath
    resource: ResourcePath
