"""Resource loader protocol and loader composition."""

from collections.abc import Iterable
from typing import Protocol


class ResourceLoader(Protocol):
    """Anything that can turn a resource name into a locator string."""

    def locate(self, name: str) -> str | None:
        """Return a ``file:`` or archive-entry locator, or None if not found."""
        ...


class ChainResourceLoader:
    """Asks several loaders in order; the first locator wins."""

    def __init__(self, loaders: Iterable[ResourceLoader]) -> None:
        """Store the loaders in lookup order."""
        self.loaders = list(loaders)

    def locate(self, name: str) -> str | None:
        """Return the first locator any loader produces for *name*."""
        for loader in self.loaders:
            locator = loader.locate(name)
            if locator is not None:
                return locator
        return None
