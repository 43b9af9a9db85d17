"""Exceptions raised while resolving a resource and its base directory."""


class ResolverError(RuntimeError):
    """Base class for hard resolution failures."""


class UnsupportedLocatorError(ResolverError):
    """Raised when a loader returns a locator with an unknown scheme."""

    def __init__(self, locator: str) -> None:
        """Record the offending locator."""
        super().__init__(f"Cannot deal with resource locator: {locator}")
        self.locator = locator


class MalformedLocatorError(ResolverError):
    """Raised when an archive locator cannot be split into archive and entry."""

    def __init__(self, locator: str, reason: str) -> None:
        """Record the offending locator and what is wrong with it."""
        super().__init__(f"Malformed archive locator {locator!r}: {reason}")
        self.locator = locator


class ArchiveMountError(ResolverError):
    """Raised when an archive cannot be opened as a filesystem."""

    def __init__(self, archive: object, reason: object) -> None:
        """Record the archive path and the underlying failure."""
        super().__init__(f"Cannot mount archive {archive}: {reason}")
        self.archive = archive


class BaseDirNotFoundError(ResolverError):
    """Raised when a resource has no usable base directory."""

    def __init__(self, resource: object) -> None:
        """Record the resource that has no base directory."""
        super().__init__(f"Cannot determine base dir given config resource: {resource}")
        self.resource = resource
