"""Logic for taking resource locators apart."""

from dataclasses import dataclass
from pathlib import Path
from urllib.parse import unquote, urlsplit
from urllib.request import url2pathname

from src.errors import MalformedLocatorError

ENTRY_SEPARATOR = "!/"
FILE_SCHEME = "file"


@dataclass(frozen=True)
class ArchiveLocator:
    """An archive-entry locator split into its archive file and entry name."""

    scheme: str
    archive: Path
    entry: str


def locator_scheme(locator: str) -> str:
    """Return the lower-cased scheme of *locator*, or an empty string."""
    return urlsplit(locator).scheme.lower()


def file_uri_to_path(uri: str) -> Path:
    """Convert a ``file:`` URI into a local path."""
    parts = urlsplit(uri)
    path = url2pathname(parts.path)
    if parts.netloc and parts.netloc != "localhost":
        # UNC share: file://server/share/x
        path = f"//{parts.netloc}{path}"
    return Path(path)


def split_archive_locator(locator: str) -> ArchiveLocator:
    """Split ``<scheme>:<archive-file-uri>!/<entry>`` at the first separator.

    The archive-file URI must be a ``file:`` URI. The entry name is
    percent-decoded and returned without the separator's leading slash.
    """
    scheme, _, rest = locator.partition(":")
    separator = rest.find(ENTRY_SEPARATOR)
    if separator < 0:
        raise MalformedLocatorError(locator, f"missing {ENTRY_SEPARATOR!r}")

    archive_uri = rest[:separator]
    entry = unquote(rest[separator + len(ENTRY_SEPARATOR) :])
    if locator_scheme(archive_uri) != FILE_SCHEME:
        raise MalformedLocatorError(locator, "archive is not a file: URI")

    return ArchiveLocator(
        scheme=scheme.lower(), archive=file_uri_to_path(archive_uri), entry=entry
    )
