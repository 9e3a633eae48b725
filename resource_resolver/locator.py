"""Resolved resource handle."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from urllib.parse import quote
from urllib.parse import unquote
from urllib.parse import urlsplit
from urllib.request import url2pathname

# Separates the archive URL from the member path in jar: URLs
# (jar:file:///lib/app.zip!/app/db.properties)
ARCHIVE_SEPARATOR = "!/"


@dataclass(frozen=True)
class ResourceLocator:
    """Where a resolved resource lives, expressed as a URL.

    Attributes:
        url: Absolute URL string (file://, jar:file://...!/, http://, ...).
    """

    url: str

    @classmethod
    def from_path(cls, path: str | Path) -> ResourceLocator:
        """Build a file:// locator for a filesystem path.

        The path is made absolute against the current directory but symlinks
        are left alone, so the URL mirrors what the caller asked for.

        Raises:
            ValueError: If the path cannot be expressed as a file URL.
        """
        return cls(Path(path).absolute().as_uri())

    @classmethod
    def from_archive_member(cls, archive: str | Path, member: str) -> ResourceLocator:
        """Build a jar: locator for a member of a zip archive."""
        archive_url = Path(archive).absolute().as_uri()
        return cls(f"jar:{archive_url}{ARCHIVE_SEPARATOR}{quote(member.lstrip('/'))}")

    @property
    def scheme(self) -> str:
        """Lower-case URL scheme."""
        return urlsplit(self.url).scheme.lower()

    @property
    def is_file(self) -> bool:
        """True if this locator points at a plain filesystem file."""
        return self.scheme == "file"

    @property
    def is_archive_member(self) -> bool:
        """True if this locator points inside a zip archive."""
        return self.scheme == "jar" and ARCHIVE_SEPARATOR in self.url

    @property
    def path(self) -> str:
        """Path component of the URL.

        File locators give the decoded filesystem path in POSIX form, archive
        members give the member path inside the archive, anything else gives
        the raw URL path.
        """
        if self.is_file:
            return self.to_path().as_posix()
        if self.is_archive_member:
            return "/" + self.archive_parts()[1]
        return urlsplit(self.url).path

    def to_path(self) -> Path:
        """Filesystem path of a file locator.

        Raises:
            ValueError: If this is not a file:// locator.
        """
        if not self.is_file:
            raise ValueError(f"Not a file URL: {self.url}")
        return Path(url2pathname(urlsplit(self.url).path))

    def archive_parts(self) -> tuple[Path, str]:
        """Split a jar: locator into (archive path, member name).

        Raises:
            ValueError: If this is not an archive member locator.
        """
        if not self.is_archive_member:
            raise ValueError(f"Not an archive URL: {self.url}")
        archive_url, member = self.url[len("jar:") :].split(ARCHIVE_SEPARATOR, 1)
        return ResourceLocator(archive_url).to_path(), unquote(member)

    def __str__(self) -> str:
        return self.url
