"""Resolution contexts: namespaces of named resources.

A context answers one question: does it hold a resource with this name, and
if so where. Two implementations cover what Python offers:

- PackageContext looks inside one importable package via importlib.resources,
  whether the package lives on disk or inside a zip archive.
- SearchPathContext walks an ordered list of directories and zip archives the
  way the import system walks sys.path.
"""

from __future__ import annotations

import logging
import sys
import zipfile
from collections.abc import Iterable
from importlib import resources
from pathlib import Path
from types import ModuleType
from typing import Protocol

from resource_resolver.locator import ResourceLocator

logger = logging.getLogger(__name__)


class ResolutionContext(Protocol):
    """Protocol for a namespace that can look up resources by name."""

    def find_resource(self, name: str) -> ResourceLocator | None:
        """Look up a resource.

        Args:
            name: Resource name, "/"-separated, relative to the namespace root.

        Returns:
            Locator of the resource, or None if this namespace lacks it.
        """
        ...


class PackageContext:
    """Resources shipped inside an importable package."""

    def __init__(self, anchor: str | ModuleType) -> None:
        """Initialize context.

        Args:
            anchor: Package (or its dotted name) whose files are searched.

        Raises:
            ModuleNotFoundError: If the package cannot be imported.
        """
        self.anchor = anchor
        self._root = resources.files(anchor)

    def find_resource(self, name: str) -> ResourceLocator | None:
        parts = [part for part in name.split("/") if part]
        if not parts or name.startswith("/"):
            return None

        candidate = self._root
        for part in parts:
            candidate = candidate.joinpath(part)

        if not (candidate.is_file() or candidate.is_dir()):
            return None

        if isinstance(candidate, Path):
            return ResourceLocator.from_path(candidate)
        if isinstance(candidate, zipfile.Path):
            return ResourceLocator.from_archive_member(candidate.root.filename, candidate.at)

        logger.debug(f"Cannot build a URL for {type(candidate).__name__} resource {name!r}")
        return None

    def __repr__(self) -> str:
        anchor = self.anchor if isinstance(self.anchor, str) else self.anchor.__name__
        return f"PackageContext({anchor!r})"


class SearchPathContext:
    """Resources found relative to an ordered list of directories and archives."""

    def __init__(self, entries: Iterable[str | Path] | None = None) -> None:
        """Initialize context.

        Args:
            entries: Directories and zip archives to search, in order. None
                searches the live sys.path, so later changes to it are seen.
        """
        self._entries = None if entries is None else tuple(entries)

    @classmethod
    def system(cls) -> SearchPathContext:
        """Context over the interpreter-wide search path (live sys.path)."""
        return cls(None)

    @classmethod
    def snapshot(cls) -> SearchPathContext:
        """Context over a copy of sys.path as it is right now."""
        return cls(list(sys.path))

    @classmethod
    def for_module(cls, module_name: str) -> SearchPathContext | None:
        """Context over the import root a module was loaded from.

        For ``myapp.db`` imported from ``/srv/lib/myapp/db.py`` the import
        root is ``/srv/lib``.

        Returns:
            Context, or None if the module is not loaded or has no file.
        """
        module = sys.modules.get(module_name)
        module_file = getattr(module, "__file__", None)
        if not module_file:
            return None

        levels = module_name.count(".")
        if hasattr(module, "__path__"):
            levels += 1  # Packages live one directory deeper (pkg/__init__.py)

        root = Path(module_file).absolute().parent
        for _ in range(levels):
            root = root.parent
        return cls([root])

    @property
    def entries(self) -> tuple[str | Path, ...]:
        return tuple(sys.path) if self._entries is None else self._entries

    def find_resource(self, name: str) -> ResourceLocator | None:
        # Names are namespace-relative; absolute paths belong to the filename step
        if not name or name.startswith("/"):
            return None

        for entry in self.entries:
            entry_path = Path(entry or ".")
            if entry_path.is_dir():
                candidate = entry_path / name
                if candidate.exists():
                    return ResourceLocator.from_path(candidate)
            elif entry_path.is_file():
                locator = self._find_in_archive(entry_path, name)
                if locator:
                    return locator
        return None

    def _find_in_archive(self, archive: Path, name: str) -> ResourceLocator | None:
        """Look for a member in a zip archive on the search path."""
        if not zipfile.is_zipfile(archive):
            return None
        try:
            with zipfile.ZipFile(archive) as zf:
                members = set(zf.namelist())
        except (zipfile.BadZipFile, OSError) as e:
            logger.debug(f"Skipping unreadable search path archive {archive}: {e}")
            return None
        # Directory entries are stored with a trailing slash
        for member in (name, name.rstrip("/") + "/"):
            if member in members:
                return ResourceLocator.from_archive_member(archive, member)
        return None

    def __repr__(self) -> str:
        if self._entries is None:
            return "SearchPathContext(sys.path)"
        return f"SearchPathContext({[str(e) for e in self._entries]!r})"
