"""Name and path helpers used by the resolver."""

from __future__ import annotations

import os
from pathlib import Path
from urllib.parse import urlsplit

PROPERTIES_SUFFIX = ".properties"

# Schemes a literal URL string may use, mirroring the protocol handlers a
# stock JVM ships with (minus mailto/netdoc, which never name a resource).
DEFAULT_URL_SCHEMES = frozenset({"file", "http", "https", "ftp", "jar"})

_SEPARATORS = ("/", os.sep)


def class_resource_name(cls: type, suffix: str = PROPERTIES_SUFFIX) -> str:
    """Derive the resource name associated with a class.

    The class's module name gains the suffix, so ``myapp.db.Settings`` and a
    class nested inside it both map to ``myapp.db.properties``.

    Args:
        cls: Class to derive the name from.
        suffix: Suffix appended to the module name.

    Returns:
        Resource name.
    """
    return cls.__module__ + suffix


def join_home(home: str, name: str) -> str:
    """Join a name onto the home directory with exactly one separator.

    A separator is inserted when neither side provides one, and one of two is
    dropped when both do.

    Examples:
        join_home("/opt/app", "config/db")   -> "/opt/app/config/db"
        join_home("/opt/app/", "config/db")  -> "/opt/app/config/db"
        join_home("/opt/app", "/config/db")  -> "/opt/app/config/db"
        join_home("/opt/app/", "/config/db") -> "/opt/app/config/db"
    """
    home_sep = home.endswith(_SEPARATORS)
    name_sep = name.startswith(_SEPARATORS)
    if home_sep and name_sep:
        return home + name[1:]
    if not home_sep and not name_sep:
        return f"{home}/{name}"
    return home + name


def strip_home(path: str, home: str | None) -> str:
    """Remove the home directory prefix and its trailing separator from a path.

    Args:
        path: POSIX-style absolute path (as produced by ResourceLocator.path).
        home: Home directory, or None.

    Returns:
        Home-relative path, or the path unchanged when it is not under home.
    """
    if not home:
        return path

    prefix = Path(home).absolute().as_posix().rstrip("/")
    if path == prefix:
        return ""
    if path.startswith(prefix + "/"):
        return path[len(prefix) + 1 :]
    return path


def url_problem(text: str | None, schemes: frozenset[str] = DEFAULT_URL_SCHEMES) -> str | None:
    """Check whether a string is a well-formed URL.

    Only syntax and scheme are checked; nothing is fetched.

    Args:
        text: Candidate URL string.
        schemes: Accepted schemes (lower-case).

    Returns:
        None if the string is a usable URL, otherwise why it is not.
    """
    if not text:
        return "empty URL"

    try:
        parts = urlsplit(text)
    except ValueError as e:
        return f"malformed URL: {e}"

    scheme = parts.scheme.lower()
    if not scheme:
        return "no scheme"
    # "C:\\config\\db.properties" splits into scheme "c"
    if len(scheme) == 1:
        return f"drive letter, not a scheme: {scheme}:"
    if scheme not in schemes:
        return f"unknown scheme: {scheme}"
    return None
