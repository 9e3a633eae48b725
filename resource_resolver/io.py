"""Opening and reading resolved resources."""

from __future__ import annotations

import codecs
import http.client
import io
import locale
import logging
import os
import zipfile
from collections.abc import Callable
from typing import BinaryIO
from urllib.request import urlopen

from resource_resolver.exceptions import ResourceError
from resource_resolver.exceptions import ResourceReadError
from resource_resolver.locator import ResourceLocator

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60.0

StreamOpener = Callable[[ResourceLocator], BinaryIO]


def open_stream(locator: ResourceLocator, timeout: float = DEFAULT_TIMEOUT) -> BinaryIO:
    """Open a binary stream on a locator.

    file:// opens the local file, jar: reads the member out of its archive,
    anything else goes through urllib.

    Args:
        locator: Resource to open.
        timeout: Network timeout in seconds (ignored for local resources).

    Returns:
        Binary stream; the caller closes it.

    Raises:
        OSError: If the resource cannot be opened.
    """
    if locator.is_file:
        return open(locator.to_path(), "rb")

    if locator.is_archive_member:
        try:
            archive, member = locator.archive_parts()
        except ValueError as e:
            raise OSError(f"Only local archives can be read: {locator.url}") from e
        try:
            with zipfile.ZipFile(archive) as zf:
                return io.BytesIO(zf.read(member))
        except KeyError as e:
            raise FileNotFoundError(f"No member {member!r} in archive {archive}") from e
        except zipfile.BadZipFile as e:
            raise OSError(f"Bad zip archive {archive}: {e}") from e

    try:
        return urlopen(locator.url, timeout=timeout)  # noqa: S310
    except (ValueError, http.client.HTTPException) as e:
        raise OSError(f"Cannot open URL {locator.url}: {e}") from e


def read_url_text(
    locator: ResourceLocator,
    *,
    encoding: str | None = None,
    opener: StreamOpener | None = None,
) -> str:
    """Read the full text content of a resource.

    Lines are read one at a time and rejoined with os.linesep, which also
    terminates the last line. Bytes that do not decode are replaced.

    Args:
        locator: Resource to read.
        encoding: Text encoding (defaults to the platform's preferred one).
        opener: Stream factory (defaults to open_stream).

    Returns:
        Resource text.

    Raises:
        ResourceError: If the encoding is unknown.
        ResourceReadError: If the stream cannot be opened or a read fails.
    """
    opener = opener or open_stream
    encoding = encoding or locale.getpreferredencoding(False)
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        logger.error(f"Unknown encoding {encoding!r} for URL [{locator}]")
        raise ResourceError(f"Unknown encoding {encoding!r}") from e

    try:
        stream = opener(locator)
    except (OSError, http.client.HTTPException) as e:
        logger.error(f"Error opening URL [{locator}]: {e}")
        raise ResourceReadError(f"Cannot open {locator}: {e}", locator) from e

    lines: list[str] = []
    reader: io.TextIOWrapper | None = None
    try:
        reader = io.TextIOWrapper(stream, encoding=encoding, errors="replace")
        for line in reader:
            lines.append(line.removesuffix("\n"))
            lines.append(os.linesep)
    except (OSError, http.client.HTTPException) as e:
        logger.error(f"Error reading text from URL [{locator}]: {e}")
        raise ResourceReadError(f"Cannot read {locator}: {e}", locator) from e
    finally:
        # Closing the wrapper closes the stream underneath it
        try:
            (reader or stream).close()
        except OSError as e:
            logger.error(f"Error closing after reading text from URL [{locator}]: {e}")

    return "".join(lines)
