"""Exception hierarchy for resource-resolver."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from resource_resolver.locator import ResourceLocator


class ResourceError(Exception):
    """Base exception for all resource-related errors."""


class ResourceReadError(ResourceError):
    """Resource was located but its content could not be opened or read."""

    def __init__(self, message: str, locator: ResourceLocator) -> None:
        super().__init__(message)
        self.locator = locator


class ResolverConfigError(ResourceError):
    """Resolver configuration is invalid (bad YAML, unknown keys, wrong types)."""
