"""Explicit outcomes for resolution attempts."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from enum import Enum

from resource_resolver.locator import ResourceLocator


class ResolutionStatus(str, Enum):
    """Outcome of a single resolution attempt."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    UNUSABLE = "unusable"  # Step could not run or its input was invalid


class Strategy(str, Enum):
    """The steps of the fallback chain, in the order they run."""

    CONTEXT = "context"
    CONTEXT_PROPERTIES = "context_properties"
    SYSTEM = "system"
    SYSTEM_PROPERTIES = "system_properties"
    FILENAME = "filename"
    HOME_PATH = "home_path"
    URL_STRING = "url_string"


@dataclass(frozen=True)
class Attempt:
    """One step of the fallback chain and what it produced."""

    strategy: Strategy
    candidate: str  # Name, path or URL actually tried
    status: ResolutionStatus
    locator: ResourceLocator | None = None
    detail: str = ""

    @property
    def found(self) -> bool:
        return self.status is ResolutionStatus.FOUND


@dataclass
class ResolutionTrace:
    """Every attempt made while resolving one name.

    Attempts stop at the first hit, so a found trace always ends with a
    FOUND attempt and a missing one lists the whole chain.
    """

    name: str
    attempts: list[Attempt] = field(default_factory=list)

    @property
    def locator(self) -> ResourceLocator | None:
        """Locator of the successful attempt, or None."""
        for attempt in self.attempts:
            if attempt.found:
                return attempt.locator
        return None

    @property
    def found(self) -> bool:
        return self.locator is not None
