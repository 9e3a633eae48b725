"""Ordered fallback resolution of resource names to locators."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from resource_resolver.config import HOME_ENV_VAR
from resource_resolver.config import ResolverConfig
from resource_resolver.contexts import ResolutionContext
from resource_resolver.contexts import SearchPathContext
from resource_resolver.io import read_url_text
from resource_resolver.locator import ResourceLocator
from resource_resolver.paths import class_resource_name
from resource_resolver.paths import join_home
from resource_resolver.paths import strip_home
from resource_resolver.paths import url_problem
from resource_resolver.results import Attempt
from resource_resolver.results import ResolutionStatus
from resource_resolver.results import ResolutionTrace
from resource_resolver.results import Strategy

logger = logging.getLogger(__name__)


class ResourceResolver:
    """Resolve resource names to locators through a fixed fallback chain.

    For a name, tries in order and stops at the first hit:
    1. the name in the resolution context
    2. name + ".properties" in the resolution context (unless already suffixed)
    3. the name in the system search path
    4. name + ".properties" in the system search path (same condition as 2)
    5. the name as a filesystem path
    6. the name relative to the configured home directory
    7. the name as a literal URL (syntax only, nothing is fetched)

    Not finding a resource is not an error: lookups return None. Use
    explain() to see why.

    The resolver holds only immutable settings, so one instance can be
    shared freely between threads.
    """

    def __init__(
        self,
        config: ResolverConfig | None = None,
        default_context: ResolutionContext | None = None,
        system_context: ResolutionContext | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            config: Settings (defaults to ResolverConfig.from_env()).
            default_context: Context used when a lookup names none. Defaults
                to a snapshot of sys.path taken now.
            system_context: System-wide search path. Defaults to the live
                sys.path.
        """
        self.config = config if config is not None else ResolverConfig.from_env()
        self.default_context = default_context if default_context is not None else SearchPathContext.snapshot()
        self.system_context = system_context if system_context is not None else SearchPathContext.system()

    # ----- Name resolution -----

    def from_class(self, cls: type) -> ResourceLocator | None:
        """Resolve the properties resource named after a class's module.

        ``myapp.db.Settings`` looks for ``myapp.db.properties`` starting from
        the import root ``myapp`` was loaded from.
        """
        name = class_resource_name(cls, self.config.properties_suffix)
        return self.from_resource(name, self._class_context(cls))

    def from_class_resource(self, cls: type | None, name: str) -> ResourceLocator | None:
        """Resolve a name starting from a class's import root.

        Args:
            cls: Class whose import root is searched first (None for the
                default context).
            name: Resource name.
        """
        context = self._class_context(cls) if cls is not None else None
        return self.from_resource(name, context)

    def from_resource(self, name: str, context: ResolutionContext | None = None) -> ResourceLocator | None:
        """Resolve a resource name through the full fallback chain.

        Args:
            name: Resource name, filename or URL string.
            context: Context searched first (defaults to default_context).

        Returns:
            Locator of the first hit, or None if every step missed.
        """
        return self.explain(name, context).locator

    def explain(self, name: str, context: ResolutionContext | None = None) -> ResolutionTrace:
        """Run the fallback chain and record every attempt made.

        Stops at the first hit exactly like from_resource().
        """
        trace = ResolutionTrace(name=name)
        for attempt in self._attempts(name, context if context is not None else self.default_context):
            trace.attempts.append(attempt)
            if attempt.found:
                logger.debug(f"Resolved {name!r} via {attempt.strategy.value}: {attempt.locator}")
                break
        else:
            logger.debug(f"Could not resolve {name!r}")
        return trace

    def _attempts(self, name: str, context: ResolutionContext) -> Iterator[Attempt]:
        """Yield attempts lazily so later steps only run when earlier ones miss."""
        suffix = self.config.properties_suffix
        properties_name = None if name.endswith(suffix) else name + suffix

        yield self._context_attempt(Strategy.CONTEXT, context, name)
        if properties_name is not None:
            yield self._context_attempt(Strategy.CONTEXT_PROPERTIES, context, properties_name)

        yield self._context_attempt(Strategy.SYSTEM, self.system_context, name)
        if properties_name is not None:
            yield self._context_attempt(Strategy.SYSTEM_PROPERTIES, self.system_context, properties_name)

        yield self._filename_attempt(name)
        yield self._home_attempt(name)
        yield self._url_attempt(name)

    def _class_context(self, cls: type) -> ResolutionContext:
        context = SearchPathContext.for_module(cls.__module__)
        if context is None:
            logger.debug(f"No import root for module {cls.__module__!r}, using default context")
            return self.default_context
        return context

    # ----- Individual strategies -----

    def from_filename(self, filename: str | Path | None) -> ResourceLocator | None:
        """File locator for an existing file, or None."""
        return self._filename_attempt(filename).locator

    def from_url_string(self, text: str | None) -> ResourceLocator | None:
        """Locator for a well-formed URL string, or None if malformed.

        Only syntax is checked; the URL may point nowhere.
        """
        return self._url_attempt(text).locator

    def from_home_path(self, filename: str) -> ResourceLocator | None:
        """File locator for a path under the home directory, or None.

        Logs a warning when no home directory is configured.
        """
        return self._home_attempt(filename).locator

    def home_relative_location(self, locator: ResourceLocator) -> str:
        """Path of a locator relative to the home directory.

        Returns the locator's path unchanged when it is not under home.
        """
        return strip_home(locator.path, self.config.home)

    def read_text(self, locator: ResourceLocator, encoding: str | None = None) -> str:
        """Read a resource's full text.

        Raises:
            ResourceReadError: If the resource cannot be opened or read.
        """
        return read_url_text(locator, encoding=encoding)

    def _context_attempt(self, strategy: Strategy, context: ResolutionContext, name: str) -> Attempt:
        locator = context.find_resource(name)
        if locator is None:
            return Attempt(strategy, name, ResolutionStatus.NOT_FOUND, detail=f"not in {context!r}")
        return Attempt(strategy, name, ResolutionStatus.FOUND, locator)

    def _filename_attempt(self, filename: str | Path | None, strategy: Strategy = Strategy.FILENAME) -> Attempt:
        if filename is None:
            return Attempt(strategy, "", ResolutionStatus.NOT_FOUND, detail="no filename")

        candidate = str(filename)
        # Path("") means the working directory; an empty name names nothing
        if not candidate:
            return Attempt(strategy, candidate, ResolutionStatus.NOT_FOUND, detail="no filename")
        path = Path(filename)
        if not path.exists():
            return Attempt(strategy, candidate, ResolutionStatus.NOT_FOUND, detail="no such file or directory")

        try:
            locator = ResourceLocator.from_path(path)
        except ValueError as e:
            logger.debug(f"Cannot express {candidate!r} as a file URL: {e}")
            return Attempt(strategy, candidate, ResolutionStatus.UNUSABLE, detail=str(e))
        return Attempt(strategy, candidate, ResolutionStatus.FOUND, locator)

    def _home_attempt(self, filename: str) -> Attempt:
        home = self.config.home
        if not home:
            logger.warning(f"No {HOME_ENV_VAR} set; skipping home-relative lookup of {filename!r}")
            return Attempt(Strategy.HOME_PATH, filename, ResolutionStatus.UNUSABLE, detail="home directory not set")
        return self._filename_attempt(join_home(home, filename), Strategy.HOME_PATH)

    def _url_attempt(self, text: str | None) -> Attempt:
        problem = url_problem(text, self.config.url_schemes)
        if problem is not None:
            return Attempt(Strategy.URL_STRING, text or "", ResolutionStatus.UNUSABLE, detail=problem)
        return Attempt(Strategy.URL_STRING, text, ResolutionStatus.FOUND, ResourceLocator(text))
