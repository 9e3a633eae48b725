"""Resource Resolver - locate configuration resources by name.

Turns a resource name, filename or URL string into a URL by trying a fixed
chain of lookups: the caller's package or search path, a ".properties"
variant, the system search path, the filesystem, a configured home
directory, and finally the string itself as a URL.

Philosophy: not finding something is an answer, not an error. Only failing
to read something that was found raises.
"""

from __future__ import annotations

# Configuration
from resource_resolver.config import HOME_ENV_VAR
from resource_resolver.config import ResolverConfig
from resource_resolver.config import get_resource_home
from resource_resolver.config import load_config

# Contexts
from resource_resolver.contexts import PackageContext
from resource_resolver.contexts import ResolutionContext
from resource_resolver.contexts import SearchPathContext

# Exceptions
from resource_resolver.exceptions import ResolverConfigError
from resource_resolver.exceptions import ResourceError
from resource_resolver.exceptions import ResourceReadError

# I/O
from resource_resolver.io import open_stream
from resource_resolver.io import read_url_text

# Core classes
from resource_resolver.locator import ResourceLocator

# Path utilities
from resource_resolver.paths import class_resource_name
from resource_resolver.paths import join_home
from resource_resolver.paths import strip_home
from resource_resolver.resolver import ResourceResolver

# Outcomes
from resource_resolver.results import Attempt
from resource_resolver.results import ResolutionStatus
from resource_resolver.results import ResolutionTrace
from resource_resolver.results import Strategy

__all__ = [
    # Core
    "ResourceResolver",
    "ResourceLocator",
    # Contexts
    "ResolutionContext",
    "PackageContext",
    "SearchPathContext",
    # Configuration
    "ResolverConfig",
    "HOME_ENV_VAR",
    "get_resource_home",
    "load_config",
    # Outcomes
    "Attempt",
    "ResolutionStatus",
    "ResolutionTrace",
    "Strategy",
    # I/O
    "open_stream",
    "read_url_text",
    # Paths
    "class_resource_name",
    "join_home",
    "strip_home",
    # Exceptions
    "ResourceError",
    "ResourceReadError",
    "ResolverConfigError",
]
