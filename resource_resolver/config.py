"""Resolver configuration.

Philosophy: the resolver never reads the environment itself. Configuration is
assembled here, once, and handed to ResourceResolver.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from resource_resolver.exceptions import ResolverConfigError
from resource_resolver.paths import DEFAULT_URL_SCHEMES
from resource_resolver.paths import PROPERTIES_SUFFIX

HOME_ENV_VAR = "RESOURCE_RESOLVER_HOME"

_CONFIG_KEYS = frozenset({"home", "properties_suffix", "url_schemes"})


def get_resource_home(environ: Mapping[str, str] | None = None) -> str | None:
    """Get the home directory used for home-relative lookups.

    Reads RESOURCE_RESOLVER_HOME, expanding ``~``. Unlike most home
    directories there is no default: an unset variable means the
    home-relative step is skipped.

    Args:
        environ: Environment to read (defaults to os.environ).

    Returns:
        Home directory string, or None if unset or empty.
    """
    env = os.environ if environ is None else environ
    home = env.get(HOME_ENV_VAR)
    if not home:
        return None
    return os.path.expanduser(home)


@dataclass(frozen=True)
class ResolverConfig:
    """Settings for a ResourceResolver."""

    home: str | None = None
    """Base directory for the home-relative step (None disables it)."""

    properties_suffix: str = PROPERTIES_SUFFIX
    """Suffix tried as a variant and appended to class resource names."""

    url_schemes: frozenset[str] = DEFAULT_URL_SCHEMES
    """Schemes accepted when a name is read as a literal URL."""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ResolverConfig:
        """Build config from environment variables."""
        return cls(home=get_resource_home(environ))

    def with_home(self, home: str | Path | None) -> ResolverConfig:
        """Return a copy with a different home directory."""
        return replace(self, home=None if home is None else str(home))


def load_config(path: Path, environ: Mapping[str, str] | None = None) -> ResolverConfig:
    """Load resolver config from a YAML file.

    Keys (all optional):
        home: base directory for home-relative lookups
        properties_suffix: suffix variant, default ".properties"
        url_schemes: list of accepted URL schemes

    The environment home is used when the file has no ``home`` key.

    Args:
        path: YAML file to read.
        environ: Environment for the home fallback (defaults to os.environ).

    Returns:
        Parsed configuration.

    Raises:
        ResolverConfigError: If the file is unreadable, not YAML, or invalid.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ResolverConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ResolverConfigError(f"Invalid YAML in config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ResolverConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}")

    unknown = set(data) - _CONFIG_KEYS
    if unknown:
        raise ResolverConfigError(f"Unknown keys in config file {path}: {', '.join(sorted(unknown))}")

    return _config_from_dict(data, path, environ)


def _config_from_dict(data: dict[str, Any], path: Path, environ: Mapping[str, str] | None) -> ResolverConfig:
    config = ResolverConfig.from_env(environ)

    if "home" in data:
        home = data["home"]
        if home is not None and not isinstance(home, str):
            raise ResolverConfigError(f"'home' in {path} must be a string")
        config = config.with_home(os.path.expanduser(home) if home else None)

    if "properties_suffix" in data:
        suffix = data["properties_suffix"]
        if not isinstance(suffix, str) or not suffix:
            raise ResolverConfigError(f"'properties_suffix' in {path} must be a non-empty string")
        config = replace(config, properties_suffix=suffix)

    if "url_schemes" in data:
        schemes = data["url_schemes"]
        if not isinstance(schemes, list) or not all(isinstance(s, str) and s for s in schemes):
            raise ResolverConfigError(f"'url_schemes' in {path} must be a list of strings")
        config = replace(config, url_schemes=frozenset(s.lower() for s in schemes))

    return config
