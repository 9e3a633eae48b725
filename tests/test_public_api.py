"""Tests for the package's public exports."""

import resource_resolver


class TestPublicApi:
    """Everything in __all__ is importable from the package root."""

    def test_all_names_resolve(self) -> None:
        for name in resource_resolver.__all__:
            assert hasattr(resource_resolver, name), name

    def test_core_names_exported(self) -> None:
        assert {"ResourceResolver", "ResourceLocator", "ResourceReadError"} <= set(resource_resolver.__all__)
