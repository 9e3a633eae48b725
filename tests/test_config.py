"""Tests for resolver configuration."""

from pathlib import Path

import pytest
from resource_resolver.config import HOME_ENV_VAR
from resource_resolver.config import ResolverConfig
from resource_resolver.config import get_resource_home
from resource_resolver.config import load_config
from resource_resolver.exceptions import ResolverConfigError
from resource_resolver.paths import DEFAULT_URL_SCHEMES


class TestGetResourceHome:
    """Tests for get_resource_home."""

    def test_reads_variable(self) -> None:
        assert get_resource_home({HOME_ENV_VAR: "/opt/app"}) == "/opt/app"

    def test_unset(self) -> None:
        assert get_resource_home({}) is None

    def test_empty_is_unset(self) -> None:
        assert get_resource_home({HOME_ENV_VAR: ""}) is None

    def test_expands_user(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("HOME", str(tmp_path))
        assert get_resource_home({HOME_ENV_VAR: "~/app"}) == str(tmp_path / "app")

    def test_defaults_to_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(HOME_ENV_VAR, "/srv/app")
        assert get_resource_home() == "/srv/app"


class TestResolverConfig:
    """Tests for ResolverConfig."""

    def test_defaults(self) -> None:
        config = ResolverConfig()
        assert config.home is None
        assert config.properties_suffix == ".properties"
        assert config.url_schemes == DEFAULT_URL_SCHEMES

    def test_from_env(self) -> None:
        assert ResolverConfig.from_env({HOME_ENV_VAR: "/opt/app"}).home == "/opt/app"

    def test_with_home(self, tmp_path: Path) -> None:
        config = ResolverConfig().with_home(tmp_path)
        assert config.home == str(tmp_path)
        assert config.with_home(None).home is None


class TestLoadConfig:
    """Tests for load_config."""

    def test_full_file(self, tmp_path: Path) -> None:
        path = tmp_path / "resolver.yaml"
        path.write_text("home: /opt/app\nproperties_suffix: .conf\nurl_schemes: [HTTPS, s3]\n")

        config = load_config(path, environ={})

        assert config.home == "/opt/app"
        assert config.properties_suffix == ".conf"
        assert config.url_schemes == frozenset({"https", "s3"})

    def test_empty_file_uses_environment(self, tmp_path: Path) -> None:
        path = tmp_path / "resolver.yaml"
        path.write_text("")

        config = load_config(path, environ={HOME_ENV_VAR: "/env/home"})

        assert config.home == "/env/home"
        assert config.properties_suffix == ".properties"

    def test_null_home_disables_environment_home(self, tmp_path: Path) -> None:
        path = tmp_path / "resolver.yaml"
        path.write_text("home: null\n")

        assert load_config(path, environ={HOME_ENV_VAR: "/env/home"}).home is None

    def test_unknown_key(self, tmp_path: Path) -> None:
        path = tmp_path / "resolver.yaml"
        path.write_text("homedir: /opt/app\n")

        with pytest.raises(ResolverConfigError, match="homedir"):
            load_config(path, environ={})

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "resolver.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ResolverConfigError, match="mapping"):
            load_config(path, environ={})

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "resolver.yaml"
        path.write_text("home: [unclosed\n")

        with pytest.raises(ResolverConfigError, match="Invalid YAML"):
            load_config(path, environ={})

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ResolverConfigError, match="Cannot read"):
            load_config(tmp_path / "absent.yaml", environ={})

    @pytest.mark.parametrize(
        "content",
        [
            "home: 42\n",
            "properties_suffix: ''\n",
            "url_schemes: https\n",
            "url_schemes: [https, 3]\n",
        ],
    )
    def test_wrong_types(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "resolver.yaml"
        path.write_text(content)

        with pytest.raises(ResolverConfigError):
            load_config(path, environ={})
