"""
Tests for hashmux configuration loading and bootstrap.

Tests verify:
- Defaults match the Pydantic models
- .hashmux/config.toml and pyproject.toml [tool.hashmux] discovery
- Environment variables override TOML values
- Invalid and unreadable config files
- bootstrap() wires settings, logger and registry into the container
"""

from pathlib import Path

import pytest

from hashmux.core.bootstrap import bootstrap, is_initialized, reset
from hashmux.core.exceptions import ConfigFileError, ConfigValidationError
from hashmux.core.interfaces.logger import ILogger
from hashmux.core.models.config import DEFAULT_CHUNK_SIZE, HashConfig
from hashmux.core.settings import HashmuxSettings, find_config_file, load_settings
from hashmux.hashing.registry import MD5, HashAlgorithmRegistry, default_registry
from hashmux.services.logging import HashmuxLogger


def write_config(root: Path, body: str) -> Path:
    config_dir = root / ".hashmux"
    config_dir.mkdir(parents=True, exist_ok=True)
    path = config_dir / "config.toml"
    path.write_text(body)
    return path


class TestDefaults:
    """Defaults without any config file."""

    def test_default_hash_section(self, isolated_app):
        """hash section defaults."""
        settings = load_settings(start_dir=str(isolated_app))
        assert settings.hash.default == ["md5", "sha1", "sha256"]
        assert settings.hash.extra == []
        assert settings.hash.chunk_size == DEFAULT_CHUNK_SIZE

    def test_default_logging_section(self, isolated_app):
        """logging section defaults."""
        settings = load_settings(start_dir=str(isolated_app))
        assert settings.logging.level == "warning"
        assert settings.logging.console is False
        assert settings.logging.file is False

    def test_no_config_file_found(self, isolated_app):
        """Nothing is recorded when no file exists."""
        settings = load_settings(start_dir=str(isolated_app))
        assert settings.config_file is None
        assert settings.config_error is None


class TestConfigFiles:
    """TOML discovery and parsing."""

    def test_find_config_walks_up(self, isolated_app):
        """A config in a parent directory is found."""
        path = write_config(isolated_app, "[hash]\nextra = ['sha512']\n")
        nested = isolated_app / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_file(str(nested)) == path

    def test_values_loaded_from_config(self, isolated_app):
        """TOML values override defaults."""
        path = write_config(
            isolated_app,
            '[hash]\ndefault = ["sha256"]\nextra = ["blake3"]\nchunk_size = 4096\n'
            '[logging]\nlevel = "DEBUG"\n',
        )
        settings = load_settings(start_dir=str(isolated_app))
        assert settings.hash.default == ["sha256"]
        assert settings.hash.extra == ["blake3"]
        assert settings.hash.chunk_size == 4096
        assert settings.logging.level == "debug"
        assert settings.config_file == str(path)

    def test_comma_separated_lists(self, isolated_app):
        """String lists may be written comma-separated."""
        write_config(isolated_app, '[hash]\ndefault = "md5, SHA-1"\n')
        settings = load_settings(start_dir=str(isolated_app))
        assert settings.hash.default == ["md5", "SHA-1"]

    def test_pyproject_tool_section(self, isolated_app):
        """[tool.hashmux] in pyproject.toml is used."""
        pyproject = isolated_app / "pyproject.toml"
        pyproject.write_text('[tool.hashmux.hash]\ndefault = ["sha1"]\n')
        settings = load_settings(start_dir=str(isolated_app))
        assert settings.hash.default == ["sha1"]
        assert settings.config_file == str(pyproject)

    def test_pyproject_without_section_ignored(self, isolated_app):
        """A pyproject.toml without [tool.hashmux] is skipped."""
        (isolated_app / "pyproject.toml").write_text('[project]\nname = "x"\n')
        assert find_config_file(str(isolated_app)) is None

    def test_explicit_config_path(self, tmp_path):
        """An explicit path wins over discovery."""
        path = tmp_path / "custom.toml"
        path.write_text("[hash]\nchunk_size = 10\n")
        settings = load_settings(config_path=path)
        assert settings.hash.chunk_size == 10

    def test_explicit_config_path_missing(self, tmp_path):
        """A missing explicit path is an error."""
        with pytest.raises(ConfigFileError) as exc_info:
            load_settings(config_path=tmp_path / "missing.toml")
        assert exc_info.value.context["file_path"].endswith("missing.toml")

    def test_malformed_toml_recorded(self, isolated_app):
        """Broken TOML falls back to defaults and records the error."""
        write_config(isolated_app, "[hash\n")
        settings = load_settings(start_dir=str(isolated_app))
        assert settings.hash.default == ["md5", "sha1", "sha256"]
        assert settings.config_error is not None
        assert "Failed to parse config file" in settings.config_error

    def test_invalid_value_raises(self, isolated_app):
        """Values failing validation raise ConfigValidationError."""
        write_config(isolated_app, "[hash]\nchunk_size = 0\n")
        with pytest.raises(ConfigValidationError):
            load_settings(start_dir=str(isolated_app))

    def test_unknown_extra_rejected(self, isolated_app):
        """Only known optional algorithms are accepted in hash.extra."""
        write_config(isolated_app, '[hash]\nextra = ["whirlpool"]\n')
        with pytest.raises(ConfigValidationError):
            load_settings(start_dir=str(isolated_app))


class TestEnvironment:
    """Environment variable overrides."""

    def test_env_overrides_toml(self, isolated_app, monkeypatch):
        """HASHMUX_<section>__<field> beats the config file."""
        write_config(isolated_app, "[hash]\nchunk_size = 4096\n")
        monkeypatch.setenv("HASHMUX_HASH__CHUNK_SIZE", "1024")
        settings = load_settings(start_dir=str(isolated_app))
        assert settings.hash.chunk_size == 1024

    def test_env_logging_level(self, isolated_app, monkeypatch):
        """Logging options can be set from the environment."""
        monkeypatch.setenv("HASHMUX_LOGGING__LEVEL", "info")
        settings = load_settings(start_dir=str(isolated_app))
        assert settings.logging.level == "info"

    def test_env_default_comma_separated(self, isolated_app, monkeypatch):
        """hash.default accepts a comma-separated list."""
        monkeypatch.setenv("HASHMUX_HASH__DEFAULT", "md5,sha1")
        settings = load_settings(start_dir=str(isolated_app))
        assert settings.hash.default == ["md5", "sha1"]

    def test_env_default_single_name(self, isolated_app, monkeypatch):
        """A single bare name is a one-element list."""
        monkeypatch.setenv("HASHMUX_HASH__DEFAULT", "sha256")
        settings = load_settings(start_dir=str(isolated_app))
        assert settings.hash.default == ["sha256"]

    def test_env_default_json_list(self, isolated_app, monkeypatch):
        """A JSON array is accepted as well."""
        monkeypatch.setenv("HASHMUX_HASH__DEFAULT", '["sha1", "md5"]')
        settings = load_settings(start_dir=str(isolated_app))
        assert settings.hash.default == ["sha1", "md5"]

    def test_env_extra(self, isolated_app, monkeypatch):
        """hash.extra can be set from the environment."""
        monkeypatch.setenv("HASHMUX_HASH__EXTRA", "blake3")
        settings = load_settings(start_dir=str(isolated_app))
        assert settings.hash.extra == ["blake3"]

    def test_env_extra_reaches_registry(self, isolated_app, monkeypatch):
        """Extras from the environment are registered at bootstrap."""
        monkeypatch.setenv("HASHMUX_HASH__EXTRA", "sha512, blake3")
        registry = bootstrap(start_dir=str(isolated_app)).resolve(HashAlgorithmRegistry)
        assert "sha512" in registry
        assert "blake3" in registry

    def test_env_unknown_extra_rejected(self, isolated_app, monkeypatch):
        """An unknown extra from the environment is a validation error."""
        monkeypatch.setenv("HASHMUX_HASH__EXTRA", "whirlpool")
        with pytest.raises(ConfigValidationError):
            load_settings(start_dir=str(isolated_app))

    def test_env_undecodable_section_wrapped(self, isolated_app, monkeypatch):
        """A section set to a non-JSON value raises ConfigValidationError."""
        monkeypatch.setenv("HASHMUX_HASH", "not-json")
        with pytest.raises(ConfigValidationError):
            load_settings(start_dir=str(isolated_app))


class TestConfigModel:
    """Direct model behaviour."""

    def test_comma_separated_string(self):
        """Comma-separated strings are split and stripped."""
        assert HashConfig(default=" md5 , sha1,").default == ["md5", "sha1"]

    def test_empty_default_rejected(self):
        """At least one default algorithm is required."""
        with pytest.raises(ValueError):
            HashConfig(default=[])


class TestBootstrap:
    """Container wiring."""

    def test_bootstrap_registers_services(self, isolated_app):
        """Settings, logger and registry are resolvable."""
        container = bootstrap(start_dir=str(isolated_app))
        assert is_initialized()
        assert isinstance(container.resolve(HashmuxSettings), HashmuxSettings)
        assert isinstance(container.resolve(ILogger), HashmuxLogger)
        registry = container.resolve(HashAlgorithmRegistry)
        assert registry.lookup("md5") is MD5

    def test_bootstrap_registers_extras_on_a_copy(self, isolated_app):
        """hash.extra algorithms are added without touching the default registry."""
        write_config(isolated_app, '[hash]\nextra = ["sha512", "blake3"]\n')
        container = bootstrap(start_dir=str(isolated_app))
        registry = container.resolve(HashAlgorithmRegistry)

        assert [d.name for d in registry.list_supported()] == [
            "md5",
            "sha1",
            "sha256",
            "sha512",
            "blake3",
        ]
        assert "sha512" not in default_registry()

    def test_bootstrap_is_idempotent(self, isolated_app):
        """A second call returns the same container without re-registering."""
        first = bootstrap(start_dir=str(isolated_app))
        registry = first.resolve(HashAlgorithmRegistry)
        second = bootstrap(start_dir=str(isolated_app))
        assert second is first
        assert second.resolve(HashAlgorithmRegistry) is registry

    def test_reset_clears_state(self, isolated_app):
        """reset() forgets the container."""
        bootstrap(start_dir=str(isolated_app))
        reset()
        assert not is_initialized()
