"""
Pydantic Settings for hashmux configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsError

from .exceptions import ConfigFileError, ConfigValidationError
from .models.config import HashConfig, LoggingConfig

CONFIG_DIR_NAME = ".hashmux"
CONFIG_FILE_NAME = "config.toml"


def _get_logger():
    from ..services.logging import NullLogger
    from .di import resolve_or_default
    from .interfaces.logger import ILogger

    return resolve_or_default(ILogger, NullLogger)


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find .hashmux/config.toml by walking up from start_dir (or cwd).

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

        # Also check for pyproject.toml with [tool.hashmux] section
        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
                if "tool" in data and "hashmux" in data["tool"]:
                    return pyproject
            except tomllib.TOMLDecodeError as e:
                _get_logger().debug("Failed to parse pyproject.toml at %s: %s", pyproject, e)
            except OSError as e:
                _get_logger().debug("Failed to read pyproject.toml at %s: %s", pyproject, e)

    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from TOML config files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._data: dict[str, Any] | None = None
        self.config_file: str | None = None
        self.config_error: str | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is not None:
            return self._data

        self._data = {}

        path = self._config_path
        if path is None:
            path = find_config_file(self._start_dir)

        if path is None:
            return self._data

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)

            # Handle pyproject.toml vs .hashmux/config.toml
            if path.name == "pyproject.toml":
                data = data.get("tool", {}).get("hashmux", {})

            self._data = data
            self.config_file = str(path)

        except tomllib.TOMLDecodeError as e:
            _get_logger().warning("Failed to parse config file %s: %s", path, e)
            self.config_error = f"Failed to parse config file: {e}"
        except OSError as e:
            _get_logger().warning("Failed to read config file %s: %s", path, e)
            self.config_error = f"Failed to read config file: {e}"

        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        data = self._load_toml()
        field_value = data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all TOML data for settings initialization."""
        return self._load_toml()


class HashmuxSettings(BaseSettings):
    """Hashmux configuration settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (HASHMUX_<section>__<field>)
    3. TOML config file (.hashmux/config.toml or pyproject.toml [tool.hashmux])
    4. Model defaults
    """

    model_config = {
        "env_prefix": "HASHMUX_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    hash: HashConfig = HashConfig()
    logging: LoggingConfig = LoggingConfig()

    # Internal fields (not from config)
    _config_file: str | None = None
    _config_error: str | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to add TOML loading.

        Note: config_path/start_dir cannot be passed through here, so
        load_settings() hands them over in module-level variables.
        """
        toml_source = TomlConfigSource(
            settings_cls,
            config_path=_current_config_path,
            start_dir=_current_start_dir,
        )
        return (
            init_settings,
            env_settings,
            toml_source,
        )

    @property
    def config_file(self) -> str | None:
        """Path of the TOML file the settings were read from, if any."""
        return self._config_file

    @property
    def config_error(self) -> str | None:
        """Description of a config file that could not be loaded, if any."""
        return self._config_error


# Module-level variables for passing to settings_customise_sources
_current_config_path: Path | None = None
_current_start_dir: str | None = None


def load_settings(config_path: Path | None = None, start_dir: str | None = None) -> HashmuxSettings:
    """Load hashmux settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)

    Returns:
        HashmuxSettings instance with all sources merged

    Raises:
        ConfigFileError: If an explicit config_path does not exist
        ConfigValidationError: If a config value fails validation
    """
    global _current_config_path, _current_start_dir

    if config_path is not None and not Path(config_path).is_file():
        raise ConfigFileError("Config file not found", file_path=str(config_path))

    _current_config_path = Path(config_path) if config_path is not None else None
    _current_start_dir = start_dir

    try:
        try:
            settings = HashmuxSettings()
        except ValidationError as e:
            raise ConfigValidationError(
                "Invalid hashmux configuration",
                context={"errors": [err["msg"] for err in e.errors()]},
                cause=e,
            ) from e
        except SettingsError as e:
            raise ConfigValidationError(
                "Invalid hashmux configuration",
                context={"errors": [str(e)]},
                cause=e,
            ) from e

        # Record where the TOML data came from
        toml_source = TomlConfigSource(HashmuxSettings, _current_config_path, start_dir)
        toml_source()
        settings._config_file = toml_source.config_file
        settings._config_error = toml_source.config_error

        return settings
    finally:
        _current_config_path = None
        _current_start_dir = None
