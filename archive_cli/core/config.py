"""
Configuration Management.

Two sources, kept apart:

Runtime settings (environment, ARCHIVE_CLI_ prefix):
    ARCHIVE_CLI_CONFIG_DIR  - Directory holding config.yaml
    ARCHIVE_CLI_LOG_LEVEL   - Log level when no --verbose/--debug flag is given
    ARCHIVE_CLI_LOG_FORMAT  - 'console' or 'json'

User configuration (config.yaml in the per-user application directory):
    baseUrl                 - Search service base URL

Only baseUrl is recognized. Other keys are kept and written back unchanged.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import typer
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from archive_cli.core.exceptions import ConfigurationError

APP_NAME = "archive-cli"
CONFIG_FILENAME = "config.yaml"
DEFAULT_BASE_URL = "https://archive.org/services"


class CliSettings(BaseSettings):
    """Process-level settings read from the environment."""

    config_dir: Path | None = None
    log_level: str = "WARNING"
    log_format: str = "console"

    model_config = SettingsConfigDict(
        env_prefix="ARCHIVE_CLI_",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> CliSettings:
    """Get cached runtime settings."""
    return CliSettings()


def default_config_path() -> Path:
    """Resolve config.yaml, honouring ARCHIVE_CLI_CONFIG_DIR."""
    config_dir = get_settings().config_dir
    if config_dir is None:
        config_dir = Path(typer.get_app_dir(APP_NAME))
    return config_dir / CONFIG_FILENAME


class ConfigSchema(BaseModel):
    """Stored configuration with its defaults."""

    base_url: str = Field(default=DEFAULT_BASE_URL, alias="baseUrl")

    model_config = ConfigDict(extra="allow", populate_by_name=True)


def _validated(data: dict[str, Any], source: Path) -> dict[str, Any]:
    """Apply schema defaults and check known keys."""
    try:
        return ConfigSchema(**data).model_dump(by_alias=True)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {source}:\n{e}") from e


class ConfigStore:
    """
    Key-value store for user configuration, persisted as YAML.

    The file is read lazily on first access. Every set() and clear()
    writes it immediately.

    Usage:
        store = ConfigStore()
        store.set("baseUrl", "http://localhost:8080/services")
        store.get("baseUrl")
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path if path is not None else default_config_path()
        self._data: dict[str, Any] | None = None

    def _load(self) -> dict[str, Any]:
        if self._data is None:
            raw: Any = {}
            if self.path.exists():
                try:
                    with open(self.path, encoding="utf-8") as f:
                        raw = yaml.safe_load(f) or {}
                except yaml.YAMLError as e:
                    raise ConfigurationError(
                        f"Could not parse configuration file {self.path}: {e}"
                    ) from e
            if not isinstance(raw, dict):
                raise ConfigurationError(
                    f"Configuration file {self.path} must contain a mapping"
                )
            self._data = _validated(raw, self.path)
        return self._data

    def _write(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.safe_dump(self._data, f, default_flow_style=False, sort_keys=False)

    def get(self, key: str, default: Any = None) -> Any:
        """Return the stored value, the schema default, or ``default``."""
        return self._load().get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Store a value and persist it."""
        data = dict(self._load())
        data[key] = value
        self._data = _validated(data, self.path)
        self._write()

    def get_all(self) -> dict[str, Any]:
        """Return a copy of the whole configuration, defaults included."""
        return dict(self._load())

    def clear(self) -> None:
        """Reset to schema defaults and persist."""
        self._data = ConfigSchema().model_dump(by_alias=True)
        self._write()
