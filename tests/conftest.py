"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Every test gets its own configuration directory under tmp_path, so no test
reads or writes the real per-user config.yaml.
"""

from pathlib import Path

import pytest

from archive_cli.core.config import get_settings


@pytest.fixture(autouse=True)
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ARCHIVE_CLI_CONFIG_DIR at a fresh temporary directory."""
    directory = tmp_path / "archive-cli"
    monkeypatch.setenv("ARCHIVE_CLI_CONFIG_DIR", str(directory))
    monkeypatch.delenv("ARCHIVE_CLI_LOG_LEVEL", raising=False)
    monkeypatch.delenv("ARCHIVE_CLI_LOG_FORMAT", raising=False)
    get_settings.cache_clear()
    yield directory
    get_settings.cache_clear()


@pytest.fixture
def config_path(config_dir: Path) -> Path:
    """Location of config.yaml for the current test."""
    return config_dir / "config.yaml"
