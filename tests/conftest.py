"""Pytest configuration and shared fixtures for urlbot tests."""

from pathlib import Path

import pytest
from loguru import logger

from urlbot.utils.helpers import DirsProvider


REPO_ROOT = Path(__file__).parent.parent


class FakeDirs(DirsProvider):
    """Directory provider returning fixed directories under a test root."""

    def __init__(self, root: Path | None):
        self.root = root

    def home_dir(self) -> Path | None:
        return self.root / "home" if self.root else None

    def config_dir(self) -> Path | None:
        return self.root / "home" / ".config" if self.root else None


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep launch overrides from the developer's environment out of tests."""
    monkeypatch.delenv("URLBOT_CONF", raising=False)
    monkeypatch.delenv("URLBOT_DB", raising=False)
    yield
    # `check --no-logs` disables the urlbot logger process-wide
    logger.enable("urlbot")


@pytest.fixture
def caplog(caplog):
    """Route loguru records into pytest's caplog."""
    handler_id = logger.add(caplog.handler, format="{message}", level=0)
    yield caplog
    logger.remove(handler_id)


@pytest.fixture
def fake_dirs(tmp_path: Path) -> FakeDirs:
    """Provide a directory provider rooted in the test's tmp_path."""
    return FakeDirs(tmp_path)


@pytest.fixture
def example_config_path() -> Path:
    """Return the path to the shipped reference default configuration."""
    return REPO_ROOT / "example.config.toml"


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Provide a configuration path inside a not-yet-existing directory."""
    return tmp_path / "conf" / "config.toml"


@pytest.fixture
def homeless_dirs() -> FakeDirs:
    """Provide a directory provider that cannot resolve any directory."""
    return FakeDirs(None)
