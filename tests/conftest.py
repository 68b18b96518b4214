"""Shared fixtures for waymark tests."""

import pytest

from waymark.config import Config, DisplayConfig, LoggingConfig
from waymark.history import HistoryTracker


@pytest.fixture
def tracker():
    """An empty history tracker."""
    return HistoryTracker()


@pytest.fixture
def visited(tracker):
    """A tracker that has visited a, b and c in order."""
    for url in ("a.com", "b.com", "c.com"):
        tracker.visit(url)
    return tracker


@pytest.fixture
def sample_config():
    """A Config with no home page and logging disabled."""
    return Config(
        home_page="",
        display=DisplayConfig(max_entries=500),
        logging=LoggingConfig(level="WARNING", file=""),
    )


@pytest.fixture
def config_paths(tmp_path, monkeypatch):
    """Redirect the config directory into tmp_path."""
    config_dir = tmp_path / ".config" / "waymark"
    config_path = config_dir / "config.toml"
    monkeypatch.setattr("waymark.config.get_config_dir", lambda: config_dir)
    monkeypatch.setattr("waymark.config.get_config_path", lambda: config_path)
    return config_dir, config_path
