"""Tests for waymark.config module."""

import tomllib
from pathlib import Path

import pytest

from waymark.config import Config, DisplayConfig, LoggingConfig, get_config_dir, toml_string


class TestConfigDefaults:
    def test_default_home_page(self):
        config = Config()
        assert config.home_page == ""

    def test_default_display(self):
        config = Config()
        assert config.display.max_entries == 500

    def test_default_logging(self):
        config = Config()
        assert config.logging.level == "WARNING"
        assert config.logging.file == ""

    def test_log_path_disabled_by_default(self):
        assert Config().get_log_path() is None

    def test_log_path_expands_user(self):
        config = Config(logging=LoggingConfig(file="~/waymark.log"))
        assert config.get_log_path() == Path.home() / "waymark.log"

    def test_config_dir_is_xdg_style(self):
        assert get_config_dir() == Path.home() / ".config" / "waymark"


class TestTomlString:
    def test_plain(self):
        assert toml_string("a.com") == '"a.com"'

    def test_escapes(self):
        assert toml_string('a"b\\c') == '"a\\"b\\\\c"'


class TestConfigSaveLoad:
    def test_save_creates_file(self, config_paths):
        config_dir, config_path = config_paths
        Config().save()
        assert config_path.exists()

    def test_saved_file_is_valid_toml(self, config_paths):
        _, config_path = config_paths
        Config(home_page="start.example").save()
        data = tomllib.loads(config_path.read_text())
        assert data["home_page"] == "start.example"
        assert data["display"]["max_entries"] == 500

    def test_round_trip(self, tmp_path, config_paths):
        original = Config(
            home_page="home.example.com",
            display=DisplayConfig(max_entries=50),
            logging=LoggingConfig(level="DEBUG", file=str(tmp_path / "waymark.log")),
        )
        original.save()

        loaded = Config.load()
        assert loaded.home_page == original.home_page
        assert loaded.display.max_entries == 50
        assert loaded.logging.level == "DEBUG"
        assert loaded.logging.file == original.logging.file

    def test_round_trip_quotes_and_backslashes(self, config_paths):
        original = Config(
            home_page='example.com/search?q="waymark"',
            logging=LoggingConfig(file="C:\\Users\\me\\waymark.log"),
        )
        original.save()

        loaded = Config.load()
        assert loaded.home_page == original.home_page
        assert loaded.logging.file == "C:\\Users\\me\\waymark.log"

    def test_load_creates_defaults_when_missing(self, config_paths):
        _, config_path = config_paths
        config = Config.load()
        assert config_path.exists()
        assert config.home_page == ""

    def test_load_partial_config(self, config_paths):
        config_dir, config_path = config_paths
        config_dir.mkdir(parents=True)
        config_path.write_text('home_page = "  news.example  "\n')

        config = Config.load()
        assert config.home_page == "news.example"
        # Defaults for missing fields
        assert config.display.max_entries == 500
        assert config.logging.level == "WARNING"

    def test_level_is_uppercased(self, config_paths):
        config_dir, config_path = config_paths
        config_dir.mkdir(parents=True)
        config_path.write_text('[logging]\nlevel = "info"\n')
        assert Config.load().logging.level == "INFO"

    def test_max_entries_clamped(self, config_paths):
        config_dir, config_path = config_paths
        config_dir.mkdir(parents=True)
        config_path.write_text("[display]\nmax_entries = 0\n")
        assert Config.load().display.max_entries == 1

    def test_malformed_toml_raises(self, config_paths):
        config_dir, config_path = config_paths
        config_dir.mkdir(parents=True)
        config_path.write_text("home_page = [unclosed\n")
        with pytest.raises(tomllib.TOMLDecodeError):
            Config.load()
