"""Configuration loading and defaults for Waymark."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path


def get_config_dir() -> Path:
    """Get the waymark config directory (XDG-style)."""
    return Path.home() / ".config" / "waymark"


def get_config_path() -> Path:
    """Get the config file path."""
    return get_config_dir() / "config.toml"


def toml_string(value: str) -> str:
    """Quote a value as a TOML basic string."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


@dataclass
class DisplayConfig:
    """History list display configuration."""

    max_entries: int = 500


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    file: str = ""  # empty = logging disabled


@dataclass
class Config:
    """Application configuration."""

    home_page: str = ""  # empty = start with no page
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def get_log_path(self) -> Path | None:
        """Get the log file path, or None if file logging is disabled."""
        if not self.logging.file:
            return None
        return Path(self.logging.file).expanduser()

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file or create defaults."""
        config_path = get_config_path()

        # Ensure config directory exists
        config_dir = get_config_dir()
        config_dir.mkdir(parents=True, exist_ok=True)

        if not config_path.exists():
            default_config = cls()
            default_config.save()
            return default_config

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        home_page = data.get("home_page", "").strip()

        display_data = data.get("display", {})
        display = DisplayConfig(
            max_entries=max(1, int(display_data.get("max_entries", 500))),
        )

        log_data = data.get("logging", {})
        logging_config = LoggingConfig(
            level=str(log_data.get("level", "WARNING")).upper(),
            file=log_data.get("file", ""),
        )

        return cls(
            home_page=home_page,
            display=display,
            logging=logging_config,
        )

    def save(self) -> None:
        """Save configuration to file."""
        config_path = get_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        # Build TOML content manually (tomllib is read-only)
        lines = [
            '# Waymark Configuration',
            '',
            '# Page to visit on startup (empty = none)',
            f'home_page = {toml_string(self.home_page)}',
            '',
            '[display]',
            '# Rows shown in the history list before a "show more" row',
            f'max_entries = {self.display.max_entries}',
            '',
            '[logging]',
            '# DEBUG, INFO, WARNING, ERROR',
            f'level = {toml_string(self.logging.level)}',
            '# Log file path (empty = logging disabled)',
            f'file = {toml_string(self.logging.file)}',
        ]

        config_path.write_text("\n".join(lines) + "\n")
