"""Application settings loader from YAML configuration."""
import os
import yaml
from pathlib import Path
from typing import Optional
from dataclasses import dataclass

from salesreport.utils.exceptions import ConfigError

CONFIG_ENV_VAR = "SALESREPORT_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"


@dataclass
class AppSettings:
    """Application-wide settings loaded from config.yaml."""

    # App info
    app_name: str
    app_version: str

    # Logging
    log_level: str
    log_to_file: bool
    logs_dir: str
    log_file: str
    log_max_file_size_mb: int
    log_backup_count: int

    # Files
    input_encoding: Optional[str]
    report_encoding: Optional[str]

    @property
    def log_path(self) -> Path:
        """Full path of the rotating log file."""
        return Path(self.logs_dir).expanduser() / self.log_file

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "AppSettings":
        """Load settings from YAML file."""
        if config_path is None:
            env_path = os.getenv(CONFIG_ENV_VAR)
            config_path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load configuration {config_path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file is empty or malformed: {config_path}")

        try:
            return cls(
                app_name=config["app"]["name"],
                app_version=str(config["app"]["version"]),
                log_level=config["logging"]["level"],
                log_to_file=bool(config["logging"]["log_to_file"]),
                logs_dir=config["logging"]["logs_dir"],
                log_file=config["logging"]["log_file"],
                log_max_file_size_mb=int(config["logging"]["max_file_size_mb"]),
                log_backup_count=int(config["logging"]["backup_count"]),
                input_encoding=config["input"]["encoding"],
                report_encoding=config["report"]["encoding"]
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration {config_path}: missing or bad value {e}") from e


# Global settings instance
_settings: Optional[AppSettings] = None


def get_settings(config_path: Optional[Path] = None) -> AppSettings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings.load(config_path)
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call reloads them."""
    global _settings
    _settings = None
