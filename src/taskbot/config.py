"""Configuration management for the Taskbot application."""

import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

SAVE_EACH = "each"  # write after every change
SAVE_EXIT = "exit"  # write once when the session ends
SAVE_MODES = (SAVE_EACH, SAVE_EXIT)


@dataclass
class ConfigModel:
    """Global configuration model for Taskbot."""

    # File paths
    data_dir: str = "~/.taskbot"
    data_file: str = "tasks.txt"

    # Persistence
    save_mode: str = SAVE_EACH
    backup_on_save: bool = False

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    # UI
    show_banner: bool = True
    no_color: bool = False

    def __post_init__(self):
        """Post-initialization setup."""
        self.data_dir = os.path.expanduser(str(self.data_dir))
        if self.log_file:
            self.log_file = os.path.expanduser(str(self.log_file))

        if self.save_mode not in SAVE_MODES:
            logger.warning("Unknown save_mode %r, using %r", self.save_mode, SAVE_EACH)
            self.save_mode = SAVE_EACH

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        return yaml.dump(asdict(self), default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML. Unknown keys are ignored."""
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("Configuration must be a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
        return cls(**{k: v for k, v in data.items() if k in known})

    def get_data_path(self) -> Path:
        """Get the task file path."""
        data_file = Path(os.path.expanduser(self.data_file))
        if data_file.is_absolute():
            return data_file
        return Path(self.data_dir) / data_file

    def get_config_path(self) -> Path:
        """Get the config file path."""
        return Path(self.data_dir) / "config.yaml"


class Config:
    """Configuration manager for Taskbot."""

    _instance: Optional[ConfigModel] = None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Load configuration from file or create default."""
        if cls._instance is not None:
            return cls._instance

        config = ConfigModel()

        if config_path is None:
            config_path = config.get_config_path()
        config_path = Path(config_path).expanduser()

        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    config = ConfigModel.from_yaml(f.read())
                logger.info("Loaded configuration from %s", config_path)
            except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
                logger.warning("Failed to load config from %s: %s; using defaults",
                               config_path, e)
                config = ConfigModel()
        else:
            cls.save(config, config_path)

        cls._instance = config
        return config

    @classmethod
    def save(cls, config: ConfigModel, config_path: Optional[Path] = None) -> bool:
        """Save configuration to file."""
        if config_path is None:
            config_path = config.get_config_path()
        config_path = Path(config_path)

        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, "w", encoding="utf-8") as f:
                f.write(config.to_yaml())
            logger.info("Configuration saved to %s", config_path)
            return True
        except OSError as e:
            logger.error("Failed to save config to %s: %s", config_path, e)
            return False

    @classmethod
    def get(cls) -> ConfigModel:
        """Get the current configuration instance."""
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the loaded configuration (useful for testing)."""
        cls._instance = None


def get_config() -> ConfigModel:
    """Get the current configuration."""
    return Config.get()


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file."""
    return Config.load(config_path)


def save_config(config: ConfigModel, config_path: Optional[Path] = None) -> bool:
    """Save configuration to file."""
    return Config.save(config, config_path)


def reset_config() -> None:
    """Reset the global configuration instance."""
    Config.reset()
