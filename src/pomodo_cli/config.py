"""Configuration management for pomodo-cli."""

import json
from pathlib import Path
from typing import Any, Optional

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel, Field, ValidationError

from pomodo_cli.models.focus.pomodoro import PomodoroDurations
from pomodo_cli.utils.logger import get_logger


class TimerConfig(BaseModel):
    """Phase durations and timing."""

    work_minutes: float = Field(default=25, gt=0)
    short_break_minutes: float = Field(default=5, gt=0)
    long_break_minutes: float = Field(default=15, gt=0)
    pomodoros_before_long_break: int = Field(default=4, ge=1)
    # Multiplies measured time; anything but 1 is for testing.
    time_acceleration: float = Field(default=1.0, gt=0)

    def durations(self) -> PomodoroDurations:
        """Phase lengths in seconds for the state machine."""
        return PomodoroDurations(
            work=self.work_minutes * 60,
            short_break=self.short_break_minutes * 60,
            long_break=self.long_break_minutes * 60,
            pomodoros_before_long_break=self.pomodoros_before_long_break,
        )


class PathsConfig(BaseModel):
    """Where state and logs are written. Empty means the user data dir."""

    state_file: str = Field(default="")
    todo_log: str = Field(default="")
    history_log: str = Field(default="")


class UIConfig(BaseModel):
    """UI configuration."""

    bell: bool = Field(default=True)
    poll_interval: float = Field(default=0.02, gt=0)


class Config(BaseModel):
    """Main configuration."""

    timer: TimerConfig = Field(default_factory=TimerConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    ui: UIConfig = Field(default_factory=UIConfig)


class ConfigManager:
    """Manages pomodo-cli configuration."""

    def __init__(self, profile: str = "default"):
        self.profile = profile
        self.config_dir = Path(user_config_dir("pomodo-cli"))
        self.data_dir = Path(user_data_dir("pomodo-cli"))
        self.config_file = self.config_dir / f"{profile}.json"

        # Ensure directories exist
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> Config:
        """Load configuration from file."""
        if self.config_file.exists():
            try:
                with open(self.config_file, "r") as f:
                    data = json.load(f)
                return Config(**data)
            except (OSError, json.JSONDecodeError, ValidationError, TypeError) as e:
                # If config is corrupted, return default
                get_logger().warning(
                    "Ignoring unreadable config %s: %s", self.config_file, e
                )
                return Config()
        return Config()

    def save_config(self, config: Optional[Config] = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        with open(self.config_file, "w") as f:
            json.dump(config.model_dump(), f, indent=2)

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return self.get_from_config(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        Raises ``KeyError`` for unknown keys and ``ValidationError`` for
        values the model rejects.
        """
        if self.get(key) is None:
            raise KeyError(key)

        keys = key.split(".")
        config_dict = self.config.model_dump()

        # Navigate to the nested dictionary
        current = config_dict
        for k in keys[:-1]:
            current = current[k]
        current[keys[-1]] = value

        self._config = Config(**config_dict)
        self.save_config()

    def reset(self, key: Optional[str] = None) -> None:
        """Reset configuration to defaults."""
        if key is None:
            self._config = Config()
        else:
            default_value = self.get_from_config(Config(), key)
            if default_value is None:
                raise KeyError(key)
            self.set(key, default_value)
        self.save_config()

    def get_from_config(self, config: Config, key: str) -> Any:
        """Get value from a config object using dot notation."""
        value: Any = config
        for k in key.split("."):
            # Only declared fields; methods and properties are not settings.
            if isinstance(value, BaseModel) and k in type(value).model_fields:
                value = getattr(value, k)
            else:
                return None
        return value

    def _data_path(self, configured: str, default_name: str) -> Path:
        if configured:
            return Path(configured).expanduser()
        return self.data_dir / default_name

    @property
    def state_file(self) -> Path:
        return self._data_path(self.config.paths.state_file, "state.bin")

    @property
    def todo_log(self) -> Path:
        return self._data_path(self.config.paths.todo_log, "todo.txt")

    @property
    def history_log(self) -> Path:
        return self._data_path(self.config.paths.history_log, "todo.history.txt")


# Global config manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(profile: str = "default") -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None or _config_manager.profile != profile:
        _config_manager = ConfigManager(profile)
    return _config_manager
