"""Module de configuration."""

from linux_shell_utils.config.loader import (
    ConfigLoader,
    ConfigFileLoader,
    FileConfigLoader,
)
from linux_shell_utils.config.settings_loader import SettingsConfigLoader

__all__ = [
    "ConfigLoader",
    "ConfigFileLoader",
    "FileConfigLoader",
    "SettingsConfigLoader",
]
