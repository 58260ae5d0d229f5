"""Module de configuration."""

from linux_exec_utils.config.loader import ConfigLoader, FileConfigLoader
from linux_exec_utils.config.executable_config import (
    ExecutableConfig,
    ExecutableConfigLoader,
)

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "ExecutableConfig",
    "ExecutableConfigLoader",
]
