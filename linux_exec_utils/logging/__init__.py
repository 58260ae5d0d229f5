"""Module de logging."""

from linux_exec_utils.logging.base import Logger
from linux_exec_utils.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]
