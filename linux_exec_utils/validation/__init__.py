"""Module de validation."""

from linux_exec_utils.validation.base import Validator
from linux_exec_utils.validation.executable_checker import ExecutableChecker

__all__ = [
    "Validator",
    "ExecutableChecker",
]
