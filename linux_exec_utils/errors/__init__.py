"""Module de gestion des erreurs."""

from linux_exec_utils.errors.base import ErrorHandler, ErrorHandlerChain
from linux_exec_utils.errors.exceptions import (ApplicationError,
                                                ConfigurationError,
                                                ExecutionError,
                                                ExecutableNotFoundError,
                                                ExecutionDeniedError,
                                                ExecutionFailedError,
                                                ExecutionStateError,
                                                ExecutionFatalError)
from linux_exec_utils.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "ExecutionError",
    "ExecutableNotFoundError",
    "ExecutionDeniedError",
    "ExecutionFailedError",
    "ExecutionStateError",
    "ExecutionFatalError",
    "ErrorHandler",
    "ErrorHandlerChain",
    "LoggerErrorHandler",
]
