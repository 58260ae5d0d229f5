"""
Linux Exec Utils - Exécution de programmes en ligne de commande.

Modules disponibles:
- commands: Exécutables synchrones et non bloquants, contributeurs
  d'arguments, politiques d'exécution, recherche dans le PATH
- errors: Hiérarchie d'exceptions et handlers d'erreurs
- logging: Gestion des logs (Logger, FileLogger)
- validation: Validation des commandes avant lancement
- config: Chargement de configuration (TOML, JSON, Pydantic)
"""

__version__ = "1.0.0"

from linux_exec_utils.logging import Logger, FileLogger
from linux_exec_utils.errors import (
    ApplicationError,
    ConfigurationError,
    ExecutionError,
    ExecutableNotFoundError,
    ExecutionDeniedError,
    ExecutionFailedError,
    ExecutionStateError,
    ExecutionFatalError,
    ErrorHandler,
    ErrorHandlerChain,
    LoggerErrorHandler,
)
from linux_exec_utils.validation import Validator, ExecutableChecker
from linux_exec_utils.commands import (
    Executable,
    ExecutionOutcome,
    ArgumentContributor,
    ArgumentList,
    ConditionalArgument,
    FlagArgument,
    OptionArgument,
    StringArgument,
    AllowAllPolicy,
    ExecutablePermissionPolicy,
    ExecutionPolicy,
    PolicyChain,
    WorldWritablePolicy,
    AnsiCommandFormatter,
    CommandFormatter,
    PlainCommandFormatter,
    AbstractExecutable,
    DefaultExecutable,
    NonBlockingExecutable,
    find_executable_on_path,
)
from linux_exec_utils.config import (
    ConfigLoader,
    FileConfigLoader,
    ExecutableConfig,
    ExecutableConfigLoader,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    # Erreurs
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
    # Validation
    "Validator",
    "ExecutableChecker",
    # Commandes
    "Executable",
    "ExecutionOutcome",
    "ArgumentContributor",
    "ArgumentList",
    "ConditionalArgument",
    "FlagArgument",
    "OptionArgument",
    "StringArgument",
    "AllowAllPolicy",
    "ExecutablePermissionPolicy",
    "ExecutionPolicy",
    "PolicyChain",
    "WorldWritablePolicy",
    "AnsiCommandFormatter",
    "CommandFormatter",
    "PlainCommandFormatter",
    "AbstractExecutable",
    "DefaultExecutable",
    "NonBlockingExecutable",
    "find_executable_on_path",
    # Configuration
    "ConfigLoader",
    "FileConfigLoader",
    "ExecutableConfig",
    "ExecutableConfigLoader",
]
