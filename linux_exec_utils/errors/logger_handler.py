"""
    LoggerErrorHandler
"""
from linux_exec_utils.errors.base import ErrorHandler
from linux_exec_utils.errors.exceptions import (ApplicationError,
                                                ExecutionFailedError)
from linux_exec_utils.logging.base import Logger


class LoggerErrorHandler(ErrorHandler):
    """Handler pour logger les erreurs.

    Enregistre les erreurs dans le fichier de log via le Logger
    injecté au constructeur.
    """

    def __init__(self, logger: Logger) -> None:
        """Initialise le handler avec un logger.

        Args:
            logger: Instance de Logger pour l'enregistrement des erreurs.
        """
        self.logger = logger

    def handle(self, error: Exception) -> None:
        """Log l'erreur avec un message adapté à son type.

        Args:
            error: L'exception à logger.
        """
        if isinstance(error, ExecutionFailedError):
            self.logger.log_error(
                f"{type(error).__name__} (code {error.exit_code}): "
                f"{error.stderr or '<stderr vide>'}"
            )
        elif isinstance(error, ApplicationError):
            self.logger.log_error(f"{type(error).__name__}: {str(error)}")
        else:
            self.logger.log_error(
                f"Erreur inattendue: {type(error).__name__}: {str(error)}"
            )
