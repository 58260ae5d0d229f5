"""Implémentation concrète du logger avec fichier."""

import logging
import os
import threading
from typing import Any, Dict, Optional

from linux_exec_utils.logging.base import Logger

DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - [%(threadName)s] %(message)s"


class FileLogger(Logger):
    """
    Logger qui écrit dans un fichier avec option console.

    Caractéristiques:
    - Logger unique par fichier (évite les conflits)
    - Encodage UTF-8 explicite
    - Flush immédiat après chaque log
    - Nom du thread dans chaque ligne (exécutions en arrière-plan)
    - Pas de propagation (évite les logs en double)
    """

    def __init__(
        self,
        log_file: str,
        config: Optional[Dict[str, Any]] = None,
        console_output: bool = False
    ) -> None:
        """
        Initialise le logger.

        Args:
            log_file: Chemin du fichier de log
            config: Configuration optionnelle sous forme de dict.
                    Clés supportées: logging.level, logging.format
            console_output: Activer la sortie console en plus du fichier
        """
        self.log_file = log_file
        self._lock = threading.Lock()

        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        logging_cfg = (config or {}).get("logging", {})
        log_level = getattr(
            logging, str(logging_cfg.get("level", "INFO")).upper(),
            logging.INFO
        )
        formatter = logging.Formatter(
            logging_cfg.get("format", DEFAULT_FORMAT)
        )

        self.logger = logging.getLogger(log_file)
        self.logger.setLevel(log_level)

        # Éviter les handlers dupliqués
        if not self.logger.handlers:
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

            if console_output:
                console_handler = logging.StreamHandler()
                console_handler.setLevel(log_level)
                console_handler.setFormatter(formatter)
                self.logger.addHandler(console_handler)

        self.handler = self.logger.handlers[0]
        self.logger.propagate = False

    def _emit(self, level: int, message: str) -> None:
        """Écrit un message puis force l'écriture sur le disque."""
        with self._lock:
            self.logger.log(level, message)
            self.handler.flush()

    def log_info(self, message: str) -> None:
        """Log un message d'information."""
        self._emit(logging.INFO, message)

    def log_warning(self, message: str) -> None:
        """Log un avertissement."""
        self._emit(logging.WARNING, message)

    def log_error(self, message: str) -> None:
        """Log une erreur."""
        self._emit(logging.ERROR, message)
