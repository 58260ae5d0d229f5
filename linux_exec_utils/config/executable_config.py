"""Description d'un exécutable dans un fichier de configuration.

Fichier de configuration attendu (TOML) :

    [executable]
    command = ["/usr/bin/rsync", "-av", "/src/", "/dest/"]
    valid_exit_codes = [0, 24]
    non_blocking = false

Example:
    loader = ExecutableConfigLoader("config/backup.toml")
    executable = loader.load().build(logger=logger)
    executable.exec()
"""

from pathlib import Path
from typing import Any, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from linux_exec_utils.commands.base import Executable
from linux_exec_utils.commands.executable import DefaultExecutable
from linux_exec_utils.commands.non_blocking import NonBlockingExecutable
from linux_exec_utils.commands.policy import ExecutionPolicy
from linux_exec_utils.config.loader import ConfigLoader, FileConfigLoader
from linux_exec_utils.errors.base import ErrorHandler
from linux_exec_utils.errors.exceptions import ConfigurationError
from linux_exec_utils.logging.base import Logger


class ExecutableConfig(BaseModel):
    """Configuration validée d'un exécutable.

    Attributes:
        command: Commande complète, le premier élément est le programme.
        valid_exit_codes: Codes de retour réguliers (vide : tout code
            est un échec). Les doublons sont retirés, l'ordre conservé.
        non_blocking: Si True, build() retourne un NonBlockingExecutable.
        low_priority: Indication de priorité basse pour le thread.
    """

    model_config = {"extra": "forbid"}

    command: List[str] = Field(min_length=1)
    valid_exit_codes: List[int] = Field(default_factory=list)
    non_blocking: bool = False
    low_priority: bool = True

    @field_validator("command")
    @classmethod
    def program_required(cls, v: List[str]) -> List[str]:
        if not v[0].strip():
            raise ValueError("Le programme est requis.")
        return v

    @field_validator("valid_exit_codes")
    @classmethod
    def unique_codes(cls, v: List[int]) -> List[int]:
        return list(dict.fromkeys(v))

    def build(
        self,
        logger: Optional[Logger] = None,
        policy: Optional[ExecutionPolicy] = None,
        error_handler: Optional[ErrorHandler] = None,
    ) -> Executable:
        """Construit l'exécutable décrit.

        Args:
            logger: Logger optionnel transmis aux exécuteurs.
            policy: Politique d'exécution optionnelle.
            error_handler: Handler des erreurs d'arrière-plan
                (utilisé seulement si non_blocking).

        Returns:
            DefaultExecutable, ou NonBlockingExecutable qui l'enveloppe.
        """
        executable: Executable = DefaultExecutable(
            self.command, logger=logger, policy=policy
        )
        for code in self.valid_exit_codes:
            executable.add_regular_exit_code(code)
        if self.non_blocking:
            return NonBlockingExecutable(
                executable,
                logger=logger,
                error_handler=error_handler,
                low_priority=self.low_priority,
            )
        return executable


class ExecutableConfigLoader:
    """Chargeur d'ExecutableConfig depuis un fichier TOML ou JSON.

    Attributes:
        DEFAULT_SECTION: Nom de la section par défaut ("executable").
    """

    DEFAULT_SECTION: str = "executable"

    def __init__(
        self,
        config_path: str | Path,
        config_loader: ConfigLoader | None = None
    ) -> None:
        """Initialise le loader en chargeant le fichier.

        Args:
            config_path: Chemin vers le fichier (.toml ou .json).
            config_loader: Chargeur de configuration injectable.

        Raises:
            FileNotFoundError: Si le fichier n'existe pas.
            ValueError: Si l'extension n'est pas supportée.
            ConfigurationError: Si le fichier est illisible.
        """
        loader = config_loader or FileConfigLoader()
        self._config: dict[str, Any] = loader.load(config_path)

    def load(self, section: str | None = None) -> ExecutableConfig:
        """Charge et valide la section demandée.

        Args:
            section: Nom de la section. Par défaut "executable".

        Returns:
            Instance d'ExecutableConfig.

        Raises:
            KeyError: Si la section n'existe pas.
            ConfigurationError: Si la section est invalide.
        """
        section = section or self.DEFAULT_SECTION
        if section not in self._config:
            available = list(self._config.keys())
            raise KeyError(
                f"Section '{section}' non trouvée dans le fichier. "
                f"Sections disponibles: {available}"
            )
        try:
            return ExecutableConfig.model_validate(self._config[section])
        except ValidationError as e:
            raise ConfigurationError(
                f"Section '{section}' invalide : {e}"
            ) from e
