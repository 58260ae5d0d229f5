"""Contrat des exécutables et structure du résultat d'exécution.

Ce module définit :
    - ExecutionOutcome : Résultat immuable d'une exécution terminée.
    - Executable : Interface abstraite commune à toutes les stratégies
      d'exécution (synchrone, non bloquante).

Toute stratégie permet de modifier la commande, d'enregistrer les
codes de retour considérés comme réguliers, de lancer l'exécution
puis d'interroger son code de retour.

Note:
    La commande et les codes de retour sont un état mutable partagé.
    Un seul thread doit les configurer, avant l'appel à exec() ; ils
    ne doivent pas être modifiés pendant une exécution.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Union

if TYPE_CHECKING:
    from linux_exec_utils.commands.arguments import ArgumentContributor


@dataclass(frozen=True)
class ExecutionOutcome:
    """Résultat d'une exécution terminée.

    Attributes:
        command: Copie de la commande exécutée.
        exit_code: Code de retour du processus.
        stderr: Sortie d'erreur lue jusqu'au bout, sans les espaces
            de début et de fin (chaîne vide si rien n'a été écrit).
        success: True si exit_code fait partie des codes réguliers.
        duration: Durée d'exécution en secondes.
    """

    command: List[str]
    exit_code: int
    stderr: str
    success: bool
    duration: float


class Executable(ABC):
    """Interface abstraite d'un programme en ligne de commande."""

    @abstractmethod
    def add_argument(
        self, argument: Union[str, "ArgumentContributor"]
    ) -> "Executable":
        """Ajoute un argument à la commande.

        Args:
            argument: Chaîne ajoutée telle quelle comme un seul
                élément, ou contributeur qui ajoute lui-même un ou
                plusieurs éléments.

        Returns:
            L'exécutable courant pour le chaînage.
        """
        pass

    @abstractmethod
    def add_regular_exit_code(self, code: int) -> "Executable":
        """Enregistre un code de retour qui ne signale pas d'échec.

        L'opération est idempotente.

        Args:
            code: Code de retour régulier.

        Returns:
            L'exécutable courant pour le chaînage.
        """
        pass

    @abstractmethod
    def get_command_line(self) -> List[str]:
        """Retourne la liste vivante des éléments de la commande."""
        pass

    @abstractmethod
    def get_valid_exit_codes(self) -> List[int]:
        """Retourne la liste vivante des codes de retour réguliers."""
        pass

    @abstractmethod
    def exec(self) -> None:
        """Lance l'exécution de la commande.

        Raises:
            ExecutableNotFoundError: Si la commande est vide ou si le
                programme n'existe pas.
            ExecutionFailedError: Si le code de retour n'est pas
                régulier.
        """
        pass

    @abstractmethod
    def exit_code(self) -> int:
        """Retourne le code de retour de la dernière exécution.

        Raises:
            ExecutionStateError: Si aucune exécution n'est terminée.
        """
        pass
