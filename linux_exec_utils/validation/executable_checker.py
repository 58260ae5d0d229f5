"""Validateur de la commande d'un exécutable avant son lancement."""

import os
from typing import List

from linux_exec_utils.errors.exceptions import ExecutableNotFoundError
from linux_exec_utils.validation.base import Validator


class ExecutableChecker(Validator):
    """Vérifie qu'une commande peut être lancée.

    La commande doit être non vide et son premier élément doit
    désigner une entrée existante du système de fichiers. La liste
    est lue au moment de validate(), jamais mise en cache : une
    commande modifiée entre deux exécutions est revérifiée.
    """

    def __init__(self, command: List[str]) -> None:
        """Initialise le validateur.

        Args:
            command: Commande à vérifier (liste vivante, non copiée).
        """
        self.command = command

    def validate(self) -> None:
        """Valide la commande.

        Raises:
            ExecutableNotFoundError: Si la commande est vide (sans
                chemin) ou si le programme n'existe pas (avec le
                chemin tenté).
        """
        if not self.command:
            raise ExecutableNotFoundError()

        program = self.command[0]
        if not os.path.exists(program):
            raise ExecutableNotFoundError(program)
