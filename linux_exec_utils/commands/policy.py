"""Politiques de sécurité consultées avant chaque lancement.

Une politique est injectée explicitement dans l'exécuteur au lieu
d'être lue depuis un état global du processus.

Classes :
    ExecutionPolicy : Interface abstraite.
    AllowAllPolicy : Autorise tout programme (défaut).
    ExecutablePermissionPolicy : Exige le droit d'exécution.
    WorldWritablePolicy : Refuse les programmes modifiables par tous.
    PolicyChain : Applique plusieurs politiques dans l'ordre.
"""

import os
import stat
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List

from linux_exec_utils.errors.exceptions import ExecutionDeniedError


class ExecutionPolicy(ABC):
    """Interface abstraite d'une politique d'exécution."""

    @abstractmethod
    def check_exec(self, path: str) -> None:
        """Vérifie que le programme peut être lancé.

        Args:
            path: Chemin du programme (premier élément de la commande).

        Raises:
            ExecutionDeniedError: Si le lancement est refusé.
        """
        pass

    def allows(self, path: str) -> bool:
        """Indique si la politique autorise le programme.

        Args:
            path: Chemin du programme.

        Returns:
            False si check_exec() refuse le programme.
        """
        try:
            self.check_exec(path)
        except ExecutionDeniedError:
            return False
        return True


class AllowAllPolicy(ExecutionPolicy):
    """Politique permissive : aucun contrôle."""

    def check_exec(self, path: str) -> None:
        return None


class ExecutablePermissionPolicy(ExecutionPolicy):
    """Exige un fichier régulier exécutable par l'utilisateur courant."""

    def check_exec(self, path: str) -> None:
        if not os.path.isfile(path):
            raise ExecutionDeniedError(path, "n'est pas un fichier")
        if not os.access(path, os.X_OK):
            raise ExecutionDeniedError(path, "droit d'exécution absent")


class WorldWritablePolicy(ExecutionPolicy):
    """Refuse les programmes accessibles en écriture par tous.

    Un programme world-writable lancé par root pourrait avoir été
    modifié par un utilisateur non privilégié (élévation de
    privilèges). Corrigez avec : chmod o-w <fichier>.
    """

    def check_exec(self, path: str) -> None:
        resolved = Path(path).resolve()
        if resolved.stat().st_mode & stat.S_IWOTH:
            raise ExecutionDeniedError(
                path, f"{resolved} est modifiable par tous les utilisateurs"
            )


class PolicyChain(ExecutionPolicy):
    """Applique toutes les politiques, la première qui refuse l'emporte."""

    def __init__(self, policies: Iterable[ExecutionPolicy]) -> None:
        self.policies: List[ExecutionPolicy] = list(policies)

    def check_exec(self, path: str) -> None:
        for policy in self.policies:
            policy.check_exec(path)
