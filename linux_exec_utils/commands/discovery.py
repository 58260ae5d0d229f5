"""Recherche d'un exécutable dans les répertoires du PATH.

Example:
    >>> from linux_exec_utils.commands import find_executable_on_path
    >>> git = find_executable_on_path("git")
    >>> git.get_command_line() if git else None
    ['/usr/bin/git']
"""

import os
from typing import List, Optional, Sequence

from linux_exec_utils.commands.executable import DefaultExecutable
from linux_exec_utils.commands.policy import AllowAllPolicy, ExecutionPolicy

PATH_ENVIRONMENT_VARIABLE = "PATH"

# Extensions essayées avant le nom nu, dans cet ordre.
EXECUTABLE_EXTENSIONS = (".bat", ".exe", ".sh", ".php")


def get_users_path(path_env: Optional[str] = None) -> List[str]:
    """Retourne les répertoires du PATH de l'utilisateur.

    Args:
        path_env: Valeur à utiliser à la place de la variable PATH.

    Returns:
        Liste des répertoires, vide si la variable est absente ou vide.
    """
    if path_env is None:
        path_env = os.environ.get(PATH_ENVIRONMENT_VARIABLE, "")
    if not path_env.strip():
        return []
    return path_env.split(os.pathsep)


def find_executable_on_path(
    local_name: str,
    path_env: Optional[str] = None,
    policy: Optional[ExecutionPolicy] = None,
    extensions: Sequence[str] = EXECUTABLE_EXTENSIONS,
) -> Optional[DefaultExecutable]:
    """Cherche un programme par son nom local dans le PATH.

    Pour chaque répertoire, les noms avec extension sont essayés avant
    le nom nu. Le premier fichier existant accepté par la politique
    est retenu.

    Args:
        local_name: Nom du programme sans extension (ex: 'phpmd').
        path_env: Valeur à utiliser à la place de la variable PATH.
        policy: Politique d'exécution (défaut: AllowAllPolicy).
        extensions: Extensions reconnues.

    Returns:
        DefaultExecutable initialisé avec le chemin absolu trouvé,
        ou None si aucun fichier ne correspond.
    """
    policy = policy or AllowAllPolicy()
    for directory in get_users_path(path_env):
        base = os.path.join(directory, local_name)
        for candidate in [base + ext for ext in extensions] + [base]:
            if os.path.exists(candidate) and policy.allows(candidate):
                return DefaultExecutable(
                    os.path.abspath(candidate), policy=policy
                )
    return None
