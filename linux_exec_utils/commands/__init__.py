"""Module d'exécution de programmes en ligne de commande.

Ce module modélise un programme externe comme un objet composable :
la commande, les codes de retour réguliers et deux stratégies
d'exécution (synchrone et non bloquante).

Classes disponibles :
    Executable : Contrat commun des stratégies d'exécution.
    ExecutionOutcome : Résultat immuable d'une exécution.
    AbstractExecutable : Base des exécutables synchrones.
    DefaultExecutable : Exécuteur synchrone via subprocess.
    NonBlockingExecutable : Décorateur d'exécution en arrière-plan.
    ArgumentContributor : Capacité d'ajouter des éléments à la commande.
    ExecutionPolicy : Politique consultée avant chaque lancement.
    CommandFormatter : Interface abstraite de formatage.
"""

from linux_exec_utils.commands.base import (
    Executable,
    ExecutionOutcome,
)
from linux_exec_utils.commands.arguments import (
    ArgumentContributor,
    ArgumentList,
    ConditionalArgument,
    FlagArgument,
    OptionArgument,
    StringArgument,
)
from linux_exec_utils.commands.policy import (
    AllowAllPolicy,
    ExecutablePermissionPolicy,
    ExecutionPolicy,
    PolicyChain,
    WorldWritablePolicy,
)
from linux_exec_utils.commands.formatter import (
    AnsiCommandFormatter,
    CommandFormatter,
    PlainCommandFormatter,
)
from linux_exec_utils.commands.executable import (
    AbstractExecutable,
    DefaultExecutable,
    spawn_process,
)
from linux_exec_utils.commands.non_blocking import NonBlockingExecutable
from linux_exec_utils.commands.discovery import find_executable_on_path

__all__ = [
    # Contrat et résultat
    "Executable",
    "ExecutionOutcome",
    # Contributeurs d'arguments
    "ArgumentContributor",
    "ArgumentList",
    "ConditionalArgument",
    "FlagArgument",
    "OptionArgument",
    "StringArgument",
    # Politiques
    "AllowAllPolicy",
    "ExecutablePermissionPolicy",
    "ExecutionPolicy",
    "PolicyChain",
    "WorldWritablePolicy",
    # Formateurs
    "AnsiCommandFormatter",
    "CommandFormatter",
    "PlainCommandFormatter",
    # Stratégies d'exécution
    "AbstractExecutable",
    "DefaultExecutable",
    "NonBlockingExecutable",
    "spawn_process",
    # Recherche dans le PATH
    "find_executable_on_path",
]
