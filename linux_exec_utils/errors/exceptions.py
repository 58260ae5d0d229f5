"""Exceptions personnalisées pour l'exécution de programmes externes.

Hiérarchie :
    ApplicationError
    ├── ExecutionError : erreurs récupérables par l'appelant
    │   ├── ExecutableNotFoundError
    │   ├── ExecutionDeniedError
    │   └── ExecutionFailedError
    ├── ExecutionStateError : interrogation prématurée du résultat
    └── ExecutionFatalError : échec d'environnement (spawn, attente)
"""

from typing import Optional


class ApplicationError(Exception):
    """Exception de base pour toutes les applications."""
    pass


class ConfigurationError(ApplicationError):
    """Exception de base pour toutes les configurations."""
    pass


class ExecutionError(ApplicationError):
    """Exception de base pour les échecs d'exécution récupérables."""
    pass


class ExecutableNotFoundError(ExecutionError):
    """La commande est vide ou son programme n'existe pas.

    Levée pendant la validation, avant tout lancement de processus.

    Attributes:
        path: Chemin tenté, ou None si la commande était vide.
    """

    def __init__(self, path: Optional[str] = None) -> None:
        self.path = path
        if path is None:
            message = "Aucun exécutable configuré : la commande est vide."
        else:
            message = f"Exécutable introuvable : {path}"
        super().__init__(message)


class ExecutionDeniedError(ExecutionError):
    """La politique d'exécution refuse de lancer le programme.

    Attributes:
        path: Chemin du programme refusé.
        reason: Motif du refus.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Exécution refusée pour {path} : {reason}")


class ExecutionFailedError(ExecutionError):
    """Le processus s'est terminé avec un code de retour non valide.

    Le message de l'exception est exactement la sortie d'erreur du
    processus, nettoyée des espaces en début et fin.

    Attributes:
        stderr: Sortie d'erreur capturée (chaîne vide si aucune).
        exit_code: Code de retour observé.
    """

    def __init__(self, stderr: str, exit_code: Optional[int] = None) -> None:
        self.stderr = stderr or ""
        self.exit_code = exit_code
        super().__init__(self.stderr)


class ExecutionStateError(ApplicationError):
    """Résultat demandé alors qu'aucune exécution n'est terminée."""
    pass


class ExecutionFatalError(ApplicationError):
    """Erreur d'environnement non récupérable.

    Enveloppe l'erreur d'origine (échec du lancement du processus ou
    attente interrompue), disponible via ``__cause__``.
    """
    pass
