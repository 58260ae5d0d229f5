"""Interfaces abstraites pour la gestion des erreurs."""

from abc import ABC, abstractmethod


class ErrorHandler(ABC):
    """Interface de base pour les handlers d'erreurs.

    Chaque implémentation concrète définit une stratégie de traitement
    des erreurs remontées par une exécution en arrière-plan.
    """

    @abstractmethod
    def handle(self, error: Exception) -> None:
        """Traite une erreur.

        Args:
            error: L'exception à traiter.
        """
        pass


class ErrorHandlerChain(ErrorHandler):
    """Diffuse les erreurs à tous les handlers enregistrés.

    Chaque erreur est transmise à tous les handlers dans l'ordre
    d'ajout.
    """

    def __init__(self) -> None:
        """Initialise la chaîne avec une liste vide de handlers."""
        self.handlers: list[ErrorHandler] = []

    def add_handler(self, handler: ErrorHandler) -> "ErrorHandlerChain":
        """Ajoute un handler à la chaîne.

        Args:
            handler: Le handler d'erreurs à ajouter.

        Returns:
            La chaîne courante pour le chaînage.
        """
        self.handlers.append(handler)
        return self

    def handle(self, error: Exception) -> None:
        """Fait passer l'erreur à travers tous les handlers."""
        for handler in self.handlers:
            handler.handle(error)
