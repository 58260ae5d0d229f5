"""Formateurs des messages émis autour d'une exécution.

Les messages diffèrent selon le contexte (fichier de log ou console)
et les privilèges d'exécution (root ou utilisateur).

Classes :
    CommandFormatter : Interface abstraite de formatage.
    PlainCommandFormatter : Texte brut avec préfixes [ROOT]/[user].
    AnsiCommandFormatter : Codes ANSI colorés pour la console.

Note :
    AnsiCommandFormatter n'émet des codes ANSI que si stdout est
    un terminal (TTY).
"""

import sys
from abc import ABC, abstractmethod
from typing import List


class CommandFormatter(ABC):
    """Interface abstraite pour formater les messages d'exécution."""

    ROOT_PREFIX = "[ROOT]"
    USER_PREFIX = "[user]"

    def _prefix(self, is_root: bool) -> str:
        return self.ROOT_PREFIX if is_root else self.USER_PREFIX

    @abstractmethod
    def format_start(
        self, command: List[str], is_root: bool
    ) -> str:
        """Formate le message de lancement d'une commande.

        Args:
            command: Commande sous forme de liste.
            is_root: True si la commande est exécutée en root.

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass

    @abstractmethod
    def format_background(
        self, command: List[str], is_root: bool
    ) -> str:
        """Formate le message de lancement en arrière-plan."""
        pass

    @abstractmethod
    def format_exit(
        self, command: List[str], exit_code: int, success: bool
    ) -> str:
        """Formate le message de fin d'exécution.

        Args:
            command: Commande exécutée.
            exit_code: Code de retour observé.
            success: True si le code fait partie des codes réguliers.

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass


class PlainCommandFormatter(CommandFormatter):
    """Formateur texte brut pour les logs fichier.

    Example :
        [ROOT] Exécution : /usr/bin/rsync -av /src /dst
        [user] Arrière-plan : /usr/bin/make all
        Code retour 2 (échec) : /usr/bin/make all
    """

    def format_start(
        self, command: List[str], is_root: bool
    ) -> str:
        return f"{self._prefix(is_root)} Exécution : {' '.join(command)}"

    def format_background(
        self, command: List[str], is_root: bool
    ) -> str:
        return (
            f"{self._prefix(is_root)} "
            f"Arrière-plan : {' '.join(command)}"
        )

    def format_exit(
        self, command: List[str], exit_code: int, success: bool
    ) -> str:
        status = "succès" if success else "échec"
        return f"Code retour {exit_code} ({status}) : {' '.join(command)}"


class AnsiCommandFormatter(PlainCommandFormatter):
    """Formateur ANSI coloré pour la sortie console.

    Styles ANSI :
        ROOT   → jaune-or gras
        user   → vert
        échec  → rouge
    """

    RESET = "\033[0m"
    ROOT_STYLE = "\033[1;33m"
    USER_STYLE = "\033[0;32m"
    FAILURE_STYLE = "\033[0;31m"

    def _is_tty(self) -> bool:
        return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()

    def _style(self, text: str, style: str) -> str:
        if not self._is_tty():
            return text
        return f"{style}{text}{self.RESET}"

    def _privilege_style(self, is_root: bool) -> str:
        return self.ROOT_STYLE if is_root else self.USER_STYLE

    def format_start(
        self, command: List[str], is_root: bool
    ) -> str:
        return self._style(
            super().format_start(command, is_root),
            self._privilege_style(is_root),
        )

    def format_background(
        self, command: List[str], is_root: bool
    ) -> str:
        return self._style(
            super().format_background(command, is_root),
            self._privilege_style(is_root),
        )

    def format_exit(
        self, command: List[str], exit_code: int, success: bool
    ) -> str:
        text = super().format_exit(command, exit_code, success)
        if success:
            return text
        return self._style(text, self.FAILURE_STYLE)
