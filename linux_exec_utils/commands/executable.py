"""Exécuteur synchrone de programmes en ligne de commande.

Ce module fournit AbstractExecutable, qui gère la commande, les codes
de retour réguliers et le cycle validation → lancement → attente →
classement, ainsi que DefaultExecutable, qui bloque le thread appelant
jusqu'à la fin du processus.

Example :
    Exécution simple :

        from linux_exec_utils.commands import DefaultExecutable
        from linux_exec_utils.errors import ExecutionFailedError

        tar = (
            DefaultExecutable("/usr/bin/tar")
            .add_argument("-czf")
            .add_argument("/tmp/archive.tgz")
            .add_argument("/etc/hosts")
            .add_regular_exit_code(0)
        )
        try:
            tar.exec()
        except ExecutionFailedError as e:
            print(e.stderr)
        print(tar.exit_code())
"""

import os
import subprocess  # nosec B404
import threading
import time
from abc import abstractmethod
from typing import Callable, List, Optional, Sequence, Tuple, Union

from linux_exec_utils.commands.arguments import (
    ArgumentContributor,
    require_contributor,
)
from linux_exec_utils.commands.base import Executable, ExecutionOutcome
from linux_exec_utils.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
)
from linux_exec_utils.commands.policy import AllowAllPolicy, ExecutionPolicy
from linux_exec_utils.errors.exceptions import (
    ExecutionFailedError,
    ExecutionFatalError,
    ExecutionStateError,
)
from linux_exec_utils.logging.base import Logger
from linux_exec_utils.validation.executable_checker import ExecutableChecker

Spawner = Callable[[List[str]], "subprocess.Popen[bytes]"]


def spawn_process(command: List[str]) -> "subprocess.Popen[bytes]":
    """Lance le processus, sortie d'erreur redirigée vers un pipe.

    L'entrée et la sortie standard sont reliées à /dev/null : seule
    la sortie d'erreur est conservée.

    Args:
        command: Commande complète, le premier élément est le programme.

    Returns:
        Le processus lancé.

    Raises:
        OSError: Si le processus ne peut pas être créé.
    """
    return subprocess.Popen(  # nosec B603
        command,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.PIPE,
    )


def _decode(data: Union[bytes, str, None]) -> str:
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data


class AbstractExecutable(Executable):
    """Base commune des exécutables synchrones.

    La commande est construite à partir d'un nom de programme, d'une
    séquence d'éléments, ou d'un autre exécutable. Dans ce dernier cas
    la commande et les codes réguliers sont copiés à la construction :
    les modifications ultérieures de la source n'ont pas d'effet.

    Les sous-classes fournissent _wait_for(), l'attente de la fin du
    processus.

    Attributes:
        _command: Liste vivante des éléments de la commande.
        _valid_exit_codes: Codes de retour réguliers, sans doublon.
        _outcome: Résultat de la dernière exécution terminée.
        _lock: Protège _outcome entre le thread d'exécution et
            les lecteurs.
        _logger: Logger optionnel.
        _policy: Politique consultée avant chaque lancement.
        _spawner: Fabrique de processus.
        _is_root: True si le processus courant est root (uid 0).
    """

    def __init__(
        self,
        command: Union[str, Sequence[str], Executable],
        logger: Optional[Logger] = None,
        policy: Optional[ExecutionPolicy] = None,
        spawner: Optional[Spawner] = None,
        console_formatter: Optional[CommandFormatter] = None,
    ) -> None:
        """Initialise l'exécutable.

        Args:
            command: Nom du programme, séquence d'éléments déjà
                construite, ou exécutable préconfiguré à copier.
            logger: Logger optionnel pour les logs fichier.
            policy: Politique d'exécution (défaut: AllowAllPolicy).
            spawner: Fabrique de processus (défaut: spawn_process).
            console_formatter: Formateur optionnel pour la console
                (ex: AnsiCommandFormatter()).
        """
        if isinstance(command, Executable):
            self._command: List[str] = list(command.get_command_line())
            self._valid_exit_codes: List[int] = list(
                command.get_valid_exit_codes()
            )
        elif isinstance(command, str):
            self._command = [command]
            self._valid_exit_codes = []
        else:
            self._command = list(command)
            self._valid_exit_codes = []

        self._outcome: Optional[ExecutionOutcome] = None
        self._lock = threading.Lock()
        self._logger = logger
        self._policy = policy or AllowAllPolicy()
        self._spawner = spawner or spawn_process
        self._is_root: bool = os.getuid() == 0
        self._plain = PlainCommandFormatter()
        self._console_formatter = console_formatter

    def add_argument(
        self, argument: Union[str, ArgumentContributor]
    ) -> Executable:
        if isinstance(argument, str):
            self._command.append(argument)
            return self
        return require_contributor(argument).to_argument(self)

    def add_regular_exit_code(self, code: int) -> Executable:
        if code not in self._valid_exit_codes:
            self._valid_exit_codes.append(code)
        return self

    def get_command_line(self) -> List[str]:
        return self._command

    def get_valid_exit_codes(self) -> List[int]:
        return self._valid_exit_codes

    @property
    def outcome(self) -> Optional[ExecutionOutcome]:
        """Résultat de la dernière exécution terminée, ou None."""
        with self._lock:
            return self._outcome

    def exit_code(self) -> int:
        with self._lock:
            outcome = self._outcome
        if outcome is None:
            raise ExecutionStateError(
                "Processus en cours d'exécution ou jamais lancé : "
                "aucun code de retour disponible."
            )
        return outcome.exit_code

    def _log(self, message: str) -> None:
        if self._logger:
            self._logger.log_info(message)

    def _log_error(self, message: str) -> None:
        if self._logger:
            self._logger.log_error(message)

    def _console(self, message: str) -> None:
        if self._console_formatter:
            print(message)

    def _validate(self) -> None:
        """Vérifie la commande courante puis consulte la politique.

        Raises:
            ExecutableNotFoundError: Si la commande est vide ou si le
                programme n'existe pas.
            ExecutionDeniedError: Si la politique refuse le programme.
        """
        ExecutableChecker(self._command).validate()
        self._policy.check_exec(self._command[0])

    def _spawn(self, command: List[str]) -> "subprocess.Popen[bytes]":
        try:
            return self._spawner(command)
        except OSError as e:
            self._log_error(f"Erreur système au lancement : {e}")
            raise ExecutionFatalError(
                f"Impossible de lancer {command[0]} : {e}"
            ) from e

    @abstractmethod
    def _wait_for(
        self, process: "subprocess.Popen[bytes]"
    ) -> Tuple[int, Union[bytes, str, None]]:
        """Attend la fin du processus.

        Args:
            process: Processus lancé.

        Returns:
            Le code de retour brut et la sortie d'erreur lue jusqu'au
            bout.

        Raises:
            InterruptedError: Si l'attente est interrompue.
        """
        pass

    def exec(self) -> None:
        """Valide, lance et attend la commande, puis classe le résultat.

        La validation est refaite à chaque appel sur l'état courant de
        la commande. En cas d'échec de classement, le résultat est
        enregistré avant que l'exception ne soit levée : exit_code()
        retourne alors le code observé.

        Raises:
            ExecutableNotFoundError: Commande vide ou programme absent,
                aucun processus n'est lancé.
            ExecutionDeniedError: Refus de la politique d'exécution.
            ExecutionFailedError: Code de retour non régulier.
            ExecutionFatalError: Échec du lancement ou attente
                interrompue.
        """
        self._validate()

        command = list(self._command)
        self._log(self._plain.format_start(command, self._is_root))
        if self._console_formatter:
            self._console(
                self._console_formatter.format_start(command, self._is_root)
            )

        start = time.monotonic()
        process = self._spawn(command)
        # La sortie du bloc ferme les pipes et récupère le processus.
        with process:
            try:
                exit_code, stderr = self._wait_for(process)
            except InterruptedError as e:
                process.kill()
                self._log_error(
                    f"Attente interrompue : {' '.join(command)}"
                )
                raise ExecutionFatalError(
                    f"Attente de {command[0]} interrompue"
                ) from e

        outcome = ExecutionOutcome(
            command=command,
            exit_code=exit_code,
            stderr=_decode(stderr).strip(),
            success=exit_code in self._valid_exit_codes,
            duration=time.monotonic() - start,
        )
        with self._lock:
            self._outcome = outcome

        if outcome.success:
            self._log(
                self._plain.format_exit(command, exit_code, success=True)
            )
            return

        self._log_error(
            self._plain.format_exit(command, exit_code, success=False)
        )
        if self._console_formatter:
            self._console(
                self._console_formatter.format_exit(
                    command, exit_code, success=False
                )
            )
        raise ExecutionFailedError(outcome.stderr, exit_code=exit_code)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(command={self._command!r}, "
            f"valid_exit_codes={self._valid_exit_codes!r})"
        )


class DefaultExecutable(AbstractExecutable):
    """Exécutable qui bloque le thread appelant jusqu'à la fin.

    La sortie d'erreur est lue pendant l'attente (communicate()) :
    un processus qui écrit beaucoup sur stderr ne peut pas remplir
    le pipe et bloquer l'attente.
    """

    def _wait_for(
        self, process: "subprocess.Popen[bytes]"
    ) -> Tuple[int, Union[bytes, str, None]]:
        _, stderr = process.communicate()
        return process.returncode, stderr
