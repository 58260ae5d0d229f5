"""Décorateur d'exécution non bloquante.

NonBlockingExecutable enveloppe un Executable quelconque et lance son
exécution dans un thread dédié. exec() rend la main immédiatement.

Les erreurs du thread ne remontent jamais à l'appelant de exec() :
par défaut elles sont seulement enregistrées (Future, ErrorHandler,
Logger). L'appelant qui veut les observer utilise wait() ou la
propriété future.

Example :
    Lancement en arrière-plan puis attente explicite :

        from linux_exec_utils.commands import (
            DefaultExecutable,
            NonBlockingExecutable,
        )

        build = NonBlockingExecutable(
            DefaultExecutable("/usr/bin/make").add_argument("all")
        )
        build.add_regular_exit_code(0)
        build.exec()
        # ... autre travail ...
        code = build.wait()  # relève l'erreur éventuelle du thread

Note :
    exit_code() est transmis tel quel à l'exécutable décoré. Appelé
    juste après exec(), il peut lever ExecutionStateError ou retourner
    le code de l'exécution précédente : le thread n'a peut-être pas
    terminé. Utilisez wait() pour attendre la fin.
"""

import os
import threading
from concurrent.futures import Future
from typing import List, Optional, Union

from linux_exec_utils.commands.arguments import (
    ArgumentContributor,
    require_contributor,
)
from linux_exec_utils.commands.base import Executable
from linux_exec_utils.commands.formatter import PlainCommandFormatter
from linux_exec_utils.errors.base import ErrorHandler
from linux_exec_utils.errors.exceptions import ExecutionStateError
from linux_exec_utils.logging.base import Logger


class NonBlockingExecutable(Executable):
    """Décorateur qui exécute un Executable dans un thread séparé.

    Le décorateur ne possède aucune commande : toutes les lectures et
    modifications sont déléguées à l'exécutable enveloppé.

    Attributes:
        LOW_PRIORITY_INCREMENT: Valeur ajoutée à la priorité (nice)
            du thread quand low_priority est actif.
    """

    LOW_PRIORITY_INCREMENT = 10

    def __init__(
        self,
        executable: Executable,
        logger: Optional[Logger] = None,
        error_handler: Optional[ErrorHandler] = None,
        low_priority: bool = True,
    ) -> None:
        """Initialise le décorateur.

        Args:
            executable: Exécutable à décorer.
            logger: Logger optionnel.
            error_handler: Handler optionnel recevant l'erreur levée
                par une exécution en arrière-plan.
            low_priority: Si True, le thread tente de baisser sa
                priorité d'ordonnancement. Simple indication : le
                processus lancé depuis ce thread en hérite.
        """
        self._executable = executable
        self._logger = logger
        self._error_handler = error_handler
        self._low_priority = low_priority
        self._future: Optional["Future[int]"] = None
        self._worker: Optional[threading.Thread] = None
        self._lock = threading.Lock()
        self._plain = PlainCommandFormatter()
        self._is_root: bool = os.getuid() == 0

    @property
    def executable(self) -> Executable:
        """Exécutable décoré."""
        return self._executable

    @property
    def future(self) -> Optional["Future[int]"]:
        """Signal de fin de la dernière exécution lancée, ou None.

        Le résultat du Future est le code de retour ; son exception
        est l'erreur levée par l'exécutable décoré.
        """
        return self._future

    def add_argument(
        self, argument: Union[str, ArgumentContributor]
    ) -> Executable:
        if isinstance(argument, str):
            self._executable.add_argument(argument)
            return self
        return require_contributor(argument).to_argument(self)

    def add_regular_exit_code(self, code: int) -> Executable:
        self._executable.add_regular_exit_code(code)
        return self

    def get_command_line(self) -> List[str]:
        return self._executable.get_command_line()

    def get_valid_exit_codes(self) -> List[int]:
        return self._executable.get_valid_exit_codes()

    def exit_code(self) -> int:
        return self._executable.exit_code()

    def exec(self) -> None:
        """Lance l'exécution dans un nouveau thread et rend la main.

        Raises:
            ExecutionStateError: Si l'exécution précédente n'est pas
                terminée.
        """
        with self._lock:
            if self._future is not None and not self._future.done():
                raise ExecutionStateError(
                    "Une exécution en arrière-plan est déjà en cours."
                )
            future: "Future[int]" = Future()
            future.set_running_or_notify_cancel()
            command = list(self._executable.get_command_line())
            program = os.path.basename(command[0]) if command else "?"
            worker = threading.Thread(
                target=self._run,
                args=(future,),
                name=f"exec-{program}",
                daemon=True,
            )
            self._future = future
            self._worker = worker

        self._log(self._plain.format_background(command, self._is_root))
        worker.start()

    def done(self) -> bool:
        """Indique si la dernière exécution lancée est terminée."""
        future = self._future
        return future is not None and future.done()

    def wait(self, timeout: Optional[float] = None) -> int:
        """Attend la fin de la dernière exécution lancée.

        Args:
            timeout: Délai maximal en secondes (None : sans limite).

        Returns:
            Le code de retour.

        Raises:
            ExecutionStateError: Si exec() n'a jamais été appelé.
            TimeoutError: Si le délai expire avant la fin.
            ExecutionError: L'erreur levée par l'exécutable décoré.
        """
        future = self._future
        if future is None:
            raise ExecutionStateError("Aucune exécution lancée.")
        return future.result(timeout=timeout)

    def _run(self, future: "Future[int]") -> None:
        if self._low_priority:
            self._lower_priority()
        # Le Future est résolu sur tous les chemins, y compris quand
        # exit_code() échoue après un exec() qui a rendu la main.
        try:
            self._executable.exec()
            code = self._executable.exit_code()
        except Exception as error:
            future.set_exception(error)
            self._report(error)
        else:
            future.set_result(code)

    def _report(self, error: Exception) -> None:
        self._log_error(
            f"Échec de l'exécution en arrière-plan : "
            f"{type(error).__name__}: {error}"
        )
        if self._error_handler:
            self._error_handler.handle(error)

    def _lower_priority(self) -> None:
        if not hasattr(os, "setpriority"):
            return
        thread_id = threading.get_native_id()
        try:
            current = os.getpriority(os.PRIO_PROCESS, thread_id)
            os.setpriority(
                os.PRIO_PROCESS,
                thread_id,
                min(current + self.LOW_PRIORITY_INCREMENT, 19),
            )
        except OSError as e:
            self._log_warning(f"Priorité basse non appliquée : {e}")

    def _log(self, message: str) -> None:
        if self._logger:
            self._logger.log_info(message)

    def _log_warning(self, message: str) -> None:
        if self._logger:
            self._logger.log_warning(message)

    def _log_error(self, message: str) -> None:
        if self._logger:
            self._logger.log_error(message)

    def __repr__(self) -> str:
        return f"NonBlockingExecutable({self._executable!r})"
