#!/usr/bin/env python3
"""Tests unitaires pour le module errors."""

import unittest
from unittest.mock import MagicMock

from linux_exec_utils.errors.base import ErrorHandler, ErrorHandlerChain
from linux_exec_utils.errors.exceptions import (ApplicationError,
                                                ConfigurationError,
                                                ExecutionError,
                                                ExecutableNotFoundError,
                                                ExecutionDeniedError,
                                                ExecutionFailedError,
                                                ExecutionStateError,
                                                ExecutionFatalError)
from linux_exec_utils.errors.logger_handler import LoggerErrorHandler
from linux_exec_utils.logging.base import Logger


class TestExceptions(unittest.TestCase):
    """Tests de la hiérarchie d'exceptions."""

    def test_hierarchie(self):
        """Les erreurs récupérables dérivent d'ExecutionError."""
        for error_type in (ExecutableNotFoundError,
                           ExecutionDeniedError,
                           ExecutionFailedError):
            self.assertTrue(issubclass(error_type, ExecutionError))
        for error_type in (ExecutionStateError, ExecutionFatalError,
                           ConfigurationError):
            self.assertTrue(issubclass(error_type, ApplicationError))
            self.assertFalse(issubclass(error_type, ExecutionError))

    def test_not_found_sans_chemin(self):
        """Sans chemin, le message est générique."""
        error = ExecutableNotFoundError()
        self.assertIsNone(error.path)
        self.assertIn("commande est vide", str(error))

    def test_not_found_avec_chemin(self):
        """Le chemin tenté est conservé et cité."""
        error = ExecutableNotFoundError("/no/such/path")
        self.assertEqual(error.path, "/no/such/path")
        self.assertEqual(str(error), "Exécutable introuvable : /no/such/path")

    def test_failed_message_est_le_stderr(self):
        """Le message d'ExecutionFailedError est le stderr."""
        error = ExecutionFailedError("fichier absent", exit_code=2)
        self.assertEqual(str(error), "fichier absent")
        self.assertEqual(error.stderr, "fichier absent")
        self.assertEqual(error.exit_code, 2)

    def test_failed_stderr_none(self):
        """Un stderr None devient une chaîne vide."""
        self.assertEqual(ExecutionFailedError(None).stderr, "")

    def test_denied(self):
        """Le refus conserve chemin et motif."""
        error = ExecutionDeniedError("/bin/x", "interdit")
        self.assertEqual(error.path, "/bin/x")
        self.assertEqual(error.reason, "interdit")
        self.assertIn("interdit", str(error))


class TestErrorHandlerChain(unittest.TestCase):
    """Tests pour ErrorHandlerChain."""

    def test_diffuse_a_tous_les_handlers(self):
        """Chaque handler reçoit l'erreur, dans l'ordre d'ajout."""
        calls = []
        first = MagicMock(spec=ErrorHandler)
        first.handle.side_effect = lambda e: calls.append("first")
        second = MagicMock(spec=ErrorHandler)
        second.handle.side_effect = lambda e: calls.append("second")
        chain = ErrorHandlerChain().add_handler(first).add_handler(second)

        error = ExecutionStateError("trop tôt")
        chain.handle(error)

        first.handle.assert_called_once_with(error)
        second.handle.assert_called_once_with(error)
        self.assertEqual(calls, ["first", "second"])

    def test_chaine_est_un_handler(self):
        """La chaîne peut être injectée comme un handler."""
        self.assertIsInstance(ErrorHandlerChain(), ErrorHandler)


class TestLoggerErrorHandler(unittest.TestCase):
    """Tests pour LoggerErrorHandler."""

    def setUp(self):
        self.logger = MagicMock(spec=Logger)
        self.handler = LoggerErrorHandler(self.logger)

    def test_erreur_d_execution(self):
        """Un échec d'exécution est logué avec code et stderr."""
        self.handler.handle(ExecutionFailedError("boom", exit_code=3))
        self.logger.log_error.assert_called_once_with(
            "ExecutionFailedError (code 3): boom"
        )

    def test_erreur_d_execution_stderr_vide(self):
        """Un stderr vide est signalé explicitement."""
        self.handler.handle(ExecutionFailedError("", exit_code=1))
        self.assertIn("<stderr vide>", self.logger.log_error.call_args[0][0])

    def test_erreur_connue(self):
        """Une erreur de l'application est loguée avec son type."""
        self.handler.handle(ExecutableNotFoundError("/x"))
        self.logger.log_error.assert_called_once_with(
            "ExecutableNotFoundError: Exécutable introuvable : /x"
        )

    def test_erreur_inattendue(self):
        """Une erreur inconnue est marquée comme inattendue."""
        self.handler.handle(RuntimeError("bug"))
        self.logger.log_error.assert_called_once_with(
            "Erreur inattendue: RuntimeError: bug"
        )


if __name__ == "__main__":
    unittest.main()
