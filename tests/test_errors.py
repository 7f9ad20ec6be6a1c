#!/usr/bin/env python3
"""Tests unitaires pour le module errors."""

import unittest
from unittest.mock import MagicMock, patch

from linux_shell_utils.errors import (ApplicationError,
                                      CommandNotFoundError,
                                      ConfigurationError,
                                      ConsoleErrorHandler,
                                      ErrorHandlerChain,
                                      ErrorKind,
                                      InvalidArgError,
                                      InvalidPathError,
                                      LoggerErrorHandler,
                                      NoStdoutError,
                                      OutputLimitExceededError,
                                      ProcessFailedError,
                                      ShellError,
                                      SpawnFailedError,
                                      UserNotFoundError,
                                      exit_code_for)


class TestExceptions(unittest.TestCase):
    """Tests pour la hiérarchie d'exceptions."""

    def test_kinds(self):
        """Chaque exception porte son ErrorKind."""
        cases = [
            (CommandNotFoundError(), ErrorKind.COMMAND_NOT_FOUND),
            (InvalidPathError("/x"), ErrorKind.INVALID_PATH),
            (InvalidArgError("pkg"), ErrorKind.INVALID_ARG),
            (NoStdoutError(["ls"]), ErrorKind.NO_STDOUT),
            (ProcessFailedError(["false"], 1), ErrorKind.PROCESS_FAILED),
            (
                SpawnFailedError(["x"], FileNotFoundError("absent")),
                ErrorKind.SPAWN_FAILED,
            ),
            (UserNotFoundError(["whoami"]), ErrorKind.USER_NOT_FOUND),
            (
                OutputLimitExceededError(["yes"], "stdout", 10),
                ErrorKind.OUTPUT_LIMIT_EXCEEDED,
            ),
        ]
        for error, kind in cases:
            with self.subTest(error=type(error).__name__):
                self.assertEqual(error.kind, kind)
                self.assertIsInstance(error, ShellError)
                self.assertIsInstance(error, ApplicationError)

    def test_spawn_failed_est_un_process_failed(self):
        """SpawnFailedError peut être attrapé comme ProcessFailedError."""
        error = SpawnFailedError(["absent"], FileNotFoundError("absent"))
        self.assertIsInstance(error, ProcessFailedError)
        self.assertIsNone(error.returncode)
        self.assertIn("Impossible de lancer absent", str(error))

    def test_process_failed_attributs(self):
        """ProcessFailedError conserve commande, code et stderr."""
        error = ProcessFailedError(("ls", "/x"), 2, "absent")
        self.assertEqual(error.command, ["ls", "/x"])
        self.assertEqual(error.returncode, 2)
        self.assertEqual(error.stderr, "absent")
        self.assertEqual(str(error), "Échec de la commande (code 2) : ls /x")

    def test_invalid_path_vide(self):
        """Le message distingue un chemin vide d'un chemin inexistant."""
        self.assertEqual(str(InvalidPathError("")), "Chemin vide.")
        self.assertIn("/nulle/part", str(InvalidPathError("/nulle/part")))

    def test_kind_est_une_chaine(self):
        """ErrorKind est une StrEnum sérialisable."""
        self.assertEqual(str(ErrorKind.PROCESS_FAILED), "process_failed")


class TestConsoleErrorHandler(unittest.TestCase):
    """Tests pour ConsoleErrorHandler."""

    def setUp(self):
        self.handler = ConsoleErrorHandler()

    @patch("builtins.print")
    def test_handle_process_failed(self, mock_print):
        """Vérifie le message pour ProcessFailedError."""
        error = ProcessFailedError(["false"], 1)
        self.handler.handle(error)
        mock_print.assert_any_call(
            "\n🛑 ProcessFailedError: Échec de la commande (code 1) : false"
        )
        mock_print.assert_any_call("Kind: process_failed")
        mock_print.assert_any_call(
            "\n🔧 Solution : Consultez la sortie d'erreur de la commande."
        )

    @patch("builtins.print")
    def test_handle_spawn_failed_avant_process_failed(self, mock_print):
        """SpawnFailedError reçoit sa propre solution."""
        error = SpawnFailedError(["absent"], FileNotFoundError("absent"))
        self.handler.handle(error)
        mock_print.assert_any_call(
            "\n🔧 Solution : Vérifiez que le programme est installé "
            "et exécutable."
        )

    @patch("builtins.print")
    def test_handle_output_limit(self, mock_print):
        """Vérifie le message pour OutputLimitExceededError."""
        self.handler.handle(OutputLimitExceededError(["yes"], "stdout", 8))
        mock_print.assert_any_call(
            "\n🔧 Solution : Augmentez max_buffer_size ou utilisez "
            "le mode streaming."
        )

    @patch("builtins.print")
    def test_handle_invalid_arg(self, mock_print):
        """Vérifie le message pour InvalidArgError."""
        self.handler.handle(InvalidArgError("package"))
        mock_print.assert_any_call(
            "\n🔧 Solution : Vérifiez les arguments passés à la commande."
        )

    @patch("builtins.print")
    def test_handle_configuration_error(self, mock_print):
        """Vérifie le message pour ConfigurationError (sans kind)."""
        self.handler.handle(ConfigurationError("config invalide"))
        mock_print.assert_any_call(
            "\n🔧 Solution : Vérifiez votre fichier de configuration."
        )
        printed = [c[0][0] for c in mock_print.call_args_list]
        self.assertFalse(any(p.startswith("Kind:") for p in printed))

    @patch("builtins.print")
    def test_handle_user_not_found(self, mock_print):
        """UserNotFoundError reçoit sa propre solution."""
        self.handler.handle(UserNotFoundError(["whoami"]))
        mock_print.assert_any_call(
            "\n🔧 Solution : La commande n'a rien affiché ; passez "
            "require_output=False si une sortie vide est valide."
        )

    @patch("builtins.print")
    def test_handle_no_stdout(self, mock_print):
        """NoStdoutError reçoit sa propre solution."""
        self.handler.handle(NoStdoutError(["ls"]))
        mock_print.assert_any_call(
            "\n🔧 Solution : Vérifiez que l'invocateur relie stdout "
            "à un pipe."
        )

    @patch("builtins.print")
    def test_solutions_personnalisees(self, mock_print):
        """Les solutions injectées sont prioritaires."""
        handler = ConsoleErrorHandler(
            solutions={UserNotFoundError: "Connectez-vous d'abord."}
        )
        handler.handle(UserNotFoundError(["whoami"]))
        mock_print.assert_any_call("\n🔧 Solution : Connectez-vous d'abord.")

    @patch("builtins.print")
    def test_handle_unknown_error(self, mock_print):
        """Vérifie le message pour une erreur inconnue."""
        error = RuntimeError("erreur inconnue")
        self.handler.handle(error)
        mock_print.assert_any_call("\n💥 Erreur inattendue: erreur inconnue")
        mock_print.assert_any_call("Type: RuntimeError")


class TestLoggerErrorHandler(unittest.TestCase):
    """Tests pour LoggerErrorHandler."""

    def setUp(self):
        self.mock_logger = MagicMock()
        self.handler = LoggerErrorHandler(self.mock_logger)

    def test_handle_shell_error(self):
        """Les erreurs de commande sont loguées avec leur kind."""
        self.handler.handle(InvalidArgError("url"))
        self.mock_logger.log_error.assert_called_once_with(
            "InvalidArgError [invalid_arg]: Argument requis vide : url"
        )

    def test_handle_known_error(self):
        """Vérifie le log pour une erreur connue."""
        error = ConfigurationError("config invalide")
        self.handler.handle(error)
        self.mock_logger.log_error.assert_called_once_with(
            "ConfigurationError: config invalide"
        )

    def test_handle_unknown_error(self):
        """Vérifie le log pour une erreur inconnue."""
        error = RuntimeError("runtime error")
        self.handler.handle(error)
        self.mock_logger.log_error.assert_called_once_with(
            "Erreur inattendue: RuntimeError: runtime error"
        )


class TestErrorHandlerChain(unittest.TestCase):
    """Tests pour ErrorHandlerChain."""

    def test_handle_calls_all_handlers(self):
        """Vérifie que tous les handlers sont appelés."""
        handler1 = MagicMock()
        handler2 = MagicMock()
        chain = ErrorHandlerChain().add_handler(handler1).add_handler(handler2)

        error = RuntimeError("test")
        chain.handle(error)

        handler1.handle.assert_called_once_with(error)
        handler2.handle.assert_called_once_with(error)

    def test_handle_and_exit(self):
        """Vérifie que handle_and_exit appelle sys.exit."""
        chain = ErrorHandlerChain()
        handler = MagicMock()
        chain.add_handler(handler)

        error = RuntimeError("test")
        with self.assertRaises(SystemExit) as ctx:
            chain.handle_and_exit(error, exit_code=2)

        self.assertEqual(ctx.exception.code, 2)
        handler.handle.assert_called_once_with(error)

    def test_handle_and_exit_code_de_la_commande(self):
        """Sans code explicite, le code retour de la commande est repris."""
        chain = ErrorHandlerChain()
        with self.assertRaises(SystemExit) as ctx:
            chain.handle_and_exit(ProcessFailedError(["make"], 2))
        self.assertEqual(ctx.exception.code, 2)

    def test_exit_code_for(self):
        """Les erreurs sans code retour donnent 1."""
        self.assertEqual(exit_code_for(ProcessFailedError(["x"], 127)), 127)
        self.assertEqual(
            exit_code_for(SpawnFailedError(["x"], OSError("absent"))), 1
        )
        self.assertEqual(exit_code_for(InvalidArgError("url")), 1)
        self.assertEqual(exit_code_for(RuntimeError("bug")), 1)

    def test_exit_code_for_signal(self):
        """Un enfant tué par un signal donne 128 + numéro du signal."""
        self.assertEqual(exit_code_for(ProcessFailedError(["yes"], -9)), 137)
        self.assertEqual(exit_code_for(ProcessFailedError(["x"], -15)), 143)

    def test_handle_and_exit_signal(self):
        """handle_and_exit ne passe jamais de code négatif à sys.exit."""
        chain = ErrorHandlerChain()
        with self.assertRaises(SystemExit) as ctx:
            chain.handle_and_exit(ProcessFailedError(["yes"], -9))
        self.assertEqual(ctx.exception.code, 137)


if __name__ == "__main__":
    unittest.main()
