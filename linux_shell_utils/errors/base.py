"""Interfaces de traitement des erreurs et chaîne de diffusion."""

import sys
from abc import ABC, abstractmethod
from typing import Optional

from linux_shell_utils.errors.exceptions import ProcessFailedError


class ErrorHandler(ABC):
    """Stratégie de traitement d'une erreur (console, log...)."""

    @abstractmethod
    def handle(self, error: Exception) -> None:
        pass


def exit_code_for(error: Exception) -> int:
    """Code de sortie à utiliser pour terminer sur ``error``.

    Le code retour d'une commande échouée est réutilisé tel quel,
    comme le ferait un script shell avec ``set -e``. Un enfant tué
    par un signal (code négatif) donne ``128 + signal``, comme dans
    le shell ; toute autre erreur donne 1.
    """
    if not isinstance(error, ProcessFailedError) or not error.returncode:
        return 1
    if error.returncode < 0:
        return 128 - error.returncode
    return error.returncode


class ErrorHandlerChain:
    """Transmet chaque erreur à tous les handlers, dans l'ordre d'ajout."""

    def __init__(self) -> None:
        self.handlers: list[ErrorHandler] = []

    def add_handler(self, handler: ErrorHandler) -> "ErrorHandlerChain":
        self.handlers.append(handler)
        return self

    def handle(self, error: Exception) -> None:
        for handler in self.handlers:
            handler.handle(error)

    def handle_and_exit(
        self, error: Exception, exit_code: Optional[int] = None
    ) -> None:
        """Traite l'erreur puis termine le programme.

        Args:
            error: L'exception à traiter avant la sortie.
            exit_code: Code de sortie ; par défaut exit_code_for(error).
        """
        self.handle(error)
        sys.exit(exit_code_for(error) if exit_code is None else exit_code)
