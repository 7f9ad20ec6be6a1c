"""Logger console écrivant sur la sortie d'erreur."""

import logging
import sys
from typing import Optional, TextIO

from linux_shell_utils.logging.base import Logger
from linux_shell_utils.logging.file_logger import (
    DEFAULT_FORMAT,
    resolve_level,
)


class ConsoleLogger(Logger):
    """
    Logger qui écrit sur stderr via le module logging.

    CommandSettings l'utilise par défaut comme sink de diagnostic, au
    niveau WARNING : seuls les échecs et les stderr capturés
    apparaissent sur la sortie d'erreur de l'appelant.
    """

    def __init__(
        self,
        name: str = "linux_shell_utils",
        level: str = "INFO",
        stream: Optional[TextIO] = None
    ) -> None:
        """
        Initialise le logger console.

        Args:
            name: Nom du logger Python sous-jacent
            level: Niveau minimal (DEBUG, INFO, WARNING, ERROR)
            stream: Flux de sortie (défaut: sys.stderr)
        """
        log_level = resolve_level(level)

        self.logger = logging.getLogger(name)
        self.logger.setLevel(log_level)

        if not self.logger.handlers:
            if stream is None:
                stream = sys.stderr
            handler = logging.StreamHandler(stream)
            handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
            self.logger.addHandler(handler)

        # La dernière instance d'un nom fixe le niveau de tous ses handlers.
        for handler in self.logger.handlers:
            handler.setLevel(log_level)

        self.logger.propagate = False

    def log_info(self, message: str) -> None:
        self.logger.info(message)

    def log_warning(self, message: str) -> None:
        self.logger.warning(message)

    def log_error(self, message: str) -> None:
        self.logger.error(message)
