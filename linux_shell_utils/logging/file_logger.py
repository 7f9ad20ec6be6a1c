"""Logger fichier et lecture de la configuration de logging."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from linux_shell_utils.logging.base import Logger

DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def resolve_level(name: Any, default: int = logging.INFO) -> int:
    """Convertit un nom de niveau ("info", "WARNING"...) en constante.

    Un nom inconnu donne ``default``.
    """
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else default


class FileLogger(Logger):
    """
    Logger qui écrit dans un fichier, en UTF-8.

    Un seul logger Python par chemin de fichier : deux instances sur le
    même fichier partagent le handler au lieu de dupliquer les lignes.
    Chaque message est écrit sur disque immédiatement, ce qui garde la
    trace d'une commande même si le programme est tué pendant qu'elle
    s'exécute.
    """

    def __init__(
        self,
        log_file: str,
        config: Optional[Dict[str, Any]] = None,
        console_output: bool = False
    ) -> None:
        """
        Initialise le logger.

        Args:
            log_file: Chemin du fichier de log (répertoire créé au besoin)
            config: Dict optionnel {"logging": {"level": ..., "format": ...}}
            console_output: Dupliquer les messages sur stderr
        """
        self.log_file = log_file
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)

        settings = (config or {}).get("logging", {})
        level = resolve_level(settings.get("level", "INFO"))
        formatter = logging.Formatter(settings.get("format", DEFAULT_FORMAT))

        self.logger = logging.getLogger(log_file)
        self.logger.setLevel(level)
        self.logger.propagate = False

        if self.logger.handlers:
            self.handler = self.logger.handlers[0]
            return

        self.handler = logging.FileHandler(log_file, encoding="utf-8")
        self.handler.setFormatter(formatter)
        self.logger.addHandler(self.handler)

        if console_output:
            console = logging.StreamHandler()
            console.setFormatter(formatter)
            self.logger.addHandler(console)

    def _write(self, level: int, message: str) -> None:
        self.logger.log(level, message)
        self.handler.flush()

    def log_info(self, message: str) -> None:
        self._write(logging.INFO, message)

    def log_warning(self, message: str) -> None:
        self._write(logging.WARNING, message)

    def log_error(self, message: str) -> None:
        self._write(logging.ERROR, message)
