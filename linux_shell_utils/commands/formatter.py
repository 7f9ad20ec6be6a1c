"""Mise en forme des messages de diagnostic émis par les exécuteurs.

Les commandes sont affichées avec la syntaxe de citation du shell
(``shlex.join``) : un argument contenant des espaces reste visible
comme un seul argument dans les logs.

Example :
    Sortie colorée dans un terminal :

        from linux_shell_utils.commands import (
            StreamingExecutor,
            AnsiCommandFormatter,
        )

        executor = StreamingExecutor(formatter=AnsiCommandFormatter())
        executor.run(settings, ["rsync", "-av", "/src", "/dst"])
"""

import os
import shlex
import sys
from abc import ABC, abstractmethod
from typing import Sequence

from linux_shell_utils.commands.builder import SUDO_PROGRAM


def runs_as_root(command: Sequence[str]) -> bool:
    """True si le processus courant est root ou si command passe par sudo."""
    return os.geteuid() == 0 or (
        bool(command) and command[0] == SUDO_PROGRAM
    )


class CommandFormatter(ABC):
    """Interface des formateurs de messages de commande.

    ``is_root`` vaut True quand la commande passe par sudo ou que le
    processus courant est root.
    """

    @abstractmethod
    def format_start(self, command: Sequence[str], is_root: bool) -> str:
        """Message émis au lancement de ``command``."""
        pass

    @abstractmethod
    def format_failure(
        self, command: Sequence[str], returncode: int, is_root: bool
    ) -> str:
        """Message émis quand ``command`` sort avec un code non nul."""
        pass

    @abstractmethod
    def format_stderr(
        self, command: Sequence[str], stderr: str, is_root: bool
    ) -> str:
        """Message reprenant la sortie d'erreur capturée (non vide)."""
        pass


class PlainCommandFormatter(CommandFormatter):
    """Texte brut, destiné aux fichiers de log.

    Example :
        [ROOT] Exécution : apt install -y curl
        [user] Code retour 1 : false
        [user] stderr de grep : grep: absent.txt: No such file
    """

    ROOT_TAG = "[ROOT]"
    USER_TAG = "[user]"

    def tag(self, is_root: bool) -> str:
        return self.ROOT_TAG if is_root else self.USER_TAG

    def format_start(self, command: Sequence[str], is_root: bool) -> str:
        return f"{self.tag(is_root)} Exécution : {shlex.join(command)}"

    def format_failure(
        self, command: Sequence[str], returncode: int, is_root: bool
    ) -> str:
        return (
            f"{self.tag(is_root)} Code retour {returncode} : "
            f"{shlex.join(command)}"
        )

    def format_stderr(
        self, command: Sequence[str], stderr: str, is_root: bool
    ) -> str:
        return (
            f"{self.tag(is_root)} stderr de {command[0]} : "
            f"{stderr.rstrip()}"
        )


class AnsiCommandFormatter(PlainCommandFormatter):
    """Variante colorée pour un terminal.

    Lancements root en jaune gras, lancements utilisateur en vert,
    échecs en rouge. Texte brut quand stderr n'est pas un TTY
    (redirection vers un fichier ou un pipe).
    """

    RESET = "\033[0m"
    ROOT_STYLE = "\033[1;33m"
    USER_STYLE = "\033[0;32m"
    ERROR_STYLE = "\033[1;31m"

    def _is_tty(self) -> bool:
        isatty = getattr(sys.stderr, "isatty", None)
        return bool(isatty and isatty())

    def _paint(self, text: str, style: str) -> str:
        if self._is_tty():
            return f"{style}{text}{self.RESET}"
        return text

    def format_start(self, command: Sequence[str], is_root: bool) -> str:
        style = self.ROOT_STYLE if is_root else self.USER_STYLE
        return self._paint(super().format_start(command, is_root), style)

    def format_failure(
        self, command: Sequence[str], returncode: int, is_root: bool
    ) -> str:
        message = super().format_failure(command, returncode, is_root)
        return self._paint(message, self.ERROR_STYLE)
