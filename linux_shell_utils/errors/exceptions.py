"""
Module contenant les exceptions de linux_shell_utils.

Toutes les erreurs d'exécution de commandes dérivent de ShellError et
portent un ErrorKind issu d'une énumération fermée. Les appelants
peuvent filtrer par classe d'exception ou par valeur de kind.
"""

from enum import StrEnum
from typing import Optional, Sequence


class ErrorKind(StrEnum):
    """Catégories fermées des échecs d'exécution."""

    COMMAND_NOT_FOUND = "command_not_found"
    INVALID_PATH = "invalid_path"
    INVALID_ARG = "invalid_arg"
    NO_STDOUT = "no_stdout"
    PROCESS_FAILED = "process_failed"
    USER_NOT_FOUND = "user_not_found"
    SPAWN_FAILED = "spawn_failed"
    OUTPUT_LIMIT_EXCEEDED = "output_limit_exceeded"


class ApplicationError(Exception):
    """Exception de base pour toute la bibliothèque."""
    pass


class ConfigurationError(ApplicationError):
    """Exception de base pour toutes les Configurations."""
    pass


class ShellError(ApplicationError):
    """Exception de base pour les échecs d'exécution de commandes.

    Attributes:
        kind: Catégorie de l'erreur (ErrorKind).
    """

    kind: ErrorKind = ErrorKind.PROCESS_FAILED


class CommandNotFoundError(ShellError):
    """La liste d'arguments de la commande est vide."""

    kind = ErrorKind.COMMAND_NOT_FOUND

    def __init__(
        self, message: str = "Commande vide : rien à exécuter."
    ) -> None:
        super().__init__(message)


class InvalidPathError(ShellError):
    """Un chemin passé en argument est vide ou n'existe pas."""

    kind = ErrorKind.INVALID_PATH

    def __init__(self, path: str) -> None:
        self.path = path
        if path:
            message = f"Chemin invalide ou inexistant : {path}"
        else:
            message = "Chemin vide."
        super().__init__(message)


class InvalidArgError(ShellError):
    """Un argument obligatoire est une chaîne vide."""

    kind = ErrorKind.INVALID_ARG

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Argument requis vide : {name}")


class NoStdoutError(ShellError):
    """Le pipe stdout du processus lancé est indisponible."""

    kind = ErrorKind.NO_STDOUT

    def __init__(self, command: Sequence[str]) -> None:
        self.command = list(command)
        super().__init__(
            f"Sortie standard indisponible pour : {' '.join(self.command)}"
        )


class ProcessFailedError(ShellError):
    """Le processus a échoué (code retour non nul ou erreur de lecture).

    Attributes:
        command: Commande exécutée.
        returncode: Code retour du processus, None si inconnu.
        stderr: Sortie d'erreur capturée (mode capture uniquement).
    """

    kind = ErrorKind.PROCESS_FAILED

    def __init__(
        self,
        command: Sequence[str],
        returncode: Optional[int] = None,
        stderr: str = "",
        message: Optional[str] = None,
    ) -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        if message is None:
            message = (
                f"Échec de la commande (code {returncode}) : "
                f"{' '.join(self.command)}"
            )
        super().__init__(message)


class SpawnFailedError(ProcessFailedError):
    """Le processus n'a pas pu être lancé (exécutable absent, droits...)."""

    kind = ErrorKind.SPAWN_FAILED

    def __init__(self, command: Sequence[str], cause: OSError) -> None:
        super().__init__(
            command,
            message=f"Impossible de lancer {command[0]} : {cause}",
        )


class UserNotFoundError(ShellError):
    """La sortie capturée est vide après suppression des blancs."""

    kind = ErrorKind.USER_NOT_FOUND

    def __init__(
        self, command: Sequence[str], message: Optional[str] = None
    ) -> None:
        self.command = list(command)
        if message is None:
            message = (
                f"Aucune sortie produite par : {' '.join(self.command)}"
            )
        super().__init__(message)


class OutputLimitExceededError(ShellError):
    """Un flux capturé dépasse la taille maximale autorisée.

    Attributes:
        command: Commande exécutée.
        stream: Nom du flux concerné ("stdout" ou "stderr").
        limit: Taille maximale en octets.
    """

    kind = ErrorKind.OUTPUT_LIMIT_EXCEEDED

    def __init__(
        self, command: Sequence[str], stream: str, limit: int
    ) -> None:
        self.command = list(command)
        self.stream = stream
        self.limit = limit
        super().__init__(
            f"{stream} dépasse {limit} octets : {' '.join(self.command)}"
        )
