"""Socle commun des outils construisant des commandes.

Les outils assemblent une liste d'arguments et la confient au noyau
d'exécution ; ils ne font que valider leurs arguments et traduire
leurs options en flags.
"""

from pathlib import Path
from typing import Optional

from linux_shell_utils.commands.runner import (
    CapturedExecutor,
    StreamingExecutor,
)
from linux_shell_utils.errors.exceptions import (
    InvalidArgError,
    InvalidPathError,
)


def require_arg(value: str, name: str) -> str:
    """Vérifie qu'un argument obligatoire n'est pas vide.

    Args:
        value: Valeur de l'argument.
        name: Nom de l'argument (pour le message d'erreur).

    Returns:
        La valeur inchangée.

    Raises:
        InvalidArgError: Si la valeur est vide.
    """
    if not value:
        raise InvalidArgError(name)
    return value


def require_path(path: str, must_exist: bool = True) -> str:
    """Vérifie qu'un chemin est renseigné et, par défaut, existe.

    Args:
        path: Chemin à vérifier.
        must_exist: Vérifier aussi l'existence du chemin.

    Returns:
        Le chemin inchangé.

    Raises:
        InvalidPathError: Si le chemin est vide ou inexistant.
    """
    if not path:
        raise InvalidPathError(path)
    if must_exist and not Path(path).exists():
        raise InvalidPathError(path)
    return path


class CommandTool:
    """Outil disposant des deux modes d'exécution.

    Attributes:
        _streaming: Exécuteur relayant la sortie.
        _captured: Exécuteur capturant la sortie.
    """

    def __init__(
        self,
        streaming: Optional[StreamingExecutor] = None,
        captured: Optional[CapturedExecutor] = None,
    ) -> None:
        """Initialise l'outil.

        Args:
            streaming: Exécuteur streaming (défaut: StreamingExecutor).
            captured: Exécuteur capture (défaut: CapturedExecutor).
        """
        self._streaming = streaming or StreamingExecutor()
        self._captured = captured or CapturedExecutor()
