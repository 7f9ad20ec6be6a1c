"""Paramètres d'exécution partagés par toutes les commandes.

CommandSettings est passé explicitement à chaque opération : le noyau
d'exécution ne consulte aucune valeur par défaut globale.
"""

from dataclasses import dataclass, field
from typing import Optional

from linux_shell_utils.logging.base import Logger
from linux_shell_utils.logging.console_logger import ConsoleLogger

DEFAULT_STREAM_BUFFER_SIZE = 4096
DEFAULT_CAPTURE_BUFFER_SIZE = 1024 * 1024
DEFAULT_LOGGER_NAME = "linux_shell_utils.commands"


def _default_logger() -> Logger:
    """Logger console limité aux avertissements.

    Les lancements (niveau info) ne s'écrivent pas sur le stderr de
    l'appelant, où StreamingExecutor relaie déjà celui de l'enfant.
    """
    return ConsoleLogger(name=DEFAULT_LOGGER_NAME, level="WARNING")


@dataclass(frozen=True)
class CommandSettings:
    """Configuration d'une exécution de commande.

    Attributes:
        max_buffer_size: Taille des blocs relayés en streaming et
            taille totale maximale de chaque flux capturé (octets).
        logger: Sink de diagnostic (lancements, stderr, échecs).
            Par défaut, ConsoleLogger au niveau WARNING.
        encoding: Encodage utilisé pour décoder les sorties capturées.
    """

    max_buffer_size: int = DEFAULT_STREAM_BUFFER_SIZE
    logger: Logger = field(default_factory=_default_logger)
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        """Valide la taille de buffer.

        Raises:
            ValueError: Si max_buffer_size n'est pas un entier positif.
        """
        if (
            isinstance(self.max_buffer_size, bool)
            or not isinstance(self.max_buffer_size, int)
            or self.max_buffer_size <= 0
        ):
            raise ValueError(
                f"max_buffer_size invalide : {self.max_buffer_size!r}"
            )
        if not self.encoding:
            raise ValueError("encoding ne peut pas être vide.")

    @classmethod
    def for_capture(
        cls, logger: Optional[Logger] = None
    ) -> "CommandSettings":
        """Crée des paramètres adaptés à la capture de sorties longues.

        Args:
            logger: Logger optionnel (défaut: ConsoleLogger).

        Returns:
            CommandSettings avec un plafond de 1 Mio.
        """
        return cls(
            max_buffer_size=DEFAULT_CAPTURE_BUFFER_SIZE,
            logger=logger or _default_logger(),
        )
