"""Gestionnaires de paquets : apt, dnf, yum et pacman.

Toutes les opérations d'installation, de suppression et de mise à
jour sont préfixées par sudo. stdin étant fermé, sudo doit pouvoir
s'exécuter sans mot de passe (ou l'appelant être root).

Example:
    Détection puis installation :

        manager = detect_package_manager(settings)
        if manager is not None:
            manager.install(settings, "curl", auto_yes=True)
"""

from typing import List, Optional, Type

from linux_shell_utils.commands.builder import CommandBuilder
from linux_shell_utils.commands.runner import (
    CapturedExecutor,
    StreamingExecutor,
)
from linux_shell_utils.commands.settings import CommandSettings
from linux_shell_utils.tools.base import CommandTool, require_arg
from linux_shell_utils.tools.shell import ShellCommands


class PackageManager(CommandTool):
    """Base des gestionnaires de paquets.

    Les sous-classes décrivent leurs sous-commandes ; la construction
    des commandes est commune.

    Attributes:
        PROGRAM: Nom de l'exécutable.
        INSTALL: Arguments de la sous-commande d'installation.
        REMOVE: Arguments de la sous-commande de suppression.
        UPDATE: Arguments de la sous-commande de mise à jour.
        YES_FLAG: Flag de confirmation automatique.
    """

    PROGRAM: str = ""
    INSTALL: List[str] = ["install"]
    REMOVE: List[str] = ["remove"]
    UPDATE: List[str] = ["update"]
    YES_FLAG: str = "-y"

    def __init__(
        self,
        streaming: Optional[StreamingExecutor] = None,
        captured: Optional[CapturedExecutor] = None,
    ) -> None:
        super().__init__(streaming, captured)
        self._shell = ShellCommands(self._streaming, self._captured)

    def _build(
        self,
        subcommand: List[str],
        auto_yes: bool,
        package: Optional[str] = None,
    ) -> List[str]:
        builder = (
            CommandBuilder.privileged(self.PROGRAM)
            .with_options(list(subcommand))
            .with_flag_if(self.YES_FLAG, auto_yes)
        )
        if package is not None:
            builder.with_arg(package)
        return builder.build()

    def install(
        self,
        settings: CommandSettings,
        package: str,
        auto_yes: bool = False,
    ) -> None:
        """Installe un paquet.

        Args:
            settings: Paramètres d'exécution.
            package: Nom du paquet.
            auto_yes: Répondre oui automatiquement.

        Raises:
            InvalidArgError: Si package est vide.
            ProcessFailedError: Si le gestionnaire échoue.
        """
        require_arg(package, "package")
        self._streaming.run(
            settings, self._build(self.INSTALL, auto_yes, package)
        )

    def remove(
        self,
        settings: CommandSettings,
        package: str,
        auto_yes: bool = False,
    ) -> None:
        """Supprime un paquet (mêmes erreurs que install)."""
        require_arg(package, "package")
        self._streaming.run(
            settings, self._build(self.REMOVE, auto_yes, package)
        )

    def update(
        self, settings: CommandSettings, auto_yes: bool = False
    ) -> None:
        self._streaming.run(settings, self._build(self.UPDATE, auto_yes))

    def is_available(self, settings: CommandSettings) -> bool:
        return self._shell.is_available(settings, self.PROGRAM)


class AptManager(PackageManager):
    PROGRAM = "apt"


class DnfManager(PackageManager):
    PROGRAM = "dnf"


class YumManager(PackageManager):
    PROGRAM = "yum"


class PacmanManager(PackageManager):
    """pacman : -S, -R et -Syu au lieu de sous-commandes nommées."""

    PROGRAM = "pacman"
    INSTALL = ["-S"]
    REMOVE = ["-R"]
    UPDATE = ["-Syu"]
    YES_FLAG = "--noconfirm"


PACKAGE_MANAGERS: List[Type[PackageManager]] = [
    AptManager,
    DnfManager,
    YumManager,
    PacmanManager,
]


def detect_package_manager(
    settings: CommandSettings,
    streaming: Optional[StreamingExecutor] = None,
    captured: Optional[CapturedExecutor] = None,
) -> Optional[PackageManager]:
    """Retourne le premier gestionnaire de paquets disponible.

    L'ordre de recherche est celui de PACKAGE_MANAGERS.

    Args:
        settings: Paramètres d'exécution.
        streaming: Exécuteur streaming transmis au gestionnaire.
        captured: Exécuteur capture transmis au gestionnaire.

    Returns:
        Instance du gestionnaire trouvé, None si aucun.
    """
    for manager_cls in PACKAGE_MANAGERS:
        manager = manager_cls(streaming, captured)
        if manager.is_available(settings):
            return manager
    return None
