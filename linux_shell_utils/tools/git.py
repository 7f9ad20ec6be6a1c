"""Commandes git courantes, exécutées dans le répertoire courant."""

from typing import Optional

from linux_shell_utils.commands.builder import CommandBuilder
from linux_shell_utils.commands.settings import CommandSettings
from linux_shell_utils.tools.base import CommandTool, require_arg


class GitCommands(CommandTool):
    """Clone, add, commit, push et pull."""

    def clone(
        self,
        settings: CommandSettings,
        url: str,
        directory: Optional[str] = None,
    ) -> None:
        """Clone un dépôt.

        Args:
            settings: Paramètres d'exécution.
            url: URL du dépôt.
            directory: Répertoire de destination optionnel.
        """
        require_arg(url, "url")
        builder = CommandBuilder("git").with_args(["clone", url])
        if directory:
            builder.with_arg(directory)
        self._streaming.run(settings, builder.build())

    def add(self, settings: CommandSettings, path: str) -> None:
        require_arg(path, "path")
        self._streaming.run(settings, ["git", "add", path])

    def commit(self, settings: CommandSettings, message: str) -> None:
        require_arg(message, "message")
        self._streaming.run(settings, ["git", "commit", "-m", message])

    def push(
        self, settings: CommandSettings, remote: str, branch: str
    ) -> None:
        """Pousse une branche vers un dépôt distant (ex: origin main)."""
        require_arg(remote, "remote")
        require_arg(branch, "branch")
        self._streaming.run(settings, ["git", "push", remote, branch])

    def pull(
        self, settings: CommandSettings, remote: str, branch: str
    ) -> None:
        """Récupère et fusionne une branche distante."""
        require_arg(remote, "remote")
        require_arg(branch, "branch")
        self._streaming.run(settings, ["git", "pull", remote, branch])
