"""Résolution de chemins via realpath et basename."""

from linux_shell_utils.commands.settings import CommandSettings
from linux_shell_utils.tools.base import CommandTool, require_arg


class PathCommands(CommandTool):
    """Chemins absolus et noms de base."""

    def realpath(self, settings: CommandSettings, path: str) -> str:
        """Retourne le chemin absolu canonique (liens résolus).

        Raises:
            InvalidArgError: Si path est vide.
            ProcessFailedError: Si realpath échoue.
        """
        require_arg(path, "path")
        return self._captured.call(settings, ["realpath", "--", path])

    def basename(self, settings: CommandSettings, path: str) -> str:
        require_arg(path, "path")
        return self._captured.call(settings, ["basename", "--", path])
