"""Commandes shell : disponibilité d'un programme et scripts sh."""

from linux_shell_utils.commands.builder import CommandBuilder
from linux_shell_utils.commands.settings import CommandSettings
from linux_shell_utils.errors.exceptions import ShellError
from linux_shell_utils.tools.base import CommandTool, require_arg

# Le nom est passé en paramètre positionnel ($1), jamais interpolé.
_COMMAND_V_SCRIPT = 'command -v "$1"'


class ShellCommands(CommandTool):
    """Exécution de scripts via sh et détection de programmes."""

    def is_available(self, settings: CommandSettings, name: str) -> bool:
        """Vérifie si un programme est disponible dans le PATH.

        ``command -v`` étant une commande interne du shell, elle est
        lancée via sh. Tout échec est ramené à False.

        Args:
            settings: Paramètres d'exécution.
            name: Nom du programme recherché.

        Returns:
            True si le programme est trouvé, False sinon.
        """
        require_arg(name, "name")
        command = ["sh", "-c", _COMMAND_V_SCRIPT, "sh", name]
        try:
            result = self._captured.call(settings, command)
        except ShellError:
            return False
        return bool(result)

    def run(self, settings: CommandSettings, script: str) -> None:
        """Exécute un script via ``sh -c`` en relayant sa sortie.

        Args:
            settings: Paramètres d'exécution.
            script: Script shell (pipes, globbing, && autorisés).

        Raises:
            InvalidArgError: Si le script est vide.
            ProcessFailedError: Si le script échoue.
        """
        require_arg(script, "script")
        self._streaming.run(settings, ["sh", "-c", script])

    def sudo_run(self, settings: CommandSettings, script: str) -> None:
        """Exécute un script via ``sudo sh -c``.

        stdin étant fermé, sudo échoue s'il doit demander un mot
        de passe.

        Args:
            settings: Paramètres d'exécution.
            script: Script shell.

        Raises:
            InvalidArgError: Si le script est vide.
            ProcessFailedError: Si le script ou sudo échoue.
        """
        require_arg(script, "script")
        command = (
            CommandBuilder.privileged("sh")
            .with_flag("-c")
            .with_arg(script)
            .build()
        )
        self._streaming.run(settings, command)
