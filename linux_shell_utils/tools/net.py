"""Téléchargements HTTP via curl et wget."""

from typing import Optional

from linux_shell_utils.commands.builder import CommandBuilder
from linux_shell_utils.commands.settings import CommandSettings
from linux_shell_utils.tools.base import CommandTool, require_arg


class NetCommands(CommandTool):
    """Récupération de ressources distantes."""

    def curl(
        self,
        settings: CommandSettings,
        url: str,
        follow_redirects: bool = True,
    ) -> str:
        """Retourne le corps de la réponse (éventuellement vide).

        curl est lancé en mode silencieux (-sS) : seule une erreur
        éventuelle est écrite sur stderr.

        Args:
            settings: Paramètres d'exécution (max_buffer_size borne
                la taille de la réponse).
            url: URL à récupérer.
            follow_redirects: Suivre les redirections (-L).

        Returns:
            Corps de la réponse sans blancs de début et de fin.
        """
        require_arg(url, "url")
        command = (
            CommandBuilder("curl")
            .with_flag("-sS")
            .with_flag_if("-L", follow_redirects)
            .with_arg(url)
            .build()
        )
        return self._captured.call(settings, command, require_output=False)

    def wget(
        self,
        settings: CommandSettings,
        url: str,
        output: Optional[str] = None,
    ) -> None:
        """Télécharge une URL dans un fichier (-O si ``output``)."""
        require_arg(url, "url")
        builder = CommandBuilder("wget")
        if output:
            builder.with_args(["-O", output])
        self._streaming.run(settings, builder.with_arg(url).build())
