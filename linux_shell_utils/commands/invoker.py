"""Lancement des processus système.

ProcessInvoker crée un processus enfant pour une liste d'arguments,
avec stdout et stderr reliés à des pipes et stdin jamais ouvert.
"""

import subprocess  # nosec B404
from typing import Optional, Sequence

from linux_shell_utils.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
    runs_as_root,
)
from linux_shell_utils.commands.settings import CommandSettings
from linux_shell_utils.errors.exceptions import (
    CommandNotFoundError,
    SpawnFailedError,
)


class ProcessInvoker:
    """Lance un processus enfant par commande.

    Le processus hérite du répertoire courant et de l'environnement.
    stdin est redirigé vers /dev/null : un enfant qui attend une
    saisie (ex: sudo demandant un mot de passe) reçoit EOF au lieu
    de bloquer indéfiniment.

    Le handle retourné appartient à l'appelant, qui doit le vider
    puis l'attendre (idéalement via ``with``).
    """

    def __init__(
        self, formatter: Optional[CommandFormatter] = None
    ) -> None:
        """Initialise l'invocateur.

        Args:
            formatter: Formateur des messages de lancement
                (défaut: PlainCommandFormatter).
        """
        self._formatter = formatter or PlainCommandFormatter()

    def spawn(
        self,
        settings: CommandSettings,
        command: Sequence[str],
        new_session: bool = False,
    ) -> subprocess.Popen:
        """Lance la commande et retourne le handle du processus.

        Args:
            settings: Paramètres d'exécution (logger).
            command: Liste d'arguments, le premier étant le programme.
            new_session: Si True, l'enfant devient chef d'une nouvelle
                session ; son groupe de processus (pgid == pid) peut
                alors être tué d'un bloc avec os.killpg.

        Returns:
            Processus lancé, stdout et stderr en pipes binaires.

        Raises:
            CommandNotFoundError: Si la commande est vide.
            SpawnFailedError: Si le système refuse le lancement.
        """
        if not command:
            raise CommandNotFoundError()

        argv = list(command)
        settings.logger.log_info(
            self._formatter.format_start(argv, runs_as_root(argv))
        )
        try:
            return subprocess.Popen(  # nosec B603
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                bufsize=0,
                start_new_session=new_session,
            )
        except OSError as e:
            settings.logger.log_error(f"Erreur système : {e}")
            raise SpawnFailedError(argv, e) from e
