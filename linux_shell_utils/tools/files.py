"""Opérations sur fichiers via les utilitaires coreutils/findutils.

Chaque opération construit la commande correspondante (cp, mv, mkdir,
rm, find, grep...) ; chaque option activée devient un argument
distinct.
"""

from typing import List, Optional

from linux_shell_utils.commands.builder import CommandBuilder
from linux_shell_utils.commands.settings import CommandSettings
from linux_shell_utils.errors.exceptions import (
    InvalidArgError,
    ProcessFailedError,
)
from linux_shell_utils.tools.base import (
    CommandTool,
    require_arg,
    require_path,
)

FIND_TYPES = ("f", "d")


class FileCommands(CommandTool):
    """Copie, déplacement, création, lecture, suppression, recherche."""

    def cp(
        self,
        settings: CommandSettings,
        source: str,
        target: str,
        recursive: bool = False,
        preserve: bool = False,
        verbose: bool = False,
    ) -> None:
        """Copie un fichier ou un répertoire.

        Args:
            settings: Paramètres d'exécution.
            source: Chemin source (doit exister).
            target: Chemin destination.
            recursive: Copier les répertoires récursivement (-r).
            preserve: Préserver droits et horodatages (-p).
            verbose: Afficher chaque fichier copié (-v).

        Raises:
            InvalidPathError: Si source est vide ou inexistant, ou
                si target est vide.
        """
        require_path(source)
        require_path(target, must_exist=False)
        command = (
            CommandBuilder("cp")
            .with_flag_if("-r", recursive)
            .with_flag_if("-p", preserve)
            .with_flag_if("-v", verbose)
            .with_args([source, target])
            .build()
        )
        self._streaming.run(settings, command)

    def mv(
        self,
        settings: CommandSettings,
        source: str,
        target: str,
        force: bool = False,
    ) -> None:
        """Déplace ou renomme un fichier.

        Args:
            settings: Paramètres d'exécution.
            source: Chemin source (doit exister).
            target: Chemin destination.
            force: Écraser sans confirmation (-f).
        """
        require_path(source)
        require_path(target, must_exist=False)
        command = (
            CommandBuilder("mv")
            .with_flag_if("-f", force)
            .with_args([source, target])
            .build()
        )
        self._streaming.run(settings, command)

    def mkdir(
        self, settings: CommandSettings, name: str, parents: bool = False
    ) -> None:
        """Crée un répertoire, avec ses parents si ``parents`` (-p)."""
        require_arg(name, "name")
        command = (
            CommandBuilder("mkdir")
            .with_flag_if("-p", parents)
            .with_arg(name)
            .build()
        )
        self._streaming.run(settings, command)

    def touch(self, settings: CommandSettings, name: str) -> None:
        require_arg(name, "name")
        self._streaming.run(settings, ["touch", name])

    def cat(self, settings: CommandSettings, file: str) -> None:
        """Affiche le contenu d'un fichier sur la sortie standard."""
        require_path(file)
        self._streaming.run(settings, ["cat", file])

    def read(self, settings: CommandSettings, file: str) -> str:
        """Retourne le contenu d'un fichier (éventuellement vide).

        Args:
            settings: Paramètres d'exécution (max_buffer_size borne
                la taille lisible).
            file: Chemin du fichier (doit exister).

        Returns:
            Contenu sans blancs de début et de fin.
        """
        require_path(file)
        return self._captured.call(
            settings, ["cat", file], require_output=False
        )

    def echo(self, settings: CommandSettings, text: str) -> None:
        self._streaming.run(settings, ["echo", text])

    def pwd(self, settings: CommandSettings) -> str:
        return self._captured.call(settings, ["pwd"])

    def rm(
        self,
        settings: CommandSettings,
        path: str,
        recursive: bool = False,
        force: bool = False,
        verbose: bool = False,
    ) -> None:
        """Supprime un fichier ou un répertoire.

        Args:
            settings: Paramètres d'exécution.
            path: Chemin à supprimer.
            recursive: Supprimer les répertoires récursivement (-r).
            force: Ignorer les fichiers inexistants (-f).
            verbose: Afficher chaque suppression (-v).

        Raises:
            InvalidArgError: Si path est vide.
        """
        require_arg(path, "path")
        command = (
            CommandBuilder("rm")
            .with_flag_if("-r", recursive)
            .with_flag_if("-f", force)
            .with_flag_if("-v", verbose)
            .with_arg(path)
            .build()
        )
        self._streaming.run(settings, command)

    def find(
        self,
        settings: CommandSettings,
        root: str,
        name: Optional[str] = None,
        type: Optional[str] = None,
        maxdepth: Optional[int] = None,
    ) -> List[str]:
        """Recherche des fichiers sous un répertoire.

        Args:
            settings: Paramètres d'exécution.
            root: Répertoire de départ (doit exister).
            name: Motif de nom (-name), glob interprété par find.
            type: "f" (fichiers) ou "d" (répertoires).
            maxdepth: Profondeur maximale de recherche.

        Returns:
            Chemins trouvés, liste vide si aucun.

        Raises:
            InvalidPathError: Si root est vide ou inexistant.
            InvalidArgError: Si type ou maxdepth est invalide.
        """
        require_path(root)
        if type is not None and type not in FIND_TYPES:
            raise InvalidArgError("type")
        if maxdepth is not None and maxdepth < 0:
            raise InvalidArgError("maxdepth")

        builder = CommandBuilder("find").with_arg(root)
        if maxdepth is not None:
            builder.with_args(["-maxdepth", str(maxdepth)])
        if type is not None:
            builder.with_args(["-type", type])
        if name:
            builder.with_args(["-name", name])

        output = self._captured.call(
            settings, builder.build(), require_output=False
        )
        return output.splitlines() if output else []

    def grep(
        self, settings: CommandSettings, pattern: str, file: str
    ) -> List[str]:
        """Retourne les lignes d'un fichier correspondant au motif.

        grep sort avec le code 1 quand rien ne correspond : ce cas
        donne une liste vide, les autres échecs sont propagés.

        Args:
            settings: Paramètres d'exécution.
            pattern: Expression régulière (non vide).
            file: Fichier à parcourir (doit exister).

        Returns:
            Lignes correspondantes.

        Raises:
            InvalidArgError: Si pattern est vide.
            InvalidPathError: Si file est vide ou inexistant.
            ProcessFailedError: Si grep échoue (code >= 2).
        """
        require_arg(pattern, "pattern")
        require_path(file)
        command = ["grep", "-e", pattern, "--", file]
        try:
            output = self._captured.call(
                settings, command, require_output=False
            )
        except ProcessFailedError as e:
            if e.returncode == 1:
                return []
            raise
        return output.splitlines() if output else []
