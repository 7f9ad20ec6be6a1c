"""Gestion des utilisateurs : identité courante et comptes système."""

import os
from dataclasses import dataclass

from linux_shell_utils.commands.builder import CommandBuilder
from linux_shell_utils.commands.settings import CommandSettings
from linux_shell_utils.errors.exceptions import (
    ProcessFailedError,
    UserNotFoundError,
)
from linux_shell_utils.tools.base import CommandTool, require_arg

# getent sort avec ce code quand la clé est absente de la base.
GETENT_KEY_NOT_FOUND = 2


@dataclass(frozen=True)
class UserInfo:
    """Entrée de la base passwd.

    Attributes:
        name: Nom de connexion.
        uid: Identifiant numérique de l'utilisateur.
        gid: Identifiant numérique du groupe principal.
        home: Répertoire personnel.
        shell: Shell de connexion.
    """

    name: str
    uid: int
    gid: int
    home: str
    shell: str

    @classmethod
    def from_passwd_line(cls, line: str) -> "UserInfo":
        """Construit un UserInfo depuis une ligne ``name:x:uid:gid:...``.

        Raises:
            ValueError: Si la ligne n'a pas 7 champs ou si uid/gid
                ne sont pas numériques.
        """
        fields = line.split(":")
        if len(fields) != 7:
            raise ValueError(f"Entrée passwd invalide : {line!r}")
        name, _, uid, gid, _, home, shell = fields
        return cls(
            name=name, uid=int(uid), gid=int(gid), home=home, shell=shell
        )


class UserCommands(CommandTool):
    """Identité de l'utilisateur courant et comptes système."""

    @staticmethod
    def get_uid() -> int:
        return os.getuid()

    def get_name(self, settings: CommandSettings) -> str:
        """Retourne le nom de l'utilisateur courant (whoami).

        Raises:
            UserNotFoundError: Si whoami ne produit aucune sortie.
            ProcessFailedError: Si whoami échoue.
        """
        return self._captured.call(settings, ["whoami"], require_output=True)

    def add_user(self, settings: CommandSettings, username: str) -> None:
        require_arg(username, "username")
        self._streaming.run(
            settings,
            CommandBuilder.privileged("useradd").with_arg(username).build(),
        )

    def del_user(self, settings: CommandSettings, username: str) -> None:
        require_arg(username, "username")
        self._streaming.run(
            settings,
            CommandBuilder.privileged("userdel").with_arg(username).build(),
        )

    def get_user_info(self, settings: CommandSettings, name: str) -> UserInfo:
        """Retourne l'entrée passwd d'un utilisateur (getent passwd).

        Args:
            settings: Paramètres d'exécution.
            name: Nom de connexion.

        Returns:
            UserInfo de l'utilisateur.

        Raises:
            InvalidArgError: Si name est vide.
            UserNotFoundError: Si l'utilisateur n'existe pas ou si
                l'entrée retournée est illisible.
            ProcessFailedError: Si getent échoue pour une autre raison.
        """
        require_arg(name, "name")
        command = ["getent", "passwd", name]
        try:
            line = self._captured.call(settings, command)
        except ProcessFailedError as e:
            if e.returncode == GETENT_KEY_NOT_FOUND:
                raise UserNotFoundError(
                    command, f"Utilisateur inconnu : {name}"
                ) from e
            raise
        try:
            return UserInfo.from_passwd_line(line.splitlines()[0])
        except ValueError as e:
            raise UserNotFoundError(command, str(e)) from e
