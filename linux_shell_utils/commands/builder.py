"""Assemblage fluent d'une liste d'arguments (argv).

Chaque flag, option ou argument occupe son propre élément : la
commande construite est passée telle quelle à execve, sans shell.
Les options précèdent toujours les arguments positionnels, quel que
soit l'ordre des appels.

Example:
    Copie récursive conditionnelle :

        from linux_shell_utils.commands import CommandBuilder

        argv = (
            CommandBuilder("cp")
            .with_flag_if("-r", recursive)
            .with_args([source, target])
            .build()
        )
        # ["cp", "-r", "/src", "/dst"] si recursive
"""

from typing import Iterable, List, Optional

SUDO_PROGRAM = "sudo"


class CommandBuilder:
    """Construit un argv ``[préfixe..., programme, options..., args...]``."""

    def __init__(self, program: str) -> None:
        """
        Args:
            program: Programme à exécuter, nom (cherché dans le PATH)
                ou chemin.

        Raises:
            ValueError: Si program est vide ou ne contient que des blancs.
        """
        if not program or not program.strip():
            raise ValueError("Le programme est requis.")
        self._program = program
        self._prefix: List[str] = []
        self._options: List[str] = []
        self._positionals: List[str] = []

    @classmethod
    def privileged(cls, program: str) -> "CommandBuilder":
        """Variante préfixée par sudo.

        stdin étant fermé par le noyau d'exécution, sudo ne peut pas
        demander de mot de passe : la commande échoue si sudo en exige un.
        """
        builder = cls(program)
        builder._prefix = [SUDO_PROGRAM]
        return builder

    def with_flag(self, flag: str) -> "CommandBuilder":
        self._options.append(flag)
        return self

    def with_flag_if(self, flag: str, condition: bool) -> "CommandBuilder":
        """Ajoute ``flag`` seulement si ``condition`` est vraie."""
        return self.with_flag(flag) if condition else self

    def with_options(self, options: Iterable[str]) -> "CommandBuilder":
        self._options.extend(options)
        return self

    def with_option(self, key: str, value: str) -> "CommandBuilder":
        """Ajoute l'option longue ``key=value`` en un seul élément."""
        return self.with_flag(f"{key}={value}")

    def with_option_if(
        self,
        key: str,
        value: Optional[str],
        condition: bool = True,
    ) -> "CommandBuilder":
        """Comme with_option, sauf si value est None ou condition fausse."""
        if condition and value is not None:
            self.with_option(key, value)
        return self

    def with_arg(self, arg: str) -> "CommandBuilder":
        self._positionals.append(arg)
        return self

    def with_args(self, args: Iterable[str]) -> "CommandBuilder":
        self._positionals.extend(args)
        return self

    def build(self) -> List[str]:
        """Retourne une nouvelle liste ; le builder reste réutilisable."""
        return [
            *self._prefix,
            self._program,
            *self._options,
            *self._positionals,
        ]
