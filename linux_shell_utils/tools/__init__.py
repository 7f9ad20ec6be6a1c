"""Outils construisant des commandes pour le noyau d'exécution.

Modules disponibles :
    shell : Scripts sh, sudo et détection de programmes.
    files : Opérations sur fichiers (cp, mv, rm, find, grep...).
    git : Commandes git courantes.
    packages : Gestionnaires de paquets (apt, dnf, yum, pacman).
    paths : realpath et basename.
    users : Utilisateur courant et comptes système.
    net : curl et wget.
"""

from linux_shell_utils.tools.base import (
    CommandTool,
    require_arg,
    require_path,
)
from linux_shell_utils.tools.shell import ShellCommands
from linux_shell_utils.tools.files import FileCommands
from linux_shell_utils.tools.git import GitCommands
from linux_shell_utils.tools.packages import (
    PackageManager,
    AptManager,
    DnfManager,
    YumManager,
    PacmanManager,
    PACKAGE_MANAGERS,
    detect_package_manager,
)
from linux_shell_utils.tools.paths import PathCommands
from linux_shell_utils.tools.users import UserCommands, UserInfo
from linux_shell_utils.tools.net import NetCommands

__all__ = [
    "CommandTool",
    "require_arg",
    "require_path",
    "ShellCommands",
    "FileCommands",
    "GitCommands",
    "PackageManager",
    "AptManager",
    "DnfManager",
    "YumManager",
    "PacmanManager",
    "PACKAGE_MANAGERS",
    "detect_package_manager",
    "PathCommands",
    "UserCommands",
    "UserInfo",
    "NetCommands",
]
