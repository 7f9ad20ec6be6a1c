"""Module d'exécution de commandes système.

Ce module fournit le noyau d'exécution de processus et les outils
pour construire des commandes de manière structurée.

Classes disponibles :
    CommandSettings : Paramètres passés à chaque exécution.
    ProcessInvoker : Lancement d'un processus avec pipes.
    StreamingExecutor : Exécution avec relais de la sortie.
    CapturedExecutor : Exécution avec capture de stdout.
    CommandBuilder : Constructeur fluent de commandes.
    CommandFormatter : Interface abstraite de formatage.
    PlainCommandFormatter : Formatage texte brut (logs fichier).
    AnsiCommandFormatter : Formatage ANSI coloré (console).
"""

from linux_shell_utils.commands.settings import (
    CommandSettings,
    DEFAULT_CAPTURE_BUFFER_SIZE,
    DEFAULT_STREAM_BUFFER_SIZE,
)
from linux_shell_utils.commands.builder import CommandBuilder
from linux_shell_utils.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
    AnsiCommandFormatter,
    runs_as_root,
)
from linux_shell_utils.commands.invoker import ProcessInvoker
from linux_shell_utils.commands.runner import (
    CapturedExecutor,
    StreamingExecutor,
)

__all__ = [
    # Paramètres
    "CommandSettings",
    "DEFAULT_CAPTURE_BUFFER_SIZE",
    "DEFAULT_STREAM_BUFFER_SIZE",
    # Constructeur
    "CommandBuilder",
    # Formateurs
    "CommandFormatter",
    "PlainCommandFormatter",
    "AnsiCommandFormatter",
    "runs_as_root",
    # Noyau d'exécution
    "ProcessInvoker",
    "StreamingExecutor",
    "CapturedExecutor",
]
