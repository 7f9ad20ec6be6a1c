"""
Linux Shell Utils - Exécution de commandes système pour Linux.

Modules disponibles:
- commands: Noyau d'exécution (CommandSettings, ProcessInvoker,
  StreamingExecutor, CapturedExecutor, CommandBuilder)
- errors: Taxonomie des erreurs (ErrorKind, ShellError et dérivées)
  et handlers d'erreurs
- logging: Gestion des logs (Logger, FileLogger, ConsoleLogger)
- config: Chargement de configuration (TOML, JSON)
- tools: Commandes prêtes à l'emploi (fichiers, git, paquets,
  utilisateurs, chemins, réseau)
"""

__version__ = "1.0.0"

from linux_shell_utils.logging import Logger, FileLogger, ConsoleLogger
from linux_shell_utils.errors import (
    ApplicationError,
    ConfigurationError,
    ErrorKind,
    ShellError,
    CommandNotFoundError,
    InvalidPathError,
    InvalidArgError,
    NoStdoutError,
    ProcessFailedError,
    SpawnFailedError,
    UserNotFoundError,
    OutputLimitExceededError,
    ErrorHandler,
    ErrorHandlerChain,
    ConsoleErrorHandler,
    LoggerErrorHandler,
    exit_code_for,
)
from linux_shell_utils.commands import (
    CommandSettings,
    CommandBuilder,
    ProcessInvoker,
    StreamingExecutor,
    CapturedExecutor,
    CommandFormatter,
    PlainCommandFormatter,
    AnsiCommandFormatter,
)
from linux_shell_utils.config import (
    ConfigLoader,
    FileConfigLoader,
    SettingsConfigLoader,
)
from linux_shell_utils.tools import (
    ShellCommands,
    FileCommands,
    GitCommands,
    PackageManager,
    AptManager,
    DnfManager,
    YumManager,
    PacmanManager,
    detect_package_manager,
    PathCommands,
    UserCommands,
    UserInfo,
    NetCommands,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    "ConsoleLogger",
    # Erreurs
    "ApplicationError",
    "ConfigurationError",
    "ErrorKind",
    "ShellError",
    "CommandNotFoundError",
    "InvalidPathError",
    "InvalidArgError",
    "NoStdoutError",
    "ProcessFailedError",
    "SpawnFailedError",
    "UserNotFoundError",
    "OutputLimitExceededError",
    "ErrorHandler",
    "ErrorHandlerChain",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    "exit_code_for",
    # Noyau d'exécution
    "CommandSettings",
    "CommandBuilder",
    "ProcessInvoker",
    "StreamingExecutor",
    "CapturedExecutor",
    "CommandFormatter",
    "PlainCommandFormatter",
    "AnsiCommandFormatter",
    # Configuration
    "ConfigLoader",
    "FileConfigLoader",
    "SettingsConfigLoader",
    # Outils
    "ShellCommands",
    "FileCommands",
    "GitCommands",
    "PackageManager",
    "AptManager",
    "DnfManager",
    "YumManager",
    "PacmanManager",
    "detect_package_manager",
    "PathCommands",
    "UserCommands",
    "UserInfo",
    "NetCommands",
]
