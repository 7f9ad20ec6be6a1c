"""Module de gestion des erreurs."""

from linux_shell_utils.errors.base import (ErrorHandler,
                                          ErrorHandlerChain,
                                          exit_code_for)
from linux_shell_utils.errors.exceptions import (ApplicationError,
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
                                                 OutputLimitExceededError)
from linux_shell_utils.errors.console_handler import ConsoleErrorHandler
from linux_shell_utils.errors.logger_handler import LoggerErrorHandler


__all__ = [
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
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    "ErrorHandlerChain",
    "exit_code_for",
]
