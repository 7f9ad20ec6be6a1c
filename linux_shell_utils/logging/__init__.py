"""Module de logging."""

from linux_shell_utils.logging.base import Logger
from linux_shell_utils.logging.file_logger import FileLogger
from linux_shell_utils.logging.console_logger import ConsoleLogger

__all__ = [
    "Logger",
    "FileLogger",
    "ConsoleLogger",
]
