"""
    LoggerErrorHandler
"""
from linux_shell_utils.errors.base import ErrorHandler
from linux_shell_utils.errors.exceptions import ApplicationError, ShellError
from linux_shell_utils.logging.base import Logger


class LoggerErrorHandler(ErrorHandler):
    """Handler pour logger les erreurs.

    Enregistre les erreurs via le Logger injecté au constructeur.
    Les erreurs de commande sont suffixées de leur kind.
    """

    def __init__(self, logger: Logger) -> None:
        """Initialise le handler avec un logger.

        Args:
            logger: Instance de Logger pour l'enregistrement des erreurs.
        """
        self.logger = logger

    def handle(self, error: Exception) -> None:
        """Log l'erreur selon sa nature (connue ou inattendue).

        Args:
            error: L'exception à logger.
        """
        if isinstance(error, ShellError):
            self.logger.log_error(
                f"{type(error).__name__} [{error.kind}]: {str(error)}"
            )
        elif isinstance(error, ApplicationError):
            self.logger.log_error(f"{type(error).__name__}: {str(error)}")
        else:
            self.logger.log_error(
                f"Erreur inattendue: {type(error).__name__}: {str(error)}"
            )
