"""
    ConsoleErrorHandler (affichage des échecs de commandes)
"""
from linux_shell_utils.errors.base import ErrorHandler
from linux_shell_utils.errors.exceptions import (ApplicationError,
                                                 CommandNotFoundError,
                                                 ConfigurationError,
                                                 InvalidArgError,
                                                 InvalidPathError,
                                                 NoStdoutError,
                                                 OutputLimitExceededError,
                                                 ProcessFailedError,
                                                 ShellError,
                                                 SpawnFailedError,
                                                 UserNotFoundError)


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs dans la console.

    Distingue les erreurs connues (ApplicationError) des erreurs
    inattendues, et affiche un message de solution adapté au type
    d'erreur. L'ordre des tests isinstance va du plus spécifique
    au plus général.
    """

    def __init__(
        self,
        solutions: dict[type[Exception], str] | None = None
    ) -> None:
        """Initialise le handler console.

        Args:
            solutions: Dictionnaire {TypeException: "message solution"}
                       prioritaire sur les messages par défaut.
        """
        self.solutions = solutions or {}

    def handle(self, error: Exception) -> None:
        if isinstance(error, ApplicationError):
            self._handle_known_error(error)
        else:
            self._handle_unknown_error(error)

    def _solution_for(self, error: ApplicationError) -> str:
        """Retourne la suggestion de solution pour une erreur connue.

        Args:
            error: L'exception métier à traiter.

        Returns:
            Message de solution.
        """
        for error_type, solution in self.solutions.items():
            if isinstance(error, error_type):
                return solution

        if isinstance(error, SpawnFailedError):
            return "Vérifiez que le programme est installé et exécutable."
        if isinstance(error, ProcessFailedError):
            return "Consultez la sortie d'erreur de la commande."
        if isinstance(error, OutputLimitExceededError):
            return "Augmentez max_buffer_size ou utilisez le mode streaming."
        if isinstance(error, UserNotFoundError):
            return (
                "La commande n'a rien affiché ; passez "
                "require_output=False si une sortie vide est valide."
            )
        if isinstance(error, NoStdoutError):
            return "Vérifiez que l'invocateur relie stdout à un pipe."
        if isinstance(error, (InvalidPathError, InvalidArgError)):
            return "Vérifiez les arguments passés à la commande."
        if isinstance(error, CommandNotFoundError):
            return "Fournissez au moins le nom du programme à exécuter."
        if isinstance(error, ConfigurationError):
            return "Vérifiez votre fichier de configuration."
        return "Consultez le message d'erreur ci-dessus."

    def _handle_known_error(self, error: ApplicationError) -> None:
        """Affiche le type, le kind éventuel et la solution proposée.

        Args:
            error: L'exception métier à traiter.
        """
        print(f"\n🛑 {type(error).__name__}: {str(error)}")
        if isinstance(error, ShellError):
            print(f"Kind: {error.kind}")
        print(f"\n🔧 Solution : {self._solution_for(error)}")

    def _handle_unknown_error(self, error: Exception) -> None:
        print(f"\n💥 Erreur inattendue: {str(error)}")
        print(f"Type: {type(error).__name__}")
        print(
            "\n📋 Cela peut être un bug. Veuillez ouvrir une issue "
            "avec ces informations."
        )
