"""Chargeur de configuration pour CommandSettings.

Example:
    Chargement depuis un fichier TOML:

        loader = SettingsConfigLoader("config/app.toml")
        settings = loader.load()

    Fichier de configuration attendu:

        [commands]
        max_buffer_size = 1048576
        encoding = "utf-8"
        log_file = "/var/log/app/commands.log"
"""

from typing import Any

from linux_shell_utils.commands.settings import CommandSettings
from linux_shell_utils.config.loader import ConfigFileLoader
from linux_shell_utils.errors.exceptions import ConfigurationError
from linux_shell_utils.logging.file_logger import FileLogger

_ALLOWED_KEYS = {"max_buffer_size", "encoding", "log_file", "logging"}


class SettingsConfigLoader(ConfigFileLoader[CommandSettings]):
    """Chargeur de configuration pour CommandSettings.

    Lit la section [commands]. La clé optionnelle ``log_file``
    remplace le logger console par un FileLogger ; la sous-section
    ``logging`` (level, format) est alors transmise au FileLogger.

    Attributes:
        DEFAULT_SECTION: Nom de la section par défaut ("commands").
    """

    DEFAULT_SECTION: str = "commands"

    def load(self, section: str | None = None) -> CommandSettings:
        """Charge et retourne un CommandSettings.

        Args:
            section: Nom de la section à charger.
                Par défaut "commands".

        Returns:
            Instance de CommandSettings.

        Raises:
            KeyError: Si la section n'existe pas.
            ConfigurationError: Si une clé est inconnue ou une
                valeur invalide.
        """
        data: dict[str, Any] = dict(
            self._get_section(section or self.DEFAULT_SECTION)
        )

        unknown = set(data) - _ALLOWED_KEYS
        if unknown:
            raise ConfigurationError(
                f"Clés inconnues dans la section des commandes: "
                f"{sorted(unknown)}"
            )

        log_file = data.pop("log_file", None)
        logging_cfg = data.pop("logging", None)
        if log_file:
            data["logger"] = FileLogger(
                log_file, config={"logging": logging_cfg or {}}
            )

        try:
            return CommandSettings(**data)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
