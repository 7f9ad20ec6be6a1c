"""Chargement des fichiers de configuration TOML et JSON.

Le format est choisi d'après l'extension du fichier. Une erreur de
syntaxe est remontée sous forme de ConfigurationError indiquant le
fichier fautif.
"""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, BinaryIO, Callable, Dict, Generic, TypeVar, Union

from linux_shell_utils.errors.exceptions import ConfigurationError

T = TypeVar("T")


def _read_json(stream: BinaryIO) -> Dict[str, Any]:
    return json.loads(stream.read().decode("utf-8"))


_PARSERS: Dict[str, Callable[[BinaryIO], Dict[str, Any]]] = {
    ".toml": tomllib.load,
    ".json": _read_json,
}


class ConfigLoader(ABC):
    """Interface de chargement, substituable par un mock dans les tests."""

    @abstractmethod
    def load(
        self,
        config_path: Union[str, Path],
        schema: type | None = None
    ) -> Union[Dict[str, Any], Any]:
        """Charge un fichier de configuration.

        Args:
            config_path: Chemin vers le fichier de configuration.
            schema: Modèle pydantic optionnel. Si fourni, une instance
                validée est retournée au lieu du dict brut.
        """
        pass


class FileConfigLoader(ConfigLoader):
    """Chargeur de fichiers .toml et .json, avec validation optionnelle."""

    def load(
        self,
        config_path: Union[str, Path],
        schema: type | None = None
    ) -> Union[Dict[str, Any], Any]:
        """Lit et décode un fichier de configuration.

        Args:
            config_path: Chemin vers le fichier (.toml ou .json).
            schema: Classe pydantic BaseModel optionnelle.

        Returns:
            Dictionnaire brut, ou instance de schema.

        Raises:
            FileNotFoundError: Si le fichier n'existe pas.
            ValueError: Si l'extension n'est pas supportée.
            ConfigurationError: Si le contenu est syntaxiquement invalide.
            ImportError: Si schema est fourni sans pydantic installé.
            TypeError: Si schema n'est pas un BaseModel.
        """
        path = Path(config_path)
        if not path.is_file():
            raise FileNotFoundError(
                f"Fichier de configuration non trouvé: {path}"
            )

        parser = _PARSERS.get(path.suffix.lower())
        if parser is None:
            supported = ", ".join(sorted(_PARSERS))
            raise ValueError(
                f"Extension non supportée: {path.suffix or '(aucune)'}. "
                f"Extensions acceptées: {supported}"
            )

        with path.open("rb") as stream:
            try:
                data = parser(stream)
            except ValueError as e:
                raise ConfigurationError(
                    f"Configuration illisible ({path}): {e}"
                ) from e

        if schema is None:
            return data
        return self._validate_with_schema(data, schema)

    @staticmethod
    def _validate_with_schema(data: Dict[str, Any], schema: type) -> Any:
        """Valide data avec un modèle pydantic importé à la demande."""
        try:
            from pydantic import BaseModel
        except ImportError as e:
            raise ImportError(
                "pydantic est requis pour la validation de schema. "
                "Installez-le avec: pip install linux-shell-utils[validation]"
            ) from e

        if not (isinstance(schema, type) and issubclass(schema, BaseModel)):
            raise TypeError(
                "Le schema doit être une sous-classe de "
                f"pydantic.BaseModel, reçu: {schema}"
            )
        return schema.model_validate(data)


class ConfigFileLoader(ABC, Generic[T]):
    """Base des chargeurs qui construisent un objet depuis une section.

    Le fichier est lu une seule fois, à la construction ; load()
    interprète ensuite la section demandée.

    Example:
        >>> class SettingsLoader(ConfigFileLoader[CommandSettings]):
        ...     def load(self, section=None) -> CommandSettings:
        ...         return CommandSettings(**self._get_section("commands"))
    """

    def __init__(
        self,
        config_path: str | Path,
        config_loader: ConfigLoader | None = None
    ) -> None:
        """Charge le fichier de configuration.

        Args:
            config_path: Chemin vers le fichier (.toml ou .json).
            config_loader: Chargeur injectable (défaut: FileConfigLoader).
        """
        loader = config_loader or FileConfigLoader()
        self._config: dict[str, Any] = loader.load(config_path)

    @property
    def config(self) -> dict[str, Any]:
        return self._config

    def _get_section(self, section: str) -> dict[str, Any]:
        """Retourne la table ``section`` du fichier.

        Raises:
            KeyError: Si la section est absente.
            ConfigurationError: Si la section n'est pas une table.
        """
        if section not in self._config:
            raise KeyError(
                f"Section '{section}' non trouvée dans le fichier. "
                f"Sections disponibles: {list(self._config)}"
            )
        data = self._config[section]
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"La section '{section}' doit être une table, "
                f"reçu: {type(data).__name__}"
            )
        return data

    @abstractmethod
    def load(self, section: str | None = None) -> T:
        """Construit l'objet de configuration depuis une section.

        Args:
            section: Nom de la section, None pour la section par défaut.
        """
        pass
