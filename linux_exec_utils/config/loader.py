"""Lecture des fichiers de configuration des exécutables (TOML ou JSON)."""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Type, Union

from pydantic import BaseModel, ValidationError

from linux_exec_utils.errors.exceptions import ConfigurationError


def _read_toml(path: Path) -> Any:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _read_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


class ConfigLoader(ABC):
    """Interface de chargement, substituable par un mock dans les tests."""

    @abstractmethod
    def load(
        self,
        config_path: Union[str, Path],
        schema: Optional[Type[BaseModel]] = None
    ) -> Union[Dict[str, Any], BaseModel]:
        """Charge un fichier de configuration.

        Args:
            config_path: Chemin vers le fichier.
            schema: Modèle pydantic optionnel appliqué au contenu.

        Returns:
            Table racine du fichier, ou instance du schema.
        """
        pass


class FileConfigLoader(ConfigLoader):
    """Chargeur de fichiers TOML ou JSON, choisi par l'extension.

    Le contenu doit être une table (dict) à la racine. Tout contenu
    illisible ou invalide est signalé par ConfigurationError, l'erreur
    d'origine restant disponible dans __cause__.

    Attributes:
        READERS: Lecteur associé à chaque extension supportée.
    """

    READERS: Dict[str, Callable[[Path], Any]] = {
        ".toml": _read_toml,
        ".json": _read_json,
    }

    def load(
        self,
        config_path: Union[str, Path],
        schema: Optional[Type[BaseModel]] = None
    ) -> Union[Dict[str, Any], BaseModel]:
        """Charge un fichier de configuration TOML ou JSON.

        Raises:
            FileNotFoundError: Si le fichier n'existe pas.
            ValueError: Si l'extension n'est pas supportée.
            TypeError: Si schema n'est pas un BaseModel.
            ConfigurationError: Si le contenu est illisible, n'est pas
                une table, ou ne respecte pas le schema.
        """
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(
                f"Fichier de configuration non trouvé: {path}"
            )

        reader = self.READERS.get(path.suffix.lower())
        if reader is None:
            supported = ", ".join(sorted(self.READERS))
            raise ValueError(
                f"Extension non supportée: {path.suffix}. "
                f"Extensions acceptées : {supported}"
            )
        if schema is not None and not (
            isinstance(schema, type) and issubclass(schema, BaseModel)
        ):
            raise TypeError(
                f"Le schema doit être une sous-classe de "
                f"pydantic.BaseModel, reçu: {schema}"
            )

        try:
            data = reader(path)
        except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"{path} illisible : {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"{path} : une table est attendue à la racine, "
                f"reçu {type(data).__name__}"
            )

        if schema is None:
            return data
        try:
            return schema.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"{path} invalide : {e}") from e
