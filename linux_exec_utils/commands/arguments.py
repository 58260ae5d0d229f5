"""Contributeurs d'arguments pour la ligne de commande.

Un contributeur sait s'ajouter, sous la forme d'un ou plusieurs
éléments, à la commande d'un exécutable, puis retourne ce même
exécutable pour permettre le chaînage.

Example:
    Construction d'une commande rsync :

        from linux_exec_utils.commands import (
            ArgumentList,
            DefaultExecutable,
            FlagArgument,
            OptionArgument,
        )

        rsync = (
            DefaultExecutable("/usr/bin/rsync")
            .add_argument(FlagArgument("-av"))
            .add_argument(OptionArgument("--compress-level", "3"))
            .add_argument(OptionArgument.if_set("--exclude-from", None))
            .add_argument(ArgumentList(["/src/", "/dest/"]))
        )
        # Commande : ["/usr/bin/rsync", "-av", "--compress-level=3",
        #             "/src/", "/dest/"]
"""

from typing import (
    TYPE_CHECKING,
    Any,
    Iterable,
    List,
    Optional,
    Protocol,
    Union,
    runtime_checkable,
)

if TYPE_CHECKING:
    from linux_exec_utils.commands.base import Executable


@runtime_checkable
class ArgumentContributor(Protocol):
    """Capacité d'ajouter des éléments à la commande d'un exécutable."""

    def to_argument(self, executable: "Executable") -> "Executable":
        """Ajoute ses éléments à la commande de l'exécutable.

        Args:
            executable: Exécutable cible.

        Returns:
            Le même exécutable.
        """
        ...


def require_contributor(argument: Any) -> ArgumentContributor:
    """Vérifie qu'un argument non textuel est un contributeur.

    Raises:
        TypeError: Si l'objet ne fournit pas to_argument().
    """
    if not isinstance(argument, ArgumentContributor):
        raise TypeError(
            f"Argument non supporté : {type(argument).__name__} "
            "(chaîne ou contributeur attendu)"
        )
    return argument


class StringArgument:
    """Élément littéral unique."""

    def __init__(self, value: str) -> None:
        self.value = value

    def to_argument(self, executable: "Executable") -> "Executable":
        return executable.add_argument(self.value)

    def __repr__(self) -> str:
        return f"StringArgument({self.value!r})"


class FlagArgument:
    """Flag simple (ex: '--stats')."""

    def __init__(self, flag: str) -> None:
        """Initialise le flag.

        Raises:
            ValueError: Si le flag est vide.
        """
        if not flag or not flag.strip():
            raise ValueError("Le flag est requis.")
        self.flag = flag

    def to_argument(self, executable: "Executable") -> "Executable":
        return executable.add_argument(self.flag)

    def __repr__(self) -> str:
        return f"FlagArgument({self.flag!r})"


class OptionArgument:
    """Option clé/valeur.

    Par défaut l'option produit un seul élément 'clé=valeur'. Avec
    separator=None, elle produit deux éléments : la clé puis la valeur.
    """

    def __init__(
        self,
        key: str,
        value: str,
        separator: Optional[str] = "=",
    ) -> None:
        """Initialise l'option.

        Args:
            key: Clé de l'option (ex: '--compression').
            value: Valeur de l'option (ex: 'lz4').
            separator: Séparateur entre clé et valeur, ou None pour
                deux éléments distincts.

        Raises:
            ValueError: Si la clé est vide.
        """
        if not key or not key.strip():
            raise ValueError("La clé de l'option est requise.")
        self.key = key
        self.value = value
        self.separator = separator

    @classmethod
    def if_set(
        cls,
        key: str,
        value: Optional[str],
        condition: bool = True,
        separator: Optional[str] = "=",
    ) -> "ConditionalArgument":
        """Crée une option ajoutée seulement si elle est renseignée.

        L'option est ignorée si condition est False ou si value
        est None.

        Args:
            key: Clé de l'option.
            value: Valeur de l'option (peut être None).
            condition: Condition d'ajout (défaut: True).
            separator: Séparateur entre clé et valeur.

        Returns:
            Contributeur conditionnel.
        """
        if value is None:
            return ConditionalArgument(ArgumentList([]), False)
        return ConditionalArgument(
            cls(key, value, separator=separator), condition
        )

    def to_argument(self, executable: "Executable") -> "Executable":
        if self.separator is None:
            executable.add_argument(self.key)
            return executable.add_argument(self.value)
        return executable.add_argument(
            f"{self.key}{self.separator}{self.value}"
        )

    def __repr__(self) -> str:
        return f"OptionArgument({self.key!r}, {self.value!r})"


class ConditionalArgument:
    """Contributeur appliqué seulement si la condition est vraie."""

    def __init__(
        self,
        argument: Union[str, ArgumentContributor],
        condition: bool,
    ) -> None:
        self.argument = argument
        self.condition = condition

    def to_argument(self, executable: "Executable") -> "Executable":
        if not self.condition:
            return executable
        return executable.add_argument(self.argument)


class ArgumentList:
    """Suite ordonnée de chaînes et de contributeurs."""

    def __init__(
        self, arguments: Iterable[Union[str, ArgumentContributor]]
    ) -> None:
        self.arguments: List[Union[str, ArgumentContributor]] = list(
            arguments
        )

    def to_argument(self, executable: "Executable") -> "Executable":
        for argument in self.arguments:
            executable.add_argument(argument)
        return executable

    def __len__(self) -> int:
        return len(self.arguments)
