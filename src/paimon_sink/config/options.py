"""Option descriptors and the registry of recognised Paimon sink keys.

Every key the sink understands is declared here exactly once. The resolver,
the readonly config source, and documentation tooling all read from these
module-level registries, which are built at import time and never mutated.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum, StrEnum
from types import MappingProxyType
from typing import Generic, TypeVar

import msgspec

from paimon_sink.config.save_modes import DataSaveMode, SchemaSaveMode

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


class OptionKind(StrEnum):
    """Declared value type of an option."""

    STRING = "string"
    ENUM = "enum"
    MAP = "map"


@dataclass(frozen=True)
class Option(Generic[T]):
    """Immutable descriptor for a single configuration key."""

    key: str
    kind: OptionKind
    default: T | object = msgspec.NODEFAULT
    description: str = ""
    enum_type: type[Enum] | None = None

    @property
    def has_default(self) -> bool:
        """Return whether a default value is declared.

        Returns
        -------
        bool
            ``True`` when the option declares a default.
        """
        return self.default is not msgspec.NODEFAULT

    def default_value(self) -> T | None:
        """Return the declared default, or ``None`` when there is none.

        Returns
        -------
        T | None
            Declared default value.
        """
        if not self.has_default:
            return None
        return self.default  # type: ignore[return-value]

    @property
    def type_name(self) -> str:
        """Return a human-readable type name for diagnostics.

        Returns
        -------
        str
            Enum class name for enum options, otherwise the option kind.
        """
        if self.kind is OptionKind.ENUM and self.enum_type is not None:
            return self.enum_type.__name__
        return self.kind.value


def string_option(
    key: str,
    *,
    default: str | object = msgspec.NODEFAULT,
    description: str = "",
) -> Option[str]:
    """Declare a string-typed option.

    Returns
    -------
    Option[str]
        Option descriptor.
    """
    return Option(key=key, kind=OptionKind.STRING, default=default, description=description)


def enum_option(
    key: str,
    enum_type: type[E],
    *,
    default: E | object = msgspec.NODEFAULT,
    description: str = "",
) -> Option[E]:
    """Declare an enum-typed option.

    Parameters
    ----------
    key
        Configuration key.
    enum_type
        Enum class the raw value is coerced into.
    default
        Optional default member.
    description
        Human-readable description.

    Returns
    -------
    Option[E]
        Option descriptor.

    Raises
    ------
    TypeError
        Raised when the default is not a member of ``enum_type``.
    """
    if default is not msgspec.NODEFAULT and not isinstance(default, enum_type):
        msg = f"Default for {key!r} must be a {enum_type.__name__} member."
        raise TypeError(msg)
    return Option(
        key=key,
        kind=OptionKind.ENUM,
        default=default,
        description=description,
        enum_type=enum_type,
    )


def map_option(
    key: str,
    *,
    default: Mapping[str, str] | object = msgspec.NODEFAULT,
    description: str = "",
) -> Option[Mapping[str, str]]:
    """Declare a string-to-string mapping option.

    The default, when given, is copied into a read-only mapping so lookups can
    never mutate the shared descriptor.

    Returns
    -------
    Option[Mapping[str, str]]
        Option descriptor.
    """
    if isinstance(default, Mapping):
        default = MappingProxyType(dict(default))
    return Option(key=key, kind=OptionKind.MAP, default=default, description=description)


@dataclass(frozen=True)
class OptionDescription:
    """Documentation row describing one option."""

    key: str
    type_name: str
    default: object
    description: str
    required: bool


@dataclass(frozen=True)
class OptionRegistry:
    """Frozen, ordered collection of options keyed by ``Option.key``."""

    _entries: tuple[Option[object], ...] = ()
    _required: frozenset[str] = field(default=frozenset())

    def __post_init__(self) -> None:
        """Reject duplicate option keys.

        Raises
        ------
        ValueError
            Raised when two options share a key.
        """
        seen: set[str] = set()
        for option in self._entries:
            if option.key in seen:
                msg = f"Option key {option.key!r} declared more than once."
                raise ValueError(msg)
            seen.add(option.key)

    @classmethod
    def of(cls, *options: Option[object], required: tuple[str, ...] = ()) -> OptionRegistry:
        """Create a registry from options in declaration order.

        Returns
        -------
        OptionRegistry
            Frozen registry.
        """
        return cls(tuple(options), frozenset(required))

    def get(self, key: str) -> Option[object] | None:
        """Retrieve an option by key.

        Parameters
        ----------
        key
            Key to look up.

        Returns
        -------
        Option[object] | None
            Registered option, or ``None`` when missing.
        """
        for option in self._entries:
            if option.key == key:
                return option
        return None

    def require(self, key: str) -> Option[object]:
        """Retrieve an option by key, failing when it is unknown.

        Returns
        -------
        Option[object]
            Registered option.

        Raises
        ------
        KeyError
            Raised when the key is not registered.
        """
        option = self.get(key)
        if option is None:
            msg = f"Unknown option key {key!r}."
            raise KeyError(msg)
        return option

    def __contains__(self, key: object) -> bool:
        """Check whether a key is registered.

        Returns
        -------
        bool
            ``True`` if the key is registered.
        """
        return any(option.key == key for option in self._entries)

    def __iter__(self) -> Iterator[str]:
        """Iterate over registered keys in declaration order.

        Returns
        -------
        Iterator[str]
            Iterator over option keys.
        """
        return (option.key for option in self._entries)

    def __len__(self) -> int:
        """Return the count of registered options.

        Returns
        -------
        int
            Number of registered options.
        """
        return len(self._entries)

    def options(self) -> tuple[Option[object], ...]:
        """Return registered options in declaration order.

        Returns
        -------
        tuple[Option[object], ...]
            Registered options.
        """
        return self._entries

    def merged(self, other: OptionRegistry) -> OptionRegistry:
        """Return a new registry holding this registry's options then ``other``'s.

        Returns
        -------
        OptionRegistry
            Combined registry; duplicate keys are rejected.
        """
        return OptionRegistry(self._entries + other.options(), self._required | other._required)

    def describe(self) -> tuple[OptionDescription, ...]:
        """Return documentation rows for every registered option.

        Returns
        -------
        tuple[OptionDescription, ...]
            One row per option in declaration order.
        """
        return tuple(
            OptionDescription(
                key=option.key,
                type_name=option.type_name,
                default=option.default_value(),
                description=option.description,
                required=option.key in self._required,
            )
            for option in self._entries
        )


@dataclass(frozen=True)
class OptionRule:
    """Required and optional options accepted by a connector factory."""

    required: tuple[Option[object], ...]
    optional: tuple[Option[object], ...] = ()

    def is_required(self, key: str) -> bool:
        """Return whether ``key`` is a required option.

        Returns
        -------
        bool
            ``True`` for required keys.
        """
        return any(option.key == key for option in self.required)

    def registry(self) -> OptionRegistry:
        """Return a registry of every option named by the rule.

        Returns
        -------
        OptionRegistry
            Registry with required options first.
        """
        return OptionRegistry.of(
            *self.required,
            *self.optional,
            required=tuple(option.key for option in self.required),
        )


# -----------------------------------------------------------------------------
# Identity options shared by Paimon connectors
# -----------------------------------------------------------------------------

CATALOG_NAME = string_option("catalog_name", description="The Paimon catalog name")
WAREHOUSE = string_option("warehouse", description="The warehouse path of Paimon")
DATABASE = string_option("database", description="The database (namespace) to write into")
TABLE = string_option("table", description="The table to write into")
HDFS_SITE_PATH = string_option("hdfs_site_path", description="The file path of hdfs-site.xml")

# -----------------------------------------------------------------------------
# Sink options
# -----------------------------------------------------------------------------

SCHEMA_SAVE_MODE = enum_option(
    "schema_save_mode",
    SchemaSaveMode,
    default=SchemaSaveMode.CREATE_SCHEMA_WHEN_NOT_EXIST,
    description="schema_save_mode",
)
DATA_SAVE_MODE = enum_option(
    "data_save_mode",
    DataSaveMode,
    default=DataSaveMode.APPEND_DATA,
    description="data_save_mode",
)
PRIMARY_KEYS = string_option(
    "paimon.table.primary-keys",
    description=(
        "Default comma-separated list of columns that identify a row in tables (primary key)"
    ),
)
PARTITION_KEYS = string_option(
    "paimon.table.partition-keys",
    description="Default comma-separated list of partition fields to use when creating tables.",
)
WRITE_PROPS = map_option(
    "paimon.table.write-props",
    default={},
    description=(
        "Properties passed through to paimon table initialization, "
        "such as 'file.format', 'bucket'"
    ),
)

SINK_OPTION_RULE = OptionRule(
    required=(CATALOG_NAME, WAREHOUSE, DATABASE, TABLE),
    optional=(
        HDFS_SITE_PATH,
        SCHEMA_SAVE_MODE,
        DATA_SAVE_MODE,
        PRIMARY_KEYS,
        PARTITION_KEYS,
        WRITE_PROPS,
    ),
)

BASE_OPTIONS = OptionRegistry.of(
    CATALOG_NAME,
    WAREHOUSE,
    DATABASE,
    TABLE,
    HDFS_SITE_PATH,
    required=("catalog_name", "warehouse", "database", "table"),
)
SINK_OPTIONS = BASE_OPTIONS.merged(
    OptionRegistry.of(
        SCHEMA_SAVE_MODE,
        DATA_SAVE_MODE,
        PRIMARY_KEYS,
        PARTITION_KEYS,
        WRITE_PROPS,
    )
)


__all__ = [
    "BASE_OPTIONS",
    "CATALOG_NAME",
    "DATABASE",
    "DATA_SAVE_MODE",
    "HDFS_SITE_PATH",
    "PARTITION_KEYS",
    "PRIMARY_KEYS",
    "SCHEMA_SAVE_MODE",
    "SINK_OPTIONS",
    "SINK_OPTION_RULE",
    "TABLE",
    "WAREHOUSE",
    "WRITE_PROPS",
    "Option",
    "OptionDescription",
    "OptionKind",
    "OptionRegistry",
    "OptionRule",
    "enum_option",
    "map_option",
    "string_option",
]
