"""Resolved Paimon sink configuration consumed by the write path."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeVar

from paimon_sink.config.errors import MissingRequiredFieldError
from paimon_sink.config.options import (
    CATALOG_NAME,
    DATA_SAVE_MODE,
    DATABASE,
    HDFS_SITE_PATH,
    PARTITION_KEYS,
    PRIMARY_KEYS,
    SCHEMA_SAVE_MODE,
    SINK_OPTION_RULE,
    TABLE,
    WAREHOUSE,
    WRITE_PROPS,
    Option,
    OptionRule,
)
from paimon_sink.config.readonly import ReadonlyConfig
from paimon_sink.config.save_modes import DataSaveMode, SchemaSaveMode
from paimon_sink.core.config_base import FingerprintableConfig, config_fingerprint
from paimon_sink.serde_msgspec import to_builtins
from paimon_sink.utils.list_parsing import parse_list

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

_LIST_DELIMITER = ","
_FINGERPRINT_VERSION = 1

# Option key -> SinkIdentity field name.
_IDENTITY_FIELDS: Mapping[str, str] = MappingProxyType(
    {
        CATALOG_NAME.key: "catalog_name",
        WAREHOUSE.key: "warehouse",
        DATABASE.key: "namespace",
        TABLE.key: "table",
    }
)


@dataclass(frozen=True)
class SinkIdentity:
    """Catalog, warehouse, and table coordinates shared by Paimon connectors."""

    catalog_name: str
    warehouse: str
    namespace: str
    table: str
    hdfs_site_path: str | None = None

    @property
    def table_identifier(self) -> str:
        """Return the ``namespace.table`` identifier.

        Returns
        -------
        str
            Fully qualified table identifier within the catalog.
        """
        return f"{self.namespace}.{self.table}"


@dataclass(frozen=True)
class PaimonSinkConfig(FingerprintableConfig):
    """Validated, immutable configuration for one Paimon sink instance.

    Build instances with :func:`resolve_sink_config` (or
    :meth:`PaimonSinkConfig.from_config`). List and mapping fields are always
    present, possibly empty, so the write path never checks for ``None``.
    """

    identity: SinkIdentity
    schema_save_mode: SchemaSaveMode = SchemaSaveMode.CREATE_SCHEMA_WHEN_NOT_EXIST
    data_save_mode: DataSaveMode = DataSaveMode.APPEND_DATA
    primary_keys: tuple[str, ...] = ()
    partition_keys: tuple[str, ...] = ()
    write_props: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        object.__setattr__(self, "primary_keys", tuple(self.primary_keys))
        object.__setattr__(self, "partition_keys", tuple(self.partition_keys))
        object.__setattr__(self, "write_props", MappingProxyType(dict(self.write_props)))

    def __hash__(self) -> int:
        return hash(
            (
                self.identity,
                self.schema_save_mode,
                self.data_save_mode,
                self.primary_keys,
                self.partition_keys,
                tuple(sorted(self.write_props.items())),
            )
        )

    @classmethod
    def from_config(cls, source: ReadonlyConfig) -> PaimonSinkConfig:
        """Resolve a sink configuration from a readonly source.

        Returns
        -------
        PaimonSinkConfig
            Resolved configuration.
        """
        return resolve_sink_config(source)

    @property
    def catalog_name(self) -> str:
        """Return the catalog name.

        Returns
        -------
        str
            Catalog the sink writes through.
        """
        return self.identity.catalog_name

    @property
    def warehouse(self) -> str:
        """Return the warehouse location.

        Returns
        -------
        str
            Warehouse root path or URI.
        """
        return self.identity.warehouse

    @property
    def namespace(self) -> str:
        """Return the database the table lives in.

        Returns
        -------
        str
            Namespace (database) name.
        """
        return self.identity.namespace

    @property
    def table(self) -> str:
        """Return the target table name.

        Returns
        -------
        str
            Table name within the namespace.
        """
        return self.identity.table

    @property
    def hdfs_site_path(self) -> str | None:
        """Return the hdfs-site.xml path, when configured.

        Returns
        -------
        str | None
            Path to hdfs-site.xml, or ``None``.
        """
        return self.identity.hdfs_site_path

    @property
    def table_identifier(self) -> str:
        """Return the ``namespace.table`` identifier.

        Returns
        -------
        str
            Fully qualified table identifier within the catalog.
        """
        return self.identity.table_identifier

    def to_payload(self) -> dict[str, object]:
        """Return a builtin-typed view for diagnostics and logging.

        Returns
        -------
        dict[str, object]
            Mapping of resolved values with enums rendered as strings.
        """
        return {
            "catalog_name": self.catalog_name,
            "warehouse": self.warehouse,
            "namespace": self.namespace,
            "table": self.table,
            "hdfs_site_path": self.hdfs_site_path,
            "schema_save_mode": self.schema_save_mode.value,
            "data_save_mode": self.data_save_mode.value,
            "primary_keys": list(self.primary_keys),
            "partition_keys": list(self.partition_keys),
            "write_props": dict(self.write_props),
        }

    def fingerprint_payload(self) -> Mapping[str, object]:
        """Return fingerprint payload for the resolved sink configuration.

        Returns
        -------
        Mapping[str, object]
            Payload describing the resolved configuration.
        """
        payload = self.to_payload()
        payload["write_props"] = sorted(self.write_props.items())
        payload["version"] = _FINGERPRINT_VERSION
        return to_builtins(payload)  # type: ignore[return-value]

    def fingerprint(self) -> str:
        """Return fingerprint for the resolved sink configuration.

        Returns
        -------
        str
            Deterministic fingerprint for the configuration.
        """
        return config_fingerprint(self.fingerprint_payload())


def _require(source: ReadonlyConfig, option: Option[T]) -> T:
    value = source.get(option)
    if value is None:
        field_name = _IDENTITY_FIELDS.get(option.key, option.key)
        raise MissingRequiredFieldError(field_name, key=option.key)
    return value


def resolve_sink_config(
    source: ReadonlyConfig,
    *,
    rule: OptionRule = SINK_OPTION_RULE,
) -> PaimonSinkConfig:
    """Resolve and validate a Paimon sink configuration.

    Required identity options are checked in rule order and the first missing
    one is reported. Save modes fall back to their declared defaults, list
    options are split on commas, and write properties pass through untouched.

    Parameters
    ----------
    source
        Typed configuration source.
    rule
        Option rule naming the required identity options.

    Returns
    -------
    PaimonSinkConfig
        Fully populated, immutable configuration.

    Raises
    ------
    MissingRequiredFieldError
        Raised when a required identity option resolves to ``None``.
    """
    for option in rule.required:
        _require(source, option)
    identity = SinkIdentity(
        catalog_name=_require(source, CATALOG_NAME),
        warehouse=_require(source, WAREHOUSE),
        namespace=_require(source, DATABASE),
        table=_require(source, TABLE),
        hdfs_site_path=source.get(HDFS_SITE_PATH),
    )
    schema_save_mode = source.get(SCHEMA_SAVE_MODE) or SchemaSaveMode.CREATE_SCHEMA_WHEN_NOT_EXIST
    data_save_mode = source.get(DATA_SAVE_MODE) or DataSaveMode.APPEND_DATA
    write_props = source.get(WRITE_PROPS)
    config = PaimonSinkConfig(
        identity=identity,
        schema_save_mode=schema_save_mode,
        data_save_mode=data_save_mode,
        primary_keys=tuple(parse_list(source.get(PRIMARY_KEYS), _LIST_DELIMITER)),
        partition_keys=tuple(parse_list(source.get(PARTITION_KEYS), _LIST_DELIMITER)),
        write_props=write_props if write_props is not None else {},
    )
    if _LOGGER.isEnabledFor(logging.DEBUG):
        _LOGGER.debug(
            "Resolved Paimon sink config for %s (fingerprint=%s)",
            config.table_identifier,
            config.fingerprint(),
        )
    return config


__all__ = ["PaimonSinkConfig", "SinkIdentity", "resolve_sink_config"]
