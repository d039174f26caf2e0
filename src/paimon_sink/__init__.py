"""Typed configuration resolution for Paimon table sinks."""

from paimon_sink.config import (
    DataSaveMode,
    MappingReadonlyConfig,
    MissingRequiredFieldError,
    PaimonSinkConfig,
    ReadonlyConfig,
    SchemaSaveMode,
    SinkConfigError,
    SinkIdentity,
    TypeCoercionError,
    resolve_sink_config,
)
from paimon_sink.utils.list_parsing import parse_list

__version__ = "0.1.0"

__all__ = [
    "DataSaveMode",
    "MappingReadonlyConfig",
    "MissingRequiredFieldError",
    "PaimonSinkConfig",
    "ReadonlyConfig",
    "SchemaSaveMode",
    "SinkConfigError",
    "SinkIdentity",
    "TypeCoercionError",
    "parse_list",
    "resolve_sink_config",
]
