"""Paimon sink configuration: option registry, readonly sources, and resolver."""

from paimon_sink.config.errors import (
    MissingRequiredFieldError,
    SinkConfigError,
    TypeCoercionError,
)
from paimon_sink.config.options import (
    BASE_OPTIONS,
    SINK_OPTION_RULE,
    SINK_OPTIONS,
    Option,
    OptionRegistry,
    OptionRule,
)
from paimon_sink.config.readonly import MappingReadonlyConfig, ReadonlyConfig
from paimon_sink.config.save_modes import DataSaveMode, SchemaSaveMode
from paimon_sink.config.sink import PaimonSinkConfig, SinkIdentity, resolve_sink_config

__all__ = [
    "BASE_OPTIONS",
    "SINK_OPTIONS",
    "SINK_OPTION_RULE",
    "DataSaveMode",
    "MappingReadonlyConfig",
    "MissingRequiredFieldError",
    "Option",
    "OptionRegistry",
    "OptionRule",
    "PaimonSinkConfig",
    "ReadonlyConfig",
    "SchemaSaveMode",
    "SinkConfigError",
    "SinkIdentity",
    "TypeCoercionError",
    "resolve_sink_config",
]
