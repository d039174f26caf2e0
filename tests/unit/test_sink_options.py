"""Unit tests for the sink option registry."""

from __future__ import annotations

from types import MappingProxyType

import msgspec
import pytest

from paimon_sink.config.options import (
    BASE_OPTIONS,
    DATA_SAVE_MODE,
    PRIMARY_KEYS,
    SCHEMA_SAVE_MODE,
    SINK_OPTION_RULE,
    SINK_OPTIONS,
    WRITE_PROPS,
    OptionKind,
    OptionRegistry,
    enum_option,
    map_option,
    string_option,
)
from paimon_sink.config.save_modes import DataSaveMode, SchemaSaveMode


class TestOptionDescriptors:
    """Option descriptor behavior."""

    def test_declared_defaults(self) -> None:
        """Save modes and write props declare defaults; key lists do not."""
        assert SCHEMA_SAVE_MODE.default_value() is SchemaSaveMode.CREATE_SCHEMA_WHEN_NOT_EXIST
        assert DATA_SAVE_MODE.default_value() is DataSaveMode.APPEND_DATA
        assert dict(WRITE_PROPS.default_value() or {}) == {}
        assert not PRIMARY_KEYS.has_default
        assert PRIMARY_KEYS.default_value() is None

    def test_type_names(self) -> None:
        """Enum options report the enum class name."""
        assert SCHEMA_SAVE_MODE.type_name == "SchemaSaveMode"
        assert PRIMARY_KEYS.type_name == "string"
        assert WRITE_PROPS.kind is OptionKind.MAP

    def test_map_default_is_read_only_copy(self) -> None:
        """Map defaults are copied and frozen."""
        source = {"bucket": "2"}
        option = map_option("props", default=source)
        source["bucket"] = "3"
        default = option.default_value()
        assert isinstance(default, MappingProxyType)
        assert default == {"bucket": "2"}
        with pytest.raises(TypeError):
            default["bucket"] = "4"  # type: ignore[index]

    def test_enum_option_rejects_foreign_default(self) -> None:
        """Enum defaults must belong to the declared enum."""
        with pytest.raises(TypeError, match="SchemaSaveMode"):
            enum_option("mode", SchemaSaveMode, default=DataSaveMode.APPEND_DATA)

    def test_string_option_without_default(self) -> None:
        """Options default to the msgspec NODEFAULT sentinel."""
        option = string_option("x")
        assert option.default is msgspec.NODEFAULT
        assert not option.has_default


class TestOptionRegistry:
    """Registry lookup and immutability."""

    def test_sink_registry_keys_in_declaration_order(self) -> None:
        """Sink registry lists base keys followed by sink keys."""
        assert list(SINK_OPTIONS) == [
            "catalog_name",
            "warehouse",
            "database",
            "table",
            "hdfs_site_path",
            "schema_save_mode",
            "data_save_mode",
            "paimon.table.primary-keys",
            "paimon.table.partition-keys",
            "paimon.table.write-props",
        ]
        assert len(BASE_OPTIONS) == 5

    def test_lookup(self) -> None:
        """Lookups return the declared option or None."""
        assert SINK_OPTIONS.get("schema_save_mode") is SCHEMA_SAVE_MODE
        assert SINK_OPTIONS.get("bucket") is None
        assert "paimon.table.write-props" in SINK_OPTIONS
        assert "bucket" not in SINK_OPTIONS
        with pytest.raises(KeyError, match="bucket"):
            SINK_OPTIONS.require("bucket")

    def test_duplicate_keys_rejected(self) -> None:
        """Keys must be unique within a registry."""
        with pytest.raises(ValueError, match="declared more than once"):
            OptionRegistry.of(string_option("a"), string_option("a"))
        with pytest.raises(ValueError, match="declared more than once"):
            BASE_OPTIONS.merged(OptionRegistry.of(string_option("table")))

    def test_registry_is_frozen(self) -> None:
        """Registries cannot be reassigned after construction."""
        with pytest.raises(AttributeError):
            SINK_OPTIONS._entries = ()  # type: ignore[misc]

    def test_describe_marks_required_options(self) -> None:
        """Documentation rows carry required flags and defaults."""
        rows = {row.key: row for row in SINK_OPTIONS.describe()}
        assert rows["catalog_name"].required
        assert rows["table"].required
        assert not rows["hdfs_site_path"].required
        assert rows["data_save_mode"].default is DataSaveMode.APPEND_DATA
        assert rows["paimon.table.partition-keys"].default is None


def test_sink_option_rule() -> None:
    """The option rule requires the four identity keys in order."""
    assert [option.key for option in SINK_OPTION_RULE.required] == [
        "catalog_name",
        "warehouse",
        "database",
        "table",
    ]
    assert SINK_OPTION_RULE.is_required("database")
    assert not SINK_OPTION_RULE.is_required("paimon.table.primary-keys")
    assert list(SINK_OPTION_RULE.registry()) == list(SINK_OPTIONS)
