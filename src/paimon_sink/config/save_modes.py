"""Save-mode policies applied when the sink initializes against a table."""

from __future__ import annotations

from enum import StrEnum


class SchemaSaveMode(StrEnum):
    """How the sink treats the target schema at startup."""

    RECREATE_SCHEMA = "RECREATE_SCHEMA"
    CREATE_SCHEMA_WHEN_NOT_EXIST = "CREATE_SCHEMA_WHEN_NOT_EXIST"
    ERROR_WHEN_SCHEMA_NOT_EXIST = "ERROR_WHEN_SCHEMA_NOT_EXIST"
    IGNORE = "IGNORE"


class DataSaveMode(StrEnum):
    """How the sink treats existing table data at startup."""

    DROP_DATA = "DROP_DATA"
    APPEND_DATA = "APPEND_DATA"
    CUSTOM_PROCESSING = "CUSTOM_PROCESSING"
    ERROR_WHEN_DATA_EXISTS = "ERROR_WHEN_DATA_EXISTS"


__all__ = ["DataSaveMode", "SchemaSaveMode"]
