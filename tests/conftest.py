"""Shared pytest fixtures for sink configuration tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def identity_options() -> dict[str, object]:
    """Return the minimal raw options accepted by the sink.

    Returns
    -------
    dict[str, object]
        Raw options with only the required identity keys.
    """
    return {
        "catalog_name": "paimon",
        "warehouse": "hdfs:///tmp/paimon",
        "database": "seatunnel",
        "table": "orders",
    }


@pytest.fixture
def full_sink_options(identity_options: dict[str, object]) -> dict[str, object]:
    """Return raw options setting every recognised sink key.

    Returns
    -------
    dict[str, object]
        Raw options for a fully specified sink.
    """
    return {
        **identity_options,
        "hdfs_site_path": "/etc/hadoop/conf/hdfs-site.xml",
        "schema_save_mode": "RECREATE_SCHEMA",
        "data_save_mode": "DROP_DATA",
        "paimon.table.primary-keys": "order_id, dt",
        "paimon.table.partition-keys": "dt",
        "paimon.table.write-props": {"bucket": 2, "file.format": "orc"},
    }
