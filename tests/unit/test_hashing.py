"""Unit tests for canonical hashing helpers."""

from __future__ import annotations

import hashlib
from types import MappingProxyType

from paimon_sink.config.save_modes import DataSaveMode
from paimon_sink.utils.hashing import hash_json_canonical, hash_sha256_hex


def test_hash_sha256_hex_is_full_digest() -> None:
    """Digests are the full 64-character SHA-256 hex string."""
    digest = hash_sha256_hex(b"paimon")
    assert digest == hashlib.sha256(b"paimon").hexdigest()
    assert len(digest) == 64


def test_hash_json_canonical_ignores_key_order() -> None:
    """Mappings with the same items hash identically."""
    assert hash_json_canonical({"b": 1, "a": 2}) == hash_json_canonical({"a": 2, "b": 1})
    assert hash_json_canonical({"a": 1}) != hash_json_canonical({"a": 2})


def test_hash_json_canonical_encodes_enums_and_proxies() -> None:
    """Enums hash by value and read-only mappings hash like dicts."""
    assert hash_json_canonical({"mode": DataSaveMode.DROP_DATA}) == hash_json_canonical(
        {"mode": "DROP_DATA"}
    )
    assert hash_json_canonical(MappingProxyType({"bucket": "2"})) == hash_json_canonical(
        {"bucket": "2"}
    )
