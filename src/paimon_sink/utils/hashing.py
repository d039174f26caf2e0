"""Explicit hash utilities with stable serialization semantics."""

from __future__ import annotations

import hashlib

from paimon_sink.serde_msgspec import JSON_ENCODER_SORTED, to_builtins


def hash_sha256_hex(payload: bytes) -> str:
    """Return SHA-256 hex digest.

    Parameters
    ----------
    payload
        Raw bytes to hash.

    Returns:
    -------
    str
        Hex digest string.
    """
    return hashlib.sha256(payload).hexdigest()


def hash_json_canonical(payload: object, *, str_keys: bool = False) -> str:
    """Return SHA-256 hexdigest using JSON_ENCODER_SORTED.

    Parameters
    ----------
    payload
        Payload to encode.
    str_keys
        Whether to coerce mapping keys to strings.

    Returns:
    -------
    str
        SHA-256 hexdigest.
    """
    buffer = bytearray()
    JSON_ENCODER_SORTED.encode_into(to_builtins(payload, str_keys=str_keys), buffer)
    return hash_sha256_hex(bytes(buffer))


__all__ = ["hash_json_canonical", "hash_sha256_hex"]
