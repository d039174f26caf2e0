"""Delimited-list and key/value parsing helpers."""

from __future__ import annotations

from collections.abc import Iterable

# -----------------------------------------------------------------------------
# List Parsing
# -----------------------------------------------------------------------------


def parse_list(value: str | None, delimiter: str = ",") -> list[str]:
    """Split a delimited string into trimmed tokens.

    Tokens keep their original order. Duplicates and empty tokens produced by
    the split are preserved; only a ``None`` or empty input yields ``[]``.

    Parameters
    ----------
    value
        Raw delimited string, or ``None``.
    delimiter
        Literal separator between tokens.

    Returns
    -------
    list[str]
        Parsed tokens with surrounding whitespace removed.

    Raises
    ------
    ValueError
        Raised when ``delimiter`` is empty and ``value`` is non-empty.
    """
    if not value:
        return []
    if not delimiter:
        msg = "List delimiter must be a non-empty string."
        raise ValueError(msg)
    return [item.strip() for item in value.split(delimiter)]


# -----------------------------------------------------------------------------
# Key/Value Parsing
# -----------------------------------------------------------------------------


def parse_kv_pairs(values: Iterable[str]) -> dict[str, str]:
    """Parse ``key=value`` entries into a mapping.

    Keys are stripped; values are kept verbatim after the first ``=``. Later
    entries win when a key repeats.

    Parameters
    ----------
    values
        Iterable of key=value strings.

    Returns
    -------
    dict[str, str]
        Parsed key/value mapping.

    Raises
    ------
    ValueError
        Raised when a value is not formatted as key=value.
    """
    parsed: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        key = key.strip()
        if not sep or not key:
            msg = f"Expected key=value, got {item!r}."
            raise ValueError(msg)
        parsed[key] = value
    return parsed


__all__ = ["parse_kv_pairs", "parse_list"]
