"""Unit tests for delimited-list and key/value parsing."""

from __future__ import annotations

import pytest

from paimon_sink.utils.list_parsing import parse_kv_pairs, parse_list


def test_parse_list_trims_and_preserves_order() -> None:
    """Tokens keep split order with surrounding whitespace removed."""
    assert parse_list("a,b, c") == ["a", "b", "c"]
    assert parse_list("  z , y,x  ", ",") == ["z", "y", "x"]


@pytest.mark.parametrize("value", [None, ""])
def test_parse_list_empty_input_returns_empty_list(value: str | None) -> None:
    """Null or empty input short-circuits to an empty list."""
    assert parse_list(value, ",") == []


def test_parse_list_keeps_duplicates_and_empty_tokens() -> None:
    """Split artifacts are not filtered or deduplicated."""
    assert parse_list("id,,id", ",") == ["id", "", "id"]
    assert parse_list(" ", ",") == [""]


def test_parse_list_uses_literal_delimiter() -> None:
    """Delimiters are matched literally."""
    assert parse_list("a|b | c", "|") == ["a", "b", "c"]
    assert parse_list("a.b", ".") == ["a", "b"]


def test_parse_list_is_deterministic() -> None:
    """Repeated calls return equal, independent lists."""
    first = parse_list("dt,hh")
    second = parse_list("dt,hh")
    assert first == second
    assert first is not second


def test_parse_list_rejects_empty_delimiter() -> None:
    """An empty delimiter is a programming error."""
    with pytest.raises(ValueError, match="delimiter"):
        parse_list("a,b", "")


@pytest.mark.parametrize("value", [None, ""])
def test_parse_list_empty_input_ignores_delimiter(value: str | None) -> None:
    """Empty input short-circuits before the delimiter is checked."""
    assert parse_list(value, "") == []


def test_parse_kv_pairs() -> None:
    """Entries split on the first equals sign and later keys win."""
    parsed = parse_kv_pairs(["bucket=4", " file.format =orc", "bucket=8", "expr=a=b"])
    assert parsed == {"bucket": "8", "file.format": "orc", "expr": "a=b"}


def test_parse_kv_pairs_rejects_malformed_entries() -> None:
    """Entries without a key or separator are rejected."""
    with pytest.raises(ValueError, match="Expected key=value"):
        parse_kv_pairs(["bucket"])
    with pytest.raises(ValueError, match="Expected key=value"):
        parse_kv_pairs(["=4"])
