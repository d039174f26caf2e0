"""Shared utilities for the Paimon sink configuration core."""

from paimon_sink.utils.list_parsing import parse_kv_pairs, parse_list

__all__ = ["parse_kv_pairs", "parse_list"]
