"""Read-only, typed configuration sources."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Protocol, TypeVar, runtime_checkable

import msgspec

from paimon_sink.config.errors import TypeCoercionError
from paimon_sink.config.options import Option, OptionKind
from paimon_sink.serde_msgspec import convert, validation_error_payload
from paimon_sink.utils.list_parsing import parse_kv_pairs
from paimon_sink.utils.validation import ensure_str_sequence

_LOGGER = logging.getLogger(__name__)

_MISSING = object()

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


@runtime_checkable
class ReadonlyConfig(Protocol):
    """Typed key/value store consulted through option descriptors."""

    def get(self, option: Option[T]) -> T | None:
        """Return the stored value, the option default, or ``None``."""
        ...

    def contains(self, option: Option[object]) -> bool:
        """Return whether a value is explicitly stored for the option."""
        ...


def _freeze(value: object) -> object:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_freeze(item) for item in value)
    return value


class MappingReadonlyConfig:
    """ReadonlyConfig backed by a snapshot of a plain mapping.

    Keys are looked up verbatim first, then as a dotted path through nested
    mappings, so ``{"paimon": {"table": {"primary-keys": "id"}}}`` answers
    ``paimon.table.primary-keys``. An explicit ``None`` value counts as absent.
    Nested mappings and sequences are frozen when the source is built.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, object] | None = None) -> None:
        self._values: Mapping[str, object] = _freeze(values or {})  # type: ignore[assignment]

    @property
    def values(self) -> Mapping[str, object]:
        """Return the read-only snapshot backing this source.

        Returns
        -------
        Mapping[str, object]
            Raw configuration values.
        """
        return self._values

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._values)!r})"

    def contains(self, option: Option[object]) -> bool:
        """Return whether a non-null value is stored for ``option``.

        Returns
        -------
        bool
            ``True`` when the source provides a value.
        """
        return self._lookup(option.key) is not _MISSING

    def get(self, option: Option[T]) -> T | None:
        """Return the coerced value for ``option``.

        Parameters
        ----------
        option
            Option descriptor to resolve.

        Returns
        -------
        T | None
            Coerced stored value, else the declared default, else ``None``.
        """
        raw = self._lookup(option.key)
        if raw is _MISSING:
            if option.has_default:
                _LOGGER.debug("Option %s not set; using default %r", option.key, option.default)
            return option.default_value()
        return coerce_option_value(option, raw)

    def _lookup(self, key: str) -> object:
        value = self._values.get(key, _MISSING)
        if value is _MISSING:
            value = _lookup_path(self._values, key.split("."))
        if value is None:
            return _MISSING
        return value


def _lookup_path(values: Mapping[str, object], parts: list[str]) -> object:
    current: object = values
    for part in parts:
        if not isinstance(current, Mapping):
            return _MISSING
        current = current.get(part, _MISSING)
        if current is _MISSING:
            return _MISSING
    return current


# -----------------------------------------------------------------------------
# Coercion
# -----------------------------------------------------------------------------


def coerce_option_value(option: Option[T], raw: object) -> T:
    """Coerce a raw configuration value into the option's declared type.

    Parameters
    ----------
    option
        Option descriptor that owns the value.
    raw
        Raw, non-null value read from the source.

    Returns
    -------
    T
        Value of the declared type.

    Raises
    ------
    TypeCoercionError
        Raised when the value cannot be coerced.
    """
    if option.kind is OptionKind.STRING:
        return _coerce_string(option.key, raw)  # type: ignore[return-value]
    if option.kind is OptionKind.ENUM:
        if option.enum_type is None:
            msg = f"Enum option {option.key!r} declares no enum type."
            raise TypeError(msg)
        return _coerce_enum(option.key, raw, option.enum_type)  # type: ignore[return-value]
    return _coerce_string_map(option.key, raw)  # type: ignore[return-value]


def _coerce_string(key: str, raw: object) -> str:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (bool, int, float)):
        return str(raw).lower() if isinstance(raw, bool) else str(raw)
    raise TypeCoercionError(key, raw, expected="string")


def _coerce_enum(key: str, raw: object, enum_type: type[E]) -> E:
    if isinstance(raw, enum_type):
        return raw
    try:
        return convert(raw, target_type=enum_type)
    except msgspec.ValidationError as exc:
        if isinstance(raw, str):
            wanted = raw.strip().lower()
            for member in enum_type:
                if member.name.lower() == wanted:
                    return member
                if isinstance(member.value, str) and member.value.lower() == wanted:
                    return member
        accepted = ", ".join(member.name for member in enum_type)
        detail = validation_error_payload(exc).get("summary", "")
        raise TypeCoercionError(
            key,
            raw,
            expected=f"one of [{accepted}]",
            detail=detail or None,
        ) from exc


def _coerce_string_map(key: str, raw: object) -> Mapping[str, str]:
    if isinstance(raw, Mapping):
        pairs: dict[object, object] = dict(raw)
    else:
        try:
            entries = ensure_str_sequence(raw, label=key)
            pairs = dict(parse_kv_pairs(entries))
        except (TypeError, ValueError) as exc:
            raise TypeCoercionError(
                key,
                raw,
                expected="a mapping of string to string",
                detail=str(exc),
            ) from exc
    stringified: dict[str, object] = {}
    for item_key, item_value in pairs.items():
        if isinstance(item_value, (Mapping, list, tuple, set, frozenset)) or item_value is None:
            raise TypeCoercionError(
                key,
                raw,
                expected="a mapping of string to string",
                detail=f"Entry {item_key!r} is not a scalar.",
            )
        stringified[str(item_key)] = (
            str(item_value).lower() if isinstance(item_value, bool) else str(item_value)
        )
    try:
        resolved = convert(stringified, target_type=dict[str, str])
    except msgspec.ValidationError as exc:
        raise TypeCoercionError(
            key,
            raw,
            expected="a mapping of string to string",
            detail=validation_error_payload(exc).get("summary"),
        ) from exc
    return MappingProxyType(resolved)


__all__ = ["MappingReadonlyConfig", "ReadonlyConfig", "coerce_option_value"]
