"""Error types raised while resolving sink configuration."""

from __future__ import annotations


class SinkConfigError(Exception):
    """Base class for sink configuration errors."""

    def __init__(self, message: str, *, key: str) -> None:
        super().__init__(message)
        self.key = key


class MissingRequiredFieldError(SinkConfigError, ValueError):
    """Raised when a required identity field is absent from the source."""

    def __init__(self, field_name: str, *, key: str) -> None:
        msg = f"Missing required sink option {key!r} (field {field_name!r})."
        super().__init__(msg, key=key)
        self.field_name = field_name


class TypeCoercionError(SinkConfigError, TypeError):
    """Raised when a raw value cannot be coerced into the option type."""

    def __init__(
        self,
        key: str,
        value: object,
        *,
        expected: str,
        detail: str | None = None,
    ) -> None:
        msg = f"Option {key!r} expects {expected}, got {value!r}."
        if detail:
            msg = f"{msg} {detail}"
        super().__init__(msg, key=key)
        self.value = value
        self.expected = expected


__all__ = [
    "MissingRequiredFieldError",
    "SinkConfigError",
    "TypeCoercionError",
]
