"""Type and collection validation utilities."""

from __future__ import annotations

from collections.abc import Sequence


def ensure_str_sequence(value: object, *, label: str) -> Sequence[str]:
    """Validate that value is a non-string sequence of strings.

    Parameters
    ----------
    value
        Value to validate.
    label
        Descriptive label for error messages.

    Returns
    -------
    Sequence[str]
        The validated sequence.

    Raises
    ------
    TypeError
        If value is not a Sequence or an item is not a string.
    """
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes)):
        msg = f"{label} must be a Sequence, got {type(value).__name__}"
        raise TypeError(msg)
    for index, item in enumerate(value):
        if not isinstance(item, str):
            msg = f"{label}[{index}] must be str, got {type(item).__name__}"
            raise TypeError(msg)
    return value


__all__ = ["ensure_str_sequence"]
