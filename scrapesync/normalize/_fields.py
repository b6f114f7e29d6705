"""Field accessors shared by the normalizers.

Each helper reads one key from a raw mapping and either returns a value of
the expected type or raises :class:`NormalizationError` naming the record
and field.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from scrapesync.normalize.errors import NormalizationError

_MISSING = object()


def as_mapping(raw: Any, locator: str) -> Mapping[str, Any]:
    if not isinstance(raw, Mapping):
        raise NormalizationError(
            f"expected an object, got {type(raw).__name__}", locator
        )
    return raw


def as_sequence(value: Any, locator: str, key: str | None = None) -> Sequence[Any]:
    """Return *value* as a list-like sequence; ``None`` becomes ``()``."""
    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise NormalizationError(
            f"expected an array, got {type(value).__name__}", locator, key
        )
    return value


def require_str(raw: Mapping[str, Any], key: str, locator: str) -> str:
    value = raw.get(key, _MISSING)
    if value is _MISSING or value is None:
        raise NormalizationError("required field is missing", locator, key)
    if not isinstance(value, str):
        raise NormalizationError(
            f"expected a string, got {type(value).__name__}", locator, key
        )
    if not value.strip():
        raise NormalizationError("required field is empty", locator, key)
    return value


def optional_str(raw: Mapping[str, Any], key: str, locator: str) -> str | None:
    """Return the string at *key*, or ``None`` when absent.

    An empty string is returned as-is; it is not the same as absent.
    """
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise NormalizationError(
            f"expected a string, got {type(value).__name__}", locator, key
        )
    return value


def optional_bool(raw: Mapping[str, Any], key: str, locator: str) -> bool:
    value = raw.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise NormalizationError(
            f"expected a boolean, got {type(value).__name__}", locator, key
        )
    return value


def optional_int(raw: Mapping[str, Any], key: str, locator: str) -> int:
    value = raw.get(key)
    if value is None:
        return 0
    # bool is a subclass of int but is never a valid status code
    if isinstance(value, bool) or not isinstance(value, int):
        raise NormalizationError(
            f"expected an integer, got {type(value).__name__}", locator, key
        )
    return value
