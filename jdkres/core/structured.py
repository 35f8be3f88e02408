"""Narrowing for parsed JSON and TOML.

``json.loads`` and ``tomllib.loads`` hand back ``object`` trees. Manifest
records and config tables are read through these accessors, which return
None rather than raising when a value is missing or has the wrong type.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeAlias, TypeGuard, cast

StrDict: TypeAlias = dict[str, object]
ObjList: TypeAlias = list[object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    return isinstance(obj, dict) and all(
        isinstance(k, str) for k in cast(dict[object, object], obj)
    )


def as_str_dict(obj: object) -> StrDict | None:
    return obj if is_str_dict(obj) else None


def as_obj_list(obj: object) -> ObjList | None:
    return cast(ObjList, obj) if isinstance(obj, list) else None


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Stripped string at ``key``; None when absent, not a string, or blank."""
    value = table.get(key)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def get_int(table: Mapping[str, object], key: str) -> int | None:
    """Integer at ``key``.

    Release feeds disagree on ``"majorVersion": 8`` versus ``"8"``, so
    digit-only strings count. ``True`` is an int to Python but not here.
    """
    match table.get(key):
        case bool():
            return None
        case int() as number:
            return number
        case str() as text if text.strip().isascii() and text.strip().isdigit():
            return int(text)
        case _:
            return None


def get_float(table: Mapping[str, object], key: str) -> float | None:
    match table.get(key):
        case bool():
            return None
        case int() | float() as number:
            return float(number)
        case _:
            return None


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    return as_str_dict(table.get(key))
