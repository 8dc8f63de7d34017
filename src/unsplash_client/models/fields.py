# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Typed accessors used by the ``from_mapping`` decoders.

Absent keys and JSON ``null`` both decode to None. A present value of the wrong JSON type
raises SchemaError instead of being coerced, so a decoded object is either fully valid or
never built.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

T = TypeVar("T")


class SchemaError(TypeError):
    """A JSON value did not match the type the resource schema expects."""


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, list):
        return "array"
    return type(value).__name__


def expect_mapping(data: Any, owner: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise SchemaError(f"cannot decode {_type_name(data)} into {owner}: expected object")
    return data


def expect_list(data: Any, owner: str) -> list[Any]:
    if not isinstance(data, list):
        raise SchemaError(f"cannot decode {_type_name(data)} into {owner}: expected array")
    return data


def _mismatch(owner: str, key: str, expected: str, value: Any) -> SchemaError:
    return SchemaError(f"cannot decode {_type_name(value)} into field {owner}.{key} of type {expected}")


def opt_str(data: Mapping[str, Any], key: str, owner: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise _mismatch(owner, key, "string", value)
    return value


def opt_int(data: Mapping[str, Any], key: str, owner: str) -> int | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise _mismatch(owner, key, "int", value)
    return value


def opt_float(data: Mapping[str, Any], key: str, owner: str) -> float | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _mismatch(owner, key, "float", value)
    return float(value)


def opt_bool(data: Mapping[str, Any], key: str, owner: str) -> bool | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise _mismatch(owner, key, "bool", value)
    return value


def opt_model(
    data: Mapping[str, Any],
    key: str,
    owner: str,
    decode: Callable[[Mapping[str, Any]], T],
) -> T | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise _mismatch(owner, key, "object", value)
    return decode(value)


def opt_list(
    data: Mapping[str, Any],
    key: str,
    owner: str,
    decode: Callable[[Mapping[str, Any]], T],
) -> list[T] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise _mismatch(owner, key, "array", value)
    items: list[T] = []
    for index, item in enumerate(value):
        if not isinstance(item, Mapping):
            raise _mismatch(owner, f"{key}[{index}]", "object", item)
        items.append(decode(item))
    return items


__all__ = [
    "SchemaError",
    "expect_list",
    "expect_mapping",
    "opt_bool",
    "opt_float",
    "opt_int",
    "opt_list",
    "opt_model",
    "opt_str",
]
