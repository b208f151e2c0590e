import math
from typing import Any, Callable, Optional

from ..model.exceptions import KeyAbsent, TypeMismatch, MalformedNumericString
from ..model.value import (
    JSONContainer,
    is_container,
    is_integer,
    is_number,
    is_str,
    is_bool,
    canonical_integer,
)


def get_mixed(data: JSONContainer, key: str) -> Any:
    """Value at key, of any type. The only check is that the key is present;
    a key mapped to None is present."""
    if isinstance(data, list):
        if not (canonical_integer(key) and 0 <= int(key) < len(data)):
            raise KeyAbsent(key, data)
        return data[int(key)]

    if key not in data:
        raise KeyAbsent(key, data)
    return data[key]


def field_of(
    check: Callable[[Any], bool], expected: str, key: str, data: JSONContainer
) -> Any:
    v = get_mixed(data, key)
    if not check(v):
        raise TypeMismatch(key, expected, v, data)
    return v


def or_none(check: Callable[[Any], bool]) -> Callable[[Any], bool]:
    def _or_none(v: Any) -> bool:
        return v is None or check(v)

    return _or_none


def get_map(data: JSONContainer, key: str) -> JSONContainer:
    return field_of(is_container, "dict or list", key, data)


def get_map_or_none(data: JSONContainer, key: str) -> Optional[JSONContainer]:
    return field_of(or_none(is_container), "dict, list or None", key, data)


def get_integer(data: JSONContainer, key: str) -> int:
    return field_of(is_integer, "int", key, data)


def get_integer_or_none(data: JSONContainer, key: str) -> Optional[int]:
    return field_of(or_none(is_integer), "int or None", key, data)


def get_float(data: JSONContainer, key: str) -> float:
    # ints are widened, with no guard against precision loss
    v = field_of(is_number, "int or float", key, data)
    try:
        return float(v)
    except OverflowError:
        return math.inf if v > 0 else -math.inf


def get_string(data: JSONContainer, key: str) -> str:
    return field_of(is_str, "str", key, data)


def get_string_or_none(data: JSONContainer, key: str) -> Optional[str]:
    return field_of(or_none(is_str), "str or None", key, data)


def get_string_as_integer(data: JSONContainer, key: str) -> int:
    """
    Int parsed from a str value. The str must be exactly how the int renders
    in base 10: "18" gives 18, while "018", "+18", " 18" and "18.0" raise
    MalformedNumericString.
    """
    s = get_string(data, key)
    if not canonical_integer(s):
        raise MalformedNumericString(key, s, data)
    return int(s)


def get_boolean(data: JSONContainer, key: str) -> bool:
    return field_of(is_bool, "bool", key, data)
