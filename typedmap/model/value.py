import json
from typing import Any, Dict, List, Union

JSONContainer = Union[Dict[str, Any], List[Any]]


def type_name(value: Any) -> str:
    return type(value).__name__


def is_container(value: Any) -> bool:
    return isinstance(value, (dict, list))


def is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_number(value: Any) -> bool:
    return is_integer(value) or isinstance(value, float)


def is_str(value: Any) -> bool:
    return isinstance(value, str)


def is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def canonical_integer(value: str) -> bool:
    """True if value is exactly the base-10 rendering of some int"""
    try:
        return str(int(value)) == value
    except ValueError:
        return False


def dump(data: Any) -> str:
    return json.dumps(data, separators=(",", ":"), default=repr)
