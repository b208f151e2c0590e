from enum import IntEnum
import json
import logging
from typing import Any, Union

from ..model.exceptions import DecodeError
from ..model.value import JSONContainer, is_container

logger = logging.getLogger(__name__)


class DecodeErrorCode(IntEnum):
    NONE = 0
    DEPTH = 1
    SYNTAX = 4
    UTF8 = 5


MESSAGES = {
    DecodeErrorCode.NONE: "No error",
    DecodeErrorCode.DEPTH: "Maximum stack depth exceeded",
}


def decode(text: Union[str, bytes]) -> JSONContainer:
    """
    Decode JSON text whose root is an object or an array. Scalar roots parse
    fine but are rejected with code NONE, since there is nothing to look up
    keys in.
    """
    try:
        data = json.loads(text, parse_constant=reject_constant)
    except json.JSONDecodeError as e:
        raise failed(DecodeErrorCode.SYNTAX, str(e), text) from e
    except UnicodeDecodeError as e:
        raise failed(DecodeErrorCode.UTF8, str(e), text) from e
    except ValueError as e:
        raise failed(DecodeErrorCode.SYNTAX, str(e), text) from e
    except RecursionError as e:
        raise failed(DecodeErrorCode.DEPTH, MESSAGES[DecodeErrorCode.DEPTH], text) from e

    if not is_container(data):
        raise failed(DecodeErrorCode.NONE, MESSAGES[DecodeErrorCode.NONE], text)
    return data


def reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid constant {name}")


def failed(code: DecodeErrorCode, message: str, text: Union[str, bytes]) -> DecodeError:
    logger.debug(f"JSON decode failed with {code.name}: {message}")
    return DecodeError(int(code), message, text)
