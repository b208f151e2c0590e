from typing import Any, Union

from . import render
from .value import type_name


class BaseError(Exception):
    pass


class AccessError(BaseError):
    def __init__(self, key: str, data: Any):
        self.key = key
        self.data = data


class KeyAbsent(AccessError, KeyError):
    def __str__(self) -> str:
        return render.key_absent(self.key, self.data)


class TypeMismatch(AccessError, TypeError):
    def __init__(self, key: str, expected: str, value: Any, data: Any):
        super().__init__(key, data)
        self.expected = expected
        self.value = value

    @property
    def actual(self) -> str:
        return type_name(self.value)

    def __str__(self) -> str:
        return render.type_mismatch(self.key, self.expected, self.actual, self.data)


class MalformedNumericString(TypeMismatch):
    def __init__(self, key: str, value: str, data: Any):
        super().__init__(key, "str with an int value", value, data)


class DecodeError(BaseError, ValueError):
    def __init__(
        self, code: int, message: str, text: Union[str, bytes], *, format: str = "JSON"
    ):
        self.code = code
        self.message = message
        self.text = text
        self.format = format

    def __str__(self) -> str:
        return render.decode_error(
            self.code, self.message, self.text, format=self.format
        )

