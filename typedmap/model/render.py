from typing import Any, Union

from .value import dump

"""
Message rendering for errors, kept separate from raising so that the
message formats can be checked on their own.
"""


def key_absent(key: str, data: Any) -> str:
    return f'Container does not have an element with key "{key}", data={dump(data)}.'


def type_mismatch(key: str, expected: str, actual: str, data: Any) -> str:
    return (
        f'Value of element with key "{key}" has type {actual}, '
        f"{expected} was expected, data={dump(data)}."
    )


def decode_error(
    code: int, message: str, text: Union[str, bytes], *, format: str = "JSON"
) -> str:
    return (
        f"Failed to decode {format} string, error_code={code}, "
        f'error_msg="{message}", {format.lower()}="{as_text(text)}".'
    )


def as_text(text: Union[str, bytes]) -> str:
    # surrogateescape keeps undecodable bytes recoverable from the message
    if isinstance(text, bytes):
        return text.decode("utf-8", errors="surrogateescape")
    return text
