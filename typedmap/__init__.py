from .adapter.json_text import decode, DecodeErrorCode
from .model.exceptions import (
    BaseError,
    AccessError,
    KeyAbsent,
    TypeMismatch,
    MalformedNumericString,
    DecodeError,
)
from .util.validate import (
    get_mixed,
    get_map,
    get_map_or_none,
    get_integer,
    get_integer_or_none,
    get_float,
    get_string,
    get_string_or_none,
    get_string_as_integer,
    get_boolean,
)

__version__ = "0.1"
