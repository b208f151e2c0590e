import logging
import tomllib
from typing import Any, Dict, Optional, Tuple

from ..model.exceptions import DecodeError, TypeMismatch
from ..util.validate import get_map
from .json_text import DecodeErrorCode

logger = logging.getLogger(__name__)

LOGGING = "logging"


def parse_file(file_name: str) -> Tuple[Dict[str, Any], Optional[Dict[str, Any]]]:
    with open(file_name, "rb") as f:
        raw = f.read()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(int(DecodeErrorCode.UTF8), str(e), raw, format="TOML") from e
    data = decode_toml(text)
    return (data, parse_logging(data))


def decode_toml(text: str) -> Dict[str, Any]:
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        logger.debug(f"TOML decode failed: {e}")
        raise DecodeError(
            int(DecodeErrorCode.SYNTAX), str(e), text, format="TOML"
        ) from e


def parse_logging(raw: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    if LOGGING not in raw:
        return None
    logging_config = get_map(raw, LOGGING)
    if not isinstance(logging_config, dict):
        raise TypeMismatch(LOGGING, "dict", logging_config, raw)
    return logging_config
