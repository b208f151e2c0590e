from argparse import ArgumentParser
import logging
import logging.config
import os.path
import sys
from typing import Any, Callable, Dict, List, Optional

from .adapter import config_file
from .adapter.json_text import decode
from .model.exceptions import BaseError
from .model.value import JSONContainer, dump
from .util import validate

logger = logging.getLogger(__name__)

GETTERS: Dict[str, Callable[[JSONContainer, str], Any]] = {
    "map": validate.get_map,
    "map-or-none": validate.get_map_or_none,
    "integer": validate.get_integer,
    "integer-or-none": validate.get_integer_or_none,
    "float": validate.get_float,
    "string": validate.get_string,
    "string-or-none": validate.get_string_or_none,
    "string-as-integer": validate.get_string_as_integer,
    "boolean": validate.get_boolean,
    "mixed": validate.get_mixed,
}


def main(argv: List[str] = sys.argv[1:]) -> int:
    cmd = ArgumentParser(
        prog="typedmap", description="Get a typed value by key from a JSON document"
    )
    cmd.add_argument("-c", "--config", default=None, help="Config file (TOML)")
    cmd.add_argument("type", choices=list(GETTERS), help="Expected type of the value")
    cmd.add_argument("key", help="Key of the value")
    cmd.add_argument("file", nargs="?", default=None, help="JSON file (default stdin)")

    args = cmd.parse_args(argv)

    configure_logging(args.config)

    text = read_input(args.file)
    try:
        value = GETTERS[args.type](decode(text), args.key)
    except BaseError as e:
        logger.debug(f"{e.__class__.__name__} getting {args.type} at {args.key}")
        print(str(e), file=sys.stderr)
        return 1

    print(dump(value))
    return 0


def configure_logging(config: Optional[str]) -> None:
    if config is None:
        logging.basicConfig(
            level=logging.WARNING,
            format="%(levelname)-1s | %(asctime)s | %(name)s | %(module)s | %(message)s",
        )
        return

    if not os.path.exists(config):
        raise ValueError(f"The config file you specified does not exist: {config}")

    _, logging_config = config_file.parse_file(config)
    if logging_config is not None:
        logging.config.dictConfig(logging_config)


def read_input(file: Optional[str]) -> bytes:
    if file is None:
        return sys.stdin.buffer.read()

    if not os.path.exists(file):
        raise ValueError(f"The JSON file you specified does not exist: {file}")

    with open(file, "rb") as f:
        return f.read()


if __name__ == "__main__":
    sys.exit(main())
