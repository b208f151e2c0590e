import pytest  # type: ignore

from typedmap.adapter import config_file
from typedmap.adapter.json_text import DecodeErrorCode
from typedmap.model.exceptions import DecodeError, TypeMismatch
from typedmap.util.validate import get_integer, get_string

TEST_CONFIG = """
name = "John Doe"
age = 18

[logging]
version = 1

[logging.root]
level = "DEBUG"
"""


def test_decode_toml():
    data = config_file.decode_toml(TEST_CONFIG)
    assert get_string(data, "name") == "John Doe"
    assert get_integer(data, "age") == 18


def test_decode_toml_syntax_error():
    with pytest.raises(DecodeError) as excinfo:
        config_file.decode_toml("name = ")
    assert excinfo.value.code == DecodeErrorCode.SYNTAX
    assert excinfo.value.text == "name = "
    assert str(excinfo.value).startswith("Failed to decode TOML string, error_code=4")


def test_parse_file(tmp_path):
    file = tmp_path / "test.toml"
    file.write_text(TEST_CONFIG, encoding="utf-8")
    data, logging_config = config_file.parse_file(str(file))
    assert data["name"] == "John Doe"
    assert logging_config == {"version": 1, "root": {"level": "DEBUG"}}


def test_parse_file_malformed_utf8(tmp_path):
    file = tmp_path / "test.toml"
    file.write_bytes(b'name = "\xb1"\n')
    with pytest.raises(DecodeError) as excinfo:
        config_file.parse_file(str(file))
    assert excinfo.value.code == DecodeErrorCode.UTF8
    assert excinfo.value.text == b'name = "\xb1"\n'


def test_parse_logging_absent():
    assert config_file.parse_logging({"name": "John Doe"}) is None


@pytest.mark.parametrize("value", ["DEBUG", [1, 2]])
def test_parse_logging_not_a_table(value):
    with pytest.raises(TypeMismatch) as excinfo:
        config_file.parse_logging({"logging": value})
    assert excinfo.value.key == "logging"
