from pathlib import Path

import pytest

from minidrive.config import ClientConfig, ConfigError, parse_arguments


def test_endpoint_with_username():
    config = parse_arguments(["alice@localhost:9000"])
    assert config.username == "alice"
    assert config.host == "localhost"
    assert config.port == 9000
    assert config.log_path is None
    assert config.max_upload_rate is None
    assert config.max_download_rate is None


def test_endpoint_without_username_is_public():
    config = parse_arguments(["127.0.0.1:5050"])
    assert config.username is None
    assert config.host == "127.0.0.1"
    assert config.port == 5050


def test_empty_username_is_kept():
    config = parse_arguments(["@host:1234"])
    assert config.username == ""
    assert config.host == "host"


def test_no_arguments_raises_usage():
    with pytest.raises(ConfigError, match=r"Usage: client \[username@\]<server>:<port>"):
        parse_arguments([])


def test_missing_colon_raises():
    with pytest.raises(ConfigError, match="Expected endpoint format host:port"):
        parse_arguments(["bob@localhost"])


def test_non_numeric_port_raises():
    with pytest.raises(ConfigError):
        parse_arguments(["localhost:abc"])


def test_port_trailing_text_is_ignored():
    config = parse_arguments(["localhost:8080abc"])
    assert config.port == 8080


def test_port_is_truncated_to_sixteen_bits():
    config = parse_arguments(["localhost:65537"])
    assert config.port == 1


def test_huge_port_raises():
    with pytest.raises(ConfigError):
        parse_arguments(["localhost:99999999999"])


def test_log_option(tmp_path):
    target = tmp_path / "client.log"
    config = parse_arguments(["u@h:1", "--log", str(target)])
    assert config.log_path == target


def test_rate_options():
    config = parse_arguments(
        ["h:1", "--max-upload-rate", "1024", "--max-download-rate", "2048"]
    )
    assert config.max_upload_rate == 1024
    assert config.max_download_rate == 2048


@pytest.mark.parametrize(
    "flag, message",
    [
        ("--log", "--log requires a file path"),
        ("--max-upload-rate", "--max-upload-rate requires a value (bytes per second)"),
        ("--max-download-rate", "--max-download-rate requires a value (bytes per second)"),
    ],
)
def test_option_without_value(flag, message):
    with pytest.raises(ConfigError) as info:
        parse_arguments(["h:1", flag])
    assert str(info.value) == message


def test_unknown_argument():
    with pytest.raises(ConfigError) as info:
        parse_arguments(["h:1", "--verbose"])
    assert str(info.value) == "Unknown argument: --verbose"


def test_invalid_rate_raises():
    with pytest.raises(ConfigError):
        parse_arguments(["h:1", "--max-upload-rate", "fast"])


def test_reads_sys_argv_by_default(monkeypatch):
    monkeypatch.setattr("sys.argv", ["client", "carol@example.com:4000", "--log", "x.log"])
    config = parse_arguments()
    assert config == ClientConfig(
        host="example.com", port=4000, username="carol", log_path=Path("x.log")
    )


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["nohostport"])