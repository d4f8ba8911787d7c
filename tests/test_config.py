import pytest

from cliphistory import __version__
from cliphistory.config import ServerConfig, parse_args, parse_listen


@pytest.mark.parametrize(
    "value, expected",
    [
        (":3000", ("0.0.0.0", 3000)),
        ("127.0.0.1:8080", ("127.0.0.1", 8080)),
        ("localhost:1", ("localhost", 1)),
        ("[::1]:3000", ("::1", 3000)),
        ("[::]:0", ("::", 0)),
    ],
)
def test_parse_listen(value, expected):
    assert parse_listen(value) == expected


@pytest.mark.parametrize("value", ["3000", "host:", "host:http", ":70000", "::1:3000"])
def test_parse_listen_rejects_bad_addresses(value):
    with pytest.raises(ValueError):
        parse_listen(value)


def test_defaults(monkeypatch):
    for name in ("CLIPHISTORY_LISTEN", "CLIPHISTORY_CLIPBOARD", "CLIPHISTORY_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    config = ServerConfig.from_args(parse_args([]))

    assert config == ServerConfig(host="0.0.0.0", port=3000, clipboard="auto", log_level="INFO")


def test_command_line_options():
    args = parse_args(["--listen", "127.0.0.1:4000", "--clipboard", "memory", "--log-level", "debug"])
    config = ServerConfig.from_args(args)

    assert config.host == "127.0.0.1"
    assert config.port == 4000
    assert config.clipboard == "memory"
    assert config.log_level == "DEBUG"


def test_environment_defaults(monkeypatch):
    monkeypatch.setenv("CLIPHISTORY_LISTEN", ":5000")
    monkeypatch.setenv("CLIPHISTORY_CLIPBOARD", "memory")

    config = ServerConfig.from_args(parse_args([]))

    assert config.port == 5000
    assert config.clipboard == "memory"


def test_invalid_listen_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        parse_args(["--listen", "nope"])
    assert exc.value.code == 2


def test_unknown_backend_is_usage_error():
    with pytest.raises(SystemExit):
        parse_args(["--clipboard", "amiga"])


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc:
        parse_args(["--version"])

    assert exc.value.code == 0
    assert capsys.readouterr().out.strip() == f"cliphistory {__version__}"
