from __future__ import annotations

import logging

import pytest

from jaildash import cli
from jaildash.logging_config import setup_logging


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("JAILDASH_PASSWORD", "JAILDASH_HOST", "JAILDASH_PORT", "JAILDASH_SECURE", "JAILDASH_BIND_HOST", "JAILDASH_BIND_PORT"):
        monkeypatch.delenv(name, raising=False)


def test_parse_config_positional_and_flags() -> None:
    config = cli.parse_config(
        ["truenas.lan", "443", "-s", "-u", "admin", "-P", "pw", "-H", "0.0.0.0", "-p", "9000", "--interval", "15"]
    )

    assert config.api_url_base == "https://truenas.lan:443/api/v2.0/"
    assert config.user == "admin"
    assert config.password == "pw"
    assert config.bind_host == "0.0.0.0"
    assert config.bind_port == 9000
    assert config.poll_interval == 15.0


def test_password_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JAILDASH_PASSWORD", "from-env")

    config = cli.parse_config([])

    assert config.password == "from-env"
    assert config.api_url_base == "http://localhost:80/api/v2.0/"


def test_missing_password_is_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.parse_config(["nas"])

    assert excinfo.value.code == 2
    assert "password is required" in capsys.readouterr().err


def test_bad_interval_is_usage_error() -> None:
    with pytest.raises(SystemExit):
        cli.parse_config(["-P", "pw", "--interval", "0"])


def test_main_wires_poller_and_server(monkeypatch: pytest.MonkeyPatch) -> None:
    events: list[str] = []

    class FakePoller:
        def __init__(self, client, snapshot, interval):
            events.append(f"poller interval={interval}")

        def start(self):
            events.append("start")

        def stop(self):
            events.append("stop")

    def fake_run(self, host, port, **kwargs):
        events.append(f"run {host}:{port} threaded={kwargs.get('threaded')}")
        raise RuntimeError("server exited")

    monkeypatch.setattr(cli, "JailPoller", FakePoller)
    monkeypatch.setattr(cli, "setup_logging", lambda *a, **k: logging.getLogger("jaildash"))
    monkeypatch.setattr("flask.Flask.run", fake_run)

    with pytest.raises(RuntimeError, match="server exited"):
        cli.main(["nas", "-P", "pw", "-p", "8123", "--interval", "12"])

    assert events == ["poller interval=12.0", "start", "run localhost:8123 threaded=True", "stop"]


def test_setup_logging_writes_file(tmp_path) -> None:
    log_file = tmp_path / "logs" / "jaildash.log"

    root = logging.getLogger()
    before_handlers = list(root.handlers)
    before_level = root.level

    logger = setup_logging("jaildash", level="debug", log_file=str(log_file))
    try:
        logger.debug("hello from test")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "[JAILDASH] DEBUG - hello from test" in log_file.read_text()
    finally:
        for handler in list(root.handlers):
            if handler not in before_handlers:
                root.removeHandler(handler)
                handler.close()
        for handler in before_handlers:
            if handler not in root.handlers:
                root.addHandler(handler)
        root.setLevel(before_level)


def test_setup_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        setup_logging("jaildash", level="loud")
