import pytest
from fastapi.testclient import TestClient

from cliphistory import main as main_module
from cliphistory.clipboard import MemoryClipboard
from cliphistory.config import ServerConfig
from cliphistory.main import ClipHistoryApp


def test_app_wires_cache_poller_and_api():
    source = MemoryClipboard("seed")
    app = ClipHistoryApp(ServerConfig(clipboard="memory"), source=source)

    assert app.poller.poll_once() is True

    client = TestClient(app.api)
    assert client.get("/api/list").json() == ["seed"]

    client.post("/api/set", json={"content": "next"})
    assert source.read() == "next"
    assert client.get("/api/list").json() == ["seed"]


def test_backend_chosen_from_config():
    app = ClipHistoryApp(ServerConfig(clipboard="memory"))
    assert isinstance(app.source, MemoryClipboard)


def test_start_stop_controls_poller():
    app = ClipHistoryApp(ServerConfig(clipboard="memory"))

    app.start()
    assert app.running
    assert app.poller.is_running

    app.stop()
    assert not app.running
    assert not app.poller.is_running


def test_run_forever_stops_poller_when_server_exits(monkeypatch):
    calls = []
    monkeypatch.setattr(
        main_module.uvicorn, "run", lambda api, **kwargs: calls.append(kwargs))

    app = ClipHistoryApp(ServerConfig(host="127.0.0.1", port=4321, clipboard="memory"))
    app.run_forever()

    assert calls == [{"host": "127.0.0.1", "port": 4321, "log_level": "info"}]
    assert not app.poller.is_running


def test_main_exits_on_unsupported_backend(monkeypatch):
    def unsupported(backend):
        raise NotImplementedError(f"Clipboard backend '{backend}' is not supported")

    monkeypatch.setattr(main_module, "get_clipboard_source", unsupported)

    with pytest.raises(SystemExit) as exc:
        main_module.main(["--clipboard", "linux"])
    assert exc.value.code == 1
