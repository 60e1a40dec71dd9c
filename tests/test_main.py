import logging

from pulsekeys_mock import __main__ as entrypoint


def test_main_runs_uvicorn_with_env_settings(monkeypatch, caplog):
    calls = []
    monkeypatch.setattr(entrypoint.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    monkeypatch.setenv("PORT", "4100")
    monkeypatch.setenv("PULSEKEYS_HOST", "127.0.0.1")
    monkeypatch.delenv("PULSEKEYS_LOG_LEVEL", raising=False)
    caplog.set_level(logging.INFO, logger="pulsekeys_mock")

    entrypoint.main()

    assert len(calls) == 1
    args, kwargs = calls[0]
    assert args == ("pulsekeys_mock.server:app",)
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 4100
    assert kwargs["log_level"] == "info"
    assert "PulseKeys API listening on http://localhost:4100" in caplog.text
