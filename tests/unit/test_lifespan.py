import importlib
import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from slabtax import lifespan


def test_build_application_lifespan_requires_python_multipart(monkeypatch):
    original_import_module = importlib.import_module

    def fake_import_module(name: str, package: str | None = None):
        if name == "python_multipart":
            raise ImportError("No module named 'python_multipart'")
        return original_import_module(name, package)

    monkeypatch.setattr(importlib, "import_module", fake_import_module)

    with pytest.raises(
        RuntimeError, match="python-multipart is required for form submissions"
    ):
        lifespan.build_application_lifespan("test-app")


def test_lifespan_sets_and_clears_state_and_runs_hooks():
    calls: list[str] = []

    async def on_start(app: FastAPI) -> None:
        calls.append("start")

    def on_stop(app: FastAPI) -> None:
        calls.append("stop")

    app = FastAPI(
        lifespan=lifespan.build_application_lifespan("test-app", startup_hook=on_start, shutdown_hook=on_stop)
    )
    with TestClient(app):
        assert app.state.app_label == "test-app"
        assert app.state.settings.build_sha
        assert app.state.telemetry_handler is None
    assert calls == ["start", "stop"]
    assert not hasattr(app.state, "settings")


def test_file_logging_sink(monkeypatch, tmp_path):
    monkeypatch.setenv("SLABTAX_FILE_LOGGING", "true")
    monkeypatch.setenv("SLABTAX_LOG_DIR", str(tmp_path / "logs"))
    app = FastAPI(lifespan=lifespan.build_application_lifespan("sink-test"))
    with TestClient(app):
        handler = app.state.telemetry_handler
        assert isinstance(handler, logging.FileHandler)
        assert handler in logging.getLogger("slabtax").handlers
    assert handler not in logging.getLogger("slabtax").handlers
    log_text = (tmp_path / "logs" / "sink-test.log").read_text(encoding="utf-8")
    assert "Startup complete" in log_text
