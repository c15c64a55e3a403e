"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from wpdocker.core.services import preflight


def _fake_which(available: set[str]):
    def which(cmd: str, *args, **kwargs) -> str | None:
        return f"/usr/bin/{cmd}" if cmd in available else None

    return which


@pytest.fixture
def tools_present(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pretend docker and docker-compose are on PATH."""
    monkeypatch.setattr(preflight.shutil, "which", _fake_which({"docker", "docker-compose"}))
    monkeypatch.setattr(preflight, "_compose_plugin_available", lambda: False)


@pytest.fixture
def docker_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pretend no Docker tooling is installed."""
    monkeypatch.setattr(preflight.shutil, "which", _fake_which(set()))
    monkeypatch.setattr(preflight, "_compose_plugin_available", lambda: False)


@pytest.fixture
def compose_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    """Docker present, neither compose binary nor plugin."""
    monkeypatch.setattr(preflight.shutil, "which", _fake_which({"docker"}))
    monkeypatch.setattr(preflight, "_compose_plugin_available", lambda: False)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("WPD_CONFIG", raising=False)
    return tmp_path
