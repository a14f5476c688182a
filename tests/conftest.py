"""Test fixtures for logsh tests."""
import pytest


@pytest.fixture
def temp_home(tmp_path, monkeypatch):
    """Point HOME at a temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("HOMEPATH", raising=False)
    monkeypatch.delenv("LOGSH_CONFIG", raising=False)
    return home


@pytest.fixture
def config_file(temp_home):
    return temp_home / ".logsh.json"
