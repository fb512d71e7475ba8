import pytest

from meeting_finder.config import Settings

ENV_VARS = ["MEETING_FINDER_HOST", "MEETING_FINDER_PORT", "MEETING_FINDER_URL", "MEETING_FINDER_LOG_LEVEL"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ENV_VARS:
        # setenv first so teardown also drops values loaded from .env
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_defaults():
    s = Settings.from_env()
    assert s == Settings(host="127.0.0.1", port=8000, url="http://localhost:8000", log_level="INFO")


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("MEETING_FINDER_PORT", "9001")
    monkeypatch.setenv("MEETING_FINDER_LOG_LEVEL", "debug")
    s = Settings.from_env()
    assert s.port == 9001
    assert s.log_level == "DEBUG"


def test_dotenv_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("MEETING_FINDER_HOST=0.0.0.0\n")
    assert Settings.from_env().host == "0.0.0.0"


def test_bad_port(monkeypatch):
    monkeypatch.setenv("MEETING_FINDER_PORT", "eighty")
    with pytest.raises(RuntimeError, match="MEETING_FINDER_PORT"):
        Settings.from_env()
