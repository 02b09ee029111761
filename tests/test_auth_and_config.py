from datetime import date

import pytest
import requests

from daily_roster import config
from daily_roster.auth import credentials
from daily_roster.auth.credentials import CredentialContext, RevokeError, Unauthenticated, revoke_access_token


class FakeResponse:
    def __init__(self, status_code, text=""):
        self.status_code = status_code
        self.text = text


def test_context_from_access_token():
    context = CredentialContext.from_access_token("abc")

    assert context.get_credential().token == "abc"
    assert context.require() is context.get_credential()


@pytest.mark.parametrize("token", [None, ""])
def test_empty_context_is_unauthenticated(token):
    context = CredentialContext.from_access_token(token)

    assert context.get_credential() is None
    with pytest.raises(Unauthenticated):
        context.require()


def test_clear_drops_the_credential():
    context = CredentialContext.from_access_token("abc")
    context.clear()

    with pytest.raises(Unauthenticated):
        context.require()


def test_revoke(monkeypatch):
    sent = {}

    def fake_post(url, **kwargs):
        sent.update(url=url, **kwargs)
        return FakeResponse(200)

    monkeypatch.setattr(credentials.requests, "post", fake_post)

    assert revoke_access_token("abc") is True
    assert sent["url"] == credentials.REVOKE_URL
    assert sent["params"] == {"token": "abc"}


def test_revoke_rejected(monkeypatch):
    monkeypatch.setattr(credentials.requests, "post", lambda url, **kwargs: FakeResponse(400, "invalid_token"))

    assert revoke_access_token("abc") is False


@pytest.fixture
def env(monkeypatch):
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    for name in ("SPREADSHEET_ID", "GOOGLE_CLIENT_ID", "ROSTER_EPOCH", "API_HOST", "API_PORT", "LOG_DIR", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_load_config_defaults(env):
    env.setenv("SPREADSHEET_ID", "sheet-id")
    env.setenv("GOOGLE_CLIENT_ID", "client-id")

    loaded = config.load_config()

    assert loaded["SPREADSHEET_ID"] == "sheet-id"
    assert loaded["ROSTER_EPOCH"] == date(2023, 1, 1)
    assert loaded["API_PORT"] == 8000
    assert loaded["LOG_DIR"] == "/data/logs"
    assert loaded["LOG_LEVEL"] == "INFO"


def test_load_config_overrides(env):
    env.setenv("SPREADSHEET_ID", "sheet-id")
    env.setenv("GOOGLE_CLIENT_ID", "client-id")
    env.setenv("ROSTER_EPOCH", "2024-09-01")
    env.setenv("API_PORT", "9000")

    loaded = config.load_config()

    assert loaded["ROSTER_EPOCH"] == date(2024, 9, 1)
    assert loaded["API_PORT"] == 9000


def test_load_config_missing(env):
    with pytest.raises(OSError, match="SPREADSHEET_ID, GOOGLE_CLIENT_ID"):
        config.load_config()


def test_load_config_bad_epoch(env):
    env.setenv("SPREADSHEET_ID", "sheet-id")
    env.setenv("GOOGLE_CLIENT_ID", "client-id")
    env.setenv("ROSTER_EPOCH", "June")

    with pytest.raises(OSError):
        config.load_config()


def test_load_config_log_level(env):
    env.setenv("SPREADSHEET_ID", "sheet-id")
    env.setenv("GOOGLE_CLIENT_ID", "client-id")
    env.setenv("LOG_LEVEL", "debug")

    assert config.load_config()["LOG_LEVEL"] == "DEBUG"

    env.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(OSError, match="LOG_LEVEL"):
        config.load_config()


def test_revoke_network_failure(monkeypatch):
    def unreachable(url, **kwargs):
        raise requests.ConnectionError("Name or service not known")

    monkeypatch.setattr(credentials.requests, "post", unreachable)

    with pytest.raises(RevokeError) as exc_info:
        revoke_access_token("abc")

    assert isinstance(exc_info.value.__cause__, requests.ConnectionError)
