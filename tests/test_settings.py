import os

import pytest

from ernie_llm import AuthNotSetError, ErnieLLM, ErnieSettings, get_llm
from ernie_llm.client import ErnieClient


def test_construction_without_auth_fails(no_ernie_env):
    with pytest.raises(AuthNotSetError):
        ErnieLLM()
    with pytest.raises(AuthNotSetError):
        ErnieLLM(api_key="only-half")


def test_construction_with_access_token(no_ernie_env):
    llm = ErnieLLM(access_token="tok")
    assert isinstance(llm.client, ErnieClient)
    assert llm.client.get_access_token() == "tok"


def test_construction_from_env_access_token(no_ernie_env, monkeypatch):
    monkeypatch.setenv("ERNIE_ACCESS_TOKEN", "env-tok")
    llm = ErnieLLM()
    assert llm.client.get_access_token() == "env-tok"


def test_construction_from_env_keys(no_ernie_env, monkeypatch):
    monkeypatch.setenv("ERNIE_API_KEY", "ak")
    monkeypatch.setenv("ERNIE_SECRET_KEY", "sk")
    llm = ErnieLLM(model="ERNIE-Bot-turbo")
    assert llm.client.api_key == "ak"
    assert llm.client.secret_key == "sk"
    assert llm.model == "ERNIE-Bot-turbo"


def test_explicit_keys_override_env(no_ernie_env, monkeypatch):
    monkeypatch.setenv("ERNIE_API_KEY", "env-ak")
    monkeypatch.setenv("ERNIE_SECRET_KEY", "env-sk")
    llm = ErnieLLM(api_key="ak", secret_key="sk")
    assert (llm.client.api_key, llm.client.secret_key) == ("ak", "sk")


def test_settings_empty_timeout_uses_default(no_ernie_env, monkeypatch, tmp_path):
    monkeypatch.setenv("ERNIE_TIMEOUT", "")
    settings = ErnieSettings.from_env(dotenv_path=str(tmp_path / "missing.env"))
    assert settings.timeout == 20.0


def test_settings_from_env(no_ernie_env, monkeypatch, tmp_path):
    monkeypatch.setenv("ERNIE_ACCESS_TOKEN", "tok")
    monkeypatch.setenv("ERNIE_MODEL", "ERNIE-Bot-8K")
    monkeypatch.setenv("ERNIE_TIMEOUT", "5")
    settings = ErnieSettings.from_env(dotenv_path=str(tmp_path / "missing.env"))
    assert settings.has_auth()
    assert settings.model == "ERNIE-Bot-8K"
    assert settings.timeout == 5.0
    assert settings.to_dict()["access_token"] == "***"


def test_settings_read_dotenv_file(no_ernie_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("ERNIE_API_KEY=file-ak\nERNIE_SECRET_KEY=file-sk\n")
    try:
        settings = ErnieSettings.from_env(dotenv_path=str(env_file))
    finally:
        os.environ.pop("ERNIE_API_KEY", None)
        os.environ.pop("ERNIE_SECRET_KEY", None)
    assert (settings.api_key, settings.secret_key) == ("file-ak", "file-sk")


def test_get_llm_uses_settings(no_ernie_env):
    settings = ErnieSettings(access_token="tok", model="ERNIE-Bot-4", timeout=3.0)
    llm = get_llm(settings=settings)
    assert llm.model == "ERNIE-Bot-4"
    assert llm.client.timeout == 3.0
    assert get_llm(model="BLOOMZ-7B", settings=settings).model == "BLOOMZ-7B"


def test_get_llm_without_auth(no_ernie_env):
    with pytest.raises(AuthNotSetError):
        get_llm(settings=ErnieSettings())
