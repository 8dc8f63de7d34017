# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import importlib
import socket
import ssl

import httpx
import pytest

from unsplash_client import config
from unsplash_client.config import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, HttpSettings
from unsplash_client.errors import (
    ErrorCategory,
    IllegalArgumentError,
    InvalidOptionError,
    JSONUnmarshallingError,
    ResponseReadError,
    UnsplashError,
    UnsupportedMethodError,
    categorize_exception,
)

_ENV_VARS = (
    "UNSPLASH_API_URL",
    "UNSPLASH_ACCESS_KEY",
    "UNSPLASH_ACCESS_TOKEN",
    "UNSPLASH_HTTP_TIMEOUT",
    "UNSPLASH_USER_AGENT",
    "UNSPLASH_HTTP_REDIRECTS",
    "UNSPLASH_HTTP_VERIFY_SSL",
    "UNSPLASH_API_VERSION",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_http_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("UNSPLASH_API_URL", "https://proxy.example/unsplash")
    monkeypatch.setenv("UNSPLASH_ACCESS_KEY", "abc123")
    monkeypatch.setenv("UNSPLASH_HTTP_TIMEOUT", "5.5")
    monkeypatch.setenv("UNSPLASH_USER_AGENT", "CustomAgent/1.0")
    monkeypatch.setenv("UNSPLASH_HTTP_REDIRECTS", "false")
    monkeypatch.setenv("UNSPLASH_HTTP_VERIFY_SSL", "0")
    monkeypatch.setenv("UNSPLASH_API_VERSION", "v2")

    importlib.reload(config)
    settings = config.load_http_settings()

    assert settings.base_url == "https://proxy.example/unsplash/"
    assert settings.access_key == "abc123"
    assert settings.access_token is None
    assert settings.timeout == 5.5
    assert settings.user_agent == "CustomAgent/1.0"
    assert settings.allow_redirects is False
    assert settings.verify_ssl is False
    assert settings.api_version == "v2"


def test_http_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("UNSPLASH_HTTP_TIMEOUT", "not-a-number")
    monkeypatch.setenv("UNSPLASH_API_URL", "   ")
    monkeypatch.setenv("UNSPLASH_ACCESS_KEY", "")

    importlib.reload(config)
    settings = config.load_http_settings()

    assert settings.timeout == config.HttpSettings.timeout
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.access_key is None
    assert DEFAULT_USER_AGENT in settings.user_agent


def test_blank_user_agent_and_api_version_fall_back(monkeypatch):
    monkeypatch.setenv("UNSPLASH_USER_AGENT", "")
    monkeypatch.setenv("UNSPLASH_API_VERSION", "  ")

    settings = HttpSettings.from_env()

    assert settings.user_agent == DEFAULT_USER_AGENT
    assert settings.api_version == "v1"
    assert settings.default_headers()["User-Agent"] == DEFAULT_USER_AGENT


def test_load_http_settings_reads_env_at_call_time(monkeypatch):
    importlib.reload(config)
    monkeypatch.setenv("UNSPLASH_HTTP_TIMEOUT", "7.7")
    assert config.load_http_settings().timeout == 7.7
    monkeypatch.setenv("UNSPLASH_HTTP_TIMEOUT", "8.8")
    assert config.load_http_settings().timeout == 8.8


def test_default_headers_prefer_bearer_token():
    headers = HttpSettings(access_key="key", access_token="token").default_headers()
    assert headers["Authorization"] == "Bearer token"
    assert headers["Accept-Version"] == "v1"
    assert headers["User-Agent"] == DEFAULT_USER_AGENT

    assert HttpSettings(access_key="key").default_headers()["Authorization"] == "Client-ID key"
    assert "Authorization" not in HttpSettings().default_headers()


def test_error_hierarchy_matches_builtin_kinds():
    assert issubclass(IllegalArgumentError, ValueError)
    assert issubclass(InvalidOptionError, IllegalArgumentError)
    assert issubclass(UnsupportedMethodError, ValueError)
    assert issubclass(ResponseReadError, OSError)
    for exc_type in (IllegalArgumentError, UnsupportedMethodError, ResponseReadError, JSONUnmarshallingError):
        assert issubclass(exc_type, UnsplashError)

    err = JSONUnmarshallingError("Expecting value: line 1 column 1 (char 0)")
    assert err.message == "Expecting value: line 1 column 1 (char 0)"
    assert str(err) == err.message
    assert UnsupportedMethodError("PATCH").method == "PATCH"


@pytest.mark.parametrize(
    "exc, category",
    [
        (IllegalArgumentError("Request object cannot be None"), ErrorCategory.INVALID_ARGUMENT),
        (InvalidOptionError("query is required"), ErrorCategory.INVALID_ARGUMENT),
        (UnsupportedMethodError("TRACE"), ErrorCategory.UNSUPPORTED_METHOD),
        (ResponseReadError("short read"), ErrorCategory.IO),
        (JSONUnmarshallingError("bad"), ErrorCategory.DECODE),
        (httpx.ReadTimeout("slow"), ErrorCategory.TIMEOUT),
        (httpx.ConnectError("refused"), ErrorCategory.CONNECTION_ERROR),
        (ssl.SSLError("bad cert"), ErrorCategory.SSL_ERROR),
        (socket.gaierror("no such host"), ErrorCategory.DNS_ERROR),
        (ConnectionResetError("reset"), ErrorCategory.CONNECTION_ERROR),
        (RuntimeError("other"), ErrorCategory.UNKNOWN_ERROR),
    ],
)
def test_categorize_exception(exc, category):
    assert categorize_exception(exc) is category


def test_categorize_exception_follows_ssl_cause():
    try:
        try:
            raise ssl.SSLError("certificate verify failed")
        except ssl.SSLError as inner:
            raise httpx.ConnectError("handshake failed") from inner
    except httpx.ConnectError as exc:
        assert categorize_exception(exc) is ErrorCategory.SSL_ERROR
