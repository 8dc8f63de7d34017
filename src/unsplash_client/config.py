# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for unsplash-client."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_BASE_URL = "https://api.unsplash.com/"
DEFAULT_USER_AGENT = f"unsplash-client/{__version__}"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _optional_str_env(name: str, default: str | None) -> str | None:
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip()
    return value or None


def _str_env(name: str, default: str) -> str:
    value = (os.getenv(name) or "").strip()
    return value or default


def _base_url_env(name: str, default: str) -> str:
    value = (os.getenv(name) or "").strip()
    if not value:
        return default
    # Endpoint paths are joined relative to the base, which needs a trailing slash.
    return value if value.endswith("/") else value + "/"


@dataclass
class HttpSettings:
    """HTTP client defaults."""

    base_url: str = DEFAULT_BASE_URL
    access_key: str | None = None
    access_token: str | None = None
    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True
    api_version: str = "v1"

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            base_url=_base_url_env("UNSPLASH_API_URL", cls.base_url),
            access_key=_optional_str_env("UNSPLASH_ACCESS_KEY", cls.access_key),
            access_token=_optional_str_env("UNSPLASH_ACCESS_TOKEN", cls.access_token),
            timeout=_float_env("UNSPLASH_HTTP_TIMEOUT", cls.timeout),
            user_agent=_str_env("UNSPLASH_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("UNSPLASH_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("UNSPLASH_HTTP_VERIFY_SSL", cls.verify_ssl),
            api_version=_str_env("UNSPLASH_API_VERSION", cls.api_version),
        )

    def default_headers(self) -> dict[str, str]:
        """Headers every request carries unless the request sets its own."""
        headers = {
            "User-Agent": self.user_agent,
            "Accept-Version": self.api_version,
        }
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        elif self.access_key:
            headers["Authorization"] = f"Client-ID {self.access_key}"
        return headers


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()
