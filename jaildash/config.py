"""
Dashboard configuration.

Defaults can be overridden through JAILDASH_* environment variables; the CLI
overrides both.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

API_URL_BASE = "/api/v2.0/"

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 80
DEFAULT_BIND_HOST = DEFAULT_HOST
DEFAULT_BIND_PORT = 8000
DEFAULT_WEB_UI_USER = "root"
DEFAULT_POLL_INTERVAL = 30.0
DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "INFO"


def _str_env(name: str, default: Optional[str]) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None:
        return default
    raw = raw.strip()
    return raw or default


def _int_env(name: str, default: int) -> int:
    raw = str(os.getenv(name, str(default))).strip()
    try:
        return int(raw)
    except ValueError:
        return default


def _float_env(name: str, default: float) -> float:
    raw = str(os.getenv(name, str(default))).strip()
    try:
        return float(raw)
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes"}


@dataclass
class DashboardConfig:
    password: Optional[str] = None
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    user: str = DEFAULT_WEB_UI_USER
    secure: bool = False
    bind_host: str = DEFAULT_BIND_HOST
    bind_port: int = DEFAULT_BIND_PORT
    poll_interval: float = DEFAULT_POLL_INTERVAL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "DashboardConfig":
        """Build a config from JAILDASH_* variables, falling back to defaults."""
        return cls(
            password=_str_env("JAILDASH_PASSWORD", None),
            host=_str_env("JAILDASH_HOST", DEFAULT_HOST),
            port=_int_env("JAILDASH_PORT", DEFAULT_PORT),
            user=_str_env("JAILDASH_USER", DEFAULT_WEB_UI_USER),
            secure=_bool_env("JAILDASH_SECURE", False),
            bind_host=_str_env("JAILDASH_BIND_HOST", DEFAULT_BIND_HOST),
            bind_port=_int_env("JAILDASH_BIND_PORT", DEFAULT_BIND_PORT),
            poll_interval=_float_env("JAILDASH_POLL_INTERVAL", DEFAULT_POLL_INTERVAL),
            request_timeout=_float_env("JAILDASH_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT),
            log_level=_str_env("JAILDASH_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            log_file=_str_env("JAILDASH_LOG_FILE", None),
        )

    @property
    def protocol(self) -> str:
        return "https" if self.secure else "http"

    @property
    def api_url_base(self) -> str:
        """e.g. http://freenas.local:80/api/v2.0/"""
        return f"{self.protocol}://{self.host}:{self.port}{API_URL_BASE}"

    def validate(self) -> None:
        """
        Check values that would otherwise fail later at runtime.

        Raises:
            ValueError: On a missing password, bad port, or non-positive interval/timeout
        """
        if not self.password:
            raise ValueError("password is required")
        for name in ("port", "bind_port"):
            value = getattr(self, name)
            if not 0 < value < 65536:
                raise ValueError(f"{name} must be between 1 and 65535, got {value}")
        if self.poll_interval <= 0:
            raise ValueError(f"poll_interval must be positive, got {self.poll_interval}")
        if self.request_timeout <= 0:
            raise ValueError(f"request_timeout must be positive, got {self.request_timeout}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"unknown log level: {self.log_level}")
