# ansyla/config.py
from __future__ import annotations
import os
from dataclasses import dataclass
from collections.abc import Callable, Mapping
from typing import TypeVar

DEFAULT_WEBHOOK_URL: str = 'https://hook.eu2.make.com/gua8l1hq3mvr9yk5792cekjjfan62bcy'
DEFAULT_SUMMARY_BASE_URL: str = 'https://generativelanguage.googleapis.com/v1beta'
DEFAULT_SUMMARY_MODEL: str = 'gemini-2.0-flash'

N = TypeVar('N', int, float)


def _env_number(env: Mapping[str, str], name: str, cast: Callable[[str], N], default: N) -> N:
    """Parses a numeric env var, naming the variable when it is malformed."""
    raw = env.get(name)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ValueError(f"Environment variable {name} must be a number, got {raw!r}") from e


@dataclass(frozen=True)
class Settings:
    """Runtime configuration, read once from the environment at startup."""
    webhook_url: str = DEFAULT_WEBHOOK_URL
    summary_api_key: str = ''
    summary_model: str = DEFAULT_SUMMARY_MODEL
    summary_base_url: str = DEFAULT_SUMMARY_BASE_URL
    http_timeout: float = 15.0
    alert_duration: float = 3.0
    port: int = 8080
    storage_secret: str = 'a_very_secure_secret_key_for_local_dev'
    log_level: str = 'INFO'

    @property
    def summary_enabled(self) -> bool:
        return bool(self.summary_api_key)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        return cls(
            webhook_url=env.get('WEBHOOK_URL', DEFAULT_WEBHOOK_URL),
            summary_api_key=env.get('GEMINI_API_KEY', ''),
            summary_model=env.get('GEMINI_MODEL', DEFAULT_SUMMARY_MODEL),
            summary_base_url=env.get('GEMINI_BASE_URL', DEFAULT_SUMMARY_BASE_URL).rstrip('/'),
            http_timeout=_env_number(env, 'HTTP_TIMEOUT', float, 15.0),
            alert_duration=_env_number(env, 'ALERT_DURATION', float, 3.0),
            port=_env_number(env, 'PORT', int, 8080),
            storage_secret=env.get('STORAGE_SECRET', 'a_very_secure_secret_key_for_local_dev'),
            log_level=env.get('LOG_LEVEL', 'INFO').upper(),
        )
