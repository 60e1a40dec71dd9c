"""Environment-driven settings.

Read once at startup. PORT keeps its bare name so the mock drops into
platforms that inject it; the rest are namespaced.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping


DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "info"


def _truthy(value: str | None) -> bool:
    v = (value or "").strip().lower()
    return v in {"1", "true", "yes", "y", "on"}


def _parse_port(value: str | None) -> int:
    raw = (value or "").strip()
    if not raw:
        return DEFAULT_PORT
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {raw!r}") from None
    if not 1 <= port <= 65535:
        raise ValueError(f"PORT must be between 1 and 65535, got {port}")
    return port


@dataclass(frozen=True, slots=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    proxy_headers: bool = True

    @property
    def public_url(self) -> str:
        return f"http://localhost:{self.port}"


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    proxy = env.get("PULSEKEYS_PROXY_HEADERS")
    return Settings(
        host=(env.get("PULSEKEYS_HOST") or "").strip() or DEFAULT_HOST,
        port=_parse_port(env.get("PORT")),
        log_level=(env.get("PULSEKEYS_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().lower(),
        proxy_headers=True if proxy is None else _truthy(proxy),
    )
