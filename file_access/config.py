from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .errors import ConfigurationError

_DEFAULT_HOST = "127.0.0.1"
_DEFAULT_PORT = 7001


def _env_truthy(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    allowed_directory: str
    log_level: str = "info"
    resolve_symlinks: bool = False
    diagnostics: bool = False
    host: str = _DEFAULT_HOST
    port: int = _DEFAULT_PORT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        allowed = (env.get("ALLOWED_DIRECTORY") or "").strip()
        if not allowed:
            raise ConfigurationError("ALLOWED_DIRECTORY environment variable is required")

        raw_port = (env.get("PORT") or "").strip()
        try:
            port = int(raw_port) if raw_port else _DEFAULT_PORT
        except ValueError as exc:
            raise ConfigurationError(f"PORT must be an integer, got {raw_port!r}") from exc

        return cls(
            allowed_directory=allowed,
            log_level=(env.get("LOG_LEVEL") or "info").strip().lower(),
            resolve_symlinks=_env_truthy(env.get("FILE_ACCESS_RESOLVE_SYMLINKS")),
            diagnostics=_env_truthy(env.get("FILE_ACCESS_DIAGNOSTICS")),
            host=(env.get("HOST") or _DEFAULT_HOST).strip(),
            port=port,
        )
