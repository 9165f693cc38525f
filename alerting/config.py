from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional


def _str_env(environ: Mapping[str, str], name: str) -> Optional[str]:
    raw = str(environ.get(name, "") or "").strip()
    return raw or None


def _int_env(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = str(environ.get(name, str(default))).strip()
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = str(environ.get(name, str(default))).strip()
    try:
        value = float(raw)
    except Exception:
        return default
    return value if math.isfinite(value) else default


@dataclass(frozen=True)
class AlertingConfig:
    base_url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    timeout_seconds: float = 10.0
    sync_workers: int = 2
    queue_size: int = 100

    @property
    def enabled(self) -> bool:
        return bool(self.base_url)

    @property
    def has_credentials(self) -> bool:
        return bool(self.username or self.password)


def load_alerting_config(environ: Optional[Mapping[str, str]] = None) -> AlertingConfig:
    """Read the SEYREN_* variables once; callers pass the result around."""
    env = os.environ if environ is None else environ
    base_url = _str_env(env, "SEYREN_URL")
    return AlertingConfig(
        base_url=base_url.rstrip("/") if base_url else None,
        username=_str_env(env, "SEYREN_USERNAME"),
        password=_str_env(env, "SEYREN_PASSWORD"),
        timeout_seconds=max(_float_env(env, "SEYREN_TIMEOUT_SECONDS", 10.0), 0.1),
        sync_workers=max(_int_env(env, "SEYREN_SYNC_WORKERS", 2), 1),
        queue_size=max(_int_env(env, "SEYREN_SYNC_QUEUE_SIZE", 100), 1),
    )
