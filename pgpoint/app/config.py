from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict


def _parse_simple_env(text: str) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        k, v = line.split("=", 1)
        out[k.strip()] = v.strip()
    return out


def load_env_file(path: Path) -> Dict[str, str]:
    """Seed os.environ from a KEY=VALUE file. Real environment wins."""
    if not path.exists():
        raise FileNotFoundError(f"Env file not found: {path}")

    values = _parse_simple_env(path.read_text(encoding="utf-8"))
    for k, v in values.items():
        os.environ.setdefault(k, v)
    return values


@dataclass(frozen=True)
class Settings:
    # --- NullPoint.scan ---
    # False: malformed column values collapse to NULL (compatible behaviour)
    nullpoint_strict: bool
    log_scan_failures: bool


_settings_cache: dict[str, Settings] = {}


def _is_truthy(v: str) -> bool:
    return v.strip().lower() in ("1", "true", "yes", "on")


def get_settings() -> Settings:
    global _settings_cache

    if "default" in _settings_cache:
        return _settings_cache["default"]

    env_file = os.getenv("PGPOINT_ENV_FILE", "").strip()
    if env_file:
        load_env_file(Path(env_file))

    s = Settings(
        nullpoint_strict=_is_truthy(os.getenv("PGPOINT_NULLPOINT_STRICT", "0")),
        log_scan_failures=_is_truthy(os.getenv("PGPOINT_LOG_SCAN_FAILURES", "1")),
    )

    _settings_cache["default"] = s
    return s


def reset_settings_cache() -> None:
    _settings_cache.clear()
