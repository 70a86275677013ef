# amuse/config/__init__.py
"""
Lightweight config package initializer (no app imports, no cycles).

Rules:
- Read from env when present, else use the defaults below.
- Every value is resolved once at import; tests patch the module attributes.
"""

from __future__ import annotations
import os, json
from typing import List

from dotenv import load_dotenv
load_dotenv()  # ensure .env loads even in python shell


# ----------------- helpers -----------------
def _env_bool(name: str, default: bool = False) -> bool:
    v = os.getenv(name)
    if v is None: return default
    s = v.strip().lower()
    if s in ("1","true","yes","on"): return True
    if s in ("0","false","no","off",""): return False
    return True

def _env_str(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else str(v)

def _env_list(name: str, default: List[str] | None = None) -> List[str]:
    raw = os.getenv(name)
    if not raw: return list(default or [])
    s = raw.strip()
    if s.startswith("["):
        try:
            val = json.loads(s)
            if isinstance(val, list): return [str(x).strip() for x in val]
        except ValueError:
            pass
    return [item.strip() for item in s.split(",") if item.strip()]

def _env_int(name: str, default: int) -> int:
    try:
        return int(_env_str(name, str(default)))
    except ValueError:
        return default

def _env_float(name: str, default: float) -> float:
    try:
        return float(_env_str(name, str(default)))
    except ValueError:
        return default


# ----------------- app metadata -----------------
APP_VERSION: str = _env_str("APP_VERSION", "0.1.0")

# ----------------- server -----------------
AMUSE_HOST: str = _env_str("AMUSE_HOST", "0.0.0.0")
AMUSE_PORT: int = _env_int("AMUSE_PORT", 9863)

# Browser widgets poll /query cross-origin
AMUSE_CORS_ORIGINS: List[str] = _env_list("AMUSE_CORS_ORIGINS", default=["*"])

AMUSE_LOG_LEVEL: str = _env_str("AMUSE_LOG_LEVEL", "INFO").upper()

# uvicorn per-request access lines
AMUSE_ACCESS_LOG: bool = _env_bool("AMUSE_ACCESS_LOG", False)

# ----------------- state provider -----------------
# Local bridge exposing the player object as JSON
AMUSE_PLAYER_STATE_URL: str = _env_str("AMUSE_PLAYER_STATE_URL", "http://127.0.0.1:27232/player")

# 0 → wait for the player forever
AMUSE_PROVIDER_TIMEOUT_SECONDS: float = _env_float("AMUSE_PROVIDER_TIMEOUT_SECONDS", 0.0)

# ----------------- protocol constants -----------------
SONG_URL_TEMPLATE: str = "https://music.163.com/song?id={id}"


def provider_timeout() -> float | None:
    """Configured provider read timeout in seconds, or None when disabled."""
    return AMUSE_PROVIDER_TIMEOUT_SECONDS if AMUSE_PROVIDER_TIMEOUT_SECONDS > 0 else None


__all__ = [
    # meta
    "APP_VERSION",
    # server
    "AMUSE_HOST","AMUSE_PORT","AMUSE_CORS_ORIGINS","AMUSE_LOG_LEVEL","AMUSE_ACCESS_LOG",
    # provider
    "AMUSE_PLAYER_STATE_URL","AMUSE_PROVIDER_TIMEOUT_SECONDS","provider_timeout",
    # protocol
    "SONG_URL_TEMPLATE",
]
