"""
Environment-driven settings. Loads .env from the project root once at import;
values are read from os.environ on every call so tests and long-running
servers see the current environment.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env", override=False)

DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; daily-puzzles/0.1)"
DEFAULT_STATIC_DIR = PROJECT_ROOT / "static"
DEFAULT_PORT = 8080

_BASE_URL_VARS = {
    "new": "BASE_URL_NEW",
    "old": "BASE_URL_OLD",
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env(name: str) -> str:
    """Return the variable stripped of whitespace and surrounding quotes ('' if unset)."""
    return (os.environ.get(name) or "").strip().strip('"').strip("'")


def get_base_url(kind: str) -> str:
    """
    Return the upstream base URL for "new" (JSON APIs) or "old" (HTML pages),
    without a trailing slash.
    """
    var = _BASE_URL_VARS.get(kind)
    if var is None:
        raise ValueError(f"Unknown base URL kind: {kind}. Expected one of {list(_BASE_URL_VARS)}")
    value = _env(var)
    if not value:
        raise ValueError(f"{var} required. Set {var} in the environment or .env.")
    return value.rstrip("/")


def get_request_timeout() -> float:
    raw = _env("REQUEST_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"REQUEST_TIMEOUT must be a number of seconds, got {raw!r}")
    if timeout <= 0:
        raise ValueError(f"REQUEST_TIMEOUT must be positive, got {raw!r}")
    return timeout


def get_user_agent() -> str:
    return _env("USER_AGENT") or DEFAULT_USER_AGENT


def get_static_dir() -> Path:
    """Directory that batch runs write to and the static app serves from."""
    raw = _env("STATIC_DIR")
    if not raw:
        return DEFAULT_STATIC_DIR
    path = Path(raw).expanduser()
    return path if path.is_absolute() else PROJECT_ROOT / path


def no_cache_enabled() -> bool:
    raw = _env("STATIC_NO_CACHE").lower()
    if not raw or raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(f"STATIC_NO_CACHE must be a boolean, got {raw!r}")


def get_host() -> str:
    return _env("HOST") or "0.0.0.0"


def get_port() -> int:
    raw = _env("PORT")
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {raw!r}")
