"""
Runtime configuration loaded from the environment (and an optional .env file).
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Tuple

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_AI_TIMEOUT_SEC = 10.0
DEFAULT_FIBONACCI_MAX = 1000


@dataclass(frozen=True)
class Settings:
    """Immutable service settings, built once at startup."""

    official_email: str
    gemini_api_key: Optional[str] = None
    gemini_model: str = DEFAULT_GEMINI_MODEL
    ai_timeout_sec: float = DEFAULT_AI_TIMEOUT_SEC
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    fibonacci_max: int = DEFAULT_FIBONACCI_MAX
    cors_origins: Tuple[str, ...] = field(default=("*",))

    @property
    def has_gemini_key(self) -> bool:
        return bool(self.gemini_api_key)


def _read_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: {raw!r}") from None


def _read_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got: {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got: {raw!r}")
    return value


def settings_from_env(env: Mapping[str, str]) -> Settings:
    """
    Build Settings from an environment mapping.

    Args:
        env: Mapping of variable names to values (usually os.environ)

    Returns:
        Settings instance

    Raises:
        ValueError: If a numeric variable cannot be parsed
    """
    official_email = env.get("OFFICIAL_EMAIL", "").strip()
    if not official_email:
        logger.warning("OFFICIAL_EMAIL is not set - responses will carry an empty email")

    fibonacci_max = _read_int(env, "FIBONACCI_MAX", DEFAULT_FIBONACCI_MAX)
    if fibonacci_max < 0:
        raise ValueError(f"FIBONACCI_MAX must be non-negative, got: {fibonacci_max}")

    origins = tuple(
        origin.strip()
        for origin in env.get("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    )

    return Settings(
        official_email=official_email,
        gemini_api_key=env.get("GEMINI_API_KEY", "").strip() or None,
        gemini_model=env.get("GEMINI_MODEL", "").strip() or DEFAULT_GEMINI_MODEL,
        ai_timeout_sec=_read_float(env, "AI_TIMEOUT_SECONDS", DEFAULT_AI_TIMEOUT_SEC),
        port=_read_int(env, "PORT", DEFAULT_PORT),
        host=env.get("HOST", "").strip() or DEFAULT_HOST,
        fibonacci_max=fibonacci_max,
        cors_origins=origins or ("*",),
    )


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Load .env (without overriding existing variables) and build Settings.

    Args:
        env_file: Path to a .env file (default: search from the working directory)

    Returns:
        Settings instance
    """
    load_dotenv(dotenv_path=env_file or find_dotenv(usecwd=True), override=False)
    return settings_from_env(os.environ)
