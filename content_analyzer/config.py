"""
Runtime configuration for the Web Content Analyzer.

Settings come from the process environment (optionally seeded from a .env
file) and are built once at startup, then passed explicitly to the pieces
that need them.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional, Union

from dotenv import load_dotenv

from .analysis import DEFAULT_MODEL

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000
DEFAULT_FETCH_TIMEOUT = 30.0
DEFAULT_ANALYSIS_TIMEOUT = 120.0
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s - %(message)s'


@dataclass(frozen=True)
class Settings:
    gemini_api_key: Optional[str]
    gemini_model: str = DEFAULT_MODEL
    port: int = DEFAULT_PORT
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    analysis_timeout: float = DEFAULT_ANALYSIS_TIMEOUT
    log_level: str = 'INFO'


def _env_number(name: str, default, cast):
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw.strip())
    except ValueError:
        logger.warning("Invalid %s=%r, using default %s", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Non-positive %s=%r, using default %s", name, raw, default)
        return default
    return value


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Build Settings from the environment.

    Args:
        env_file: Optional path to a .env file. When omitted, python-dotenv
            searches upward from the working directory. Values already in the
            environment win over the file.

    Returns:
        Frozen Settings instance
    """
    load_dotenv(env_file)

    return Settings(
        gemini_api_key=os.environ.get('GEMINI_API_KEY') or None,
        gemini_model=os.environ.get('GEMINI_MODEL') or DEFAULT_MODEL,
        port=_env_number('PORT', DEFAULT_PORT, int),
        fetch_timeout=_env_number('FETCH_TIMEOUT_SECONDS', DEFAULT_FETCH_TIMEOUT, float),
        analysis_timeout=_env_number('ANALYSIS_TIMEOUT_SECONDS', DEFAULT_ANALYSIS_TIMEOUT, float),
        log_level=(os.environ.get('LOG_LEVEL') or 'INFO').upper(),
    )


def configure_logging(level: Union[str, int, None] = None) -> None:
    """Configure root logging to stream to the console."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    logging.basicConfig(level=level, format=LOG_FORMAT)
