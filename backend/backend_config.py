"""
Configuration module for the Love Note backend.

Loads environment variables from .env file and exposes them as module-level constants.
"""

import logging
import os

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load environment variables from .env file
load_dotenv()


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Invalid {name}={raw!r}, using {default}")
        return default


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid {name}={raw!r}, using {default}")
        return default


def _get_log_level(name: str, default: str) -> str:
    raw = os.getenv(name, "").strip().upper()
    if not raw:
        return default
    if not isinstance(logging.getLevelName(raw), int):
        logger.warning(f"Invalid {name}={raw!r}, using {default}")
        return default
    return raw


# Gemini Configuration
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "").strip()
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-flash").strip()
GEMINI_API_BASE = os.getenv(
    "GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1beta/models"
).strip()
GEMINI_TIMEOUT_SECONDS = _get_float("GEMINI_TIMEOUT_SECONDS", 20.0)

# Server Configuration
HOST = os.getenv("HOST", "0.0.0.0").strip()
PORT = _get_int("PORT", 3001)
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]
LOG_LEVEL = _get_log_level("LOG_LEVEL", "INFO")

# Prompt templates (empty means the bundled list)
PROMPT_TEMPLATES_PATH = os.getenv("PROMPT_TEMPLATES_PATH", "").strip()

# Day the count starts from (YYYY-MM-DD)
ANNIVERSARY_DATE = os.getenv("ANNIVERSARY_DATE", "2025-02-04").strip()
