from __future__ import annotations

import os
import sys
from typing import Optional

from loguru import logger

DEFAULT_BACKEND_URL = "http://localhost:8000"
DEFAULT_TIMEOUT_S = 60.0

_logging_configured = False


def get_backend_url() -> str:
    """URL du backend de prédiction, surchargeable via env var (Docker/CI)."""
    url = os.getenv("BACKEND_API_URL") or DEFAULT_BACKEND_URL
    return url.strip().rstrip("/")


def get_timeout() -> float:
    raw = os.getenv("BACKEND_TIMEOUT_S")
    if not raw:
        return DEFAULT_TIMEOUT_S
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"BACKEND_TIMEOUT_S invalide ({raw!r}), fallback {DEFAULT_TIMEOUT_S}s")
        return DEFAULT_TIMEOUT_S


def configure_logging(level: Optional[str] = None) -> None:
    """Un seul sink stderr (Streamlit relance les scripts à chaque interaction)."""
    global _logging_configured
    if _logging_configured and level is None:
        return

    level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format="{time:HH:mm:ss} | {level: <8} | {name}:{function} - {message}")
    _logging_configured = True
