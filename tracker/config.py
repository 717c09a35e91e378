"""Environment configuration for the tracker."""

from __future__ import annotations

import math
import os
from typing import Optional, Tuple

from dotenv import load_dotenv

from tracker.logging_setup import get_logger

logger = get_logger(__name__)

DEFAULT_CATEGORIES: Tuple[str, ...] = (
    "Food",
    "Travel",
    "Transport",
    "Bills",
    "Entertainment",
    "Other",
)
DEFAULT_MAX_AMOUNT = 1000.0
DEFAULT_LOG_LEVEL = "INFO"


def _should_load_dotenv() -> bool:
    env = os.getenv("TRACKER_ENV", "dev").strip().lower()
    return env in {"dev", "local"}


if _should_load_dotenv():
    load_dotenv()


def get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(name, default)


def allowed_categories() -> Tuple[str, ...]:
    raw = get_env("TRACKER_CATEGORIES", "") or ""
    parsed = tuple(c.strip() for c in raw.split(",") if c.strip())
    return parsed or DEFAULT_CATEGORIES


def max_amount() -> float:
    raw = (get_env("TRACKER_MAX_AMOUNT", "") or "").strip()
    if not raw:
        return DEFAULT_MAX_AMOUNT
    try:
        value = float(raw)
    except ValueError:
        logger.warning("invalid TRACKER_MAX_AMOUNT=%r; using %s", raw, DEFAULT_MAX_AMOUNT)
        return DEFAULT_MAX_AMOUNT
    if not math.isfinite(value) or value <= 0:
        logger.warning("TRACKER_MAX_AMOUNT must be positive, got %r; using %s", raw, DEFAULT_MAX_AMOUNT)
        return DEFAULT_MAX_AMOUNT
    return value


def log_level() -> str:
    return (get_env("TRACKER_LOG_LEVEL", DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL).strip() or DEFAULT_LOG_LEVEL
