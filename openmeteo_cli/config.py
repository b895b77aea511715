import logging
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_URL = "https://api.open-meteo.com/v1/forecast"
DEFAULT_TIMEOUT = 10.0

FORECAST_API_URL = os.getenv("FORECAST_API_URL") or DEFAULT_API_URL
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")


def _read_timeout(raw: Optional[str]) -> float:
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT
    return value if value > 0 else DEFAULT_TIMEOUT


REQUEST_TIMEOUT = _read_timeout(os.getenv("REQUEST_TIMEOUT"))


def setup_logging(log_level: str = LOG_LEVEL) -> None:
    """Настроить корневой логгер: вывод в stderr, чтобы не мешать отчёту в stdout."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
