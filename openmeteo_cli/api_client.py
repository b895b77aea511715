import logging
from enum import Enum
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import requests

from openmeteo_cli.config import FORECAST_API_URL, REQUEST_TIMEOUT
from openmeteo_cli.errors import InvalidReportKind, RequestFailed
from openmeteo_cli.locations import Coordinates

logger = logging.getLogger(__name__)


class ReportKind(Enum):
    CURRENT = "current"
    WEEKLY_MIN_MAX = "weekly_min_max"


HOURLY_FIELDS = "temperature_2m,precipitation_probability"
DAILY_FIELDS = "temperature_2m_min,temperature_2m_max"

# Номера пунктов меню отчёта
REPORT_CHOICES = {
    "1": ReportKind.CURRENT,
    "2": ReportKind.WEEKLY_MIN_MAX,
}


def parse_report_kind(text: str) -> ReportKind:
    choice = text.strip()
    try:
        return REPORT_CHOICES[choice]
    except KeyError:
        raise InvalidReportKind(f"Invalid report choice: {choice!r}") from None


def build_target(coords: Coordinates, kind: Any, base_url: str = FORECAST_API_URL) -> Optional[str]:
    """Собрать URL запроса прогноза.

    Для неизвестного вида отчёта возвращает None; сеть в этом случае не трогаем.
    """
    params: Dict[str, str] = {
        "latitude": str(coords.latitude),
        "longitude": str(coords.longitude),
    }
    if kind is ReportKind.CURRENT:
        params["hourly"] = HOURLY_FIELDS
    elif kind is ReportKind.WEEKLY_MIN_MAX:
        params["daily"] = DAILY_FIELDS
    else:
        return None
    params["timezone"] = coords.timezone

    # "/" и "," оставляем как есть: Australia/Adelaide, temperature_2m,precipitation_probability
    return f"{base_url}?{urlencode(params, safe='/,')}"


def fetch_forecast(url: str, timeout: float = REQUEST_TIMEOUT) -> Dict[str, Any]:
    """Один GET-запрос без повторов, ответ разбирается как JSON-объект."""
    logger.debug("GET %s", url)
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise RequestFailed(f"Network error: {e}") from e

    if not response.ok:
        raise RequestFailed(f"Forecast request failed with status {response.status_code}")

    try:
        data = response.json()
    except ValueError as e:
        raise RequestFailed(f"Could not decode forecast response: {e}") from e

    if not isinstance(data, dict):
        raise RequestFailed("Unexpected forecast response format")

    logger.info("Прогноз получен (%s байт)", len(response.content))
    return data


def get_forecast(coords: Coordinates, kind: Any) -> Dict[str, Any]:
    url = build_target(coords, kind)
    if url is None:
        raise InvalidReportKind(f"Invalid report kind: {kind!r}")
    return fetch_forecast(url)
