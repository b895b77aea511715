from typing import Any, Dict, List, Optional

from openmeteo_cli.api_client import ReportKind
from openmeteo_cli.errors import InvalidReportKind
from openmeteo_cli.locations import Coordinates


def _series(block: Dict[str, Any], key: str) -> Optional[List[Any]]:
    """Ряд значений из блока ответа; null, не-список и пустой список считаются отсутствием."""
    values = block.get(key)
    if not isinstance(values, list) or not values:
        return None
    return values


def _unit(response: Dict[str, Any], units_key: str, field: str, default: str) -> str:
    units = response.get(units_key)
    if isinstance(units, dict) and isinstance(units.get(field), str):
        return units[field]
    return default


def _reading(value: Any, unit: str) -> str:
    # null внутри ряда: за этот день у API нет значения
    if value is None:
        return "N/A"
    return f"{value}{unit}"


def _current_lines(response: Dict[str, Any]) -> List[str]:
    hourly = response.get("hourly")
    if not isinstance(hourly, dict):
        return ["No hourly data available."]

    lines = []
    temperatures = _series(hourly, "temperature_2m")
    if temperatures and temperatures[0] is not None:
        unit = _unit(response, "hourly_units", "temperature_2m", "°C")
        lines.append(f"Current temperature: {temperatures[0]}{unit}")
    else:
        lines.append("No temperature data available.")

    precipitation = _series(hourly, "precipitation_probability")
    if precipitation and precipitation[0] is not None:
        unit = _unit(response, "hourly_units", "precipitation_probability", "%")
        lines.append(f"Precipitation probability: {precipitation[0]}{unit}")
    else:
        lines.append("No precipitation data available.")
    return lines


def _weekly_lines(response: Dict[str, Any]) -> List[str]:
    daily = response.get("daily")
    if not isinstance(daily, dict):
        return ["No daily data available."]

    minimums = _series(daily, "temperature_2m_min")
    maximums = _series(daily, "temperature_2m_max")
    if not minimums or not maximums:
        return ["No min/max temperature data available."]

    dates = _series(daily, "time")
    if not dates:
        return ["No date data available."]

    min_unit = _unit(response, "daily_units", "temperature_2m_min", "°C")
    max_unit = _unit(response, "daily_units", "temperature_2m_max", "°C")
    # Ряды могут отличаться по длине: лишние значения отбрасываются
    return [
        f"{date}: min {_reading(low, min_unit)}, max {_reading(high, max_unit)}"
        for date, low, high in zip(dates, minimums, maximums)
    ]


def interpret(response: Dict[str, Any], kind: Any) -> List[str]:
    """Превратить ответ API в строки отчёта.

    Отсутствующие поля не являются ошибкой: вместо значения выводится сообщение.
    """
    if kind is ReportKind.CURRENT:
        return _current_lines(response)
    if kind is ReportKind.WEEKLY_MIN_MAX:
        return _weekly_lines(response)
    raise InvalidReportKind(f"Invalid report kind: {kind!r}")


def report_title(kind: ReportKind, coords: Coordinates) -> str:
    place = f"{coords.latitude}, {coords.longitude}"
    if coords.timezone:
        place = f"{place} ({coords.timezone})"
    if kind is ReportKind.WEEKLY_MIN_MAX:
        return f"7-day min/max temperatures for {place}"
    return f"Current weather for {place}"
