import logging
import sys
from typing import Sequence

from openmeteo_cli.api_client import ReportKind, get_forecast, parse_report_kind
from openmeteo_cli.errors import WeatherAppError
from openmeteo_cli.locations import CITIES, City, Coordinates, menu_lines, resolve, resolve_custom
from openmeteo_cli.report import interpret, report_title

logger = logging.getLogger(__name__)


def ask(prompt: str) -> str:
    """input(), но конец ввода читается как пустая строка."""
    try:
        return input(prompt)
    except EOFError:
        return ""


def choose_location(cities: Sequence[City] = CITIES) -> Coordinates:
    print("\n" + "=" * 60)
    print("Select a city:")
    print("=" * 60)
    for line in menu_lines(cities):
        print(line)

    coords = resolve(ask("Enter the number of your choice: "), cities)
    if coords is not None:
        return coords

    lat_text = ask("Enter latitude: ")
    lon_text = ask("Enter longitude: ")
    tz_text = ask("Enter timezone (e.g. Europe/London): ")
    return resolve_custom(lat_text, lon_text, tz_text)


def choose_report() -> ReportKind:
    print("\nSelect report:")
    print("1 — Current temperature and precipitation")
    print("2 — 7-day min/max temperatures")
    return parse_report_kind(ask("Enter the number of your choice: "))


def run_cli(cities: Sequence[City] = CITIES) -> int:
    """Один проход: город → вид отчёта → запрос → вывод. Возвращает код выхода."""
    try:
        coords = choose_location(cities)
        kind = choose_report()
        forecast = get_forecast(coords, kind)
        lines = interpret(forecast, kind)
    except WeatherAppError as e:
        logger.debug("Запуск прерван: %s", type(e).__name__)
        print(e, file=sys.stderr)
        return 1

    print(f"\n{'=' * 60}")
    print(report_title(kind, coords))
    print("=" * 60)
    for line in lines:
        print(line)
    print("=" * 60)

    ask("\nPress Enter to exit...")
    return 0
