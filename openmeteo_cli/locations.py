import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple

from openmeteo_cli.errors import InvalidChoice, InvalidLatitude, InvalidLongitude, OutOfRange

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float
    timezone: str


@dataclass(frozen=True)
class City:
    name: str
    latitude: float
    longitude: float
    timezone: str

    def coordinates(self) -> Coordinates:
        return Coordinates(self.latitude, self.longitude, self.timezone)


CITIES: Tuple[City, ...] = (
    City("Adelaide, Australia", -34.9285, 138.6007, "Australia/Adelaide"),
    City("Melbourne, Australia", -37.8136, 144.9631, "Australia/Melbourne"),
    City("London, UK", 51.5072, -0.1276, "Europe/London"),
    City("Beijing, China", 39.9042, 116.4074, "Asia/Shanghai"),
)


def custom_choice(cities: Sequence[City] = CITIES) -> str:
    """Номер пункта меню для ввода координат вручную (всегда последний)."""
    return str(len(cities) + 1)


def menu_lines(cities: Sequence[City] = CITIES) -> Iterator[str]:
    for index, city in enumerate(cities, start=1):
        yield f"{index} — {city.name}"
    yield f"{custom_choice(cities)} — Custom coordinates"


def resolve(menu_input: str, cities: Sequence[City] = CITIES) -> Optional[Coordinates]:
    """Перевести выбор из меню в координаты города.

    Возвращает None, если выбран пункт ручного ввода: тогда вызывающий код
    должен запросить широту, долготу и часовой пояс и вызвать resolve_custom.
    """
    choice_text = menu_input.strip()
    if choice_text == custom_choice(cities):
        return None

    try:
        choice = int(choice_text)
    except ValueError:
        raise InvalidChoice(f"Invalid choice: {choice_text!r}") from None

    if choice < 1 or choice > len(cities):
        raise OutOfRange(f"Choice out of range: {choice} (expected 1-{len(cities)})")

    city = cities[choice - 1]
    logger.info("Выбран город %s (%s, %s)", city.name, city.latitude, city.longitude)
    return city.coordinates()


def resolve_custom(lat_text: str, lon_text: str, tz_text: str) -> Coordinates:
    """Собрать координаты из ручного ввода.

    Диапазон широты и долготы не проверяется, часовой пояс берётся как есть.
    """
    try:
        latitude = float(lat_text.strip())
    except ValueError:
        raise InvalidLatitude(f"Invalid latitude: {lat_text.strip()!r}") from None
    try:
        longitude = float(lon_text.strip())
    except ValueError:
        raise InvalidLongitude(f"Invalid longitude: {lon_text.strip()!r}") from None

    timezone = tz_text.strip()
    logger.info("Ручные координаты: %s, %s (%s)", latitude, longitude, timezone or "без пояса")
    return Coordinates(latitude, longitude, timezone)
