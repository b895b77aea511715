"""Ошибки, которые прерывают текущий запуск приложения."""


class WeatherAppError(Exception):
    """Базовая ошибка приложения: сообщение печатается пользователю в stderr."""


class InvalidChoice(WeatherAppError):
    pass


class OutOfRange(WeatherAppError):
    pass


class InvalidLatitude(WeatherAppError):
    pass


class InvalidLongitude(WeatherAppError):
    pass


class InvalidReportKind(WeatherAppError):
    pass


class RequestFailed(WeatherAppError):
    """Сетевая ошибка, неуспешный HTTP-статус или нечитаемый JSON."""
