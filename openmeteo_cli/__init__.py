"""Консольный прогноз погоды по Open-Meteo."""

__version__ = "0.1.0"
