"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import logging

import pytest

import f1results.api_logging as api_logging
from f1results.config import get_settings

BASE_URL = "https://api.openf1.org/v1"


SAMPLE_MEETING = {
    "circuit_key": 2,
    "circuit_short_name": "Silverstone",
    "country_code": "GBR",
    "country_name": "United Kingdom",
    "date_start": "2024-07-05T11:30:00+00:00",
    "location": "Silverstone",
    "meeting_key": 1240,
    "meeting_name": "British Grand Prix",
    "meeting_official_name": "FORMULA 1 QATAR AIRWAYS BRITISH GRAND PRIX 2024",
    "year": 2024,
}

SAMPLE_MONACO = {
    "circuit_short_name": "Monte Carlo",
    "date_start": "2024-05-24T11:30:00+00:00",
    "location": "Monaco",
    "meeting_key": 1236,
    "meeting_name": "Monaco Grand Prix",
    "meeting_official_name": "FORMULA 1 GRAND PRIX DE MONACO 2024",
    "year": 2024,
}

SAMPLE_SESSIONS = [
    {
        "meeting_key": 1240,
        "session_key": 9553,
        "session_name": "Qualifying",
        "session_type": "Qualifying",
        "date_start": "2024-07-06T14:00:00+00:00",
        "date_end": "2024-07-06T15:00:00+00:00",
    },
    {
        "meeting_key": 1240,
        "session_key": 9558,
        "session_name": "Race",
        "session_type": "Race",
        "date_start": "2024-07-07T14:00:00+00:00",
        "date_end": "2024-07-07T16:00:00+00:00",
    },
]

SAMPLE_DRIVERS = [
    {
        "country_code": "GBR",
        "driver_number": 44,
        "first_name": "Lewis",
        "full_name": "Lewis HAMILTON",
        "last_name": "Hamilton",
        "name_acronym": "HAM",
        "session_key": 9558,
        "team_name": "Mercedes",
    },
    {
        "country_code": "NED",
        "driver_number": 1,
        "first_name": "Max",
        "full_name": "Max VERSTAPPEN",
        "last_name": "Verstappen",
        "name_acronym": "VER",
        "session_key": 9558,
        "team_name": "Red Bull Racing",
    },
    {
        "country_code": "GBR",
        "driver_number": 4,
        "first_name": "Lando",
        "full_name": "Lando NORRIS",
        "last_name": "Norris",
        "name_acronym": "NOR",
        "session_key": 9558,
        "team_name": "McLaren",
    },
    {
        "country_code": "AUS",
        "driver_number": 81,
        "first_name": "Oscar",
        "full_name": "Oscar PIASTRI",
        "last_name": "Piastri",
        "name_acronym": "PIA",
        "session_key": 9558,
        "team_name": "McLaren",
    },
]

# Running order changes during the race; the last record per driver is final.
# Final order: HAM, VER, NOR, PIA
SAMPLE_POSITIONS = [
    {"session_key": 9558, "driver_number": 44, "position": 2, "date": "2024-07-07T14:03:00+00:00"},
    {"session_key": 9558, "driver_number": 1, "position": 4, "date": "2024-07-07T14:03:00+00:00"},
    {"session_key": 9558, "driver_number": 4, "position": 1, "date": "2024-07-07T14:03:00+00:00"},
    {"session_key": 9558, "driver_number": 81, "position": 3, "date": "2024-07-07T14:03:00+00:00"},
    {"session_key": 9558, "driver_number": 44, "position": 1, "date": "2024-07-07T15:20:00+00:00"},
    {"session_key": 9558, "driver_number": 4, "position": 3, "date": "2024-07-07T15:20:00+00:00"},
    {"session_key": 9558, "driver_number": 1, "position": 2, "date": "2024-07-07T15:25:00+00:00"},
    {"session_key": 9558, "driver_number": 81, "position": 4, "date": "2024-07-07T15:26:00+00:00"},
]

SAMPLE_WEATHER = [
    {
        "session_key": 9558,
        "date": "2024-07-07T14:00:00+00:00",
        "air_temperature": 17.5,
        "track_temperature": 28.0,
        "humidity": 70.0,
        "rainfall": 0,
    },
    {
        "session_key": 9558,
        "date": "2024-07-07T14:30:00+00:00",
        "air_temperature": 16.5,
        "track_temperature": 24.0,
        "humidity": 80.0,
        "rainfall": 1,
    },
]


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture(autouse=True)
def log_file(tmp_path):
    """Send API log output to a per-test file and reset the cached logger."""
    named_logger = logging.getLogger(api_logging.LOGGER_NAME)

    def drop_file_handlers() -> None:
        # Handlers attached by pytest's log capture are left alone
        for h in named_logger.handlers[:]:
            if isinstance(h, logging.FileHandler):
                h.close()
                named_logger.removeHandler(h)

    drop_file_handlers()
    old_file = api_logging._LOG_FILE
    api_logging._logger = None
    api_logging._LOG_FILE = str(tmp_path / "logs" / "api_calls.log")

    yield tmp_path / "logs" / "api_calls.log"

    drop_file_handlers()
    api_logging._logger = None
    api_logging._LOG_FILE = old_file


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached per process; reset so env patches take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
