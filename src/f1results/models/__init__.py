"""Racing-data record models."""

from f1results.models.driver import Driver
from f1results.models.meeting import Meeting
from f1results.models.position import Position
from f1results.models.race_result import RaceResult
from f1results.models.session import Session
from f1results.models.weather import Weather

__all__ = [
    "Driver",
    "Meeting",
    "Position",
    "RaceResult",
    "Session",
    "Weather",
]
