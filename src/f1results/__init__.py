"""f1results: race results and season analysis over the OpenF1 API."""

from f1results.analysis import (
    analyze_driver_performance,
    analyze_race_weather,
    analyze_race_weekend,
    analyze_season_standings,
    compare_drivers_across_season,
)
from f1results.client import RaceDataClient
from f1results.exceptions import (
    F1APIError,
    F1ConnectionError,
    F1ResultsError,
    F1TimeoutError,
    F1ValidationError,
)
from f1results.scoring import POINTS_TABLE, matches_driver_name, points_for_position

__all__ = [
    "F1APIError",
    "F1ConnectionError",
    "F1ResultsError",
    "F1TimeoutError",
    "F1ValidationError",
    "POINTS_TABLE",
    "RaceDataClient",
    "analyze_driver_performance",
    "analyze_race_weather",
    "analyze_race_weekend",
    "analyze_season_standings",
    "compare_drivers_across_season",
    "matches_driver_name",
    "points_for_position",
]

__version__ = "0.1.0"
