"""Weather data model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Weather(BaseModel):
    """Track weather sample (roughly one per minute)."""

    model_config = ConfigDict(frozen=True)

    air_temperature: float | None = None
    date: datetime | None = None
    humidity: float | None = None
    meeting_key: int | None = None
    rainfall: int | None = None
    session_key: int | None = None
    track_temperature: float | None = None
    wind_speed: float | None = None

    @property
    def is_raining(self) -> bool:
        return bool(self.rainfall)
