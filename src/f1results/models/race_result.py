"""Race result model: a final position joined with its driver."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from f1results.models.driver import Driver
from f1results.models.position import Position


class RaceResult(BaseModel):
    """One driver's final classification in a session."""

    model_config = ConfigDict(frozen=True)

    date: datetime | None = None
    driver_number: int | None = None
    meeting_key: int | None = None
    position: int | None = None
    session_key: int | None = None
    driver: Driver

    @classmethod
    def from_position(cls, position: Position, driver: Driver) -> RaceResult:
        """Build a result from a final position record and its driver."""
        return cls(**position.model_dump(), driver=driver)
