"""Session model (practice, qualifying, sprint, race)."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

RACE_SESSION_TYPE = "Race"


class Session(BaseModel):
    """F1 session (practice, qualifying, sprint, race)."""

    model_config = ConfigDict(frozen=True)

    circuit_short_name: str | None = None
    date_end: datetime | None = None
    date_start: datetime | None = None
    location: str | None = None
    meeting_key: int | None = None
    session_key: int | None = None
    session_name: str | None = None
    session_type: str | None = None
    year: int | None = None

    @property
    def is_race(self) -> bool:
        """True when the session type is exactly ``"Race"``."""
        return self.session_type == RACE_SESSION_TYPE
