"""Meeting (Grand Prix weekend) model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


def _contains(value: str | None, term: str) -> bool:
    return value is not None and term.lower() in value.lower()


class Meeting(BaseModel):
    """Grand Prix weekend or test event."""

    model_config = ConfigDict(frozen=True)

    circuit_key: int | None = None
    circuit_short_name: str | None = None
    country_code: str | None = None
    country_name: str | None = None
    date_start: datetime | None = None
    location: str | None = None
    meeting_key: int | None = None
    meeting_name: str | None = None
    meeting_official_name: str | None = None
    year: int | None = None

    @property
    def display_name(self) -> str:
        """Best available human-readable name for the meeting."""
        return self.meeting_name or self.location or f"Meeting {self.meeting_key}"

    def matches_location(self, term: str) -> bool:
        """Case-insensitive substring match on location, meeting name or circuit."""
        return (
            _contains(self.location, term)
            or _contains(self.meeting_name, term)
            or _contains(self.circuit_short_name, term)
        )

    def matches_circuit(self, term: str) -> bool:
        """Case-insensitive substring match on location or circuit short name."""
        return _contains(self.location, term) or _contains(self.circuit_short_name, term)
