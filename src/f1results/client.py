"""Async client for the racing-data API."""

from __future__ import annotations

import asyncio
from typing import Any, TypeVar

from pydantic import TypeAdapter

from f1results._http import AsyncTransport
from f1results._query import build_query_params
from f1results.api_logging import get_logger, log_api_call
from f1results.config import get_settings
from f1results.exceptions import F1ResultsError, F1ValidationError
from f1results.models import Driver, Meeting, Position, RaceResult, Session, Weather
from f1results.results import assemble_race_results, podium

T = TypeVar("T")


def _validate_list(model_type: type[T], data: list[dict[str, Any]]) -> list[T]:
    """Validate a list of dicts against a Pydantic model."""
    try:
        adapter = TypeAdapter(list[model_type])
        return adapter.validate_python(data)
    except Exception as exc:
        raise F1ValidationError(
            f"Failed to validate {model_type.__name__} response: {exc}"
        ) from exc


class RaceDataClient:
    """Asynchronous client for race meetings, sessions, positions and drivers.

    Usage:
        async with RaceDataClient() as f1:
            podium = await f1.get_podium_winners(2024, "Silverstone")

    ``base_url`` and ``timeout`` default to the values in
    :func:`f1results.config.get_settings`.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        settings = get_settings()
        self._transport = AsyncTransport(
            base_url=base_url or settings.base_url,
            timeout=timeout if timeout is not None else settings.timeout,
        )

    async def __aenter__(self) -> RaceDataClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    async def _get(self, endpoint: str, model: type[T], **kwargs: Any) -> list[T]:
        params = build_query_params(**kwargs)
        data = await self._transport.get(endpoint, params)
        return _validate_list(model, data)

    # ── Lookups ────────────────────────────────────────────────

    @log_api_call
    async def get_meetings(self, year: int, location: str | None = None) -> list[Meeting]:
        """Get the meetings of a season, optionally narrowed by a location hint.

        The hint is first sent upstream as an exact filter. If that finds
        nothing, every meeting of the year is fetched and matched by
        case-insensitive substring on location, meeting name or circuit.
        An empty hint means no hint.
        """
        location = location or None
        meetings = await self._get("/meetings", Meeting, year=year, location=location)
        if location and not meetings:
            every_meeting = await self._get("/meetings", Meeting, year=year)
            return [m for m in every_meeting if m.matches_location(location)]
        return meetings

    @log_api_call
    async def get_sessions(self, meeting_key: int) -> list[Session]:
        """Get all sessions of a meeting in upstream order."""
        return await self._get("/sessions", Session, meeting_key=meeting_key)

    @log_api_call
    async def get_race_session(self, meeting_key: int) -> Session | None:
        """Get the first session of a meeting whose type is ``"Race"``."""
        sessions = await self.get_sessions(meeting_key)
        return next((s for s in sessions if s.is_race), None)

    @log_api_call
    async def get_positions(self, session_key: int) -> list[Position]:
        """Get every position change recorded in a session."""
        return await self._get("/position", Position, session_key=session_key)

    @log_api_call
    async def get_drivers(self, session_key: int) -> list[Driver]:
        """Get driver information for a session."""
        return await self._get("/drivers", Driver, session_key=session_key)

    @log_api_call
    async def get_weather(self, session_key: int) -> list[Weather]:
        """Get track weather samples for a session."""
        return await self._get("/weather", Weather, session_key=session_key)

    # ── Assembled results ──────────────────────────────────────

    @log_api_call
    async def get_race_results(self, session_key: int) -> list[RaceResult]:
        """Get the final classification of a session, sorted by position."""
        positions, drivers = await asyncio.gather(
            self.get_positions(session_key),
            self.get_drivers(session_key),
        )
        return assemble_race_results(positions, drivers)

    @log_api_call
    async def get_podium_winners(self, year: int, location: str) -> list[RaceResult] | None:
        """Get the top three finishers of a race, or None if it cannot be resolved.

        Never raises: lookup misses and fetch errors both yield None and a
        warning in the API log.
        """
        logger = get_logger()
        try:
            meetings = await self.get_meetings(year, location)
            if not meetings:
                logger.warning("No meeting found for %r in %d", location, year)
                return None
            meeting = meetings[0]

            race_session = await self.get_race_session(meeting.meeting_key)
            if race_session is None:
                logger.warning("No race session for meeting %s", meeting.meeting_key)
                return None

            results = await self.get_race_results(race_session.session_key)
        except F1ResultsError as exc:
            logger.warning("Error getting podium winners for %r %d: %s", location, year, exc)
            return None
        return podium(results)
