"""Multi-race aggregation built on the client's single-race primitives."""

from __future__ import annotations

import statistics
from dataclasses import dataclass, field
from enum import StrEnum

from f1results.api_logging import get_logger, log_service_call
from f1results.client import RaceDataClient
from f1results.exceptions import F1ResultsError
from f1results.models import Meeting, RaceResult, Session, Weather
from f1results.results import podium
from f1results.scoring import find_driver_result, is_podium, is_win, points_for_position


class OutcomeStatus(StrEnum):
    OK = "ok"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class MeetingOutcome:
    """What happened to one meeting during a season scan."""

    meeting: Meeting
    status: OutcomeStatus
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.OK


@dataclass(frozen=True)
class DriverStanding:
    driver_number: int
    name: str
    team_name: str | None
    points: int
    wins: int
    podiums: int
    races: int


@dataclass(frozen=True)
class SeasonStandings:
    season: int
    total_races: int
    winners: list[int]
    trends: list[str]
    standings: list[DriverStanding]
    outcomes: list[MeetingOutcome]

    @property
    def races_analyzed(self) -> int:
        return sum(1 for o in self.outcomes if o.ok)

    @property
    def skipped(self) -> list[MeetingOutcome]:
        return [o for o in self.outcomes if not o.ok]


@dataclass
class DriverTally:
    """Running totals for one side of a comparison."""

    driver: int | str
    name: str | None = None
    wins: int = 0
    podiums: int = 0
    points: int = 0
    positions: list[int] = field(default_factory=list)

    def record(self, result: RaceResult) -> None:
        position = result.position
        self.name = self.name or result.driver.display_name
        self.positions.append(position)
        self.points += points_for_position(position)
        if is_win(position):
            self.wins += 1
        if is_podium(position):
            self.podiums += 1

    @property
    def average_position(self) -> float | None:
        return statistics.mean(self.positions) if self.positions else None


@dataclass
class HeadToHead:
    driver1_ahead: int = 0
    driver2_ahead: int = 0
    equal: int = 0


@dataclass(frozen=True)
class RaceComparison:
    race: str
    driver1_position: int
    driver2_position: int


@dataclass(frozen=True)
class DriverComparison:
    season: int
    driver1: DriverTally
    driver2: DriverTally
    head_to_head: HeadToHead
    race_by_race: list[RaceComparison]
    outcomes: list[MeetingOutcome]


@dataclass(frozen=True)
class RaceFinish:
    race: str
    position: int
    points: int


@dataclass(frozen=True)
class DriverPerformance:
    driver_name: str
    season: int
    circuits: list[str]
    races: list[RaceFinish]
    outcomes: list[MeetingOutcome]

    @property
    def races_analyzed(self) -> int:
        return len(self.races)

    @property
    def total_points(self) -> int:
        return sum(r.points for r in self.races)

    @property
    def podiums(self) -> int:
        return sum(1 for r in self.races if is_podium(r.position))

    @property
    def wins(self) -> int:
        return sum(1 for r in self.races if is_win(r.position))

    @property
    def average_position(self) -> float | None:
        """Points per race analysed, reported under the "Average Position" label.

        Kept for parity with existing reports; see mean_finishing_position
        for the mean of actual finishing positions.
        """
        if not self.races:
            return None
        return self.total_points / self.races_analyzed

    @property
    def mean_finishing_position(self) -> float | None:
        if not self.races:
            return None
        return statistics.mean(r.position for r in self.races)


@dataclass(frozen=True)
class SessionSummary:
    session: Session
    status: OutcomeStatus
    top_three: list[RaceResult]
    reason: str | None = None


@dataclass(frozen=True)
class RaceWeekend:
    meeting: Meeting
    sessions: list[SessionSummary]


@dataclass(frozen=True)
class ReadingRange:
    minimum: float
    maximum: float
    mean: float


@dataclass(frozen=True)
class RaceWeather:
    meeting: Meeting
    session: Session
    podium: list[RaceResult]
    samples: int
    air_temperature: ReadingRange | None
    track_temperature: ReadingRange | None
    mean_humidity: float | None
    rainfall: bool


# ── Helpers ────────────────────────────────────────────────────


def _skip(meeting: Meeting, reason: str) -> MeetingOutcome:
    get_logger().warning("Skipping %s: %s", meeting.display_name, reason)
    return MeetingOutcome(meeting, OutcomeStatus.SKIPPED, reason)


async def _load_race(
    client: RaceDataClient,
    meeting: Meeting,
) -> tuple[list[RaceResult] | None, MeetingOutcome]:
    """Resolve a meeting's race classification, or a skip outcome explaining why not."""
    try:
        race_session = await client.get_race_session(meeting.meeting_key)
        if race_session is None:
            return None, _skip(meeting, "no race session")
        results = await client.get_race_results(race_session.session_key)
    except F1ResultsError as exc:
        return None, _skip(meeting, str(exc))
    return results, MeetingOutcome(meeting, OutcomeStatus.OK)


def _classified(result: RaceResult | None) -> RaceResult | None:
    if result is None or result.position is None:
        return None
    return result


def _reading_range(values: list[float]) -> ReadingRange | None:
    if not values:
        return None
    return ReadingRange(min(values), max(values), statistics.mean(values))


# ── Season standings ───────────────────────────────────────────


@log_service_call
async def analyze_season_standings(client: RaceDataClient, season: int) -> SeasonStandings:
    """Scan every meeting of a season for winners and simplified points.

    A meeting that has no race session or whose fetches fail is recorded as
    skipped and the scan continues.
    """
    meetings = await client.get_meetings(season)
    outcomes: list[MeetingOutcome] = []
    winners: set[int] = set()
    tallies: dict[int, DriverTally] = {}
    teams: dict[int, str | None] = {}

    for meeting in meetings:
        results, outcome = await _load_race(client, meeting)
        outcomes.append(outcome)
        if results is None:
            continue

        for result in results:
            if _classified(result) is None:
                continue
            number = result.driver_number
            tallies.setdefault(number, DriverTally(number)).record(result)
            teams[number] = result.driver.team_name
            if is_win(result.position):
                winners.add(number)

    standings = sorted(
        (
            DriverStanding(
                driver_number=number,
                name=tally.name or f"Driver {number}",
                team_name=teams.get(number),
                points=tally.points,
                wins=tally.wins,
                podiums=tally.podiums,
                races=len(tally.positions),
            )
            for number, tally in tallies.items()
        ),
        key=lambda s: (-s.points, -s.wins, s.driver_number),
    )

    trends = [f"Season had {len(meetings)} races"]
    if winners:
        trends.append(f"{len(winners)} drivers showed consistent top performance")

    return SeasonStandings(
        season=season,
        total_races=len(meetings),
        winners=sorted(winners),
        trends=trends,
        standings=standings,
        outcomes=outcomes,
    )


# ── Head-to-head ───────────────────────────────────────────────


@log_service_call
async def compare_drivers_across_season(
    client: RaceDataClient,
    season: int,
    driver1: int | str,
    driver2: int | str,
) -> DriverComparison:
    """Compare two drivers over every race where both were classified.

    Drivers are given by car number or by (partial) name. Races missing
    either driver count for neither side.
    """
    meetings = await client.get_meetings(season)
    tally1 = DriverTally(driver1)
    tally2 = DriverTally(driver2)
    head_to_head = HeadToHead()
    race_by_race: list[RaceComparison] = []
    outcomes: list[MeetingOutcome] = []

    for meeting in meetings:
        results, outcome = await _load_race(client, meeting)
        if results is None:
            outcomes.append(outcome)
            continue

        result1 = _classified(find_driver_result(results, driver1))
        result2 = _classified(find_driver_result(results, driver2))
        if result1 is None or result2 is None:
            outcomes.append(_skip(meeting, "no classified result for both drivers"))
            continue
        outcomes.append(outcome)

        tally1.record(result1)
        tally2.record(result2)
        race_by_race.append(
            RaceComparison(meeting.display_name, result1.position, result2.position),
        )

        if result1.position < result2.position:
            head_to_head.driver1_ahead += 1
        elif result2.position < result1.position:
            head_to_head.driver2_ahead += 1
        else:
            head_to_head.equal += 1

    return DriverComparison(
        season=season,
        driver1=tally1,
        driver2=tally2,
        head_to_head=head_to_head,
        race_by_race=race_by_race,
        outcomes=outcomes,
    )


# ── Single-driver performance ──────────────────────────────────


@log_service_call
async def analyze_driver_performance(
    client: RaceDataClient,
    driver_name: str,
    season: int,
    circuits: list[str] | None = None,
) -> DriverPerformance:
    """Collect a driver's finishes across a season, optionally only at some circuits."""
    circuits = circuits or []
    meetings = await client.get_meetings(season)
    if circuits:
        meetings = [m for m in meetings if any(m.matches_circuit(c) for c in circuits)]

    races: list[RaceFinish] = []
    outcomes: list[MeetingOutcome] = []
    for meeting in meetings:
        results, outcome = await _load_race(client, meeting)
        if results is None:
            outcomes.append(outcome)
            continue

        result = _classified(find_driver_result(results, driver_name))
        if result is None:
            outcomes.append(_skip(meeting, f"no classified result for {driver_name}"))
            continue
        outcomes.append(outcome)
        races.append(
            RaceFinish(
                race=meeting.display_name,
                position=result.position,
                points=points_for_position(result.position),
            ),
        )

    return DriverPerformance(
        driver_name=driver_name,
        season=season,
        circuits=circuits,
        races=races,
        outcomes=outcomes,
    )


# ── Race weekend ───────────────────────────────────────────────


@log_service_call
async def analyze_race_weekend(
    client: RaceDataClient,
    year: int,
    location: str,
) -> RaceWeekend | None:
    """Summarise the top three of every session of a weekend."""
    meetings = await client.get_meetings(year, location)
    if not meetings:
        return None
    meeting = meetings[0]

    summaries: list[SessionSummary] = []
    for session in await client.get_sessions(meeting.meeting_key):
        try:
            results = await client.get_race_results(session.session_key)
        except F1ResultsError as exc:
            get_logger().warning("Skipping session %s: %s", session.session_name, exc)
            summaries.append(SessionSummary(session, OutcomeStatus.SKIPPED, [], str(exc)))
            continue
        summaries.append(SessionSummary(session, OutcomeStatus.OK, podium(results)))

    return RaceWeekend(meeting=meeting, sessions=summaries)


# ── Race weather ───────────────────────────────────────────────


def summarise_weather(
    meeting: Meeting,
    session: Session,
    top_three: list[RaceResult],
    weather: list[Weather],
) -> RaceWeather:
    humidity = [w.humidity for w in weather if w.humidity is not None]
    return RaceWeather(
        meeting=meeting,
        session=session,
        podium=top_three,
        samples=len(weather),
        air_temperature=_reading_range(
            [w.air_temperature for w in weather if w.air_temperature is not None],
        ),
        track_temperature=_reading_range(
            [w.track_temperature for w in weather if w.track_temperature is not None],
        ),
        mean_humidity=statistics.mean(humidity) if humidity else None,
        rainfall=any(w.is_raining for w in weather),
    )


@log_service_call
async def analyze_race_weather(
    client: RaceDataClient,
    year: int,
    location: str,
) -> RaceWeather | None:
    """Weather conditions during a race alongside its podium."""
    meetings = await client.get_meetings(year, location)
    if not meetings:
        return None
    meeting = meetings[0]

    race_session = await client.get_race_session(meeting.meeting_key)
    if race_session is None:
        return None

    results = await client.get_race_results(race_session.session_key)
    try:
        weather = await client.get_weather(race_session.session_key)
    except F1ResultsError as exc:
        get_logger().warning("No weather for session %s: %s", race_session.session_key, exc)
        weather = []

    return summarise_weather(meeting, race_session, podium(results), weather)
