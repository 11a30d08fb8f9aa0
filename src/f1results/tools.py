"""Text-producing handlers for an agent's tool layer.

Each handler takes primitive arguments, runs one lookup or analysis, and
returns a message ready to show to a user. Fetch failures become a short
descriptive message instead of an exception.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from f1results import analysis
from f1results.client import RaceDataClient
from f1results.exceptions import F1ResultsError
from f1results.formatters import (
    format_comparison,
    format_driver_performance,
    format_podium,
    format_race_calendar,
    format_race_results,
    format_race_weather,
    format_race_weekend,
    format_season_report,
)

DEFAULT_TOP_N = 10
DEFAULT_COMPARISON = (1, 44)
DATA_FOOTER = "---\n*Analysis completed using OpenF1 API data*"


@asynccontextmanager
async def _client_scope(client: RaceDataClient | None) -> AsyncIterator[RaceDataClient]:
    """Use the caller's client, or open (and close) a fresh one."""
    if client is not None:
        yield client
        return
    async with RaceDataClient() as owned:
        yield owned


async def get_podium_winners(
    year: int,
    location: str,
    client: RaceDataClient | None = None,
) -> str:
    async with _client_scope(client) as f1:
        top_three = await f1.get_podium_winners(year, location)
    if top_three is None:
        return (
            f"Could not find race results for {location} {year}. "
            "Please check the spelling and ensure the race has taken place."
        )
    return format_podium(top_three, f"{location} {year} Grand Prix")


async def get_race_results(
    year: int,
    location: str,
    top_n: int = DEFAULT_TOP_N,
    client: RaceDataClient | None = None,
) -> str:
    try:
        async with _client_scope(client) as f1:
            meetings = await f1.get_meetings(year, location)
            if not meetings:
                return (
                    f"Could not find race for {location} {year}. "
                    "Please check the spelling and ensure the race has taken place."
                )
            meeting = meetings[0]

            race_session = await f1.get_race_session(meeting.meeting_key)
            if race_session is None:
                return f"Could not find race session for {meeting.display_name} {year}."

            results = await f1.get_race_results(race_session.session_key)
    except F1ResultsError as exc:
        return f"Error fetching race results: {exc}"

    title = f"{meeting.display_name} {year} - Full Race Results"
    return format_race_results(results[:top_n], title)


async def list_races(year: int, client: RaceDataClient | None = None) -> str:
    try:
        async with _client_scope(client) as f1:
            meetings = await f1.get_meetings(year)
    except F1ResultsError as exc:
        return f"Error fetching races: {exc}"
    if not meetings:
        return f"No races found for {year}."
    return format_race_calendar(meetings, year)


async def championship_analysis(
    season: int,
    include_driver_comparison: bool = False,
    focus_teams: list[str] | None = None,
    drivers: tuple[int, int] = DEFAULT_COMPARISON,
    client: RaceDataClient | None = None,
) -> str:
    try:
        async with _client_scope(client) as f1:
            standings = await analysis.analyze_season_standings(f1, season)
            report = format_season_report(standings)

            if include_driver_comparison:
                report += "\n## Head-to-Head Analysis\n"
                try:
                    comparison = await analysis.compare_drivers_across_season(
                        f1, season, *drivers,
                    )
                except F1ResultsError:
                    report += "- Driver comparison data not available for this season\n"
                else:
                    report += format_comparison(comparison)
    except F1ResultsError as exc:
        return f"Championship analysis failed: {exc}"

    if focus_teams:
        report += "\n## Team Focus Analysis\n"
        for team in focus_teams:
            matches = [
                s for s in standings.standings
                if s.team_name and team.lower() in s.team_name.lower()
            ]
            if not matches:
                report += f"- **{team}**: no classified drivers found\n"
                continue
            points = sum(s.points for s in matches)
            names = ", ".join(s.name for s in matches)
            report += f"- **{team}**: {points} pts ({names})\n"

    return f"{report}\n{DATA_FOOTER}"


async def race_weekend_analysis(
    year: int,
    location: str,
    client: RaceDataClient | None = None,
) -> str:
    try:
        async with _client_scope(client) as f1:
            weekend = await analysis.analyze_race_weekend(f1, year, location)
    except F1ResultsError as exc:
        return f"Race weekend analysis failed: {exc}"
    if weekend is None:
        return f"No race found for {location} in {year}"
    return f"{format_race_weekend(weekend)}\n{DATA_FOOTER}"


async def analyze_driver_performance(
    driver_name: str,
    season: int,
    circuits: list[str] | None = None,
    client: RaceDataClient | None = None,
) -> str:
    try:
        async with _client_scope(client) as f1:
            performance = await analysis.analyze_driver_performance(
                f1, driver_name, season, circuits,
            )
    except F1ResultsError as exc:
        return f"Error analyzing driver performance: {exc}"
    return format_driver_performance(performance)


async def compare_drivers(
    driver1: str,
    driver2: str,
    season: int,
    client: RaceDataClient | None = None,
) -> str:
    try:
        async with _client_scope(client) as f1:
            comparison = await analysis.compare_drivers_across_season(
                f1, season, driver1, driver2,
            )
    except F1ResultsError as exc:
        return f"Error comparing drivers: {exc}"
    if not comparison.race_by_race:
        return f"No races in {season} where both {driver1} and {driver2} were classified."
    return format_comparison(comparison)


async def race_weather_analysis(
    year: int,
    location: str,
    client: RaceDataClient | None = None,
) -> str:
    try:
        async with _client_scope(client) as f1:
            weather = await analysis.analyze_race_weather(f1, year, location)
    except F1ResultsError as exc:
        return f"Error analyzing race weather: {exc}"
    if weather is None:
        return f"No race found for {location} {year}"
    return format_race_weather(weather)
