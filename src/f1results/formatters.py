"""Text formatting helpers for race results and analysis reports."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from f1results.models import Meeting, RaceResult

if TYPE_CHECKING:
    from f1results.analysis import (
        DriverComparison,
        DriverPerformance,
        RaceWeather,
        RaceWeekend,
        ReadingRange,
        SeasonStandings,
    )

_PLACES = ("1st Place", "2nd Place", "3rd Place")


def format_date(value: datetime | None) -> str:
    """Format a timestamp as YYYY-MM-DD or '—' if None."""
    if value is None:
        return "—"
    return value.date().isoformat()


def format_average(value: float | None) -> str:
    """Format an average to one decimal place or 'N/A' if None."""
    if value is None:
        return "N/A"
    return f"{value:.1f}"


def _driver_line(result: RaceResult) -> str:
    driver = result.driver
    acronym = f" ({driver.name_acronym})" if driver.name_acronym else ""
    team = f" - {driver.team_name}" if driver.team_name else ""
    return f"**{driver.display_name}**{acronym}{team}"


def format_race_results(results: list[RaceResult], title: str) -> str:
    if not results:
        return "No results found for this race."
    lines = [f"**{title}**", ""]
    for result in results:
        lines.append(f"P{result.position}. {_driver_line(result)}")
    return "\n".join(lines) + "\n"


def format_podium(podium: list[RaceResult], race_info: str) -> str:
    if not podium:
        return f"No podium results found for {race_info}."
    lines = [f"**{race_info} - Podium Winners**", ""]
    for place, result in zip(_PLACES, podium):
        driver = result.driver
        lines.append(f"**{place}**: {driver.display_name} ({driver.name_acronym or '???'})")
        lines.append(f"   Team: {driver.team_name or '—'}")
        lines.append(f"   Country: {driver.country_code or '—'}")
        lines.append("")
    return "\n".join(lines)


def format_race_calendar(meetings: list[Meeting], year: int) -> str:
    lines = [f"**Formula 1 {year} Race Calendar**", ""]
    for idx, meeting in enumerate(meetings, start=1):
        lines.append(f"{idx}. **{meeting.display_name}** - {meeting.location or '—'}")
        lines.append(
            f"   {format_date(meeting.date_start)} | {meeting.circuit_short_name or '—'}",
        )
        lines.append("")
    return "\n".join(lines)


def format_season_report(standings: SeasonStandings, top_n: int = 10) -> str:
    lines = [
        f"# {standings.season} Formula 1 Championship Analysis",
        "",
        "## Season Overview",
        f"- **Total Races**: {standings.total_races}",
        f"- **Races Analyzed**: {standings.races_analyzed}",
        "- **Key Trends**:",
    ]
    lines += [f"  - {trend}" for trend in standings.trends]

    if standings.standings:
        lines += ["", "## Points (simplified)"]
        for idx, row in enumerate(standings.standings[:top_n], start=1):
            team = f" ({row.team_name})" if row.team_name else ""
            lines.append(
                f"{idx}. {row.name}{team}: {row.points} pts, {row.wins} wins, {row.podiums} podiums",
            )

    if standings.skipped:
        lines += ["", "## Skipped Races"]
        lines += [f"- {o.meeting.display_name}: {o.reason}" for o in standings.skipped]
    return "\n".join(lines) + "\n"


def format_comparison(comparison: DriverComparison) -> str:
    d1, d2 = comparison.driver1, comparison.driver2
    label1 = d1.name or str(d1.driver)
    label2 = d2.name or str(d2.driver)
    h2h = comparison.head_to_head

    lines = [f"**Driver Comparison: {label1} vs {label2} ({comparison.season})**", ""]
    for label, tally in ((label1, d1), (label2, d2)):
        lines += [
            f"**{label}:**",
            f"- Wins: {tally.wins}",
            f"- Podiums: {tally.podiums}",
            f"- Points: {tally.points}",
            f"- Avg Position: {format_average(tally.average_position)}",
            "",
        ]
    lines.append(f"**Head-to-Head:** {label1} {h2h.driver1_ahead} - {h2h.driver2_ahead} {label2}")
    if h2h.equal:
        lines.append(f"**Equal finishes:** {h2h.equal}")

    if comparison.race_by_race:
        lines += ["", "**Race by race:**"]
        for race in comparison.race_by_race:
            lines.append(f"- {race.race}: P{race.driver1_position} vs P{race.driver2_position}")
    return "\n".join(lines) + "\n"


def format_driver_performance(performance: DriverPerformance) -> str:
    lines = [
        f"**{performance.driver_name} Performance Analysis - {performance.season} Season**",
        "",
    ]
    lines += [f"**{race.race}**: P{race.position}" for race in performance.races]
    lines += [
        "",
        "**Season Summary:**",
        f"- Races Analyzed: {performance.races_analyzed}",
        f"- Total Points: {performance.total_points}",
        f"- Podiums: {performance.podiums}",
        f"- Wins: {performance.wins}",
        f"- Average Position: {format_average(performance.average_position)}",
        f"- Mean Finishing Position: {format_average(performance.mean_finishing_position)}",
    ]
    return "\n".join(lines) + "\n"


def format_race_weekend(weekend: RaceWeekend) -> str:
    meeting = weekend.meeting
    lines = [
        f"# {meeting.meeting_official_name or meeting.display_name} Analysis",
        "",
        f"**Location**: {meeting.location or '—'}",
        f"**Circuit**: {meeting.circuit_short_name or '—'}",
        f"**Date**: {format_date(meeting.date_start)}",
        "",
        "## Session Analysis",
    ]
    for summary in weekend.sessions:
        session = summary.session
        lines += [
            "",
            f"### {session.session_name}",
            f"- **Type**: {session.session_type}",
            f"- **Date**: {format_date(session.date_start)} to {format_date(session.date_end)}",
        ]
        if summary.reason is not None:
            lines.append("- Session data not accessible")
        elif summary.top_three:
            top = ", ".join(
                f"P{r.position}: {r.driver.name_acronym or r.driver.display_name}"
                for r in summary.top_three
            )
            lines.append(f"- **Top 3**: {top}")
        else:
            lines.append("- No position data available")
    return "\n".join(lines) + "\n"


def _format_range(reading: ReadingRange | None, unit: str) -> str:
    if reading is None:
        return "—"
    return f"{reading.minimum:.1f}{unit} - {reading.maximum:.1f}{unit} (avg {reading.mean:.1f}{unit})"


def format_race_weather(weather: RaceWeather) -> str:
    meeting = weather.meeting
    title = meeting.display_name if meeting.year is None else f"{meeting.display_name} {meeting.year}"
    lines = [
        f"**Weather Analysis: {title}**",
        "",
        f"Race Date: {format_date(weather.session.date_start)}",
        f"Circuit: {meeting.circuit_short_name or '—'}",
        f"Location: {meeting.location or '—'}",
        "",
        "**Conditions:**",
        f"- Air temp: {_format_range(weather.air_temperature, '°C')}",
        f"- Track temp: {_format_range(weather.track_temperature, '°C')}",
        f"- Humidity: {format_average(weather.mean_humidity)}%",
        f"- Rain: {'Yes' if weather.rainfall else 'No'}",
        f"- Samples: {weather.samples}",
        "",
        "**Race Results (Top 3):**",
    ]
    for place, result in zip(_PLACES, weather.podium):
        lines.append(f"{place}: {result.driver.display_name} ({result.driver.team_name or '—'})")
    return "\n".join(lines) + "\n"
