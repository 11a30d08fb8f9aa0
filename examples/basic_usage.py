"""Basic usage examples for the f1results client."""

import asyncio

from f1results import RaceDataClient


async def main() -> None:
    async with RaceDataClient() as f1:
        # Get all 2024 meetings (Grand Prix weekends)
        print("=== 2024 Meetings ===")
        meetings = await f1.get_meetings(2024)
        for m in meetings[:5]:
            print(f"  {m.meeting_name} - {m.location}, {m.country_name}")

        if not meetings:
            print("  No meetings found.")
            return

        meeting = meetings[0]
        print(f"\n=== Sessions for {meeting.display_name} ===")
        for s in await f1.get_sessions(meeting.meeting_key):
            print(f"  {s.session_name} ({s.session_type})")

        race = await f1.get_race_session(meeting.meeting_key)
        if race is None:
            print("  No race session found.")
            return

        print(f"\n=== Classification (session_key={race.session_key}) ===")
        for r in await f1.get_race_results(race.session_key):
            print(f"  P{r.position} #{r.driver_number} {r.driver.display_name} - {r.driver.team_name}")

        print("\n=== Weather ===")
        weather = await f1.get_weather(race.session_key)
        if weather:
            w = weather[0]
            print(f"  Air: {w.air_temperature}°C, Track: {w.track_temperature}°C")
            print(f"  Humidity: {w.humidity}%, Rain: {'yes' if w.is_raining else 'no'}")

        # Podium lookup by location, as a tool would do it
        podium = await f1.get_podium_winners(2024, "Silverstone")
        if podium:
            print("\n=== Silverstone podium ===")
            for r in podium:
                print(f"  P{r.position}: {r.driver.display_name}")


if __name__ == "__main__":
    asyncio.run(main())
