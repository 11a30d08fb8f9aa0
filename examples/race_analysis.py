"""Season analysis example: standings, a head-to-head and one driver's year."""

import asyncio
import sys

from f1results import tools


async def analyze_season(season: int, driver: str) -> None:
    print(await tools.championship_analysis(season, include_driver_comparison=True))
    print()
    print(await tools.analyze_driver_performance(driver, season))
    print()
    print(await tools.race_weather_analysis(season, "Silverstone"))


if __name__ == "__main__":
    season = int(sys.argv[1]) if len(sys.argv) > 1 else 2024
    driver = sys.argv[2] if len(sys.argv) > 2 else "Hamilton"
    asyncio.run(analyze_season(season, driver))
