"""Simplified points model and driver-name matching."""

from __future__ import annotations

from collections.abc import Iterable

from f1results.models import Driver, RaceResult

# Points for P1..P10; everything else scores nothing
POINTS_TABLE: tuple[int, ...] = (25, 18, 15, 12, 10, 8, 6, 4, 2, 1)


def points_for_position(position: int | None) -> int:
    """Return championship points for a finishing position."""
    if position is None or position < 1 or position > len(POINTS_TABLE):
        return 0
    return POINTS_TABLE[position - 1]


def is_win(position: int | None) -> bool:
    return position == 1


def is_podium(position: int | None) -> bool:
    return position is not None and 1 <= position <= 3


def matches_driver_name(driver: Driver, name: str) -> bool:
    """Case-insensitive substring match of *name* in full name or last name.

    Only these two fields are considered; acronyms and first names are not.
    """
    needle = name.lower()
    return (
        (driver.full_name is not None and needle in driver.full_name.lower())
        or (driver.last_name is not None and needle in driver.last_name.lower())
    )


def find_driver_result(results: Iterable[RaceResult], driver: int | str) -> RaceResult | None:
    """First result for a driver given by number or by name."""
    for result in results:
        if isinstance(driver, int):
            if result.driver_number == driver:
                return result
        elif matches_driver_name(result.driver, driver):
            return result
    return None
