"""Pure result-assembly functions over fetched position and driver records."""

from __future__ import annotations

from collections.abc import Iterable

from f1results.models import Driver, Position, RaceResult

PODIUM_SIZE = 3


def _is_later(candidate: Position, current: Position) -> bool:
    """True when *candidate* carries a strictly later timestamp than *current*."""
    if candidate.date is None:
        return False
    if current.date is None:
        return True
    return candidate.date > current.date


def final_positions(positions: Iterable[Position]) -> list[Position]:
    """Reduce a position time series to the latest record per driver.

    Only a strictly later timestamp replaces the current record, so arrival
    order never matters. Records without a driver number are ignored.
    Drivers appear in the order they were first seen.
    """
    latest: dict[int, Position] = {}
    for pos in positions:
        if pos.driver_number is None:
            continue
        current = latest.get(pos.driver_number)
        if current is None or _is_later(pos, current):
            latest[pos.driver_number] = pos
    return list(latest.values())


def _position_sort_key(result: RaceResult) -> tuple[bool, int]:
    # Unclassified entries sort after every numbered position
    return (result.position is None, result.position or 0)


def join_drivers(positions: Iterable[Position], drivers: Iterable[Driver]) -> list[RaceResult]:
    """Join final positions with drivers and sort by finishing position.

    Positions without a matching driver are dropped. The sort is stable, so
    tied positions keep their input order.
    """
    by_number: dict[int, Driver] = {}
    for driver in drivers:
        if driver.driver_number is not None:
            by_number.setdefault(driver.driver_number, driver)

    results = [
        RaceResult.from_position(pos, by_number[pos.driver_number])
        for pos in positions
        if pos.driver_number in by_number
    ]
    results.sort(key=_position_sort_key)
    return results


def assemble_race_results(
    positions: Iterable[Position],
    drivers: Iterable[Driver],
) -> list[RaceResult]:
    """Final classification of a session: reduce, join, sort."""
    return join_drivers(final_positions(positions), drivers)


def podium(results: list[RaceResult]) -> list[RaceResult]:
    """Top three of an already sorted classification (fewer if fewer exist)."""
    return results[:PODIUM_SIZE]
