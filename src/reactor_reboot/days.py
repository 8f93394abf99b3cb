"""
Day dispatch table.

Maps a day of the challenge calendar to its `(part1, part2)` solvers. Each
solver takes the raw puzzle input text and returns the integer answer. Days
without a solver in this repository map to `(None, None)`.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple

from .config import FIRST_DAY, LAST_DAY
from .evaluation import solve_part1, solve_part2


DayFn = Callable[[str], int]
DaySolvers = Tuple[Optional[DayFn], Optional[DayFn]]


DAY_SOLVERS: Dict[int, DaySolvers] = {
    22: (solve_part1, solve_part2),
}


def get_day(day: int) -> DaySolvers:
    """
    Return the `(part1, part2)` solvers for `day`.

    Raises
    ------
    ValueError
        If `day` is not on the calendar.
    """
    if day < FIRST_DAY or day > LAST_DAY:
        raise ValueError(f"Unknown day: {day}. Expected {FIRST_DAY}..{LAST_DAY}.")
    return DAY_SOLVERS.get(day, (None, None))


def available_days() -> List[int]:
    """Days with at least one solver, in ascending order."""
    return sorted(
        day for day, parts in DAY_SOLVERS.items() if any(p is not None for p in parts)
    )


__all__ = [
    "DayFn",
    "DaySolvers",
    "DAY_SOLVERS",
    "get_day",
    "available_days",
]
