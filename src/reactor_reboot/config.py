"""
Global configuration for the Reactor Reboot project.

This module centralizes:

- Project-root and data paths
- The day number this repository solves by default
- The bounds of the initialization region used by part 1

All of these are kept in one place so that scripts, tests and notebooks
agree on where inputs live and which region part 1 looks at.
"""

from __future__ import annotations

from pathlib import Path

from .geometry import Cuboid, Point3


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

# This file lives in: <repo>/src/reactor_reboot/config.py
# Project root is therefore two levels up from here.
PROJECT_ROOT: Path = Path(__file__).resolve().parents[2]

DATA_DIR: Path = PROJECT_ROOT / "data"
DATA_INPUTS_DIR: Path = DATA_DIR / "inputs"


# ---------------------------------------------------------------------------
# Puzzle selection
# ---------------------------------------------------------------------------

DEFAULT_DAY: int = 22

# Days of the challenge calendar. Anything outside this range is an error.
FIRST_DAY: int = 1
LAST_DAY: int = 25


def day_input_filename(day: int) -> str:
    """
    Return the conventional input filename for `day`, e.g. 'day22.txt'.
    """
    return f"day{day:02d}.txt"


# ---------------------------------------------------------------------------
# Initialization region (part 1)
# ---------------------------------------------------------------------------

# Part 1 only considers instructions lying entirely within x,y,z in -50..50.
INIT_REGION_MIN: int = -50
INIT_REGION_MAX: int = 50

# Half-open, so the upper corner is one past the inclusive maximum.
INIT_REGION: Cuboid = Cuboid(
    Point3(INIT_REGION_MIN, INIT_REGION_MIN, INIT_REGION_MIN),
    Point3(INIT_REGION_MAX + 1, INIT_REGION_MAX + 1, INIT_REGION_MAX + 1),
)


__all__ = [
    # Paths
    "PROJECT_ROOT",
    "DATA_DIR",
    "DATA_INPUTS_DIR",
    # Puzzle selection
    "DEFAULT_DAY",
    "FIRST_DAY",
    "LAST_DAY",
    "day_input_filename",
    # Initialization region
    "INIT_REGION_MIN",
    "INIT_REGION_MAX",
    "INIT_REGION",
]
