"""
Input parsing for the Reactor Reboot project.

Each non-blank line of the puzzle input has the form

    on x=10..12,y=10..12,z=10..12
    off x=-48..-32,y=26..41,z=-47..-37

Bounds are signed integers and *inclusive*; they may appear in either
order. We normalize each axis to the half-open range

    (min(lo, hi), max(lo, hi) + 1)

which is the convention used by `reactor_reboot.geometry.Cuboid`.
"""

from __future__ import annotations

import re
from typing import List

from .geometry import AxisRange, Cuboid
from .power import PowerCuboid


_INT = r"(-?[0-9]+)"
_AXIS = rf"{_INT}\.\.{_INT}"

INSTRUCTION_RE = re.compile(
    rf"\s*(?P<state>on|off)\s*x={_AXIS},y={_AXIS},z={_AXIS}\s*"
)


def _axis_range(lo: str, hi: str) -> AxisRange:
    a, b = int(lo), int(hi)
    return (min(a, b), max(a, b) + 1)


def parse_instruction(line: str) -> PowerCuboid:
    """
    Parse a single instruction line into a `PowerCuboid`.

    Raises
    ------
    ValueError
        If the line does not match `<on|off> x=<lo>..<hi>,y=<lo>..<hi>,z=<lo>..<hi>`.
    """
    match = INSTRUCTION_RE.fullmatch(line)
    if match is None:
        raise ValueError(
            f"Malformed instruction {line.strip()!r}. "
            "Expected format like 'on x=10..12,y=10..12,z=10..12'."
        )

    bounds = match.groups()[1:]
    cuboid = Cuboid.from_ranges(
        _axis_range(bounds[0], bounds[1]),
        _axis_range(bounds[2], bounds[3]),
        _axis_range(bounds[4], bounds[5]),
    )
    return PowerCuboid(cuboid=cuboid, power_state=match.group("state") == "on")


def parse_instructions(text: str) -> List[PowerCuboid]:
    """
    Parse a whole puzzle input into instructions, in input order.

    Blank lines are skipped. A malformed line raises `ValueError` naming its
    1-based line number.
    """
    instructions: List[PowerCuboid] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            instructions.append(parse_instruction(line))
        except ValueError as exc:
            raise ValueError(f"Line {lineno}: {exc}") from exc
    return instructions


__all__ = [
    "INSTRUCTION_RE",
    "parse_instruction",
    "parse_instructions",
]
