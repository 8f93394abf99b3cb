"""
Toggle-volume engine for the Reactor Reboot project.

Each puzzle instruction is a `PowerCuboid`: a cuboid plus the state it sets
its cells to. Given the instructions in the order they are applied, this
module computes how many cells are left on, without ever enumerating cells.

Algorithm
---------

For every "on" instruction we compute its *net* contribution: its own volume
minus whatever part of it is claimed by any later instruction. The claimed
part is found recursively:

1. Intersect the instruction with each later instruction, keeping the
   overlaps that share at least one cell, in order (the "conflicts").
   Each overlap takes the state of the later instruction.
2. Each conflict is itself treated as an instruction whose later
   instructions are the conflicts after it; its net contribution is the
   volume it claims that nothing still later claims again.
3. The sum of those net contributions is the claimed volume.

Every cell ends up attributed to the last instruction covering it, so "off"
instructions need no volume of their own: they only shrink the net
contribution of earlier "on" instructions.

The recursion branches once per overlapping later instruction, so the worst
case is exponential in the number of mutually overlapping instructions.
Inputs of a few hundred sparsely overlapping cuboids finish quickly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .geometry import Cuboid


# ---------------------------------------------------------------------------
# PowerCuboid: one on/off instruction
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PowerCuboid:
    """
    A "set this cuboid on/off" instruction.

    - cuboid: the region affected
    - power_state: True for "on", False for "off"

    Instances created from intersections only live for the duration of a
    volume computation.
    """

    cuboid: Cuboid
    power_state: bool

    @property
    def state_label(self) -> str:
        return "on" if self.power_state else "off"

    def contains(self, volume: Cuboid) -> bool:
        """True if this instruction's cuboid lies entirely within `volume`."""
        return self.cuboid.contains(volume)

    inside = contains

    def intersect(self, other: "PowerCuboid") -> Optional["PowerCuboid"]:
        """
        Overlap of `self` with a *later* instruction `other`, or None.

        The result carries `other`'s power state: the later instruction
        decides what the overlapping cells end up as.
        """
        overlap = self.cuboid.intersect(other.cuboid)
        if overlap is None:
            return None
        return PowerCuboid(cuboid=overlap, power_state=other.power_state)

    def compute_on_volume(self, later: Sequence["PowerCuboid"]) -> int:
        """
        Net volume this instruction still owns once every instruction in
        `later` (those applied strictly after it, in order) has been applied.

        Raises
        ------
        RuntimeError
            If the claimed volume exceeds this instruction's own volume.
            Every conflict is a sub-region of `self`, so this indicates a
            geometry bug and is never clamped.
        """
        conflicts: List[PowerCuboid] = []
        for instruction in later:
            overlap = self.intersect(instruction)
            # Touching boxes overlap in zero cells and can claim nothing.
            if overlap is not None and overlap.cuboid.volume() > 0:
                conflicts.append(overlap)

        conflict_volume = sum(
            conflict.compute_on_volume(conflicts[idx + 1:])
            for idx, conflict in enumerate(conflicts)
        )

        own_volume = self.cuboid.volume()
        if conflict_volume > own_volume:
            raise RuntimeError(
                f"Conflict volume {conflict_volume} exceeds own volume "
                f"{own_volume} for {self!r}."
            )
        return own_volume - conflict_volume


# ---------------------------------------------------------------------------
# Whole-list helpers
# ---------------------------------------------------------------------------

def net_contributions(instructions: Sequence[PowerCuboid]) -> List[int]:
    """
    Net on-volume owned by each instruction after the whole list is applied.

    "Off" instructions always own 0. The list is read in the given order and
    never modified.
    """
    contributions: List[int] = []
    for idx, instruction in enumerate(instructions):
        if instruction.power_state:
            contributions.append(instruction.compute_on_volume(instructions[idx + 1:]))
        else:
            contributions.append(0)
    return contributions


def total_on_volume(instructions: Sequence[PowerCuboid]) -> int:
    """
    Number of cells left on after applying `instructions` in order.
    """
    return sum(net_contributions(instructions))


__all__ = [
    "PowerCuboid",
    "net_contributions",
    "total_on_volume",
]
