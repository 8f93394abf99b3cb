"""
Evaluation utilities for the Reactor Reboot project.

This module turns parsed instructions into puzzle answers:

1. Optionally keep only the instructions lying entirely within a region
   (part 1 uses the -50..50 initialization region).
2. Run the toggle-volume engine over the remaining instructions, in order.
3. Report either the total on-volume or a per-instruction breakdown.

The per-instruction breakdown (`contribution_table`) is handy in notebooks
for checking which instructions actually own cells at the end.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from .config import INIT_REGION
from .geometry import Cuboid
from .parsing import parse_instructions
from .power import PowerCuboid, net_contributions, total_on_volume


# Type alias for clarity
ContributionTable = pd.DataFrame

BOUNDS_COLUMNS = ["x0", "y0", "z0", "x1", "y1", "z1"]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def instruction_bounds(instructions: Sequence[PowerCuboid]) -> np.ndarray:
    """
    Return an (N, 6) integer array of `(x0, y0, z0, x1, y1, z1)` rows.
    """
    if not instructions:
        return np.empty((0, 6), dtype=np.int64)
    return np.array([p.cuboid.bounds for p in instructions], dtype=np.int64)


def restrict_to_region(
    instructions: Sequence[PowerCuboid],
    region: Cuboid = INIT_REGION,
) -> List[PowerCuboid]:
    """
    Keep only the instructions whose cuboid lies entirely inside `region`.

    Order is preserved. Partially overlapping instructions are dropped, not
    clipped.
    """
    bounds = instruction_bounds(instructions)
    if bounds.shape[0] == 0:
        return []

    lo = np.array(region.bottom_left.as_tuple(), dtype=np.int64)
    hi = np.array(region.top_right.as_tuple(), dtype=np.int64)

    mask = np.all(bounds[:, :3] >= lo, axis=1) & np.all(bounds[:, 3:] <= hi, axis=1)
    return [p for p, keep in zip(instructions, mask) if keep]


# ---------------------------------------------------------------------------
# Puzzle answers
# ---------------------------------------------------------------------------

def solve_part1(text: str) -> int:
    """
    Cells left on after applying only the instructions inside the
    initialization region.
    """
    instructions = restrict_to_region(parse_instructions(text), INIT_REGION)
    return total_on_volume(instructions)


def solve_part2(text: str) -> int:
    """
    Cells left on after applying every instruction.
    """
    return total_on_volume(parse_instructions(text))


# ---------------------------------------------------------------------------
# Per-instruction breakdown
# ---------------------------------------------------------------------------

def contribution_table(instructions: Sequence[PowerCuboid]) -> ContributionTable:
    """
    Build a per-instruction table of how much on-volume each one owns.

    Returns
    -------
    ContributionTable (pd.DataFrame)
        Columns:
        - idx: position of the instruction in the input order
        - state: "on" or "off"
        - x0, y0, z0, x1, y1, z1: half-open cuboid bounds
        - volume: cells covered by the instruction
        - net_volume: cells the instruction still owns at the end
          (always 0 for "off"); sums to the total on-volume
    """
    bounds = instruction_bounds(instructions)
    table = pd.DataFrame(bounds, columns=BOUNDS_COLUMNS)
    table.insert(0, "idx", np.arange(len(instructions), dtype=np.int64))
    table.insert(1, "state", [p.state_label for p in instructions])
    table["volume"] = [p.cuboid.volume() for p in instructions]
    table["net_volume"] = net_contributions(instructions)
    return table


def evaluate_input_file(
    path: Union[str, Path],
    region: Optional[Cuboid] = None,
) -> Tuple[ContributionTable, int]:
    """
    Load an input file and compute its contribution table and total on-volume.

    Parameters
    ----------
    path:
        Path to a puzzle input text file.
    region:
        If given, only instructions entirely inside it are considered.

    Returns
    -------
    table:
        Per-instruction breakdown (see `contribution_table`).
    total:
        Sum of `net_volume` over all rows.
    """
    input_path = Path(path)
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")

    instructions = parse_instructions(input_path.read_text())
    if region is not None:
        instructions = restrict_to_region(instructions, region)

    table = contribution_table(instructions)
    total = int(table["net_volume"].sum()) if len(table) else 0
    return table, total


__all__ = [
    "ContributionTable",
    "BOUNDS_COLUMNS",
    "instruction_bounds",
    "restrict_to_region",
    "solve_part1",
    "solve_part2",
    "contribution_table",
    "evaluate_input_file",
]
