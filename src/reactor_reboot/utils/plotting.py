"""
Visualization helpers for the Reactor Reboot project.

These helpers are thin convenience wrappers around matplotlib for:
- Plotting the footprints of instructions projected onto an axis plane.
- Plotting how much on-volume each instruction owns at the end.

Typical usage in a notebook
---------------------------

    import matplotlib.pyplot as plt
    from reactor_reboot.parsing import parse_instructions
    from reactor_reboot.utils.plotting import plot_footprints

    instructions = parse_instructions(text)
    fig, ax = plt.subplots(figsize=(6, 6))
    plot_footprints(instructions, ax=ax, plane="xz")

You remain in control of figure creation and display.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import pandas as pd
from shapely.geometry import Polygon, box
from shapely.ops import unary_union

from ..geometry import Cuboid
from ..power import PowerCuboid


# Indices into Cuboid.bounds for each projection plane.
_PLANE_AXES = {
    "xy": (0, 1),
    "xz": (0, 2),
    "yz": (1, 2),
}

STATE_COLORS = {True: "tab:orange", False: "tab:blue"}


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def footprint(cuboid: Cuboid, plane: str = "xy") -> Polygon:
    """
    Project `cuboid` onto `plane` ("xy", "xz" or "yz") as a shapely box.
    """
    if plane not in _PLANE_AXES:
        raise ValueError(f"plane must be one of {sorted(_PLANE_AXES)}, got {plane!r}")
    a, b = _PLANE_AXES[plane]
    bounds = cuboid.bounds
    return box(bounds[a], bounds[b], bounds[a + 3], bounds[b + 3])


def _plot_polygon(ax, poly: Polygon, **kwargs) -> None:
    xs, ys = poly.exterior.xy
    color = kwargs.pop("color", None)
    ax.fill(xs, ys, alpha=kwargs.pop("alpha", 0.3), color=color)
    ax.plot(xs, ys, linewidth=kwargs.pop("linewidth", 0.8), color=color)


# ---------------------------------------------------------------------------
# Public plotting helpers
# ---------------------------------------------------------------------------

def plot_footprints(
    instructions: Sequence[PowerCuboid],
    ax=None,
    plane: str = "xy",
    region: Optional[Cuboid] = None,
    title: Optional[str] = None,
    padding: float = 1.0,
):
    """
    Plot every instruction's footprint on `plane`, colored by on/off state.

    Parameters
    ----------
    instructions:
        Instructions to draw, in input order (later ones drawn on top).
    ax:
        Optional matplotlib Axes. If None, a new figure and axes are created.
    plane:
        Projection plane: "xy", "xz" or "yz".
    region:
        If given, its footprint is drawn as a dashed outline.
    title:
        Optional plot title.
    padding:
        Extra margin around the drawn shapes.
    """
    if not instructions:
        raise ValueError("plot_footprints called with an empty list of instructions.")

    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))

    polys = [footprint(p.cuboid, plane) for p in instructions]
    for instruction, poly in zip(instructions, polys):
        _plot_polygon(ax, poly, color=STATE_COLORS[instruction.power_state])

    shapes = list(polys)
    if region is not None:
        region_poly = footprint(region, plane)
        xs, ys = region_poly.exterior.xy
        ax.plot(xs, ys, linestyle="--", linewidth=1.5, color="black")
        shapes.append(region_poly)

    minx, miny, maxx, maxy = unary_union(shapes).bounds
    ax.set_xlim(minx - padding, maxx + padding)
    ax.set_ylim(miny - padding, maxy + padding)
    ax.set_aspect("equal", adjustable="box")
    ax.set_xlabel(plane[0])
    ax.set_ylabel(plane[1])
    if title is not None:
        ax.set_title(title)

    return ax


def plot_contributions(
    table: pd.DataFrame,
    ax=None,
    title: Optional[str] = "Net on-volume per instruction",
    figsize: Tuple[float, float] = (8.0, 4.0),
):
    """
    Bar chart of `net_volume` per instruction from a contribution table
    (see `reactor_reboot.evaluation.contribution_table`).
    """
    if "net_volume" not in table.columns:
        raise ValueError("Expected column 'net_volume' in the contribution table.")

    if ax is None:
        _, ax = plt.subplots(figsize=figsize)

    colors = [STATE_COLORS[state == "on"] for state in table["state"]]
    ax.bar(table["idx"], table["net_volume"], color=colors)
    ax.set_xlabel("instruction")
    ax.set_ylabel("net on-volume")
    if title is not None:
        ax.set_title(title)

    return ax


__all__ = [
    "STATE_COLORS",
    "footprint",
    "plot_footprints",
    "plot_contributions",
]
