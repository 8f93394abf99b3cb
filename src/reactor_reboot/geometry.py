"""
Geometry primitives for the Reactor Reboot project.

This module defines:

- `Point3`: an integer coordinate in 3-space with componentwise helpers.
- `Cuboid`: an axis-aligned box of unit cells with volume, containment
  and intersection.

Coordinate convention
---------------------

Cuboids are **half-open** on every axis:

- `bottom_left` is inclusive.
- `top_right` is exclusive.

A cell at (x, y, z) lies in the cuboid iff

    bottom_left.x <= x < top_right.x   (and likewise for y and z)

so the volume is simply the product of per-axis extents, with no +1
correction. The parser converts the inclusive `lo..hi` ranges of the puzzle
input into this form.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


# Half-open (lo, hi) interval along one axis.
AxisRange = Tuple[int, int]


# ---------------------------------------------------------------------------
# Point3: integer coordinate
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Point3:
    """
    An integer point / cell coordinate in 3-space.

    Comparisons between points are *componentwise* and are exposed through
    explicit helpers (`all_le`, `all_ge`) rather than operator overloading,
    because componentwise order is only a partial order.
    """

    x: int
    y: int
    z: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.x, self.y, self.z)

    def minimum(self, other: "Point3") -> "Point3":
        """Componentwise minimum of two points."""
        return Point3(min(self.x, other.x), min(self.y, other.y), min(self.z, other.z))

    def maximum(self, other: "Point3") -> "Point3":
        """Componentwise maximum of two points."""
        return Point3(max(self.x, other.x), max(self.y, other.y), max(self.z, other.z))

    def all_le(self, other: "Point3") -> bool:
        """True if every coordinate of `self` is <= the matching one of `other`."""
        return self.x <= other.x and self.y <= other.y and self.z <= other.z

    def all_ge(self, other: "Point3") -> bool:
        """True if every coordinate of `self` is >= the matching one of `other`."""
        return self.x >= other.x and self.y >= other.y and self.z >= other.z

    def extents_to(self, other: "Point3") -> Tuple[int, int, int]:
        """Per-axis absolute distance between `self` and `other`."""
        return (abs(other.x - self.x), abs(other.y - self.y), abs(other.z - self.z))


# ---------------------------------------------------------------------------
# Cuboid: half-open axis-aligned box
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Cuboid:
    """
    Axis-aligned box of unit cells, `[bottom_left, top_right)` on every axis.

    Instances are immutable; `intersect` returns a new cuboid.
    """

    bottom_left: Point3
    top_right: Point3

    @classmethod
    def from_ranges(
        cls,
        x: AxisRange,
        y: AxisRange,
        z: AxisRange,
    ) -> "Cuboid":
        """
        Build a cuboid from three half-open `(lo, hi)` ranges.
        """
        return cls(Point3(x[0], y[0], z[0]), Point3(x[1], y[1], z[1]))

    @property
    def bounds(self) -> Tuple[int, int, int, int, int, int]:
        """
        (x0, y0, z0, x1, y1, z1), lower corner first, in the spirit of
        shapely's `.bounds`.
        """
        return self.bottom_left.as_tuple() + self.top_right.as_tuple()

    def volume(self) -> int:
        """
        Number of unit cells in the cuboid.

        Uses absolute per-axis extents so the result stays defined (and
        non-negative) even for a cuboid whose corners are swapped.
        """
        dx, dy, dz = self.bottom_left.extents_to(self.top_right)
        return dx * dy * dz

    def contains(self, volume: "Cuboid") -> bool:
        """
        True if this cuboid's extent lies entirely within `volume` on every
        axis: componentwise `>=` on the lower corner and `<=` on the upper.

        Used to restrict an unbounded instruction list to a region of interest.
        """
        return self.bottom_left.all_ge(volume.bottom_left) and self.top_right.all_le(
            volume.top_right
        )

    inside = contains

    def contains_cell(self, cell: Point3) -> bool:
        """True if the unit cell at `cell` lies inside this cuboid."""
        return cell.all_ge(self.bottom_left) and (
            cell.x < self.top_right.x
            and cell.y < self.top_right.y
            and cell.z < self.top_right.z
        )

    def intersect(self, other: "Cuboid") -> Optional["Cuboid"]:
        """
        Return the overlap of two cuboids, or None if they do not intersect.

        On each axis the overlap is `[max(mins), min(maxs)]`. If the max of
        the mins exceeds the min of the maxs on any axis there is no overlap.
        Boxes that merely touch give a zero-volume cuboid.
        """
        lo = self.bottom_left.maximum(other.bottom_left)
        hi = self.top_right.minimum(other.top_right)
        if not lo.all_le(hi):
            return None
        return Cuboid(lo, hi)


__all__ = [
    "Point3",
    "Cuboid",
    "AxisRange",
]
