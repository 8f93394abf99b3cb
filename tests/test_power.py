"""
Tests for the toggle-volume engine in reactor_reboot.power.

Goals
-----
- PowerCuboid.intersect keeps the later operand's state.
- Net contributions subtract exactly what later instructions claim,
  including chains where a later instruction is itself overridden.
- The whole-list computation is pure and order-sensitive.
"""

from __future__ import annotations

import pytest

from reactor_reboot.geometry import Cuboid, Point3
from reactor_reboot.parsing import parse_instructions
from reactor_reboot.power import PowerCuboid, net_contributions, total_on_volume


def _power(lo, hi, on: bool = True) -> PowerCuboid:
    """
    Helper: instruction over the cube [lo, hi) on every axis, or over
    explicit (x, y, z) ranges if `lo`/`hi` are tuples.
    """
    if isinstance(lo, tuple):
        cuboid = Cuboid(Point3(*lo), Point3(*hi))
    else:
        cuboid = Cuboid(Point3(lo, lo, lo), Point3(hi, hi, hi))
    return PowerCuboid(cuboid=cuboid, power_state=on)


# ---------------------------------------------------------------------------
# Intersection
# ---------------------------------------------------------------------------

def test_intersect_takes_state_of_later_instruction():
    on_a = _power(10, 13, on=True)
    off_b = _power(11, 14, on=False)

    result = on_a.intersect(off_b)
    assert result == _power(11, 13, on=False)

    # Reversed operands: same shape, the (now later) "on" state wins
    assert off_b.intersect(on_a) == _power(11, 13, on=True)


def test_intersect_with_self_is_identity():
    instruction = _power(10, 13)
    assert instruction.intersect(instruction) == instruction


def test_intersect_disjoint_is_none():
    assert _power(10, 13).intersect(_power(15, 16)) is None


def test_state_label():
    assert _power(0, 1, on=True).state_label == "on"
    assert _power(0, 1, on=False).state_label == "off"


# ---------------------------------------------------------------------------
# Net contributions
# ---------------------------------------------------------------------------

def test_single_instruction_owns_its_volume():
    assert _power(10, 13).compute_on_volume([]) == 27


def test_two_overlapping_on_instructions():
    instructions = [_power(10, 13), _power(11, 14)]
    assert net_contributions(instructions) == [19, 27]
    assert total_on_volume(instructions) == 46


def test_on_then_off_removes_overlap():
    instructions = [_power(10, 13), _power(11, 14, on=False)]
    assert instructions[0].compute_on_volume(instructions[1:]) == 19
    assert net_contributions(instructions) == [19, 0]
    assert total_on_volume(instructions) == 19


def test_on_off_on_chain_re_adds_without_double_counting():
    instructions = [
        _power(10, 13),
        _power(11, 14, on=False),
        _power((12, 10, 10), (15, 13, 13)),
    ]
    assert total_on_volume(instructions) == 41


def test_four_step_reference(four_step_input):
    instructions = parse_instructions(four_step_input)
    assert total_on_volume(instructions) == 39


def test_off_only_list_is_zero():
    assert total_on_volume([_power(0, 10, on=False), _power(5, 15, on=False)]) == 0


def test_empty_list_is_zero():
    assert total_on_volume([]) == 0
    assert net_contributions([]) == []


def test_later_instruction_fully_covering_earlier():
    # Earlier "on" is entirely claimed by a later "on": it owns nothing
    instructions = [_power(2, 4), _power(0, 10)]
    assert net_contributions(instructions) == [0, 1000]


def test_touching_instructions_start_no_recursive_branches(monkeypatch):
    core = _power(0, 2)
    neighbours = [
        _power((2, 0, 0), (3, 2, 2), on=False),
        _power((0, 2, 0), (2, 3, 2), on=False),
        _power((0, 0, 2), (2, 2, 3)),
        _power((-1, 0, 0), (0, 2, 2)),
    ]
    # Every neighbour shares a face with the core but no cells
    assert all(core.intersect(n).cuboid.volume() == 0 for n in neighbours)

    calls = []
    original = PowerCuboid.compute_on_volume

    def counting(self, later):
        calls.append(self)
        return original(self, later)

    monkeypatch.setattr(PowerCuboid, "compute_on_volume", counting)

    assert core.compute_on_volume(neighbours) == 8
    assert calls == [core]


def test_conflict_volume_never_exceeds_own_volume():
    # Many nested overlaps; every net contribution must stay >= 0
    instructions = [_power(0, 10 - i, on=(i % 2 == 0)) for i in range(8)]
    contributions = net_contributions(instructions)
    assert all(c >= 0 for c in contributions)
    # Each "on" cube [0, k) keeps only the shell outside the next cube [0, k - 1)
    expected = sum(k ** 3 - (k - 1) ** 3 for k in (10, 8, 6, 4))
    assert contributions == [271, 0, 169, 0, 91, 0, 37, 0]
    assert total_on_volume(instructions) == expected


# ---------------------------------------------------------------------------
# Purity and ordering
# ---------------------------------------------------------------------------

def test_total_is_pure_and_input_untouched():
    instructions = [_power(10, 13), _power(11, 14, on=False), _power(12, 15)]
    snapshot = list(instructions)

    first = total_on_volume(instructions)
    second = total_on_volume(instructions)

    assert first == second
    assert instructions == snapshot


def test_order_of_overlapping_instructions_matters():
    on_a = _power(10, 13)
    off_b = _power(11, 14, on=False)
    assert total_on_volume([on_a, off_b]) == 19
    assert total_on_volume([off_b, on_a]) == 27


def test_accepts_tuples():
    instructions = (_power(10, 13), _power(11, 14))
    assert total_on_volume(instructions) == 46


# ---------------------------------------------------------------------------
# Invariant violation
# ---------------------------------------------------------------------------

def test_underflow_raises_instead_of_clamping(monkeypatch):
    # A broken intersection that returns the (larger) other cuboid would make
    # the claimed volume exceed the instruction's own volume.
    monkeypatch.setattr(Cuboid, "intersect", lambda self, other: other)

    small = _power(0, 1)
    big = _power(0, 3, on=False)
    with pytest.raises(RuntimeError):
        small.compute_on_volume([big])
