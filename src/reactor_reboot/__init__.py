"""
Reactor Reboot – cuboid on/off volume solver

This package contains the geometry, toggle-volume engine, input parsing and
evaluation logic for the day 22 "reactor reboot" puzzle. See the `utils`
subpackage for I/O, timing and plotting helpers.
"""

__all__ = []

__version__ = "0.1.0"
