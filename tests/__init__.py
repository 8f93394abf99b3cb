"""
Test package for the Reactor Reboot project.

This directory collects unit and integration tests for the core modules:

- Geometry primitives (`test_geometry.py`)
- Toggle-volume engine (`test_power.py`)
- Input parsing (`test_parsing.py`)
- Part answers and contribution tables (`test_evaluation.py`)
- Day dispatch and command line (`test_solve.py`)
- I/O, timing and plotting helpers (`test_utils.py`)

You can run tests with:

    pytest
    # or
    python -m pytest

from the project root.
"""

__all__ = []
