"""
Utility helpers for the Reactor Reboot project.

This package is intended for small, reusable helpers that don't naturally
belong in `geometry`, `power` or `evaluation`, for example:

- Locating and reading puzzle inputs
- Timing / profiling helpers
- Plotting instruction footprints in notebooks

Keeping them here avoids cluttering the main modules and keeps imports tidy.
"""

__all__ = []
