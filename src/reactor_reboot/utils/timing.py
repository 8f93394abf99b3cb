"""
Simple timing helpers for the Reactor Reboot project.

Part 2 of the puzzle runs the recursive overlap engine over the full,
unrestricted instruction list, which is where the time goes. These helpers
make it easy to see how long that takes:

- `Timer`: context manager around a code block.
- `benchmark`: repeat a call and summarize durations.

Only the standard library is used here, so the helpers work in scripts,
notebooks and tests alike.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import statistics
import time


# ---------------------------------------------------------------------------
# Context-manager timer
# ---------------------------------------------------------------------------

@dataclass
class Timer:
    """
    Context manager for measuring wall-clock time of a code block.

    Usage
    -----
        from reactor_reboot.utils.timing import Timer

        with Timer("part 2"):
            answer = solve_part2(text)

    Attributes
    ----------
    name:
        Optional label printed when exiting the context.
    quiet:
        If True, nothing is printed; read `elapsed` instead.
    elapsed:
        Duration in seconds. Available after the context exits.
    """

    name: Optional[str] = None
    quiet: bool = False
    start: float = 0.0
    end: float = 0.0
    elapsed: float = 0.0

    def __enter__(self) -> "Timer":
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.end = time.perf_counter()
        self.elapsed = self.end - self.start
        if not self.quiet:
            label = f"[Timer] {self.name}: " if self.name else "[Timer] "
            print(f"{label}{self.elapsed:.4f} s")


# ---------------------------------------------------------------------------
# Simple benchmarking helper
# ---------------------------------------------------------------------------

def benchmark(
    func: Callable[..., Any],
    *args,
    repeats: int = 5,
    warmup: int = 1,
    **kwargs,
) -> Dict[str, float]:
    """
    Run `func(*args, **kwargs)` `warmup` times unrecorded, then `repeats`
    times recorded, and return min/mean/max durations in seconds.

    Returns
    -------
    dict with keys 'min', 'mean', 'max', 'repeats'
    """
    if repeats < 1:
        raise ValueError(f"repeats must be >= 1, got {repeats}")

    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(repeats):
        start = time.perf_counter()
        func(*args, **kwargs)
        times.append(time.perf_counter() - start)

    return {
        "min": min(times),
        "mean": statistics.mean(times),
        "max": max(times),
        "repeats": float(repeats),
    }


__all__ = [
    "Timer",
    "benchmark",
]
