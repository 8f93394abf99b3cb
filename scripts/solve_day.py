#!/usr/bin/env python
"""
CLI helper to solve a day's puzzle from the project root.

This script is a thin wrapper around the library entry point:

- reactor_reboot.solve.main

Typical usage from the project root
-----------------------------------

    python scripts/solve_day.py
    # or
    python scripts/solve_day.py --part 2 --time
    python scripts/solve_day.py --input data/inputs/example.txt

The script automatically adds `src/` to PYTHONPATH so that it can import the
`reactor_reboot` package without requiring installation.
"""

from __future__ import annotations

from pathlib import Path
import sys
from typing import Optional, List


def _ensure_src_on_path() -> Path:
    """
    Ensure that <project_root>/src is on sys.path and return project_root.

    Assumes this file lives in <project_root>/scripts/solve_day.py.
    """
    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))
    return project_root


def main(argv: Optional[List[str]] = None) -> int:
    _ensure_src_on_path()

    # Imports done after path configuration
    from reactor_reboot.solve import main as solve_main

    return solve_main(argv)


if __name__ == "__main__":
    sys.exit(main())
