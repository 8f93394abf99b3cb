"""
I/O utilities for the Reactor Reboot project.

This module centralizes input-file handling so that:
- Scripts and notebooks do *not* hard-code paths.
- Reading a day's input is one line.

Typical usage from code or notebooks
------------------------------------

    from reactor_reboot.utils.io import ensure_data_dirs, read_day_input

    ensure_data_dirs()
    text = read_day_input(22)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from ..config import DATA_DIR, DATA_INPUTS_DIR, day_input_filename


PathLike = Union[str, Path]


# ---------------------------------------------------------------------------
# Directory helpers
# ---------------------------------------------------------------------------

def ensure_data_dirs() -> None:
    """
    Ensure that the main data directories exist:

    - data/
    - data/inputs/

    It is safe to call this repeatedly.
    """
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    DATA_INPUTS_DIR.mkdir(parents=True, exist_ok=True)


def get_input_path(*parts: str) -> Path:
    """
    Build a path under the `data/inputs/` directory.

    Example
    -------
    >>> get_input_path("day22.txt")
    PosixPath('.../data/inputs/day22.txt')
    """
    return DATA_INPUTS_DIR.joinpath(*parts)


def get_day_input_path(day: int) -> Path:
    """Conventional input path for `day`, e.g. `data/inputs/day22.txt`."""
    return get_input_path(day_input_filename(day))


# ---------------------------------------------------------------------------
# Loading helpers
# ---------------------------------------------------------------------------

def read_input_text(path: PathLike) -> str:
    """
    Read an arbitrary puzzle input file.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    """
    input_path = Path(path)
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")
    return input_path.read_text()


def read_day_input(day: int, path: Optional[PathLike] = None) -> str:
    """
    Read the input for `day`, from `path` if given, otherwise from
    `data/inputs/dayNN.txt`.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    """
    if path is not None:
        return read_input_text(path)

    default_path = get_day_input_path(day)
    if not default_path.exists():
        raise FileNotFoundError(
            f"Input for day {day} not found at {default_path}. "
            f"Place your puzzle input as '{default_path.name}' under data/inputs/, "
            "or pass --input."
        )
    return default_path.read_text()


__all__ = [
    "PathLike",
    "ensure_data_dirs",
    "get_input_path",
    "get_day_input_path",
    "read_input_text",
    "read_day_input",
]
