"""
Command-line entry point for the Reactor Reboot project.

Looks up the solvers for a day in `reactor_reboot.days`, reads the puzzle
input and prints the answers:

      python -m reactor_reboot.solve
      python -m reactor_reboot.solve --part 1
      python -m reactor_reboot.solve --input path/to/input.txt --time
      python -m reactor_reboot.solve --benchmark 5

By default the input is read from `data/inputs/dayNN.txt`.
"""

from __future__ import annotations

import argparse
import sys
from typing import Dict, List, Optional

from .config import DEFAULT_DAY
from .days import get_day
from .utils.io import read_day_input
from .utils.timing import Timer, benchmark


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Solve a day of the puzzle calendar (day 22: reactor reboot).",
    )
    parser.add_argument(
        "--day",
        type=int,
        default=DEFAULT_DAY,
        help=f"Day number to solve (default: {DEFAULT_DAY}).",
    )
    parser.add_argument(
        "--part",
        type=int,
        choices=(1, 2),
        default=None,
        help="Only run this part. If omitted, both parts are run.",
    )
    parser.add_argument(
        "--input",
        type=str,
        default=None,
        help="Optional input path. If omitted, data/inputs/dayNN.txt is used.",
    )
    parser.add_argument(
        "--time",
        action="store_true",
        help="Print the wall-clock time taken by each part.",
    )
    parser.add_argument(
        "--benchmark",
        type=int,
        default=None,
        metavar="REPEATS",
        help="Run each part REPEATS times and print min/mean/max durations.",
    )
    return parser.parse_args(argv)


def run_day(
    day: int,
    text: str,
    parts: Optional[List[int]] = None,
    show_time: bool = False,
) -> Dict[int, int]:
    """
    Run the requested parts of `day` on `text` and return `{part: answer}`.

    Parts without a solver are skipped.
    """
    solvers = get_day(day)
    if parts is None:
        parts = [1, 2]

    answers: Dict[int, int] = {}
    for part in parts:
        solver = solvers[part - 1]
        if solver is None:
            continue
        with Timer(f"day {day} part {part}", quiet=not show_time):
            answers[part] = solver(text)
    return answers


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)

    part1, part2 = get_day(args.day)
    if part1 is None and part2 is None:
        print(f"[solve] day {args.day} is not implemented.")
        return 1

    text = read_day_input(args.day, args.input)
    parts = [args.part] if args.part is not None else None

    answers = run_day(args.day, text, parts=parts, show_time=args.time)
    for part, answer in answers.items():
        print(f"[solve] day {args.day} part {part}: {answer}")

    if args.benchmark is not None:
        solvers = (part1, part2)
        for part in answers:
            stats = benchmark(solvers[part - 1], text, repeats=args.benchmark)
            print(
                f"[solve] day {args.day} part {part} benchmark: "
                f"min={stats['min']:.4f} s mean={stats['mean']:.4f} s "
                f"max={stats['max']:.4f} s over {int(stats['repeats'])} runs"
            )

    return 0


if __name__ == "__main__":
    sys.exit(main())
