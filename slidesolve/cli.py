"""Command-line entry point: read a puzzle file and solve it under both move rules."""

from __future__ import annotations

import logging
import os
import re
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Sequence

from .board import Board
from .solver import PuzzleSolver, SolveType

logger = logging.getLogger(__name__)

DEFAULT_INPUT = "puzzle_input.txt"
_DEFAULT_THREADS = 4
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def read_puzzle(path: str | os.PathLike[str]) -> Board:
    """Read a board from a file holding rows, cols and then the tiles row by row.

    Raises OSError if the file cannot be read and ValueError if its contents
    do not describe a valid board.
    """
    text = Path(path).read_text()
    tokens = iter(text.split())

    try:
        rows = int(next(tokens))
        cols = int(next(tokens))
    except (StopIteration, ValueError):
        raise ValueError(f"Could not read N and M from input file: {path}") from None

    if rows <= 0 or cols <= 0:
        raise ValueError(
            f"Invalid board dimensions N={rows} M={cols}. "
            "N and M must be positive integers."
        )

    tiles = []
    try:
        for _ in range(rows * cols):
            tiles.append(int(next(tokens)))
    except (StopIteration, ValueError):
        raise ValueError(f"Could not read all tiles from input file: {path}") from None

    return Board.from_tiles(rows, cols, tiles)


def parse_time_limit(text: str) -> int:
    """Parse a time limit in seconds; bad or negative values mean no limit (0)."""
    match = _INT_PREFIX.match(text)
    if match is None:
        logger.error(
            "Invalid time limit argument: %s. Must be an integer. "
            "Setting to no limit.",
            text,
        )
        return 0
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        logger.error(
            "Time limit argument out of range: %s. Setting to no limit.", text
        )
        return 0
    if value < 0:
        logger.warning(
            "Invalid time limit specified (negative). Setting to no limit."
        )
        return 0
    return value


def _format_board(board: Board) -> str:
    lines = []
    for start in range(0, len(board.tiles), board.cols):
        row = board.tiles[start:start + board.cols]
        cells = (
            ("  " if value == 0 else (" " if value < 10 else "")) + f"{value} "
            for value in row
        )
        lines.append("".join(cells) + "\n")
    return "".join(lines)


def _log_board(board: Board) -> None:
    logger.info("\n%s", _format_board(board))


@contextmanager
def _console_logging() -> Iterator[None]:
    package_logger = logging.getLogger(__package__ or "slidesolve")
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s.%(msecs)03d] [%(levelname)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    previous_level = package_logger.level
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.INFO)
    try:
        yield
    finally:
        package_logger.removeHandler(handler)
        package_logger.setLevel(previous_level)


def _solve_and_report(
    board: Board,
    solve_type: SolveType,
    label: str,
    num_threads: int,
    time_limit_seconds: int,
) -> None:
    _log_board(board)
    solver = PuzzleSolver()
    started = time.perf_counter()
    solutions = solver.solve(board, solve_type, 1, num_threads, time_limit_seconds)
    elapsed = time.perf_counter() - started

    logger.info("\nSolutions (%s):", label)
    if not solutions:
        logger.info("No solutions found.")
    for number, solution in enumerate(solutions, start=1):
        logger.info("Solution %d (Cost: %d steps):", number, solution.cost)
        for step in solution.path:
            _log_board(step)
        logger.info("--------------------")
    logger.info("Time taken for %s: %s seconds", label, elapsed)


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the puzzle in the given file with both move rules; return an exit code."""
    args = list(sys.argv[1:] if argv is None else argv)

    with _console_logging():
        if args:
            input_path = args[0]
            logger.info("Reading puzzle from file: %s", input_path)
        else:
            input_path = DEFAULT_INPUT
            logger.warning("No input file specified. Using default: %s", input_path)

        time_limit_seconds = parse_time_limit(args[1]) if len(args) > 1 else 0

        try:
            board = read_puzzle(input_path)
        except OSError:
            logger.error("Error: Could not open input file: %s", input_path)
            return 1
        except ValueError as error:
            logger.error("Error: %s", error)
            return 1

        detected = os.cpu_count()
        num_threads = detected or _DEFAULT_THREADS
        logger.info(
            "Detected hardware concurrency: %s threads. Using %d threads for solver.",
            detected or 0,
            num_threads,
        )

        logger.info("------------------------------------------")
        logger.info(
            "Solving for Type 1: Adjacent Swap (%dx%d puzzle)", board.rows, board.cols
        )
        _solve_and_report(
            board, SolveType.ADJACENT_SWAP, "Adjacent Swap",
            num_threads, time_limit_seconds,
        )

        logger.info("\n------------------------------------------")
        logger.info(
            "Solving for Type 2: Sequential Block Shift (%dx%d puzzle)",
            board.rows, board.cols,
        )
        _solve_and_report(
            board, SolveType.BLOCK_SHIFT, "Sequential Block Shift",
            num_threads, time_limit_seconds,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())