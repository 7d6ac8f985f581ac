"""Sliding-puzzle board state, goal test, heuristic and move generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

# Up, down, left, right.
_DIRECTIONS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True, order=True)
class Board:
    """An immutable rows x cols sliding-puzzle board; 0 marks the empty cell."""

    rows: int
    cols: int
    tiles: tuple[int, ...]

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(
                f"board dimensions must be positive, got {self.rows}x{self.cols}"
            )
        if len(self.tiles) != self.rows * self.cols:
            raise ValueError(
                f"expected {self.rows * self.cols} tiles, got {len(self.tiles)}"
            )
        if 0 not in self.tiles:
            raise ValueError("board has no empty cell (0)")

    @classmethod
    def from_tiles(cls, rows: int, cols: int, tiles: Iterable[int]) -> Board:
        """Build a board from a flat, row-major sequence of tile values."""
        return cls(rows, cols, tuple(tiles))

    @property
    def empty_position(self) -> tuple[int, int]:
        """Row and column of the empty cell."""
        return divmod(self.tiles.index(0), self.cols)

    def is_goal(self) -> bool:
        """True when the tiles read 1, 2, ..., n-1 followed by the empty cell."""
        last = len(self.tiles) - 1
        return self.tiles[last] == 0 and all(
            value == expected
            for expected, value in enumerate(self.tiles[:last], start=1)
        )

    def manhattan_distance(self) -> int:
        """Sum of each tile's row and column distance to its goal cell."""
        total = 0
        for index, value in enumerate(self.tiles):
            if value == 0:
                continue
            row, col = divmod(index, self.cols)
            target_row, target_col = divmod(value - 1, self.cols)
            total += abs(row - target_row) + abs(col - target_col)
        return total

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _swapped(self, tiles: list[int], first: int, second: int) -> None:
        tiles[first], tiles[second] = tiles[second], tiles[first]

    def adjacent_swap_neighbors(self) -> list[Board]:
        """Boards reached by moving one tile next to the empty cell into it."""
        return list(self._adjacent_swaps())

    def _adjacent_swaps(self) -> Iterator[Board]:
        empty_row, empty_col = self.empty_position
        empty_index = empty_row * self.cols + empty_col
        for d_row, d_col in _DIRECTIONS:
            row, col = empty_row + d_row, empty_col + d_col
            if self._in_bounds(row, col):
                tiles = list(self.tiles)
                self._swapped(tiles, empty_index, row * self.cols + col)
                yield Board(self.rows, self.cols, tuple(tiles))

    def block_shift_neighbors(self) -> list[Board]:
        """Boards reached by sliding a run of one or more tiles toward the empty cell.

        In each direction, shifting 1, 2, ... tiles along the line from the
        empty cell each yields one neighbour.
        """
        return list(self._block_shifts())

    def _block_shifts(self) -> Iterator[Board]:
        empty_row, empty_col = self.empty_position
        for d_row, d_col in _DIRECTIONS:
            tiles = list(self.tiles)
            row, col = empty_row + d_row, empty_col + d_col
            while self._in_bounds(row, col):
                previous = (row - d_row) * self.cols + (col - d_col)
                self._swapped(tiles, row * self.cols + col, previous)
                yield Board(self.rows, self.cols, tuple(tiles))
                row, col = row + d_row, col + d_col

    def render(self) -> str:
        """Text grid of the board, one line per row, values right-aligned to two."""
        lines = []
        for start in range(0, len(self.tiles), self.cols):
            cells = (
                "  " if value == 0 else f"{value:>2}"
                for value in self.tiles[start:start + self.cols]
            )
            lines.append("".join(f"{cell} " for cell in cells) + "\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()