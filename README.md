# slidesolve

`slidesolve` finds the shortest solutions to sliding tile puzzles of any
rectangular size, such as the classic 8-puzzle or 15-puzzle. It uses A*
search guided by the Manhattan distance heuristic.

It can count moves in two ways:

- **Adjacent swap** (`SolveType.ADJACENT_SWAP`): each move slides one tile
  into the empty cell and costs one step.
- **Block shift** (`SolveType.BLOCK_SHIFT`): each move slides a straight
  run of one or more tiles next to the empty cell one place toward it,
  and costs one step no matter how many tiles move.

The goal state has the tiles `1, 2, ..., N*M-1` in row order and the empty
cell in the bottom-right corner.

## Installation

```
pip install .
```

Install with `pip install .[test]` to get the test dependencies as well.
The package has no runtime dependencies outside the standard library.

## Command line

Write the puzzle to a text file. It starts with the number of rows and
the number of columns, followed by the tiles in row order. `0` marks the
empty cell. Numbers may be separated by any whitespace:

```
3 3
1 2 3
4 5 6
0 7 8
```

Then run:

```
slidesolve puzzle.txt 30
```

The first argument is the puzzle file. It defaults to `puzzle_input.txt`
in the current directory. The optional second argument is a time limit in
seconds, read from the leading integer of the argument (so `12s` means
12). `0`, a negative number, a value outside the 32-bit signed range, or
text that does not start with an integer means there is no limit.

The program solves the puzzle under both move rules, one after the other,
using as many worker threads as `os.cpu_count()` reports (4 if it cannot
tell). It logs to standard output each optimal path one board at a time,
along with the time each search took. It exits with status 1 if it cannot
open the file, if the dimensions or tiles cannot be read, if the
dimensions are not positive, or if the board has no empty cell.

## Library use

```python
from slidesolve.board import Board
from slidesolve.solver import PuzzleSolver, SolveType

board = Board.from_tiles(3, 3, [1, 2, 3, 4, 5, 6, 0, 7, 8])
solver = PuzzleSolver()
solutions = solver.solve(
    board,
    SolveType.ADJACENT_SWAP,
    num_solutions=1,
    num_threads=4,
    time_limit_seconds=0,
)
best = solutions[0]
print(best.cost)
for step in best.path:
    print(step.render())
print(solver.states_explored)
```

`Board` is an immutable, hashable and orderable dataclass with `rows`,
`cols`, `tiles` and `empty_position`. Creating one raises `ValueError` if
the dimensions are not positive, the tile count does not match, or there
is no `0`. It also provides `is_goal()`, `manhattan_distance()`,
`adjacent_swap_neighbors()`, `block_shift_neighbors()` and `render()`.

`PuzzleSolver.solve` returns a list of `Solution` objects (each with a
`cost` and a `path` tuple of boards from the start to the goal), ordered
by cost and holding at most `num_solutions` entries. A time limit of 0 or
less means no limit. The list is empty if no solution was found within
the time limit. The search stops once it has found `num_solutions`
solutions. `states_explored` gives the number of states taken from the
open set during the last search.

Progress and results are reported through the standard `logging` module
under the `slidesolve` logger.

## Limitations

The worker threads share one lock around each state expansion, so using
more threads does not make a search faster. It does not check whether a
puzzle is solvable before searching. An unsolvable puzzle is searched
until its whole reachable state space is exhausted or the time limit
runs out.