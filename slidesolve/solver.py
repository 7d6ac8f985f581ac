"""A* search for sliding-puzzle solutions under two move-cost rules."""

from __future__ import annotations

import heapq
import itertools
import logging
import threading
import time
from dataclasses import dataclass, field
from enum import Enum

from .board import Board

logger = logging.getLogger(__name__)

_PROGRESS_INTERVAL_SECONDS = 5


class SolveType(Enum):
    """How moves are counted."""

    ADJACENT_SWAP = "adjacent_swap"
    BLOCK_SHIFT = "block_shift"


@dataclass(frozen=True, order=True)
class Solution:
    """A sequence of boards from the start to the goal, with its move count."""

    cost: int
    path: tuple[Board, ...]


@dataclass
class _SearchState:
    open_set: list[tuple[int, int, int, Board]] = field(default_factory=list)
    g_costs: dict[Board, int] = field(default_factory=dict)
    came_from: dict[Board, Board] = field(default_factory=dict)
    solutions: set[Solution] = field(default_factory=set)
    counter: itertools.count = field(default_factory=itertools.count)
    terminate: bool = False
    explored: int = 0

    def push(self, board: Board, g_cost: int) -> None:
        f_cost = g_cost + board.manhattan_distance()
        heapq.heappush(self.open_set, (f_cost, g_cost, next(self.counter), board))


class PuzzleSolver:
    """Finds the cheapest solutions of a sliding puzzle with A* search."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._state = _SearchState()

    @property
    def states_explored(self) -> int:
        """Number of states taken from the open set in the last search."""
        return self._state.explored

    def solve(
        self,
        initial_board: Board,
        solve_type: SolveType = SolveType.ADJACENT_SWAP,
        num_solutions: int = 1,
        num_threads: int = 1,
        time_limit_seconds: int = 0,
    ) -> list[Solution]:
        """Search for up to ``num_solutions`` solutions, cheapest first.

        A ``time_limit_seconds`` of 0 or less means no limit.
        """
        logger.info("Starting puzzle solver with %d threads.", num_threads)
        if time_limit_seconds > 0:
            logger.info("Time limit: %d seconds.", time_limit_seconds)
        else:
            logger.info("No time limit set.")
        logger.info("Initial Board:\n%s", initial_board.render())

        state = _SearchState()
        self._state = state
        state.push(initial_board, 0)
        state.g_costs[initial_board] = 0

        start_time = time.monotonic()
        workers = [
            threading.Thread(
                target=self._worker,
                args=(state, solve_type, num_solutions, initial_board,
                      start_time, time_limit_seconds),
                daemon=True,
            )
            for _ in range(num_threads)
        ]
        for worker in workers:
            worker.start()
        for worker in workers:
            worker.join()

        if state.terminate:
            logger.warning(
                "Search terminated early due to time limit or solution found."
            )
        logger.info("Search finished. Total states explored: %d", state.explored)
        return sorted(state.solutions)[:max(num_solutions, 0)]

    def _worker(
        self,
        state: _SearchState,
        solve_type: SolveType,
        num_solutions: int,
        initial_board: Board,
        start_time: float,
        time_limit_seconds: int,
    ) -> None:
        last_log_time = time.monotonic()
        thread_name = threading.current_thread().name
        while True:
            with self._lock:
                if state.terminate or not state.open_set:
                    return
                f_cost, g_cost, _, board = heapq.heappop(state.open_set)
                state.explored += 1

                now = time.monotonic()
                if now - last_log_time >= _PROGRESS_INTERVAL_SECONDS:
                    logger.info(
                        "Thread %s: Explored %d states. Open set size: %d. "
                        "G_costs size: %d",
                        thread_name, state.explored, len(state.open_set),
                        len(state.g_costs),
                    )
                    last_log_time = now

                if time_limit_seconds > 0 and int(now - start_time) >= time_limit_seconds:
                    logger.warning(
                        "Thread %s reached time limit of %d seconds. "
                        "Terminating search.",
                        thread_name, time_limit_seconds,
                    )
                    state.terminate = True
                    return

                self._expand(state, solve_type, num_solutions, initial_board,
                             board, f_cost, g_cost, thread_name)

    def _expand(
        self,
        state: _SearchState,
        solve_type: SolveType,
        num_solutions: int,
        initial_board: Board,
        board: Board,
        f_cost: int,
        g_cost: int,
        thread_name: str,
    ) -> None:
        if num_solutions > 0 and len(state.solutions) >= num_solutions:
            nth_best_cost = sorted(state.solutions)[num_solutions - 1].cost
            if f_cost >= nth_best_cost:
                return

        known = state.g_costs.get(board)
        if known is not None and g_cost > known:
            return

        if board.is_goal():
            path = self._reconstruct_path(state, board, initial_board)
            state.solutions.add(Solution(g_cost, path))
            logger.info(
                "Thread %s found solution with cost: %d. Total solutions found: %d",
                thread_name, g_cost, len(state.solutions),
            )
            if len(state.solutions) >= num_solutions:
                state.terminate = True
            return

        if solve_type is SolveType.ADJACENT_SWAP:
            neighbors = board.adjacent_swap_neighbors()
        else:
            neighbors = board.block_shift_neighbors()

        new_g_cost = g_cost + 1
        for neighbor in neighbors:
            existing = state.g_costs.get(neighbor)
            if existing is None or new_g_cost < existing:
                state.g_costs[neighbor] = new_g_cost
                state.push(neighbor, new_g_cost)
                state.came_from[neighbor] = board

    @staticmethod
    def _reconstruct_path(
        state: _SearchState, goal_board: Board, initial_board: Board
    ) -> tuple[Board, ...]:
        path: list[Board] = []
        current = goal_board
        while current != initial_board:
            path.append(current)
            parent = state.came_from.get(current)
            if parent is None:
                logger.error(
                    "Error: Could not reconstruct path for board: \n%s",
                    current.render(),
                )
                break
            current = parent
        path.append(initial_board)
        path.reverse()
        return tuple(path)