import pytest

from slidesolve.board import Board


def test_from_tiles_keeps_layout():
    board = Board.from_tiles(2, 3, [1, 2, 3, 4, 0, 5])
    assert board.rows == 2
    assert board.cols == 3
    assert board.tiles == (1, 2, 3, 4, 0, 5)
    assert board.empty_position == (1, 1)


def test_wrong_tile_count_raises():
    with pytest.raises(ValueError):
        Board.from_tiles(2, 2, [1, 2, 0])


def test_missing_empty_cell_raises():
    with pytest.raises(ValueError):
        Board.from_tiles(2, 2, [1, 2, 3, 4])


def test_non_positive_dimensions_raise():
    with pytest.raises(ValueError):
        Board.from_tiles(0, 2, [])


def test_goal_detection():
    assert Board.from_tiles(2, 2, [1, 2, 3, 0]).is_goal()
    assert not Board.from_tiles(2, 2, [1, 2, 0, 3]).is_goal()
    assert not Board.from_tiles(2, 2, [0, 1, 2, 3]).is_goal()


def test_goal_has_zero_manhattan_distance():
    assert Board.from_tiles(3, 3, [1, 2, 3, 4, 5, 6, 7, 8, 0]).manhattan_distance() == 0


def test_manhattan_distance_one_move_away():
    assert Board.from_tiles(2, 2, [1, 2, 0, 3]).manhattan_distance() == 1


def test_adjacent_swap_neighbors_in_corner():
    board = Board.from_tiles(2, 2, [0, 1, 2, 3])
    neighbors = board.adjacent_swap_neighbors()
    assert neighbors == [
        Board.from_tiles(2, 2, [2, 1, 0, 3]),
        Board.from_tiles(2, 2, [1, 0, 2, 3]),
    ]


def test_adjacent_swap_changes_manhattan_by_one():
    board = Board.from_tiles(3, 3, [4, 1, 3, 7, 0, 2, 8, 5, 6])
    neighbors = board.adjacent_swap_neighbors()
    assert len(neighbors) == 4
    for neighbor in neighbors:
        assert abs(neighbor.manhattan_distance() - board.manhattan_distance()) == 1
        assert sorted(neighbor.tiles) == sorted(board.tiles)


def test_block_shift_row_example():
    board = Board.from_tiles(1, 4, [0, 1, 2, 3])
    assert board.block_shift_neighbors() == [
        Board.from_tiles(1, 4, [1, 0, 2, 3]),
        Board.from_tiles(1, 4, [1, 2, 0, 3]),
        Board.from_tiles(1, 4, [1, 2, 3, 0]),
    ]


def test_block_shift_includes_adjacent_swaps():
    board = Board.from_tiles(3, 3, [1, 2, 3, 4, 0, 5, 6, 7, 8])
    shifts = board.block_shift_neighbors()
    for neighbor in board.adjacent_swap_neighbors():
        assert neighbor in shifts


def test_block_shift_from_corner_counts_cells_in_line():
    board = Board.from_tiles(3, 4, [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11])
    assert len(board.block_shift_neighbors()) == (board.rows - 1) + (board.cols - 1)


def test_render_goal_board():
    board = Board.from_tiles(2, 2, [1, 2, 3, 0])
    assert board.render() == " 1  2 \n 3    \n"


def test_render_two_digit_values():
    board = Board.from_tiles(1, 2, [12, 0])
    assert board.render() == "12    \n"


def test_equal_boards_hash_alike():
    first = Board.from_tiles(2, 2, [1, 2, 3, 0])
    second = Board.from_tiles(2, 2, (1, 2, 3, 0))
    assert first == second
    assert len({first, second}) == 1


def test_boards_order_by_tiles():
    low = Board.from_tiles(2, 2, [0, 1, 2, 3])
    high = Board.from_tiles(2, 2, [1, 2, 3, 0])
    assert sorted([high, low]) == [low, high]