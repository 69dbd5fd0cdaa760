import pytest

from shitris import settings
from shitris.board import RAYWHITE, Board, Cell, Color, LineClear
from shitris.vec2 import Vec2

RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)


def make_board(width=3, height=12):
    return Board(Vec2(0, 0), 10, 1, width, height)


def fill_row(board, y):
    for x in range(board.width):
        board.set_cell(Vec2(x, y), RED, GREEN, BLUE)


def test_default_size_comes_from_settings():
    board = Board(settings.BOARD_POSITION, settings.CELL_SIZE, settings.PADDING)
    assert (board.width, board.height) == (10, 20)
    assert board.level == 0 and board.speed == 0


@pytest.mark.parametrize("width,height,cell_size", [(0, 5, 10), (5, 0, 10), (5, 5, 0)])
def test_invalid_construction(width, height, cell_size):
    with pytest.raises(ValueError):
        Board(Vec2(0, 0), cell_size, 1, width, height)


def test_color_channel_validation():
    with pytest.raises(ValueError):
        Color(256, 0, 0)
    assert Color(1, 2, 3).a == 255


def test_new_cell_is_empty_raywhite():
    assert Cell() == Cell(False, RAYWHITE, RAYWHITE, RAYWHITE)


def test_set_cell_and_read_back():
    board = make_board()
    board.set_cell(Vec2(1, 2), RED, GREEN, BLUE)
    assert board.cell(Vec2(1, 2)) == Cell(True, RED, GREEN, BLUE)
    assert board.cell_exists(Vec2(1, 2))
    assert not board.cell_exists(Vec2(0, 2))


def test_cell_exists_off_board_is_false():
    board = make_board()
    assert not board.cell_exists(Vec2(-1, 0))
    assert not board.cell_exists(Vec2(0, board.height))


def test_set_cell_out_of_bounds_raises():
    board = make_board()
    with pytest.raises(IndexError):
        board.set_cell(Vec2(board.width, 0), RED, GREEN, BLUE)
    with pytest.raises(IndexError):
        board.cell(Vec2(0, -1))


def test_erase_empties_all_cells():
    board = make_board()
    fill_row(board, 3)
    board.erase()
    assert board.full_lines() == []
    assert not any(board.cell_exists(Vec2(x, 3)) for x in range(board.width))


def test_move_cell_moves_colours():
    board = make_board()
    board.set_cell(Vec2(0, 0), RED, GREEN, BLUE)
    board.move_cell(Vec2(0, 0), Vec2(2, 5))
    assert not board.cell_exists(Vec2(0, 0))
    assert board.cell(Vec2(2, 5)) == Cell(True, RED, GREEN, BLUE)
    assert board.found_extra_lines is True


def test_move_empty_cell_does_nothing():
    board = make_board()
    board.move_cell(Vec2(0, 0), Vec2(1, 1))
    assert not board.cell_exists(Vec2(1, 1))
    assert board.found_extra_lines is False


def test_full_lines_lists_complete_rows_only():
    board = make_board()
    fill_row(board, 4)
    fill_row(board, 7)
    board.set_cell(Vec2(0, 5), RED, GREEN, BLUE)
    assert board.full_lines() == [4, 7]


def test_clear_lines_drops_cells_above():
    board = make_board()
    board.set_cell(Vec2(1, 9), RED, GREEN, BLUE)
    fill_row(board, 10)
    board.set_cell(Vec2(0, 11), RED, GREEN, BLUE)
    result = board.clear_lines()
    assert result.rows == (10,)
    assert board.lines == 1
    assert board.cell_exists(Vec2(1, 10))
    assert not board.cell_exists(Vec2(1, 9))
    assert board.cell_exists(Vec2(0, 11))
    assert board.full_lines() == []


def test_clear_lines_with_nothing_full():
    board = make_board()
    board.set_cell(Vec2(0, 11), RED, GREEN, BLUE)
    result = board.clear_lines()
    assert result == LineClear((), True)
    assert board.lines == 0


def test_clear_reports_and_resets_extra_flag():
    board = make_board()
    fill_row(board, 11)
    result = board.clear_lines()
    assert result == LineClear((11,), False)
    board.set_cell(Vec2(0, 11), RED, GREEN, BLUE)
    fill_row(board, 10)
    second = board.clear_lines()
    assert second.found_extra_lines is True
    assert board.found_extra_lines is False


def test_ten_lines_raise_level_and_speed():
    board = make_board()
    for y in range(2, 12):
        fill_row(board, y)
    result = board.clear_lines()
    assert len(result.rows) == 10
    assert board.lines == 10
    assert board.level == 1 and board.speed == 1


def test_level_does_not_rise_again_too_early():
    board = make_board()
    for _ in range(2):
        for y in range(2, 12):
            fill_row(board, y)
        board.clear_lines()
    assert board.lines == 20
    assert board.level == 1


def test_score_increase_and_reset():
    board = make_board()
    assert board.increase_score(7) == 7
    assert board.increase_score(3) == 10
    fill_row(board, 11)
    board.clear_lines()
    board.score_saved = True
    board.reset_score()
    assert (board.score, board.lines, board.score_saved) == (0, 0, False)


def test_resize_keeps_stored_cells():
    board = make_board(width=3, height=4)
    board.set_cell(Vec2(2, 0), RED, GREEN, BLUE)
    board.resize(3, 6)
    assert (board.width, board.height) == (3, 6)
    assert board.cell_exists(Vec2(2, 0))
    assert not board.cell_exists(Vec2(0, 5))
    board.resize(3, 1)
    assert board.full_lines() == []
    assert board.cell_exists(Vec2(2, 0))


def test_resize_rejects_non_positive():
    board = make_board()
    with pytest.raises(ValueError):
        board.resize(0, 3)