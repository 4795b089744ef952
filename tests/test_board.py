"""Unit tests for the board: hole mask, starting layout, jumps, text pictures."""

import pytest

from solitaire.board import Board, BoardShape, Move, is_jump_vector
from solitaire.errors import InvalidBoardError

SINGLE_PEG = [
    "  ...  ",
    "  ...  ",
    ".......",
    "...o...",
    ".......",
    "  ...  ",
    "  ...  ",
]


class TestShape:
    def test_sizes(self):
        assert BoardShape.ENGLISH.size == 7
        assert BoardShape.EUROPEAN.size == 9

    def test_from_name(self):
        assert BoardShape.from_name("english") is BoardShape.ENGLISH
        assert BoardShape.from_name(" European ") is BoardShape.EUROPEAN

    def test_from_unknown_name(self):
        with pytest.raises(ValueError):
            BoardShape.from_name("triangle")


class TestHoleMask:
    def test_english_hole_count(self):
        assert Board(BoardShape.ENGLISH).hole_count() == 33

    def test_european_hole_count(self):
        assert Board(BoardShape.EUROPEAN).hole_count() == 45

    def test_english_corners_excluded(self):
        board = Board(BoardShape.ENGLISH)
        for r, c in [(0, 0), (1, 1), (0, 6), (1, 5), (5, 1), (6, 6), (5, 5)]:
            assert board.is_hole(r, c) is False
        for r, c in [(0, 2), (0, 4), (2, 0), (4, 6), (6, 3), (3, 3)]:
            assert board.is_hole(r, c) is True

    def test_european_corners_excluded(self):
        board = Board(BoardShape.EUROPEAN)
        assert board.is_hole(2, 2) is False
        assert board.is_hole(0, 3) is True
        assert board.is_hole(3, 0) is True
        assert board.is_hole(8, 8) is False

    def test_out_of_bounds(self):
        board = Board()
        assert board.is_hole(-1, 3) is False
        assert board.has_peg(3, 7) is False


class TestStartingLayout:
    @pytest.mark.parametrize("shape", list(BoardShape))
    def test_every_hole_but_center_has_peg(self, shape):
        board = Board(shape)
        assert board.peg_count() == board.hole_count() - 1
        assert board.has_peg(*board.center) is False

    def test_render(self):
        rows = Board(BoardShape.ENGLISH).render()
        assert rows[0] == "  ●●●  "
        assert rows[3] == "●●●○●●●"
        assert len(rows) == 7

    def test_fill_start_restores_layout(self):
        board = Board()
        board.jump(1, 3, 2, 0)
        board.fill_start()
        assert board == Board()


class TestJumps:
    def test_jump_vectors(self):
        assert is_jump_vector(2, 0, diagonal=False)
        assert is_jump_vector(0, -2, diagonal=False)
        assert not is_jump_vector(2, 2, diagonal=False)
        assert is_jump_vector(-2, 2, diagonal=True)
        assert not is_jump_vector(2, 1, diagonal=True)
        assert not is_jump_vector(4, 0, diagonal=True)

    def test_opening_moves(self):
        moves = Board().legal_moves()
        assert [m.source for m in moves] == [(1, 3), (3, 1), (3, 5), (5, 3)]
        assert all(m.dest == (3, 3) for m in moves)

    def test_jump_updates_three_cells(self):
        board = Board()
        move = board.jump(1, 3, 2, 0)
        assert move == Move(source=(1, 3), over=(2, 3), dest=(3, 3))
        assert board.has_peg(1, 3) is False
        assert board.has_peg(2, 3) is False
        assert board.has_peg(3, 3) is True
        assert board.peg_count() == 31

    def test_copy_is_independent(self):
        board = Board()
        clone = board.copy()
        clone.jump(1, 3, 2, 0)
        assert board.peg_count() == 32
        assert clone.peg_count() == 31

    def test_set_peg_outside_mask(self):
        with pytest.raises(InvalidBoardError):
            Board().set_peg(0, 0)


class TestFromRows:
    def test_single_peg(self):
        board = Board.from_rows(BoardShape.ENGLISH, SINGLE_PEG)
        assert board.peg_count() == 1
        assert board.has_peg(3, 3)
        assert board.has_legal_move() is False
        assert board.has_legal_move(diagonal=True) is False

    def test_render_round_trip(self):
        board = Board()
        assert Board.from_rows(BoardShape.ENGLISH, board.render()) == board

    def test_wrong_row_count(self):
        with pytest.raises(InvalidBoardError):
            Board.from_rows(BoardShape.EUROPEAN, SINGLE_PEG)

    def test_peg_off_board(self):
        rows = list(SINGLE_PEG)
        rows[0] = "o ...  "
        with pytest.raises(InvalidBoardError):
            Board.from_rows(BoardShape.ENGLISH, rows)

    def test_missing_hole(self):
        rows = list(SINGLE_PEG)
        rows[2] = "...... "
        with pytest.raises(InvalidBoardError):
            Board.from_rows(BoardShape.ENGLISH, rows)

    def test_uppercase_o_is_not_a_peg(self):
        rows = list(SINGLE_PEG)
        rows[3] = "...O..."
        with pytest.raises(InvalidBoardError):
            Board.from_rows(BoardShape.ENGLISH, rows)

    def test_row_too_wide(self):
        rows = list(SINGLE_PEG)
        rows[3] = "...o....."
        with pytest.raises(InvalidBoardError):
            Board.from_rows(BoardShape.ENGLISH, rows)
