"""Game session: selection, jump validation, move counting, and game over."""

from __future__ import annotations

import logging

from solitaire.board import Board, BoardShape, Cell, is_jump_vector
from solitaire.config import Settings
from solitaire.models import REJECTIONS, ActionResult, Outcome, SessionSnapshot, SessionState

logger = logging.getLogger(__name__)

MSG_NEW_GAME = "New game started. Select a peg, then select an empty hole."
MSG_RESTARTED = "Game restarted. Select a peg, then select an empty hole."
MSG_SELECTED = "Peg selected. Now click a destination empty hole."
MSG_SWITCHED = "Switched selection. Now click a destination empty hole."
MSG_CLEARED = "Selection cleared. Select a peg."
MSG_EMPTY_CELL = "That hole is empty. Select a peg first."
MSG_NOT_A_HOLE = "That cell is not part of the board."
MSG_NO_SELECTION = "Select a peg first."
MSG_INVALID_MOVE = "Invalid move. Jump over exactly one peg into an empty hole."
MSG_MOVED = "Move made. Select a peg for the next move."
MSG_MOVED_GAME_OVER = "Move made. Game over: no moves available."
MSG_GAME_OVER = "Game over: no moves available. Start a new game or restart."
MSG_DIAGONAL_ON = "Diagonal moves enabled."
MSG_DIAGONAL_OFF = "Diagonal moves disabled."
MSG_IGNORED = ""


class ScoreTracker:
    """Running score, one point per captured peg."""

    def __init__(self):
        self.score: int = 0

    def add_point(self) -> None:
        self.score += 1

    def reset(self) -> None:
        self.score = 0


class GameSession:
    def __init__(
        self,
        shape: BoardShape = BoardShape.ENGLISH,
        diagonal_moves_allowed: bool = False,
        board: Board | None = None,
    ):
        """Start a session on a fresh board, or on ``board`` when one is given."""
        self.diagonal_moves_allowed: bool = diagonal_moves_allowed
        self.scores = ScoreTracker()
        self.board: Board = board if board is not None else Board(shape)
        self.move_count: int = 0
        self.selected_cell: Cell | None = None
        self.state: SessionState = self._resting_state()

    @classmethod
    def from_settings(cls, settings: Settings) -> GameSession:
        return cls(settings.board_shape, settings.diagonal_moves)

    @property
    def shape(self) -> BoardShape:
        return self.board.shape

    @property
    def score(self) -> int:
        return self.scores.score

    def _result(self, outcome: Outcome, message: str) -> ActionResult:
        return ActionResult(
            ok=outcome not in REJECTIONS, outcome=outcome, message=message, state=self.state
        )

    def _reject(self, outcome: Outcome, message: str) -> ActionResult:
        logger.debug("Rejected at %s: %s", self.state.value, outcome.value)
        return self._result(outcome, message)

    def _resting_state(self) -> SessionState:
        if self.is_terminal():
            return SessionState.GAME_OVER
        return SessionState.AWAITING_SELECTION

    def _reset_progress(self) -> None:
        self.move_count = 0
        self.scores.reset()
        self.selected_cell = None
        self.state = self._resting_state()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def new_game(self, shape: BoardShape | None = None) -> ActionResult:
        """Rebuild the board (keeping the current shape unless one is given)."""
        self.board = Board(shape if shape is not None else self.shape)
        self._reset_progress()
        logger.info("New %s game, %d pegs", self.shape.name.lower(), self.peg_count())
        return self._result(Outcome.NEW_GAME, self._status(MSG_NEW_GAME))

    def restart(self) -> ActionResult:
        self.board.fill_start()
        self._reset_progress()
        logger.info("Restarted %s game", self.shape.name.lower())
        return self._result(Outcome.RESTARTED, self._status(MSG_RESTARTED))

    def _status(self, message: str) -> str:
        if self.state is SessionState.GAME_OVER:
            return MSG_GAME_OVER
        return message

    def set_diagonal_moves(self, enabled: bool) -> ActionResult:
        self.diagonal_moves_allowed = enabled
        message = MSG_DIAGONAL_ON if enabled else MSG_DIAGONAL_OFF

        if self.state is not SessionState.GAME_OVER and self.is_terminal():
            self.selected_cell = None
            self.state = SessionState.GAME_OVER
            logger.info("Game over after diagonal change: %d pegs left", self.peg_count())
            message = f"{message} {MSG_GAME_OVER}"
        return self._result(Outcome.DIAGONAL_CHANGED, message)

    # ------------------------------------------------------------------
    # Play
    # ------------------------------------------------------------------

    def select_peg(self, row: int, col: int) -> ActionResult:
        if self.state is SessionState.GAME_OVER:
            return self._reject(Outcome.GAME_ALREADY_OVER, MSG_GAME_OVER)
        if not self.board.is_hole(row, col):
            return self._reject(Outcome.TARGET_NOT_A_HOLE, MSG_NOT_A_HOLE)

        if self.selected_cell == (row, col):
            self.selected_cell = None
            self.state = SessionState.AWAITING_SELECTION
            return self._result(Outcome.SELECTION_CLEARED, MSG_CLEARED)

        if not self.board.has_peg(row, col):
            return self._reject(Outcome.NOT_A_PEG, MSG_EMPTY_CELL)

        switched = self.selected_cell is not None
        self.selected_cell = (row, col)
        self.state = SessionState.PEG_SELECTED
        logger.debug("Selected (%d, %d)", row, col)
        if switched:
            return self._result(Outcome.SELECTION_SWITCHED, MSG_SWITCHED)
        return self._result(Outcome.SELECTION_SET, MSG_SELECTED)

    def validate_move(self, dest_row: int, dest_col: int) -> Outcome | None:
        """Return the reason a jump to (dest_row, dest_col) is illegal, or None."""
        if self.state is SessionState.GAME_OVER:
            return Outcome.GAME_ALREADY_OVER
        if self.selected_cell is None:
            return Outcome.NO_SELECTION_YET
        if not self.board.is_hole(dest_row, dest_col):
            return Outcome.TARGET_NOT_A_HOLE
        if self.board.has_peg(dest_row, dest_col):
            return Outcome.TARGET_OCCUPIED

        sel_row, sel_col = self.selected_cell
        dr, dc = dest_row - sel_row, dest_col - sel_col
        if not is_jump_vector(dr, dc, self.diagonal_moves_allowed):
            return Outcome.ILLEGAL_DIRECTION_OR_DISTANCE
        if not self.board.has_peg(sel_row + dr // 2, sel_col + dc // 2):
            return Outcome.MIDPOINT_EMPTY_OR_NOT_A_HOLE
        return None

    def attempt_move(self, dest_row: int, dest_col: int) -> ActionResult:
        error = self.validate_move(dest_row, dest_col)
        if error is Outcome.GAME_ALREADY_OVER:
            return self._reject(error, MSG_GAME_OVER)
        if error is Outcome.NO_SELECTION_YET:
            return self._reject(error, MSG_NO_SELECTION)
        if error is not None:
            return self._reject(error, MSG_INVALID_MOVE)

        sel_row, sel_col = self.selected_cell
        move = self.board.jump(sel_row, sel_col, dest_row - sel_row, dest_col - sel_col)
        self.selected_cell = None
        self.move_count += 1
        self.scores.add_point()
        logger.debug("Move %d: %s over %s to %s", self.move_count, move.source, move.over, move.dest)

        if self.is_terminal():
            self.state = SessionState.GAME_OVER
            logger.info(
                "Game over after %d moves, %d pegs left", self.move_count, self.peg_count()
            )
            return self._result(Outcome.MOVED, MSG_MOVED_GAME_OVER)

        self.state = SessionState.AWAITING_SELECTION
        return self._result(Outcome.MOVED, MSG_MOVED)

    def click(self, row: int, col: int) -> ActionResult:
        """Route a click on (row, col) to selection or a move attempt."""
        if not self.board.is_hole(row, col):
            return self._result(Outcome.IGNORED, MSG_IGNORED)
        if self.state is SessionState.GAME_OVER:
            return self._reject(Outcome.GAME_ALREADY_OVER, MSG_GAME_OVER)

        if self.selected_cell is None or self.board.has_peg(row, col):
            return self.select_peg(row, col)
        return self.attempt_move(row, col)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_terminal(self) -> bool:
        return not self.board.has_legal_move(self.diagonal_moves_allowed)

    def peg_count(self) -> int:
        return self.board.peg_count()

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            shape=self.shape.name.lower(),
            size=self.board.size,
            rows=self.board.render(),
            move_count=self.move_count,
            peg_count=self.peg_count(),
            score=self.score,
            diagonal_moves_allowed=self.diagonal_moves_allowed,
            selected_cell=self.selected_cell,
            state=self.state,
        )
