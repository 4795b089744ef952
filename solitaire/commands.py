"""Command routing from a presentation shell to a game session."""

from __future__ import annotations

from solitaire.board import BoardShape
from solitaire.config import load_settings
from solitaire.log import setup_logging
from solitaire.models import (
    ClickCmd,
    ErrorResult,
    MoveCmd,
    NewGameCmd,
    RestartCmd,
    SelectCmd,
    SetDiagonalCmd,
    parse_command,
)
from solitaire.session import GameSession


def dispatch(session: GameSession, data: dict) -> dict:
    """Apply one raw command to ``session`` and return a JSON-ready reply."""
    msg = parse_command(data)
    if msg is None:
        return ErrorResult(message="Unknown or invalid command").model_dump()

    if isinstance(msg, SelectCmd):
        result = session.select_peg(msg.row, msg.col)

    elif isinstance(msg, MoveCmd):
        result = session.attempt_move(msg.row, msg.col)

    elif isinstance(msg, ClickCmd):
        result = session.click(msg.row, msg.col)

    elif isinstance(msg, NewGameCmd):
        result = session.new_game(BoardShape.from_name(msg.shape) if msg.shape else None)

    elif isinstance(msg, RestartCmd):
        result = session.restart()

    elif isinstance(msg, SetDiagonalCmd):
        result = session.set_diagonal_moves(msg.enabled)

    else:
        return session.snapshot().model_dump(mode="json")

    return result.model_dump(mode="json")


def create_session(dotenv_path: str | None = None) -> GameSession:
    """Build a session from environment settings and configure logging."""
    settings = load_settings(dotenv_path)
    setup_logging(settings.log_level)
    return GameSession.from_settings(settings)
