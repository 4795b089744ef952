"""Pydantic models for session results, snapshots, and shell commands."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ValidationError


class SessionState(str, Enum):
    AWAITING_SELECTION = "awaiting_selection"
    PEG_SELECTED = "peg_selected"
    GAME_OVER = "game_over"


class Outcome(str, Enum):
    # Accepted
    NEW_GAME = "new_game"
    RESTARTED = "restarted"
    SELECTION_SET = "selection_set"
    SELECTION_SWITCHED = "selection_switched"
    SELECTION_CLEARED = "selection_cleared"
    MOVED = "moved"
    DIAGONAL_CHANGED = "diagonal_changed"
    IGNORED = "ignored"

    # Rejected
    NO_SELECTION_YET = "no_selection_yet"
    TARGET_NOT_A_HOLE = "target_not_a_hole"
    TARGET_OCCUPIED = "target_occupied"
    ILLEGAL_DIRECTION_OR_DISTANCE = "illegal_direction_or_distance"
    MIDPOINT_EMPTY_OR_NOT_A_HOLE = "midpoint_empty_or_not_a_hole"
    GAME_ALREADY_OVER = "game_already_over"
    NOT_A_PEG = "not_a_peg"


REJECTIONS = frozenset({
    Outcome.NO_SELECTION_YET,
    Outcome.TARGET_NOT_A_HOLE,
    Outcome.TARGET_OCCUPIED,
    Outcome.ILLEGAL_DIRECTION_OR_DISTANCE,
    Outcome.MIDPOINT_EMPTY_OR_NOT_A_HOLE,
    Outcome.GAME_ALREADY_OVER,
    Outcome.NOT_A_PEG,
})


# ---------------------------------------------------------------------------
# Session → Shell
# ---------------------------------------------------------------------------

class ActionResult(BaseModel):
    type: Literal["result"] = "result"
    ok: bool
    outcome: Outcome
    message: str
    state: SessionState


class SessionSnapshot(BaseModel):
    type: Literal["snapshot"] = "snapshot"
    shape: str
    size: int
    rows: list[str]
    move_count: int
    peg_count: int
    score: int
    diagonal_moves_allowed: bool
    selected_cell: tuple[int, int] | None
    state: SessionState


class ErrorResult(BaseModel):
    type: Literal["error"] = "error"
    message: str


# ---------------------------------------------------------------------------
# Shell → Session
# ---------------------------------------------------------------------------

class SelectCmd(BaseModel):
    type: Literal["select"] = "select"
    row: int
    col: int


class MoveCmd(BaseModel):
    type: Literal["move"] = "move"
    row: int
    col: int


class ClickCmd(BaseModel):
    type: Literal["click"] = "click"
    row: int
    col: int


class NewGameCmd(BaseModel):
    type: Literal["new_game"] = "new_game"
    shape: Literal["english", "european"] | None = None


class RestartCmd(BaseModel):
    type: Literal["restart"] = "restart"


class SetDiagonalCmd(BaseModel):
    type: Literal["set_diagonal"] = "set_diagonal"
    enabled: bool


class SnapshotCmd(BaseModel):
    type: Literal["snapshot"] = "snapshot"


Command = SelectCmd | MoveCmd | ClickCmd | NewGameCmd | RestartCmd | SetDiagonalCmd | SnapshotCmd


def parse_command(data: dict) -> Command | None:
    """Parse a raw dict into a typed command, or None if invalid."""
    if not isinstance(data, dict):
        return None
    mapping: dict[str, type[BaseModel]] = {
        "select": SelectCmd,
        "move": MoveCmd,
        "click": ClickCmd,
        "new_game": NewGameCmd,
        "restart": RestartCmd,
        "set_diagonal": SetDiagonalCmd,
        "snapshot": SnapshotCmd,
    }
    model = mapping.get(data.get("type"))  # type: ignore[arg-type]
    if model is None:
        return None
    try:
        return model.model_validate(data)  # type: ignore[return-value]
    except ValidationError:
        return None
