"""Session defaults read from the environment (and a .env file, if present)."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

from solitaire.board import BoardShape
from solitaire.errors import ConfigError

# Environment variable -> Settings field. Unset or empty variables keep the default.
ENV_FIELDS = {
    "SOLITAIRE_BOARD_SHAPE": "board_shape",
    "SOLITAIRE_DIAGONAL_MOVES": "diagonal_moves",
    "SOLITAIRE_LOG_LEVEL": "log_level",
}


class Settings(BaseModel):
    board_shape: BoardShape = BoardShape.ENGLISH
    diagonal_moves: bool = False
    log_level: int = logging.WARNING

    @field_validator("board_shape", mode="before")
    @classmethod
    def shape_from_name(cls, value):
        if isinstance(value, str):
            return BoardShape.from_name(value)
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def level_from_name(cls, value):
        if isinstance(value, str):
            level = logging.getLevelName(value.strip().upper())
            if not isinstance(level, int):
                raise ValueError(f"not a logging level name: {value!r}")
            return level
        return value


def load_settings(dotenv_path: str | None = None) -> Settings:
    """Read SOLITAIRE_* variables into a Settings model."""
    load_dotenv(dotenv_path)

    raw = {}
    for env_name, field in ENV_FIELDS.items():
        value = os.getenv(env_name, "").strip()
        if value:
            raw[field] = value

    try:
        return Settings.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid SOLITAIRE_* setting: {e}") from e
