"""Exceptions for input that falls outside the game rules.

Rule violations (bad selections, illegal jumps) are not exceptions; they come
back as rejected results from the session.
"""


class SolitaireError(Exception):
    """Base class for all engine exceptions."""


class InvalidBoardError(SolitaireError):
    """A board picture does not match its shape."""


class ConfigError(SolitaireError):
    """An environment setting has an unusable value."""
