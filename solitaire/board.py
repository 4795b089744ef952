"""Board state: cross-shaped hole mask, peg occupancy, and jump rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from solitaire.errors import InvalidBoardError

# Two-cell jump vectors: up, down, left, right
ORTHOGONAL_JUMPS = [
    (-2, 0),
    (2, 0),
    (0, -2),
    (0, 2),
]

# Diagonal jump vectors: ↖, ↗, ↙, ↘
DIAGONAL_JUMPS = [
    (-2, -2),
    (-2, 2),
    (2, -2),
    (2, 2),
]

PEG = "●"
HOLE = "○"
OFF_BOARD = " "

PEG_CHARS = {PEG, "o"}
HOLE_CHARS = {HOLE, "."}

Cell = tuple[int, int]


class BoardShape(Enum):
    """The two supported cross boards: (side length, corner offset)."""

    ENGLISH = (7, 2)
    EUROPEAN = (9, 3)

    @property
    def size(self) -> int:
        return self.value[0]

    @property
    def offset(self) -> int:
        return self.value[1]

    @classmethod
    def from_name(cls, name: str) -> BoardShape:
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown board shape: {name!r}") from None


def jump_vectors(diagonal: bool) -> list[tuple[int, int]]:
    if diagonal:
        return ORTHOGONAL_JUMPS + DIAGONAL_JUMPS
    return list(ORTHOGONAL_JUMPS)


def is_jump_vector(dr: int, dc: int, diagonal: bool) -> bool:
    """Return True if (dr, dc) is an exact two-cell straight jump."""
    if (abs(dr) == 2 and dc == 0) or (abs(dc) == 2 and dr == 0):
        return True
    return diagonal and abs(dr) == 2 and abs(dc) == 2


@dataclass(frozen=True)
class Move:
    source: Cell
    over: Cell
    dest: Cell


class Board:
    """Peg occupancy over a fixed cross-shaped hole mask.

    Cells are stored row-major in two flat lists indexed by ``row * size + col``.
    The hole mask never changes after construction; pegs only ever sit in holes.
    """

    def __init__(self, shape: BoardShape = BoardShape.ENGLISH):
        self.shape = shape
        self.size: int = shape.size
        lo, hi = shape.offset, shape.size - 1 - shape.offset
        self._holes: list[bool] = [
            not ((r < lo or r > hi) and (c < lo or c > hi))
            for r in range(self.size)
            for c in range(self.size)
        ]
        self._pegs: list[bool] = [False] * (self.size * self.size)
        self.fill_start()

    @classmethod
    def from_rows(cls, shape: BoardShape, rows: Iterable[str]) -> Board:
        """Build a board from a text picture, one string per row.

        ``●`` or ``o`` marks a peg, ``○`` or ``.`` an empty hole, and any other
        character an off-board cell. Short rows are padded with off-board cells.
        """
        rows = list(rows)
        board = cls(shape)
        if len(rows) != board.size:
            raise InvalidBoardError(
                f"{shape.name.lower()} board needs {board.size} rows, got {len(rows)}"
            )

        for r, line in enumerate(rows):
            if len(line) > board.size:
                raise InvalidBoardError(f"Row {r} is wider than {board.size} cells")
            line = line.ljust(board.size)
            for c, char in enumerate(line):
                marked = char in PEG_CHARS or char in HOLE_CHARS
                if marked != board.is_hole(r, c):
                    raise InvalidBoardError(
                        f"Cell ({r}, {c}) {'is not' if marked else 'must be'} part of the board"
                    )
                if marked:
                    board.set_peg(r, c, char in PEG_CHARS)
        return board

    def copy(self) -> Board:
        clone = Board.__new__(Board)
        clone.shape = self.shape
        clone.size = self.size
        clone._holes = self._holes
        clone._pegs = list(self._pegs)
        return clone

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def is_hole(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and self._holes[row * self.size + col]

    def has_peg(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and self._pegs[row * self.size + col]

    def set_peg(self, row: int, col: int, value: bool = True) -> None:
        if not self.is_hole(row, col):
            raise InvalidBoardError(f"Cell ({row}, {col}) is not a hole")
        self._pegs[row * self.size + col] = value

    def fill_start(self) -> None:
        """Put a peg in every hole except the centre."""
        self._pegs = list(self._holes)
        mid = self.size // 2
        self._pegs[mid * self.size + mid] = False

    @property
    def center(self) -> Cell:
        return self.size // 2, self.size // 2

    def hole_count(self) -> int:
        return sum(self._holes)

    def peg_count(self) -> int:
        return sum(self._pegs)

    def can_jump(self, row: int, col: int, dr: int, dc: int) -> bool:
        """Check a jump from (row, col) by vector (dr, dc), which must be even."""
        return (
            self.has_peg(row, col)
            and self.has_peg(row + dr // 2, col + dc // 2)
            and self.is_hole(row + dr, col + dc)
            and not self.has_peg(row + dr, col + dc)
        )

    def jump(self, row: int, col: int, dr: int, dc: int) -> Move:
        """Apply an already validated jump and return it."""
        move = Move(
            source=(row, col),
            over=(row + dr // 2, col + dc // 2),
            dest=(row + dr, col + dc),
        )
        self.set_peg(*move.source, False)
        self.set_peg(*move.over, False)
        self.set_peg(*move.dest, True)
        return move

    def pegs(self) -> list[Cell]:
        return [divmod(i, self.size) for i, peg in enumerate(self._pegs) if peg]

    def legal_moves(self, diagonal: bool = False) -> list[Move]:
        moves = []
        for r, c in self.pegs():
            for dr, dc in jump_vectors(diagonal):
                if self.can_jump(r, c, dr, dc):
                    moves.append(Move((r, c), (r + dr // 2, c + dc // 2), (r + dr, c + dc)))
        return moves

    def has_legal_move(self, diagonal: bool = False) -> bool:
        for r, c in self.pegs():
            for dr, dc in jump_vectors(diagonal):
                if self.can_jump(r, c, dr, dc):
                    return True
        return False

    def render(self) -> list[str]:
        rows = []
        for r in range(self.size):
            line = ""
            for c in range(self.size):
                if not self.is_hole(r, c):
                    line += OFF_BOARD
                elif self.has_peg(r, c):
                    line += PEG
                else:
                    line += HOLE
            rows.append(line)
        return rows

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.shape == other.shape and self._pegs == other._pegs

    def __repr__(self) -> str:
        return f"Board({self.shape.name.lower()}, {self.peg_count()} pegs)"
