"""Game errors: recoverable game conditions and malformed caller input."""

from __future__ import annotations

from enum import StrEnum


class GameErrorKind(StrEnum):
    BOARD_FULL = "board_full"
    AXIS_FULL = "axis_full"
    TOO_FEW_DIMENSIONS = "too_few_dimensions"
    GAME_WON = "game_won"
    OUT_OF_RANGE = "out_of_range"


class GameError(Exception):
    """Base class for conditions a caller is expected to handle."""

    kind: GameErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TooFewDimensions(GameError):
    kind = GameErrorKind.TOO_FEW_DIMENSIONS

    def __init__(self, n_dims: int):
        super().__init__(f"A board needs at least 2 dimensions, got {n_dims}")
        self.n_dims = n_dims


class AxisFull(GameError):
    kind = GameErrorKind.AXIS_FULL

    def __init__(self, position: tuple[int, ...]):
        super().__init__(f"No empty cell left along the drop axis at {list(position)}")
        self.position = position


class CoordinateOutOfRange(GameError):
    kind = GameErrorKind.OUT_OF_RANGE

    def __init__(self, axis: int, coordinate: int, size: int):
        super().__init__(f"Coordinate {coordinate} out of range for axis {axis} of size {size}")
        self.axis = axis
        self.coordinate = coordinate


class BoardFull(GameError):
    kind = GameErrorKind.BOARD_FULL

    def __init__(self):
        super().__init__("Board is full")


class GameAlreadyWon(GameError):
    kind = GameErrorKind.GAME_WON

    def __init__(self):
        super().__init__("Game is already over")


class InvalidPosition(ValueError):
    """Raised for a coordinate vector of the wrong length.

    Not a GameError: this is a broken caller, not a game state.
    """
