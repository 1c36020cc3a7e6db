"""Board state: an N-dimensional grid of disks with gravity along the last axis."""

from __future__ import annotations

import logging
import math
from enum import StrEnum
from typing import Sequence

from connect_nd.errors import AxisFull, CoordinateOutOfRange, InvalidPosition, TooFewDimensions

logger = logging.getLogger(__name__)

MIN_DIMENSIONS = 2

Position = tuple[int, ...]


class Color(StrEnum):
    RED = "red"
    YELLOW = "yellow"


class Board:
    """
    Cells are stored in one flat row-major list.
    The last dimension is the drop axis: index 0 is the bottom.
    Values: None=empty, Color=occupied.
    """

    def __init__(self, dimensions: Sequence[int]):
        if len(dimensions) < MIN_DIMENSIONS:
            raise TooFewDimensions(len(dimensions))
        if any(size < 1 for size in dimensions):
            raise ValueError(f"Dimension sizes must be positive, got {list(dimensions)}")

        self.dimensions: tuple[int, ...] = tuple(dimensions)
        self.strides: tuple[int, ...] = tuple(
            math.prod(self.dimensions[i + 1:]) for i in range(len(self.dimensions))
        )
        self._cells: list[Color | None] = [None] * math.prod(self.dimensions)

    @property
    def ndim(self) -> int:
        return len(self.dimensions)

    @property
    def capacity(self) -> int:
        return len(self._cells)

    def in_bounds(self, position: Sequence[int]) -> bool:
        return len(position) == self.ndim and all(
            0 <= x < size for x, size in zip(position, self.dimensions)
        )

    def _offset(self, position: Sequence[int]) -> int:
        return sum(x * stride for x, stride in zip(position, self.strides))

    def __getitem__(self, position: Sequence[int]) -> Color | None:
        if not self.in_bounds(position):
            raise IndexError(f"Position {list(position)} is outside the board {list(self.dimensions)}")
        return self._cells[self._offset(position)]

    def check_position(self, partial: Sequence[int]) -> None:
        """Checks the coordinates of a move: one per axis except the drop axis, each on the board."""
        if len(partial) != self.ndim - 1:
            raise InvalidPosition(
                f"The input position has to specify the coordinates in {self.ndim - 1} "
                f"dimensions, but {len(partial)} were given"
            )
        for axis, (x, size) in enumerate(zip(partial, self.dimensions)):
            if x < 0 or x >= size:
                raise CoordinateOutOfRange(axis, x, size)

    def column(self, partial: Sequence[int]) -> list[Color | None]:
        """Returns the cells along the drop axis at the fixed coordinates, bottom first."""
        self.check_position(partial)
        base = self._offset(partial)
        return self._cells[base:base + self.dimensions[-1]]

    def landing_position(self, partial: Sequence[int]) -> Position | None:
        """Full coordinate a disk dropped at `partial` would land on, or None if the axis is full."""
        for i, cell in enumerate(self.column(partial)):
            if cell is None:
                return (*partial, i)
        return None

    def insert(self, color: Color, partial: Sequence[int]) -> Position:
        """Drops a disk along the drop axis and returns where it landed."""
        position = self.landing_position(partial)
        if position is None:
            raise AxisFull(tuple(partial))
        self._cells[self._offset(position)] = color
        logger.debug("%s disk landed at %s", color, position)
        return position

    def occupied_count(self) -> int:
        return sum(1 for cell in self._cells if cell is not None)

    def is_full(self) -> bool:
        return all(cell is not None for cell in self._cells)

    def cells(self) -> list[Color | None]:
        return list(self._cells)
