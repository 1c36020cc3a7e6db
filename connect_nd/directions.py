"""Win detection: direction vectors in N dimensions and line-of-four scanning."""

from __future__ import annotations

import logging
from typing import Sequence

from connect_nd.board import Board, Color, Position

logger = logging.getLogger(__name__)

# Possible step per axis
STEPS = (1, 0, -1)

Direction = tuple[int, ...]


def _all_vectors(n_dims: int) -> list[Direction]:
    if n_dims == 0:
        return [()]
    return [(step, *rest) for step in STEPS for rest in _all_vectors(n_dims - 1)]


def negate(direction: Direction) -> Direction:
    return tuple(-step for step in direction)


def generate_check_directions(n_dims: int) -> frozenset[Direction]:
    """
    Generate the direction vectors needed to check if a position is part of a winning line.

    Every axis can step by -1, 0 or 1, giving 3^n_dims vectors. The all-zero
    vector is dropped, and of each vector and its inverse only one is kept
    since a line is scanned both ways. The result has (3^n_dims - 1) / 2 vectors.
    """
    directions: set[Direction] = set()
    for vec in _all_vectors(n_dims):
        if negate(vec) not in directions:
            directions.add(vec)

    directions.discard((0,) * n_dims)
    logger.debug("Generated %d check directions for %d dimensions", len(directions), n_dims)
    return frozenset(directions)


def count_run(board: Board, color: Color, position: Sequence[int], direction: Direction, limit: int) -> int:
    """Number of consecutive `color` disks stepping from `position` along `direction`, up to `limit`."""
    count = 0
    for i in range(1, limit + 1):
        step = tuple(x + d * i for x, d in zip(position, direction))
        if not board.in_bounds(step) or board[step] != color:
            break
        count += 1
    return count


def is_winning_move(
    board: Board,
    color: Color,
    position: Position,
    directions: frozenset[Direction],
    win_length: int = 4,
) -> bool:
    """Check if the disk just placed at `position` completes a line of `win_length`."""
    reach = win_length - 1
    for direction in directions:
        count = 1
        count += count_run(board, color, position, direction, reach)
        count += count_run(board, color, position, negate(direction), reach)
        if count >= win_length:
            logger.debug("Line of %d through %s along %s", count, position, direction)
            return True

    return False
