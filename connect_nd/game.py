"""Game logic: move orchestration, round bookkeeping and game status."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Sequence

from connect_nd.board import Board, Color, Position
from connect_nd.directions import generate_check_directions, is_winning_move
from connect_nd.errors import BoardFull, GameAlreadyWon
from connect_nd.models import StateSyncMsg

logger = logging.getLogger(__name__)

WIN_LENGTH = 4


class GameStatus(StrEnum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    FULL = "full"


@dataclass(frozen=True)
class Player:
    color: Color


def default_players() -> tuple[Player, Player]:
    return Player(Color.RED), Player(Color.YELLOW)


class GameState:
    def __init__(self, dimensions: Sequence[int]):
        self.board = Board(dimensions)
        self.check_directions = generate_check_directions(self.board.ndim)
        self.players = default_players()
        self.round: int = 1
        self.winner: Color | None = None
        self.last_position: Position | None = None
        logger.info("New game on a %s board", "x".join(map(str, self.board.dimensions)))

    @property
    def capacity(self) -> int:
        return self.board.capacity

    @property
    def current_round(self) -> int:
        return self.round

    @property
    def disks_played(self) -> int:
        return self.round - 1

    @property
    def status(self) -> GameStatus:
        if self.winner is not None:
            return GameStatus.WON
        if self.round > self.capacity:
            return GameStatus.FULL
        return GameStatus.IN_PROGRESS

    def play_disk(self, color: Color, position: Sequence[int]) -> bool:
        """Drop a disk at the given coordinates of all axes but the last. Returns True if it wins."""
        if self.winner is not None:
            raise GameAlreadyWon()
        if self.round > self.capacity:
            raise BoardFull()
        self.board.check_position(position)

        color = Color(color)
        landed = self.board.insert(color, position)
        self.last_position = landed

        won = is_winning_move(self.board, color, landed, self.check_directions, WIN_LENGTH)
        if won:
            self.winner = color
            logger.info("%s wins in round %d with a disk at %s", color, self.round, landed)
        else:
            self.round += 1
            if self.round > self.capacity:
                logger.info("Board is full after %d disks", self.disks_played)
        return won

    def snapshot(self) -> StateSyncMsg:
        return StateSyncMsg(
            dimensions=list(self.board.dimensions),
            cells=self.board.cells(),
            round=self.round,
            status=self.status.value,
            winner=self.winner,
        )
