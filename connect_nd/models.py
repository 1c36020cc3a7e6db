"""Pydantic models for the line-oriented message protocol."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, ValidationError

from connect_nd.board import Color


# ---------------------------------------------------------------------------
# Caller → Engine
# ---------------------------------------------------------------------------

class PlayDiskMsg(BaseModel):
    type: Literal["play_disk"] = "play_disk"
    color: Color
    position: list[int] = Field(description="Coordinates of every axis except the drop axis")


ClientMessage = PlayDiskMsg


# ---------------------------------------------------------------------------
# Engine → Caller
# ---------------------------------------------------------------------------

class DiskPlacedMsg(BaseModel):
    type: Literal["disk_placed"] = "disk_placed"
    color: Color
    position: list[int]
    won: bool
    round: int


class GameOverMsg(BaseModel):
    type: Literal["game_over"] = "game_over"
    winner: Color | None
    reason: str  # "four_in_row" | "board_full"


class StateSyncMsg(BaseModel):
    type: Literal["state_sync"] = "state_sync"
    dimensions: list[int]
    cells: list[Color | None]  # flattened, row-major
    round: int
    status: Literal["in_progress", "won", "full"]
    winner: Color | None = None


class ErrorMsg(BaseModel):
    type: Literal["error"] = "error"
    kind: str
    message: str


def parse_client_message(data: dict) -> ClientMessage | None:
    """Parse a raw dict into a typed client message, or None if invalid."""
    if data.get("type") != "play_disk":
        return None
    try:
        return PlayDiskMsg.model_validate(data)
    except ValidationError:
        return None
