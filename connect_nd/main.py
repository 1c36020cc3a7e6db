"""Line-oriented entry point: one JSON message per line on stdin and stdout."""

from __future__ import annotations

import json
import logging
import sys
from typing import Iterable, Iterator

from connect_nd.config import load_settings
from connect_nd.errors import GameError
from connect_nd.game import GameState
from connect_nd.models import (
    DiskPlacedMsg,
    ErrorMsg,
    GameOverMsg,
    parse_client_message,
)

logger = logging.getLogger(__name__)


def handle_line(game: GameState, line: str) -> list[dict]:
    """Apply one raw message to the game and return the response messages."""
    try:
        data = json.loads(line)
    except json.JSONDecodeError:
        return [ErrorMsg(kind="invalid_message", message="Malformed JSON").model_dump()]

    msg = parse_client_message(data) if isinstance(data, dict) else None
    if msg is None:
        return [ErrorMsg(kind="invalid_message", message="Unknown or invalid message").model_dump()]

    try:
        won = game.play_disk(msg.color, msg.position)
    except GameError as e:
        return [ErrorMsg(kind=e.kind.value, message=e.message).model_dump()]

    responses = [
        DiskPlacedMsg(
            color=msg.color,
            position=list(game.last_position),
            won=won,
            round=game.current_round,
        ).model_dump()
    ]
    if won:
        responses.append(GameOverMsg(winner=game.winner, reason="four_in_row").model_dump())
    elif game.current_round > game.capacity:
        responses.append(GameOverMsg(winner=None, reason="board_full").model_dump())
    return responses


def run(lines: Iterable[str], game: GameState) -> Iterator[dict]:
    for line in lines:
        if not line.strip():
            continue
        yield from handle_line(game, line)


def main() -> int:
    try:
        settings = load_settings()
    except ValueError as e:
        print(e, file=sys.stderr)
        return 2
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        game = GameState(settings.dimensions)
    except (GameError, ValueError) as e:
        logger.error("Cannot start game: %s", e)
        return 1

    for response in run(sys.stdin, game):
        print(json.dumps(response), flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
