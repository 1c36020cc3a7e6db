"""Tests for message parsing."""

from connect_nd.board import Color
from connect_nd.models import ErrorMsg, PlayDiskMsg, parse_client_message


class TestParseClientMessage:
    def test_play_disk(self):
        msg = parse_client_message({"type": "play_disk", "color": "red", "position": [1, 2]})
        assert isinstance(msg, PlayDiskMsg)
        assert msg.color == Color.RED
        assert msg.position == [1, 2]

    def test_unknown_type(self):
        assert parse_client_message({"type": "create_room"}) is None
        assert parse_client_message({}) is None

    def test_invalid_color(self):
        assert parse_client_message({"type": "play_disk", "color": "green", "position": [0]}) is None

    def test_missing_position(self):
        assert parse_client_message({"type": "play_disk", "color": "yellow"}) is None


def test_error_msg_dump():
    assert ErrorMsg(kind="axis_full", message="full").model_dump() == {
        "type": "error",
        "kind": "axis_full",
        "message": "full",
    }
