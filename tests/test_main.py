"""Tests for the line-oriented entry point."""

import io
import json

from connect_nd.game import GameState
from connect_nd.main import handle_line, main, run


def play(x, color="red"):
    return json.dumps({"type": "play_disk", "color": color, "position": [x]})


class TestHandleLine:
    def test_disk_placed(self):
        game = GameState([7, 6])
        [msg] = handle_line(game, play(3))
        assert msg["type"] == "disk_placed"
        assert msg["position"] == [3, 0]
        assert msg["won"] is False
        assert msg["round"] == 2

    def test_malformed_json(self):
        game = GameState([7, 6])
        [msg] = handle_line(game, "{not json")
        assert msg["type"] == "error"
        assert msg["kind"] == "invalid_message"

    def test_invalid_message(self):
        game = GameState([7, 6])
        [msg] = handle_line(game, json.dumps(["play_disk"]))
        assert msg["type"] == "error"

    def test_axis_full_error(self):
        game = GameState([2, 1])
        handle_line(game, play(0))
        [msg] = handle_line(game, play(0, "yellow"))
        assert msg["type"] == "error"
        assert msg["kind"] == "axis_full"

    def test_board_full_game_over(self):
        game = GameState([1, 2])
        handle_line(game, play(0))
        placed, over = handle_line(game, play(0, "yellow"))
        assert placed["type"] == "disk_placed"
        assert over == {"type": "game_over", "winner": None, "reason": "board_full"}
        [msg] = handle_line(game, play(0))
        assert msg["kind"] == "board_full"

    def test_out_of_range_error(self):
        game = GameState([7, 6])
        [msg] = handle_line(game, play(99))
        assert msg["type"] == "error"
        assert msg["kind"] == "out_of_range"


class TestRun:
    def test_full_game_flow(self):
        game = GameState([7, 6])
        lines = [play(x) for x in range(4)] + [""]
        responses = list(run(lines, game))
        assert [r["type"] for r in responses] == ["disk_placed"] * 4 + ["game_over"]
        assert responses[3]["won"] is True
        assert responses[-1]["winner"] == "red"
        assert responses[-1]["reason"] == "four_in_row"

    def test_out_of_range_line_does_not_end_session(self):
        game = GameState([7, 6])
        responses = list(run([play(99), play(0)], game))
        assert [r["type"] for r in responses] == ["error", "disk_placed"]
        assert responses[1]["position"] == [0, 0]


class TestMain:
    def test_main_reads_stdin(self, monkeypatch, capsys, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("CONNECT_ND_DIMENSIONS", "7,6")
        monkeypatch.setattr("sys.stdin", io.StringIO(play(0) + "\n"))
        assert main() == 0
        out = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
        assert out[0]["type"] == "disk_placed"
        assert out[0]["color"] == "red"

    def test_main_rejects_one_dimension(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("CONNECT_ND_DIMENSIONS", "7")
        assert main() == 1

    def test_main_rejects_bad_log_level(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("CONNECT_ND_LOG_LEVEL", "verbose")
        assert main() == 2
