"""Tests for the command line entry point."""

from timed_snake.cli import _build_parser, main
from timed_snake.config import GameConfig


class TestCLIParser:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_play_defaults(self):
        args = _build_parser().parse_args(["play"])
        assert args.command == "play"
        assert args.assets is None
        assert args.config is None
        assert args.seed is None
        assert args.fps == 60

    def test_play_with_flags(self):
        args = _build_parser().parse_args([
            "play", "--assets", "img", "--seed", "3", "--fps", "30",
        ])
        assert args.assets == "img"
        assert args.seed == 3
        assert args.fps == 30

    def test_simulate_defaults(self):
        args = _build_parser().parse_args(["simulate"])
        assert args.command == "simulate"
        assert args.sessions == 100
        assert args.seed == 42
        assert args.max_ticks == 10_000
        assert not args.show

    def test_verbose_flag(self):
        args = _build_parser().parse_args(["-v", "simulate"])
        assert args.verbose


class TestCLISimulate:
    def test_simulate_short_run(self, capsys):
        assert main(["simulate", "--sessions", "2", "--seed", "1"]) == 0
        out = capsys.readouterr().out
        assert "Simulation: 2 session(s)" in out

    def test_simulate_with_config(self, tmp_path, capsys):
        path = tmp_path / "cfg.json"
        GameConfig(grid_width=8, grid_height=6, initial_lives=1).save(path)
        assert main(["simulate", "--sessions", "1", "--config", str(path)]) == 0
        assert "1 session(s)" in capsys.readouterr().out

    def test_simulate_show_prints_frames(self, capsys):
        assert main([
            "simulate", "--sessions", "1", "--max-ticks", "2", "--show",
        ]) == 0
        out = capsys.readouterr().out
        assert "Score: " in out
        assert "@" in out
