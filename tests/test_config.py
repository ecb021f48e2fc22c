"""Tests for the game configuration dataclass."""

import json

import pytest

from timed_snake.config import GameConfig


class TestGameConfig:
    def test_defaults(self):
        cfg = GameConfig()
        assert (cfg.grid_width, cfg.grid_height) == (13, 10)
        assert cfg.tick_interval == 0.1
        assert cfg.max_food == 4
        assert cfg.food_lifetime == 4.0
        assert cfg.spawn_delay == 1.0
        assert cfg.initial_length == 3
        assert cfg.food_reward == 10
        assert cfg.initial_lives == 3

    def test_start_cell(self):
        assert GameConfig().start_cell == (6, 5)

    def test_frozen(self):
        cfg = GameConfig()
        with pytest.raises(AttributeError):
            cfg.max_food = 5

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"grid_width": 3}, "at least 4"),
            ({"tick_interval": 0}, "tick_interval"),
            ({"food_lifetime": -1.0}, "food_lifetime"),
            ({"max_food": 0}, "max_food"),
            ({"initial_lives": 0}, "initial_lives"),
            ({"initial_length": 0}, "initial_length"),
            ({"grid_width": 4, "initial_length": 4}, "does not fit"),
        ],
    )
    def test_validation(self, overrides, message):
        with pytest.raises(ValueError, match=message):
            GameConfig(**overrides)

    def test_to_dict_serializable(self):
        serialized = json.dumps(GameConfig().to_dict())
        assert isinstance(serialized, str)

    def test_save_and_load(self, tmp_path):
        cfg = GameConfig(grid_width=20, grid_height=15, max_food=6)
        path = tmp_path / "nested" / "config.json"
        cfg.save(path)
        assert path.exists()
        assert GameConfig.load(path) == cfg
