"""pygame host: polls the keyboard, steps the engine and draws each frame."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path

import pygame

from timed_snake.engine import GameEngine
from timed_snake.render import (
    GAME_OVER_TEXT,
    food_visible,
    hud_text,
    segment_angles,
)
from timed_snake.snake import Direction

logger = logging.getLogger(__name__)

SPRITE_FILES = {"head": "head.png", "body": "body.png", "food": "apple.png"}

# Checked in order; the first accepted key wins for the frame.
KEY_BINDINGS: tuple[tuple[int, Direction], ...] = (
    (pygame.K_UP, Direction.UP),
    (pygame.K_DOWN, Direction.DOWN),
    (pygame.K_LEFT, Direction.LEFT),
    (pygame.K_RIGHT, Direction.RIGHT),
)

BACKGROUND = (0, 0, 0)
TEXT_COLOR = (255, 255, 255)


@dataclass
class Sprites:
    head: pygame.Surface
    body: pygame.Surface
    food: pygame.Surface


def load_sprite(path: Path, tile_size: int) -> pygame.Surface:
    """Load one image and scale it to a tile.

    Raises ``FileNotFoundError`` or ``pygame.error`` on a missing or
    undecodable file.
    """
    if not path.is_file():
        raise FileNotFoundError(f"Sprite not found: {path}")
    image = pygame.image.load(str(path)).convert_alpha()
    if image.get_size() != (tile_size, tile_size):
        image = pygame.transform.smoothscale(image, (tile_size, tile_size))
    return image


def _plain_tile(tile_size: int, color: tuple[int, int, int], marker: bool) -> pygame.Surface:
    surf = pygame.Surface((tile_size, tile_size), pygame.SRCALPHA)
    pygame.draw.rect(surf, color, surf.get_rect().inflate(-2, -2), border_radius=4)
    if marker:
        # Eye stripe near the bottom edge, which is "forward" for sprites.
        pygame.draw.rect(
            surf, BACKGROUND, (tile_size // 4, tile_size * 2 // 3, tile_size // 2, 2),
        )
    return surf


def load_sprites(assets_dir: str | Path | None, tile_size: int) -> Sprites:
    """Load sprites from *assets_dir*, or draw plain tiles when it is None."""
    if assets_dir is None:
        return Sprites(
            head=_plain_tile(tile_size, (60, 200, 90), marker=True),
            body=_plain_tile(tile_size, (40, 150, 70), marker=False),
            food=_plain_tile(tile_size, (220, 40, 40), marker=False),
        )
    base = Path(assets_dir)
    loaded = {
        name: load_sprite(base / filename, tile_size)
        for name, filename in SPRITE_FILES.items()
    }
    logger.info("Loaded sprites from %s", base)
    return Sprites(**loaded)


def apply_keys(engine: GameEngine, pressed, now: float) -> None:
    """Translate the polled key state into engine intents."""
    if engine.session.game_over:
        if pressed[pygame.K_SPACE]:
            engine.request_new_session(now)
        return
    for key, direction in KEY_BINDINGS:
        if pressed[key] and engine.set_heading(direction):
            break


class SnakeWindow:
    """Window bound to a single :class:`GameEngine`."""

    def __init__(
        self,
        engine: GameEngine,
        assets_dir: str | Path | None = None,
    ) -> None:
        cfg = engine.config
        self.engine = engine
        self.tile = cfg.tile_size
        self.screen = pygame.display.set_mode(
            (cfg.grid_width * self.tile, cfg.grid_height * self.tile),
        )
        pygame.display.set_caption("Snake Game")
        self.sprites = load_sprites(assets_dir, self.tile)
        self.font = pygame.font.Font(None, 18)

    def run(self, fps: int = 60) -> None:
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            now = time.monotonic()
            apply_keys(self.engine, pygame.key.get_pressed(), now)
            self.engine.step(now)
            self.draw(now)
            pygame.display.flip()
            clock.tick(fps)

    def draw(self, now: float) -> None:
        engine = self.engine
        self.screen.fill(BACKGROUND)

        body = list(engine.snake.body)
        angles = segment_angles(body, engine.snake.direction)
        for i, ((col, row), angle) in enumerate(zip(body, angles, strict=True)):
            sprite = self.sprites.head if i == 0 else self.sprites.body
            self._blit_cell(pygame.transform.rotate(sprite, angle), col, row)

        for item in engine.food.items:
            if food_visible(item, now, engine.config):
                self._blit_cell(self.sprites.food, *item.position)

        self._text(hud_text(engine.session), (4, 4))
        if engine.session.game_over:
            rect = self.screen.get_rect()
            self._text(GAME_OVER_TEXT, (rect.width // 2, rect.height // 2), center=True)

    def _blit_cell(self, sprite: pygame.Surface, col: int, row: int) -> None:
        center = (col * self.tile + self.tile // 2, row * self.tile + self.tile // 2)
        self.screen.blit(sprite, sprite.get_rect(center=center))

    def _text(self, text: str, pos: tuple[int, int], center: bool = False) -> None:
        surf = self.font.render(text, True, TEXT_COLOR)
        rect = surf.get_rect(center=pos) if center else surf.get_rect(topleft=pos)
        self.screen.blit(surf, rect)
