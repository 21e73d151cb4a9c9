# render.py
from typing import Optional, Tuple

import pygame  # type: ignore

from .config import CELL_SIZE, BG, GREY, GREEN, LIME, RED, TEXT
from .field import CellKind
from .game import Game

_CELL_COLORS = {
    CellKind.FOOD: RED,
    CellKind.BLOCK: GREY,
    CellKind.SNAKE: GREEN,
}


def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * CELL_SIZE, gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect)


def draw_field(screen: pygame.Surface, game: Game) -> None:
    """Paint every non-empty cell; the head gets a brighter green."""
    screen.fill(BG)
    size = game.size()
    head = game.snake_head_location()
    for y in range(size.height):
        for x in range(size.width):
            kind = game.cell(x, y).kind
            if kind is CellKind.EMPTY:
                continue
            color = LIME if (x == head.x and y == head.y) else _CELL_COLORS[kind]
            draw_cell(screen, x, y, color)


def draw_game(screen: pygame.Surface, font: Optional[pygame.font.Font], game: Game,
              step_interval_ms: int) -> None:
    draw_field(screen, game)
    if font is None:
        return
    # score line sits in the HUD strip under the grid
    y = game.size().height * CELL_SIZE + 6
    txt = font.render(f"Score: {game.score()}   Step: {step_interval_ms} ms", True, TEXT)
    screen.blit(txt, (8, y))
