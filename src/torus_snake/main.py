# main.py
import argparse
from typing import Optional, Sequence

import pygame  # type: ignore

from .config import CELL_SIZE, GRID_W, GRID_H, HUD_HEIGHT, CFG, Config
from .game import Game, SnakeGameError
from .geometry import Direction
from .render import draw_game

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}
FASTER_KEYS = (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS)
SLOWER_KEYS = (pygame.K_MINUS, pygame.K_KP_MINUS)
QUIT_KEYS = (pygame.K_q, pygame.K_ESCAPE)


# ---------- Input helpers ----------
def direction_for_key(key: int, current: Direction) -> Direction:
    """Arrow keys pick a direction; anything else keeps the current one."""
    return KEY_DIRECTIONS.get(key, current)


def adjust_interval(interval_ms: int, key: int, cfg: Config) -> int:
    """+ shortens the step interval (never below cfg.min_step_ms), - lengthens it."""
    if key in FASTER_KEYS and interval_ms > cfg.min_step_ms:
        return max(cfg.min_step_ms, interval_ms - cfg.step_delta_ms)
    if key in SLOWER_KEYS:
        return interval_ms + cfg.step_delta_ms
    return interval_ms


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Snake on a wrap-around grid.")
    parser.add_argument("--width", type=int, default=GRID_W, help="grid width in cells")
    parser.add_argument("--height", type=int, default=GRID_H, help="grid height in cells")
    parser.add_argument("--seed", type=int, default=CFG.seed, help="seed for level generation")
    parser.add_argument("--interval", type=int, default=CFG.step_interval_ms,
                        help="initial step interval in ms")
    parser.add_argument("--debug", action="store_true", help="print a line whenever a level ends")
    return parser.parse_args(argv)


# ---------- Loop ----------
def run(game: Game, cfg: Config) -> None:
    pygame.init()
    font = pygame.font.SysFont(None, 24)
    size = game.size()
    screen = pygame.display.set_mode((size.width * CELL_SIZE, size.height * CELL_SIZE + HUD_HEIGHT))
    pygame.display.set_caption("Snake — torus")
    clock = pygame.time.Clock()

    direction = Direction.RIGHT
    interval = cfg.step_interval_ms
    levels, best = 1, 0

    game.prepare_level()
    draw_game(screen, font, game, interval)
    pygame.display.flip()
    last_step = pygame.time.get_ticks()
    running = True

    try:
        while running:
            # 1) input
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key in QUIT_KEYS:
                        running = False
                    direction = direction_for_key(event.key, direction)
                    interval = adjust_interval(interval, event.key, cfg)
            if not running:
                break

            # 2) update on a fixed cadence
            now = pygame.time.get_ticks()
            if now - last_step >= interval:
                try:
                    game.handle_next_step(direction)
                except SnakeGameError as exc:
                    best = max(best, game.score())
                    if cfg.debug:
                        print(f"[GAME] level {levels} over: {exc} (score={game.score()})")
                    game.prepare_level()
                    direction = Direction.RIGHT
                    levels += 1
                last_step = now

                # 3) render
                draw_game(screen, font, game, interval)
                pygame.display.flip()

            clock.tick(1000 // max(cfg.poll_ms, 1))
    finally:
        best = max(best, game.score())
        pygame.quit()

    print(f"[GAME] Played {levels} level(s), best score {best}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    cfg = Config(seed=args.seed, step_interval_ms=args.interval, debug=args.debug)
    game = Game(args.width, args.height, seed=cfg.seed)
    run(game, cfg)


if __name__ == "__main__":
    main()
