#!/usr/bin/env python3
# Minimal interactive client for a tileworld session.
# - Arrows: cardinal step; Shift+Arrow: diagonal step
# - R: regenerate; Esc: quit
# - Held keys repeat through MoveCadence (caller-side rate limit)

import argparse, logging
import pygame
from tileworld.config import GenerationConfig, ViewerConfig
from tileworld.engine.movement import intent_from_keys
from tileworld.engine.state import GameSession
from tileworld.engine.timing import MoveCadence
from tileworld.render.tileset import Tileset

log = logging.getLogger("run_game")

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--width", type=int, default=32)
    ap.add_argument("--height", type=int, default=18)
    ap.add_argument("--density", type=float, default=0.15, help="Wall chance for interior cells, 0..1")
    ap.add_argument("--attempts", type=int, default=20)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--tile", type=int, default=ViewerConfig.tile_size, help="Tile size in pixels")
    ap.add_argument("--delay", type=float, default=ViewerConfig.move_delay, help="Seconds between held-key moves")
    ap.add_argument("--log-level", default="INFO")
    args = ap.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO),
                        format="%(levelname)s: %(message)s")

    view = ViewerConfig(tile_size=args.tile, move_delay=args.delay)
    session = GameSession(GenerationConfig(
        width=args.width, height=args.height, wall_density=args.density,
        max_attempts=args.attempts, seed=args.seed,
    ))

    pygame.init()
    clock = pygame.time.Clock()
    tiles = Tileset(view.tile_size)
    screen = pygame.display.set_mode((session.grid.width * view.tile_size, session.grid.height * view.tile_size))
    cadence = MoveCadence(delay=view.move_delay)

    running = True
    while running:
        dt = clock.tick(view.fps) / 1000.0
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_r:
                    session.regenerate()
                    cadence.reset()

        if cadence.tick(dt):
            keys = pygame.key.get_pressed()
            intent = intent_from_keys(
                up=keys[pygame.K_UP], down=keys[pygame.K_DOWN],
                left=keys[pygame.K_LEFT], right=keys[pygame.K_RIGHT],
                diagonal=keys[pygame.K_LSHIFT] or keys[pygame.K_RSHIFT],
            )
            if intent is not None:
                result = session.move(*intent)
                log.debug("move %s -> %s", intent, result.value)
                cadence.consume()

        grid = session.grid
        screen.fill((0, 0, 0))
        for y in range(grid.height):
            for x in range(grid.width):
                screen.blit(tiles.get(grid.get_tile(x, y)), tiles.screen_xy(x, y, grid.height))
        screen.blit(tiles.marker(), tiles.screen_xy(*session.player.position, grid.height))

        flag = "  [DEGRADED]" if session.degraded else ""
        pygame.display.set_caption(f"tileworld {grid.width}x{grid.height}  attempts:{session.attempts}{flag}")
        pygame.display.flip()

    pygame.quit()

if __name__ == "__main__":
    main()
