#!/usr/bin/env python3
# Interactive viewer that animates a traversal one step at a time.
# - Left/Right: previous/next slope in the set
# - Space: pause/resume, R: restart, Esc: quit
# - The camera follows the ray; the map repeats to the right forever

import argparse, logging
import pygame
from toboggan.config import DEFAULT_SLOPES, parse_slopes
from toboggan.engine.traverse import trace
from toboggan.errors import GridError, InvalidSlopeError
from toboggan.grid import Grid
from toboggan.lines import read_lines
from toboggan.markers import is_obstacle
from toboggan.render.palette import HIT, PASSED, UNVISITED, RAY_ORIGIN
from toboggan.render.tileset import Tileset

log = logging.getLogger("run_viewer")

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("path", type=str, help="Map file of '.' and '#'")
    ap.add_argument("--tile", type=int, default=16, help="Tile size in pixels")
    ap.add_argument("--rows", type=int, default=24, help="Visible rows")
    ap.add_argument("--cols", type=int, default=48, help="Visible columns")
    ap.add_argument("--rate", type=int, default=8, help="Steps per second")
    ap.add_argument("--slope", action="append", metavar="DOWN,RIGHT",
                    help="Slope to ride; repeat for several (default: canonical five)")
    args = ap.parse_args(argv)
    logging.basicConfig(format="%(levelname)s - %(message)s", level=logging.INFO)

    try:
        grid = Grid.from_lines(read_lines(args.path))
        slopes = parse_slopes(args.slope) if args.slope else DEFAULT_SLOPES
    except (GridError, InvalidSlopeError, OSError) as e:
        log.error("%s", e)
        raise SystemExit(1)

    pygame.init()
    clock = pygame.time.Clock()
    view_rows = min(args.rows, grid.height)
    screen = pygame.display.set_mode((args.cols * args.tile, view_rows * args.tile))
    tiles = Tileset(args.tile)

    slope_i = 0
    path = trace(grid, slopes[slope_i], wrap=False)
    shown = 0
    paused = False
    frames_per_step = max(1, 60 // max(1, args.rate))
    frame = 0

    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key in (pygame.K_RIGHT, pygame.K_LEFT):
                    step = 1 if ev.key == pygame.K_RIGHT else -1
                    slope_i = (slope_i + step) % len(slopes)
                    path = trace(grid, slopes[slope_i], wrap=False)
                    shown = 0
                elif ev.key == pygame.K_r:
                    shown = 0
                elif ev.key == pygame.K_SPACE:
                    paused = not paused

        frame += 1
        if not paused and frame % frames_per_step == 0 and shown < len(path):
            shown += 1

        states = {}
        hits = 0
        for row, col in path[:shown]:
            if is_obstacle(grid.marker_at(row, col)):
                states[(row, col)] = HIT
                hits += 1
            else:
                states[(row, col)] = PASSED

        ray_row, ray_col = path[shown - 1] if shown else (0, 0)
        top = max(0, min(grid.height - view_rows, ray_row - view_rows // 2))
        left = max(0, ray_col - args.cols // 2)

        screen.fill((0, 0, 0))
        for vy in range(view_rows):
            for vx in range(args.cols):
                row, col = top + vy, left + vx
                surf = tiles.get(grid.marker_at(row, col), states.get((row, col), UNVISITED), col >= grid.width)
                screen.blit(surf, (vx * args.tile, vy * args.tile))
        if top == 0 and left == 0:
            pygame.draw.rect(screen, RAY_ORIGIN, pygame.Rect(0, 0, args.tile, args.tile), 2)

        done = " DONE" if shown == len(path) else ""
        pygame.display.set_caption(
            f"Toboggan Viewer — slope {slopes[slope_i]}  step {shown}/{len(path)}  obstacles {hits}{done}"
        )
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
