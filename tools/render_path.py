#!/usr/bin/env python3
# Render a map plus the cells each slope lands on to a PNG using Pillow.
# Red = obstacle hit, blue = open ground passed, dimmed = repeated map copies.

import argparse, logging
from toboggan.config import DEFAULT_SLOPES, parse_slopes
from toboggan.errors import GridError, InvalidSlopeError
from toboggan.grid import Grid
from toboggan.lines import read_lines
from toboggan.render.png import render_traversal

log = logging.getLogger("render_path")

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("path", type=str, help="Map file of '.' and '#'")
    ap.add_argument("--out", type=str, default="out/png/path.png", help="Where to write the PNG")
    ap.add_argument("--tile", type=int, default=8, help="Tile size in pixels")
    ap.add_argument("--slope", action="append", metavar="DOWN,RIGHT",
                    help="Slope to draw; repeat for several (default: canonical five)")
    args = ap.parse_args(argv)
    logging.basicConfig(format="%(levelname)s - %(message)s", level=logging.INFO)

    try:
        slopes = parse_slopes(args.slope) if args.slope else DEFAULT_SLOPES
        grid = Grid.from_lines(read_lines(args.path))
        img = render_traversal(grid, slopes, args.out, tile_size=args.tile)
    except (GridError, InvalidSlopeError, OSError) as e:
        log.error("%s", e)
        raise SystemExit(1)
    print(f"Wrote {args.out} ({img.width}x{img.height})")

if __name__ == "__main__":
    main()
