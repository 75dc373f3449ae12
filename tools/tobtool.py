#!/usr/bin/env python3
import argparse, logging, sys
from toboggan.config import SurveyConfig, DEFAULT_SLOPES, parse_slopes
from toboggan.engine.tally import survey, product_of_counts
from toboggan.errors import GridError, InvalidSlopeError
from toboggan.grid import Grid
from toboggan.lines import read_lines, read_stream

log = logging.getLogger("tobtool")

def load_grid(path):
    lines = read_stream(sys.stdin) if path in (None, "-") else read_lines(path)
    grid = Grid.from_lines(lines)
    log.debug("width: %d, height: %d", grid.width, grid.height)
    return grid

def config_from(args):
    slopes = parse_slopes(args.slope) if args.slope else DEFAULT_SLOPES
    return SurveyConfig(slopes=slopes, part=args.part)

def run_survey(args):
    cfg = config_from(args)
    grid = load_grid(args.path)
    reports = survey(grid, cfg.active_slopes())
    for r in reports:
        log.debug("slope %s: %d steps, %d obstacles", r.slope, r.steps, r.obstacles)
    return reports

def cmd_count(args):
    reports = run_survey(args)
    print(product_of_counts(r.obstacles for r in reports))

def cmd_report(args):
    reports = run_survey(args)
    for r in reports:
        print(f"{r.slope.down}\t{r.slope.right}\t{r.steps}\t{r.obstacles}")
    print(f"product\t{product_of_counts(r.obstacles for r in reports)}")

def main(argv=None):
    p = argparse.ArgumentParser(description="Count obstacles along fixed slopes of a repeating map")
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    for name, func in (('count', cmd_count), ('report', cmd_report)):
        sp = sub.add_parser(name)
        sp.add_argument('path', nargs='?', default='-', help="Map file ('-' for stdin)")
        sp.add_argument('--part', type=int, choices=(1, 2), default=2)
        sp.add_argument('--slope', action='append', metavar='DOWN,RIGHT',
                        help="Slope to ride; repeat for several (default: canonical five)")
        sp.set_defaults(func=func)
    args = p.parse_args(argv)
    if args.part == 1 and args.slope:
        # part 1 always rides the fixed 1-down/3-right slope
        p.error("--slope cannot be combined with --part 1")

    logging.basicConfig(
        format="%(asctime)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if args.verbose else logging.INFO,
    )
    try:
        args.func(args)
    except (GridError, InvalidSlopeError, OSError) as e:
        log.error("%s", e)
        raise SystemExit(1)

if __name__ == '__main__':
    main()
