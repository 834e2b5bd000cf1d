#!/usr/bin/env python3
import argparse, csv, logging, os, sys
from tileworld.config import GenerationConfig
from tileworld.mapgen.generator import generate_from_config
from tileworld.mapgen.placement import find_spawn

def config_from_args(args):
    return GenerationConfig(
        width=args.width,
        height=args.height,
        wall_density=args.density,
        max_attempts=args.attempts,
        seed=args.seed,
    )

def write_tsv(grid, path):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        for row in grid.as_matrix():
            w.writerow([t.value for t in row])

def cmd_emit(args):
    result = generate_from_config(config_from_args(args))
    if args.format == 'tsv':
        write_tsv(result.grid, args.out)
    else:
        with open(args.out, 'w', encoding='utf-8') as f:
            f.write("\n".join(result.grid.to_lines()) + "\n")
    print(f"Wrote {args.out} (attempts={result.attempts}, degraded={result.degraded})")
    return 1 if (args.strict and result.degraded) else 0

def cmd_show(args):
    result = generate_from_config(config_from_args(args))
    for line in result.grid.to_lines():
        print(line)
    print(f"attempts={result.attempts} degraded={result.degraded} spawn={find_spawn(result.grid)}")
    return 0

def cmd_png(args):
    from tileworld.render.image import save_png
    result = generate_from_config(config_from_args(args))
    save_png(result.grid, args.out, tile_size=args.tile, entity_pos=find_spawn(result.grid))
    print(f"Wrote {args.out}")
    return 0

def main(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument('--width', type=int, default=32)
    p.add_argument('--height', type=int, default=18)
    p.add_argument('--density', type=float, default=0.15, help="Wall chance for interior cells, 0..1")
    p.add_argument('--attempts', type=int, default=20)
    p.add_argument('--seed', type=int, default=None)
    p.add_argument('--log-level', default='WARNING')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--out', type=str, required=True)
    p1.add_argument('--format', choices=['txt', 'tsv'], default='txt')
    p1.add_argument('--strict', action='store_true', help="Exit 1 when the grid is degraded")
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('show')
    p2.set_defaults(func=cmd_show)
    p3 = sub.add_parser('png')
    p3.add_argument('--out', type=str, required=True)
    p3.add_argument('--tile', type=int, default=16)
    p3.set_defaults(func=cmd_png)
    args = p.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING),
                        format="%(levelname)s: %(message)s")
    return args.func(args)

if __name__ == '__main__':
    sys.exit(main())
