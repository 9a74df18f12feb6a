"""Reference driver: load a matrix file and re-solve it, keeping the best tour."""
from __future__ import annotations
import argparse
import itertools
import logging
import sys

from .colony import ACOConfig, ColonyEngine
from .tsp import MatrixFormatError, TSPInstance


def tour_to_string(tour) -> str:
    return "".join(f" {i}" for i in tour)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="acotsp", description="Ant System TSP solver.")
    ap.add_argument("matrix", help="full adjacency matrix: rows per line, columns separated by spaces")
    d = ACOConfig()
    ap.add_argument("--iters", type=int, default=d.n_iterations, help="iterations per solve")
    ap.add_argument("--ants-factor", type=float, default=d.ant_factor, help="ants = n * factor")
    ap.add_argument("--alpha", type=float, default=d.alpha, help="trail preference")
    ap.add_argument("--beta", type=float, default=d.beta, help="greedy preference")
    ap.add_argument("--evaporation", type=float, default=d.evaporation, help="trail retention per iteration")
    ap.add_argument("--Q", type=float, default=d.Q, help="deposit scale")
    ap.add_argument("--c", type=float, default=d.c, help="initial trail")
    ap.add_argument("--explore", type=float, default=d.exploration_rate,
                    help="probability of a purely random move")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--restarts", type=int, default=0, help="number of solves (0 = forever)")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    try:
        inst = TSPInstance.from_file(args.matrix)
    except (OSError, MatrixFormatError) as e:
        print(f"Error reading graph: {e}", file=sys.stderr)
        return 1

    cfg = ACOConfig(c=args.c, alpha=args.alpha, beta=args.beta, evaporation=args.evaporation,
                    Q=args.Q, ant_factor=args.ants_factor, exploration_rate=args.explore,
                    n_iterations=args.iters, seed=args.seed)
    try:
        engine = ColonyEngine(inst.distances, cfg)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    solves = itertools.count() if args.restarts <= 0 else range(args.restarts)
    for _ in solves:
        tour = engine.solve()
        print("Best tour length:", inst.reported_length(engine.best_length))
        print("Best tour:" + tour_to_string(tour))
    return 0


if __name__ == "__main__":
    sys.exit(main())
