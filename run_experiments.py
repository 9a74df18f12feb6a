# run_experiments.py
import os, json, argparse
from dataclasses import asdict
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from acotsp import TSPInstance, ACOConfig
from acotsp.experiments import run_repeated_trials, run_parameter_sweep

OUTDIR = os.path.dirname(os.path.abspath(__file__))


def ensure(path: str) -> str:
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    return path


def plot_scatter(details, save_path):
    plt.figure()
    lengths = [L for (L, t, tour, hist) in details]
    x = np.random.normal(loc=1, scale=0.03, size=len(lengths))
    plt.plot(x, lengths, "o")
    plt.xticks([1], ["AS"])
    plt.ylabel("Best tour length")
    plt.title("Best lengths across runs")
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()


def plot_convergence(details, save_path):
    plt.figure()
    for i, (_, _, _, hist) in enumerate(details):
        plt.plot(hist, alpha=0.7, label=f"run {i}")
    plt.xlabel("Iteration")
    plt.ylabel("Best-so-far tour length")
    plt.title("Ant System convergence")
    if len(details) <= 10:
        plt.legend()
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--matrix", default=None, help="load a distance matrix instead of a random instance")
    ap.add_argument("--n", type=int, default=30)
    ap.add_argument("--square", type=float, default=100.0)
    ap.add_argument("--runs", type=int, default=5)
    ap.add_argument("--iters", type=int, default=200)
    ap.add_argument("--sweep", action="store_true", help="also run an alpha/beta/evaporation grid")
    ap.add_argument("--outdir", default=OUTDIR)
    args = ap.parse_args()

    if args.matrix:
        inst = TSPInstance.from_file(args.matrix)
    else:
        inst = TSPInstance.random_euclidean(n=args.n, seed=123, square_size=args.square, name=f"demo{args.n}")
    cfg = ACOConfig(n_iterations=args.iters)

    stats, details = run_repeated_trials(inst, cfg, n_runs=args.runs)
    print(inst.name, json.dumps(stats, indent=2))

    df_summary = pd.DataFrame.from_records([{"instance": inst.name, **asdict(cfg), **stats}])
    df_summary.to_csv(ensure(os.path.join(args.outdir, "results_summary.csv")), index=False)
    df_runs = pd.DataFrame({"run": range(len(details)),
                            "length": [d[0] for d in details],
                            "time": [d[1] for d in details]})
    df_runs.to_csv(os.path.join(args.outdir, "results_runs.csv"), index=False)
    plot_scatter(details, os.path.join(args.outdir, "results_distribution.png"))
    plot_convergence(details, os.path.join(args.outdir, "convergence_AS.png"))

    if args.sweep:
        grid = {"alpha": [0.5, 1.0, 1.5], "beta": [2.0, 5.0], "evaporation": [0.3, 0.5, 0.7]}
        rows = run_parameter_sweep(inst, grid, base_cfg=cfg, n_runs=3, base_seed=500,
                                   csv_path=os.path.join(args.outdir, "as_grid.csv"))
        print("Grid search evaluated:", len(rows))


if __name__ == "__main__":
    main()
