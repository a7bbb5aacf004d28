"""Sweep the fixed integrator's step size and compare against the adaptive one.

Every benchmark case is run once per step size. The adaptive integrator
picks its own steps, so its rows repeat the same value across the sweep and
only its first result per case is reported. The script prints a table and saves a chart of absolute error vs step size.

Usage:
    python examples/step_size_sweep.py --lo -10 --hi 10 --output output/sweep
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from stepquad.benchmark import BenchmarkCase, run_benchmark, select_cases


# =============================================================================
# Sweep
# =============================================================================


def run_sweep(cases: list[BenchmarkCase], steps: list[float]) -> pd.DataFrame:
    frames = []
    for step in steps:
        df = run_benchmark(cases, step).to_dataframe()
        df["step"] = step
        frames.append(df)
    return pd.concat(frames, ignore_index=True)


def print_summary(df: pd.DataFrame) -> None:
    fixed = df[df["method"] == "fixed"].pivot(index="case", columns="step", values="abs_error")
    adaptive = df[df["method"] == "adaptive"].groupby("case")["abs_error"].first()
    fixed["adaptive"] = adaptive

    print("=" * 70)
    print("Absolute error by fixed step size (last column: adaptive)")
    print("=" * 70)
    print(fixed.to_string(float_format=lambda v: f"{v:.3e}"))


# =============================================================================
# Visualization
# =============================================================================


def visualize_results(df: pd.DataFrame, output_dir: Path) -> None:
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    output_dir.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(8, 5))
    fixed = df[df["method"] == "fixed"]
    for label, group in fixed.groupby("case", sort=False):
        ax.loglog(group["step"], group["abs_error"].clip(lower=1e-16), marker="o", label=label)
    ax.set_xlabel("Fixed step size")
    ax.set_ylabel("|value - exact|")
    ax.set_title("Fixed-step error vs step size")
    ax.grid(True, which="both", alpha=0.2)
    ax.legend(fontsize="small")
    fig.tight_layout()

    path = output_dir / "step_size_sweep.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)
    print(f"Saved: {path}")


# =============================================================================
# Entry Point
# =============================================================================


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Fixed step size sweep")
    parser.add_argument("--lo", type=float, default=-10.0)
    parser.add_argument("--hi", type=float, default=10.0)
    parser.add_argument("--steps", type=float, nargs="+", default=[1e-1, 1e-2, 1e-3, 1e-4])
    parser.add_argument("--output", type=str, default="output/step_size_sweep")
    parser.add_argument("--no-viz", action="store_true")
    args = parser.parse_args()

    cases = [case.with_interval((args.lo, args.hi)) for case in select_cases()]

    print("Running step size sweep...")
    results = run_sweep(cases, args.steps)
    print_summary(results)

    if not args.no_viz:
        visualize_results(results, Path(args.output))
