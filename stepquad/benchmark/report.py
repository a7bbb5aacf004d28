"""Text and chart output for benchmark results."""

from __future__ import annotations

from pathlib import Path

from stepquad.benchmark.runner import ADAPTIVE, FIXED, BenchmarkResult, MethodResult
from stepquad.numerics.interval import normalize_interval

RULE = "=" * 82


def format_duration(seconds: float) -> str:
    """Render a duration with a unit that keeps a few significant digits."""
    if seconds >= 1.0:
        return f"{seconds:.3f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds * 1e6:.3f}µs"


def _format_method(title: str, method: MethodResult) -> list[str]:
    lines = [
        f"{title}:",
        f"    ans: {method.value!r}",
        f"    time: {format_duration(method.elapsed_s)}",
        f"    evaluations: {method.evaluations}",
    ]
    if method.abs_error is not None:
        lines.append(f"    abs error: {method.abs_error:.6g}")
    return lines


def format_report(result: BenchmarkResult) -> str:
    """Human-readable report, one block per case."""
    lines = [RULE, f"Step size: {result.step!r}"]
    for case_result in result.cases:
        case = case_result.case
        lo, hi = normalize_interval(case.interval)
        lines.append(RULE)
        lines.append("")
        lines.append("Integral:")
        lines.append(f"    f(x) = {case.label}")
        lines.append(f"    Range = {lo!r} to {hi!r}")
        if case.exact is not None:
            lines.append(f"    Exact = {case.exact!r}")
        lines.append("")
        lines.extend(_format_method("Fixed integral", case_result.fixed))
        lines.append("")
        lines.extend(_format_method("Dynamic integral", case_result.adaptive))
        lines.append("")
    return "\n".join(lines)


def plot_benchmark(result: BenchmarkResult, path: str | Path) -> Path:
    """Save bar charts of elapsed time and absolute error per case.

    Returns:
        The path the figure was written to.
    """
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = result.to_dataframe()
    order = [case_result.case.label for case_result in result.cases]

    fig, (ax_time, ax_error) = plt.subplots(1, 2, figsize=(14, 5))

    elapsed = df.pivot(index="case", columns="method", values="elapsed_s").reindex(order)
    elapsed[[FIXED, ADAPTIVE]].plot.bar(ax=ax_time, color=["steelblue", "darkorange"])
    ax_time.set_ylabel("Elapsed (s)")
    ax_time.set_title("Wall-clock time")
    ax_time.grid(True, alpha=0.2)

    errors = (
        df.pivot(index="case", columns="method", values="abs_error")
        .reindex(order)
        .astype(float)
    )
    errors[[FIXED, ADAPTIVE]].plot.bar(ax=ax_error, color=["steelblue", "darkorange"])
    ax_error.set_yscale("symlog", linthresh=1e-9)
    ax_error.set_ylabel("|value - exact|")
    ax_error.set_title("Absolute error")
    ax_error.grid(True, alpha=0.2)

    fig.suptitle(f"Fixed (step={result.step:g}) vs adaptive integration")
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    return path
