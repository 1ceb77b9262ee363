"""Benchmarks for windowed-sinc design and analysis.

This module times torchfir's design pipeline and the analysis views, and
compares the direct DFT used by ``spectrum_view`` against ``torch.fft``.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch

from torchfir.filter_analysis import analyze, analyze_design, spectrum_view
from torchfir.filter_design import FilterSpec, design
from torchfir.window_function import WINDOW_KINDS


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Returns
    -------
    dict
        Mean, standard deviation, minimum and maximum time in seconds.
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_comparison(name: str, times: dict[str, dict[str, float]]) -> None:
    """Print benchmark comparison results for multiple methods."""
    print(f"\n{name}")
    print("-" * len(name))

    fastest_name = min(times.keys(), key=lambda k: times[k]["mean"])
    fastest_time = times[fastest_name]["mean"]

    for method_name, ts_time in times.items():
        slowdown = ts_time["mean"] / fastest_time
        suffix = (
            f" ({slowdown:.2f}x slower)" if slowdown > 1.01 else " (fastest)"
        )
        mean = format_time(ts_time["mean"])
        std = format_time(ts_time["std"])
        print(f"  {method_name}: {mean} +/- {std}{suffix}")


def _fft_spectrum(h: torch.Tensor, dft_length: int) -> torch.Tensor:
    spectrum = torch.fft.rfft(h, n=dft_length)[: dft_length // 2]
    return 20 * torch.log10(spectrum.abs())


class BenchFirDesign:
    """Benchmarks for design and analysis."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        self.warmup = warmup
        self.iterations = iterations

    def _bench(
        self, func: Callable, *args: Any, **kwargs: Any
    ) -> dict[str, float]:
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    def bench_design_by_window(self, tap_count: int = 64) -> None:
        """Design time for every window kind."""
        times = {
            kind: self._bench(
                design,
                FilterSpec(
                    window_kind=kind,
                    tap_count=tap_count,
                    shift=tap_count // 2,
                ),
            )
            for kind in WINDOW_KINDS
        }

        print_comparison(f"Design (taps={tap_count})", times)

    def bench_analysis(self, tap_count: int = 64) -> None:
        """Analysis of one vector against a full design analysis."""
        spec = FilterSpec(
            window_kind="hann", tap_count=tap_count, shift=tap_count // 2
        )
        result = design(spec)

        times = {
            "analyze": self._bench(
                analyze, result.windowed, spec.sampling_rate
            ),
            "analyze_design": self._bench(
                analyze_design, result, spec.sampling_rate
            ),
        }

        print_comparison(f"Analysis (taps={tap_count})", times)

    def bench_spectrum_direct_vs_fft(self, dft_length: int = 256) -> None:
        """Direct O(N M) evaluation against torch.fft."""
        h = design(FilterSpec(window_kind="blackman")).windowed

        times = {
            "direct": self._bench(spectrum_view, h, 1000.0, dft_length),
            "torch.fft": self._bench(_fft_spectrum, h, dft_length),
        }

        print_comparison(f"Spectrum (M={dft_length})", times)

    def run_all(self) -> None:
        """Run all benchmarks."""
        print("=" * 60)
        print("FIR Design Benchmarks")
        print("=" * 60)

        self.bench_design_by_window(64)
        self.bench_design_by_window(1024)
        self.bench_analysis(64)
        self.bench_spectrum_direct_vs_fft(256)
        self.bench_spectrum_direct_vs_fft(4096)


if __name__ == "__main__":
    bench = BenchFirDesign()
    bench.run_all()
