#!/usr/bin/env python3
"""Quick perf benchmark for scanning Lox sources."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from loxscan.diagnostics import DiagnosticCollector
from loxscan.lexer import Scanner


def _collect_sources(root: Path) -> list[Path]:
    files = sorted(root.rglob("*.lox"))
    return [path for path in files if path.is_file()]


def _run_once(
    sources: list[str],
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int, int]:
    start = time.perf_counter()
    total_tokens = 0
    total_diagnostics = 0
    iterator = (
        tqdm(sources, desc=label, unit="file")
        if show_progress
        else sources
    )
    for source in iterator:
        collector = DiagnosticCollector()
        total_tokens += len(Scanner(source, collector).scan_tokens())
        total_diagnostics += len(collector)
    duration = time.perf_counter() - start
    return duration, len(sources), total_tokens, total_diagnostics


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark scanner throughput")
    parser.add_argument("root", type=Path, help="Directory searched recursively for .lox files")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    args = parser.parse_args()

    root: Path = args.root
    if not root.is_dir():
        raise SystemExit(f"Invalid root: {root}")

    files = _collect_sources(root)
    if not files:
        raise SystemExit(f"No .lox files found under {root}")
    sources = [path.read_text(encoding="utf-8") for path in files]
    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(sources, label=f"warmup {warmup_idx + 1}", show_progress=show_progress)

        timings: list[float] = []
        files_count = tokens_count = diagnostics_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, files_count, tokens_count, diagnostics_count = _run_once(
                sources,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, files_count, tokens_count, diagnostics_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, files_count, tokens_count, diagnostics_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        pstats.Stats(profiler, stream=stream).sort_stats("tottime").print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, files_count, tokens_count, diagnostics_count = _benchmark()

    mean = statistics.mean(timings)
    print(f"Files: {files_count}")
    print(f"Tokens: {tokens_count}")
    print(f"Diagnostics: {diagnostics_count}")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Tokens/s (mean): {tokens_count / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
