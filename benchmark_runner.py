"""
CLI to benchmark the greedy spanning-structure engine across graph sizes.

Reads benchmarks/benchmarks.yml, builds random complete graphs per suite and
seed, times the construction (graph generation excluded), and writes per-run
and aggregated CSVs.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Sequence, Set, Tuple
import argparse
import csv
import logging
from concurrent.futures import ProcessPoolExecutor, as_completed
import time

import numpy as np

from algorithms import SpanningTreeEngine
from graph_builder import MAX_WEIGHT, MIN_WEIGHT, build_complete_graph
from prim_engine import GreedyPrimEngine

RUN_FIELDS = [
    "suite",
    "seed",
    "nodes",
    "edges",
    "tree_edges",
    "tree_weight",
    "generate_sec",
    "build_sec",
]

AGGREGATE_FIELDS = [
    "suite",
    "nodes",
    "runs",
    "mean_build_sec",
    "median_build_sec",
    "max_build_sec",
    "mean_tree_weight",
]


@dataclass(frozen=True)
class SuiteConfig:
    name: str
    nodes: int
    min_weight: int = MIN_WEIGHT
    max_weight: int = MAX_WEIGHT


@dataclass(frozen=True)
class BenchmarkConfig:
    seed: int
    repeats: int
    suites: Sequence[SuiteConfig]


def load_config(path: Path) -> BenchmarkConfig:
    import yaml  # type: ignore

    data = yaml.safe_load(path.read_text())
    if not isinstance(data, dict) or "suites" not in data:
        raise ValueError(f"Benchmark config {path} must define 'suites'.")

    suites = [
        SuiteConfig(
            name=str(suite["name"]),
            nodes=int(suite["nodes"]),
            min_weight=int(suite.get("min_weight", MIN_WEIGHT)),
            max_weight=int(suite.get("max_weight", MAX_WEIGHT)),
        )
        for suite in data["suites"]
    ]
    for suite in suites:
        if suite.nodes < 1:
            raise ValueError(f"Suite '{suite.name}' needs at least one node.")
        if suite.min_weight >= suite.max_weight:
            raise ValueError(f"Suite '{suite.name}' has an empty weight range.")

    repeats = int(data.get("repeats", 1))
    if repeats < 1:
        raise ValueError("repeats must be positive.")

    return BenchmarkConfig(
        seed=int(data.get("seed", 0)),
        repeats=repeats,
        suites=suites,
    )


def run_benchmarks(
    config_path: Path,
    runs_csv: Path | None = None,
    aggregates_csv: Path | None = None,
    max_workers: int | None = None,
    use_processes: bool = True,
) -> List[Dict[str, object]]:
    cfg = load_config(config_path)
    start = time.time()

    existing_runs = load_runs_csv(runs_csv) if runs_csv else []
    seen_keys: Set[Tuple[str, int]] = {(str(r["suite"]), int(r["seed"])) for r in existing_runs}

    tasks: List[tuple[SuiteConfig, int]] = []
    for suite in cfg.suites:
        for offset in range(cfg.repeats):
            seed = cfg.seed + offset
            if (suite.name, seed) in seen_keys:
                continue
            tasks.append((suite, seed))

    print(f"[bench] queued {len(tasks)} new tasks (existing runs: {len(seen_keys)})")

    new_results: List[Dict[str, object]] = []
    if tasks:
        if use_processes:
            try:
                with ProcessPoolExecutor(max_workers=max_workers) as executor:
                    future_to_task = {
                        executor.submit(_run_task, asdict(suite), seed): (suite.name, seed)
                        for suite, seed in tasks
                    }
                    for future in as_completed(future_to_task):
                        suite_name, seed = future_to_task[future]
                        try:
                            res = future.result()
                        except Exception as exc:
                            print(f"[bench] failed suite={suite_name} seed={seed}: {exc}")
                            continue
                        new_results.append(res)
                        if runs_csv:
                            append_run_row(runs_csv, res)
                        print(f"[bench] completed suite={suite_name} seed={seed} build={res['build_sec']:.4f}s")
            except (PermissionError, NotImplementedError, OSError) as exc:
                print(f"[bench] process pool unavailable ({exc}), falling back to sequential execution")
                use_processes = False
        else:
            print("[bench] using sequential execution")

        if not use_processes:
            done = {(str(r["suite"]), int(r["seed"])) for r in new_results}
            for suite, seed in tasks:
                if (suite.name, seed) in done:
                    continue
                res = _run_task(asdict(suite), seed)
                new_results.append(res)
                if runs_csv:
                    append_run_row(runs_csv, res)
                print(f"[bench] completed suite={suite.name} seed={seed} build={res['build_sec']:.4f}s")

    results = existing_runs + new_results

    if aggregates_csv:
        write_aggregates_csv(aggregate_by_suite(results), aggregates_csv)

    elapsed = time.time() - start
    print(f"[bench] completed {len(results)} total runs in {elapsed:.2f}s")
    return results


def run_single(suite: SuiteConfig, seed: int, engine: SpanningTreeEngine | None = None) -> Dict[str, object]:
    """
    Generate one graph and build its spanning structure.

    Only the construction is counted in build_sec; generation is reported
    separately.
    """
    engine = engine or GreedyPrimEngine()

    gen_start = time.perf_counter()
    graph = build_complete_graph(
        suite.nodes,
        seed=seed,
        min_weight=suite.min_weight,
        max_weight=suite.max_weight,
    )
    generate_sec = time.perf_counter() - gen_start

    build_start = time.perf_counter()
    tree = engine.build(graph)
    build_sec = time.perf_counter() - build_start

    return {
        "suite": suite.name,
        "seed": seed,
        "nodes": graph.node_count(),
        "edges": graph.edge_count(),
        "tree_edges": tree.edge_count(),
        "tree_weight": tree.total_weight(),
        "generate_sec": generate_sec,
        "build_sec": build_sec,
    }


def _run_task(suite_dict: Dict[str, object], seed: int) -> Dict[str, object]:
    suite = SuiteConfig(
        name=str(suite_dict["name"]),
        nodes=int(suite_dict["nodes"]),
        min_weight=int(suite_dict["min_weight"]),
        max_weight=int(suite_dict["max_weight"]),
    )
    return run_single(suite, seed)


def aggregate_by_suite(results: Iterable[Mapping[str, object]]) -> Dict[str, Dict[str, float]]:
    """
    Aggregate timings and tree weights per suite, across seeds.
    """
    build_secs: Dict[str, List[float]] = {}
    weights: Dict[str, List[float]] = {}
    sizes: Dict[str, int] = {}

    for res in results:
        suite = str(res["suite"])
        build_secs.setdefault(suite, []).append(float(res["build_sec"]))
        weights.setdefault(suite, []).append(float(res["tree_weight"]))
        sizes[suite] = int(res["nodes"])

    aggregated: Dict[str, Dict[str, float]] = {}
    for suite, secs in build_secs.items():
        timings = np.asarray(secs)
        aggregated[suite] = {
            "nodes": sizes[suite],
            "runs": float(len(secs)),
            "mean_build_sec": float(np.mean(timings)),
            "median_build_sec": float(np.median(timings)),
            "max_build_sec": float(np.max(timings)),
            "mean_tree_weight": float(np.mean(weights[suite])),
        }
    return aggregated


def load_runs_csv(path: Path | None) -> List[Dict[str, object]]:
    if path is None or not path.exists():
        return []
    with path.open() as f:
        reader = csv.DictReader(f)
        rows: List[Dict[str, object]] = []
        for row in reader:
            # Normalize numeric fields so aggregation works on resumed runs.
            parsed: Dict[str, object] = dict(row)
            for key in ("seed", "nodes", "edges", "tree_edges", "tree_weight"):
                parsed[key] = int(row[key])
            for key in ("generate_sec", "build_sec"):
                parsed[key] = float(row[key])
            rows.append(parsed)
        return rows


def append_run_row(path: Path, res: Mapping[str, object]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    write_header = not path.exists()
    with path.open("a", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=RUN_FIELDS)
        if write_header:
            writer.writeheader()
        writer.writerow({key: res.get(key) for key in RUN_FIELDS})


def write_aggregates_csv(aggregated: Mapping[str, Mapping[str, float]], path: Path) -> None:
    """
    Write aggregated metrics by suite to CSV.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=AGGREGATE_FIELDS)
        writer.writeheader()
        for suite, metrics in aggregated.items():
            writer.writerow({"suite": suite, **{key: metrics.get(key, 0.0) for key in AGGREGATE_FIELDS[1:]}})


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    here = Path(__file__).parent / "benchmarks"
    parser = argparse.ArgumentParser(description="Benchmark the greedy spanning-structure engine.")
    parser.add_argument("--config", type=Path, default=here / "benchmarks.yml", help="YAML benchmark config")
    parser.add_argument("--out-dir", type=Path, default=here / "results", help="directory for runs/aggregates CSVs")
    parser.add_argument("--workers", type=int, default=None, help="process pool size")
    parser.add_argument("--sequential", action="store_true", help="run in-process without a pool")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_arguments(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    runs_csv = args.out_dir / "runs.csv"
    aggregates_csv = args.out_dir / "aggregates.csv"

    results = run_benchmarks(
        args.config,
        runs_csv=runs_csv,
        aggregates_csv=aggregates_csv,
        max_workers=args.workers,
        use_processes=not args.sequential,
    )
    for suite, metrics in aggregate_by_suite(results).items():
        print(f"{suite}: {metrics}")
    print(f"Wrote runs to {runs_csv} and aggregates to {aggregates_csv}")


if __name__ == "__main__":
    main()
