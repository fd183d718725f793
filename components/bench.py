"""
Benchmark harness comparing the probing and scanning radix sets.

`run_bench` builds one workload, then for each set class times the three
phases (insert every key, query every key plus some misses, remove every
key) and collects structural stats after the insert phase. Both classes
must give the same membership answers; a disagreement is a correctness bug
and raises `RuntimeError` instead of producing numbers.
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from components.workload import WorkLoad
from tries.radix_set import RadixSet, ScanRadixSet


logger = logging.getLogger(__name__)

SET_CLASSES = (RadixSet, ScanRadixSet)
PHASES = ("insert", "contains", "remove")
COLUMNS = ["impl", "phase", "median_s", "ops_per_s", "nodes", "avg_branch_factor"]


@dataclass
class BenchConfig:
    """
    Configuration for run_bench
        workload: str, one of WorkLoad.KINDS
        num_keys: int, keys inserted per run (duplicates allowed)
        repeats: int, timed runs per phase; the median is reported
        prefix_freq: float, prefix clustering for the "words" workload
        seed: int, seed for the workload
    """
    workload: str = "words"
    num_keys: int = 10_000
    repeats: int = 3
    prefix_freq: float = 0.0
    seed: Optional[int] = None

    def __post_init__(self):
        if self.workload not in WorkLoad.KINDS:
            raise ValueError(f"workload must be one of {WorkLoad.KINDS}")
        if self.num_keys < 1:
            raise ValueError("num_keys must be positive")
        if self.repeats < 1:
            raise ValueError("repeats must be positive")
        if not 0.0 <= self.prefix_freq <= 1.0:
            raise ValueError("prefix_freq must be between 0 and 1")


def _misses(keys):
    """Probes that are absent: extensions and proper prefixes of stored keys."""
    stored = set(keys)
    probes = {k + "\x00" for k in keys}
    probes.update(k[:-1] for k in keys if k[:-1] not in stored)
    return sorted(probes)


def _run_once(cls, keys, probes):
    s = cls()
    t0 = time.perf_counter()
    for k in keys:
        s.insert(k)
    t1 = time.perf_counter()
    answers = [s.contains(p) for p in probes]
    t2 = time.perf_counter()
    nodes = s.count_nodes()
    avg_bf = s.count_nodes(get_avg_branch_factor=True)
    for k in keys:
        s.remove(k)
    t3 = time.perf_counter()
    if not s.empty():
        raise RuntimeError(f"{cls.__name__} not empty after removing every inserted key")
    return (t1 - t0, t2 - t1, t3 - t2), answers, nodes, avg_bf


def run_bench(config: BenchConfig) -> pd.DataFrame:
    keys = WorkLoad(config.seed).keys(config.workload, config.num_keys, p_freq=config.prefix_freq)
    probes = list(keys) + _misses(keys)
    op_counts = {"insert": len(keys), "contains": len(probes), "remove": len(keys)}

    rows = []
    reference = None
    for cls in SET_CLASSES:
        timings = []
        for _ in range(config.repeats):
            t, answers, nodes, avg_bf = _run_once(cls, keys, probes)
            timings.append(t)
        if reference is None:
            reference = answers
        elif answers != reference:
            bad = [p for p, a, b in zip(probes, answers, reference) if a != b]
            raise RuntimeError(f"{cls.__name__} disagrees with {SET_CLASSES[0].__name__} on {bad[:5]}")

        medians = np.median(np.asarray(timings), axis=0)
        for phase, median in zip(PHASES, medians):
            logger.debug("%s %s: %.6fs", cls.__name__, phase, median)
            rows.append({
                "impl": cls.__name__,
                "phase": phase,
                "median_s": float(median),
                "ops_per_s": op_counts[phase] / median if median > 0 else float("inf"),
                "nodes": nodes,
                "avg_branch_factor": avg_bf,
            })
    return pd.DataFrame(rows, columns=COLUMNS)
