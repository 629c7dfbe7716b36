"""
Micro-benchmarks for the trie, prefix-sum and permutation utilities.

`run_benchmarks` builds one workload from a `BenchConfig`, times each operation
`repeats` times with `time.perf_counter`, keeps the best run and returns the
results as a tidy `pandas.DataFrame` (one row per structure/operation).
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from arrays.permutations import permutations
from arrays.prefix_sum import PrefixSum
from tries.standard_trie import Trie
from workloads import WorkLoad

log = logging.getLogger("prefix_bench.bench")

COLUMNS = ["structure", "operation", "n", "seconds"]


## === Config Class === ##

@dataclass
class BenchConfig:
    """
    Configuration for run_benchmarks
        num_words: int, words inserted into / deleted from the trie
        prefix_freq: float in [0, 1], 0 uses Faker words, > 0 clusters shared prefixes
        array_size: int, length of the prefix-sum input
        perm_items: int, size of the permutation input
        perm_count: int, length of each permutation
        repeats: int, timed runs per operation (best one is kept)
        seed: int, seed for every generator
    """
    num_words: int = 5_000
    prefix_freq: float = 0.0
    array_size: int = 10_000
    perm_items: int = 6
    perm_count: int = 3
    repeats: int = 3
    seed: Optional[int] = None

    def __post_init__(self):
        if self.num_words < 1:
            raise ValueError(f"num_words must be >= 1, got {self.num_words}")
        if not 0.0 <= self.prefix_freq <= 1.0:
            raise ValueError(f"prefix_freq must be between 0 and 1, got {self.prefix_freq}")
        if self.array_size < 1:
            raise ValueError(f"array_size must be >= 1, got {self.array_size}")
        if self.perm_items < 0 or not 0 <= self.perm_count <= self.perm_items:
            raise ValueError(
                f"need 0 <= perm_count <= perm_items, got {self.perm_count} and {self.perm_items}")
        if self.repeats < 1:
            raise ValueError(f"repeats must be >= 1, got {self.repeats}")


def _best_of(repeats, setup, fn):
    """Best wall time of `fn(setup())` over `repeats` runs; setup is not timed."""
    best = float("inf")
    for _ in range(repeats):
        arg = setup()
        start = time.perf_counter()
        fn(arg)
        best = min(best, time.perf_counter() - start)
    return best


def _bench_trie(cfg, words):
    rows = []
    n = len(words)

    def filled():
        return Trie(words)

    rows.append(("trie", "batch_insert", n, _best_of(cfg.repeats, Trie, lambda t: t.batch_insert(words))))
    rows.append(("trie", "contains", n,
                 _best_of(cfg.repeats, filled, lambda t: [t.contains(w) for w in words])))
    rows.append(("trie", "get_all_words", n, _best_of(cfg.repeats, filled, Trie.get_all_words)))
    rows.append(("trie", "batch_delete", n,
                 _best_of(cfg.repeats, filled, lambda t: t.batch_delete(words))))
    return rows


def _bench_prefix_sum(cfg, numbers):
    rows = []
    n = len(numbers)
    ps = PrefixSum(numbers)
    spans = [(i // 2, i) for i in range(n)]

    rows.append(("prefix_sum", "build", n, _best_of(cfg.repeats, lambda: numbers, PrefixSum)))
    rows.append(("prefix_sum", "get_sum", n,
                 _best_of(cfg.repeats, lambda: ps, lambda p: [p.get_sum(s, e) for s, e in spans])))
    # an unreachable target forces the full scan
    target = sum(abs(x) for x in numbers) + 1
    rows.append(("prefix_sum", "contains_sum", n,
                 _best_of(cfg.repeats, lambda: ps, lambda p: p.contains_sum(target))))
    return rows


def _bench_permutations(cfg):
    data = list(range(cfg.perm_items))
    seconds = _best_of(cfg.repeats, lambda: data, lambda d: permutations(d, cfg.perm_count))
    return [("permutations", f"k={cfg.perm_count}", cfg.perm_items, seconds)]


def run_benchmarks(config: Optional[BenchConfig] = None) -> pd.DataFrame:
    """Run every benchmark once and return one row per structure/operation."""
    cfg = config or BenchConfig()
    load = WorkLoad(cfg.seed)

    log.info("Generating workload: %d words (prefix_freq=%.2f), %d numbers",
             cfg.num_words, cfg.prefix_freq, cfg.array_size)
    words = load.words(cfg.num_words, p_freq=cfg.prefix_freq)
    numbers = load.numbers(cfg.array_size)

    rows = []
    for name, run in (("trie", lambda: _bench_trie(cfg, words)),
                      ("prefix_sum", lambda: _bench_prefix_sum(cfg, numbers)),
                      ("permutations", lambda: _bench_permutations(cfg))):
        log.debug("Benchmarking %s", name)
        rows.extend(run())

    df = pd.DataFrame(rows, columns=COLUMNS)
    log.info("Finished %d benchmarks in %.3fs total (best runs)", len(df), df["seconds"].sum())
    return df
