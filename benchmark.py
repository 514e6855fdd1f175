#!/usr/bin/env python3
"""
Benchmark Script for the Binary Search Tree

Tests:
1. Random insert throughput
2. Sorted insert throughput (degenerate chain)
3. Hit lookups on both trees
4. Miss lookups on both trees

Metrics:
- Operations per second (ops/sec)
- Tree height after inserts
"""

import logging
import os
import random
import time
from collections.abc import Mapping

from bstree import BinarySearchTree

logger = logging.getLogger()


class Benchmark:
    # Default number of keys per tree
    DEFAULT_COUNT = 10_000

    # Sorted inserts are O(N^2); keep that tree smaller
    DEFAULT_SORTED_COUNT = 2_000

    def __init__(
        self,
        count: int = DEFAULT_COUNT,
        sorted_count: int = DEFAULT_SORTED_COUNT,
        seed: int | None = None,
    ) -> None:
        if count <= 0:
            raise ValueError(f"count must be positive, got {count}")
        if sorted_count <= 0:
            raise ValueError(f"sorted_count must be positive, got {sorted_count}")

        self.count = count
        self.sorted_count = sorted_count
        self.rng = random.Random(seed)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Benchmark":
        """Build a Benchmark with BENCH_COUNT / BENCH_SORTED_COUNT overriding the defaults."""
        environ = os.environ if environ is None else environ
        return cls(
            count=int(environ.get("BENCH_COUNT", cls.DEFAULT_COUNT)),
            sorted_count=int(environ.get("BENCH_SORTED_COUNT", cls.DEFAULT_SORTED_COUNT)),
        )

    @staticmethod
    def timed(label: str, ops: int, fn) -> dict:
        """Run fn once and report throughput."""
        start = time.perf_counter_ns()
        fn()
        elapsed_ns = time.perf_counter_ns() - start

        elapsed_s = elapsed_ns / 1_000_000_000
        return {
            "test": label,
            "ops": ops,
            "elapsed_ms": elapsed_ns / 1_000_000,
            "ops_per_sec": ops / elapsed_s if elapsed_s else float("inf"),
        }

    def build(self, values: list[int]) -> BinarySearchTree:
        tree = BinarySearchTree()
        for value in values:
            tree.insert(value)
        return tree

    def run(self) -> list[dict]:
        results = []

        random_keys = [self.rng.randrange(self.count * 10) for _ in range(self.count)]
        sorted_keys = list(range(self.sorted_count))

        trees: dict[str, BinarySearchTree] = {}

        def build_random() -> None:
            trees["random"] = self.build(random_keys)

        def build_sorted() -> None:
            trees["sorted"] = self.build(sorted_keys)

        results.append(self.timed("Random Insert", len(random_keys), build_random))
        results[-1]["height"] = trees["random"].height()
        results.append(self.timed("Sorted Insert", len(sorted_keys), build_sorted))
        results[-1]["height"] = trees["sorted"].height()

        for name, keys in (("random", random_keys), ("sorted", sorted_keys)):
            tree = trees[name]
            logger.info("%s tree: size=%d height=%d", name, tree.size(), tree.height())

            hits = self.rng.sample(keys, min(len(keys), 1000))
            results.append(
                self.timed(
                    f"Hit Lookup ({name})",
                    len(hits),
                    lambda: [tree.find(key) for key in hits],
                )
            )

            misses = [-key - 1 for key in hits]
            results.append(
                self.timed(
                    f"Miss Lookup ({name})",
                    len(misses),
                    lambda: [tree.find(key) for key in misses],
                )
            )

        return results

    @staticmethod
    def print_results(results: list[dict]) -> None:
        print(f"{'Test':<24} {'Ops':>8} {'Time (ms)':>12} {'Ops/sec':>14}")
        print("-" * 62)
        for result in results:
            print(
                f"{result['test']:<24} {result['ops']:>8} "
                f"{result['elapsed_ms']:>12.2f} {result['ops_per_sec']:>14,.0f}"
            )


if __name__ == "__main__":
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    benchmark = Benchmark.from_env()
    Benchmark.print_results(benchmark.run())
