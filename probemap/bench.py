from dataclasses import dataclass
import random
import time
from typing import Callable

from .shared import format_seconds
from .table import NotFound, Table


@dataclass(frozen=True)
class BenchResult:
    name: str
    iterations: int
    total_seconds: float

    @property
    def per_iteration(self) -> float:
        return self.total_seconds / self.iterations


def load_table(n: int, rng: random.Random | None = None) -> Table[int, int]:
    """Count ``n`` random 64-bit keys: bump the value if present, else insert 1."""
    if rng is None:
        rng = random.Random()

    table: Table[int, int] = Table()
    for _ in range(n):
        key = rng.getrandbits(64)
        ref = table.lookup_mut(key)
        if isinstance(ref, NotFound):
            table.insert(key, 1)
        else:
            ref.value += 1
    return table


def bench(name: str, fn: Callable[[], object], iterations: int) -> BenchResult:
    assert iterations > 0, iterations

    start = time.perf_counter()
    for _ in range(iterations):
        fn()
    total = time.perf_counter() - start

    return BenchResult(name=name, iterations=iterations, total_seconds=total)


def format_result(result: BenchResult) -> str:
    return "{0:s}: {1:d} iterations, {2:s} total, {3:s}/iter".format(
        result.name,
        result.iterations,
        format_seconds(result.total_seconds),
        format_seconds(result.per_iteration),
    )
