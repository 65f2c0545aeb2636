import random

from probemap.bench import BenchResult, bench, format_result, load_table
from probemap.shared import format_seconds


class ScriptedRandom(random.Random):
    def __init__(self, keys: list[int]) -> None:
        super().__init__()
        self.keys = list(keys)

    def getrandbits(self, k: int) -> int:
        return self.keys.pop(0)


def test_load_table_counts_repeats():
    t = load_table(5, ScriptedRandom([5, 5, 7, 5, 18]))

    assert t.count == 3
    assert t.lookup(5) == 3
    assert t.lookup(7) == 1
    assert t.lookup(18) == 1


def test_load_table_random():
    t = load_table(1000, random.Random(7))
    assert t.count == 1000
    assert sum(value for _, value in t.items()) == 1000


def test_bench_runs_iterations():
    calls = []
    result = bench("noop", lambda: calls.append(1), 5)

    assert len(calls) == 5
    assert result.name == "noop"
    assert result.iterations == 5
    assert result.total_seconds >= 0


def test_format_result():
    result = BenchResult(name="map", iterations=4, total_seconds=0.002)
    assert result.per_iteration == 0.0005
    assert format_result(result) == "map: 4 iterations, 2.00 ms total, 500.00 us/iter"


def test_format_seconds():
    assert format_seconds(2.5) == "2.50 s"
    assert format_seconds(0.25) == "250.00 ms"
    assert format_seconds(0.0000015) == "1.50 us"
