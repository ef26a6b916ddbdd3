from collections.abc import Callable

import pytest

from bench_inputs import NS_PER_MS

FAST_SAMPLE_N = 3
FAST_SAMPLE_DT = NS_PER_MS


def pytest_configure(config: pytest.Config) -> None:
    """Register shared markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture
def fast_options() -> dict[str, int]:
    """Job options that keep real timing runs to a few milliseconds."""
    return {"sample_n": FAST_SAMPLE_N, "sample_dt": FAST_SAMPLE_DT}


@pytest.fixture
def linear_bench() -> Callable[[int], Callable[[int, Callable], int]]:
    """Return a factory for fake timing routines costing a fixed ns per rep."""

    def _linear_bench(ns_per_rep: int) -> Callable[[int, Callable], int]:
        def bench(reps: int, op: Callable) -> int:
            return reps * ns_per_rep

        return bench

    return _linear_bench
