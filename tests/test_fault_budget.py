"""Tests for the shared fault budget."""

import threading

import pytest

from fault_terrain.core.fault_budget import FaultBudget


def hammer(budget, n_threads):
    """Claim from the budget on many threads until it runs dry."""
    barrier = threading.Barrier(n_threads)
    granted = [0] * n_threads
    late = [0] * n_threads

    def worker(index):
        barrier.wait()
        while budget.claim():
            granted[index] += 1
        # Keep claiming after exhaustion
        for _ in range(100):
            late[index] += budget.claim()

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(n_threads)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return granted, late


class TestFaultBudget:
    """Test claim semantics."""

    def test_sequential_claims(self):
        budget = FaultBudget(3)

        assert [budget.claim() for _ in range(5)] == [True, True, True, False, False]
        assert budget.remaining == 0
        assert budget.claimed == 3

    def test_empty_budget(self):
        """Test that a zero budget never grants work."""
        budget = FaultBudget(0)
        assert not budget.claim()
        assert budget.remaining == 0

    def test_negative_budget(self):
        with pytest.raises(ValueError):
            FaultBudget(-1)

    @pytest.mark.parametrize("total", [0, 1, 17, 5000])
    @pytest.mark.parametrize("n_threads", [1, 4, 16])
    def test_concurrent_claims_exact(self, total, n_threads):
        """Test that exactly `total` claims succeed under contention."""
        budget = FaultBudget(total)
        granted, late = hammer(budget, n_threads)

        assert sum(granted) == total
        assert sum(late) == 0
        assert budget.remaining == 0
        assert budget.claimed == total
        assert not budget.claim()
