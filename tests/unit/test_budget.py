# tests/unit/test_budget.py
"""Tests for BudgetTracker: ceiling, stickiness, thread safety, and the global invariant."""

import random
import threading

import pytest

from planwright.errors import BudgetExhausted
from planwright.planning.budget import BudgetTracker


class TestBudgetTracker:
    def test_reservations_are_one_based_and_increasing(self):
        budget = BudgetTracker(max_searches=3)
        assert [budget.try_reserve() for _ in range(3)] == [1, 2, 3]
        assert budget.searches_used == 3
        assert budget.remaining == 0

    def test_exhausted_after_ceiling(self):
        budget = BudgetTracker(max_searches=2)
        budget.try_reserve()
        budget.try_reserve()

        with pytest.raises(BudgetExhausted) as exc_info:
            budget.try_reserve()

        assert exc_info.value.max_searches == 2
        assert budget.exhausted is True
        assert budget.searches_used == 2

    def test_exhaustion_is_sticky(self):
        budget = BudgetTracker(max_searches=1)
        budget.try_reserve()
        for _ in range(5):
            with pytest.raises(BudgetExhausted):
                budget.try_reserve()
        assert budget.searches_used == 1

    def test_zero_budget_refuses_first_reservation(self):
        budget = BudgetTracker(max_searches=0)
        with pytest.raises(BudgetExhausted):
            budget.try_reserve()
        assert budget.searches_used == 0

    def test_negative_budget_rejected(self):
        with pytest.raises(ValueError):
            BudgetTracker(max_searches=-1)

    def test_concurrent_reservations_never_exceed_ceiling(self):
        budget = BudgetTracker(max_searches=50)
        granted: list[int] = []
        lock = threading.Lock()

        def worker():
            for _ in range(20):
                try:
                    rid = budget.try_reserve()
                except BudgetExhausted:
                    return
                with lock:
                    granted.append(rid)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert budget.searches_used == 50
        assert sorted(granted) == list(range(1, 51))


def test_searches_used_never_exceeds_max_randomized():
    """Random reservation sequences never push searches_used past the ceiling."""
    rng = random.Random(1234)
    for _ in range(500):
        ceiling = rng.randint(0, 25)
        attempts = rng.randint(0, 60)
        budget = BudgetTracker(max_searches=ceiling)

        refused = False
        for _ in range(attempts):
            try:
                budget.try_reserve()
                assert not refused, "reservation granted after a refusal"
            except BudgetExhausted:
                refused = True
            assert budget.searches_used <= ceiling

        assert budget.searches_used == min(ceiling, attempts)
