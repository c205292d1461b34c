# planwright/planning/budget.py
"""
Per-request search budget.

A reservation must be taken before every search call; the ceiling is
enforced here and nowhere else.
"""

import logging
import threading

from planwright.errors import BudgetExhausted

logger = logging.getLogger(__name__)


class BudgetTracker:
    """
    Counts search attempts against a fixed ceiling.

    ``searches_used <= max_searches`` always holds. The counter is only
    ever incremented, under a lock, so the invariant survives concurrent
    callers. Once a reservation is refused, every later one is refused too.

    Example:
        budget = BudgetTracker(max_searches=20)
        try:
            reservation = budget.try_reserve()
        except BudgetExhausted:
            ...  # stop searching, synthesize with what we have
    """

    def __init__(self, max_searches: int) -> None:
        if max_searches < 0:
            raise ValueError(f"max_searches must be >= 0, got {max_searches}")
        self._max_searches = max_searches
        self._searches_used = 0
        self._exhausted = False
        self._lock = threading.Lock()

    @property
    def max_searches(self) -> int:
        return self._max_searches

    @property
    def searches_used(self) -> int:
        return self._searches_used

    @property
    def remaining(self) -> int:
        return self._max_searches - self._searches_used

    @property
    def exhausted(self) -> bool:
        """True once a reservation has been refused."""
        return self._exhausted

    def try_reserve(self) -> int:
        """
        Claim one search.

        Returns:
            Reservation id (1-based, increasing)

        Raises:
            BudgetExhausted: If the ceiling has been reached
        """
        with self._lock:
            if self._exhausted or self._searches_used >= self._max_searches:
                if not self._exhausted:
                    logger.info(
                        f"Search budget exhausted ({self._searches_used}/{self._max_searches})"
                    )
                self._exhausted = True
                raise BudgetExhausted(self._max_searches)
            self._searches_used += 1
            return self._searches_used
