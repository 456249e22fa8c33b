"""Shared budget of fault passes consumed by generator threads."""

import threading


class FaultBudget:
    """
    Counter of remaining faults shared by every worker of one run.

    ``claim`` is the only mutation and is atomic, so exactly ``total``
    claims succeed no matter how many threads compete for them.
    """

    def __init__(self, total: int):
        if total < 0:
            raise ValueError(f"Fault budget cannot be negative, got {total}")
        self.total = total
        self._remaining = total
        self._lock = threading.Lock()

    def claim(self) -> bool:
        """
        Reserve one unit of work.

        Returns:
            True if a fault was granted, False once the budget is exhausted
        """
        with self._lock:
            if self._remaining > 0:
                self._remaining -= 1
                return True
            return False

    @property
    def remaining(self) -> int:
        return self._remaining

    @property
    def claimed(self) -> int:
        """Number of claims granted so far."""
        return self.total - self._remaining

    def __repr__(self):
        return f"FaultBudget(total={self.total}, remaining={self._remaining})"
