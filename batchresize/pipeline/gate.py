#!/usr/bin/env python3
"""
batchresize.pipeline.gate

Counting barrier used to wait for a fixed number of workers.

The number of workers is known when the gate is created. Each worker calls
done() exactly once when it finishes (success or failure); wait() returns only
after the last call. A gate created with count=0 is already open.
"""

import threading
from typing import Optional


class CompletionGate:
    def __init__(self, count: int) -> None:
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        self._count = count
        self._remaining = count
        self._cond = threading.Condition()

    @property
    def count(self) -> int:
        return self._count

    @property
    def remaining(self) -> int:
        with self._cond:
            return self._remaining

    def done(self) -> None:
        """Record one finished unit of work."""
        with self._cond:
            if self._remaining == 0:
                raise RuntimeError(
                    f"done() called more than {self._count} times"
                )
            self._remaining -= 1
            if self._remaining == 0:
                self._cond.notify_all()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until every unit has called done().

        Returns True once released, False if the timeout expired first.
        """
        with self._cond:
            return self._cond.wait_for(lambda: self._remaining == 0, timeout=timeout)
