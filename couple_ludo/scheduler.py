"""Cooperative tick scheduler.

A single timeline of timers on a virtual millisecond clock. Timers fire in
due-time order (ties in scheduling order) and may schedule further timers
from their callbacks; those fire in the same :meth:`TickScheduler.advance`
call if they fall due within it. Nothing runs in parallel.

Tests drive the clock explicitly with :meth:`advance` /
:meth:`run_until_idle`; an interactive front-end uses :meth:`run_realtime`,
which sleeps until each due time so the caller can redraw between ticks.
"""

import heapq
import itertools
import time
from typing import Callable, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class TickScheduler(Generic[T]):
    """Timer queue delivering payloads to a single handler.

    Attributes:
        now: Current virtual time in milliseconds.
    """

    def __init__(self, handler: Callable[[T], None]) -> None:
        self.now: int = 0
        self._handler = handler
        self._queue: List[Tuple[int, int, T]] = []
        self._counter = itertools.count()

    @property
    def pending(self) -> int:
        return len(self._queue)

    @property
    def next_due(self) -> Optional[int]:
        return self._queue[0][0] if self._queue else None

    def schedule(self, delay_ms: int, payload: T) -> None:
        if delay_ms < 0:
            raise ValueError("delay_ms cannot be negative")
        heapq.heappush(self._queue, (self.now + delay_ms, next(self._counter), payload))

    def clear(self) -> None:
        self._queue.clear()

    def _fire_next(self) -> None:
        due, _, payload = heapq.heappop(self._queue)
        self.now = max(self.now, due)
        self._handler(payload)

    def advance(self, ms: int) -> int:
        """Move the clock forward by ``ms``, firing every timer due by then.

        Returns:
            int: Number of timers fired.
        """
        deadline = self.now + ms
        fired = 0
        while self._queue and self._queue[0][0] <= deadline:
            self._fire_next()
            fired += 1
        self.now = deadline
        return fired

    def run_until_idle(self, max_events: int = 10_000) -> int:
        """Fire timers until none remain.

        Raises:
            RuntimeError: If more than ``max_events`` timers fire, which means
                something keeps rescheduling itself.
        """
        fired = 0
        while self._queue:
            if fired >= max_events:
                raise RuntimeError(f"Scheduler still busy after {max_events} events")
            self._fire_next()
            fired += 1
        return fired

    def run_realtime(
        self,
        on_fire: Optional[Callable[[], None]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> int:
        """Like :meth:`run_until_idle` but waits in wall-clock time between timers."""
        fired = 0
        while self._queue:
            wait_ms = self._queue[0][0] - self.now
            if wait_ms > 0:
                sleep(wait_ms / 1000)
            self._fire_next()
            fired += 1
            if on_fire is not None:
                on_fire()
        return fired
