"""
Staged reveal of MST edges.

Deferred callbacks live in an explicit EventQueue read against a Clock, so
the same reveal can be driven by wall time in a live window or by a
VirtualClock advanced frame by frame (GIF export, tests). Times are in
milliseconds.
"""

import heapq
import itertools
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from .edge import Edge
from .point import Point


class Clock:
    def now(self) -> float:
        raise NotImplementedError


class WallClock(Clock):
    """Milliseconds elapsed since the clock was created."""

    def __init__(self):
        self._origin = time.perf_counter()

    def now(self) -> float:
        return (time.perf_counter() - self._origin) * 1000.0


class VirtualClock(Clock):
    """Clock that only moves when told to."""

    def __init__(self, start: float = 0.0):
        self._now = float(start)

    def now(self) -> float:
        return self._now

    def advance(self, dt: float) -> float:
        if dt < 0:
            raise ValueError(f"cannot move clock backwards by {dt}")
        self._now += dt
        return self._now

    def advance_to(self, t: float) -> float:
        if t < self._now:
            raise ValueError(f"cannot move clock backwards to {t}")
        self._now = float(t)
        return self._now


@dataclass(order=True)
class ScheduledEvent:
    due: float
    seq: int
    callback: Callable[[], None] = field(compare=False)


class EventQueue:
    """One-shot callbacks ordered by due time, then by scheduling order."""

    def __init__(self, clock: Optional[Clock] = None):
        self.clock = clock or WallClock()
        self._events: List[ScheduledEvent] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._events)

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledEvent:
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        event = ScheduledEvent(self.clock.now() + delay, next(self._counter), callback)
        heapq.heappush(self._events, event)
        return event

    @property
    def next_due(self) -> Optional[float]:
        return self._events[0].due if self._events else None

    def run_pending(self) -> int:
        """Run every event due at the current clock time. Returns how many ran."""
        now = self.clock.now()
        ran = 0
        while self._events and self._events[0].due <= now:
            event = heapq.heappop(self._events)
            event.callback()
            ran += 1
        return ran

    def run_all(self) -> int:
        """Drain the queue, sleeping (or moving a VirtualClock forward) until each event is due."""
        ran = 0
        while self._events:
            wait = self._events[0].due - self.clock.now()
            if wait > 0:
                if isinstance(self.clock, VirtualClock):
                    self.clock.advance_to(self._events[0].due)
                else:
                    time.sleep(wait / 1000.0)
            ran += self.run_pending()
        return ran


@dataclass
class RevealState:
    total: int
    revealed: int = 0
    completed: bool = False
    completed_at: Optional[float] = None
    fired_at: List[float] = field(default_factory=list)

    @property
    def progress(self) -> float:
        return self.revealed / self.total if self.total else 1.0


class RevealScheduler:
    """
    Materializes edges one by one, edge idx at idx * per_edge_delay ms after
    schedule(), then fires a single completion callback.
    """

    def __init__(self, queue: EventQueue, per_edge_delay: float = 16.0):
        if per_edge_delay < 0:
            raise ValueError(f"per_edge_delay must be >= 0, got {per_edge_delay}")
        self.queue = queue
        self.per_edge_delay = per_edge_delay

    def schedule(
        self,
        edges: Sequence[Edge],
        points: Sequence[Point],
        on_edge: Callable[[Edge, Point, Point], None],
        on_complete: Callable[[], None]
    ) -> RevealState:
        state = RevealState(total=len(edges))
        fired = set()

        def complete():
            state.completed = True
            state.completed_at = self.queue.clock.now()
            on_complete()

        def materialize(idx: int, edge: Edge):
            if idx in fired:
                return
            fired.add(idx)

            on_edge(edge, points[edge.src], points[edge.dst])
            state.revealed += 1
            state.fired_at.append(self.queue.clock.now())

            # Count-based so it stays correct if events fire out of order
            if state.revealed == state.total and not state.completed:
                complete()

        if not edges:
            complete()
            return state

        for idx, edge in enumerate(edges):
            self.queue.call_later(
                idx * self.per_edge_delay,
                lambda idx=idx, edge=edge: materialize(idx, edge)
            )

        return state
