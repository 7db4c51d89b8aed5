# Copyright (c) 2025
# MIT License
# -----------------------------------------------------------------------------
# queues.py
# -----------------------------------------------------------------------------
# Purpose:
#   Discrete-event primitives: Event, Env (clock + future event list +
#   dispatch loop), and Station, a single server with a finite waiting room
#   (M/M/1/K per station).
#
# Design notes:
#   - Service times are exponential with the station's rate, drawn from the
#     run's RandomStream carried on the Env.
#   - Ties on event time are broken by scheduling order (FIFO), via a
#     sequence number stamped when the event is created.
#   - Arrivals respect the horizon (see arrivals.py); departures never do,
#     so every admitted packet finishes service and the FEL drains.
#   - Routing is delegated to env.router (defined in lbnet.network).
#
# Usage:
#   from lbnet.queues import Env, Event, Station
# -----------------------------------------------------------------------------

from __future__ import annotations
import heapq, itertools
from collections import deque
from typing import Callable, Deque, List, Optional

ARRIVAL = "arrival"
DEPARTURE = "departure"


class Event:
    """Minimal event object for the Future Event List (FEL)."""
    __slots__ = ("t", "kind", "station", "seq")
    def __init__(self, t: float, kind: str, station: Optional[int] = None, seq: int = 0):
        self.t = t; self.kind = kind; self.station = station; self.seq = seq
    def __lt__(self, other: "Event"):
        return (self.t, self.seq) < (other.t, other.seq)
    def __repr__(self):
        return f"Event(t={self.t!r}, kind={self.kind!r}, station={self.station!r})"


class Env:
    """Simulation context for one run.

    Attributes
    ----------
    t : float
        Simulation clock, non-decreasing.
    last_event_time : float
        Time of the most recently popped event (0 until the first pop).
    horizon : float
        No arrival is scheduled after this instant.
    FEL : list[Event]
        Min-heap of scheduled events.
    stream : RandomStream
        The run's only source of randomness.
    router : Router
        Receives every arrival (on_arrival).
    arrivals : PoissonArrivals
        Schedules the next arrival each time one fires.
    stations : list[Station]
        Indexed by station id; departures are dispatched here.
    """
    def __init__(self, stream, horizon: float, router, arrivals, stations: List["Station"]):
        self.t: float = 0.0
        self.last_event_time: float = 0.0
        self.horizon = horizon
        self.FEL: List[Event] = []
        self.stream = stream
        self.router = router
        self.arrivals = arrivals
        self.stations = stations
        self._seq = itertools.count()

    def schedule(self, t: float, kind: str, station: Optional[int] = None) -> Event:
        ev = Event(t, kind, station, next(self._seq))
        heapq.heappush(self.FEL, ev)
        return ev

    def run(self, observer: Optional[Callable[[Event, "Env"], None]] = None):
        """Pop events in time order until the FEL is empty."""
        while self.FEL:
            ev = heapq.heappop(self.FEL)
            self.t = ev.t
            self.last_event_time = ev.t
            if ev.kind == ARRIVAL:
                # Keep the arrival process going regardless of where this one lands
                self.arrivals.schedule_next(self)
                self.router.on_arrival(self)
            elif ev.kind == DEPARTURE:
                self.stations[ev.station].on_departure(self)
            if observer is not None:
                observer(ev, self)


class Station:
    """Single FIFO server with a waiting room of at most K packets.

    Parameters
    ----------
    index : int
        Position in the station list; departures are addressed by it.
    K : int
        Waiting-room capacity, excluding the packet in service.
    service_rate : float
        Exponential service rate mu (> 0).

    Notes
    -----
    - The waiting room stores arrival timestamps only; wait = start - arrival.
    - An arrival is dropped iff the server is busy AND the waiting room holds
      K packets. With K = 0 any arrival during a service is dropped.
    - Counters only ever grow.
    """
    def __init__(self, index: int, K: int, service_rate: float):
        self.index = index
        self.K = K
        self.service_rate = service_rate
        self.busy: bool = False
        self.queue: Deque[float] = deque()
        self.served: int = 0
        self.dropped: int = 0
        self.total_wait: float = 0.0
        self.total_service: float = 0.0
        self.max_queue: int = 0
        self.busy_time: float = 0.0
        self.last_change: float = 0.0

    @property
    def name(self) -> str:
        return f"station[{self.index}]"

    def is_full(self) -> bool:
        return len(self.queue) >= self.K

    def enqueue(self, env: Env) -> bool:
        """Admit an arrival at env.t. Returns False when it is dropped."""
        if self.busy and self.is_full():
            self.dropped += 1
            return False
        if not self.busy:
            self._mark_busy(env.t)
            self.busy = True
            self._start_service(env, wait=0.0)
        else:
            self.queue.append(env.t)
            if len(self.queue) > self.max_queue:
                self.max_queue = len(self.queue)
        return True

    def draw_service(self, env: Env) -> float:
        return env.stream.exponential(self.service_rate)

    def on_departure(self, env: Env):
        self.served += 1
        if self.queue:
            t_arr = self.queue.popleft()
            self._start_service(env, wait=env.t - t_arr)
        else:
            self._mark_busy(env.t)
            self.busy = False

    def _start_service(self, env: Env, wait: float):
        st = self.draw_service(env)
        self.total_wait += wait
        self.total_service += st
        env.schedule(env.t + st, DEPARTURE, self.index)

    def _mark_busy(self, now: float):
        # Integrate busy time up to `now` before the busy flag flips
        dt = now - self.last_change
        if dt > 0 and self.busy:
            self.busy_time += dt
        self.last_change = now
