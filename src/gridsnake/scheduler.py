"""
One-shot timers for the game loop.

The loop re-arms a single one-shot timer after every tick instead of using a
repeating one, so the next tick is always `delay` after the previous one
finished. Handles are cancelled idempotently; a cancelled handle never fires.
"""

import heapq
import itertools
from typing import Callable, Dict, List, Optional, Protocol, Tuple

import pygame  # type: ignore

TICK_EVENT = pygame.USEREVENT + 1


class TaskHandle:
    def __init__(self, on_cancel: Optional[Callable[["TaskHandle"], None]] = None):
        self.cancelled = False
        self.fired = False
        self._on_cancel = on_cancel

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> bool:
        """Returns True only for the call that actually cancelled the task."""
        if not self.active:
            return False
        self.cancelled = True
        if self._on_cancel is not None:
            self._on_cancel(self)
        return True


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TaskHandle: ...


class PygameScheduler:
    """
    Timers backed by pygame.time.set_timer.

    Every armed timer posts a TICK_EVENT carrying a token; dispatch() runs the
    callback only if that token is still live, so a stale event from a
    cancelled timer is dropped.
    """

    def __init__(self, event_type: int = TICK_EVENT):
        self.event_type = event_type
        self._tokens = itertools.count(1)
        self._pending: Dict[int, Tuple[TaskHandle, Callable[[], None]]] = {}

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TaskHandle:
        token = next(self._tokens)
        handle = TaskHandle(on_cancel=lambda h: self._forget(token))
        self._pending[token] = (handle, callback)
        event = pygame.event.Event(self.event_type, token=token)
        pygame.time.set_timer(event, max(int(delay_ms), 1), loops=1)
        return handle

    def _forget(self, token: int) -> None:
        self._pending.pop(token, None)
        if not self._pending:
            pygame.time.set_timer(self.event_type, 0)

    def dispatch(self, event) -> bool:
        """Run the callback for a TICK_EVENT. Returns False for stale or foreign events."""
        if event.type != self.event_type:
            return False
        entry = self._pending.pop(getattr(event, "token", None), None)
        if entry is None:
            return False
        handle, callback = entry
        handle.fired = True
        callback()
        return True


class ManualScheduler:
    """Virtual clock for headless runs and tests; time only moves in advance()."""

    def __init__(self):
        self.now_ms = 0
        self._seq = itertools.count()
        self._queue: List[Tuple[int, int, TaskHandle, Callable[[], None]]] = []

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TaskHandle:
        handle = TaskHandle()
        heapq.heappush(self._queue, (self.now_ms + delay_ms, next(self._seq), handle, callback))
        return handle

    @property
    def pending(self) -> int:
        return sum(1 for _, _, h, _ in self._queue if h.active)

    def advance(self, ms: int) -> int:
        """Move the clock forward, running due callbacks in order. Returns how many ran."""
        target = self.now_ms + ms
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, handle, callback = heapq.heappop(self._queue)
            if not handle.active:
                continue
            self.now_ms = due
            handle.fired = True
            callback()
            ran += 1
        self.now_ms = target
        return ran
