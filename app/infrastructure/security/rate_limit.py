from __future__ import annotations

import logging
import time
from collections import deque
from threading import Lock
from typing import Callable, Deque, Dict

from fastapi import Request

logger = logging.getLogger(__name__)


class SlidingWindowLimiter:
    """
    In-memory, per-key sliding window. Single process only; counters are
    lost on restart. Keys with no hit inside the window are swept once per
    window so the table stays bounded by recent clients.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._lock = Lock()
        self._hits: Dict[str, Deque[float]] = {}
        self._last_sweep = clock()

    def hit(self, key: str) -> bool:
        """Record a request for `key`. False when the window is already full."""
        now = self._clock()
        cutoff = now - self.window_seconds
        with self._lock:
            if now - self._last_sweep >= self.window_seconds:
                self._sweep(cutoff)
                self._last_sweep = now

            hits = self._hits.setdefault(key, deque())
            while hits and hits[0] <= cutoff:
                hits.popleft()
            if len(hits) >= self.max_requests:
                return False
            hits.append(now)
            return True

    def _sweep(self, cutoff: float) -> None:
        stale = [key for key, hits in self._hits.items() if not hits or hits[-1] <= cutoff]
        for key in stale:
            del self._hits[key]
        if stale:
            logger.debug("rate limit keys swept", extra={"count": len(stale)})

    def __len__(self) -> int:
        with self._lock:
            return len(self._hits)

    def reset(self) -> None:
        with self._lock:
            self._hits.clear()


def client_ip(request: Request, trust_proxy: bool = True) -> str:
    """
    With `trust_proxy` on, the address our proxy appended to X-Forwarded-For
    (the rightmost entry). Anything left of it came from the client.
    """
    if trust_proxy:
        forwarded = request.headers.get("x-forwarded-for", "")
        last_hop = forwarded.rsplit(",", 1)[-1].strip()
        if last_hop:
            return last_hop
    return request.client.host if request.client else "unknown"
