"""Per-client token bucket rate limiting for the HTTP routes."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field

from fastapi import HTTPException, Request


@dataclass
class _Bucket:
    tokens: float
    last_refill: float = field(default_factory=time.monotonic)

    def refill(self, now: float, capacity: float, rate: float) -> None:
        self.tokens = min(capacity, self.tokens + (now - self.last_refill) * rate)
        self.last_refill = now


class RateLimiter:
    """
    Token bucket per client key.

    Buckets idle for longer than ``eviction_ttl`` are dropped lazily on
    the next call, so the table cannot grow without bound.
    """

    def __init__(
        self,
        capacity: int = 120,
        refill_rate: float = 2.0,
        eviction_ttl: float = 600.0,
    ) -> None:
        self._capacity = float(capacity)
        self._refill_rate = refill_rate
        self._eviction_ttl = eviction_ttl
        self._buckets: dict[str, _Bucket] = {}
        self._last_eviction = time.monotonic()
        self._lock = threading.Lock()

    def is_allowed(self, client_key: str) -> bool:
        """Consume one token for *client_key*. Thread-safe."""
        now = time.monotonic()
        with self._lock:
            if now - self._last_eviction > self._eviction_ttl:
                self._evict(now)
            bucket = self._buckets.get(client_key)
            if bucket is None:
                bucket = _Bucket(tokens=self._capacity, last_refill=now)
                self._buckets[client_key] = bucket
            bucket.refill(now, self._capacity, self._refill_rate)
            if bucket.tokens >= 1.0:
                bucket.tokens -= 1.0
                return True
            return False

    def enforce(self, request: Request) -> None:
        """Raise 429 when the calling client is out of tokens."""
        client_key = request.client.host if request.client else "unknown"
        if not self.is_allowed(client_key):
            raise HTTPException(status_code=429, detail="Rate limit exceeded")

    def evict_stale(self) -> int:
        """Remove idle buckets now. Returns count evicted."""
        with self._lock:
            return self._evict(time.monotonic())

    def _evict(self, now: float) -> int:
        stale = [k for k, b in self._buckets.items() if now - b.last_refill > self._eviction_ttl]
        for k in stale:
            del self._buckets[k]
        self._last_eviction = now
        return len(stale)

    @property
    def bucket_count(self) -> int:
        with self._lock:
            return len(self._buckets)
