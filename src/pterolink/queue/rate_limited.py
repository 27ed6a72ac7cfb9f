# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Rate-limited FIFO dispatch queue.

One RateLimitedQueue is owned by each collection manager. It serializes the
manager's mutating requests: operations run one at a time, strictly in
submission order, with a fixed pause of ``1 / rate_per_second`` seconds after
each operation settles.

Key Features:
    - enqueue() is synchronous and never blocks; it returns an asyncio.Future
    - Single-flight drain: at most one drain task per queue
    - A failing operation rejects only its own future
    - No cancellation primitive and no backlog cap
"""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from ..observability.collector import MetricsCollector, get_metrics_collector
from ..observability.constants import (
    QUEUE_BACKLOG,
    QUEUE_COMPLETED_TOTAL,
    QUEUE_ENQUEUED_TOTAL,
    QUEUE_FAILED_TOTAL,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

Operation = Callable[[], Awaitable[T]]


@dataclass
class _PendingOperation(Generic[T]):
    """An operation waiting in the backlog together with its caller's future."""

    operation: Operation[T]
    future: asyncio.Future[T]
    sequence: int = field(default=0)


class RateLimitedQueue(Generic[T]):
    """
    Single-lane, time-spaced dispatch queue.

    Usage:
        queue: RateLimitedQueue[User] = RateLimitedQueue(5.0, name="users")
        future = queue.enqueue(lambda: create_user(data))
        user = await future
    """

    def __init__(
        self,
        rate_per_second: float,
        name: str = "default",
        metrics: MetricsCollector | None = None,
    ) -> None:
        if rate_per_second <= 0:
            raise ValueError("rate_per_second must be positive")

        self.name = name
        self.rate_per_second = rate_per_second
        self._interval = 1.0 / rate_per_second
        self._backlog: deque[_PendingOperation[T]] = deque()
        self._draining = False
        self._drain_task: asyncio.Task[None] | None = None
        self._idle = asyncio.Event()
        self._idle.set()
        self._metrics = metrics if metrics is not None else get_metrics_collector()
        self._labels = {"queue": name}

        self._sequence = 0
        self._total_completed = 0
        self._total_failed = 0

    @property
    def dispatch_interval(self) -> float:
        """Seconds between one operation settling and the next one starting."""
        return self._interval

    @property
    def backlog_size(self) -> int:
        return len(self._backlog)

    @property
    def is_draining(self) -> bool:
        return self._draining

    def enqueue(self, operation: Operation[T]) -> asyncio.Future[T]:
        """
        Append an operation to the backlog.

        Must be called from a running event loop. The operation is not
        started here; it runs when the drain loop reaches it.

        Args:
            operation: Zero-argument callable returning an awaitable

        Returns:
            Future settled with the operation's result or exception
        """
        loop = asyncio.get_running_loop()
        future: asyncio.Future[T] = loop.create_future()

        self._sequence += 1
        self._backlog.append(_PendingOperation(operation, future, self._sequence))
        self._idle.clear()

        self._metrics.inc_counter(QUEUE_ENQUEUED_TOTAL, labels=self._labels)
        self._metrics.set_gauge(QUEUE_BACKLOG, len(self._backlog), labels=self._labels)
        logger.debug(
            f"Queue {self.name}: enqueued operation #{self._sequence} "
            f"(backlog={len(self._backlog)})"
        )

        self._start_drain(loop)
        return future

    def _start_drain(self, loop: asyncio.AbstractEventLoop) -> None:
        # Single-flight: a running drain picks up anything appended meanwhile
        if self._draining:
            return
        self._draining = True
        self._drain_task = loop.create_task(self._drain())

    async def _drain(self) -> None:
        logger.info(f"Queue {self.name}: drain started")
        try:
            while self._backlog:
                pending = self._backlog.popleft()
                self._metrics.set_gauge(
                    QUEUE_BACKLOG, len(self._backlog), labels=self._labels
                )
                await self._dispatch(pending)
                await asyncio.sleep(self._interval)
        except asyncio.CancelledError:
            # Nothing will drain what is left; settle it so callers and join() return
            abandoned = len(self._backlog)
            while self._backlog:
                leftover = self._backlog.popleft()
                if not leftover.future.done():
                    leftover.future.cancel()
            self._metrics.set_gauge(QUEUE_BACKLOG, 0, labels=self._labels)
            if abandoned:
                logger.warning(
                    f"Queue {self.name}: drain cancelled, {abandoned} pending operation(s) cancelled"
                )
            raise
        finally:
            self._draining = False
            self._drain_task = None
            if not self._backlog:
                self._idle.set()
            logger.info(f"Queue {self.name}: drain stopped")

    async def _dispatch(self, pending: _PendingOperation[T]) -> None:
        future = pending.future
        logger.debug(f"Queue {self.name}: dispatching operation #{pending.sequence}")

        try:
            result = await pending.operation()
        except asyncio.CancelledError:
            # The drain task itself is being cancelled (loop shutdown)
            if not future.done():
                future.cancel()
            raise
        except Exception as e:
            self._total_failed += 1
            self._metrics.inc_counter(QUEUE_FAILED_TOTAL, labels=self._labels)
            logger.warning(
                f"Queue {self.name}: operation #{pending.sequence} failed: "
                f"{type(e).__name__}: {e}"
            )
            if not future.cancelled():
                future.set_exception(e)
            return

        self._total_completed += 1
        self._metrics.inc_counter(QUEUE_COMPLETED_TOTAL, labels=self._labels)
        if not future.cancelled():
            future.set_result(result)

    async def join(self) -> None:
        """Wait until the backlog has drained and the drain loop has stopped."""
        await self._idle.wait()

    def get_metrics(self) -> dict[str, Any]:
        """Per-queue statistics."""
        return {
            "name": self.name,
            "rate_per_second": self.rate_per_second,
            "backlog": len(self._backlog),
            "draining": self._draining,
            "total_enqueued": self._sequence,
            "total_completed": self._total_completed,
            "total_failed": self._total_failed,
        }

    def __repr__(self) -> str:
        return (
            f"RateLimitedQueue(name={self.name!r}, "
            f"rate_per_second={self.rate_per_second}, "
            f"backlog={len(self._backlog)}, draining={self._draining})"
        )


__all__ = ["Operation", "RateLimitedQueue"]
