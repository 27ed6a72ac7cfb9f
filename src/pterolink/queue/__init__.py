# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request queueing for pterolink collection managers.

Classes:
    RateLimitedQueue: FIFO, single-flight, time-spaced dispatch queue.
"""

from .rate_limited import Operation, RateLimitedQueue

__all__ = ["Operation", "RateLimitedQueue"]
