# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Metric name constants following Prometheus naming conventions.

All metric names use the `pterolink_` prefix.

Naming Conventions:
    - Counter metrics end with `_total`
    - Gauges use present-tense descriptive names

Label Best Practices:
    Use only categorical labels:
    - `queue` - Collection queue name (users, servers, nodes, nests, eggs)
    - `method` - HTTP method
    - `scope` - API scope (application, client)
    - `code` - PteroError code (NOT_FOUND, RATE_LIMIT, ...)

    NEVER use resource ids or paths as labels.
"""

METRIC_PREFIX = "pterolink"
"""Prefix for all Prometheus metrics in this library."""

# Queue metrics (queue/rate_limited.py)

QUEUE_ENQUEUED_TOTAL = f"{METRIC_PREFIX}_queue_enqueued_total"
"""Total operations appended to a queue backlog."""

QUEUE_COMPLETED_TOTAL = f"{METRIC_PREFIX}_queue_completed_total"
"""Total queued operations that settled successfully."""

QUEUE_FAILED_TOTAL = f"{METRIC_PREFIX}_queue_failed_total"
"""Total queued operations that settled with an exception."""

QUEUE_BACKLOG = f"{METRIC_PREFIX}_queue_backlog"
"""Operations waiting in a queue backlog."""

# Client metrics (client/base.py)

API_REQUESTS_TOTAL = f"{METRIC_PREFIX}_api_requests_total"
"""Total requests sent to the panel."""

API_ERRORS_TOTAL = f"{METRIC_PREFIX}_api_errors_total"
"""Total requests that ended in a PteroError."""


__all__ = [
    "API_ERRORS_TOTAL",
    "API_REQUESTS_TOTAL",
    "METRIC_PREFIX",
    "QUEUE_BACKLOG",
    "QUEUE_COMPLETED_TOTAL",
    "QUEUE_ENQUEUED_TOTAL",
    "QUEUE_FAILED_TOTAL",
]
