# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Observability for pterolink.

Classes:
    MetricsCollector: Dict metrics with optional Prometheus mirroring.

Functions:
    get_metrics_collector: Get the global metrics collector singleton.
    reset_metrics_collector: Reset the global metrics collector singleton.
"""

from .collector import (
    METRIC_DEFINITIONS,
    MetricDefinition,
    MetricsCollector,
    get_metrics_collector,
    reset_metrics_collector,
)
from .constants import (
    API_ERRORS_TOTAL,
    API_REQUESTS_TOTAL,
    METRIC_PREFIX,
    QUEUE_BACKLOG,
    QUEUE_COMPLETED_TOTAL,
    QUEUE_ENQUEUED_TOTAL,
    QUEUE_FAILED_TOTAL,
)

__all__ = [
    "API_ERRORS_TOTAL",
    "API_REQUESTS_TOTAL",
    "METRIC_DEFINITIONS",
    "METRIC_PREFIX",
    "QUEUE_BACKLOG",
    "QUEUE_COMPLETED_TOTAL",
    "QUEUE_ENQUEUED_TOTAL",
    "QUEUE_FAILED_TOTAL",
    "MetricDefinition",
    "MetricsCollector",
    "get_metrics_collector",
    "reset_metrics_collector",
]
