# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Metrics collector supporting both dict-based and Prometheus metrics.

Features:
    1. Thread-safe counter/gauge operations
    2. Prometheus metric registration when enabled
    3. Dict snapshot for JSON export and tests
    4. Label cardinality protection (max 1000 unique combinations per metric)

Usage:
    >>> from pterolink.observability import get_metrics_collector
    >>> collector = get_metrics_collector()
    >>> collector.inc_counter('pterolink_queue_enqueued_total',
    ...                       labels={'queue': 'servers'})
    >>> metrics = collector.get_metrics()
"""

from __future__ import annotations

import logging
import threading
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, ClassVar

from prometheus_client import REGISTRY, Counter, Gauge

from .constants import (
    API_ERRORS_TOTAL,
    API_REQUESTS_TOTAL,
    QUEUE_BACKLOG,
    QUEUE_COMPLETED_TOTAL,
    QUEUE_ENQUEUED_TOTAL,
    QUEUE_FAILED_TOTAL,
)

logger = logging.getLogger(__name__)


@dataclass
class MetricDefinition:
    """Schema for a metric: type, description and label names."""

    name: str
    metric_type: str  # 'counter', 'gauge'
    description: str
    label_names: tuple[str, ...] = ()


METRIC_DEFINITIONS: dict[str, MetricDefinition] = {
    QUEUE_ENQUEUED_TOTAL: MetricDefinition(
        QUEUE_ENQUEUED_TOTAL, "counter", "Total operations enqueued", ("queue",)
    ),
    QUEUE_COMPLETED_TOTAL: MetricDefinition(
        QUEUE_COMPLETED_TOTAL, "counter", "Total queued operations completed", ("queue",)
    ),
    QUEUE_FAILED_TOTAL: MetricDefinition(
        QUEUE_FAILED_TOTAL, "counter", "Total queued operations failed", ("queue",)
    ),
    QUEUE_BACKLOG: MetricDefinition(
        QUEUE_BACKLOG, "gauge", "Operations waiting in a queue", ("queue",)
    ),
    API_REQUESTS_TOTAL: MetricDefinition(
        API_REQUESTS_TOTAL, "counter", "Total panel API requests", ("method", "scope")
    ),
    API_ERRORS_TOTAL: MetricDefinition(
        API_ERRORS_TOTAL, "counter", "Total panel API errors", ("code",)
    ),
}


class MetricsCollector:
    """
    Metrics collector keeping dict metrics and optional Prometheus mirrors.

    Thread Safety:
        All dict operations use an RLock.

    Cardinality Protection:
        A maximum of MAX_LABEL_COMBINATIONS unique label combinations are
        tracked per metric; further combinations are dropped with a warning.
    """

    MAX_LABEL_COMBINATIONS: ClassVar[int] = 1000

    def __init__(
        self,
        enable_prometheus: bool = False,
        registry: Any | None = None,
    ) -> None:
        """
        Args:
            enable_prometheus: Mirror metrics into Prometheus
            registry: Prometheus CollectorRegistry (defaults to the global one)
        """
        self._enable_prometheus = enable_prometheus
        self._registry = registry if registry is not None else REGISTRY

        self._counters: dict[str, dict[str, int]] = defaultdict(
            lambda: defaultdict(int)
        )
        self._gauges: dict[str, dict[str, float]] = defaultdict(
            lambda: defaultdict(float)
        )
        self._lock = threading.RLock()

        self._prom_metrics: dict[str, Any] = {}
        self._label_combinations: dict[str, set[str]] = defaultdict(set)

    def _labels_to_key(self, labels: dict[str, str] | None) -> str:
        if not labels:
            return ""
        return ",".join(f"{k}={v}" for k, v in sorted(labels.items()))

    def _check_cardinality(self, name: str, label_key: str) -> bool:
        if label_key in self._label_combinations[name]:
            return True
        if len(self._label_combinations[name]) >= self.MAX_LABEL_COMBINATIONS:
            logger.warning(
                f"Cardinality limit ({self.MAX_LABEL_COMBINATIONS}) reached "
                f"for metric {name}. Dropping label combination: {label_key}"
            )
            return False
        self._label_combinations[name].add(label_key)
        return True

    def _get_or_create_prom_metric(self, name: str) -> Any | None:
        if not self._enable_prometheus:
            return None

        if name not in self._prom_metrics:
            defn = METRIC_DEFINITIONS.get(name)
            if defn is None:
                return None
            metric_cls = Counter if defn.metric_type == "counter" else Gauge
            try:
                self._prom_metrics[name] = metric_cls(
                    name,
                    defn.description,
                    list(defn.label_names),
                    registry=self._registry,
                )
            except ValueError as e:
                # Already registered by another collector on the same registry
                logger.warning(f"Failed to create Prometheus metric {name}: {e}")
                return None

        return self._prom_metrics.get(name)

    def inc_counter(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None:
        """
        Increment a counter metric.

        Raises:
            ValueError: If value is negative
        """
        if value < 0:
            raise ValueError("Counter increment must be non-negative")

        label_key = self._labels_to_key(labels)
        with self._lock:
            if not self._check_cardinality(name, label_key):
                return
            self._counters[name][label_key] += value

        prom_counter = self._get_or_create_prom_metric(name)
        if prom_counter is not None:
            if labels:
                prom_counter.labels(**labels).inc(value)
            else:
                prom_counter.inc(value)

    def set_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Set a gauge metric to a specific value."""
        label_key = self._labels_to_key(labels)
        with self._lock:
            if not self._check_cardinality(name, label_key):
                return
            self._gauges[name][label_key] = value

        prom_gauge = self._get_or_create_prom_metric(name)
        if prom_gauge is not None:
            if labels:
                prom_gauge.labels(**labels).set(value)
            else:
                prom_gauge.set(value)

    def get_counter(self, name: str, labels: dict[str, str] | None = None) -> int:
        """Current value of one counter series (0 if never incremented)."""
        with self._lock:
            return self._counters.get(name, {}).get(self._labels_to_key(labels), 0)

    def get_metrics(self) -> dict[str, Any]:
        """
        Snapshot of all metrics:
        {"counters": {name: {label_key: value}}, "gauges": {...}}
        """
        with self._lock:
            counters = {
                name: dict(label_values)
                for name, label_values in self._counters.items()
            }
            gauges = {
                name: dict(label_values) for name, label_values in self._gauges.items()
            }
        return {"counters": counters, "gauges": gauges}

    def reset(self) -> None:
        """Reset all dict metrics to zero."""
        with self._lock:
            self._counters.clear()
            self._gauges.clear()
            self._label_combinations.clear()
        logger.debug("Metrics collector reset")

    @property
    def prometheus_enabled(self) -> bool:
        return self._enable_prometheus


_global_collector: MetricsCollector | None = None
_collector_lock = threading.Lock()


def get_metrics_collector(enable_prometheus: bool = False) -> MetricsCollector:
    """
    Get or create the global metrics collector singleton.

    Args:
        enable_prometheus: Whether to mirror into Prometheus
            (only used on first call)
    """
    global _global_collector

    if _global_collector is None:
        with _collector_lock:
            if _global_collector is None:
                _global_collector = MetricsCollector(
                    enable_prometheus=enable_prometheus
                )

    return _global_collector


def reset_metrics_collector() -> None:
    """Drop the global collector so the next call creates a fresh one (tests)."""
    global _global_collector
    with _collector_lock:
        if _global_collector:
            _global_collector.reset()
        _global_collector = None


__all__ = [
    "METRIC_DEFINITIONS",
    "MetricDefinition",
    "MetricsCollector",
    "get_metrics_collector",
    "reset_metrics_collector",
]
