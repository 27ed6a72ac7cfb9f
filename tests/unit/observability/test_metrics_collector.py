# SPDX-License-Identifier: Apache-2.0
"""
Unit tests for the observability collector module.

Tests cover:
- MetricsCollector: dict counters and gauges
- Prometheus mirroring on a private registry
- Label cardinality protection
- Singleton pattern: get_metrics_collector, reset_metrics_collector
"""

from __future__ import annotations

import threading

import pytest
from prometheus_client import CollectorRegistry

from pterolink.observability import (
    API_REQUESTS_TOTAL,
    METRIC_DEFINITIONS,
    QUEUE_BACKLOG,
    QUEUE_ENQUEUED_TOTAL,
    MetricsCollector,
    get_metrics_collector,
    reset_metrics_collector,
)


class TestMetricDefinitions:
    def test_all_metrics_defined(self):
        for name in (QUEUE_ENQUEUED_TOTAL, QUEUE_BACKLOG, API_REQUESTS_TOTAL):
            assert name in METRIC_DEFINITIONS

    def test_naming_conventions(self):
        for name, defn in METRIC_DEFINITIONS.items():
            assert name.startswith("pterolink_")
            if defn.metric_type == "counter":
                assert name.endswith("_total")


class TestCounters:
    def test_increment(self):
        collector = MetricsCollector()

        collector.inc_counter(QUEUE_ENQUEUED_TOTAL, labels={"queue": "users"})
        collector.inc_counter(QUEUE_ENQUEUED_TOTAL, 2, labels={"queue": "users"})

        assert collector.get_counter(QUEUE_ENQUEUED_TOTAL, {"queue": "users"}) == 3
        assert collector.get_counter(QUEUE_ENQUEUED_TOTAL, {"queue": "nodes"}) == 0

    def test_negative_increment_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            MetricsCollector().inc_counter(QUEUE_ENQUEUED_TOTAL, -1)

    def test_thread_safety(self):
        collector = MetricsCollector()

        def worker():
            for _ in range(500):
                collector.inc_counter(QUEUE_ENQUEUED_TOTAL, labels={"queue": "q"})

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert collector.get_counter(QUEUE_ENQUEUED_TOTAL, {"queue": "q"}) == 2000


class TestGauges:
    def test_set_gauge_snapshot(self):
        collector = MetricsCollector()

        collector.set_gauge(QUEUE_BACKLOG, 4, labels={"queue": "servers"})

        assert collector.get_metrics()["gauges"][QUEUE_BACKLOG] == {"queue=servers": 4}


class TestCardinality:
    def test_limit_drops_new_combinations(self, monkeypatch):
        monkeypatch.setattr(MetricsCollector, "MAX_LABEL_COMBINATIONS", 2)
        collector = MetricsCollector()

        for name in ("a", "b", "c"):
            collector.inc_counter(QUEUE_ENQUEUED_TOTAL, labels={"queue": name})

        assert collector.get_counter(QUEUE_ENQUEUED_TOTAL, {"queue": "c"}) == 0
        assert len(collector.get_metrics()["counters"][QUEUE_ENQUEUED_TOTAL]) == 2


class TestPrometheus:
    def test_mirrors_into_registry(self):
        registry = CollectorRegistry()
        collector = MetricsCollector(enable_prometheus=True, registry=registry)

        collector.inc_counter(API_REQUESTS_TOTAL, labels={"method": "GET", "scope": "client"})
        collector.set_gauge(QUEUE_BACKLOG, 3, labels={"queue": "users"})

        assert collector.prometheus_enabled is True
        assert (
            registry.get_sample_value(
                API_REQUESTS_TOTAL, {"method": "GET", "scope": "client"}
            )
            == 1.0
        )
        assert registry.get_sample_value(QUEUE_BACKLOG, {"queue": "users"}) == 3.0

    def test_duplicate_registration_is_tolerated(self):
        registry = CollectorRegistry()
        first = MetricsCollector(enable_prometheus=True, registry=registry)
        second = MetricsCollector(enable_prometheus=True, registry=registry)

        first.inc_counter(QUEUE_ENQUEUED_TOTAL, labels={"queue": "a"})
        second.inc_counter(QUEUE_ENQUEUED_TOTAL, labels={"queue": "a"})

        assert second.get_counter(QUEUE_ENQUEUED_TOTAL, {"queue": "a"}) == 1

    def test_disabled_by_default(self):
        assert MetricsCollector().prometheus_enabled is False


class TestSingleton:
    def test_same_instance(self):
        assert get_metrics_collector() is get_metrics_collector()

    def test_reset_creates_new_instance(self):
        first = get_metrics_collector()
        first.inc_counter(QUEUE_ENQUEUED_TOTAL)

        reset_metrics_collector()

        second = get_metrics_collector()
        assert second is not first
        assert second.get_metrics() == {"counters": {}, "gauges": {}}
