"""Structured logging and OpenTelemetry metrics for caches."""

from __future__ import annotations

import logging
from typing import Optional

from opentelemetry import metrics
from opentelemetry.exporter.prometheus import PrometheusMetricReader
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.resources import Resource
from prometheus_client import start_http_server

import structlog

logger = structlog.get_logger(__name__)

# Global instances
_meter: Optional[metrics.Meter] = None
_metrics: Optional["CacheMetrics"] = None


def configure_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure structlog for JSON or console output."""
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            [structlog.processors.CallsiteParameter.MODULE]
        ),
    ]
    if fmt == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        logger_factory=structlog.PrintLoggerFactory(),
    )


class CacheMetrics:
    """Counters describing cache traffic."""

    def __init__(self, meter: metrics.Meter):
        self.meter = meter

        self.cache_hits = meter.create_counter(
            name="lru_cache_hits_total",
            description="Cache hit count",
            unit="1",
        )

        self.cache_misses = meter.create_counter(
            name="lru_cache_misses_total",
            description="Cache miss count",
            unit="1",
        )

        self.cache_evictions = meter.create_counter(
            name="lru_cache_evictions_total",
            description="Entries evicted to make room for new keys",
            unit="1",
        )

        self.cache_entries = meter.create_up_down_counter(
            name="lru_cache_entries",
            description="Number of live cache entries",
            unit="1",
        )


def initialize_telemetry(
    *,
    service_name: str = "recency-cache",
    service_version: str = "1.0.0",
    enable_prometheus: bool = True,
    prometheus_port: int = 9090,
    log_level: str = "INFO",
    log_format: str = "json",
) -> None:
    """
    Initialize OpenTelemetry metrics and structured logging.

    Args:
        service_name: Service name attached to metrics
        service_version: Service version
        enable_prometheus: Expose metrics through a Prometheus reader
        prometheus_port: Port for the Prometheus metrics server
    """
    global _meter, _metrics

    configure_logging(log_level, log_format)

    resource = Resource.create({
        "service.name": service_name,
        "service.version": service_version,
    })

    if enable_prometheus:
        reader = PrometheusMetricReader()
        metrics_provider = MeterProvider(resource=resource, metric_readers=[reader])
        start_http_server(prometheus_port)
        logger.info("prometheus_started", port=prometheus_port)
    else:
        metrics_provider = MeterProvider(resource=resource)

    # The global provider can only be set once per process, so counters are
    # created from this provider directly.
    metrics.set_meter_provider(metrics_provider)
    _meter = metrics_provider.get_meter(service_name, service_version)
    _metrics = CacheMetrics(_meter)

    logger.info(
        "telemetry_initialized",
        service_name=service_name,
        service_version=service_version,
        prometheus_enabled=enable_prometheus,
    )


def telemetry_initialized() -> bool:
    return _metrics is not None


def get_metrics() -> CacheMetrics:
    """Get the global metrics instance."""
    if _metrics is None:
        raise RuntimeError("Telemetry not initialized. Call initialize_telemetry() first.")
    return _metrics


def record_cache_metrics(hit: bool, cache_type: str = "memory", *, count: int = 1) -> None:
    """Record cache hit/miss metrics. Does nothing before initialization."""
    if _metrics is None:
        return
    labels = {"cache_type": cache_type}

    if hit:
        _metrics.cache_hits.add(count, labels)
    else:
        _metrics.cache_misses.add(count, labels)


def record_eviction(cache_type: str = "memory", *, count: int = 1) -> None:
    """Record evicted entries. Does nothing before initialization."""
    if _metrics is None:
        return
    _metrics.cache_evictions.add(count, {"cache_type": cache_type})


def record_size_change(delta: int, cache_type: str = "memory") -> None:
    """Track the live entry count. Does nothing before initialization."""
    if _metrics is None or delta == 0:
        return
    _metrics.cache_entries.add(delta, {"cache_type": cache_type})
