"""
Metrics Collection
Prometheus metrics for document engine operations
"""

import time
from contextlib import contextmanager
from typing import Callable, Iterator

from prometheus_client import Counter, Gauge, Histogram, generate_latest


class MetricsCollector:
    """
    Collects and exposes Prometheus metrics for the document engine.
    """

    def __init__(self) -> None:
        # Mutation metrics
        self.operations_total = Counter(
            "pagecraft_operations_total",
            "Total number of engine operations",
            ["action", "status"],
        )

        # Export metrics
        self.export_duration = Histogram(
            "pagecraft_export_duration_seconds",
            "Export duration in seconds",
            ["format"],
            buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
        )
        self.render_cache_total = Counter(
            "pagecraft_render_cache_total",
            "HTML render cache lookups",
            ["result"],
        )

        # History metrics
        self.history_depth = Gauge(
            "pagecraft_history_depth",
            "Entries on the undo/redo stacks",
            ["stack"],
        )

        # Document metrics
        self.document_nodes = Gauge(
            "pagecraft_document_nodes",
            "Nodes in the live document, descendants included",
        )

    def record_operation(self, action: str, status: str) -> None:
        """Record an engine operation outcome."""
        self.operations_total.labels(action=action, status=status).inc()

    def record_export(self, fmt: str, duration: float) -> None:
        """Record an export run."""
        self.export_duration.labels(format=fmt).observe(duration)

    def record_render_cache(self, hit: bool) -> None:
        """Record a render cache lookup."""
        self.render_cache_total.labels(result="hit" if hit else "miss").inc()

    def set_history_depth(self, undo: int, redo: int) -> None:
        """Set the current undo/redo stack depths."""
        self.history_depth.labels(stack="undo").set(undo)
        self.history_depth.labels(stack="redo").set(redo)

    def set_document_nodes(self, count: int) -> None:
        self.document_nodes.set(count)

    @contextmanager
    def measure_duration(self, callback: Callable[[float], None]) -> Iterator[None]:
        """Context manager to measure operation duration."""
        start = time.perf_counter()
        try:
            yield
        finally:
            callback(time.perf_counter() - start)

    def get_metrics(self) -> bytes:
        """Get metrics in Prometheus format."""
        return generate_latest()


# Global metrics collector instance
metrics_collector = MetricsCollector()
