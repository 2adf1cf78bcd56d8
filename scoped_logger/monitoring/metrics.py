"""
Logger metrics collection and aggregation

A MetricsCollector subscribes to a logger's hook bus and keeps counts of
what the logger emitted, gated out and scoped.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, List, Optional
import threading
import time

from scoped_logger.core.base_logger import BaseLogger
from scoped_logger.core.hooks import HookEvent, HookKind
from scoped_logger.core.log_level import LogLevel


@dataclass
class LoggerMetrics:
    """
    Metrics collected from a logger's hooks.

    Contains counters, gauges, and timing information
    for monitoring logger behavior.
    """

    # Message counts
    total_messages: int = 0
    messages_by_level: Dict[LogLevel, int] = field(default_factory=dict)
    suppressed_messages: int = 0  # gated out or failed

    # Scope metrics
    scopes_opened: int = 0
    scopes_closed: int = 0
    scope_depth: int = 0
    max_scope_depth: int = 0

    # Performance metrics
    messages_per_second: float = 0.0
    avg_emit_latency_ms: float = 0.0
    max_emit_latency_ms: float = 0.0
    p99_emit_latency_ms: float = 0.0

    # Timing
    started_at: Optional[datetime] = None
    last_message_at: Optional[datetime] = None

    def to_dict(self) -> Dict:
        """
        Convert to dictionary for JSON export.

        Returns:
            Dictionary representation of metrics
        """
        return {
            "total_messages": self.total_messages,
            "messages_by_level": {k.name: v for k, v in self.messages_by_level.items()},
            "suppressed_messages": self.suppressed_messages,
            "scopes_opened": self.scopes_opened,
            "scopes_closed": self.scopes_closed,
            "scope_depth": self.scope_depth,
            "max_scope_depth": self.max_scope_depth,
            "messages_per_second": self.messages_per_second,
            "avg_emit_latency_ms": self.avg_emit_latency_ms,
            "max_emit_latency_ms": self.max_emit_latency_ms,
            "p99_emit_latency_ms": self.p99_emit_latency_ms,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "last_message_at": self.last_message_at.isoformat() if self.last_message_at else None,
        }


class MetricsCollector:
    """
    Collects and aggregates logger metrics from hook events.

    Example:
        collector = MetricsCollector()
        collector.attach(logger)
        logger.info("hello")
        print(collector.get_metrics().total_messages)
    """

    def __init__(self, rate_window_seconds: int = 60):
        """
        Initialize metrics collector.

        Args:
            rate_window_seconds: Time window for rate calculation
        """
        self._metrics = LoggerMetrics(started_at=datetime.now())
        self._lock = threading.Lock()
        self._latency_samples: List[float] = []
        self._max_samples = 1000
        self._rate_window: List[float] = []  # message timestamps
        self._rate_window_seconds = rate_window_seconds
        self._pending: List[List] = []  # [start, emitted] per emit in progress
        self._unsubscribe: Optional[Callable[[], None]] = None
        self._logger: Optional[BaseLogger] = None

    @property
    def logger(self) -> Optional[BaseLogger]:
        """The logger this collector is attached to."""
        return self._logger

    def attach(self, logger: BaseLogger) -> "MetricsCollector":
        """
        Start collecting from a logger.

        Args:
            logger: Logger whose hooks are observed

        Returns:
            Self for method chaining

        Raises:
            RuntimeError: If already attached
        """
        if self._unsubscribe is not None:
            raise RuntimeError("MetricsCollector is already attached to a logger")
        self._logger = logger
        self._unsubscribe = logger.hooks.subscribe(self.handle_event)
        return self

    def detach(self) -> None:
        """Stop collecting. Does nothing if not attached."""
        if self._unsubscribe is not None:
            self._unsubscribe()
        self._unsubscribe = None
        self._logger = None
        self._pending.clear()

    def handle_event(self, event: HookEvent) -> None:
        """
        Update metrics from one hook event.

        Args:
            event: Event published by the observed logger
        """
        with self._lock:
            if event.kind is HookKind.BEFORE_EMIT:
                self._pending.append([time.perf_counter(), False])
            elif event.kind is HookKind.MESSAGE_EMITTED:
                if self._pending:
                    self._pending[-1][1] = True
                self._record_message(event.level)
            elif event.kind is HookKind.AFTER_EMIT:
                self._finish_emit()
            elif event.kind is HookKind.SCOPE_BEGIN:
                self._metrics.scopes_opened += 1
                self._update_scope_depth(event)
            elif event.kind is HookKind.SCOPE_END:
                self._metrics.scopes_closed += 1
                self._update_scope_depth(event)

    def _record_message(self, level: Optional[LogLevel]) -> None:
        self._metrics.total_messages += 1
        if level is not None:
            self._metrics.messages_by_level[level] = (
                self._metrics.messages_by_level.get(level, 0) + 1
            )
        self._metrics.last_message_at = datetime.now()
        self._update_rate()

    def _finish_emit(self) -> None:
        if not self._pending:
            return
        start, emitted = self._pending.pop()
        if not emitted:
            self._metrics.suppressed_messages += 1
            return

        latency_ms = (time.perf_counter() - start) * 1000
        self._latency_samples.append(latency_ms)
        if len(self._latency_samples) > self._max_samples:
            self._latency_samples = self._latency_samples[-self._max_samples:]

    def _update_scope_depth(self, event: HookEvent) -> None:
        logger = event.logger
        depth = logger.scope_registry.depth(logger.source)
        self._metrics.scope_depth = depth
        if depth > self._metrics.max_scope_depth:
            self._metrics.max_scope_depth = depth

    def _update_rate(self) -> None:
        """Update message rate calculation."""
        now = time.time()
        self._rate_window.append(now)

        # Remove old entries
        cutoff = now - self._rate_window_seconds
        self._rate_window = [ts for ts in self._rate_window if ts > cutoff]

        # Calculate rate
        if self._rate_window:
            time_span = now - self._rate_window[0]
            if time_span > 0:
                self._metrics.messages_per_second = len(self._rate_window) / time_span

    def _calculate_percentile(self, percentile: float) -> float:
        """
        Calculate a percentile from latency samples.

        Args:
            percentile: Percentile to calculate (0-100)

        Returns:
            Percentile value in milliseconds
        """
        if not self._latency_samples:
            return 0.0

        sorted_samples = sorted(self._latency_samples)
        index = int(len(sorted_samples) * percentile / 100)
        index = min(index, len(sorted_samples) - 1)
        return sorted_samples[index]

    def get_metrics(self) -> LoggerMetrics:
        """
        Get current metrics snapshot.

        Returns:
            Copy of current LoggerMetrics
        """
        with self._lock:
            avg_latency = 0.0
            max_latency = 0.0
            p99_latency = 0.0

            if self._latency_samples:
                avg_latency = sum(self._latency_samples) / len(self._latency_samples)
                max_latency = max(self._latency_samples)
                p99_latency = self._calculate_percentile(99)

            return LoggerMetrics(
                total_messages=self._metrics.total_messages,
                messages_by_level=dict(self._metrics.messages_by_level),
                suppressed_messages=self._metrics.suppressed_messages,
                scopes_opened=self._metrics.scopes_opened,
                scopes_closed=self._metrics.scopes_closed,
                scope_depth=self._metrics.scope_depth,
                max_scope_depth=self._metrics.max_scope_depth,
                messages_per_second=self._metrics.messages_per_second,
                avg_emit_latency_ms=avg_latency,
                max_emit_latency_ms=max_latency,
                p99_emit_latency_ms=p99_latency,
                started_at=self._metrics.started_at,
                last_message_at=self._metrics.last_message_at,
            )

    def reset(self) -> None:
        """Reset all metrics to initial values."""
        with self._lock:
            self._metrics = LoggerMetrics(started_at=datetime.now())
            self._latency_samples.clear()
            self._rate_window.clear()
