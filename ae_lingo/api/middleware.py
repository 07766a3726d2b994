"""
API Middleware
==============
Single-flight gating for translation requests and metrics collection.
"""
import threading
from functools import wraps
from typing import Callable, Optional
from flask import jsonify

from ae_lingo.config.constants import MSG_BUSY
from ae_lingo.models.schemas import MetricsData
from ae_lingo.utils.logging import get_logger


class SingleFlightGate:
    """
    Allows at most one translation in flight at a time.

    A request arriving while another runs is rejected instead of queued.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self.logger = get_logger().api_logger

    def try_enter(self) -> bool:
        return self._lock.acquire(blocking=False)

    def leave(self) -> None:
        self._lock.release()

    @property
    def busy(self) -> bool:
        return self._lock.locked()


class MetricsCollector:
    """Thread-safe counters for translation outcomes."""

    def __init__(self):
        self._lock = threading.Lock()
        self.data = MetricsData()

    def record(self, outcome: str, elapsed: float = 0.0) -> None:
        """
        Record one translation request.

        Args:
            outcome: 'success', 'empty' or 'failed'
            elapsed: Seconds spent on the request
        """
        with self._lock:
            self.data.total_requests += 1
            if outcome == 'success':
                self.data.successful_translations += 1
                self.data.total_translation_time += elapsed
            elif outcome == 'empty':
                self.data.empty_translations += 1
                self.data.total_translation_time += elapsed
            else:
                self.data.failed_translations += 1

    def snapshot(self) -> dict:
        with self._lock:
            return self.data.to_dict()

    def reset(self) -> None:
        with self._lock:
            self.data = MetricsData()


# Global instances
_gate: Optional[SingleFlightGate] = None
_metrics: Optional[MetricsCollector] = None


def get_single_flight_gate() -> SingleFlightGate:
    """Get single-flight gate instance."""
    global _gate
    if _gate is None:
        _gate = SingleFlightGate()
    return _gate


def get_metrics_collector() -> MetricsCollector:
    """Get metrics collector instance."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsCollector()
    return _metrics


def single_flight(f: Callable) -> Callable:
    """Reject the request with 409 while another translation is running."""
    @wraps(f)
    def decorated(*args, **kwargs):
        gate = get_single_flight_gate()

        if not gate.try_enter():
            gate.logger.warning("Translation rejected: another request is in flight")
            return jsonify({'error': MSG_BUSY, 'code': 'busy'}), 409

        try:
            return f(*args, **kwargs)
        finally:
            gate.leave()

    return decorated
