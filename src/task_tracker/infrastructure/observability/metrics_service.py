"""Prometheus metrics declarations for the task tracker.

Labels use only static enumerations, never task ids.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from prometheus_client import Counter

TASK_OPERATIONS_TOTAL = Counter(
    "task_tracker_task_operations_total",
    "Task operations handled, by outcome",
    ["operation", "outcome"],
)

REQUEST_FAILURES_TOTAL = Counter(
    "task_tracker_request_failures_total",
    "Failed requests by failure kind",
    ["kind"],
)


@contextmanager
def track_operation(operation: str) -> Iterator[None]:
    outcome = "success"
    try:
        yield
    except Exception:
        outcome = "failure"
        raise
    finally:
        TASK_OPERATIONS_TOTAL.labels(operation=operation, outcome=outcome).inc()
