from .logger_factory_service import configure_logging, get_logger
from .metrics_service import REQUEST_FAILURES_TOTAL, TASK_OPERATIONS_TOTAL, track_operation

__all__ = [
    "REQUEST_FAILURES_TOTAL",
    "TASK_OPERATIONS_TOTAL",
    "configure_logging",
    "get_logger",
    "track_operation",
]
