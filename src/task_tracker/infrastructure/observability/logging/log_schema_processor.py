"""Structlog processor that nests flat event fields into the service log schema.

Root fields (timestamp, level, service, environment, correlation_id, message)
stay at the top level; error_* and context_* keys are grouped into their own
blocks. Everything left over lands in "extra".
"""

from __future__ import annotations

import os
from typing import Any


def _build_root_fields(event_dict: dict[str, Any]) -> dict[str, Any]:
    return {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": os.environ.get("SERVICE_NAME", "task-tracker"),
        "environment": os.environ.get("APP_ENV", "local"),
        "correlation_id": event_dict.pop("correlation_id", None),
        "message": event_dict.pop("event", ""),
    }


def _build_block(event_dict: dict[str, Any], prefix: str) -> dict[str, Any] | None:
    """Pop every key starting with prefix into a nested dict without the prefix."""
    keys = [k for k in event_dict if k.startswith(prefix)]
    if not keys:
        return None
    return {k[len(prefix):]: event_dict.pop(k) for k in keys}


def log_schema_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    result = _build_root_fields(event_dict)

    error = _build_block(event_dict, "error_")
    if error is not None:
        result["error"] = error

    context = _build_block(event_dict, "context_")
    if context is not None:
        result["context"] = context

    if event_dict:
        result["extra"] = dict(event_dict)

    return result
