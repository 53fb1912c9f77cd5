from task_tracker.infrastructure.observability.logging.log_schema_processor import log_schema_processor


def test_nests_error_and_context_blocks(monkeypatch):
    monkeypatch.setenv("SERVICE_NAME", "task-tracker-test")
    event = {
        "event": "Request failed",
        "level": "warning",
        "timestamp": "2026-01-01T00:00:00Z",
        "correlation_id": "abc",
        "error_type": "TaskNotFoundError",
        "error_code": 404,
        "context_endpoint": "/api/tasks/1",
        "context_method": "GET",
        "task_id": 1,
    }

    result = log_schema_processor(None, "warning", event)

    assert result["message"] == "Request failed"
    assert result["service"] == "task-tracker-test"
    assert result["correlation_id"] == "abc"
    assert result["error"] == {"type": "TaskNotFoundError", "code": 404}
    assert result["context"] == {"endpoint": "/api/tasks/1", "method": "GET"}
    assert result["extra"] == {"task_id": 1}


def test_omits_empty_blocks():
    result = log_schema_processor(None, "info", {"event": "Task created"})

    assert "error" not in result
    assert "context" not in result
    assert "extra" not in result
