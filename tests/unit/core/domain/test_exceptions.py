from task_tracker.core.domain.exceptions import (
    DomainError,
    ResourceNotFoundError,
    TaskNotFoundError,
    ValidationFailedError,
)


def test_task_not_found_message_contains_id():
    exc = TaskNotFoundError(42)

    assert isinstance(exc, ResourceNotFoundError)
    assert isinstance(exc, DomainError)
    assert exc.task_id == 42
    assert str(exc) == "Task not found with id: '42'"


def test_validation_failed_keeps_error_order():
    exc = ValidationFailedError(["title: too short", "status: bad value"])

    assert exc.errors == ["title: too short", "status: bad value"]
    assert exc.message == "Input validation failed. Please check the errors."
    assert "title: too short; status: bad value" in str(exc)
