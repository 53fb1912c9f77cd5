from task_tracker.infrastructure.entrypoints.api.dtos.error_response_dto import ErrorResponse
from task_tracker.infrastructure.entrypoints.api.dtos.task_dtos import (
    TaskCreateRequest,
    TaskResponse,
    TaskUpdateRequest,
)

__all__ = ["ErrorResponse", "TaskCreateRequest", "TaskResponse", "TaskUpdateRequest"]
