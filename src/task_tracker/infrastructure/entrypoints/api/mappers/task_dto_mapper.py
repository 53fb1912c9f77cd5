from task_tracker.core.domain.task import Task, TaskPatch
from task_tracker.infrastructure.entrypoints.api.dtos.task_dtos import (
    TaskCreateRequest,
    TaskResponse,
    TaskUpdateRequest,
)


class TaskDtoMapper:
    @staticmethod
    def to_domain(request: TaskCreateRequest) -> Task:
        return Task(
            title=request.title,
            description=request.description,
            status=request.status,
            priority=request.priority,
        )

    @staticmethod
    def to_patch(request: TaskUpdateRequest) -> TaskPatch:
        return TaskPatch(
            title=request.title,
            description=request.description,
            status=request.status,
            priority=request.priority,
        )

    @staticmethod
    def to_response(task: Task) -> TaskResponse:
        return TaskResponse.model_validate(task)
