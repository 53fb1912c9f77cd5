from fastapi import APIRouter, Response, status

from task_tracker.core.application.services.task_service import TaskService
from task_tracker.infrastructure.entrypoints.api.dtos.task_dtos import (
    TaskCreateRequest,
    TaskResponse,
    TaskUpdateRequest,
)
from task_tracker.infrastructure.entrypoints.api.mappers.task_dto_mapper import TaskDtoMapper
from task_tracker.infrastructure.observability.metrics_service import track_operation


def build_task_router(task_service: TaskService) -> APIRouter:
    """Routes for the tasks collection, bound to an explicit service instance."""
    router = APIRouter(prefix="/api/tasks", tags=["tasks"])

    @router.get("", response_model=list[TaskResponse])
    def list_tasks() -> list[TaskResponse]:
        with track_operation("list"):
            return [TaskDtoMapper.to_response(t) for t in task_service.list_all()]

    @router.get("/{task_id}", response_model=TaskResponse)
    def get_task(task_id: int) -> TaskResponse:
        with track_operation("get"):
            return TaskDtoMapper.to_response(task_service.get(task_id))

    @router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
    def create_task(payload: TaskCreateRequest) -> TaskResponse:
        with track_operation("create"):
            created = task_service.create(TaskDtoMapper.to_domain(payload))
            return TaskDtoMapper.to_response(created)

    @router.put("/{task_id}", response_model=TaskResponse)
    def update_task(task_id: int, payload: TaskUpdateRequest) -> TaskResponse:
        with track_operation("update"):
            updated = task_service.update(task_id, TaskDtoMapper.to_patch(payload))
            return TaskDtoMapper.to_response(updated)

    @router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
    def delete_task(task_id: int) -> Response:
        with track_operation("delete"):
            task_service.delete(task_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
