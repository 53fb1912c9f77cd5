from pydantic import BaseModel, ConfigDict, Field

from task_tracker.core.domain.task import TITLE_MAX_LENGTH, TITLE_MIN_LENGTH, TaskPriority, TaskStatus


class TaskCreateRequest(BaseModel):
    title: str = Field(..., min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH)
    description: str | None = None
    status: TaskStatus
    priority: TaskPriority


class TaskUpdateRequest(BaseModel):
    """Fields omitted or sent as null keep their stored value."""

    title: str | None = Field(None, min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH)
    description: str | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None


class TaskResponse(BaseModel):
    id: int
    title: str
    description: str | None = None
    status: TaskStatus
    priority: TaskPriority

    model_config = ConfigDict(from_attributes=True)
