from task_tracker.core.domain.exceptions.resource_not_found_error import ResourceNotFoundError


class TaskNotFoundError(ResourceNotFoundError):
    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__("Task", "id", task_id)
