from task_tracker.core.domain.exceptions.domain_error import DomainError
from task_tracker.core.domain.exceptions.resource_not_found_error import ResourceNotFoundError
from task_tracker.core.domain.exceptions.task_not_found_error import TaskNotFoundError
from task_tracker.core.domain.exceptions.validation_failed_error import ValidationFailedError

__all__ = [
    "DomainError",
    "ResourceNotFoundError",
    "TaskNotFoundError",
    "ValidationFailedError",
]
