from task_tracker.core.domain.exceptions.domain_error import DomainError


class ResourceNotFoundError(DomainError):
    """Raised when a requested resource does not exist in the store."""

    def __init__(self, resource_name: str, field_name: str, field_value: object) -> None:
        self.resource_name = resource_name
        self.field_name = field_name
        self.field_value = field_value
        super().__init__(f"{resource_name} not found with {field_name}: '{field_value}'")
