from __future__ import annotations

from task_tracker.core.domain.exceptions.domain_error import DomainError


class ValidationFailedError(DomainError):
    """Raised when one or more field constraints are violated."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("Input validation failed. Please check the errors.")

    def __str__(self) -> str:
        return f"{self.message} {'; '.join(self.errors)}"
