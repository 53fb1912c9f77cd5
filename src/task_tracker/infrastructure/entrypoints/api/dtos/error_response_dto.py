from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Body of every non-2xx response. status always equals the HTTP code returned."""

    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: int
    error: str
    message: str
    path: str
    validation_errors: list[str] = Field(default_factory=list, alias="validationErrors")

    model_config = ConfigDict(populate_by_name=True)
