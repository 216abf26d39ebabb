# Content Models
"""Pydantic models for batch execution results."""

from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class BatchMethod(str, Enum):
    """How each batch item is created."""

    POST = "post"  # server-generated ID
    PUT = "put"  # ID taken from the item's "id" field


class BatchItemOutcome(BaseModel):
    """Result of one batch item."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., description="Position of the item in the input")
    success: bool = Field(..., description="Whether the item was created")
    data: Optional[Any] = Field(
        default=None,
        description="API response on success, the submitted item on failure",
    )
    error: Optional[str] = Field(default=None, description="Failure description")
    status_code: Optional[int] = Field(
        default=None, description="HTTP status of a failed API call"
    )


class BatchReport(BaseModel):
    """Aggregate result of a batch run."""

    model_config = ConfigDict(frozen=True)

    endpoint: str
    method: BatchMethod
    results: Tuple[BatchItemOutcome, ...] = Field(default_factory=tuple)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failed(self) -> int:
        return self.total - self.succeeded
