"""Result type used by use cases

Use cases never raise for expected failures; they return a Result holding
either a value or an Error that the API layer maps to an HTTP response.
"""

from typing import Any, Generic, List, Optional, TypeVar
from pydantic import BaseModel, Field

T = TypeVar("T")


class Error(BaseModel):
    """Structured failure returned by a use case"""

    code: str = Field(..., description="Machine readable error code")
    message: str = Field(..., description="Human readable error message")
    reason: Optional[str] = Field(
        default=None,
        description="Diagnostic detail (hidden from production responses)"
    )
    details: List[Any] = Field(
        default_factory=list,
        description="Per-field problems, e.g. validation violations"
    )


class Result(Generic[T]):
    def __init__(self, value: Optional[T] = None, error: Optional[Error] = None):
        self.value = value
        self.error = error

    def is_ok(self) -> bool:
        return self.error is None

    def is_err(self) -> bool:
        return self.error is not None

    def __repr__(self) -> str:
        if self.is_ok():
            return f"Result.ok({self.value!r})"
        return f"Result.err({self.error!r})"


class Return:
    @staticmethod
    def ok(value: T) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def err(error: Error) -> Result[Any]:
        return Result(error=error)
