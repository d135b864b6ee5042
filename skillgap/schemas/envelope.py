"""Response envelope schemas.

Every API response is wrapped as {success, message, data}; list responses
also carry count. Errors use {success: false, message, ...} and are built by
the exception handlers in skillgap.handlers.
"""

from collections.abc import Sequence
from typing import Generic, TypeVar

from pydantic import Field

from skillgap.schemas.base import CamelModel

T = TypeVar("T")


class ApiResponse(CamelModel, Generic[T]):
    """Envelope for a single result."""

    success: bool = True
    message: str = "Success"
    data: T


class ApiListResponse(CamelModel, Generic[T]):
    """Envelope for a list of results."""

    success: bool = True
    message: str = "Success"
    count: int = Field(..., ge=0, description="Number of items in data")
    data: list[T]

    @classmethod
    def of(cls, items: Sequence[T], message: str = "Success") -> "ApiListResponse[T]":
        """Wrap items, filling in count.

        Args:
            items: Items to return
            message: Success message

        Returns:
            Envelope with count == len(items)
        """
        return cls(message=message, count=len(items), data=list(items))


class ErrorResponse(CamelModel):
    """Envelope for a failed request."""

    success: bool = False
    message: str
