"""Uniform response envelope returned by every SmartBill operation"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar


T = TypeVar("T")


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """
    Success/failure envelope

    Callers branch on ``success`` instead of catching exceptions. A failed
    response never carries data and always carries a message.

    Example:
        >>> result = client.invoice.get_pdf(params)
        >>> if result.success:
        ...     Path("invoice.pdf").write_bytes(result.data)
        ... else:
        ...     print(result.message)
    """
    success: bool
    data: Optional[T] = None
    message: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.success and self.data is not None:
            raise ValueError("a failed ApiResponse cannot carry data")

    @classmethod
    def ok(cls, data: Optional[T] = None, message: Optional[str] = None) -> "ApiResponse[T]":
        """Build a success envelope"""
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, message: str) -> "ApiResponse[T]":
        """Build a failure envelope"""
        return cls(success=False, data=None, message=message)

    def __bool__(self) -> bool:
        return self.success
