"""Exception classes for the SmartBill SDK"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

import requests


class SmartBillErrorCategory(str, Enum):
    """SmartBill error category codes"""
    HTTP = "HTTP"
    VALIDATION = "VAL"
    NETWORK = "NET"
    CONFIG = "CONFIG"
    UNKNOWN = "UNKNOWN"


class SmartBillError(Exception):
    """
    Base exception for SmartBill errors

    All errors in the SDK extend from this class.
    Facade operations never raise it for API failures; they return a
    failure envelope instead.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status_code = status_code
        self.cause = cause
        self.details = details
        self.timestamp = datetime.now(timezone.utc)
        self.category = self._determine_category(code)

    def _determine_category(self, code: Optional[str]) -> SmartBillErrorCategory:
        """Determine error category from code"""
        if not code:
            return SmartBillErrorCategory.UNKNOWN

        if code.startswith("HTTP"):
            return SmartBillErrorCategory.HTTP
        if code.startswith("VAL"):
            return SmartBillErrorCategory.VALIDATION
        if code.startswith("NET"):
            return SmartBillErrorCategory.NETWORK
        if code.startswith("CONFIG"):
            return SmartBillErrorCategory.CONFIG

        return SmartBillErrorCategory.UNKNOWN

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary"""
        return {
            "name": self.__class__.__name__,
            "message": str(self),
            "code": self.code,
            "status_code": self.status_code,
            "category": self.category.value,
            "timestamp": self.timestamp.isoformat(),
            "details": self.details,
        }

    def has_code(self, code: str) -> bool:
        """Check if error has a specific code"""
        return self.code == code

    def is_category(self, category: SmartBillErrorCategory) -> bool:
        """Check if error belongs to a category"""
        return self.category == category

    def get_description(self) -> str:
        """Get human-readable error description"""
        parts = [str(self)]

        if self.code:
            parts.insert(0, f"[{self.code}]")

        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")

        return " ".join(parts)


class SmartBillHttpError(SmartBillError):
    """
    Raw non-2xx HTTP response from the SmartBill API

    Raised by HttpClient.request for callers that want the status line and
    the response itself. HttpClient.execute converts it into a failure
    envelope.
    """

    def __init__(self, response: requests.Response) -> None:
        self.status = response.status_code
        self.status_text = response.reason or ""
        self.response = response
        super().__init__(
            f"SmartBill API Error: {self.status} {self.status_text}",
            code=f"HTTP{self.status}",
            status_code=self.status,
        )


class ValidationError(SmartBillError):
    """Validation error"""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code="VALIDATION_ERROR", details=details)
        self.field = field


class NetworkError(SmartBillError):
    """
    Network error for HTTP transport layer failures
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        network_code: str = "NET10",
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(
            message, code=network_code, status_code=status_code, cause=cause
        )
        self.network_code = network_code

    @classmethod
    def timeout(
        cls, message: str = "Request timed out", cause: Optional[Exception] = None
    ) -> "NetworkError":
        """Create a timeout error"""
        return cls(message, status_code=408, network_code="NET01", cause=cause)

    @classmethod
    def connection_error(
        cls, message: str = "Connection error", cause: Optional[Exception] = None
    ) -> "NetworkError":
        """Create a connection error"""
        return cls(message, network_code="NET02", cause=cause)


class ConfigError(SmartBillError):
    """Configuration error"""

    def __init__(
        self,
        message: str,
        code: str = "CONFIG01",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code=code, details=details)
