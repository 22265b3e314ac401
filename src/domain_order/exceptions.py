"""
Exception classes for the domain order adapter.

All exceptions inherit from DomainOrderError and provide structured
error information with codes, messages, and optional details.
"""

from typing import Optional

from .enums import ErrorCode


class DomainOrderError(Exception):
    """Base exception for all domain order errors."""

    code: ErrorCode = ErrorCode.API_ERROR

    def __init__(
        self,
        message: str,
        details: Optional[dict] = None,
        code: Optional[ErrorCode] = None,
    ) -> None:
        if code is not None:
            self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value!r}, message={self.message!r})"

    def to_dict(self) -> dict:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(DomainOrderError):
    """Raised when user-supplied resource configuration violates a precondition."""

    code = ErrorCode.CONFIGURATION_ERROR


class InvalidIdentifier(DomainOrderError):
    """Raised when a resource ID does not have the ``project/domain`` shape."""

    code = ErrorCode.INVALID_IDENTIFIER


class DuplicateRecordMatch(DomainOrderError):
    """Raised when more than one DNS record matches a type+data lookup."""

    code = ErrorCode.DUPLICATE_RECORD_MATCH


class RecordNotFound(DomainOrderError):
    """Raised when no DNS record matches a type+data lookup."""

    code = ErrorCode.RECORD_NOT_FOUND


class RegistrarAPIError(DomainOrderError):
    """Raised by the registrar client when a call fails (HTTP, network, decoding)."""

    def __init__(
        self,
        message: str,
        details: Optional[dict] = None,
        code: Optional[ErrorCode] = None,
        http_status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, details=details, code=code)
        self.http_status_code = http_status_code
