"""
Domain Exceptions

Category-tagged exception hierarchy for university business-rule violations.
Each category prefixes a fixed label onto its message at construction time.
"""

from enum import Enum
from typing import Any, ClassVar

import structlog

logger = structlog.get_logger(__name__)


class ErrorCode(str, Enum):
    """Closed set of domain error kinds."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    ENROLLMENT_ERROR = "ENROLLMENT_ERROR"
    GRADE_ERROR = "GRADE_ERROR"
    PAYMENT_ERROR = "PAYMENT_ERROR"


class UniversitySystemError(Exception):
    """
    Base class for all domain exceptions.

    Carries a rendered message, an error code and optional context.
    """

    label: ClassVar[str] = ""
    default_code: ClassVar[ErrorCode] = ErrorCode.VALIDATION_ERROR

    def __init__(
        self,
        message: str,
        error_code: ErrorCode | None = None,
        context: dict[str, Any] | None = None,
    ):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message (without category label)
            error_code: Error kind, defaults to the subclass's code
            context: Additional context data
        """
        self.message = f"{self.label}{message}"
        super().__init__(self.message)
        self.error_code = error_code or self.default_code
        self.context = context or {}

        logger.debug(
            "Domain exception raised",
            error_code=self.error_code.value,
            message=self.message,
            context=self.context,
            exception_type=type(self).__name__,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary."""
        result: dict[str, Any] = {
            "error": self.error_code.value,
            "message": self.message,
            "type": type(self).__name__,
        }
        if self.context:
            result["context"] = self.context
        return result


class ValidationError(UniversitySystemError):
    """Raised when a record field fails validation."""

    default_code = ErrorCode.VALIDATION_ERROR


class EnrollmentError(UniversitySystemError):
    """Raised when an enrollment operation is rejected."""

    label = "Enrollment Error: "
    default_code = ErrorCode.ENROLLMENT_ERROR


class GradeError(UniversitySystemError):
    """Raised when a grade is out of range."""

    label = "Grade Error: "
    default_code = ErrorCode.GRADE_ERROR


class PaymentError(UniversitySystemError):
    """Raised when a payment cannot be calculated."""

    label = "Payment Error: "
    default_code = ErrorCode.PAYMENT_ERROR
