# enrollment_service/core/exceptions.py
"""
Custom exception hierarchy for the Enrollment Service.
All exceptions inherit from EnrollmentServiceError for consistent handling.
"""

from typing import Optional


class EnrollmentServiceError(Exception):
    """Base exception for all enrollment service errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "ENROLLMENT_ERROR",
        status_code: int = 500,
        details: Optional[dict] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class InvalidDataError(EnrollmentServiceError):
    """Input data is malformed (e.g. a CEP that is not 8 numeric chars)."""

    def __init__(self, details: Optional[list[str]] = None):
        self.errors = details or []
        super().__init__(
            message="Invalid data",
            error_code="INVALID_DATA",
            status_code=400,
            details={"errors": self.errors},
        )


class NotFoundError(EnrollmentServiceError):
    """Requested resource does not exist, or the postal lookup found nothing."""

    def __init__(self, message: str = "No result for this search!"):
        super().__init__(
            message=message,
            error_code="NOT_FOUND",
            status_code=404,
        )
