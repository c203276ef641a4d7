"""
Services operating over the domain records.
"""

from university.services.enrollment_service import EnrollmentManager
from university.services.error_log import ErrorLog, log_error

__all__ = [
    "EnrollmentManager",
    "ErrorLog",
    "log_error",
]
