"""
Exception hierarchy for the HR Records Service.

- RepositoryError: the storage backend failed (mapped to HTTP 500)
- EmployeeImportError: a CSV import run was aborted
"""

from typing import Optional


class HRRecordsError(Exception):
    """Base exception for all service errors."""


class RepositoryError(HRRecordsError):
    """Raised when a storage operation fails for a reason other than not-found."""


class EmployeeImportError(HRRecordsError):
    """
    Raised when an import run must stop.

    Attributes:
        line: CSV line number of the failing record, if known
        field: Name of the field or step that failed, if known
    """

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        field: Optional[str] = None,
    ):
        self.line = line
        self.field = field
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
