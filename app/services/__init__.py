"""
Business services: cached employee listing and CSV import.
"""

from app.services.employee_import import EmployeeImporter, ImportSummary
from app.services.employee_listing import EmployeeListingService, normalize_pagination

__all__ = [
    "EmployeeImporter",
    "ImportSummary",
    "EmployeeListingService",
    "normalize_pagination",
]
