"""HTTP presentation layer (REST, GraphQL, health and docs routes)."""

from userlookup.presentation.admission import AdmissionPolicy, admission_middleware
from userlookup.presentation.app import create_app
from userlookup.presentation.errors import ApiError, error_middleware

__all__ = [
    "AdmissionPolicy",
    "ApiError",
    "admission_middleware",
    "create_app",
    "error_middleware",
]
