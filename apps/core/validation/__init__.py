"""
Flight Validation

Business rules for flight payloads and search criteria. Everything here
is pure: no database access, no logging, no side effects.
"""

from .results import FieldError, ValidationResult
from .flight_rules import validate_create, validate_update
from .search_rules import SearchCriteria, validate_search, build_predicate

__all__ = [
    'FieldError',
    'ValidationResult',
    'validate_create',
    'validate_update',
    'SearchCriteria',
    'validate_search',
    'build_predicate',
]
