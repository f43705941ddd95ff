"""
Exception classes for the allergen label service
"""

from .allergen_exceptions import (
    AllergenAppError,
    SpreadsheetImportError,
    LookupFailure,
    TransportFailure,
    WorkflowStateError,
    RecipeIndexError,
)

__all__ = [
    "AllergenAppError",
    "SpreadsheetImportError",
    "LookupFailure",
    "TransportFailure",
    "WorkflowStateError",
    "RecipeIndexError",
]
