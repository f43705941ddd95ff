"""
Custom exception classes for the allergen label service
"""

from typing import Optional


class AllergenAppError(Exception):
    """Base exception for the allergen label service"""
    pass


class SpreadsheetImportError(AllergenAppError):
    """Raised when an uploaded spreadsheet cannot be parsed into recipes"""
    def __init__(self, filename: str, reason: str):
        self.filename = filename
        self.reason = reason
        super().__init__(f"Could not import '{filename}': {reason}")


class LookupFailure(AllergenAppError):
    """Raised when the allergen API gives no usable answer for an ingredient"""
    def __init__(self, ingredient: str, reason: str):
        self.ingredient = ingredient
        self.reason = reason
        super().__init__(f"Allergen lookup failed for '{ingredient}': {reason}")


class TransportFailure(LookupFailure):
    """Raised when the allergen API is unreachable or answers with an error status"""
    def __init__(self, ingredient: str, reason: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(ingredient, reason)


class WorkflowStateError(AllergenAppError):
    """Raised when a review action is not allowed in the current state"""
    def __init__(self, action: str, status: str):
        self.action = action
        self.status = status
        super().__init__(f"Cannot {action} while session is '{status}'")


class RecipeIndexError(AllergenAppError):
    """Raised when a recipe index falls outside the loaded batch"""
    def __init__(self, index: int, batch_size: int):
        self.index = index
        self.batch_size = batch_size
        super().__init__(f"Recipe index {index} out of range for batch of {batch_size}")
