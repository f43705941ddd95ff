"""
Data models for recipes, allergen lookups and the review session
"""

from .base import BaseEntity
from .recipe import Recipe, RecipeBatch, UploadResponse
from .allergen import AllergenLookupRequest, IngredientLookupResult, IngredientReport, RecipeReport
from .session import WorkflowStatus, SessionSnapshot

__all__ = [
    'BaseEntity',
    'Recipe',
    'RecipeBatch',
    'UploadResponse',
    'AllergenLookupRequest',
    'IngredientLookupResult',
    'IngredientReport',
    'RecipeReport',
    'WorkflowStatus',
    'SessionSnapshot'
]
