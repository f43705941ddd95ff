"""
Session storage: the uploaded recipe batch and the ingredient lookup cache
"""

from .ingredient_cache import IngredientAllergenCache
from .recipe_batch_store import RecipeBatchStore

__all__ = [
    'IngredientAllergenCache',
    'RecipeBatchStore'
]
