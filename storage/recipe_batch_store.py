"""
Holds the recipes of the current upload.
"""
from typing import List, Optional, Tuple
import logging

from models.recipe import Recipe, RecipeBatch
from exceptions import RecipeIndexError

logger = logging.getLogger(__name__)


class RecipeBatchStore:
    """In-memory store for the single batch a session works on"""

    def __init__(self):
        self._batch: Optional[RecipeBatch] = None

    @property
    def batch(self) -> Optional[RecipeBatch]:
        return self._batch

    @property
    def recipes(self) -> Tuple[Recipe, ...]:
        if self._batch is None:
            return ()
        return tuple(self._batch.recipes)

    def __len__(self) -> int:
        return len(self.recipes)

    @property
    def is_empty(self) -> bool:
        return len(self) == 0

    def replace(self, recipes: List[Recipe], source_filename: Optional[str] = None) -> RecipeBatch:
        """Discard whatever was loaded and keep this batch instead"""
        self._batch = RecipeBatch(recipes=list(recipes), source_filename=source_filename)
        logger.info(f"Loaded batch {self._batch.id} with {len(self._batch)} recipes")
        return self._batch

    def clear(self) -> None:
        self._batch = None

    def get(self, index: int) -> Recipe:
        """Recipe at ``index``; negative indexes are not accepted"""
        recipes = self.recipes
        if not 0 <= index < len(recipes):
            raise RecipeIndexError(index, len(recipes))
        return recipes[index]
