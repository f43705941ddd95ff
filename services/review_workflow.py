"""
Review/Selection Workflow

State machine for one review session:

    empty ──load_batch──▶ pending_review ──approve──▶ approved(active_index)
      ▲                        ▲                          │
      └──── load_batch ────────┴──── load_batch ──────────┘

Allergen reports are only computed once the batch is approved, and are
recomputed from scratch on every selection.
"""

from typing import List, Optional
import logging

from exceptions import WorkflowStateError
from models.allergen import RecipeReport
from models.recipe import Recipe, RecipeBatch
from models.session import SessionSnapshot, WorkflowStatus
from storage.ingredient_cache import IngredientAllergenCache
from storage.recipe_batch_store import RecipeBatchStore
from .recipe_pipeline import IngredientLookup, process_recipe

logger = logging.getLogger(__name__)


class ReviewWorkflow:
    """Owns the batch, the ingredient cache and the active report of one session"""

    def __init__(
        self,
        client: IngredientLookup,
        cache: Optional[IngredientAllergenCache] = None,
        store: Optional[RecipeBatchStore] = None,
        clear_cache_on_upload: bool = False,
    ):
        self.client = client
        self.cache = cache if cache is not None else IngredientAllergenCache()
        self.store = store if store is not None else RecipeBatchStore()
        self.clear_cache_on_upload = clear_cache_on_upload

        self._approved = False
        self._active_index: Optional[int] = None
        self._active_report: Optional[RecipeReport] = None
        # Bumped by every transition; a report computed under an older
        # generation is never published.
        self._generation = 0

    @property
    def status(self) -> WorkflowStatus:
        if self.store.is_empty:
            return WorkflowStatus.empty
        if not self._approved:
            return WorkflowStatus.pending_review
        return WorkflowStatus.approved

    @property
    def active_index(self) -> Optional[int]:
        return self._active_index

    @property
    def active_report(self) -> Optional[RecipeReport]:
        return self._active_report

    def load_batch(self, recipes: List[Recipe], source_filename: Optional[str] = None) -> Optional[RecipeBatch]:
        """
        Replace the session's batch and send it back to review.

        An empty list leaves the session empty. The ingredient cache is kept
        unless ``clear_cache_on_upload`` is set.
        """
        self._generation += 1
        self._approved = False
        self._active_index = None
        self._active_report = None

        if self.clear_cache_on_upload:
            self.cache.clear()

        if not recipes:
            self.store.clear()
            logger.info("Upload produced no recipes; session is empty")
            return None

        batch = self.store.replace(recipes, source_filename=source_filename)
        logger.info(f"Session moved to {self.status.value} with {len(batch)} recipes")
        return batch

    async def approve(self) -> RecipeReport:
        """Approve the loaded batch and analyse its first recipe"""
        if self.status == WorkflowStatus.empty:
            raise WorkflowStateError("approve", self.status.value)

        if not self._approved:
            self._approved = True
            self._active_index = 0
            logger.info("Batch approved")
        return await self._refresh(self._active_index)

    async def select_recipe(self, index: int) -> RecipeReport:
        """
        Make ``index`` the active recipe and recompute its report.

        Raises WorkflowStateError before approval and RecipeIndexError when
        ``index`` is outside the batch.
        """
        if self.status != WorkflowStatus.approved:
            raise WorkflowStateError("select a recipe", self.status.value)

        self.store.get(index)
        self._active_index = index
        return await self._refresh(index)

    async def _refresh(self, index: int) -> RecipeReport:
        self._generation += 1
        generation = self._generation
        self._active_report = None

        recipe = self.store.get(index)
        report = await process_recipe(recipe, self.cache, self.client)

        if generation == self._generation:
            self._active_report = report
        else:
            logger.info(f"Discarding superseded report for {recipe.name!r}")
        return report

    def snapshot(
        self,
        report: Optional[RecipeReport] = None,
        active_index: Optional[int] = None,
    ) -> SessionSnapshot:
        """
        Describe the session.

        Pass ``report`` and ``active_index`` to describe one particular
        computation; a superseded request then still answers with the recipe
        it asked for while status and batch reflect the latest state.
        """
        batch = self.store.batch
        return SessionSnapshot(
            status=self.status,
            batch_id=batch.id if batch is not None else None,
            recipes=list(self.store.recipes),
            active_index=active_index if active_index is not None else self._active_index,
            report=report if report is not None else self._active_report,
            cache_size=len(self.cache),
        )
