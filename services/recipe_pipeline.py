"""
Recipe Processing Pipeline

Resolves the allergen status of every ingredient of one recipe, going to the
allergen API only for names the session cache has not seen yet.
"""

from typing import Protocol
import logging

from exceptions import LookupFailure
from models.allergen import IngredientLookupResult, IngredientReport, RecipeReport
from models.recipe import Recipe
from storage.ingredient_cache import IngredientAllergenCache

logger = logging.getLogger(__name__)


class IngredientLookup(Protocol):
    async def lookup(self, ingredient: str) -> IngredientLookupResult: ...


def derive_ingredient_report(name: str, result: IngredientLookupResult) -> IngredientReport:
    """Turn a cached lookup result into the report row shown to the reviewer"""
    if not result.success:
        return IngredientReport(name=name, unrecognized=True)
    if result.allergens:
        allergens = list(result.allergens)
        return IngredientReport(
            name=name,
            allergens=allergens,
            warning=f"{name} contains {', '.join(allergens)}",
        )
    return IngredientReport(name=name)


async def resolve_ingredient(
    ingredient: str,
    cache: IngredientAllergenCache,
    client: IngredientLookup,
) -> IngredientLookupResult:
    """Cached result for ``ingredient``, looking it up on a miss"""
    cached = cache.get(ingredient)
    if cached is not None:
        return cached

    try:
        result = await client.lookup(ingredient)
    except LookupFailure as e:
        logger.warning(f"Marking {ingredient!r} unrecognized: {e.reason}")
        result = IngredientLookupResult.failed(ingredient)
    except Exception as e:
        logger.warning(f"Marking {ingredient!r} unrecognized after {type(e).__name__}: {e}")
        result = IngredientLookupResult.failed(ingredient)

    return cache.put(ingredient, result)


async def process_recipe(
    recipe: Recipe,
    cache: IngredientAllergenCache,
    client: IngredientLookup,
) -> RecipeReport:
    """
    Build the allergen report for one recipe.

    Ingredients are resolved one after another in recipe order so each
    cache write is visible to the next ingredient. Repeated ingredients
    produce repeated rows. A failed lookup only marks that ingredient
    unrecognized; it never aborts the recipe.
    """
    report = RecipeReport(name=recipe.name)
    for ingredient in recipe.ingredients:
        result = await resolve_ingredient(ingredient, cache, client)
        report.ingredients.append(derive_ingredient_report(ingredient, result))

    logger.debug(
        f"Processed {recipe.name!r}: {len(report.warnings)} warnings, "
        f"{len(report.unrecognized)} unrecognized"
    )
    return report
