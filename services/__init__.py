"""
Services: spreadsheet import, allergen lookups, recipe processing and review workflow
"""

from .allergen_client import AllergenClient, create_http_client
from .spreadsheet_importer import read_recipes, parse_ingredients, rows_to_recipes
from .recipe_pipeline import process_recipe, derive_ingredient_report, resolve_ingredient
from .review_workflow import ReviewWorkflow

__all__ = [
    'AllergenClient',
    'create_http_client',
    'read_recipes',
    'parse_ingredients',
    'rows_to_recipes',
    'process_recipe',
    'derive_ingredient_report',
    'resolve_ingredient',
    'ReviewWorkflow'
]
