"""
Spreadsheet Importer

Turns an uploaded workbook into recipes. The first sheet is read with its
first row as the header; the first column holds the recipe name and the
second a comma-separated ingredient list. Other columns are ignored.
"""

from io import BytesIO
from pathlib import Path
from typing import Any, List, Optional, Union
import logging

import pandas as pd

from exceptions import SpreadsheetImportError
from models.recipe import Recipe

logger = logging.getLogger(__name__)

EXCEL_SUFFIXES = {".xlsx", ".xlsm", ".xls"}
CSV_SUFFIXES = {".csv"}


def _cell_to_text(value: Any) -> str:
    """Render a cell the way it reads in the sheet (3.0 -> "3", NaN -> "")"""
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_ingredients(raw: Any) -> List[str]:
    """Split on commas, trim each token and drop the empty ones"""
    return [token.strip() for token in _cell_to_text(raw).split(",") if token.strip()]


def rows_to_recipes(frame: pd.DataFrame) -> List[Recipe]:
    """Build recipes from a frame, skipping rows without a name"""
    if frame.shape[1] == 0:
        logger.info("First sheet has no cells")
        return []

    recipes: List[Recipe] = []
    skipped = 0
    for row in frame.itertuples(index=False, name=None):
        name = _cell_to_text(row[0]).strip()
        if not name:
            skipped += 1
            continue
        raw_ingredients = row[1] if len(row) > 1 else ""
        recipes.append(Recipe(name=name, ingredients=parse_ingredients(raw_ingredients)))

    if skipped:
        logger.info(f"Skipped {skipped} rows without a recipe name")
    return recipes


def _read_frame(data: Union[bytes, Path], suffix: str) -> pd.DataFrame:
    source = BytesIO(data) if isinstance(data, bytes) else data
    if suffix in CSV_SUFFIXES:
        return pd.read_csv(source, dtype=object, skip_blank_lines=True)
    # First sheet only
    return pd.read_excel(source, sheet_name=0, dtype=object)


def read_recipes(data: Union[bytes, str, Path], filename: Optional[str] = None) -> List[Recipe]:
    """
    Parse a spreadsheet into recipes.

    Args:
        data: Raw file contents, or a path to the file
        filename: Original file name, used to pick CSV or Excel parsing

    Returns:
        Recipes in row order

    Raises:
        SpreadsheetImportError: if the file cannot be read as a spreadsheet
    """
    if isinstance(data, str):
        data = Path(data)
    if filename is None:
        filename = data.name if isinstance(data, Path) else "upload.xlsx"

    suffix = Path(filename).suffix.lower() or ".xlsx"
    if suffix not in EXCEL_SUFFIXES | CSV_SUFFIXES:
        raise SpreadsheetImportError(filename, f"unsupported file type '{suffix}'")

    try:
        frame = _read_frame(data, suffix)
    except pd.errors.EmptyDataError:
        logger.info(f"{filename} has no rows")
        return []
    except Exception as e:
        raise SpreadsheetImportError(filename, f"{type(e).__name__}: {e}") from e

    try:
        recipes = rows_to_recipes(frame)
    except SpreadsheetImportError as e:
        raise SpreadsheetImportError(filename, e.reason) from e

    logger.info(f"Parsed {len(recipes)} recipes from {filename}")
    return recipes
