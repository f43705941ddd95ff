from fastapi import APIRouter, Depends, File, UploadFile, status
from fastapi.responses import JSONResponse
from typing import Optional
import asyncio
import logging

from exceptions import SpreadsheetImportError
from models.recipe import UploadResponse
from services.review_workflow import ReviewWorkflow
from services.spreadsheet_importer import read_recipes
from .dependencies import get_workflow

logger = logging.getLogger(__name__)

router = APIRouter()

PARSE_FAILURE_MESSAGE = "Failed to parse Excel file."


@router.post("/upload", response_model=UploadResponse)
async def upload_recipes(
    file: Optional[UploadFile] = File(None),
    workflow: ReviewWorkflow = Depends(get_workflow),
):
    """
    Parse an uploaded spreadsheet and load it for review.

    Input: multipart form with a ``file`` field (.xlsx, .xls or .csv)
    Output: {"success": true, "recipes": [{"name": "...", "ingredients": [...]}]}
    """
    if file is None or not file.filename:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "No file uploaded"}
        )

    try:
        contents = await file.read()
        # pandas parsing is blocking; keep it off the event loop
        loop = asyncio.get_event_loop()
        recipes = await loop.run_in_executor(
            None,
            read_recipes,
            contents,
            file.filename
        )
    except SpreadsheetImportError as e:
        logger.warning(f"Upload rejected: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "message": PARSE_FAILURE_MESSAGE}
        )
    finally:
        await file.close()

    workflow.load_batch(recipes, source_filename=file.filename)
    return UploadResponse(success=True, recipes=recipes)
