from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
import logging

from exceptions import TransportFailure
from models.allergen import AllergenLookupRequest
from services.allergen_client import AllergenClient
from .dependencies import get_allergen_client

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/allergens")
async def relay_allergen_lookup(
    request: AllergenLookupRequest,
    client: AllergenClient = Depends(get_allergen_client),
):
    """
    Relay a lookup to the third-party allergen API.

    Input: {"ingredient": "flour"}
    Output: the upstream JSON body as-is, or
            {"success": false, "message": "External API Error"} with status 500
    """
    try:
        return await client.fetch_raw(request.ingredient)
    except TransportFailure as e:
        logger.warning(f"Relay failed: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "message": "External API Error"}
        )
