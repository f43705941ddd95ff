"""
Client for the third-party allergen lookup API.
"""
from typing import Any, Dict, Optional
import logging

import httpx

from config.settings import settings
from exceptions import LookupFailure, TransportFailure
from models.allergen import IngredientLookupResult

logger = logging.getLogger(__name__)


class AllergenClient:
    """Posts one ingredient at a time to the allergen API"""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_url: Optional[str] = None,
    ):
        self.http_client = http_client
        self.api_url = api_url or settings.allergen_api_url

    async def fetch_raw(self, ingredient: str) -> Dict[str, Any]:
        """
        Return the API's JSON body verbatim.

        Raises TransportFailure when the API cannot be reached, answers with
        a non-2xx status, or the body is not JSON.
        """
        try:
            response = await self.http_client.post(self.api_url, json={"ingredient": ingredient})
        except httpx.HTTPError as e:
            raise TransportFailure(ingredient, f"{type(e).__name__}: {e}") from e

        if response.is_error:
            raise TransportFailure(
                ingredient,
                f"allergen API answered {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise TransportFailure(ingredient, "allergen API returned invalid JSON") from e

    async def lookup(self, ingredient: str) -> IngredientLookupResult:
        """
        Look up one ingredient.

        Raises LookupFailure (or its TransportFailure subclass) when the API
        gives no usable answer.
        """
        payload = await self.fetch_raw(ingredient)
        result = IngredientLookupResult.from_response(ingredient, payload)
        if not result.success:
            raise LookupFailure(ingredient, "allergen API did not recognise the ingredient")
        return result


def create_http_client() -> httpx.AsyncClient:
    """HTTP client shared by every lookup in the process"""
    return httpx.AsyncClient(timeout=settings.allergen_api_timeout)
