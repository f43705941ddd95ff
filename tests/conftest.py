"""
Shared fixtures: an in-memory allergen lookup and a mocked allergen API.
"""

import asyncio
import json
from typing import Dict, List, Union

import httpx
import pytest

from exceptions import LookupFailure
from models.allergen import IngredientLookupResult
from models.recipe import Recipe


class FakeLookup:
    """Stands in for AllergenClient; records every lookup it serves"""

    def __init__(self, allergens: Dict[str, Union[List[str], Exception]] = None):
        self.allergens = allergens or {}
        self.calls: List[str] = []
        self.blocked: Dict[str, asyncio.Event] = {}

    def block(self, ingredient: str) -> asyncio.Event:
        """Make lookups of ``ingredient`` wait until the returned event is set"""
        event = asyncio.Event()
        self.blocked[ingredient] = event
        return event

    async def lookup(self, ingredient: str) -> IngredientLookupResult:
        self.calls.append(ingredient)
        if ingredient in self.blocked:
            await self.blocked[ingredient].wait()

        answer = self.allergens.get(ingredient)
        if isinstance(answer, Exception):
            raise answer
        if answer is None:
            raise LookupFailure(ingredient, "unknown ingredient")
        return IngredientLookupResult(ingredient=ingredient, success=True, allergens=answer)


ALLERGEN_TABLE = {
    "flour": ["gluten"],
    "milk": ["dairy"],
    "butter": ["dairy"],
    "eggs": ["egg"],
    "peanut butter": ["peanuts", "tree nuts"],
    "sugar": [],
    "salt": [],
    "water": [],
}


@pytest.fixture
def fake_lookup():
    return FakeLookup(dict(ALLERGEN_TABLE))


@pytest.fixture
def cake():
    return Recipe(name="Cake", ingredients=["flour", "milk"])


@pytest.fixture
def sample_recipes():
    return [
        Recipe(name="Cake", ingredients=["flour", "milk", "sugar"]),
        Recipe(name="Omelette", ingredients=["eggs", "butter", "salt"]),
        Recipe(name="Mystery Stew", ingredients=["dragonfruit", "water"]),
    ]


def allergen_api_handler(request: httpx.Request) -> httpx.Response:
    """Mock of the third-party allergen API backed by ALLERGEN_TABLE"""
    ingredient = json.loads(request.content)["ingredient"]
    if ingredient == "explode":
        return httpx.Response(502, json={"error": "bad gateway"})
    if ingredient not in ALLERGEN_TABLE:
        return httpx.Response(200, json={"success": False, "ingredient": ingredient, "message": "Not found"})
    return httpx.Response(200, json={
        "success": True,
        "ingredient": ingredient,
        "allergens": ALLERGEN_TABLE[ingredient],
        "source": "mock"
    })


@pytest.fixture
def mock_http_client_factory():
    def factory() -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(allergen_api_handler))
    return factory
