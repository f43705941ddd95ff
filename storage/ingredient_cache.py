"""
Session-scoped memo of allergen lookups keyed by exact ingredient name.
"""
from typing import Dict, Optional
import logging

from models.allergen import IngredientLookupResult

logger = logging.getLogger(__name__)


class IngredientAllergenCache:
    """
    Write-once mapping from ingredient name to lookup result.

    Keys are compared exactly: "Milk", "milk" and "milk " are three entries.
    Nothing is evicted or expires; the cache lives as long as its owner.
    """

    def __init__(self):
        self._entries: Dict[str, IngredientLookupResult] = {}
        self.stats = {
            "hits": 0,
            "misses": 0,
        }

    def __contains__(self, ingredient: str) -> bool:
        return ingredient in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, ingredient: str) -> Optional[IngredientLookupResult]:
        """Return the cached result, counting the access as a hit or miss"""
        result = self._entries.get(ingredient)
        if result is None:
            self.stats["misses"] += 1
        else:
            self.stats["hits"] += 1
        return result

    def put(self, ingredient: str, result: IngredientLookupResult) -> IngredientLookupResult:
        """
        Store a result unless the key is already resolved.

        Returns the value held for the key afterwards, which is the earlier
        one when the key was already present.
        """
        existing = self._entries.get(ingredient)
        if existing is not None:
            if existing != result:
                logger.debug(f"Ignoring second result for cached ingredient {ingredient!r}")
            return existing
        self._entries[ingredient] = result
        return result

    def clear(self) -> int:
        """Drop every entry and return how many there were"""
        count = len(self._entries)
        self._entries.clear()
        logger.info(f"Cleared {count} cached ingredient lookups")
        return count
