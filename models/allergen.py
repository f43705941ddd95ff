from typing import Any, List, Optional
from pydantic import BaseModel, Field

class AllergenLookupRequest(BaseModel):
    """Body of a single allergen lookup"""
    ingredient: str = Field(..., description="Ingredient name to look up")

    model_config = {
        "json_schema_extra": {
            "example": {"ingredient": "flour"}
        }
    }

class IngredientLookupResult(BaseModel):
    """Allergen data for one ingredient name, as cached for the session"""
    ingredient: str = Field(..., description="Ingredient name exactly as it appeared in the recipe")
    success: bool = Field(False, description="Whether the allergen API recognised the ingredient")
    allergens: List[str] = Field(default_factory=list, description="Allergens in the order the API listed them")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "ingredient": "flour",
                "success": True,
                "allergens": ["gluten"]
            }
        }
    }

    @classmethod
    def failed(cls, ingredient: str) -> "IngredientLookupResult":
        """Result recorded when the lookup could not be completed"""
        return cls(ingredient=ingredient, success=False, allergens=[])

    @classmethod
    def from_response(cls, ingredient: str, payload: Any) -> "IngredientLookupResult":
        """
        Build a result from the allergen API's JSON body.

        Anything that is not a dict with ``success: true`` is a failure.
        A successful body without ``allergens`` means the ingredient is safe;
        an ``allergens`` value that is not a list makes the body malformed.
        Allergens are de-duplicated keeping their first position.
        """
        if not isinstance(payload, dict) or payload.get("success") is not True:
            return cls.failed(ingredient)

        allergens = payload.get("allergens")
        if allergens is None:
            allergens = []
        if not isinstance(allergens, list):
            return cls.failed(ingredient)

        names = [str(a).strip() for a in allergens if a is not None]
        ordered = list(dict.fromkeys(name for name in names if name))
        return cls(ingredient=ingredient, success=True, allergens=ordered)

class IngredientReport(BaseModel):
    """What the reviewer sees for one ingredient of the active recipe"""
    name: str
    allergens: List[str] = Field(default_factory=list)
    unrecognized: bool = False
    warning: Optional[str] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "flour",
                "allergens": ["gluten"],
                "unrecognized": False,
                "warning": "flour contains gluten"
            }
        }
    }

    @property
    def is_safe(self) -> bool:
        return not self.unrecognized and not self.allergens

class RecipeReport(BaseModel):
    """Per-ingredient allergen report for one recipe"""
    name: str
    ingredients: List[IngredientReport] = Field(default_factory=list)

    @property
    def warnings(self) -> List[str]:
        return [item.warning for item in self.ingredients if item.warning]

    @property
    def unrecognized(self) -> List[str]:
        return [item.name for item in self.ingredients if item.unrecognized]
