from typing import List, Optional
from pydantic import BaseModel, Field
from .base import BaseEntity

class Recipe(BaseModel):
    """One spreadsheet row: a recipe name and its ordered ingredient names"""
    name: str = Field(..., min_length=1, description="Name of the recipe")
    ingredients: List[str] = Field(default_factory=list, description="Ingredient names in spreadsheet order")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "name": "Cake",
                "ingredients": ["flour", "milk", "eggs"]
            }
        }
    }

class RecipeBatch(BaseEntity):
    """All recipes parsed from a single upload"""
    recipes: List[Recipe] = Field(default_factory=list, description="Recipes in spreadsheet row order")
    source_filename: Optional[str] = Field(None, description="Name of the uploaded file", alias="sourceFilename")

    def __len__(self) -> int:
        return len(self.recipes)

class UploadResponse(BaseModel):
    """Response body for a successful spreadsheet upload"""
    success: bool = True
    recipes: List[Recipe] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "example": {
                "success": True,
                "recipes": [
                    {"name": "Cake", "ingredients": ["flour", "milk"]},
                    {"name": "Omelette", "ingredients": ["eggs", "butter"]}
                ]
            }
        }
    }
