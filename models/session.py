from enum import Enum
from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel, Field
from .recipe import Recipe
from .allergen import RecipeReport

class WorkflowStatus(str, Enum):
    """Review workflow states"""
    empty = "empty"
    pending_review = "pending_review"
    approved = "approved"

class SessionSnapshot(BaseModel):
    """Current state of the review session as returned to the client"""
    status: WorkflowStatus = Field(..., description="Where the session is in the review workflow")
    batch_id: Optional[UUID] = Field(None, description="ID of the loaded batch", alias="batchId")
    recipes: List[Recipe] = Field(default_factory=list, description="Recipes awaiting or under review")
    active_index: Optional[int] = Field(None, description="Index of the recipe being analysed", alias="activeIndex")
    report: Optional[RecipeReport] = Field(None, description="Allergen report for the active recipe")
    cache_size: int = Field(0, description="Number of ingredients resolved so far", alias="cacheSize")

    model_config = {
        "use_enum_values": True,
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "status": "approved",
                "batchId": "550e8400-e29b-41d4-a716-446655440000",
                "recipes": [{"name": "Cake", "ingredients": ["flour", "milk"]}],
                "activeIndex": 0,
                "report": {
                    "name": "Cake",
                    "ingredients": [
                        {"name": "flour", "allergens": ["gluten"], "unrecognized": False, "warning": "flour contains gluten"},
                        {"name": "milk", "allergens": ["dairy"], "unrecognized": False, "warning": "milk contains dairy"}
                    ]
                },
                "cacheSize": 2
            }
        }
    }
