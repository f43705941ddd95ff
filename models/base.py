from datetime import datetime
from pydantic import BaseModel, Field
from uuid import UUID, uuid4

class BaseEntity(BaseModel):
    """Base entity class for objects created once per upload"""
    id: UUID = Field(default_factory=uuid4)
    created_at: datetime = Field(default_factory=datetime.now, description="When this entity was created", alias="createdAt")

    model_config = {
        "validate_assignment": True,
        "populate_by_name": True,
        "extra": "forbid",
        "json_schema_extra": {
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "createdAt": "2025-08-10T12:00:00"
            }
        }
    }
