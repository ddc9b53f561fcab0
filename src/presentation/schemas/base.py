"""Shared schema configuration."""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema serialized with camelCase keys, populated by snake_case names."""
    
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class MessageResponse(CamelModel):
    """Plain acknowledgement of a mutation."""
    
    message: str = Field(..., description="Human-readable outcome")


class HealthResponse(BaseModel):
    """Health check response schema."""
    
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "version": "1.0.0"
                }
            ]
        }
    }
