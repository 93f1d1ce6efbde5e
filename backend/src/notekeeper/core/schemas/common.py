"""
Shared schema bits - camelCase base model and the common response envelopes
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for API models: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RequestModel(CamelModel):
    """Base for request bodies; unknown fields are rejected."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class MessageResponse(BaseModel):
    """Plain ``error``/``message`` response."""

    error: bool = Field(default=False, description="Whether the request failed")
    message: str = Field(description="Human-readable message")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"error": False, "message": "Note deleted successfully"}
        }
    )


class ErrorResponse(MessageResponse):
    """Body of every error response."""

    error: bool = Field(default=True, description="Always true for errors")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"error": True, "message": "Note not found"}
        }
    )
