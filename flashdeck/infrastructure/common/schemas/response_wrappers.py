"""Common base and wrapper schemas for API responses."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python, stripped strings."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class SuccessResponse(ApiModel):
    """Generic success response wrapper."""

    success: bool = Field(..., description="Whether the operation was successful")
    message: str = Field(..., description="Response message")


class ErrorResponse(ApiModel):
    """Body of every error response."""

    kind: str = Field(..., description="Error category, e.g. NotFound or Forbidden")
    message: str = Field(..., description="Human-readable description")
