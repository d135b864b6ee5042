"""Shared base model for API schemas.

JSON bodies use camelCase keys to match the frontend client; Python code
uses snake_case attribute names.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serializing to camelCase and accepting either case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
