"""Shared schema configuration."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """Base schema that speaks camelCase on the wire.

    Input accepts either camelCase or snake_case field names.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
