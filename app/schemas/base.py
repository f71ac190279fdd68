from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base schema exposing snake_case attributes as camelCase JSON keys.

    Accepts either spelling on input, so responses can be built straight
    from database rows.
    """

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True  # Allows conversion from SQLAlchemy models


class CamelRequest(CamelModel):
    """Request body / query schema that rejects unknown fields."""

    class Config:
        extra = "forbid"


class CamelFilter(CamelRequest):
    """
    Query-string filter schema.

    Only the camelCase names are recognized; a snake_case spelling is an
    unknown key like any other.
    """

    class Config:
        populate_by_name = False
