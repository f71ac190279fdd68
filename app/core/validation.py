"""
Query-string validation.

FastAPI answers invalid request bodies with 422 on its own; search filters
arrive as raw query parameters and are checked here so that an unknown key
or bad value becomes a 400.
"""

from typing import Any, Dict, Mapping, Type

from pydantic import BaseModel, ValidationError

from app.core.exceptions import BadRequestError


def _describe(error: Dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"{location}: {error['msg']}" if location else error["msg"]


def parse_filters(schema: Type[BaseModel], query_params: Mapping[str, str]) -> Dict[str, Any]:
    """
    Validate query parameters against a filter schema.

    Returns:
        Only the filters that were supplied, keyed by their camelCase names

    Raises:
        BadRequestError: Listing every unknown key or invalid value
    """
    try:
        filters = schema.model_validate(dict(query_params))
    except ValidationError as e:
        raise BadRequestError([_describe(error) for error in e.errors()])

    return filters.model_dump(by_alias=True, exclude_none=True)
