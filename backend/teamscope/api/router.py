"""
Custom APIRouter with response_model_by_alias=False default.

This ensures API responses use field names (e.g., 'id') instead of
serialization aliases (e.g., '_id') for Pydantic models.
"""

from typing import Any

from fastapi import APIRouter
from fastapi.routing import APIRoute


class APIRouteByFieldName(APIRoute):
    """Custom APIRoute that forces response_model_by_alias=False."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["response_model_by_alias"] = False
        super().__init__(*args, **kwargs)


class CustomAPIRouter(APIRouter):
    """
    Custom APIRouter that uses field names instead of aliases in responses.

    Usage:
        from teamscope.api.router import CustomAPIRouter

        router = CustomAPIRouter()
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("route_class", APIRouteByFieldName)
        super().__init__(*args, **kwargs)
