"""Shared schema bases and the response envelope"""

from typing import Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base model exchanged as camelCase JSON, populated by field name or alias"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class ApiResponse(BaseModel, Generic[T]):
    """Response envelope"""
    success: bool = True
    data: Optional[T] = None
    error: Optional[str] = None
    issues: Optional[Dict[str, List[str]]] = None


class MessageData(BaseModel):
    message: str
