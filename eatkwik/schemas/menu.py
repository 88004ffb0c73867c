"""Menu schemas"""

from datetime import datetime
from typing import Any, List, Optional
from urllib.parse import urlparse
from uuid import UUID

from pydantic import Field, field_validator

from eatkwik.schemas.common import CamelModel


def _check_image_url(value: Optional[str]) -> Optional[str]:
    if not value:
        return value
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("Image URL must be a valid URL or empty")
    return value


def _check_ingredients(value: Optional[List[str]]) -> Optional[List[str]]:
    if value is not None and any(not ingredient.strip() for ingredient in value):
        raise ValueError("Ingredients cannot be empty")
    return value


def _flatten_ingredients(value: Any) -> Any:
    # Form libraries submit ingredients as [{"value": "Flour"}, ...]
    if isinstance(value, list):
        return [item.get("value") if isinstance(item, dict) else item for item in value]
    return value


class MenuItemCreate(CamelModel):
    """Create menu item request"""
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    price: float = Field(gt=0)
    description: str = Field(min_length=1)
    ingredients: List[str] = Field(min_length=1)
    tags: List[str] = []
    availability: bool = True
    image_url: Optional[str] = None
    prep_time: Optional[int] = Field(default=None, ge=0)

    @field_validator("image_url")
    @classmethod
    def image_url_is_url(cls, value):
        return _check_image_url(value)

    @field_validator("ingredients", mode="before")
    @classmethod
    def flatten_ingredients(cls, value):
        return _flatten_ingredients(value)

    @field_validator("ingredients")
    @classmethod
    def ingredients_not_blank(cls, value: List[str]) -> List[str]:
        return _check_ingredients(value)


class MenuItemUpdate(CamelModel):
    """Partial menu item update. Null or empty price and prepTime are ignored."""
    name: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = Field(default=None, min_length=1)
    price: Optional[float] = Field(default=None, gt=0)
    description: Optional[str] = Field(default=None, min_length=1)
    ingredients: Optional[List[str]] = Field(default=None, min_length=1)
    tags: Optional[List[str]] = None
    availability: Optional[bool] = None
    image_url: Optional[str] = None
    prep_time: Optional[int] = Field(default=None, ge=0)

    @field_validator("image_url")
    @classmethod
    def image_url_is_url(cls, value):
        return _check_image_url(value)

    @field_validator("price", "prep_time", mode="before")
    @classmethod
    def empty_to_none(cls, value):
        return None if value == "" else value

    @field_validator("ingredients", mode="before")
    @classmethod
    def flatten_ingredients(cls, value):
        return _flatten_ingredients(value)

    @field_validator("ingredients")
    @classmethod
    def ingredients_not_blank(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        return _check_ingredients(value)


class FeedbackCreate(CamelModel):
    """Customer feedback on a dish"""
    user_id: str = Field(min_length=1)
    user_name: str = Field(min_length=1)
    rating: int = Field(ge=1, le=5)
    comment: str = ""


class FeedbackResponse(CamelModel):
    id: str
    user_id: str
    user_name: str
    rating: int
    comment: str
    created_at: datetime


class MenuItemResponse(CamelModel):
    """Menu item response"""
    id: UUID
    name: str
    category: str
    price: float
    description: str
    ingredients: List[str]
    tags: List[str]
    availability: bool
    image_url: Optional[str] = None
    feedbacks: List[FeedbackResponse] = []
    average_rating: float = 0
    prep_time: Optional[int] = None
    created_at: datetime
    updated_at: datetime
