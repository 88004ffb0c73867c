"""Restaurant settings schemas"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from eatkwik.schemas.common import CamelModel


class CategorySetting(CamelModel):
    """Menu category managed by the restaurant"""
    name: str = Field(min_length=1)
    is_default: bool = False
    is_visible: bool = True
    is_custom: bool = True


class SettingsUpdate(CamelModel):
    """Partial settings update"""
    restaurant_name: Optional[str] = Field(default=None, min_length=1)
    restaurant_address: Optional[str] = Field(default=None, min_length=1)
    restaurant_contact: Optional[str] = Field(default=None, min_length=1)
    accepting_online_orders: Optional[bool] = None
    delivery_radius: Optional[float] = Field(default=None, ge=0)
    min_order_value: Optional[float] = Field(default=None, ge=0)
    managed_categories: Optional[List[CategorySetting]] = None
    use_placeholder_data: Optional[bool] = None


class SettingsResponse(CamelModel):
    """Settings response"""
    id: str
    restaurant_name: str
    restaurant_address: str
    restaurant_contact: str
    accepting_online_orders: bool
    delivery_radius: float
    min_order_value: float
    managed_categories: List[CategorySetting]
    use_placeholder_data: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
